from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from .ecmascript import (
    MAX_CODE_POINT,
    QUOTES,
    SIMPLE_ESCAPES,
    SINGLE_CHAR_SYMBOLS,
    is_decimal_digit,
    is_hex_digit,
    is_identifier_part,
    is_identifier_start,
    is_line_terminator,
    is_whitespace,
    to_keyword,
)
from .errors import (
    EndOfInput,
    InvalidEscape,
    LexError,
    MalformedNumber,
    UnrecognizedCharacter,
    UnterminatedComment,
    UnterminatedString,
)
from .spans import Location, Span
from .tokens import Symbol, Token, TokenKind, TokenValue


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Cursor:
    file: str
    src: str
    i: int = 0
    line: int = 1
    col: int = 1

    def at_end(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def char(self) -> str:
        if self.at_end():
            raise self.end_of_input()
        return self.src[self.i]

    def advance(self) -> str:
        ch = self.char()
        self.i += 1
        if ch == "\r" and self.peek() == "\n":
            # \r\n is a single line break, counted on the \n.
            self.col += 1
        elif is_line_terminator(ch):
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def advance_if(self, expected: str) -> bool:
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def location(self) -> Location:
        return Location(offset=self.i, line=self.line, column=self.col)

    def end_of_input(self) -> EndOfInput:
        loc = self.location()
        return EndOfInput(span=Span(file=self.file, start=loc, end=loc), message="end of input")


class Lexer:
    """Pull-based scanner over a single source text.

    Every `next_token()` call consumes exactly one token. Whitespace and
    comments never produce tokens. Once the source is exhausted every call
    raises `EndOfInput`.
    """

    def __init__(self, src: str, *, file: str = "<memory>") -> None:
        self.file = file
        self._cur = _Cursor(file=file, src=src)
        self._pushed: Token | None = None

    def __iter__(self) -> Iterator[Token]:
        while True:
            try:
                yield self.next_token()
            except EndOfInput:
                return

    def location(self) -> Location:
        return self._cur.location()

    def next_token(self) -> Token:
        if self._pushed is not None:
            tok, self._pushed = self._pushed, None
            return tok

        self._skip_trivia()
        ch = self._cur.char()

        if is_identifier_start(ch):
            return self._read_identifier()
        if is_decimal_digit(ch):
            return self._read_number("", self._cur.location())
        if ch in QUOTES:
            return self._read_string()
        return self._read_symbol()

    def push_back(self, tok: Token) -> None:
        """Make `tok` the result of the next `next_token()` call."""
        if self._pushed is not None:
            raise RuntimeError("pushback slot already holds a token")
        self._pushed = tok

    def peek_token(self) -> Token:
        tok = self.next_token()
        self.push_back(tok)
        return tok

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _token(self, kind: TokenKind, value: TokenValue, start: Location) -> Token:
        end = self._cur.location()
        lexeme = self._cur.src[start.offset : end.offset]
        return Token(kind=kind, value=value, lexeme=lexeme, span=Span(file=self.file, start=start, end=end))

    def _error(
        self,
        cls: type[LexError],
        start: Location,
        msg: str,
        hint: str | None = None,
    ) -> LexError:
        end = self._cur.location()
        if end.offset < start.offset:
            end = start
        err = cls(span=Span(file=self.file, start=start, end=end), message=msg, hint=hint)
        logger.debug("%s: %s", type(err).__name__, err)
        return err

    # ------------------------------------------------------------------
    # trivia
    # ------------------------------------------------------------------

    def _skip_trivia(self) -> None:
        cur = self._cur
        while not cur.at_end():
            ch = cur.peek()

            if is_whitespace(ch):
                cur.advance()
                continue

            # line comment //
            if ch == "/" and cur.peek(1) == "/":
                while not cur.at_end() and not is_line_terminator(cur.peek()):
                    cur.advance()
                continue

            # block comment /* ... */
            if ch == "/" and cur.peek(1) == "*":
                start = cur.location()
                cur.advance()
                cur.advance()
                while True:
                    if cur.at_end():
                        raise self._error(
                            UnterminatedComment, start, "unterminated block comment", hint="add closing */"
                        )
                    if cur.advance() == "*" and cur.advance_if("/"):
                        break
                continue

            return

    # ------------------------------------------------------------------
    # identifiers / keywords
    # ------------------------------------------------------------------

    def _read_identifier(self) -> Token:
        cur = self._cur
        start = cur.location()
        while is_identifier_part(cur.peek()):
            cur.advance()

        text = cur.src[start.offset : cur.i]
        kw = to_keyword(text)
        if kw is not None:
            return self._token(TokenKind.KEYWORD, kw, start)
        return self._token(TokenKind.IDENTIFIER, text, start)

    # ------------------------------------------------------------------
    # numbers
    # ------------------------------------------------------------------

    def _read_number(self, prefix: str, start: Location) -> Token:
        cur = self._cur
        buf = [prefix]
        seen_dot = "." in prefix

        while True:
            ch = cur.peek()
            if ch == ".":
                if seen_dot:
                    raise self._error(
                        MalformedNumber,
                        start,
                        "number literal has more than one decimal point",
                        hint="use a single '.' in a number",
                    )
                seen_dot = True
            elif not is_decimal_digit(ch):
                break
            buf.append(cur.advance())

        text = "".join(buf)
        try:
            value = float(text)
        except ValueError:
            raise self._error(MalformedNumber, start, f"invalid number literal {text!r}") from None
        if not math.isfinite(value):
            raise self._error(MalformedNumber, start, f"number literal {text!r} is out of range")
        return self._token(TokenKind.NUMBER, value, start)

    # ------------------------------------------------------------------
    # strings
    # ------------------------------------------------------------------

    def _read_string(self) -> Token:
        cur = self._cur
        start = cur.location()
        quote = cur.advance()
        buf: list[str] = []

        while True:
            if cur.at_end():
                raise self._error(UnterminatedString, start, "unterminated string literal", hint="close the quote")
            ch = cur.peek()
            if ch == quote:
                cur.advance()
                return self._token(TokenKind.STRING, "".join(buf), start)
            if ch in "\n\r":
                raise self._error(UnterminatedString, start, "unterminated string literal", hint="close the quote")
            if ch == "\\":
                esc_start = cur.location()
                cur.advance()
                buf.append(self._read_escape(start, esc_start))
                continue
            buf.append(cur.advance())

    def _read_escape(self, start: Location, esc_start: Location) -> str:
        cur = self._cur
        if cur.at_end():
            raise self._error(UnterminatedString, start, "unterminated string escape")

        ch = cur.advance()

        # Line continuation contributes nothing.
        if ch == "\r":
            cur.advance_if("\n")
            return ""
        if is_line_terminator(ch):
            return ""

        if ch == "0" and is_decimal_digit(cur.peek()):
            raise self._error(InvalidEscape, esc_start, "octal escape sequences are not supported")
        if ch in SIMPLE_ESCAPES:
            return SIMPLE_ESCAPES[ch]
        if ch == "x":
            return chr(self._read_hex(2, esc_start))
        if ch == "u":
            if not cur.advance_if("{"):
                return chr(self._read_hex(4, esc_start))
            digits: list[str] = []
            while is_hex_digit(cur.peek()):
                digits.append(cur.advance())
            if not digits or not cur.advance_if("}"):
                raise self._error(InvalidEscape, esc_start, "malformed \\u{...} escape", hint="use \\u{1F600}")
            cp = int("".join(digits), 16)
            if cp > MAX_CODE_POINT:
                raise self._error(InvalidEscape, esc_start, f"code point 0x{cp:X} is out of range")
            return chr(cp)

        # Non-escape characters stand for themselves (\' \" \\ \a ...).
        return ch

    def _read_hex(self, n: int, esc_start: Location) -> int:
        cur = self._cur
        digits: list[str] = []
        for _ in range(n):
            if not is_hex_digit(cur.peek()):
                raise self._error(InvalidEscape, esc_start, f"expected {n} hex digits in escape sequence")
            digits.append(cur.advance())
        return int("".join(digits), 16)

    # ------------------------------------------------------------------
    # operators / punctuation
    # ------------------------------------------------------------------

    def _read_symbol(self) -> Token:
        cur = self._cur
        start = cur.location()
        ch = cur.advance()

        sym = SINGLE_CHAR_SYMBOLS.get(ch)
        if sym is not None:
            return self._token(TokenKind.SYMBOL, sym, start)

        if ch == ".":
            if is_decimal_digit(cur.peek()):
                return self._read_number(".", start)
            sym = Symbol.DOT
            # `..` alone is not an operator; leave the second dot for the next call.
            if cur.peek() == "." and cur.peek(1) == ".":
                cur.advance()
                cur.advance()
                sym = Symbol.SPREAD
        elif ch == "=":
            sym = Symbol.ASSIGN
            if cur.advance_if("="):
                sym = Symbol.SEQ if cur.advance_if("=") else Symbol.EQ
            elif cur.advance_if(">"):
                sym = Symbol.ARROW
        elif ch == "!":
            sym = Symbol.NOT
            if cur.advance_if("="):
                sym = Symbol.SNE if cur.advance_if("=") else Symbol.NE
        elif ch == "+":
            sym = Symbol.ADD
            if cur.advance_if("+"):
                sym = Symbol.INC
            elif cur.advance_if("="):
                sym = Symbol.ASSIGN_ADD
        elif ch == "-":
            sym = Symbol.SUB
            if cur.advance_if("-"):
                sym = Symbol.DEC
            elif cur.advance_if("="):
                sym = Symbol.ASSIGN_SUB
        elif ch == "*":
            sym = Symbol.MUL
            if cur.advance_if("*"):
                sym = Symbol.ASSIGN_POW if cur.advance_if("=") else Symbol.POW
            elif cur.advance_if("="):
                sym = Symbol.ASSIGN_MUL
        elif ch == "/":
            # Comments were consumed as trivia before dispatch.
            sym = Symbol.ASSIGN_DIV if cur.advance_if("=") else Symbol.DIV
        elif ch == "%":
            sym = Symbol.ASSIGN_MOD if cur.advance_if("=") else Symbol.MOD
        elif ch == "^":
            sym = Symbol.ASSIGN_XOR if cur.advance_if("=") else Symbol.XOR
        elif ch == "<":
            sym = Symbol.LT
            if cur.advance_if("<"):
                sym = Symbol.ASSIGN_SHL if cur.advance_if("=") else Symbol.SHL
            elif cur.advance_if("="):
                sym = Symbol.LE
        elif ch == ">":
            sym = Symbol.GT
            if cur.advance_if(">"):
                sym = Symbol.SHR
                if cur.advance_if(">"):
                    sym = Symbol.ASSIGN_ZF_SHR if cur.advance_if("=") else Symbol.ZF_SHR
                elif cur.advance_if("="):
                    sym = Symbol.ASSIGN_SHR
            elif cur.advance_if("="):
                sym = Symbol.GE
        elif ch == "&":
            sym = Symbol.BITWISE_AND
            if cur.advance_if("&"):
                sym = Symbol.AND
            elif cur.advance_if("="):
                sym = Symbol.ASSIGN_AND
        elif ch == "|":
            sym = Symbol.BITWISE_OR
            if cur.advance_if("|"):
                sym = Symbol.OR
            elif cur.advance_if("="):
                sym = Symbol.ASSIGN_OR
        else:
            raise self._error(
                UnrecognizedCharacter,
                start,
                f"unexpected character {ch!r}",
                hint="remove the character or replace it with valid syntax",
            )

        return self._token(TokenKind.SYMBOL, sym, start)


def tokenize(src: str, *, file: str = "<memory>") -> list[Token]:
    """Tokenize a whole source text. Lexical errors propagate."""
    toks = list(Lexer(src, file=file))
    logger.debug("tokenized %s: %d tokens", file, len(toks))
    return toks
