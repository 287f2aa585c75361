from __future__ import annotations

"""
ECMAScript lexical tables in one place:

- **Keywords**: reserved words recognised by the identifier scanner
- **Punctuators**: characters that always form a one-character symbol
- **Escapes**: single-character string escapes
- **Character classes**: the predicates the dispatcher and scanners share

This module is meant to be *human scannable*.
"""

from .tokens import Keyword, Symbol


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}


def to_keyword(text: str) -> Keyword | None:
    """Exact, case-sensitive keyword lookup."""
    return KEYWORDS.get(text)


# ---------------------------------------------------------------------------
# Punctuators
# ---------------------------------------------------------------------------

# Characters that never start a longer operator.
SINGLE_CHAR_SYMBOLS: dict[str, Symbol] = {
    "(": Symbol.OPENING_PAREN,
    ")": Symbol.CLOSING_PAREN,
    "[": Symbol.OPENING_BOX_BRACKET,
    "]": Symbol.CLOSING_BOX_BRACKET,
    "{": Symbol.OPENING_BRACE,
    "}": Symbol.CLOSING_BRACE,
    ";": Symbol.SEMI_COLON,
    ",": Symbol.COMMA,
    "?": Symbol.QUESTION,
    ":": Symbol.COLON,
    "~": Symbol.BITWISE_NOT,
}


# ---------------------------------------------------------------------------
# String escapes
# ---------------------------------------------------------------------------

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

QUOTES = "\"'"

MAX_CODE_POINT = 0x10FFFF


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

LINE_TERMINATORS = "\n\r\u2028\u2029"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_identifier_start(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_" or ch == "$"


def is_identifier_part(ch: str) -> bool:
    return ch.isalnum() or ch == "_" or ch == "$"


def is_decimal_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits; literals are ASCII only.
    return "0" <= ch <= "9"


def is_hex_digit(ch: str) -> bool:
    return ch in _HEX_DIGITS


# str.isspace() misses the byte order mark and accepts the ASCII separators U+001C..U+001F.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(ch: str) -> bool:
    if ch == "\ufeff":
        return True
    return ch.isspace() and ch not in _NOT_WHITESPACE


def is_line_terminator(ch: str) -> bool:
    return ch != "" and ch in LINE_TERMINATORS
