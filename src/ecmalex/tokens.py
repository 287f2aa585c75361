from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .spans import Span


class TokenKind(str, Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    SYMBOL = "SYMBOL"
    STRING = "STRING"


class Keyword(str, Enum):
    AWAIT = "await"
    BREAK = "break"
    CASE = "case"
    CATCH = "catch"
    CLASS = "class"
    CONST = "const"
    CONTINUE = "continue"
    DEBUGGER = "debugger"
    DEFAULT = "default"
    DELETE = "delete"
    DO = "do"
    ELSE = "else"
    EXPORT = "export"
    EXTENDS = "extends"
    FINALLY = "finally"
    FOR = "for"
    FUNCTION = "function"
    IF = "if"
    IMPORT = "import"
    IN = "in"
    INSTANCEOF = "instanceof"
    NEW = "new"
    RETURN = "return"
    SUPER = "super"
    SWITCH = "switch"
    THIS = "this"
    THROW = "throw"
    TRY = "try"
    TYPEOF = "typeof"
    VAR = "var"
    VOID = "void"
    WHILE = "while"
    WITH = "with"
    YIELD = "yield"


class Symbol(str, Enum):
    # Brackets
    OPENING_PAREN = "("
    CLOSING_PAREN = ")"
    OPENING_BOX_BRACKET = "["
    CLOSING_BOX_BRACKET = "]"
    OPENING_BRACE = "{"
    CLOSING_BRACE = "}"

    # Punctuation
    DOT = "."
    SPREAD = "..."
    SEMI_COLON = ";"
    COMMA = ","
    QUESTION = "?"
    COLON = ":"
    ARROW = "=>"

    # Comparison
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    EQ = "=="
    SEQ = "==="
    NE = "!="
    SNE = "!=="

    # Arithmetic
    INC = "++"
    DEC = "--"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "**"

    # Bitwise / logical
    SHL = "<<"
    SHR = ">>"
    ZF_SHR = ">>>"
    AND = "&&"
    OR = "||"
    BITWISE_AND = "&"
    BITWISE_OR = "|"
    XOR = "^"
    BITWISE_NOT = "~"
    NOT = "!"

    # Assignment
    ASSIGN = "="
    ASSIGN_SHL = "<<="
    ASSIGN_SHR = ">>="
    ASSIGN_ZF_SHR = ">>>="
    ASSIGN_ADD = "+="
    ASSIGN_SUB = "-="
    ASSIGN_MUL = "*="
    ASSIGN_DIV = "/="
    ASSIGN_MOD = "%="
    ASSIGN_POW = "**="
    ASSIGN_AND = "&="
    ASSIGN_OR = "|="
    ASSIGN_XOR = "^="


TokenValue = Union[Keyword, Symbol, str, float]


@dataclass(frozen=True, slots=True)
class Token:
    """One classified token.

    `value` depends on `kind`: a Keyword, a Symbol, the identifier text, the
    decoded string contents, or the float value of a number. `lexeme` is the
    raw source text the token was scanned from.
    """

    kind: TokenKind
    value: TokenValue
    lexeme: str
    span: Span

    @property
    def keyword(self) -> Keyword | None:
        return self.value if self.kind is TokenKind.KEYWORD else None  # type: ignore[return-value]

    @property
    def symbol(self) -> Symbol | None:
        return self.value if self.kind is TokenKind.SYMBOL else None  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r}, {self.span.format()})"
