from __future__ import annotations

from .api import TokenizeResult, tokenize_file, tokenize_files, tokenize_source
from .errors import (
    EndOfInput,
    InvalidEscape,
    LexError,
    MalformedNumber,
    UnrecognizedCharacter,
    UnterminatedComment,
    UnterminatedString,
)
from .format import format_token, format_tokens, token_to_dict
from .lexer import Lexer, tokenize
from .spans import Location, Span
from .tokens import Keyword, Symbol, Token, TokenKind

__all__ = [
    "EndOfInput",
    "InvalidEscape",
    "Keyword",
    "LexError",
    "Lexer",
    "Location",
    "MalformedNumber",
    "Span",
    "Symbol",
    "Token",
    "TokenKind",
    "TokenizeResult",
    "UnrecognizedCharacter",
    "UnterminatedComment",
    "UnterminatedString",
    "format_token",
    "format_tokens",
    "token_to_dict",
    "tokenize",
    "tokenize_file",
    "tokenize_files",
    "tokenize_source",
]
