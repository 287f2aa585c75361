from __future__ import annotations

from enum import Enum

from .tokens import Token, TokenKind


def _format_value(tok: Token) -> str:
    v = tok.value
    if isinstance(v, Enum):
        return v.value
    if tok.kind is TokenKind.NUMBER:
        return repr(v)
    if tok.kind is TokenKind.STRING:
        return repr(v)
    return str(v)


def format_token(tok: Token) -> str:
    sp = tok.span
    loc = f"{sp.start.format()}-{sp.end.format()}"
    return f"{loc:<12} {tok.kind.value:<10} {_format_value(tok)}"


def format_tokens(tokens: list[Token]) -> str:
    if not tokens:
        return ""
    return "\n".join(format_token(t) for t in tokens) + "\n"


def token_to_dict(tok: Token) -> dict[str, object]:
    v = tok.value
    return {
        "kind": tok.kind.value,
        "value": v.value if isinstance(v, Enum) else v,
        "lexeme": tok.lexeme,
        "start": [tok.span.start.line, tok.span.start.column],
        "end": [tok.span.end.line, tok.span.end.column],
    }
