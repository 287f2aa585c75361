from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


@dataclass(slots=True)
class LexError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class EndOfInput(LexError):
    """The source is exhausted. A stop signal for pull loops, not a fault."""


class MalformedNumber(LexError):
    pass


class UnrecognizedCharacter(LexError):
    pass


class UnterminatedString(LexError):
    pass


class UnterminatedComment(LexError):
    pass


class InvalidEscape(LexError):
    pass
