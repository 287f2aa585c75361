from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .lexer import tokenize
from .tokens import Token


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenizeResult:
    inputs: tuple[str, ...]
    files: dict[str, list[Token]]  # absolute path -> tokens


def tokenize_source(src: str, *, file: str = "<memory>") -> list[Token]:
    return tokenize(src, file=file)


def tokenize_file(path: str | Path) -> list[Token]:
    p = Path(path).expanduser().resolve()
    logger.debug("reading %s", p)
    src = p.read_text(encoding="utf-8")
    return tokenize_source(src, file=str(p))


def tokenize_files(paths: Iterable[str | Path]) -> TokenizeResult:
    resolved = [Path(p).expanduser().resolve() for p in paths]
    files: dict[str, list[Token]] = {}
    for p in resolved:
        key = str(p)
        if key in files:
            continue
        files[key] = tokenize_file(p)
    return TokenizeResult(inputs=tuple(str(p) for p in resolved), files=files)
