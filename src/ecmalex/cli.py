from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import islice

from .errors import LexError
from .format import format_tokens, token_to_dict
from .lexer import Lexer
from .tokens import Token


logger = logging.getLogger(__name__)


def _read_input(path: str) -> tuple[str, str]:
    if path == "-":
        return "<stdin>", sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return path, f.read()


def _scan(src: str, file: str, limit: int | None) -> list[Token]:
    return list(islice(Lexer(src, file=file), limit))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ecmalex", description="Tokenize ECMAScript source")
    ap.add_argument("paths", nargs="*", help="Source files ('-' reads stdin)")
    ap.add_argument("-e", "--eval", dest="source", help="Tokenize this text instead of files")
    ap.add_argument("--json", action="store_true", help="Print tokens as JSON")
    ap.add_argument("--limit", type=int, default=None, help="Stop after N tokens per input")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    inputs: list[tuple[str, str]] = []
    if args.source is not None:
        inputs.append(("<eval>", args.source))
    if args.limit is not None and args.limit < 0:
        ap.error("--limit must be zero or a positive integer")
    for p in args.paths:
        try:
            inputs.append(_read_input(p))
        except OSError as e:
            print(f"{p}: {e.strerror or e}", file=sys.stderr)
            return 1
    if not inputs:
        ap.error("nothing to tokenize: pass file paths or -e SOURCE")

    payload: dict[str, list[dict[str, object]]] = {}
    for file, src in inputs:
        try:
            toks = _scan(src, file, args.limit)
        except LexError as e:
            print(str(e), file=sys.stderr)
            return 1
        logger.debug("%s: %d tokens", file, len(toks))
        if args.json:
            payload[file] = [token_to_dict(t) for t in toks]
        else:
            if len(inputs) > 1:
                print(f"== {file}")
            sys.stdout.write(format_tokens(toks))

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
    return 0
