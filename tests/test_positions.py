from __future__ import annotations

import pytest

from ecmalex import EndOfInput, Lexer, Location, tokenize


def _spans(src: str) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    return [
        ((t.span.start.line, t.span.start.column), (t.span.end.line, t.span.end.column))
        for t in tokenize(src)
    ]


def test_single_line_spans() -> None:
    assert _spans("const hello = 1.12;") == [
        ((1, 1), (1, 6)),
        ((1, 7), (1, 12)),
        ((1, 13), (1, 14)),
        ((1, 15), (1, 19)),
        ((1, 19), (1, 20)),
    ]


def test_offsets_match_lexemes() -> None:
    src = "let x = a >>>= 0x;"
    for tok in tokenize(src):
        assert src[tok.span.start.offset : tok.span.end.offset] == tok.lexeme
        assert tok.span.start <= tok.span.end


def test_line_breaks_reset_column() -> None:
    assert _spans("a\n  bb\r\ncc\rd\u2028e") == [
        ((1, 1), (1, 2)),
        ((2, 3), (2, 5)),
        ((3, 1), (3, 3)),
        ((4, 1), (4, 2)),
        ((5, 1), (5, 2)),
    ]


def test_adjacent_tokens_share_boundary() -> None:
    toks = tokenize("a+=b")
    for left, right in zip(toks, toks[1:]):
        assert left.span.end == right.span.start


def test_multiline_block_comment_advances_lines() -> None:
    toks = tokenize("/*\n\n*/ x")
    assert toks[0].span.start == Location(offset=7, line=3, column=4)


def test_span_format_uses_file_name() -> None:
    (tok,) = tokenize("\n   foo", file="app.js")
    assert tok.span.format() == "app.js:2:4"
    assert tok.span.file == "app.js"


def test_end_of_input_location_is_end_of_source() -> None:
    lx = Lexer("ab\n")
    lx.next_token()
    with pytest.raises(EndOfInput) as e:
        lx.next_token()
    assert e.value.span.start == Location(offset=3, line=2, column=1)
    assert lx.location() == Location(offset=3, line=2, column=1)
