from __future__ import annotations

from pathlib import Path

import pytest

from ecmalex import (
    EndOfInput,
    Keyword,
    LexError,
    Lexer,
    MalformedNumber,
    Symbol,
    TokenKind,
    tokenize,
    tokenize_file,
    tokenize_files,
    tokenize_source,
)


def test_end_of_input_is_repeatable() -> None:
    lx = Lexer("x")
    assert lx.next_token().value == "x"
    for _ in range(3):
        with pytest.raises(EndOfInput):
            lx.next_token()


def test_iteration_stops_at_end_of_input() -> None:
    lx = Lexer("a b c")
    assert [t.value for t in lx] == ["a", "b", "c"]
    assert list(lx) == []


def test_iteration_propagates_lexical_errors() -> None:
    lx = Lexer("a 1.2.3 b")
    it = iter(lx)
    assert next(it).value == "a"
    with pytest.raises(MalformedNumber):
        next(it)


def test_push_back_and_peek_token() -> None:
    lx = Lexer("var x")
    peeked = lx.peek_token()
    assert peeked.value is Keyword.VAR
    assert lx.peek_token() is peeked
    assert lx.next_token() is peeked

    tok = lx.next_token()
    lx.push_back(tok)
    assert lx.next_token() is tok
    with pytest.raises(EndOfInput):
        lx.next_token()


def test_push_back_slot_holds_one_token() -> None:
    lx = Lexer("a b")
    a = lx.next_token()
    b = lx.next_token()
    lx.push_back(b)
    with pytest.raises(RuntimeError):
        lx.push_back(a)


def test_token_accessors() -> None:
    kw, ident, sym = tokenize("return x;")[:3]
    assert kw.keyword is Keyword.RETURN and kw.symbol is None
    assert ident.keyword is None and ident.symbol is None
    assert sym.symbol is Symbol.SEMI_COLON
    assert "RETURN" not in repr(ident)
    assert "<memory>:1:8" in repr(ident)


def test_lex_error_message_and_hint() -> None:
    with pytest.raises(LexError) as e:
        tokenize_source("1.2.3", file="x.js")
    msg = str(e.value)
    assert msg.startswith("x.js:1:1: ")
    assert "\nhint: " in msg


def test_tokenize_file(tmp_path: Path) -> None:
    p = tmp_path / "main.js"
    p.write_text("const a = 'é';\n", encoding="utf-8")
    toks = tokenize_file(p)
    assert [t.kind for t in toks] == [
        TokenKind.KEYWORD,
        TokenKind.IDENTIFIER,
        TokenKind.SYMBOL,
        TokenKind.STRING,
        TokenKind.SYMBOL,
    ]
    assert toks[0].span.file == str(p.resolve())


def test_tokenize_file_skips_byte_order_mark(tmp_path: Path) -> None:
    p = tmp_path / "bom.js"
    p.write_text("\ufeffconst a = 1;", encoding="utf-8")
    toks = tokenize_file(p)
    assert [t.value for t in toks] == [Keyword.CONST, "a", Symbol.ASSIGN, 1.0, Symbol.SEMI_COLON]
    assert toks[0].span.start.column == 2


def test_tokenize_files_dedupes(tmp_path: Path) -> None:
    a = tmp_path / "a.js"
    b = tmp_path / "b.js"
    a.write_text("a;", encoding="utf-8")
    b.write_text("b + c", encoding="utf-8")

    res = tokenize_files([a, b, a])
    assert res.inputs == (str(a.resolve()), str(b.resolve()), str(a.resolve()))
    assert set(res.files) == {str(a.resolve()), str(b.resolve())}
    assert len(res.files[str(b.resolve())]) == 3


def test_tokenize_file_reports_path_in_errors(tmp_path: Path) -> None:
    p = tmp_path / "bad.js"
    p.write_text("\n  @", encoding="utf-8")
    with pytest.raises(LexError) as e:
        tokenize_file(p)
    assert str(e.value).startswith(f"{p.resolve()}:2:3: ")
