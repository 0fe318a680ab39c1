import pytest

from lyra.diagnostic import Diagnostic, Severity, Span
from lyra.driver import Emit, compile_file, print_diag
from lyra.syntax import IntLiteral, Let, Ident


def test_compile_file_returns_output(tmp_path, capsys):
    source = tmp_path / "main.ly"
    source.write_text("let x = 1\n", encoding="utf-8")
    out = compile_file(source, Emit.NONE)
    assert out.diagnostics == []
    assert out.module.items == [Let(Ident("x"), IntLiteral(1))]
    assert capsys.readouterr().out == ""


def test_compile_file_accepts_str_path(tmp_path):
    source = tmp_path / "main.ly"
    source.write_text("let = 1", encoding="utf-8")
    out = compile_file(str(source), Emit.NONE)
    assert [d.message for d in out.diagnostics] == ["expected identifier after 'let'"]


def test_emit_ast_prints_module(tmp_path, capsys):
    source = tmp_path / "main.ly"
    source.write_text("let x = 1\n", encoding="utf-8")
    compile_file(source, Emit.AST)
    printed = capsys.readouterr().out
    assert "Let(" in printed
    assert "IntLiteral(value=1)" in printed


def test_emit_tokens_prints_tokens(tmp_path, capsys):
    source = tmp_path / "main.ly"
    source.write_text("f(1)", encoding="utf-8")
    compile_file(source, Emit.TOKENS)
    printed = capsys.readouterr().out
    assert "TokenKind.LPAREN" in printed
    assert "TokenKind.EOF" in printed


def test_missing_file_raises_oserror(tmp_path):
    missing = tmp_path / "absent.ly"
    with pytest.raises(OSError, match="failed to read source file"):
        compile_file(missing, Emit.NONE)


def test_invalid_utf8_raises_oserror(tmp_path):
    source = tmp_path / "bad.ly"
    source.write_bytes(b"\xff\xfe")
    with pytest.raises(OSError, match="failed to read source file"):
        compile_file(source, Emit.NONE)


def test_print_diag_with_span(capsys):
    print_diag(Diagnostic.error("boom").with_span(Span(2, 5)))
    assert capsys.readouterr().err == "error: boom at 2..5\n"


def test_print_diag_without_span(capsys):
    print_diag(Diagnostic(Severity.WARNING, "careful"))
    assert capsys.readouterr().err == "warning: careful\n"


def test_print_diag_note(capsys):
    print_diag(Diagnostic(Severity.NOTE, "fyi", Span(0, 0)))
    assert capsys.readouterr().err == "note: fyi at 0..0\n"


def test_emit_values_round_trip():
    assert [Emit(e.value) for e in Emit] == list(Emit)