import pytest

from lyra.diagnostic import Severity, Span
from lyra.lexer import tokenize
from lyra.parser import parse
from lyra.syntax import Call, ExprStmt, Ident, IntLiteral, Let, Module, StrLiteral


def _parse_source(src):
    tokens, _ = tokenize(src)
    return parse(tokens)


def test_parse_let_binding():
    tokens, lex_diags = tokenize("let x = 1\n")
    assert lex_diags == []
    module, diags = parse(tokens)
    assert diags == []
    assert len(module.items) == 1
    assert module.items[0] == Let(Ident("x"), IntLiteral(1))


def test_parse_call_with_args():
    tokens, lex_diags = tokenize('print("hi", 1)\n')
    assert lex_diags == []
    module, diags = parse(tokens)
    assert diags == []
    assert len(module.items) == 1
    assert module.items[0] == ExprStmt(
        Call(Ident("print"), (StrLiteral("hi"), IntLiteral(1)))
    )


def test_parse_error_missing_ident_after_let():
    module, diags = _parse_source("let = 1\n")
    assert diags
    assert diags[0].message == "expected identifier after 'let'"
    assert diags[0].severity is Severity.ERROR
    assert module.items == [ExprStmt(IntLiteral(1))]


def test_parse_error_unterminated_call():
    module, diags = _parse_source("print(\n")
    assert diags
    assert diags[0].message == "expected expression in argument list"
    assert module.items == []


def test_empty_call():
    module, diags = _parse_source("f()")
    assert diags == []
    assert module.items == [ExprStmt(Call(Ident("f"), ()))]


def test_nested_call_in_let():
    module, diags = _parse_source("let y = f(g(2), z)")
    assert diags == []
    assert module.items == [
        Let(Ident("y"), Call(Ident("f"), (Call(Ident("g"), (IntLiteral(2),)), Ident("z"))))
    ]


def test_missing_comma_recovers_to_rparen():
    module, diags = _parse_source("f(1 2) x")
    assert [d.message for d in diags] == ["expected ',' or ')' after argument"]
    assert diags[0].span == Span(4, 5)
    assert module.items == [
        ExprStmt(Call(Ident("f"), (IntLiteral(1),))),
        ExprStmt(Ident("x")),
    ]


def test_missing_expression_after_eq_points_at_eof():
    src = "let x ="
    module, diags = _parse_source(src)
    assert [d.message for d in diags] == ["expected expression after '='"]
    assert diags[0].span == Span(len(src), len(src))
    assert module.items == []


def test_stray_punctuation_is_skipped_silently():
    module, diags = _parse_source(") ; a")
    assert diags == []
    assert module.items == [ExprStmt(Ident("a"))]


def test_multiple_statements_in_order():
    module, diags = _parse_source('let a = 1\nlet b = "s"\nshow(a, b)')
    assert diags == []
    assert module.items == [
        Let(Ident("a"), IntLiteral(1)),
        Let(Ident("b"), StrLiteral("s")),
        ExprStmt(Call(Ident("show"), (Ident("a"), Ident("b")))),
    ]


@pytest.mark.parametrize("tokens", [[], ()])
def test_no_tokens_gives_empty_module(tokens):
    module, diags = parse(tokens)
    assert module == Module([])
    assert diags == []