"""Builds a syntax tree from tokens, recovering from errors as it goes."""

from __future__ import annotations

from collections.abc import Sequence

from lyra.diagnostic import Diagnostic, Severity, Span
from lyra.lexer import Token, TokenKind
from lyra.syntax import Call, Expr, ExprStmt, Ident, IntLiteral, Let, Module, Stmt, StrLiteral


def parse(tokens: Sequence[Token]) -> tuple[Module, list[Diagnostic]]:
    """Parse ``tokens`` into a module, returning it with any diagnostics."""
    parser = _Parser(tokens)
    module = parser.parse_module()
    return module, parser.diagnostics


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0
        self.diagnostics: list[Diagnostic] = []

    def parse_module(self) -> Module:
        items: list[Stmt] = []
        while not self._is_eof():
            stmt = self._parse_stmt()
            if stmt is not None:
                items.append(stmt)
            else:
                # Skip one token so a bad statement cannot stall the loop.
                self._bump()
        return Module(items)

    def _parse_stmt(self) -> Stmt | None:
        if self._at_keyword("let"):
            return self._parse_let()
        expr = self._parse_expr()
        return ExprStmt(expr) if expr is not None else None

    def _parse_let(self) -> Stmt | None:
        self._bump()
        name = self._bump_ident()
        if name is None:
            self._error_here("expected identifier after 'let'")
            return None
        if not self._eat(TokenKind.EQ):
            self._error_here("expected '=' in let binding")
            return None
        expr = self._parse_expr()
        if expr is None:
            self._error_here("expected expression after '='")
            return None
        return Let(Ident(name), expr)

    def _parse_expr(self) -> Expr | None:
        primary = self._parse_primary()
        if isinstance(primary, Ident) and self._at(TokenKind.LPAREN):
            return self._parse_call(primary)
        return primary

    def _parse_call(self, callee: Ident) -> Expr | None:
        if not self._eat(TokenKind.LPAREN):
            self._error_here("expected '(' after function name")
            return None

        args: list[Expr] = []
        if self._eat(TokenKind.RPAREN):
            return Call(callee, ())

        while True:
            arg = self._parse_expr()
            if arg is None:
                self._error_here("expected expression in argument list")
                return None
            args.append(arg)

            if self._eat(TokenKind.COMMA):
                continue
            if self._eat(TokenKind.RPAREN):
                break

            self._error_here("expected ',' or ')' after argument")
            while not self._is_eof() and not self._at(TokenKind.RPAREN):
                self._bump()
            self._eat(TokenKind.RPAREN)
            break

        return Call(callee, tuple(args))

    def _parse_primary(self) -> Expr | None:
        token = self._peek()
        if token is None:
            return None
        if token.kind is TokenKind.IDENT:
            self._bump()
            return Ident(token.value)
        if token.kind is TokenKind.INT:
            self._bump()
            return IntLiteral(token.value)
        if token.kind is TokenKind.STR:
            self._bump()
            return StrLiteral(token.value)
        return None

    def _is_eof(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        return None if self._is_eof() else self._tokens[self._pos]

    def _bump(self) -> Token | None:
        token = self._peek()
        if token is not None:
            self._pos += 1
        return token

    def _at(self, kind: TokenKind) -> bool:
        token = self._peek()
        return token is not None and token.kind is kind

    def _eat(self, kind: TokenKind) -> bool:
        if self._at(kind):
            self._bump()
            return True
        return False

    def _at_keyword(self, keyword: str) -> bool:
        token = self._peek()
        return token is not None and token.kind is TokenKind.IDENT and token.value == keyword

    def _bump_ident(self) -> str | None:
        if self._at(TokenKind.IDENT):
            return self._bump().value
        return None

    def _error_here(self, message: str) -> None:
        token = self._peek()
        span = token.span if token is not None else Span(0, 0)
        self.diagnostics.append(Diagnostic(Severity.ERROR, message, span))