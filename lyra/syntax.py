"""Syntax tree of a Lyra module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Ident:
    """A name."""

    name: str


@dataclass(frozen=True)
class IntLiteral:
    """A 64-bit signed integer literal."""

    value: int


@dataclass(frozen=True)
class StrLiteral:
    """A string literal with escapes already resolved."""

    value: str


@dataclass(frozen=True)
class Call:
    """A call of a named function with positional arguments."""

    callee: Ident
    args: tuple[Expr, ...] = ()


Expr = Union[Ident, IntLiteral, StrLiteral, Call]


@dataclass(frozen=True)
class Let:
    """A ``let name = expr`` binding."""

    name: Ident
    expr: Expr


@dataclass(frozen=True)
class ExprStmt:
    """An expression used as a statement."""

    expr: Expr


Stmt = Union[Let, ExprStmt]


@dataclass
class Module:
    """A parsed source file: its top-level statements in order."""

    items: list[Stmt] = field(default_factory=list)