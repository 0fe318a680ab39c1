"""The front-end pipeline: lexing followed by parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from lyra.diagnostic import Diagnostic
from lyra.lexer import tokenize
from lyra.parser import parse
from lyra.syntax import Module


@dataclass
class CompileOutput:
    """The parsed module and every diagnostic raised while producing it."""

    module: Module
    diagnostics: list[Diagnostic] = field(default_factory=list)


def compile_source(source: str) -> CompileOutput:
    """Lex and parse ``source``; lexer diagnostics come before parser ones."""
    tokens, diagnostics = tokenize(source)
    module, parse_diagnostics = parse(tokens)
    return CompileOutput(module, diagnostics + parse_diagnostics)