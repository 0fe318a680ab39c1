"""Reads source files, runs the compiler and reports diagnostics."""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from pprint import pformat

from lyra.compiler import CompileOutput, compile_source
from lyra.diagnostic import Diagnostic
from lyra.lexer import tokenize


class Emit(Enum):
    """What intermediate form to print while compiling."""

    NONE = "none"
    AST = "ast"
    TOKENS = "tokens"


def compile_file(path: str | os.PathLike[str], emit: Emit = Emit.NONE) -> CompileOutput:
    """Compile the file at ``path``, printing the form selected by ``emit``.

    Raises OSError when the file cannot be read as UTF-8 text.
    """
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"failed to read source file: {os.fspath(path)}") from exc

    out = compile_source(source)

    if emit is Emit.AST:
        print(pformat(out.module))
    elif emit is Emit.TOKENS:
        tokens, _ = tokenize(source)
        print(pformat(tokens))

    return out


def print_diag(diagnostic: Diagnostic) -> None:
    """Write one diagnostic to standard error."""
    severity = diagnostic.severity.value
    span = diagnostic.span
    if span is not None:
        print(
            f"{severity}: {diagnostic.message} at {span.start}..{span.end}",
            file=sys.stderr,
        )
    else:
        print(f"{severity}: {diagnostic.message}", file=sys.stderr)