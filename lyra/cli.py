"""Command-line entry points: ``lyra`` with subcommands and the ``lyrac`` driver."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from lyra.diagnostic import LYRA_NAME, LYRA_VERSION
from lyra.driver import Emit, compile_file, print_diag

_EMIT_CHOICES = [emit.value for emit in Emit]


def _add_compile_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="Path to a .ly file")
    parser.add_argument(
        "--emit",
        choices=_EMIT_CHOICES,
        default=Emit.NONE.value,
        help="What to emit (for debugging)",
    )


def _compile(file: str, emit: str) -> bool:
    try:
        out = compile_file(file, Emit(emit))
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return False
    for diagnostic in out.diagnostics:
        print_diag(diagnostic)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``lyra`` command line and return its exit status."""
    parser = argparse.ArgumentParser(prog="lyra", description="Lyra language CLI")
    parser.add_argument("--version", action="version", version=f"lyra {LYRA_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)
    _add_compile_arguments(
        commands.add_parser(
            "compile",
            help="Compile a Lyra source file",
            description="Compile a Lyra source file",
        )
    )
    args = parser.parse_args(argv)

    if args.command == "compile":
        if not _compile(args.file, args.emit):
            return 1
        print(f"compiled {args.file}")
    return 0


def lyrac_main(argv: Sequence[str] | None = None) -> int:
    """Run the ``lyrac`` compiler driver and return its exit status."""
    print(f"{LYRA_NAME} compiler v{LYRA_VERSION}")

    parser = argparse.ArgumentParser(prog="lyrac", description="Lyra compiler driver")
    parser.add_argument("--version", action="version", version=f"lyrac {LYRA_VERSION}")
    _add_compile_arguments(parser)
    args = parser.parse_args(argv)

    return 0 if _compile(args.file, args.emit) else 1


if __name__ == "__main__":
    sys.exit(main())