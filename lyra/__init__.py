"""Lexer, parser and compiler driver for the Lyra language."""

__version__ = "0.1.0"