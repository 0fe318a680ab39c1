"""Turns Lyra source text into tokens, collecting diagnostics on the way."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from lyra.diagnostic import Diagnostic, Span

_I64_MAX = 2**63 - 1

_TRIVIA = re.compile(rb"(?:[ \t\n\r\x0c]+|#[^\n]*)*")
_IDENT = re.compile(rb"[A-Za-z_][A-Za-z0-9_]*")
_DIGITS = re.compile(rb"[0-9]+")

_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_ESCAPES = {_QUOTE: '"', _BACKSLASH: "\\", ord("n"): "\n", ord("t"): "\t"}


class TokenKind(Enum):
    """The kinds of token the lexer produces."""

    EOF = auto()
    IDENT = auto()
    INT = auto()
    STR = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    SEMI = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    EQ = auto()


_PUNCT = {
    ord("("): TokenKind.LPAREN,
    ord(")"): TokenKind.RPAREN,
    ord("{"): TokenKind.LBRACE,
    ord("}"): TokenKind.RBRACE,
    ord(","): TokenKind.COMMA,
    ord(";"): TokenKind.SEMI,
    ord("+"): TokenKind.PLUS,
    ord("-"): TokenKind.MINUS,
    ord("*"): TokenKind.STAR,
    ord("/"): TokenKind.SLASH,
    ord("="): TokenKind.EQ,
}


@dataclass(frozen=True)
class Token:
    """A token with its byte span; identifiers, integers and strings carry a value."""

    kind: TokenKind
    span: Span
    value: str | int | None = None


class _UnterminatedString(Exception):
    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


def tokenize(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Split ``source`` into tokens ending with EOF; spans are UTF-8 byte offsets."""
    data = source.encode("utf-8")
    tokens: list[Token] = []
    diagnostics: list[Diagnostic] = []
    pos = 0

    while True:
        pos = _TRIVIA.match(data, pos).end()
        if pos >= len(data):
            break
        byte = data[pos]

        if ident := _IDENT.match(data, pos):
            tokens.append(
                Token(TokenKind.IDENT, Span(pos, ident.end()), ident.group().decode("ascii"))
            )
            pos = ident.end()
        elif digits := _DIGITS.match(data, pos):
            text = digits.group().decode("ascii")
            span = Span(pos, digits.end())
            value = int(text)
            if value > _I64_MAX:
                diagnostics.append(
                    Diagnostic.error(f"invalid integer literal: {text}").with_span(span)
                )
            else:
                tokens.append(Token(TokenKind.INT, span, value))
            pos = digits.end()
        elif byte == _QUOTE:
            try:
                token = _lex_string(data, pos)
            except _UnterminatedString as exc:
                diagnostics.append(exc.diagnostic)
                break
            tokens.append(token)
            pos = token.span.end
        elif (kind := _PUNCT.get(byte)) is not None:
            tokens.append(Token(kind, Span(pos, pos + 1)))
            pos += 1
        else:
            diagnostics.append(
                Diagnostic.error(f"unexpected character: {_describe_byte(byte)}").with_span(
                    Span(pos, pos + 1)
                )
            )
            pos += 1

    tokens.append(Token(TokenKind.EOF, Span(len(data), len(data))))
    return tokens, diagnostics


def _lex_string(data: bytes, start: int) -> Token:
    pos = start + 1
    chars: list[str] = []
    while pos < len(data):
        byte = data[pos]
        if byte == _QUOTE:
            return Token(TokenKind.STR, Span(start, pos + 1), "".join(chars))
        if byte == _BACKSLASH:
            if pos + 1 >= len(data):
                break
            escaped = data[pos + 1]
            chars.append(_ESCAPES.get(escaped, chr(escaped)))
            pos += 2
            continue
        chars.append(chr(byte))
        pos += 1
    raise _UnterminatedString(
        Diagnostic.error("unterminated string literal").with_span(
            Span(start, min(pos, len(data)))
        )
    )


def _describe_byte(byte: int) -> str:
    if 0x21 <= byte <= 0x7E or byte == 0x20:
        return chr(byte)
    return f"0x{byte:02X}"