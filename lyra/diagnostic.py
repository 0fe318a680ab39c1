"""Source spans, diagnostics and version metadata shared by the toolchain."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

LYRA_NAME = "Lyra"
LYRA_VERSION = "0.1.0"


@dataclass(frozen=True)
class Span:
    """A half-open byte range ``[start, end)`` in a source text."""

    start: int
    end: int


class Severity(Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True)
class Diagnostic:
    """A message about the source, optionally tied to a span."""

    severity: Severity
    message: str
    span: Span | None = None

    @classmethod
    def error(cls, message: str) -> Diagnostic:
        """Create an error diagnostic without a span."""
        return cls(Severity.ERROR, str(message))

    def with_span(self, span: Span) -> Diagnostic:
        """Return a copy of this diagnostic attached to ``span``."""
        return replace(self, span=span)