"""Diagnostic values for SQL scanning.

Scanning never raises on malformed input: it degrades to empty results.
Diagnostics say why, so callers can tell "no table" from "could not read the
statement".
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from lightsql.diagnostics.codes import DiagnosticCode


class Level(enum.IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def slice(self, sql: str) -> str:
        return sql[self.start : self.end]


@dataclass
class SpanLabel:
    span: Span
    label: str | None = None


@dataclass
class Diagnostic:
    level: Level
    code: DiagnosticCode
    message: str
    spans: list[SpanLabel] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    statement: int | None = None

    # -- Builder classmethods ---------------------------------------------------

    @classmethod
    def error(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.ERROR, code=code, message=message)

    @classmethod
    def warning(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.WARNING, code=code, message=message)

    @classmethod
    def info(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.INFO, code=code, message=message)

    # -- Builder chain methods --------------------------------------------------

    def span(self, span: Span, label: str) -> Diagnostic:
        self.spans.append(SpanLabel(span=span, label=label))
        return self

    def note(self, note: str) -> Diagnostic:
        self.notes.append(note)
        return self

    def at_statement(self, index: int) -> Diagnostic:
        """Attach the index of the statement the diagnostic refers to.

        Spans of such a diagnostic are offsets into that statement's text.
        """
        self.statement = index
        return self

    @property
    def is_error(self) -> bool:
        return self.level == Level.ERROR


def max_level(diagnostics: list[Diagnostic]) -> Level | None:
    if not diagnostics:
        return None
    return max(d.level for d in diagnostics)
