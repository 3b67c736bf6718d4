"""Stable, searchable diagnostic code registry.

Ranges:
- L01xx      — Normalization (comments, quotes)
- L02xx      — Structure (parentheses, statement separators)
- L03xx      — Classification / extraction
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticCode:
    value: int

    def __str__(self) -> str:
        return f"L{self.value:04d}"


# Normalization (L01xx)
UNTERMINATED_COMMENT = DiagnosticCode(101)
UNBALANCED_QUOTE = DiagnosticCode(102)

# Structure (L02xx)
UNBALANCED_PARENTHESES = DiagnosticCode(201)
EMPTY_STATEMENT = DiagnosticCode(202)

# Classification / extraction (L03xx)
UNKNOWN_METHOD = DiagnosticCode(301)
NO_TABLE = DiagnosticCode(302)
