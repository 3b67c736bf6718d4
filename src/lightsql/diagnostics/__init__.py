"""Diagnostic system: types, codes, rendering."""

from lightsql.diagnostics.codes import DiagnosticCode
from lightsql.diagnostics.types import Diagnostic, Level, Span, SpanLabel, max_level

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Level",
    "Span",
    "SpanLabel",
    "max_level",
]
