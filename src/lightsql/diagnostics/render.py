"""Render diagnostics for terminal (text) and machine (JSON) output."""

from __future__ import annotations

from lightsql.diagnostics.types import Diagnostic


def _span_source(
    d: Diagnostic, sql: str | None, statements: list[str] | None
) -> str | None:
    if d.statement is None:
        return sql
    if statements is not None and 0 <= d.statement < len(statements):
        return statements[d.statement]
    return None


def render_text(
    diagnostics: list[Diagnostic],
    sql: str | None = None,
    statements: list[str] | None = None,
) -> str:
    """Render diagnostics as human-readable text.

    Spans of a diagnostic tied to a statement index the normalized statement
    text; all other spans index the raw query. When the matching source is
    given (``statements`` or ``sql``), each labelled span is shown with the
    text it covers; otherwise only its offsets are printed.
    """
    lines: list[str] = []
    for d in diagnostics:
        where = f" (statement {d.statement + 1})" if d.statement is not None else ""
        lines.append(f"{d.level.name.lower()}[{d.code}]: {d.message}{where}")
        source = _span_source(d, sql, statements)
        for s in d.spans:
            if source is not None:
                excerpt = s.span.slice(source)
                if len(excerpt) > 40:
                    excerpt = excerpt[:37] + "..."
                lines.append(f"  --> {s.span.start}: {excerpt!r} {s.label or ''}".rstrip())
            else:
                lines.append(f"  --> {s.span.start}..{s.span.end} {s.label or ''}".rstrip())
        for note in d.notes:
            lines.append(f"  = note: {note}")
    return "\n".join(lines)


def diagnostic_to_dict(d: Diagnostic) -> dict:
    """JSON-ready form of a diagnostic.

    ``spans_in`` names the string the span offsets index: ``"statement"``
    (the entry of ``statements`` at ``statement``) or ``"query"``.
    """
    data: dict = {
        "level": d.level.name.lower(),
        "code": str(d.code),
        "message": d.message,
        "notes": d.notes,
    }
    if d.spans:
        data["spans"] = [
            {"start": s.span.start, "end": s.span.end, "label": s.label} for s in d.spans
        ]
        data["spans_in"] = "query" if d.statement is None else "statement"
    if d.statement is not None:
        data["statement"] = d.statement
    return data
