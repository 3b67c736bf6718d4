"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from lightsql.diagnostics.render import diagnostic_to_dict, render_text
from lightsql.parser import QueryReport


def report_to_dict(report: QueryReport) -> dict:
    return {
        "query": report.query,
        "statements": report.statements,
        "method": report.method,
        "table": report.table,
        "tables": report.tables,
        "join_tables": report.join_tables,
        "fields": report.fields,
        "subqueries": report.subqueries,
        "has_join": report.has_join,
        "has_subquery": report.has_subquery,
        "diagnostics": [diagnostic_to_dict(d) for d in report.diagnostics],
    }


def format_report(report: QueryReport, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(report_to_dict(report), indent=2)

    def listing(values: list[str]) -> str:
        return ", ".join(values) if values else "-"

    lines = [
        f"method: {report.method or '-'}",
        f"table: {report.table if report.table is not None else '-'}",
        f"tables: {listing(report.tables)}",
        f"join tables: {listing(report.join_tables)}",
        f"fields: {listing(report.fields)}",
        f"has join: {'yes' if report.has_join else 'no'}",
        f"has subquery: {'yes' if report.has_subquery else 'no'}",
    ]
    if report.statements:
        lines.append(f"statements ({len(report.statements)}):")
        lines.extend(f"  {i + 1}: {s}" for i, s in enumerate(report.statements))
    if report.subqueries:
        lines.append(f"subqueries ({len(report.subqueries)}):")
        lines.extend(f"  - {q}" for q in report.subqueries)

    diagnostics = render_text(report.diagnostics, report.query, report.statements)
    if diagnostics:
        lines.append("")
        lines.append(diagnostics)
    return "\n".join(lines)


def format_statements(statements: list[str], *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(statements, indent=2)
    return "\n".join(statements)
