"""Subquery extraction by balanced-parenthesis scanning."""

from __future__ import annotations

from lightsql.scan._scanner import paren_spans
from lightsql.scan._types import Method
from lightsql.scan.classify import classify


def extract_subqueries(statement: str) -> list[str]:
    """Return the inner text of every parenthesized span that is a SELECT.

    Nested subqueries are reported independently, outermost first. An
    unmatched ``(`` never yields a span.
    """
    found: list[str] = []
    for open_pos, close_pos in paren_spans(statement):
        inner = statement[open_pos + 1 : close_pos].strip()
        if classify(inner) == Method.SELECT:
            found.append(inner)
    return found
