"""Structural checks: conditions the scanners tolerate but callers may want to see."""

from __future__ import annotations

from lightsql.diagnostics import Diagnostic, Span, codes
from lightsql.scan._types import Method, TableRefs
from lightsql.scan.normalize import (
    QUOTE_CHARS,
    find_unterminated_comment,
    outside_block_comments,
)
from lightsql.scan.split import count_empty_segments


def check_unterminated_comment(sql: str) -> Diagnostic | None:
    """Warn when a block comment is never closed and swallows the rest of the input."""
    start = find_unterminated_comment(sql)
    if start == -1:
        return None
    return (
        Diagnostic.warning(codes.UNTERMINATED_COMMENT, "unterminated block comment")
        .span(Span(start, len(sql)), "comment runs to end of input")
        .note("everything after /* is ignored")
    )


def check_unbalanced_quotes(sql: str) -> Diagnostic | None:
    """Warn when a quote character outside block comments appears an odd number of times."""
    counts: dict[str, int] = {}
    last: dict[str, int] = {}
    for pos, ch in outside_block_comments(sql):
        if ch in QUOTE_CHARS:
            counts[ch] = counts.get(ch, 0) + 1
            last[ch] = pos
    for quote in sorted(counts):
        if counts[quote] % 2:
            pos = last[quote]
            return (
                Diagnostic.warning(codes.UNBALANCED_QUOTE, f"unbalanced {quote} quote")
                .span(Span(pos, pos + 1), "no matching quote")
                .note("quote characters are stripped, so the literal merges with the surrounding text")
            )
    return None


def check_unbalanced_parentheses(statement: str) -> Diagnostic | None:
    """Warn when a statement has a ``(`` without ``)`` or the reverse.

    The span of an unmatched ``)`` is an offset into ``statement``.
    """
    depth = 0
    for i, ch in enumerate(statement):
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return (
                    Diagnostic.warning(codes.UNBALANCED_PARENTHESES, "unmatched ')'")
                    .span(Span(i, i + 1), "no opening parenthesis")
                )
            depth -= 1
    if depth:
        return (
            Diagnostic.warning(codes.UNBALANCED_PARENTHESES, f"{depth} unclosed '('")
            .note("subqueries inside an unclosed parenthesis are not reported")
        )
    return None


def check_empty_statements(text: str) -> Diagnostic | None:
    """Report empty statements between separators, e.g. ``;;;``."""
    empty = count_empty_segments(text)
    if not empty:
        return None
    return Diagnostic.info(
        codes.EMPTY_STATEMENT, f"{empty} empty statement(s) skipped"
    )


def check_unknown_method(statement: str, method: Method) -> Diagnostic | None:
    """Error when a statement does not start with a recognized command."""
    if method != Method.NONE:
        return None
    head = statement.split(None, 1)[0] if statement.split() else ""
    return (
        Diagnostic.error(codes.UNKNOWN_METHOD, f"unrecognized statement: {head[:32]}")
        .note("recognized: " + ", ".join(m.value for m in Method if m != Method.NONE))
    )


def check_missing_table(statement: str, method: Method, refs: TableRefs) -> Diagnostic | None:
    """Warn when a recognized statement names no table."""
    if method == Method.NONE or refs.all():
        return None
    return Diagnostic.warning(
        codes.NO_TABLE, f"no table found in {method.value} statement"
    )
