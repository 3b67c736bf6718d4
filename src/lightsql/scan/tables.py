"""Table extraction: primary target, FROM-list members and JOIN targets."""

from __future__ import annotations

from collections.abc import Sequence

from lightsql.scan._scanner import (
    find_keyword,
    iter_keywords,
    keyword_words,
    match_keyword,
    read_identifier,
    split_top_level,
    unique,
)
from lightsql.scan._types import Method, TableRefs

DEFAULT_JOIN_KEYWORDS: tuple[str, ...] = (
    "JOIN",
    "INNER JOIN",
    "LEFT JOIN",
    "RIGHT JOIN",
    "OUTER JOIN",
)

# Clauses that close the FROM list of a SELECT (joins are added per call).
_FROM_TERMINATORS = ("WHERE", "GROUP BY", "ORDER BY", "HAVING", "LIMIT")

_IF_EXISTS = ("IF NOT EXISTS", "IF EXISTS")

# Clause keywords that can follow a command when its table name is missing.
_CLAUSE_KEYWORDS = frozenset({"SET", "VALUES", "WHERE", "SELECT", "FROM", "TABLE"})


def extract_tables(
    statement: str,
    method: Method,
    *,
    join_keywords: Sequence[str] = DEFAULT_JOIN_KEYWORDS,
) -> TableRefs:
    """Extract table references from one normalized statement.

    Aliases (``users u``, ``orders AS o``) are discarded: only the first token
    of each FROM-list entry and the token right after each join keyword is
    kept. Derived tables in parentheses are skipped.
    """
    if method == Method.SELECT:
        return _select_tables(statement, join_keywords)

    primary: str | None = None
    if method == Method.INSERT:
        primary = _identifier_after(statement, "INTO")
    elif method == Method.UPDATE:
        primary = _identifier_after(statement, "UPDATE")
    elif method == Method.DELETE:
        primary = _identifier_after(statement, "FROM")
    elif method in (Method.CREATE_TABLE, Method.DROP, Method.ALTER):
        primary = _identifier_after(statement, "TABLE", skip=_IF_EXISTS)
    elif method == Method.TRUNCATE:
        primary = _identifier_after(statement, "TABLE") or _identifier_after(
            statement, "TRUNCATE"
        )
    elif method == Method.CREATE_INDEX:
        primary = _identifier_after(statement, "ON")

    return TableRefs(primary=primary)


def has_join(statement: str, *, join_keywords: Sequence[str] = DEFAULT_JOIN_KEYWORDS) -> bool:
    """True if ``statement`` contains a top-level join keyword."""
    return find_keyword(statement, join_keywords)[0] != -1


def _select_tables(statement: str, join_keywords: Sequence[str]) -> TableRefs:
    refs = TableRefs()

    _, from_end = find_keyword(statement, "FROM")
    if from_end != -1:
        stop, _ = find_keyword(statement, (*_FROM_TERMINATORS, *join_keywords), from_end)
        segment = statement[from_end:] if stop == -1 else statement[from_end:stop]
        for entry in split_top_level(segment):
            table = _table_token(entry, 0)
            if table:
                refs.plain.append(table)

    for _, end, _ in iter_keywords(statement, join_keywords):
        table = _table_token(statement, end)
        if table:
            refs.joined.append(table)

    refs.plain = unique(refs.plain)
    refs.joined = unique(refs.joined)
    refs.primary = refs.plain[0] if refs.plain else None
    return refs


def _table_token(text: str, pos: int) -> str | None:
    """Identifier at ``pos``, or None for a derived table or nothing at all."""
    token, _ = read_identifier(text, pos)
    return token or None


def _identifier_after(
    statement: str,
    keyword: str,
    *,
    skip: Sequence[str] = (),
) -> str | None:
    _, end = find_keyword(statement, keyword)
    if end == -1:
        return None
    if skip:
        pos = end
        while pos < len(statement) and statement[pos].isspace():
            pos += 1
        for phrase in skip:
            skip_end = match_keyword(statement, pos, keyword_words(phrase))
            if skip_end != -1:
                end = skip_end
                break
    token = _table_token(statement, end)
    if token is not None and token.upper() in _CLAUSE_KEYWORDS:
        return None
    return token
