"""Field extraction: select list, INSERT column list, SET assignments."""

from __future__ import annotations

import re

from lightsql.scan._scanner import (
    find_keyword,
    match_keyword,
    matching_paren,
    read_identifier,
    split_top_level,
    split_words,
)
from lightsql.scan._types import Method

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]*$")

# A trailing word after one of these is part of the expression, not an alias.
_EXPRESSION_WORDS = frozenset({
    "AND", "OR", "NOT", "IS", "IN", "LIKE", "ILIKE", "BETWEEN", "CASE", "WHEN",
    "THEN", "ELSE", "DISTINCT", "INTERVAL", "COLLATE", "ESCAPE",
})
# Words that end an expression and can never be an alias themselves.
_RESERVED_TAIL = frozenset({"END", "NULL", "TRUE", "FALSE", "ASC", "DESC"})

_OPERATOR_TAIL = "+-*/%=<>!|&^~"

_SELECT_MODIFIERS = (("DISTINCT",), ("ALL",))

_SET_TERMINATORS = ("WHERE", "ORDER BY", "LIMIT", "ON DUPLICATE KEY UPDATE", "RETURNING")


def extract_fields(statement: str, method: Method) -> list[str]:
    """Extract field references from one normalized statement.

    The result keeps the source order and count: a column listed twice is
    returned twice.
    """
    if method == Method.SELECT:
        return _select_fields(statement)
    if method == Method.INSERT:
        columns = _insert_columns(statement)
        if columns:
            return columns
        return _assignment_targets(statement)
    if method == Method.UPDATE:
        return _assignment_targets(statement)
    return []


def strip_alias(entry: str) -> str:
    """Drop an ``AS alias`` or bare trailing alias from a select-list entry."""
    as_start, _ = find_keyword(entry, "AS")
    if as_start > 0:
        return entry[:as_start].strip()

    words = split_words(entry)
    if len(words) < 2:
        return entry.strip()
    alias, previous = words[-1], words[-2]
    if (
        _IDENTIFIER_RE.match(alias)
        and alias.upper() not in _RESERVED_TAIL
        and previous.upper() not in _EXPRESSION_WORDS
        and not previous.endswith(tuple(_OPERATOR_TAIL))
    ):
        return " ".join(words[:-1])
    return entry.strip()


def _select_fields(statement: str) -> list[str]:
    _, select_end = find_keyword(statement, "SELECT")
    if select_end == -1:
        return []
    from_start, _ = find_keyword(statement, "FROM", select_end)
    segment = statement[select_end:] if from_start == -1 else statement[select_end:from_start]

    segment = segment.strip()
    for words in _SELECT_MODIFIERS:
        end = match_keyword(segment, 0, words)
        if end != -1:
            segment = segment[end:]
            break

    return [strip_alias(entry) for entry in split_top_level(segment)]


def _insert_columns(statement: str) -> list[str]:
    _, into_end = find_keyword(statement, "INTO")
    if into_end == -1:
        return []
    _, pos = read_identifier(statement, into_end)
    while pos < len(statement) and statement[pos].isspace():
        pos += 1
    if pos >= len(statement) or statement[pos] != "(":
        return []
    close = matching_paren(statement, pos)
    if close == -1:
        return []
    return split_top_level(statement[pos + 1 : close])


def _assignment_targets(statement: str) -> list[str]:
    _, set_end = find_keyword(statement, "SET")
    if set_end == -1:
        return []
    stop, _ = find_keyword(statement, _SET_TERMINATORS, set_end)
    segment = statement[set_end:] if stop == -1 else statement[set_end:stop]

    targets: list[str] = []
    for assignment in split_top_level(segment):
        target, eq, _ = assignment.partition("=")
        if eq and target.strip():
            targets.append(target.strip())
    return targets
