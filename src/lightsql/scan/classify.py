"""Classify a statement by its leading command keyword."""

from __future__ import annotations

from lightsql.scan._scanner import keyword_words, match_keyword
from lightsql.scan._types import Method

# Multi-word forms come first so CREATE TABLE / CREATE INDEX win before any
# shorter keyword gets a chance.
_PRIORITY: tuple[tuple[Method, tuple[str, ...]], ...] = tuple(
    (m, keyword_words(m.value))
    for m in (
        Method.CREATE_TABLE,
        Method.CREATE_INDEX,
        Method.SELECT,
        Method.INSERT,
        Method.UPDATE,
        Method.DELETE,
        Method.DROP,
        Method.ALTER,
        Method.TRUNCATE,
    )
)


def classify(statement: str) -> Method:
    """Return the command keyword at the start of ``statement``.

    Matching is anchored at the first non-whitespace character, so a table
    literally named ``select`` elsewhere in the text never counts. A bare
    ``CREATE`` followed by anything other than ``TABLE`` or ``INDEX`` is
    unrecognized.
    """
    text = statement.lstrip()
    if not text:
        return Method.NONE
    for method, words in _PRIORITY:
        if match_keyword(text, 0, words) != -1:
            return method
    return Method.NONE
