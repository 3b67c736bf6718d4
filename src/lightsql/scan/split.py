"""Split normalized SQL into independent statements."""

from __future__ import annotations

from lightsql.scan._scanner import iter_top_level, match_keyword

_UNION = ("UNION",)
_UNION_ALL = ("UNION", "ALL")


def _separators(text: str) -> list[tuple[int, int]]:
    """Top-level ``;`` and ``UNION [ALL]`` spans, in order of appearance."""
    spans: list[tuple[int, int]] = []
    resume = 0
    for i in iter_top_level(text):
        if i < resume:
            continue
        if text[i] == ";":
            spans.append((i, i + 1))
            continue
        end = match_keyword(text, i, _UNION_ALL)
        if end == -1:
            end = match_keyword(text, i, _UNION)
        if end != -1:
            spans.append((i, end))
            resume = end
    return spans


def split_statements(text: str) -> list[str]:
    """Split ``text`` at top-level ``;``, ``UNION`` and ``UNION ALL``.

    The separators themselves are dropped. Statements are trimmed and empty
    segments (``;;;``, a trailing ``;``, a bare ``UNION``) are skipped.
    Separators nested inside parentheses never split.
    """
    statements: list[str] = []
    last = 0
    for begin, end in _separators(text):
        statements.append(text[last:begin])
        last = end
    statements.append(text[last:])
    return [s.strip() for s in statements if s.strip()]


def count_empty_segments(text: str) -> int:
    """Number of whitespace-only segments that sit before a separator.

    Whatever follows the final separator is not counted, so a single trailing
    ``;`` is not reported.
    """
    count = 0
    last = 0
    for begin, end in _separators(text):
        if not text[last:begin].strip():
            count += 1
        last = end
    return count
