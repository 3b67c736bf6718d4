"""Top-level keyword and parenthesis scanning primitives.

All scanners operate on normalized text (no comments, no quote characters),
so parenthesis matching is plain depth counting. "Top-level" always means
depth zero relative to the start of the text being scanned.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

# Characters that terminate an identifier token.
_TOKEN_STOP = frozenset("(),;")


def is_word_char(ch: str) -> bool:
    """True for characters that can be part of an identifier or keyword."""
    return ch.isalnum() or ch in "_$.@#"


def keyword_words(keyword: str) -> tuple[str, ...]:
    """Split a keyword phrase like ``"inner  join"`` into ``("INNER", "JOIN")``."""
    return tuple(w.upper() for w in keyword.split())


def match_keyword(text: str, pos: int, words: tuple[str, ...]) -> int:
    """Match a keyword phrase at ``pos``; return the end offset or -1.

    Each word must match case-insensitively on whole-word boundaries, and
    consecutive words must be separated by at least one whitespace character.
    """
    if not words:
        return -1
    if pos > 0 and is_word_char(text[pos - 1]):
        return -1

    i = pos
    for n, word in enumerate(words):
        if n > 0:
            start = i
            while i < len(text) and text[i].isspace():
                i += 1
            if i == start:
                return -1
        end = i + len(word)
        if text[i:end].upper() != word:
            return -1
        if end < len(text) and is_word_char(text[end]):
            return -1
        i = end
    return i


def iter_top_level(text: str, start: int = 0) -> Iterator[int]:
    """Yield every offset from ``start`` that sits at paren depth zero.

    Offsets of parentheses themselves are not yielded. A stray ``)`` never
    drives the depth below zero.
    """
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth > 0:
                depth -= 1
        elif depth == 0:
            yield i


def iter_keywords(
    text: str,
    keywords: Iterable[str],
    start: int = 0,
) -> Iterator[tuple[int, int, str]]:
    """Yield ``(start, end, keyword)`` for each top-level keyword occurrence.

    At any position the longest matching phrase wins, and scanning resumes
    after the end of a match, so ``LEFT JOIN`` is reported once rather than
    as both ``LEFT JOIN`` and ``JOIN``.
    """
    phrases = sorted(
        {keyword_words(k) for k in keywords if k.strip()},
        key=lambda words: sum(len(w) for w in words) + len(words),
        reverse=True,
    )
    resume = start
    for i in iter_top_level(text, start):
        if i < resume:
            continue
        for words in phrases:
            end = match_keyword(text, i, words)
            if end != -1:
                yield i, end, " ".join(words)
                resume = end
                break


def find_keyword(text: str, keywords: Iterable[str] | str, start: int = 0) -> tuple[int, int]:
    """Return ``(start, end)`` of the first top-level keyword match, or ``(-1, -1)``."""
    if isinstance(keywords, str):
        keywords = (keywords,)
    for begin, end, _ in iter_keywords(text, keywords, start):
        return begin, end
    return -1, -1


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on ``sep`` at paren depth zero. Parts are trimmed, empties dropped."""
    parts: list[str] = []
    last = 0
    for i in iter_top_level(text):
        if text[i] == sep:
            parts.append(text[last:i])
            last = i + 1
    parts.append(text[last:])
    return [p.strip() for p in parts if p.strip()]


def split_words(text: str) -> list[str]:
    """Split on whitespace at paren depth zero, keeping parenthesized groups whole."""
    words: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        if ch.isspace() and depth == 0:
            if current:
                words.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        words.append("".join(current))
    return words


def read_identifier(text: str, pos: int) -> tuple[str, int]:
    """Skip whitespace at ``pos`` and read an identifier token.

    Returns the token (possibly empty) and the offset just after it. Tokens
    stop at whitespace and at ``( ) , ;``.
    """
    i = pos
    while i < len(text) and text[i].isspace():
        i += 1
    begin = i
    while i < len(text) and not text[i].isspace() and text[i] not in _TOKEN_STOP:
        i += 1
    return text[begin:i], i


def matching_paren(text: str, open_pos: int) -> int:
    """Return the offset of the ``)`` closing ``text[open_pos]``, or -1."""
    depth = 0
    for i in range(open_pos, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def paren_spans(text: str) -> list[tuple[int, int]]:
    """Return ``(open, close)`` for every balanced paren pair, ordered by ``open``.

    An unmatched ``(`` produces no span; an unmatched ``)`` is ignored.
    """
    stack: list[int] = []
    spans: list[tuple[int, int]] = []
    for i, ch in enumerate(text):
        if ch == "(":
            stack.append(i)
        elif ch == ")" and stack:
            spans.append((stack.pop(), i))
    spans.sort()
    return spans


def unique(values: Iterable[str]) -> list[str]:
    """Deduplicate preserving first-seen order."""
    return list(dict.fromkeys(values))
