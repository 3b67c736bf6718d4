"""Comment and quote stripping."""

from __future__ import annotations

from collections.abc import Iterator

QUOTE_CHARS = frozenset("`'\"")


def _strip_once(sql: str, strip_line_comments: bool) -> str:
    out: list[str] = []
    i = 0
    n = len(sql)
    while i < n:
        ch = sql[i]
        if ch == "/" and sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            # Unterminated: the comment runs to end of input.
            i = n if end == -1 else end + 2
            continue
        if strip_line_comments and ch == "-" and sql.startswith("--", i):
            end = sql.find("\n", i + 2)
            i = n if end == -1 else end
            continue
        if ch not in QUOTE_CHARS:
            out.append(ch)
        i += 1
    return "".join(out)


def normalize(sql: str, *, strip_line_comments: bool = False) -> str:
    """Remove block comments and every quoting character from ``sql``.

    Block comments (``/* ... */``) are removed with their content; an
    unterminated comment swallows the rest of the input. Backticks, single
    quotes and double quotes are dropped wherever they appear, paired or
    not. With ``strip_line_comments``, ``--`` comments are removed up to the
    end of the line (the newline itself is kept).

    The result is a fixed point: normalizing it again returns it unchanged.
    Removing a quote or a comment can bring a ``/`` next to a ``*`` (as in
    ``/'*``), so the pass repeats until nothing more is stripped.
    """
    text = sql
    while True:
        stripped = _strip_once(text, strip_line_comments)
        if stripped == text:
            return stripped
        text = stripped


def find_unterminated_comment(sql: str) -> int:
    """Return the offset of a ``/*`` that is never closed, or -1."""
    i = 0
    while True:
        start = sql.find("/*", i)
        if start == -1:
            return -1
        end = sql.find("*/", start + 2)
        if end == -1:
            return start
        i = end + 2


def outside_block_comments(sql: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, char)`` for every character not inside a block comment.

    Offsets index ``sql`` itself. An unterminated comment hides the rest of
    the input.
    """
    i = 0
    n = len(sql)
    while i < n:
        if sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            if end == -1:
                return
            i = end + 2
            continue
        yield i, sql[i]
        i += 1
