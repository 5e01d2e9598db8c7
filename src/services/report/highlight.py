"""
Marketable-quote highlighting inside translated text.

Matches are case-insensitive and literal. Overlapping or touching matches
from different quotes are merged so each character is highlighted at most
once.
"""

import html
import re
from collections.abc import Iterable

from src.core.utils import escape_markdown


def find_highlight_spans(text: str, quotes: Iterable[str]) -> list[tuple[int, int]]:
    """Return sorted, merged ``(start, end)`` spans of every quote occurrence.

    Args:
        text: Text to search (usually a section translation).
        quotes: Quote strings, matched exactly as given (surrounding
            whitespace included). Blank entries are ignored.

    Returns:
        Non-overlapping spans in ascending order.
    """
    spans: list[tuple[int, int]] = []
    for quote in {q for q in quotes if q and q.strip()}:
        pattern = re.compile(re.escape(quote), re.IGNORECASE)
        # Step one character at a time so self-overlapping repeats are all found.
        pos = 0
        while True:
            match = pattern.search(text, pos)
            if match is None:
                break
            spans.append((match.start(), match.end()))
            pos = match.start() + 1

    spans.sort()
    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def highlight_segments(text: str, quotes: Iterable[str] | None) -> list[tuple[str, bool]]:
    """Split ``text`` into ``(chunk, is_highlighted)`` pieces.

    Without quotes, or when none match, returns ``[(text, False)]``.
    """
    spans = find_highlight_spans(text, quotes or ())
    if not spans:
        return [(text, False)]

    segments: list[tuple[str, bool]] = []
    cursor = 0
    for start, end in spans:
        if start > cursor:
            segments.append((text[cursor:start], False))
        segments.append((text[start:end], True))
        cursor = end
    if cursor < len(text):
        segments.append((text[cursor:], False))
    return segments


def _escape(chunk: str) -> str:
    # quote=False: entities such as &#x27; would not survive escaping "#"
    return escape_markdown(html.escape(chunk, quote=False))


def highlight_html(text: str, quotes: Iterable[str] | None, tag: str = "mark") -> str:
    """Render ``text`` for ``st.markdown`` with quote matches wrapped in ``tag``.

    Each chunk is HTML-escaped and then markdown-escaped, so only the ``tag``
    elements are interpreted.
    """
    return "".join(
        f"<{tag}>{_escape(chunk)}</{tag}>" if marked else _escape(chunk)
        for chunk, marked in highlight_segments(text, quotes)
    )
