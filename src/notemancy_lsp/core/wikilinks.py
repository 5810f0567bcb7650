"""Locate wiki-links around a cursor position."""

import re
from collections.abc import Iterator

from .model import LinkOccurrence
from .utils import line_at

# [[ target ]] or [[ target | title ]]; whitespace around either part is dropped
WIKILINK_RE = re.compile(
    r"\[\[\s*(?P<target>[^|\]]+?)\s*(?:\|\s*(?P<title>[^\]]+?)\s*)?\]\]"
)
OPEN = "[["
CLOSE = "]]"


def _scan(line: str) -> Iterator[LinkOccurrence]:
    # every syntactic match, empty targets included
    for m in WIKILINK_RE.finditer(line):
        title = (m.group("title") or "").strip()
        yield LinkOccurrence(
            start=m.start(),
            end=m.end(),
            target=m.group("target").strip(),
            title=title or None,
        )


def iter_links(line: str) -> Iterator[LinkOccurrence]:
    """Yield every wiki-link on a single line, left to right."""
    for occurrence in _scan(line):
        if occurrence.target:
            yield occurrence


def link_at(line: str, cursor: int) -> LinkOccurrence | None:
    """
    Find the wiki-link enclosing `cursor` on `line`.

    A cursor sitting on either delimiter (offset `start` or `end`) is still
    inside. Should malformed text produce two spans containing the cursor,
    the leftmost wins; if that one has a blank target there is no link.
    """
    for occurrence in _scan(line):
        if occurrence.contains(cursor):
            return occurrence if occurrence.target else None
    return None


def link_at_position(text: str, line: int, character: int) -> LinkOccurrence | None:
    """Run `link_at` against line `line` of a whole document."""
    current = line_at(text, line)
    if current is None:
        return None
    return link_at(current, character)


def is_inside_wiki_link(line: str, cursor: int) -> bool:
    """
    Coarse check used to gate completions.

    True when the nearest "[[" before the cursor is still open, or when its
    closing "]]" lies at or after the cursor.
    """
    start = line[:cursor].rfind(OPEN)
    if start == -1:
        return False
    close = line.find(CLOSE, start)
    if close == -1:
        return True
    return cursor <= close


def cursor_in_wiki_link(text: str, line: int, character: int) -> bool:
    """Run `is_inside_wiki_link` against line `line` of a whole document."""
    current = line_at(text, line)
    if current is None:
        return False
    return is_inside_wiki_link(current, character)
