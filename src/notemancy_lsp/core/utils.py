"""Utility functions for notemancy."""


def split_lines(text: str) -> list[str]:
    """
    Split document text into lines the way editors number them.

    - Lines break on "\\n"; a trailing "\\r" is dropped from each line
    - A final newline does not open an extra empty line

    Examples:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def line_at(text: str, line: int) -> str | None:
    """Return line number `line` (zero-based) of `text`, or None if out of range."""
    if line < 0:
        return None
    lines = split_lines(text)
    if line >= len(lines):
        return None
    return lines[line]
