import re
from collections.abc import Iterator

from .model import Heading
from .utils import split_lines

HEADING_RE = re.compile(r"^\s*(#{1,6})\s+(.*)$")
FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")


def iter_headings(text: str) -> Iterator[Heading]:
    """Yield ATX headings in document order, skipping fenced code."""
    fence: str | None = None

    for i, line in enumerate(split_lines(text)):
        fence_match = FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
                continue
            # closing fence: same character, at least as long, nothing after it
            if (
                marker[0] == fence[0]
                and len(marker) >= len(fence)
                and not fence_match.group(2).strip()
            ):
                fence = None
            continue

        if fence is not None:
            continue

        heading_match = HEADING_RE.match(line)
        if heading_match:
            yield Heading(
                line=i,
                level=len(heading_match.group(1)),
                name=heading_match.group(2).strip(),
                length=len(line),
            )
