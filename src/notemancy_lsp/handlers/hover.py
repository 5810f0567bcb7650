import logging

from lsprotocol import types as lsp

from ..core.ports import NoteIndex
from ..core.wikilinks import link_at_position

logger = logging.getLogger(__name__)


def hover_wikilink(
    text: str, position: lsp.Position, notes: NoteIndex
) -> lsp.Hover | None:
    """Preview the full contents of the note linked under the cursor."""
    occurrence = link_at_position(text, position.line, position.character)
    if occurrence is None:
        return None

    try:
        contents = notes.read_text(occurrence.target)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("No hover preview for %s: %s", occurrence.target, e)
        return None

    return lsp.Hover(
        contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=contents),
        range=lsp.Range(
            start=lsp.Position(line=position.line, character=occurrence.start),
            end=lsp.Position(line=position.line, character=occurrence.end),
        ),
    )
