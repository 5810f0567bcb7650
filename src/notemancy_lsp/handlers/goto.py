import logging

from lsprotocol import types as lsp
from pygls.uris import from_fs_path

from ..core.ports import NoteIndex
from ..core.wikilinks import link_at_position

logger = logging.getLogger(__name__)


def goto_wikilink(
    text: str, position: lsp.Position, notes: NoteIndex
) -> lsp.Location | None:
    """Jump to the start of the note a wiki-link under the cursor points at."""
    occurrence = link_at_position(text, position.line, position.character)
    if occurrence is None:
        return None

    path = notes.absolute(occurrence.target)
    uri = from_fs_path(str(path))
    if uri is None:
        logger.warning("Failed to create file URI from path: %s", path)
        return None

    origin = lsp.Position(line=0, character=0)
    return lsp.Location(uri=uri, range=lsp.Range(start=origin, end=origin))
