import logging

from lsprotocol import types as lsp

from ..core.errors import TitleNotFoundError
from ..core.ports import NoteIndex
from ..core.wikilinks import cursor_in_wiki_link

logger = logging.getLogger(__name__)


def wiki_link_completions(
    text: str, position: lsp.Position, notes: NoteIndex
) -> lsp.CompletionList | None:
    """
    Offer every titled note while the cursor is inside a [[ ... ]] span.

    Ordering and filtering are left to the editor.
    """
    if not cursor_in_wiki_link(text, position.line, position.character):
        return None

    items = []
    for note in notes.list_notes():
        try:
            title = notes.get_title(note)
        except (TitleNotFoundError, OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping %s in completions: %s", note, e)
            continue
        items.append(
            lsp.CompletionItem(
                label=title,
                kind=lsp.CompletionItemKind.File,
                insert_text=f"[[{title}]]",
                detail=note,
            )
        )

    return lsp.CompletionList(is_incomplete=False, items=items)
