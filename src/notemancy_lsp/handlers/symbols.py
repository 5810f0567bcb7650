import logging

from lsprotocol import types as lsp
from pygls.uris import from_fs_path

from ..core.headings import iter_headings
from ..core.model import Heading
from ..core.ports import NoteIndex
from ..search import FuzzyMatcher

logger = logging.getLogger(__name__)


def _line_range(heading: Heading) -> lsp.Range:
    return lsp.Range(
        start=lsp.Position(line=heading.line, character=0),
        end=lsp.Position(line=heading.line, character=heading.length),
    )


def document_symbols(text: str) -> list[lsp.DocumentSymbol]:
    """
    One symbol per heading, spanning its whole line.

    Headings are returned flat, in document order, whatever their level.
    """
    symbols = []
    for heading in iter_headings(text):
        line_range = _line_range(heading)
        symbols.append(
            lsp.DocumentSymbol(
                name=heading.name,
                kind=lsp.SymbolKind.Namespace,
                range=line_range,
                selection_range=line_range,
            )
        )
    return symbols


def workspace_symbols(
    query: str, notes: NoteIndex, matcher: FuzzyMatcher
) -> list[lsp.SymbolInformation]:
    """
    Headings across the whole vault.

    With a non-empty `query` only headings the matcher accepts are kept,
    best match first.
    """
    symbols = []
    for note in notes.list_notes():
        path = notes.absolute(note)
        try:
            text = notes.read_text(note)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            continue
        uri = from_fs_path(str(path))
        if uri is None:
            logger.warning("Invalid file path: %s", path)
            continue
        for heading in iter_headings(text):
            symbols.append(
                lsp.SymbolInformation(
                    name=heading.name,
                    kind=lsp.SymbolKind.String,
                    location=lsp.Location(uri=uri, range=_line_range(heading)),
                    container_name=note,
                )
            )

    if query:
        symbols = matcher.rank(query, symbols, key=lambda s: s.name)
    return symbols
