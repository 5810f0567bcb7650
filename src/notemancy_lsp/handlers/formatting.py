from pathlib import Path

from lsprotocol import types as lsp
from pygls.uris import to_fs_path

from ..core.ports import WorkspaceStore
from ..format.formatter import MarkdownFormatter, format_note


def full_document_range(text: str) -> lsp.Range:
    """Range from the first character to the very end of `text`."""
    lines = text.split("\n")
    end = lsp.Position(line=len(lines) - 1, character=len(lines[-1]))
    return lsp.Range(start=lsp.Position(line=0, character=0), end=end)


def note_path(uri: str) -> Path | None:
    """Filesystem path behind a document URI, None unless it is a file: URI."""
    if not uri.startswith("file:"):
        return None
    path = to_fs_path(uri)
    return Path(path) if path else None


def format_document(
    text: str,
    uri: str,
    workspaces: WorkspaceStore,
    formatter: MarkdownFormatter,
) -> list[lsp.TextEdit] | None:
    """Run directives, canonicalize, and replace the document if it changed."""
    result = format_note(text, note_path(uri), workspaces, formatter)
    if not result.changed:
        return None
    return [lsp.TextEdit(range=full_document_range(text), new_text=result.formatted_text)]
