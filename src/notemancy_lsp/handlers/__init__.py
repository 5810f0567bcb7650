"""Request handlers: each turns one document snapshot into a protocol result."""

from .completion import wiki_link_completions
from .formatting import format_document
from .goto import goto_wikilink
from .hover import hover_wikilink
from .symbols import document_symbols, workspace_symbols

__all__ = [
    "document_symbols",
    "format_document",
    "goto_wikilink",
    "hover_wikilink",
    "wiki_link_completions",
    "workspace_symbols",
]
