"""Tests for completion, hover, goto and symbol handlers."""

from lsprotocol import types as lsp
from pygls.uris import from_fs_path

from notemancy_lsp.adapters.fs_notes import FsNoteIndex
from notemancy_lsp.handlers import (
    document_symbols,
    goto_wikilink,
    hover_wikilink,
    wiki_link_completions,
    workspace_symbols,
)
from notemancy_lsp.search import FuzzyMatcher


def pos(line, character):
    return lsp.Position(line=line, character=character)


def test_completions_inside_link(vault):
    result = wiki_link_completions("see [[", pos(0, 6), FsNoteIndex(vault))
    assert result.is_incomplete is False
    assert [item.label for item in result.items] == ["Alpha", "Beta"]
    alpha = result.items[0]
    assert alpha.insert_text == "[[Alpha]]"
    assert alpha.detail == "alpha.md"
    assert alpha.kind == lsp.CompletionItemKind.File


def test_no_completions_outside_link(vault):
    notes = FsNoteIndex(vault)
    assert wiki_link_completions("see [[N", pos(0, 2), notes) is None
    assert wiki_link_completions("[[a]] after", pos(0, 9), notes) is None


def test_hover_shows_target_contents(vault):
    text = "intro\nsee [[sub/beta.md|Beta]] here\n"
    hover = hover_wikilink(text, pos(1, 8), FsNoteIndex(vault))
    assert hover.contents.kind == lsp.MarkupKind.Markdown
    assert hover.contents.value == (vault / "sub" / "beta.md").read_text(encoding="utf-8")
    assert (hover.range.start.line, hover.range.start.character) == (1, 4)
    assert (hover.range.end.line, hover.range.end.character) == (1, 24)


def test_hover_missing_target(vault):
    assert hover_wikilink("[[nope.md]]", pos(0, 3), FsNoteIndex(vault)) is None


def test_hover_outside_link(vault):
    assert hover_wikilink("no links here", pos(0, 3), FsNoteIndex(vault)) is None


def test_goto_target(vault):
    notes = FsNoteIndex(vault)
    location = goto_wikilink("[[alpha.md|Alpha]]", pos(0, 4), notes)
    assert location.uri == from_fs_path(str(notes.root / "alpha.md"))
    assert (location.range.start.line, location.range.start.character) == (0, 0)
    assert location.range.end == location.range.start


def test_goto_does_not_check_existence(vault):
    location = goto_wikilink("[[ghost.md]]", pos(0, 4), FsNoteIndex(vault))
    assert location.uri.endswith("ghost.md")


def test_goto_outside_link(vault):
    assert goto_wikilink("plain", pos(0, 1), FsNoteIndex(vault)) is None


def test_document_symbols():
    text = "# A\nnot a heading\n### B\n####### C\n"
    symbols = document_symbols(text)
    assert [s.name for s in symbols] == ["A", "B"]
    assert [s.range.start.line for s in symbols] == [0, 2]
    assert symbols[1].range.end.character == len("### B")
    assert symbols[0].kind == lsp.SymbolKind.Namespace
    assert symbols[0].selection_range == symbols[0].range


def test_document_symbols_empty():
    assert document_symbols("") == []


def test_workspace_symbols_without_query(vault):
    symbols = workspace_symbols("", FsNoteIndex(vault), FuzzyMatcher())
    assert [s.name for s in symbols] == ["Design Doc", "Beta", "Design", "Random"]
    assert symbols[0].container_name == "alpha.md"
    assert symbols[1].container_name == "sub/beta.md"
    assert symbols[0].kind == lsp.SymbolKind.String


def test_workspace_symbols_query_ranks_best_first(vault):
    symbols = workspace_symbols("Design", FsNoteIndex(vault), FuzzyMatcher())
    assert [s.name for s in symbols] == ["Design", "Design Doc"]
    design = symbols[0]
    assert design.location.uri == from_fs_path(str(vault.absolute() / "sub" / "beta.md"))
    assert design.location.range.start.line == 2
