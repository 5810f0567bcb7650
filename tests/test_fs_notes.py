"""Tests for the filesystem note index."""

import pytest

from conftest import write_note
from notemancy_lsp.adapters.fs_notes import FsNoteIndex
from notemancy_lsp.adapters.yaml_codec import YamlFrontmatter
from notemancy_lsp.core.errors import TitleNotFoundError


def test_list_notes(vault):
    notes = FsNoteIndex(vault).list_notes()
    assert notes == ["alpha.md", "sub/beta.md", "untitled.md"]


def test_list_notes_missing_root(vault):
    assert FsNoteIndex(vault / "missing").list_notes() == []


def test_title_from_frontmatter(vault):
    assert FsNoteIndex(vault).get_title("alpha.md") == "Alpha"


def test_title_from_first_level_one_heading(vault):
    assert FsNoteIndex(vault).get_title("sub/beta.md") == "Beta"


def test_title_ignores_deeper_headings(vault):
    write_note(vault, "deep.md", "## Not it\n# It\n")
    assert FsNoteIndex(vault).get_title("deep.md") == "It"


def test_no_title(vault):
    with pytest.raises(TitleNotFoundError):
        FsNoteIndex(vault).get_title("untitled.md")


def test_malformed_frontmatter_falls_back_to_heading(vault):
    write_note(vault, "broken.md", "---\ntitle: [oops\n---\n# Heading Title\n")
    assert FsNoteIndex(vault).get_title("broken.md") == "Heading Title"


def test_missing_note_raises_oserror(vault):
    with pytest.raises(OSError):
        FsNoteIndex(vault).get_title("nope.md")


def test_absolute(vault):
    index = FsNoteIndex(vault)
    assert index.absolute("sub/beta.md") == vault.absolute() / "sub" / "beta.md"


def test_frontmatter_decode():
    meta, body = YamlFrontmatter().decode("---\ntitle: T\ntags: [a]\n---\nbody\n")
    assert meta == {"title": "T", "tags": ["a"]}
    assert body == "body\n"


def test_frontmatter_absent_or_not_a_mapping():
    assert YamlFrontmatter().decode("# plain\n") == ({}, "# plain\n")
    meta, body = YamlFrontmatter().decode("---\n- a\n---\nbody\n")
    assert meta == {}
    assert body == "body\n"
