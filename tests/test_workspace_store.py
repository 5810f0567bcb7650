"""Tests for YAML-backed workspaces."""

import tempfile
from pathlib import Path

import pytest
import yaml

from notemancy_lsp.adapters.workspace_store import YamlWorkspaceStore
from notemancy_lsp.core.errors import WorkspaceError


@pytest.fixture
def store():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield YamlWorkspaceStore(Path(tmpdir))


def test_create_writes_yaml_file(store):
    store.create("reading", store.vault_root / "papers" / "a.md")
    path = store.vault_root / ".notemancy" / "workspaces" / "reading.yaml"
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {"name": "reading", "notes": ["papers/a.md"]}
    assert store.list_workspaces() == ["reading"]


def test_create_twice_fails(store):
    store.create("reading", store.vault_root / "a.md")
    with pytest.raises(WorkspaceError, match="already exists"):
        store.create("reading", store.vault_root / "b.md")


def test_append_and_remove(store):
    store.create("reading", store.vault_root / "a.md")
    store.append("reading", store.vault_root / "b.md")
    assert store.notes("reading") == ["a.md", "b.md"]
    store.remove("reading", store.vault_root / "a.md")
    assert store.notes("reading") == ["b.md"]


def test_append_duplicate_fails(store):
    store.create("reading", store.vault_root / "a.md")
    with pytest.raises(WorkspaceError, match="already in"):
        store.append("reading", store.vault_root / "a.md")


def test_append_to_missing_workspace_fails(store):
    with pytest.raises(WorkspaceError, match="does not exist"):
        store.append("missing", store.vault_root / "a.md")
    assert store.list_workspaces() == []


def test_remove_absent_note_fails(store):
    store.create("reading", store.vault_root / "a.md")
    with pytest.raises(WorkspaceError, match="not in"):
        store.remove("reading", store.vault_root / "b.md")


def test_notes_outside_vault_are_absolute(store):
    with tempfile.TemporaryDirectory() as other:
        outside = Path(other) / "scratch.md"
        store.create("misc", outside)
        assert store.notes("misc") == [str(outside.absolute())]


@pytest.mark.parametrize("name", ["", "../escape", "a/b", ".hidden"])
def test_invalid_names(store, name):
    with pytest.raises(WorkspaceError, match="Invalid"):
        store.create(name, store.vault_root / "a.md")


def test_corrupt_workspace_file(store):
    store.dir.mkdir(parents=True)
    (store.dir / "bad.yaml").write_text("notes: [unclosed\n", encoding="utf-8")
    with pytest.raises(WorkspaceError, match="not valid YAML"):
        store.notes("bad")
