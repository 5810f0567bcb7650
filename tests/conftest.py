"""Shared fixtures: a small on-disk vault."""

import tempfile
from pathlib import Path

import pytest


def write_note(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def vault():
    """Vault with titled, untitled, nested and hidden notes."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "vault"
        root.mkdir()
        write_note(root, "alpha.md", "---\ntitle: Alpha\n---\n# Design Doc\n\nBody of alpha.\n")
        write_note(root, "sub/beta.md", "# Beta\n\n## Design\n\n### Random\n")
        write_note(root, "untitled.md", "just some text\n")
        write_note(root, ".hidden/secret.md", "# Secret\n")
        write_note(root, "readme.txt", "# Not a note\n")
        yield root
