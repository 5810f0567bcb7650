import logging
from pathlib import Path

import yaml

from ..core.errors import TitleNotFoundError
from ..core.headings import iter_headings
from ..core.model import NotePath
from ..core.ports import NoteIndex
from .yaml_codec import YamlFrontmatter

logger = logging.getLogger(__name__)


class FsNoteIndex(NoteIndex):
    """Markdown notes under a vault directory, nested folders included."""

    def __init__(self, root: Path, frontmatter: YamlFrontmatter | None = None):
        self.root = root.expanduser().absolute()
        self.frontmatter = frontmatter or YamlFrontmatter()

    def absolute(self, note: NotePath) -> Path:
        return self.root / note

    def _should_skip(self, rel: Path) -> bool:
        # hidden files and anything under a hidden directory (.git, .notemancy, ...)
        return any(part.startswith(".") for part in rel.parts)

    def list_notes(self) -> list[NotePath]:
        if not self.root.is_dir():
            return []
        notes = []
        for p in self.root.rglob("*.md"):
            rel = p.relative_to(self.root)
            if self._should_skip(rel) or not p.is_file():
                continue
            notes.append(rel.as_posix())
        return sorted(notes)

    def read_text(self, note: NotePath) -> str:
        return self.absolute(note).read_text(encoding="utf-8")

    def get_title(self, note: NotePath) -> str:
        """
        Display title of a note.

        Search order:
        1. `title` key in YAML frontmatter
        2. first level-1 heading in the body

        Raises:
            TitleNotFoundError: neither source yields a title
            OSError: the note cannot be read
        """
        text = self.read_text(note)
        try:
            meta, body = self.frontmatter.decode(text)
        except yaml.YAMLError as e:
            logger.debug("Ignoring malformed frontmatter in %s: %s", note, e)
            meta, body = {}, text

        title = meta.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()

        for heading in iter_headings(body):
            if heading.level == 1 and heading.name:
                return heading.name

        raise TitleNotFoundError(f"No title found in {note}")
