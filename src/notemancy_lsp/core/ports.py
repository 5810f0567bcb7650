from pathlib import Path
from typing import Iterable, Protocol

from .model import NotePath


class NoteIndex(Protocol):
    """
    Read-only view of the note corpus, addressed by vault-relative paths.
    """

    root: Path

    def list_notes(self) -> Iterable[NotePath]:
        pass

    def get_title(self, note: NotePath) -> str:
        pass

    def read_text(self, note: NotePath) -> str:
        pass

    def absolute(self, note: NotePath) -> Path:
        pass


class WorkspaceStore(Protocol):
    """
    Named groupings of notes. Every call raises WorkspaceError when the
    grouping cannot be changed as asked.
    """

    def create(self, name: str, note: Path) -> None:
        pass

    def append(self, name: str, note: Path) -> None:
        pass

    def remove(self, name: str, note: Path) -> None:
        pass
