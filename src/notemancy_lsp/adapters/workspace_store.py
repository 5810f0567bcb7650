"""Workspace groupings stored as YAML files inside the vault."""

import re
from pathlib import Path

import yaml

from ..core.errors import WorkspaceError
from ..core.ports import WorkspaceStore

WORKSPACE_DIR = Path(".notemancy") / "workspaces"
NAME_RE = re.compile(r"^[\w][\w.-]*$")


class YamlWorkspaceStore(WorkspaceStore):
    """
    One file per workspace: <vault>/.notemancy/workspaces/<name>.yaml

        name: reading-list
        notes:
          - papers/attention.md
          - /elsewhere/scratch.md

    Notes inside the vault are stored vault-relative, others by absolute path.
    """

    def __init__(self, vault_root: Path):
        self.vault_root = vault_root.expanduser().absolute()
        self.dir = self.vault_root / WORKSPACE_DIR

    def _path(self, name: str) -> Path:
        if not NAME_RE.match(name):
            raise WorkspaceError(f"Invalid workspace name '{name}'")
        return self.dir / f"{name}.yaml"

    def _ref(self, note: Path) -> str:
        note = note.expanduser().absolute()
        try:
            return note.relative_to(self.vault_root).as_posix()
        except ValueError:
            return str(note)

    def exists(self, name: str) -> bool:
        return self._path(name).exists()

    def list_workspaces(self) -> list[str]:
        if not self.dir.is_dir():
            return []
        return sorted(p.stem for p in self.dir.glob("*.yaml"))

    def notes(self, name: str) -> list[str]:
        path = self._path(name)
        if not path.exists():
            raise WorkspaceError(f"Workspace '{name}' does not exist")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise WorkspaceError(f"Workspace '{name}' is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise WorkspaceError(f"Workspace '{name}' is not a mapping")
        return [str(n) for n in data.get("notes") or []]

    def _write(self, name: str, notes: list[str]) -> None:
        path = self._path(name)
        self.dir.mkdir(parents=True, exist_ok=True)
        contents = yaml.safe_dump(
            {"name": name, "notes": notes}, sort_keys=False, allow_unicode=True
        )
        # Atomic write using temp file
        tmp_path = path.with_suffix(".yaml.tmp")
        try:
            tmp_path.write_text(contents, encoding="utf-8")
            tmp_path.replace(path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def create(self, name: str, note: Path) -> None:
        if self.exists(name):
            raise WorkspaceError(f"Workspace '{name}' already exists")
        self._write(name, [self._ref(note)])

    def append(self, name: str, note: Path) -> None:
        notes = self.notes(name)
        ref = self._ref(note)
        if ref in notes:
            raise WorkspaceError(f"Note '{ref}' is already in workspace '{name}'")
        notes.append(ref)
        self._write(name, notes)

    def remove(self, name: str, note: Path) -> None:
        notes = self.notes(name)
        ref = self._ref(note)
        if ref not in notes:
            raise WorkspaceError(f"Note '{ref}' is not in workspace '{name}'")
        notes.remove(ref)
        self._write(name, notes)
