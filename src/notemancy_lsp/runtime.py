"""Runtime wiring helper for the language server."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_notes import FsNoteIndex
from .adapters.markdown_parser import MarkdownParser
from .adapters.workspace_store import YamlWorkspaceStore
from .adapters.yaml_codec import YamlFrontmatter
from .config import NotemancyConfig, SearchConfig, load_config
from .core.errors import ConfigError
from .core.ports import NoteIndex, WorkspaceStore
from .format.formatter import MarkdownFormatter
from .search import FuzzyMatcher


@dataclass
class Runtime:
    """Container for all wired components."""
    notes: NoteIndex
    workspaces: WorkspaceStore
    matcher: FuzzyMatcher
    formatter: MarkdownFormatter
    config: NotemancyConfig | None = None


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """
    Build and wire all components for a vault.

    `vault_path` overrides the configured default vault; with it and no
    explicit `config_path`, no config file is needed at all.

    Raises:
        ConfigError: the vault root cannot be determined
    """
    config = None
    search = SearchConfig()
    if vault_path is None or config_path is not None:
        config = load_config(config_path)
        search = config.search
        if vault_path is None:
            vault_path = config.vault_root()
    if not vault_path.expanduser().is_dir():
        raise ConfigError(f"Vault directory {vault_path} does not exist")

    notes = FsNoteIndex(vault_path, YamlFrontmatter())
    workspaces = YamlWorkspaceStore(vault_path)
    formatter = MarkdownFormatter(MarkdownParser())

    return Runtime(
        notes=notes,
        workspaces=workspaces,
        matcher=FuzzyMatcher(search),
        formatter=formatter,
        config=config,
    )
