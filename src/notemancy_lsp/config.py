"""Configuration loader for config.yaml."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .core.errors import ConfigError

CONFIG_FILENAME = "config.yaml"
CONF_DIR_ENV = "NOTEMANCY_CONF_DIR"


@dataclass
class SearchConfig:
    """Fuzzy matching settings for workspace symbol queries."""
    threshold: float = 0.3  # highest score still accepted
    location: int = 0  # where in the text a match is expected
    distance: int = 80  # how far from `location` a match may drift
    max_pattern_length: int = 32
    case_sensitive: bool = False


@dataclass
class VaultEntry:
    """One named vault."""
    name: str
    vault_directory: Path
    publish_url: str | None = None


@dataclass
class NotemancyConfig:
    """Complete notemancy configuration."""
    default_vault: str
    vaults: list[VaultEntry] = field(default_factory=list)
    search: SearchConfig = field(default_factory=SearchConfig)
    path: Path | None = None

    def vault(self) -> VaultEntry:
        for entry in self.vaults:
            if entry.name == self.default_vault:
                return entry
        raise ConfigError(f"Default vault '{self.default_vault}' not found in config")

    def vault_root(self) -> Path:
        """Directory of the default vault; raises ConfigError if unusable."""
        root = self.vault().vault_directory.expanduser()
        if not root.is_dir():
            raise ConfigError(f"Vault directory {root} does not exist")
        return root


def config_search_paths(config_path: Path | None = None) -> list[Path]:
    """
    Candidate config files, in priority order.

    1. config_path (if provided)
    2. $NOTEMANCY_CONF_DIR/config.yaml
    3. ~/.config/notemancy/config.yaml
    """
    search_paths = []
    if config_path:
        search_paths.append(config_path)
    conf_dir = os.environ.get(CONF_DIR_ENV)
    if conf_dir:
        search_paths.append(Path(conf_dir) / CONFIG_FILENAME)
    search_paths.append(Path.home() / ".config" / "notemancy" / CONFIG_FILENAME)
    return search_paths


def _parse_search(data: Any) -> SearchConfig:
    if data is None:
        return SearchConfig()
    if not isinstance(data, dict):
        raise ConfigError("'search' must be a mapping")
    defaults = SearchConfig()
    try:
        return SearchConfig(
            threshold=float(data.get("threshold", defaults.threshold)),
            location=int(data.get("location", defaults.location)),
            distance=int(data.get("distance", defaults.distance)),
            max_pattern_length=int(
                data.get("max_pattern_length", defaults.max_pattern_length)
            ),
            case_sensitive=bool(data.get("case_sensitive", defaults.case_sensitive)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid search settings: {e}") from e


def _parse_vaults(data: Any) -> list[VaultEntry]:
    if not isinstance(data, list):
        raise ConfigError("'vaults' must be a list")
    vaults = []
    for item in data:
        if not isinstance(item, dict) or "name" not in item or "vault_directory" not in item:
            raise ConfigError("Each vault needs a 'name' and a 'vault_directory'")
        vaults.append(
            VaultEntry(
                name=str(item["name"]),
                vault_directory=Path(str(item["vault_directory"])),
                publish_url=item.get("publish_url"),
            )
        )
    return vaults


def load_config(config_path: Path | None = None) -> NotemancyConfig:
    """
    Load configuration from the first config.yaml found.

    Args:
        config_path: Explicit path to config file

    Returns:
        NotemancyConfig with resolved settings

    Raises:
        ConfigError: no config file exists, or it cannot be parsed
    """
    for path in config_search_paths(config_path):
        if path.exists():
            break
    else:
        raise ConfigError(
            f"No {CONFIG_FILENAME} found (set {CONF_DIR_ENV} or pass --config)"
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: expected a mapping")
    if "default_vault" not in data:
        raise ConfigError(f"Failed to parse {path}: missing 'default_vault'")

    return NotemancyConfig(
        default_vault=str(data["default_vault"]),
        vaults=_parse_vaults(data.get("vaults", [])),
        search=_parse_search(data.get("search")),
        path=path,
    )
