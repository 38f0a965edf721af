"""Configuration handling for worktree-keeper"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from worktree_keeper.constants import CONFIG_FILE_NAME, CONFIG_VERSION, DEFAULT_BASE_DIR
from worktree_keeper.exceptions import ConfigError
from worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Config:
    """Configuration for worktree-keeper with validation."""

    # Root directory of managed worktrees, relative to the main worktree
    base_dir: str = DEFAULT_BASE_DIR

    # Execution modes
    force: bool = False
    dry_run: bool = False
    interactive: bool = True
    verbose: bool = False
    debug: bool = False
    workers: Optional[int] = None  # None = one worker per worktree

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_base_dir()
        self._validate_workers()

    def _validate_base_dir(self):
        """Validate base_dir is not empty."""
        if not isinstance(self.base_dir, str) or not self.base_dir.strip():
            raise ConfigError("base_dir cannot be empty")
        self.base_dir = self.base_dir.strip()

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ConfigError(f"workers must be positive, got {self.workers}")

    def resolve_base_dir(self, main_repo_path: str) -> str:
        """Return the managed root, anchoring a relative base_dir at the main worktree."""
        if os.path.isabs(self.base_dir):
            return os.path.normpath(self.base_dir)
        return os.path.normpath(os.path.join(main_repo_path, self.base_dir))

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)


def read_repo_config(repo_root: str) -> dict:
    """Read the repository configuration file.

    Args:
        repo_root: Path of the main worktree

    Returns:
        Flat dict of recognised settings (currently ``base_dir``); empty when
        the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or is not valid YAML
    """
    config_path = Path(repo_root).resolve() / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    version = str(data.get("version") or CONFIG_VERSION)
    if version != CONFIG_VERSION:
        logger.debug(f"Config version {version} differs from {CONFIG_VERSION}")

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigError(f"'defaults' in {config_path} must be a mapping")

    settings = {}
    base_dir = str(defaults.get("base_dir") or "").strip()
    if base_dir:
        settings["base_dir"] = base_dir
    return settings


def load_config(repo_root: str, **overrides) -> Config:
    """Build the run configuration for a repository.

    Settings from the repository file are applied first and ``overrides``
    (typically CLI options) on top. A broken repository file never aborts
    the run: it is logged and the defaults are used instead.
    """
    try:
        settings = read_repo_config(repo_root)
    except ConfigError as e:
        logger.warning(f"Ignoring repository config: {e}")
        settings = {}

    settings.update({k: v for k, v in overrides.items() if v is not None})
    return Config.from_dict(settings)
