# SPDX-License-Identifier: MIT
"""Sorter configuration loading from pyproject.toml.

Settings live in the ``[tool.version-sorter]`` table:

    [tool.version-sorter]
    reverse = false
    memoize = true
    cache-size = 4096
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "version-sorter"

_KNOWN_KEYS = frozenset({"reverse", "memoize", "cache-size"})


@dataclass
class SorterConfig:
    """Options for VersionSorter.

    Attributes:
        reverse: Sort newest first
        memoize: Keep a ParseCache of parsed versions between calls
        cache_size: Maximum number of cached versions (None for unbounded)
    """

    reverse: bool = False
    memoize: bool = True
    cache_size: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("reverse", "memoize"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if self.cache_size is not None:
            if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
                raise ConfigError(f"cache_size must be an integer, got {self.cache_size!r}")
            if self.cache_size < 1:
                raise ConfigError(f"cache_size must be positive, got {self.cache_size}")

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "SorterConfig":
        """Create SorterConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            SorterConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject)
        logger.debug("Loaded sorter configuration from %s: %s", path, config)
        return config

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "SorterConfig":
        """Create SorterConfig from a parsed pyproject.toml dictionary.

        A missing ``[tool.version-sorter]`` table yields the defaults.

        Raises:
            ConfigError: If the table holds unknown keys or invalid values
        """
        table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        unknown = sorted(set(table) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"Unknown keys in [tool.{TOOL_TABLE}]: {', '.join(unknown)}")

        return cls(
            reverse=table.get("reverse", False),
            memoize=table.get("memoize", True),
            cache_size=table.get("cache-size"),
        )


def load_config(project_dir: Optional[str | Path] = None) -> SorterConfig:
    """Load configuration from ``pyproject.toml`` in ``project_dir``.

    Args:
        project_dir: Directory to look in (defaults to the current directory)

    Returns:
        The loaded SorterConfig, or the defaults when there is no pyproject.toml
    """
    pyproject_path = Path(project_dir or Path.cwd()) / "pyproject.toml"
    if not pyproject_path.exists():
        return SorterConfig()
    return SorterConfig.from_pyproject(pyproject_path)
