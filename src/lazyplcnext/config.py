"""Persisted launcher settings.

Settings live in a flat JSON object::

    {
      "root_directory": "C:\\\\PhoenixProjects",
      "use_nerd_fonts": false,
      "ide_root": null
    }

Files written by older launcher builds stored the root as the first
element of a ``work_dirs`` list; that form is still read.

The store is an explicit object owned by the caller. Nothing in the
discovery or launch code reads configuration on its own.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lazyplcnext.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "launcher_config.json"
CONFIG_ENV_VAR = "LAZYPLCNEXT_CONFIG"


def default_config_path() -> Path:
    """Return the config file location, honouring ``LAZYPLCNEXT_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".lazyplcnext" / CONFIG_FILE_NAME


@dataclass
class LauncherConfig:
    """User settings.

    Attributes:
        root_directory: Directory scanned for projects.
        use_nerd_fonts: Show Nerd Font glyphs in the CLI badges.
        ide_root: Override for the IDE installation root.
    """

    root_directory: Path | None = None
    use_nerd_fonts: bool = False
    ide_root: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_directory": str(self.root_directory) if self.root_directory else None,
            "use_nerd_fonts": self.use_nerd_fonts,
            "ide_root": str(self.ide_root) if self.ide_root else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LauncherConfig:
        """Build a config from parsed JSON.

        Values of the wrong type are logged and replaced by the default.
        """
        root = _path_setting(data, "root_directory")
        if root is None:
            root = _legacy_root(data.get("work_dirs"))

        use_nerd_fonts = data.get("use_nerd_fonts", False)
        if not isinstance(use_nerd_fonts, bool):
            logger.warning("Ignoring use_nerd_fonts=%r: expected true or false", use_nerd_fonts)
            use_nerd_fonts = False

        return cls(
            root_directory=root,
            use_nerd_fonts=use_nerd_fonts,
            ide_root=_path_setting(data, "ide_root"),
        )


def _path_setting(data: dict[str, Any], key: str) -> Path | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        logger.warning("Ignoring %s=%r: expected a path string", key, value)
        return None
    return Path(value)


def _legacy_root(work_dirs: Any) -> Path | None:
    """First entry of the old ``work_dirs`` list, if it is a path string."""
    if work_dirs is None or work_dirs == []:
        return None
    if not isinstance(work_dirs, list) or not isinstance(work_dirs[0], str) or not work_dirs[0]:
        logger.warning("Ignoring work_dirs=%r: expected a list of path strings", work_dirs)
        return None
    return Path(work_dirs[0])


class ConfigStore:
    """Loads and saves ``LauncherConfig`` as JSON at ``path``."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()

    def load(self) -> LauncherConfig:
        """Read the config file. Missing or corrupt files give defaults."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return LauncherConfig()
        except OSError as exc:
            logger.warning("Cannot read config %s: %s", self.path, exc)
            return LauncherConfig()

        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Ignoring corrupt config %s: %s", self.path, exc)
            return LauncherConfig()
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.path)
            return LauncherConfig()
        return LauncherConfig.from_dict(data)

    def save(self, config: LauncherConfig) -> None:
        """Write ``config``, creating the parent directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved config to %s", self.path)

    def get_root_directory(self) -> Path | None:
        """Return the remembered root if it still exists as a directory."""
        root = self.load().root_directory
        if root is None or not root.is_dir():
            return None
        return root

    def set_root_directory(self, path: Path) -> None:
        """Remember ``path`` as the project root.

        Raises:
            ConfigError: If ``path`` is not an existing directory.
        """
        path = Path(path)
        if not path.is_dir():
            raise ConfigError(f"Not a directory: {path}")
        config = self.load()
        config.root_directory = path
        self.save(config)

    def get_ide_root(self) -> Path | None:
        return self.load().ide_root
