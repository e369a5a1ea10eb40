"""Shared state passed from the ``lazyplcnext`` group to its subcommands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from lazyplcnext.config import ConfigStore
from lazyplcnext.exceptions import ConfigError
from lazyplcnext.toolchain.installed import DEFAULT_IDE_ROOT

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Objects owned by the CLI process for one invocation."""

    store: ConfigStore


pass_app = click.make_pass_decorator(AppContext, ensure=False)


def resolve_scan_root(app: AppContext, path: str | None) -> Path:
    """Return the directory to scan.

    An explicit ``path`` is remembered for later invocations. Without one,
    the remembered directory is used.

    Raises:
        click.UsageError: If neither is available.
    """
    if path is not None:
        root = Path(path)
        try:
            app.store.set_root_directory(root)
        except ConfigError as exc:
            raise click.UsageError(str(exc)) from exc
        except OSError as exc:
            logger.warning("Could not remember %s: %s", root, exc)
        return root

    remembered = app.store.get_root_directory()
    if remembered is None:
        raise click.UsageError(
            "No project directory configured. Pass ROOT or run "
            "'lazyplcnext config set-root PATH'."
        )
    return remembered


def resolve_ide_root(app: AppContext, ide_root: str | None) -> Path:
    """Pick the IDE installation root: option, then config, then default."""
    if ide_root:
        return Path(ide_root)
    configured = app.store.get_ide_root()
    return configured if configured is not None else DEFAULT_IDE_ROOT
