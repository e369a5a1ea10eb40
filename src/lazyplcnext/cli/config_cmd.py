"""``lazyplcnext config`` -- Show and change remembered settings."""

from __future__ import annotations

import json
from pathlib import Path

import click

from lazyplcnext.cli.context import AppContext, pass_app
from lazyplcnext.config import LauncherConfig
from lazyplcnext.exceptions import ConfigError


def _save(app: AppContext, config: LauncherConfig) -> None:
    try:
        app.store.save(config)
    except OSError as exc:
        raise click.ClickException(f"Cannot write settings to {app.store.path}: {exc}") from exc


@click.group("config")
def config_group() -> None:
    """Show or change launcher settings."""


@config_group.command("show")
@pass_app
def show_command(app: AppContext) -> None:
    """Print the settings file location and contents."""
    click.echo(f"# {app.store.path}")
    click.echo(json.dumps(app.store.load().to_dict(), indent=2))


@config_group.command("set-root")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@pass_app
def set_root_command(app: AppContext, path: str) -> None:
    """Remember PATH as the directory to scan."""
    try:
        app.store.set_root_directory(path)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot write settings to {app.store.path}: {exc}") from exc
    click.echo(f"Project directory set to {path}")


@config_group.command("set-ide-root")
@click.argument("path", type=click.Path(file_okay=False))
@pass_app
def set_ide_root_command(app: AppContext, path: str) -> None:
    """Use PATH instead of the default PLCnext Engineer install root."""
    config = app.store.load()
    config.ide_root = Path(path)
    _save(app, config)
    click.echo(f"IDE installation root set to {path}")


@config_group.command("nerd-fonts")
@click.argument("state", type=click.Choice(["on", "off"]))
@pass_app
def nerd_fonts_command(app: AppContext, state: str) -> None:
    """Turn Nerd Font glyphs in the project table on or off."""
    config = app.store.load()
    config.use_nerd_fonts = state == "on"
    _save(app, config)
    click.echo(f"Nerd Fonts {state}")
