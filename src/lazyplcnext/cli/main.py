"""LazyPLCNext CLI -- Find PLCnext Engineer projects and open them.

Entry point for the ``lazyplcnext`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan          -- List projects under a directory with their IDE versions.
    launch        -- Open a project in the matching IDE version.
    installed     -- List installed IDE versions.
    status        -- Check whether an IDE version is running.
    config        -- Show or change remembered settings.
    check-update  -- Look for a newer LazyPLCNext release.

Usage::

    lazyplcnext scan C:\\PhoenixProjects      # Scan and remember the directory
    lazyplcnext scan                         # Scan the remembered directory
    lazyplcnext launch --index 3
    lazyplcnext launch --name Conveyor
    lazyplcnext installed
    lazyplcnext status 2023.6
"""

from __future__ import annotations

from pathlib import Path

import click

from lazyplcnext import __version__
from lazyplcnext.cli.config_cmd import config_group
from lazyplcnext.cli.context import AppContext
from lazyplcnext.cli.launch_cmd import launch_command
from lazyplcnext.cli.scan import scan_command
from lazyplcnext.cli.toolchain_cmd import installed_command, status_command
from lazyplcnext.cli.update_cmd import check_update_command
from lazyplcnext.config import ConfigStore
from lazyplcnext.logging_setup import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path",
    envvar="LAZYPLCNEXT_CONFIG",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: ~/.lazyplcnext/launcher_config.json).",
)
@click.option(
    "--log-file",
    envvar="LAZYPLCNEXT_LOG_FILE",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append the launch log here (default: plcnext_launcher.log in the temp dir).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Echo log messages to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_file: str | None, verbose: bool) -> None:
    """LazyPLCNext: open PLCnext Engineer projects in the right IDE version.

    Scans a directory for unpacked projects, .pcwex archives and .pcwef
    launcher links, reads the IDE version each one was saved with, and
    starts the matching PLCnext Engineer installation.
    """
    configure_logging(Path(log_file) if log_file else None, verbose=verbose)
    store = ConfigStore(Path(config_path) if config_path else None)
    ctx.obj = AppContext(store=store)


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(launch_command)
cli.add_command(installed_command)
cli.add_command(status_command)
cli.add_command(config_group)
cli.add_command(check_update_command)
