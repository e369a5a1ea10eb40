"""``lazyplcnext installed`` and ``lazyplcnext status VERSION``.

Informational commands over the installed and running IDE versions.

Exit Codes:
    installed -- 0 if any version is installed, 1 otherwise.
    status    -- 0 if the version is running, 1 otherwise.
"""

from __future__ import annotations

import json
import sys

import click

from lazyplcnext.cli.context import AppContext, pass_app, resolve_ide_root
from lazyplcnext.toolchain import find_installed_toolchains, find_running_instance

_IDE_ROOT_OPTION = click.option(
    "--ide-root",
    envvar="LAZYPLCNEXT_IDE_ROOT",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the PLCnext Engineer installations.",
)


@click.command("installed")
@_IDE_ROOT_OPTION
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
@pass_app
def installed_command(app: AppContext, ide_root: str | None, as_json: bool) -> None:
    """List installed PLCnext Engineer versions."""
    root = resolve_ide_root(app, ide_root)
    installed = find_installed_toolchains(root)
    if as_json:
        click.echo(json.dumps({v: str(p) for v, p in sorted(installed.items())}, indent=2))
    else:
        from lazyplcnext.cli.output import print_installed

        print_installed(installed, root)
    sys.exit(0 if installed else 1)


@click.command("status")
@click.argument("version")
def status_command(version: str) -> None:
    """Report whether PLCnext Engineer VERSION is running."""
    from lazyplcnext.cli.output import print_running

    instance = find_running_instance(version)
    print_running(version, instance)
    sys.exit(0 if instance is not None else 1)
