"""``lazyplcnext check-update`` -- Look for a newer release on GitHub.

Exit Codes:
    0 -- Up to date, or the check could not be completed.
    1 -- A different release is available.
"""

from __future__ import annotations

import sys

import click

from lazyplcnext import __version__
from lazyplcnext.update import DEFAULT_TIMEOUT, check_for_update


@click.command("check-update")
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds to wait for the release feed.",
)
def check_update_command(timeout: float) -> None:
    """Check whether a newer LazyPLCNext release exists."""
    release = check_for_update(__version__, timeout=timeout)
    if release is None:
        click.echo(f"LazyPLCNext {__version__} is up to date.")
        sys.exit(0)
    click.echo(f"New version available: {release.tag} (current: {__version__})")
    click.echo(f"Download: {release.url}")
    click.echo("Upgrade with: pip install --upgrade lazyplcnext")
    sys.exit(1)
