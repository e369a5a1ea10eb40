"""``lazyplcnext scan [ROOT]`` -- List PLCnext projects under a directory.

When ROOT is given it is scanned and remembered; otherwise the remembered
directory is scanned.

Exit Codes:
    0 -- One or more projects found.
    2 -- No projects found (or no directory configured).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from lazyplcnext.cli.context import AppContext, pass_app, resolve_scan_root
from lazyplcnext.discovery import ProjectRecord, ProjectScanner


def scan_projects(root: Path, detect_git: bool, show_status: bool) -> list[ProjectRecord]:
    """Run the scanner, with a spinner when printing for a human."""
    scanner = ProjectScanner(detect_git=detect_git)
    if not show_status:
        return scanner.scan(root)
    from lazyplcnext.cli.output import console

    with console.status(f"Scanning {root} ..."):
        return scanner.scan(root)


@click.command("scan")
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False),
    required=False,
    default=None,
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--no-git",
    is_flag=True,
    default=False,
    help="Skip git branch detection.",
)
@pass_app
def scan_command(app: AppContext, root: str | None, output_format: str, no_git: bool) -> None:
    """Discover PLCnext Engineer projects and show their IDE versions.

    Unpacked project folders are listed first, then archives and
    launcher links, each group sorted by name.
    """
    scan_root = resolve_scan_root(app, root)
    projects = scan_projects(scan_root, detect_git=not no_git, show_status=output_format == "text")

    if output_format == "json":
        from lazyplcnext.cli.output import project_to_dict

        click.echo(json.dumps({
            "root": str(scan_root),
            "projects": [project_to_dict(i, p) for i, p in enumerate(projects, start=1)],
        }, indent=2))
    elif projects:
        from lazyplcnext.cli.output import print_projects

        print_projects(projects, scan_root, use_nerd_fonts=app.store.load().use_nerd_fonts)
    else:
        click.echo(f"No PLCnext projects found in {scan_root}.")

    sys.exit(0 if projects else 2)
