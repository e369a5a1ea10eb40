"""``lazyplcnext launch [ROOT] (--index N | --name NAME)`` -- Open a project.

Scans ROOT (or the remembered directory), picks one project, and starts
the PLCnext Engineer version it needs. Without an exact installed match
the lexically greatest installed version is used.

Exit Codes:
    0 -- The IDE process was started.
    1 -- No IDE installed, or the operating system refused to start it.
    2 -- Usage error (bad selection, no directory configured).
"""

from __future__ import annotations

import sys

import click

from lazyplcnext.cli.context import AppContext, pass_app, resolve_ide_root, resolve_scan_root
from lazyplcnext.cli.scan import scan_projects
from lazyplcnext.discovery import ProjectRecord
from lazyplcnext.exceptions import LaunchFailed, NoInstallationFound
from lazyplcnext.toolchain import LaunchResolver


def select_project(
    projects: list[ProjectRecord],
    index: int | None,
    name: str | None,
) -> ProjectRecord:
    """Pick a project by 1-based list index or by case-insensitive name.

    Raises:
        click.UsageError: If the selection is missing, out of range,
            unknown, or ambiguous.
    """
    if (index is None) == (name is None):
        raise click.UsageError("Pass exactly one of --index or --name.")
    if not projects:
        raise click.UsageError("No PLCnext projects found.")

    if index is not None:
        if not 1 <= index <= len(projects):
            raise click.UsageError(f"--index must be between 1 and {len(projects)}.")
        return projects[index - 1]

    matches = [p for p in projects if p.name.lower() == name.lower()]
    if not matches:
        raise click.UsageError(f"No project named '{name}'.")
    if len(matches) > 1:
        paths = ", ".join(str(p.path) for p in matches)
        raise click.UsageError(f"'{name}' is ambiguous ({paths}); use --index.")
    return matches[0]


@click.command("launch")
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False),
    required=False,
    default=None,
)
@click.option("--index", "-i", type=int, default=None, help="Project number as shown by 'scan'.")
@click.option("--name", "-n", default=None, help="Project name (case-insensitive).")
@click.option(
    "--ide-root",
    envvar="LAZYPLCNEXT_IDE_ROOT",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the PLCnext Engineer installations.",
)
@pass_app
def launch_command(
    app: AppContext,
    root: str | None,
    index: int | None,
    name: str | None,
    ide_root: str | None,
) -> None:
    """Open a project in the PLCnext Engineer version it was saved with."""
    from lazyplcnext.cli.output import console, print_error, print_launch_result

    scan_root = resolve_scan_root(app, root)
    projects = scan_projects(scan_root, detect_git=False, show_status=True)
    project = select_project(projects, index, name)

    resolver = LaunchResolver(resolve_ide_root(app, ide_root))
    try:
        with console.status(f"Launching {project.name} (v{project.version}) ..."):
            result = resolver.launch(project)
    except (NoInstallationFound, LaunchFailed) as exc:
        print_error(str(exc))
        sys.exit(1)

    print_launch_result(project, result)
