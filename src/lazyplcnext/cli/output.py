"""Rich output formatting helpers for the LazyPLCNext CLI.

Badge Color Mapping:
    version = black on yellow, git branch = orange, kind = dark green
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lazyplcnext.discovery.models import ProjectKind, ProjectRecord
from lazyplcnext.toolchain.launcher import LaunchResult
from lazyplcnext.toolchain.processes import RunningInstance

_PRIMARY = "#25A065"
_VERSION_STYLE = "bold black on #EFB335"
_GIT_STYLE = "bold #FAFAFA on #F05133"
_KIND_STYLE = "bold #FAFAFA on #006E53"

_KIND_ICONS: dict[ProjectKind, str] = {
    ProjectKind.ARCHIVE: "\U0001F4E6",
    ProjectKind.LAUNCHER_LINK: "\U0001F517",
    ProjectKind.UNPACKED_FOLDER: "\U0001F4C2",
}

_NERD_GIT_ICON = "\ue725 "
_MAX_PATH_WIDTH = 60
_MAX_BRANCH_WIDTH = 15

console = Console()


def shorten_path(path: str, width: int = _MAX_PATH_WIDTH) -> str:
    """Keep the tail of long paths: ``...`` plus the last ``width - 3`` chars."""
    if len(path) <= width:
        return path
    return "..." + path[-(width - 3):]


def shorten_branch(branch: str, width: int = _MAX_BRANCH_WIDTH) -> str:
    if len(branch) <= width:
        return branch
    return branch[: width - 3] + "..."


def project_to_dict(index: int, project: ProjectRecord) -> dict[str, Any]:
    """JSON-serializable view of a project record."""
    return {
        "index": index,
        "name": project.name,
        "path": str(project.path),
        "kind": project.kind.value,
        "version": project.version,
        "is_link": project.is_link,
        "git_branch": project.git_branch or None,
    }


def print_projects(projects: list[ProjectRecord], root: Path, use_nerd_fonts: bool = False) -> None:
    """Print the project list as a numbered table.

    Args:
        projects: Records in display order.
        root: Directory that was scanned (shown in the title).
        use_nerd_fonts: Prefix branch badges with the Nerd Font git glyph.
    """
    table = Table(title=f"PLCnext Projects in {root}", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", justify="center")
    table.add_column("Name", style="bold")
    table.add_column("Version", justify="center")
    table.add_column("Branch")
    table.add_column("Path", style="#4A4A4A")

    git_icon = _NERD_GIT_ICON if use_nerd_fonts else ""
    for index, project in enumerate(projects, start=1):
        branch = Text()
        if project.git_branch:
            branch = Text(git_icon + shorten_branch(project.git_branch), style=_GIT_STYLE)
        table.add_row(
            str(index),
            Text(project.kind.label, style=_KIND_STYLE),
            f"{_KIND_ICONS[project.kind]} {project.name}",
            Text(f"v{project.version}", style=_VERSION_STYLE),
            branch,
            shorten_path(str(project.path)),
        )

    console.print(table)
    console.print(f"[dim]Projects: {len(projects)}[/dim]")


def print_installed(installed: dict[str, Path], ide_root: Path) -> None:
    """Print installed IDE versions, newest (lexically) first."""
    if not installed:
        console.print(f"[yellow]No PLCnext Engineer installation found under {ide_root}[/yellow]")
        return
    table = Table(title="Installed PLCnext Engineer", show_header=True, header_style="bold")
    table.add_column("Version", style="bold")
    table.add_column("Executable")
    for version in sorted(installed, reverse=True):
        table.add_row(version, str(installed[version]))
    console.print(table)


def print_running(version: str, instance: RunningInstance | None) -> None:
    if instance is None:
        console.print(f"PLCnext Engineer {version} is [bold]not running[/bold].")
        return
    console.print(
        f"PLCnext Engineer {version} is [bold {_PRIMARY}]running[/bold {_PRIMARY}] "
        f"(PID: {instance.pid}) from {instance.executable}"
    )


def print_launch_result(project: ProjectRecord, result: LaunchResult) -> None:
    """Print the success panel after a launch."""
    lines = Text.assemble(
        ("✔ SUCCESS", f"bold {_PRIMARY}"), "\n\n",
        (result.message, ""), "\n",
        ("Project: ", "bold"), (project.name, ""), "\n",
        ("Version: ", "bold"), (result.selection.version, ""),
    )
    if not project.has_known_version:
        lines.append("\nProject version unknown; used latest available.", style="yellow")
    elif not result.selection.exact:
        lines.append(f"\nExact version {project.version} not installed; used latest available.", style="yellow")
    if result.running_pid is not None:
        lines.append(f"\nVersion {project.version} was already running (PID: {result.running_pid}).", style="dim")
    console.print(Panel(lines, border_style=_PRIMARY))


def print_error(message: str) -> None:
    console.print(Panel(Text(message), title="✖ ERROR", border_style="red", title_align="left"))
