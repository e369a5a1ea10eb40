"""Launch a project in the matching PLCnext Engineer version.

Resolution Policy:
    1. Use the installation whose version equals the project's exactly.
    2. Otherwise fall back to the lexically greatest installed version.
       This is plain string ordering, not semantic versioning:
       ``"2023.10"`` sorts before ``"2023.9"``.
    3. With nothing installed, the launch fails with ``NoInstallationFound``.

An IDE of the required version that is already running is logged but
does not change the decision: PLCnext Engineer itself decides whether to
open the project in the existing window.

The spawned IDE is not waited on. ``launch`` returns once the operating
system has started the process.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lazyplcnext.discovery.models import ProjectRecord
from lazyplcnext.exceptions import LaunchFailed, NoInstallationFound
from lazyplcnext.toolchain.installed import DEFAULT_IDE_ROOT, find_installed_toolchains
from lazyplcnext.toolchain.processes import RunningInstance, find_running_instance

logger = logging.getLogger(__name__)

LOG_SEPARATOR = "-" * 63


@dataclass(frozen=True)
class ToolchainSelection:
    """The installation chosen for a required version.

    Attributes:
        version: Installed version that will be started.
        executable: Path of its executable.
        exact: False when ``version`` is a fallback.
    """

    version: str
    executable: Path
    exact: bool


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of a successful launch.

    Attributes:
        executable_name: Base name of the started executable.
        selection: The installation that was started.
        running_pid: Pid of an IDE of the required version that was
            already running, if one was seen.
    """

    executable_name: str
    selection: ToolchainSelection
    running_pid: int | None = None

    @property
    def message(self) -> str:
        return f"IDE started: {self.executable_name}"


def select_toolchain(installed: dict[str, Path], required: str) -> ToolchainSelection:
    """Pick the installation to use for ``required``.

    Args:
        installed: Version to executable mapping.
        required: Version the project asks for (may be ``"Unknown"``).

    Returns:
        The exact match, or the lexically-last installed version.

    Raises:
        NoInstallationFound: If ``installed`` is empty.
    """
    if required in installed:
        return ToolchainSelection(version=required, executable=installed[required], exact=True)
    if not installed:
        raise NoInstallationFound("No PLCnext Engineer installation found")
    fallback = sorted(installed)[-1]
    return ToolchainSelection(version=fallback, executable=installed[fallback], exact=False)


class LaunchResolver:
    """Resolves a project's IDE version and starts the IDE.

    The installed-version mapping is rebuilt on every launch, so newly
    installed or removed IDE versions are picked up without restarting.

    Args:
        ide_root: Directory holding the IDE installations.
        locate: Returns the installed mapping for an install root.
        inspect: Returns a running instance for a version, or None.
        spawn: Starts a process; called like ``subprocess.Popen``.
        log: Logger receiving the launch trace.
    """

    def __init__(
        self,
        ide_root: Path = DEFAULT_IDE_ROOT,
        *,
        locate: Callable[[Path], dict[str, Path]] = find_installed_toolchains,
        inspect: Callable[[str], RunningInstance | None] = find_running_instance,
        spawn: Callable[..., Any] = subprocess.Popen,
        log: logging.Logger | None = None,
    ) -> None:
        self.ide_root = Path(ide_root)
        self._locate = locate
        self._inspect = inspect
        self._spawn = spawn
        self._log = log if log is not None else logger

    def resolve(self, required: str) -> ToolchainSelection:
        """Select the installation for ``required`` from the current state."""
        selection = select_toolchain(self._locate(self.ide_root), required)
        if selection.exact:
            self._log.info("Found exact IDE match: %s", selection.executable)
        else:
            self._log.info(
                "Exact version %s not found. Using latest available: %s",
                required, selection.executable,
            )
        return selection

    def launch(self, project: ProjectRecord) -> LaunchResult:
        """Start the IDE for ``project``.

        Raises:
            NoInstallationFound: If no IDE version is installed.
            LaunchFailed: If the operating system cannot start the IDE.
        """
        self._log.info(LOG_SEPARATOR)
        self._log.info("Starting launch sequence for: %s", project.name)
        self._log.info("Project version detected: %s", project.version)

        launch_path = Path(project.path).absolute()
        try:
            selection = self.resolve(project.version)
        except NoInstallationFound:
            self._log.error("No PLCnext Engineer installation under %s", self.ide_root)
            raise

        running = self._inspect(project.version)
        if running is not None:
            self._log.info("Target IDE version is already running (PID: %d).", running.pid)

        executable = selection.executable
        self._log.info('Executing: %s "%s"', executable, launch_path)
        try:
            self._spawn([str(executable), str(launch_path)], cwd=str(executable.parent))
        except OSError as exc:
            self._log.error("Launch error: %s", exc)
            raise LaunchFailed(f"Failed to start {executable}: {exc}", os_error=exc) from exc

        return LaunchResult(
            executable_name=executable.name,
            selection=selection,
            running_pid=running.pid if running is not None else None,
        )
