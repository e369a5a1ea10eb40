"""Detect PLCnext Engineer instances that are already running.

Process enumeration is best effort: processes that vanish or deny access
mid-scan are skipped, and a failure to enumerate at all is reported as
"nothing running". The version of a running IDE is read from the name of
the directory its executable lives in.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import PureWindowsPath

import psutil

logger = logging.getLogger(__name__)

# Substrings of process names that identify the IDE.
IDE_PROCESS_MARKERS: tuple[str, ...] = ("PLCNENG64", "PLCnextEngineer")

_VERSION_IN_DIR = re.compile(r"\d+(\.\d+)+")


@dataclass(frozen=True)
class RunningInstance:
    """A live IDE process.

    Attributes:
        executable: Full path of the running executable.
        pid: Operating system process id.
        version: Version parsed from the install directory name, or ``""``.
    """

    executable: str
    pid: int
    version: str


def version_from_executable(executable: str) -> str:
    """Return the dotted version in the executable's install directory name."""
    # PureWindowsPath splits on both separators, so POSIX paths work too.
    install_dir = PureWindowsPath(executable).parent.name
    match = _VERSION_IN_DIR.search(install_dir)
    return match.group(0) if match else ""


def _is_ide_process(name: str) -> bool:
    return any(marker in name for marker in IDE_PROCESS_MARKERS)


def list_running_instances() -> list[RunningInstance]:
    """Return every running IDE process that exposes its executable path."""
    instances: list[RunningInstance] = []
    try:
        for proc in psutil.process_iter(["pid", "name", "exe"]):
            info = proc.info
            name = info.get("name") or ""
            if not _is_ide_process(name):
                continue
            executable = info.get("exe")
            if not executable:
                continue
            instances.append(
                RunningInstance(
                    executable=executable,
                    pid=info["pid"],
                    version=version_from_executable(executable),
                )
            )
    except (psutil.Error, OSError) as exc:
        logger.warning("Process enumeration failed: %s", exc)
        return []
    return instances


def find_running_instance(target_version: str) -> RunningInstance | None:
    """Return the first running IDE whose version equals ``target_version``.

    Comparison is exact string equality; ``"2023.6"`` does not match
    ``"2023.6.0"``.
    """
    for instance in list_running_instances():
        if instance.version == target_version:
            return instance
    return None
