"""Locate installed PLCnext Engineer versions.

Each release installs into its own directory under the Phoenix Contact
program folder, e.g. ``C:\\Program Files\\PHOENIX CONTACT\\PLCnext Engineer 2023.6``.
A directory only counts as an installation if one of the known IDE
executables is present inside it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IDE_ROOT = Path(r"C:\Program Files\PHOENIX CONTACT")

# Checked in this order; the first one present wins.
IDE_EXECUTABLE_NAMES: tuple[str, ...] = ("PLCNENG64.exe", "PLCnextEngineer.exe")

INSTALL_DIR_PATTERN = re.compile(r"PLCnext Engineer (\d+(\.\d+)+)")


def find_executable(install_dir: Path) -> Path | None:
    """Return the first known IDE executable inside ``install_dir``."""
    for exe_name in IDE_EXECUTABLE_NAMES:
        candidate = install_dir / exe_name
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue
    return None


def find_installed_toolchains(ide_root: Path = DEFAULT_IDE_ROOT) -> dict[str, Path]:
    """Map each installed IDE version to its executable.

    Args:
        ide_root: Directory holding one sub-directory per IDE release.

    Returns:
        ``{version: executable_path}``. Empty when ``ide_root`` is missing
        or unreadable, or when no sub-directory holds an executable.
    """
    installed: dict[str, Path] = {}
    try:
        entries = sorted(Path(ide_root).iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.info("No IDE installations readable under %s: %s", ide_root, exc)
        return installed

    for entry in entries:
        match = INSTALL_DIR_PATTERN.search(entry.name)
        if match is None:
            continue
        try:
            if not entry.is_dir():
                continue
        except OSError:
            continue
        executable = find_executable(entry)
        if executable is None:
            logger.debug("Ignoring %s: no IDE executable inside", entry)
            continue
        installed.setdefault(match.group(1), executable)
    return installed
