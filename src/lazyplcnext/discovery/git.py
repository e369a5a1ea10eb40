"""Best-effort git branch lookup for discovered projects."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# Project directory plus this many ancestors are checked for a .git folder.
_MAX_LEVELS = 3
GIT_TIMEOUT = 5.0


def find_git_root(start: Path) -> Path | None:
    """Return the nearest directory (within three levels) holding ``.git``."""
    directory = start
    try:
        if directory.exists() and not directory.is_dir():
            directory = directory.parent
    except OSError:
        return None

    for _ in range(_MAX_LEVELS):
        try:
            if (directory / ".git").exists():
                return directory
        except OSError:
            return None
        parent = directory.parent
        if parent == directory:
            break
        directory = parent
    return None


def current_branch(start: Path) -> str:
    """Return the checked-out branch for the work tree around ``start``.

    Returns ``""`` when there is no work tree nearby or git is unavailable.
    """
    root = find_git_root(start)
    if root is None:
        return ""
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=root,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git branch lookup failed in %s: %s", root, exc)
        return ""
    if completed.returncode != 0:
        return ""
    return completed.stdout.strip()
