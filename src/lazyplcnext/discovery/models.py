"""Data models for project discovery.

``ProjectRecord`` is the single value type produced by the scanner. It is
frozen: records are created once per scan and handed to the presentation
layer and the launch resolver unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Sentinel version for projects whose descriptor could not be read.
UNKNOWN_VERSION = "Unknown"

_DOTTED_VERSION = re.compile(r"^\d+(\.\d+)*$")


class ProjectKind(Enum):
    """The three on-disk shapes a PLCnext Engineer project can take."""

    ARCHIVE = "archive"                  # .pcwex zip container
    LAUNCHER_LINK = "launcher_link"      # .pcwef pointer next to a <name>Flat folder
    UNPACKED_FOLDER = "unpacked_folder"  # directory holding Solution.xml

    @property
    def label(self) -> str:
        """Short badge text used by the CLI."""
        return _KIND_LABELS[self]


_KIND_LABELS: dict[ProjectKind, str] = {
    ProjectKind.ARCHIVE: "PCWEX",
    ProjectKind.LAUNCHER_LINK: "PCWEF",
    ProjectKind.UNPACKED_FOLDER: "DIR",
}


def normalize_version(raw: str) -> str:
    """Return ``raw`` stripped if it is a dotted numeric version, else ``""``.

    Extractors return whatever text the descriptor holds. Records only
    ever carry a well-formed version or ``UNKNOWN_VERSION``, so anything
    else is treated as if no version had been found.
    """
    candidate = raw.strip()
    if _DOTTED_VERSION.match(candidate):
        return candidate
    return ""


@dataclass(frozen=True)
class ProjectRecord:
    """One discovered project artifact.

    Attributes:
        name: Display name. The parent directory name for archives and
            launcher links, the folder's own name for unpacked folders.
        path: Path to the archive file, pointer file, or folder.
        kind: Which of the three artifact shapes this is.
        version: Required IDE version, or ``UNKNOWN_VERSION``.
        git_branch: Current branch of the enclosing git work tree, or ``""``.
    """

    name: str
    path: Path
    kind: ProjectKind
    version: str = UNKNOWN_VERSION
    git_branch: str = ""

    @property
    def is_link(self) -> bool:
        """True only for ``.pcwef`` launcher links."""
        return self.kind is ProjectKind.LAUNCHER_LINK

    @property
    def has_known_version(self) -> bool:
        return self.version != UNKNOWN_VERSION


def sort_projects(projects: list[ProjectRecord]) -> list[ProjectRecord]:
    """Order records for display: unpacked folders first, then by name.

    Names compare case-insensitively within each partition.
    """
    return sorted(
        projects,
        key=lambda p: (p.kind is not ProjectKind.UNPACKED_FOLDER, p.name.lower()),
    )
