"""Discovery of PLCnext Engineer projects on disk.

Public API::

    from lazyplcnext.discovery import ProjectScanner

    scanner = ProjectScanner()
    for project in scanner.scan(root):
        print(f"{project.name}: {project.version} ({project.kind.label})")
"""

from __future__ import annotations

from lazyplcnext.discovery.archive import read_archive_version
from lazyplcnext.discovery.descriptor import extract_version
from lazyplcnext.discovery.models import (
    UNKNOWN_VERSION,
    ProjectKind,
    ProjectRecord,
    sort_projects,
)
from lazyplcnext.discovery.scanner import ProjectScanner

__all__ = [
    "ProjectKind",
    "ProjectRecord",
    "ProjectScanner",
    "UNKNOWN_VERSION",
    "extract_version",
    "read_archive_version",
    "sort_projects",
]
