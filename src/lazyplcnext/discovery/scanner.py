"""Project discovery: walk a directory tree and classify PLCnext projects.

Three artifact shapes are recognised:

* **Unpacked folder** -- a directory containing ``Solution.xml``. It is
  treated as a leaf: nothing below it is scanned.
* **Archive** -- a ``.pcwex`` zip file. Named after its parent directory.
* **Launcher link** -- a ``.pcwef`` pointer file whose project lives in a
  sibling ``<stem>Flat`` folder. Named after its parent directory.

Discovery Algorithm:
    1. Depth-first walk from the root, entries visited in name order.
    2. Hidden directories and ``bin``/``obj`` build output are pruned.
    3. Each artifact's version is resolved from its XML descriptor.
       Any failure degrades to ``UNKNOWN_VERSION``; a scan never aborts
       because of a single project.
    4. Results are returned in display order (see ``sort_projects``).
"""

from __future__ import annotations

import logging
from pathlib import Path

from lazyplcnext.discovery.archive import read_archive_version
from lazyplcnext.discovery.descriptor import extract_version
from lazyplcnext.discovery.git import current_branch
from lazyplcnext.discovery.models import (
    UNKNOWN_VERSION,
    ProjectKind,
    ProjectRecord,
    normalize_version,
    sort_projects,
)
from lazyplcnext.exceptions import VersionResolutionError

logger = logging.getLogger(__name__)

SOLUTION_MARKER = "Solution.xml"
ARCHIVE_EXTENSION = ".pcwex"
LINK_EXTENSION = ".pcwef"
FLAT_FOLDER_SUFFIX = "Flat"

_SKIPPED_DIR_NAMES = frozenset({"bin", "obj"})


def should_skip_dir(name: str) -> bool:
    """Return True for directories the scanner never enters."""
    lowered = name.lower()
    return lowered.startswith(".") or lowered in _SKIPPED_DIR_NAMES


def folder_descriptor_candidates(folder: Path) -> list[Path]:
    """List the descriptor files of an unpacked project, in lookup order.

    ``_properties/additional.xml`` comes first, followed by every
    ``content/StorageProperties*.xml`` sorted by name.
    """
    candidates = [folder / "_properties" / "additional.xml"]
    content_dir = folder / "content"
    try:
        names = sorted(entry.name for entry in content_dir.iterdir())
    except OSError:
        return candidates
    candidates.extend(
        content_dir / name
        for name in names
        if name.startswith("StorageProperties") and name.endswith(".xml")
    )
    return candidates


class ProjectScanner:
    """Discovers PLCnext Engineer projects under a root directory.

    Usage::

        scanner = ProjectScanner()
        for project in scanner.scan(Path("C:/PhoenixProjects")):
            print(project.name, project.version)

    Args:
        detect_git: Look up the current git branch for each project.
        log: Logger receiving per-node diagnostics. Defaults to this
            module's logger.
    """

    def __init__(self, detect_git: bool = True, log: logging.Logger | None = None) -> None:
        self._detect_git = detect_git
        self._log = log if log is not None else logger

    # -- Public API ---------------------------------------------------------

    def scan(self, root: Path) -> list[ProjectRecord]:
        """Scan ``root`` and return every project found, in display order.

        Args:
            root: Directory to walk. Errors reading it yield ``[]``.

        Returns:
            Project records, unpacked folders first, then by name.
        """
        root = Path(root)
        try:
            if not root.is_dir():
                self._log.warning("Scan root is not a directory: %s", root)
                return []
        except OSError as exc:
            self._log.warning("Scan error: %s", exc)
            return []

        projects: list[ProjectRecord] = []
        self._walk(root, projects)
        self._log.info("Scan of %s found %d project(s)", root, len(projects))
        return sort_projects(projects)

    def resolve_folder_version(self, folder: Path) -> str:
        """Return the version of an unpacked project folder, or ``Unknown``."""
        for candidate in folder_descriptor_candidates(folder):
            try:
                data = candidate.read_bytes()
            except FileNotFoundError:
                continue
            except OSError as exc:
                self._log.info("Skipping unreadable descriptor %s: %s", candidate, exc)
                continue
            raw = extract_version(data)
            if raw:
                return normalize_version(raw) or UNKNOWN_VERSION
        return UNKNOWN_VERSION

    def resolve_archive_version(self, path: Path) -> str:
        """Return the version of a ``.pcwex`` archive, or ``Unknown``."""
        try:
            raw = read_archive_version(path)
        except VersionResolutionError as exc:
            self._log.info("Version unavailable for %s: %s", path, exc)
            return UNKNOWN_VERSION
        return normalize_version(raw) or UNKNOWN_VERSION

    def resolve_link_version(self, path: Path) -> str:
        """Return the version of a ``.pcwef`` link via its ``<stem>Flat`` folder."""
        flat_folder = path.parent / f"{path.stem}{FLAT_FOLDER_SUFFIX}"
        try:
            if not flat_folder.is_dir():
                return UNKNOWN_VERSION
        except OSError:
            return UNKNOWN_VERSION
        return self.resolve_folder_version(flat_folder)

    # -- Traversal ----------------------------------------------------------

    def _walk(self, directory: Path, projects: list[ProjectRecord]) -> None:
        """Visit ``directory`` depth-first, appending records to ``projects``."""
        try:
            is_project = (directory / SOLUTION_MARKER).is_file()
        except OSError:
            is_project = False
        if is_project:
            projects.append(self._folder_record(directory))
            return

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except (PermissionError, OSError) as exc:
            self._log.warning("Skipping unreadable directory %s: %s", directory, exc)
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir() and not entry.is_symlink()
            except OSError as exc:
                self._log.warning("Skipping %s: %s", entry, exc)
                continue

            if is_dir:
                if not should_skip_dir(entry.name):
                    self._walk(entry, projects)
                continue

            record = self._classify_file(entry)
            if record is not None:
                projects.append(record)

    def _classify_file(self, path: Path) -> ProjectRecord | None:
        """Build a record for an archive or link file; ignore anything else."""
        suffix = path.suffix.lower()
        if suffix == ARCHIVE_EXTENSION:
            kind = ProjectKind.ARCHIVE
            version = self.resolve_archive_version(path)
        elif suffix == LINK_EXTENSION:
            kind = ProjectKind.LAUNCHER_LINK
            version = self.resolve_link_version(path)
        else:
            return None

        parent = path.parent
        return ProjectRecord(
            name=parent.name,
            path=path,
            kind=kind,
            version=version,
            git_branch=self._branch_for(parent),
        )

    def _folder_record(self, folder: Path) -> ProjectRecord:
        return ProjectRecord(
            name=folder.name,
            path=folder,
            kind=ProjectKind.UNPACKED_FOLDER,
            version=self.resolve_folder_version(folder),
            git_branch=self._branch_for(folder),
        )

    def _branch_for(self, directory: Path) -> str:
        if not self._detect_git:
            return ""
        return current_branch(directory)
