"""Read the required IDE version out of a ``.pcwex`` project archive.

A ``.pcwex`` file is a zip container. Its version descriptor lives in a
member whose name ends with ``additional.xml``; the directory prefix
varies between IDE releases, so members are matched by suffix.
"""

from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path

from lazyplcnext.discovery.descriptor import extract_version
from lazyplcnext.exceptions import ArchiveUnreadable, VersionNotFound

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIX = "additional.xml"

# Errors zipfile raises for a single damaged, encrypted, or unsupported member.
_MEMBER_ERRORS = (
    zipfile.BadZipFile, zlib.error, OSError, EOFError, ValueError, RuntimeError, NotImplementedError,
)


def read_archive_version(path: Path) -> str:
    """Return the ProductVersion embedded in the archive at ``path``.

    Args:
        path: Path to a ``.pcwex`` file.

    Returns:
        The first non-empty version found in an ``additional.xml`` member.

    Raises:
        ArchiveUnreadable: If the file cannot be opened as a zip archive.
        VersionNotFound: If no descriptor member yields a version.
    """
    # A damaged central directory can also surface as ValueError or EOFError,
    # e.g. a UTF-8 flagged member name that does not decode.
    try:
        archive = zipfile.ZipFile(path)
    except (zipfile.BadZipFile, OSError, EOFError, ValueError) as exc:
        raise ArchiveUnreadable(f"Cannot open archive {path}: {exc}") from exc

    with archive:
        for info in archive.infolist():
            if info.is_dir() or not info.filename.lower().endswith(DESCRIPTOR_SUFFIX):
                continue
            try:
                content = archive.read(info)
            except _MEMBER_ERRORS as exc:
                logger.warning("Skipping unreadable member %s in %s: %s", info.filename, path, exc)
                continue
            version = extract_version(content)
            if version:
                return version

    raise VersionNotFound(f"No ProductVersion in {path}")
