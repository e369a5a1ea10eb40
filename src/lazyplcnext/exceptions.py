"""LazyPLCNext exception hierarchy.

All public exceptions inherit from LazyPLCNextError so callers can catch
any launcher-specific failure without swallowing unrelated errors.

Version resolution errors (``ArchiveUnreadable``, ``VersionNotFound``)
never escape a scan: the scanner degrades them to the ``Unknown``
version. Only the launch-time errors reach the user.
"""

from __future__ import annotations


class LazyPLCNextError(Exception):
    """Base exception for all LazyPLCNext errors."""


class VersionResolutionError(LazyPLCNextError):
    """Raised when a project's required IDE version cannot be determined."""


class ArchiveUnreadable(VersionResolutionError):
    """Raised when a ``.pcwex`` archive cannot be opened as a zip container."""


class VersionNotFound(VersionResolutionError):
    """Raised when no descriptor inside an archive carries a ProductVersion."""


class NoInstallationFound(LazyPLCNextError):
    """Raised when no PLCnext Engineer installation exists at all."""


class LaunchFailed(LazyPLCNextError):
    """Raised when the operating system refuses to start the IDE.

    The underlying ``OSError`` is kept on ``os_error`` and chained as
    ``__cause__``.
    """

    def __init__(self, message: str, os_error: OSError | None = None) -> None:
        super().__init__(message)
        self.os_error = os_error


class ConfigError(LazyPLCNextError):
    """Raised for configuration values that cannot be accepted."""
