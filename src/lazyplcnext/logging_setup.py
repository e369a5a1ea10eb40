"""Logging configuration for the command-line entry point.

Library modules only create loggers. The CLI calls ``configure_logging``
once so that launch traces are appended to a plain text file in the
temporary directory, one ``[timestamp] message`` line per record.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

LOG_FILE_NAME = "plcnext_launcher.log"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_PACKAGE_LOGGER = "lazyplcnext"


def default_log_path() -> Path:
    return Path(tempfile.gettempdir()) / LOG_FILE_NAME


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """Attach the file (and optionally stderr) handler to the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Append-only log destination. Defaults to the temp dir.
        verbose: Also echo INFO and above to stderr.

    Returns:
        The configured ``lazyplcnext`` logger.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(logging.INFO)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    path = log_file if log_file is not None else default_log_path()
    try:
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).debug("Log file unavailable (%s): %s", path, exc)
    else:
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        package_logger.addHandler(stream_handler)

    return package_logger
