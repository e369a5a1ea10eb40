"""Check GitHub for a newer LazyPLCNext release.

Only the check is implemented. Installing an update is left to pip.
All failures are logged and reported as "no update".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

REPO_OWNER = "suprunchuk"
REPO_NAME = "LazyPLCNext"
RELEASES_URL = f"https://api.github.com/repos/{REPO_OWNER}/{REPO_NAME}/releases/latest"

# Timeout for the release lookup (seconds).
DEFAULT_TIMEOUT: float = 5.0

USER_AGENT: str = "LazyPLCNext-UpdateCheck"


@dataclass(frozen=True)
class ReleaseInfo:
    """A published release newer than (or different from) the running one."""

    tag: str
    url: str


def is_development_version(version: str) -> bool:
    return version == "dev" or ".dev" in version


def _strip_v(tag: str) -> str:
    return tag[1:] if tag[:1] in ("v", "V") else tag


def check_for_update(
    current_version: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    url: str = RELEASES_URL,
) -> ReleaseInfo | None:
    """Return the latest release if its tag differs from ``current_version``.

    Args:
        current_version: Version of the running package.
        timeout: Request timeout in seconds.
        url: Release feed endpoint.

    Returns:
        ``ReleaseInfo`` for a different release, otherwise None. Development
        builds never report an update.
    """
    if is_development_version(current_version):
        return None
    try:
        with httpx.Client(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"},
            follow_redirects=True,
        ) as client:
            resp = client.get(url)
            resp.raise_for_status()
            release = resp.json()
    except httpx.TimeoutException:
        logger.warning("Timeout checking for updates at %s", url)
        return None
    except httpx.HTTPStatusError as exc:
        logger.warning("HTTP %d from %s", exc.response.status_code, url)
        return None
    except (httpx.RequestError, ValueError) as exc:
        logger.warning("Update check failed: %s", exc)
        return None

    if not isinstance(release, dict):
        return None
    tag = release.get("tag_name") or ""
    if not tag or _strip_v(tag) == _strip_v(current_version):
        return None
    return ReleaseInfo(tag=tag, url=release.get("html_url") or url)
