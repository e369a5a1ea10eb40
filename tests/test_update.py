"""Tests for the GitHub release check.

httpx requests are served by ``httpx.MockTransport``; nothing touches
the network.
"""

from __future__ import annotations

import httpx
import pytest

from lazyplcnext import update
from lazyplcnext.update import ReleaseInfo, check_for_update


@pytest.fixture
def serve(monkeypatch: pytest.MonkeyPatch):
    """Route httpx.Client traffic in ``update`` to a handler."""
    real_client = httpx.Client

    def install(handler) -> None:
        def factory(**kwargs):
            return real_client(transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(update.httpx, "Client", factory)

    return install


class TestCheckForUpdate:
    """Release feed handling."""

    def test_newer_release(self, serve) -> None:
        serve(lambda request: httpx.Response(200, json={
            "tag_name": "v0.2.0",
            "html_url": "https://github.com/suprunchuk/LazyPLCNext/releases/tag/v0.2.0",
        }))
        assert check_for_update("0.1.0") == ReleaseInfo(
            tag="v0.2.0",
            url="https://github.com/suprunchuk/LazyPLCNext/releases/tag/v0.2.0",
        )

    def test_same_release(self, serve) -> None:
        serve(lambda request: httpx.Response(200, json={"tag_name": "v0.1.0"}))
        assert check_for_update("0.1.0") is None

    def test_http_error(self, serve) -> None:
        serve(lambda request: httpx.Response(403, json={"message": "rate limited"}))
        assert check_for_update("0.1.0") is None

    def test_invalid_json(self, serve) -> None:
        serve(lambda request: httpx.Response(200, content=b"<html>"))
        assert check_for_update("0.1.0") is None

    def test_network_error(self, serve) -> None:
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        serve(handler)
        assert check_for_update("0.1.0") is None

    def test_timeout(self, serve) -> None:
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        serve(handler)
        assert check_for_update("0.1.0") is None

    def test_dev_build_skips_network(self, serve) -> None:
        def handler(request):
            raise AssertionError("no request expected")

        serve(handler)
        assert check_for_update("dev") is None
        assert check_for_update("0.2.0.dev1") is None
