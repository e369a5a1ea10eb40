"""Tests for ``lazyplcnext check-update``."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from lazyplcnext.cli import update_cmd
from lazyplcnext.cli.main import cli
from lazyplcnext.update import ReleaseInfo


class TestCheckUpdate:

    def test_up_to_date(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(update_cmd, "check_for_update", lambda current, timeout: None)
        result = runner.invoke(cli, ["check-update"])
        assert result.exit_code == 0
        assert "is up to date" in result.output

    def test_new_release(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        release = ReleaseInfo(tag="v0.2.0", url="https://example.invalid/v0.2.0")
        monkeypatch.setattr(update_cmd, "check_for_update", lambda current, timeout: release)
        result = runner.invoke(cli, ["check-update"])
        assert result.exit_code == 1
        assert "New version available: v0.2.0" in result.output
        assert "https://example.invalid/v0.2.0" in result.output

    def test_timeout_is_forwarded(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[float] = []

        def fake_check(current, timeout):
            seen.append(timeout)
            return None

        monkeypatch.setattr(update_cmd, "check_for_update", fake_check)
        runner.invoke(cli, ["check-update", "--timeout", "1.5"])
        assert seen == [1.5]
