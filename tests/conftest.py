"""Shared fixtures for lazyplcnext tests."""

from __future__ import annotations

import pathlib

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Point config and log files at a private temp dir for every test."""
    home = tmp_path_factory.mktemp("settings")
    monkeypatch.setenv("LAZYPLCNEXT_CONFIG", str(home / "launcher_config.json"))
    monkeypatch.setenv("LAZYPLCNEXT_LOG_FILE", str(home / "plcnext_launcher.log"))
    monkeypatch.delenv("LAZYPLCNEXT_IDE_ROOT", raising=False)
    return home
