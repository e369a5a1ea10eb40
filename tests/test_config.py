"""Tests for the JSON settings store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lazyplcnext.config import ConfigStore, LauncherConfig, default_config_path
from lazyplcnext.exceptions import ConfigError


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / "cfg" / "launcher_config.json")


class TestLoad:
    """Reading settings files."""

    def test_missing_file_gives_defaults(self, store: ConfigStore) -> None:
        assert store.load() == LauncherConfig()

    def test_corrupt_file_gives_defaults(self, store: ConfigStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.load() == LauncherConfig()

    def test_non_object_gives_defaults(self, store: ConfigStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[1, 2]")
        assert store.load() == LauncherConfig()

    def test_legacy_work_dirs(self, store: ConfigStore, tmp_path: Path) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"work_dirs": [str(tmp_path)], "use_nerd_fonts": True}))
        config = store.load()
        assert config.root_directory == tmp_path
        assert config.use_nerd_fonts is True

    @pytest.mark.parametrize(
        "data",
        [
            {"root_directory": 5},
            {"root_directory": ["C:/Projects"]},
            {"ide_root": {"path": "C:/IDE"}},
            {"work_dirs": "C:/Projects"},
            {"work_dirs": [7]},
            {"use_nerd_fonts": "false"},
            {"use_nerd_fonts": 1},
        ],
    )
    def test_wrong_types_give_defaults(
        self, store: ConfigStore, data: dict, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps(data))
        with caplog.at_level("WARNING", logger="lazyplcnext.config"):
            assert store.load() == LauncherConfig()
        assert any("Ignoring" in r.getMessage() for r in caplog.records)

    def test_wrong_type_keeps_valid_settings(self, store: ConfigStore, tmp_path: Path) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({
            "root_directory": 5,
            "use_nerd_fonts": True,
            "ide_root": str(tmp_path),
        }))
        assert store.load() == LauncherConfig(use_nerd_fonts=True, ide_root=tmp_path)

    def test_wrong_typed_root_does_not_break_lookup(self, store: ConfigStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"root_directory": 5}))
        assert store.get_root_directory() is None


class TestRoundTrip:
    """Saving and reading back."""

    def test_save_creates_parent(self, store: ConfigStore, tmp_path: Path) -> None:
        store.save(LauncherConfig(root_directory=tmp_path, use_nerd_fonts=True))
        data = json.loads(store.path.read_text())
        assert data == {
            "root_directory": str(tmp_path),
            "use_nerd_fonts": True,
            "ide_root": None,
        }

    def test_set_and_get_root(self, store: ConfigStore, tmp_path: Path) -> None:
        store.set_root_directory(tmp_path)
        assert store.get_root_directory() == tmp_path

    def test_set_root_keeps_other_settings(self, store: ConfigStore, tmp_path: Path) -> None:
        store.save(LauncherConfig(use_nerd_fonts=True, ide_root=tmp_path / "ide"))
        store.set_root_directory(tmp_path)
        config = store.load()
        assert config.use_nerd_fonts is True
        assert config.ide_root == tmp_path / "ide"

    def test_set_root_rejects_missing_dir(self, store: ConfigStore, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            store.set_root_directory(tmp_path / "nope")

    def test_vanished_root_reported_as_none(self, store: ConfigStore, tmp_path: Path) -> None:
        root = tmp_path / "projects"
        root.mkdir()
        store.set_root_directory(root)
        root.rmdir()
        assert store.get_root_directory() is None


def test_default_path_honours_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LAZYPLCNEXT_CONFIG", str(tmp_path / "x.json"))
    assert default_config_path() == tmp_path / "x.json"


def test_default_path_under_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LAZYPLCNEXT_CONFIG", raising=False)
    assert default_config_path() == Path.home() / ".lazyplcnext" / "launcher_config.json"
