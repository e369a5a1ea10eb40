"""Shared fixtures for CLI tests.

Builds a small project tree and a fake IDE installation root so that
commands can run end to end without PLCnext Engineer.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import (
    create_archive,
    create_ide_install,
    create_launcher_link,
    create_unpacked_project,
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """A root holding one project of each kind plus a pruned build dir.

    Display order: ``ProjA`` (DIR), ``MixerFlat`` (DIR), ``Foo`` (PCWEX),
    ``Mixer`` (PCWEF).
    """
    root = tmp_path / "projects"
    create_unpacked_project(root, "ProjA", "2023.6")
    create_archive(root / "Foo" / "MyProj.pcwex", {"_properties/additional.xml": "<Properties />"})
    create_launcher_link(root / "Mixer", "Mixer", "2021.6")
    create_unpacked_project(root / "bin", "Ignored", "2023.6")
    return root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory with no projects."""
    root = tmp_path / "empty"
    root.mkdir()
    return root


@pytest.fixture
def ide_root(tmp_path: Path) -> Path:
    """An installation root with 2022.0 and 2023.6 installed."""
    root = tmp_path / "PHOENIX CONTACT"
    create_ide_install(root, "2022.0")
    create_ide_install(root, "2023.6")
    return root
