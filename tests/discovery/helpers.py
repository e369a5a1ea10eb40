"""Shared test helpers for building fake PLCnext project trees.

Each helper creates a minimal but realistic on-disk layout: unpacked
project folders, ``.pcwex`` archives, ``.pcwef`` launcher links, and
PLCnext Engineer installation directories.
"""

from __future__ import annotations

import zipfile
from pathlib import Path


def descriptor_xml(version: str, value_first: bool = False) -> str:
    """Return an ``additional.xml`` body declaring ``version``."""
    if value_first:
        prop = f'<Property Value="{version}" Key="ProductVersion" />'
    else:
        prop = f'<Property Key="ProductVersion" Value="{version}" />'
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<Properties>\n"
        '  <Property Key="ProjectName" Value="Demo" />\n'
        f"  {prop}\n"
        "</Properties>\n"
    )


def create_unpacked_project(parent: Path, name: str, version: str | None = "2023.6") -> Path:
    """Create ``parent/name`` with ``Solution.xml`` and a version descriptor."""
    folder = parent / name
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "Solution.xml").write_text("<Solution />")
    if version is not None:
        props = folder / "_properties"
        props.mkdir(exist_ok=True)
        (props / "additional.xml").write_text(descriptor_xml(version))
    return folder


def create_archive(path: Path, members: dict[str, str]) -> Path:
    """Create a ``.pcwex`` zip at ``path`` with the given text members."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        for name, content in members.items():
            archive.writestr(name, content)
    return path


def create_versioned_archive(parent: Path, stem: str, version: str) -> Path:
    """Create ``parent/stem.pcwex`` whose descriptor declares ``version``."""
    return create_archive(
        parent / f"{stem}.pcwex",
        {"Solution/_properties/additional.xml": descriptor_xml(version)},
    )


def create_launcher_link(parent: Path, stem: str, version: str | None = "2023.6") -> Path:
    """Create ``parent/stem.pcwef``; with a version, also ``stemFlat/``."""
    parent.mkdir(parents=True, exist_ok=True)
    link = parent / f"{stem}.pcwef"
    link.write_text("")
    if version is not None:
        create_unpacked_project(parent, f"{stem}Flat", version)
    return link


def create_ide_install(
    ide_root: Path,
    version: str,
    exe_name: str | None = "PLCNENG64.exe",
) -> Path:
    """Create ``PLCnext Engineer <version>`` under ``ide_root``.

    Returns the executable path, or the install directory when
    ``exe_name`` is None (a partial install).
    """
    install_dir = ide_root / f"PLCnext Engineer {version}"
    install_dir.mkdir(parents=True, exist_ok=True)
    if exe_name is None:
        return install_dir
    exe = install_dir / exe_name
    exe.write_text("")
    return exe


def create_undecodable_name_archive(path: Path) -> Path:
    """Create a zip whose only member name is flagged UTF-8 but is not.

    Opening it with ``zipfile`` fails while the central directory is read.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    info = zipfile.ZipInfo("bXd/additional.xml")
    info.flag_bits |= 0x800
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr(info, descriptor_xml("2023.6"))
    path.write_bytes(path.read_bytes().replace(b"bXd/", b"b\xffd/"))
    return path
