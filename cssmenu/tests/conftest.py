"""Gemeinsame Testkonfiguration für das cssmenu-Modul."""

from pathlib import Path

import pytest

from cssmenu.images import ImageResolver


def make_files(root: Path, *paths: str) -> None:
    """Legt leere Dateien relativ zu ``root`` an."""
    for rel in paths:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")


@pytest.fixture
def asset_root(tmp_path: Path, settings) -> Path:
    """Leeres Asset-Verzeichnis, das in den Einstellungen hinterlegt ist."""
    root = tmp_path / "public"
    (root / "images" / "icons").mkdir(parents=True)
    settings.CSSMENU_ASSET_ROOT = str(root)
    settings.CSSMENU_ASSET_URL = ""
    settings.CSSMENU_IMAGE_MATCH = "last"
    settings.CSSMENU_RENDER_HIDDEN_CHILDREN = True
    return root


@pytest.fixture
def icons(asset_root: Path) -> Path:
    """Asset-Verzeichnis mit einigen typischen Icons."""
    make_files(
        asset_root,
        "images/house.png",
        "images/icons/cog.png",
        "images/icons/tag.gif",
        "images/delete.jpg",
    )
    return asset_root


@pytest.fixture
def resolver(icons: Path) -> ImageResolver:
    return ImageResolver(icons)
