"""Tests für die Auflösung von Icon-Namen."""

import logging
from pathlib import Path

import pytest

from cssmenu.images import ImageResolver, resolve_image

from ..conftest import make_files

pytestmark = pytest.mark.unit


@pytest.fixture
def image_logs(caplog, monkeypatch):
    """Leitet die Logeinträge der Icon-Suche an ``caplog`` weiter."""
    monkeypatch.setattr(logging.getLogger("cssmenu.images"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="cssmenu.images")
    return caplog


def test_resolves_png_in_images(resolver):
    """``images/<name>.png`` wird direkt gefunden."""
    assert resolver.resolve("house") == "/images/house.png"


def test_resolves_png_in_icons(resolver):
    assert resolver.resolve("cog") == "/images/icons/cog.png"


def test_resolves_other_extensions(resolver):
    """GIF- und JPG-Dateien werden über die vollständige Suche gefunden."""
    assert resolver.resolve("tag") == "/images/icons/tag.gif"
    assert resolver.resolve("delete") == "/images/delete.jpg"


def test_resolves_explicit_path(resolver):
    """Ein vollständig angegebener Pfad wird unverändert übernommen."""
    assert resolver.resolve("images/delete.jpg") == "/images/delete.jpg"
    assert resolver.resolve("/images/icons/tag.gif") == "/images/icons/tag.gif"


def test_missing_icon_falls_back(resolver):
    assert resolver.resolve("missing") == "/images/broken.png"


def test_blank_name_skips_probing(asset_root, monkeypatch):
    """Leere Namen liefern das Ersatzbild ohne Dateisystemzugriff."""
    resolver = ImageResolver(asset_root)

    def fail(*args, **kwargs):
        raise AssertionError("Dateisystem darf nicht geprüft werden")

    monkeypatch.setattr(resolver, "_exists", fail)
    assert resolver.resolve("") == "/images/broken.png"
    assert resolver.resolve("   ") == "/images/broken.png"


def test_fast_path_wins_over_full_search(asset_root):
    """``images/<name>.png`` hat Vorrang vor späteren Endungen."""
    make_files(asset_root, "images/logo.png", "images/logo.jpg")
    assert ImageResolver(asset_root).resolve("logo") == "/images/logo.png"


def test_last_match_overrides_earlier_extension(asset_root):
    """Im Modus ``last`` gewinnt der Treffer der letzten Endung."""
    make_files(asset_root, "images/logo.gif", "images/logo.jpg")
    assert ImageResolver(asset_root).resolve("logo") == "/images/logo.jpg"


def test_first_match_mode(asset_root):
    make_files(asset_root, "images/logo.gif", "images/logo.jpg")
    resolver = ImageResolver(asset_root, match="first")
    assert resolver.resolve("logo") == "/images/logo.gif"


def test_first_directory_wins_per_extension(asset_root):
    """Innerhalb einer Endung gilt das erste passende Verzeichnis."""
    make_files(asset_root, "spark.gif", "images/spark.gif", "images/icons/spark.gif")
    assert ImageResolver(asset_root).resolve("spark") == "/spark.gif"


def test_name_without_extension_matches_bare_file(asset_root):
    make_files(asset_root, "images/icons/README")
    assert ImageResolver(asset_root).resolve("README") == "/images/icons/README"


def test_candidates_order(asset_root):
    """Die Prüfreihenfolge folgt Endungen außen, Verzeichnissen innen."""
    resolver = ImageResolver(asset_root, extensions=["", ".png"])
    assert resolver.candidates("x") == [
        "/x",
        "/images/x",
        "/images/icons/x",
        "/x.png",
        "/images/x.png",
        "/images/icons/x.png",
    ]


def test_custom_priority_lists(asset_root):
    make_files(asset_root, "img/flag.svg")
    resolver = ImageResolver(asset_root, extensions=[".svg"], directories=["img"])
    assert resolver.resolve("flag") == "/img/flag.svg"


def test_filesystem_errors_count_as_missing(asset_root, monkeypatch):
    """Fehler beim Prüfen eines Pfads führen zum Ersatzbild."""

    def denied(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "exists", denied)
    assert ImageResolver(asset_root).resolve("house") == "/images/broken.png"


def test_invalid_path_counts_as_missing(asset_root):
    assert ImageResolver(asset_root).resolve("ho\x00use") == "/images/broken.png"


def test_paths_outside_root_count_as_missing(asset_root):
    """Namen mit ``..`` finden keine Dateien außerhalb des Asset-Verzeichnisses."""
    make_files(asset_root.parent, "secret.png", "images/other.png")
    resolver = ImageResolver(asset_root)
    assert resolver.resolve("../secret") == "/images/broken.png"
    assert resolver.resolve("../../images/other") == "/images/broken.png"


def test_relative_parts_inside_root_are_allowed(icons):
    assert ImageResolver(icons).resolve("icons/../house") == "/images/icons/../house.png"


def test_non_string_name_is_converted(asset_root):
    make_files(asset_root, "images/5.png")
    resolver = ImageResolver(asset_root)
    assert resolver.resolve(5) == "/images/5.png"
    assert resolver.resolve(None) == "/images/broken.png"


def test_custom_fallback(asset_root):
    resolver = ImageResolver(asset_root, fallback="/img/none.gif")
    assert resolver.resolve("missing") == "/img/none.gif"


def test_unknown_match_mode(asset_root):
    with pytest.raises(ValueError):
        ImageResolver(asset_root, match="middle")


def test_no_caching_between_calls(asset_root):
    """Jeder Aufruf prüft das Dateisystem erneut."""
    resolver = ImageResolver(asset_root)
    assert resolver.resolve("late") == "/images/broken.png"
    make_files(asset_root, "images/late.png")
    assert resolver.resolve("late") == "/images/late.png"


def test_url_uses_prefix(icons):
    resolver = ImageResolver(icons, url_prefix="/public/")
    assert resolver.url("house") == "/public/images/house.png"


def test_resolve_image_uses_settings(icons, settings):
    assert resolve_image("house") == "/images/house.png"
    settings.CSSMENU_BROKEN_IMAGE = "/images/none.png"
    assert resolve_image("missing") == "/images/none.png"


def test_resolve_image_with_explicit_root(tmp_path):
    make_files(tmp_path, "images/icons/user.png")
    assert resolve_image("user", root=tmp_path) == "/images/icons/user.png"


def test_from_settings_reads_match_mode(asset_root, settings):
    make_files(asset_root, "images/logo.gif", "images/logo.jpg")
    settings.CSSMENU_IMAGE_MATCH = "first"
    assert ImageResolver.from_settings().resolve("logo") == "/images/logo.gif"


def test_fallback_is_logged(asset_root, image_logs):
    ImageResolver(asset_root).resolve("missing")

    records = [r for r in image_logs.records if getattr(r, "fallback", False)]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].icon == "missing"


def test_match_is_logged_without_fallback(icons, image_logs):
    ImageResolver(icons).resolve("house")

    assert not any(getattr(r, "fallback", False) for r in image_logs.records)
    assert "/images/house.png" in image_logs.text
