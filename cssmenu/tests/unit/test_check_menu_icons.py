"""Tests für den Management-Befehl ``check_menu_icons``."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from ..conftest import make_files

pytestmark = pytest.mark.unit


@pytest.fixture
def printed(monkeypatch):
    """Fängt die Tabellenzeilen statt der Rich-Ausgabe ab."""
    rows = []
    monkeypatch.setattr(
        "cssmenu.management.commands.check_menu_icons.print_icon_table", rows.extend
    )
    return rows


def test_reports_given_names(icons, printed):
    out = StringIO()
    call_command("check_menu_icons", "house", "missing", stdout=out)

    assert printed == [
        ("house", "/images/house.png", True),
        ("missing", "/images/broken.png", False),
    ]
    assert "Geprüft: 2 Icons, fehlend: 1" in out.getvalue()


def test_defaults_to_navigation_icons(icons, printed, settings):
    settings.CSSMENU_NAV_ITEMS = [
        {"text": "A", "icon": "house"},
        {"text": "B", "icon": "cog", "children": [{"text": "C", "icon": "house"}]},
    ]
    call_command("check_menu_icons", stdout=StringIO())

    assert [name for name, _, _ in printed] == ["house", "cog"]
    assert all(found for _, _, found in printed)


def test_strict_fails_on_missing(icons, printed):
    with pytest.raises(CommandError, match="missing"):
        call_command("check_menu_icons", "house", "missing", "--strict", stdout=StringIO())


def test_strict_passes_when_complete(icons, printed):
    out = StringIO()
    call_command("check_menu_icons", "house", "cog", "--strict", stdout=out)
    assert "fehlend: 0" in out.getvalue()


def test_match_override(asset_root, printed):
    make_files(asset_root, "images/logo.gif", "images/logo.jpg")

    call_command("check_menu_icons", "logo", stdout=StringIO())
    call_command("check_menu_icons", "logo", "--match", "first", stdout=StringIO())

    assert [path for _, path, _ in printed] == ["/images/logo.jpg", "/images/logo.gif"]


def test_rich_table_output(icons, capsys):
    call_command("check_menu_icons", "house", stdout=StringIO())
    assert "Menü-Icons" in capsys.readouterr().out
