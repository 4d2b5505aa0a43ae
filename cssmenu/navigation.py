"""Konfiguration der Standard-Navigation.

Diese Datei definiert die Konstante ``NAV_ITEMS`` mit den Einträgen der
Hauptnavigation. Über ``CSSMENU_NAV_ITEMS`` kann eine eigene Liste (oder
ein Punktpfad zu einer Liste) hinterlegt werden.
"""

from typing import List

from django.utils.module_loading import import_string

from . import conf
from .menu import MenuEntry


# "perm" steht für die Berechtigung, die für den Zugriff erforderlich ist.
NAV_ITEMS: List[MenuEntry] = [
    {
        "text": "Startseite",
        "icon": "house",
        "url": "/",
    },
    {
        "text": "Werkzeuge",
        "icon": "cog",
        "perm": "auth.view_user",
        "children": [
            {"text": "Benutzer", "icon": "user", "url": "/admin/auth/user/", "perm": "auth.view_user"},
            {"text": "Gruppen", "icon": "group", "url": "/admin/auth/group/", "perm": "auth.view_group"},
        ],
    },
]


def get_nav_items() -> List[MenuEntry]:
    """Liefert die konfigurierte Navigation."""
    items = conf.nav_items_setting()
    if isinstance(items, str):
        items = import_string(items)
    return list(items)


def iter_icons(entries: List[MenuEntry]):
    """Gibt alle Icon-Namen des Baums in Dokumentreihenfolge zurück."""
    for entry in entries:
        if entry.get("icon"):
            yield entry["icon"]
        yield from iter_icons(entry.get("children", []))
