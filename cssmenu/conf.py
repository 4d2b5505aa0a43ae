"""Zugriff auf die ``CSSMENU_*``-Einstellungen mit Standardwerten."""

from __future__ import annotations

import re
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

MATCH_LAST = "last"
MATCH_FIRST = "first"
MATCH_MODES = (MATCH_LAST, MATCH_FIRST)

DEFAULT_EXTENSIONS = ["", ".png", ".gif", ".jpg"]
DEFAULT_DIRECTORIES = ["", "images", "images/icons"]
DEFAULT_BROKEN_IMAGE = "/images/broken.png"

JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def asset_root() -> Path:
    """Wurzelverzeichnis, unter dem nach Icons gesucht wird."""
    root = getattr(settings, "CSSMENU_ASSET_ROOT", None)
    if root:
        return Path(root)
    base_dir = getattr(settings, "BASE_DIR", None)
    return Path(base_dir or ".") / "public"


def asset_url() -> str:
    """URL-Präfix für ``<img src>``; ohne abschließenden Slash."""
    return str(getattr(settings, "CSSMENU_ASSET_URL", "") or "").rstrip("/")


def broken_image() -> str:
    return getattr(settings, "CSSMENU_BROKEN_IMAGE", DEFAULT_BROKEN_IMAGE)


def image_match() -> str:
    mode = getattr(settings, "CSSMENU_IMAGE_MATCH", MATCH_LAST)
    if mode not in MATCH_MODES:
        raise ImproperlyConfigured(
            f"CSSMENU_IMAGE_MATCH muss einer von {MATCH_MODES} sein, nicht {mode!r}."
        )
    return mode


def image_extensions() -> list[str]:
    return list(getattr(settings, "CSSMENU_IMAGE_EXTENSIONS", DEFAULT_EXTENSIONS))


def image_directories() -> list[str]:
    return list(getattr(settings, "CSSMENU_IMAGE_DIRS", DEFAULT_DIRECTORIES))


def render_hidden_children() -> bool:
    """Gibt an, ob Kindelemente auch unter verborgenen Eltern gerendert werden."""
    return bool(getattr(settings, "CSSMENU_RENDER_HIDDEN_CHILDREN", True))


def form_name() -> str:
    name = getattr(settings, "CSSMENU_FORM_NAME", "taglist")
    if not JS_IDENTIFIER.match(name):
        raise ImproperlyConfigured(
            f"CSSMENU_FORM_NAME {name!r} ist kein gültiger JavaScript-Bezeichner."
        )
    return name


def tag_name() -> str:
    return getattr(settings, "CSSMENU_TAG_NAME", "commit")


def nav_items_setting():
    """Liste der Navigationseinträge oder Punktpfad dorthin."""
    return getattr(settings, "CSSMENU_NAV_ITEMS", "cssmenu.navigation.NAV_ITEMS")
