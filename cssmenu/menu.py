"""CSS-Menüs: Menüleiste, Menüeinträge und Untermenüs.

Die Funktionen erzeugen verschachtelte ungeordnete Listen. Die äußere
Liste trägt die Klasse ``cssMenu``; ohne Stylesheet wird daraus eine
einfache Liste, mit ``cssmenu/cssmenu.css`` eine horizontale Leiste mit
Dropdowns. JavaScript wird nicht benötigt.

Typischer Aufbau (Kindinhalte werden zuerst gerendert)::

    items = render_menu_item("Startseite", "house", "/")
    tools = render_submenu("Werkzeuge", "cog", content=render_menu_item("Export", "report_disk", "/export/"))
    html = render_menubar(content=items + tools)
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Iterable, List, Mapping, Optional, TypedDict, Union

from django.forms.utils import flatatt
from django.urls import reverse
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString, mark_safe

from . import conf
from .images import ImageResolver

logger = logging.getLogger(__name__)

MENUBAR_OPEN = '\n    <!-- cssMenu -->\n    <ul class="cssMenu">\n'
MENUBAR_CLOSE = "    </ul>\n"


class Permission(enum.Enum):
    """Sichtbarkeit eines Menüknotens. ``UNSET`` verhält sich wie ``ALLOW``."""

    ALLOW = "allow"
    DENY = "deny"
    UNSET = "unset"

    @classmethod
    def coerce(cls, value: Union["Permission", bool, None]) -> "Permission":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.ALLOW if value else cls.DENY
        raise TypeError(f"Ungültiger Berechtigungswert: {value!r}")

    @property
    def visible(self) -> bool:
        return self is not Permission.DENY


PermissionValue = Union[Permission, bool, None, str]


class MenuEntry(TypedDict, total=False):
    """Ein Knoten im Menübaum.

    ``perm`` ist ``None``/bool/:class:`Permission` oder ein Django-Recht
    (``"app.codename"``). Einträge mit ``children`` werden als Untermenü
    gerendert.
    """

    text: str
    icon: str
    url: str
    url_name: str
    perm: PermissionValue
    attrs: dict[str, Any]
    children: List["MenuEntry"]


def _stringify(html_options: Optional[Mapping[Any, Any]]) -> dict[str, Any]:
    return {str(key): value for key, value in (html_options or {}).items()}


def image_tag(image: str, resolver: Optional[ImageResolver] = None) -> SafeString:
    """``<img>`` für ein Icon; leer bei leerem Namen."""
    image = "" if image is None else str(image)
    if not image.strip():
        return mark_safe("")
    resolver = resolver or ImageResolver.from_settings()
    return format_html('<img alt="" src="{}" />', resolver.url(image))


def _link(label: SafeString, url: str, html_options: Optional[Mapping[Any, Any]]) -> SafeString:
    return format_html('<a href="{}"{}>{}</a>', url, flatatt(_stringify(html_options)), label)


def _label(text: Optional[str], image: Optional[str], resolver: Optional[ImageResolver]) -> SafeString:
    return format_html("{}{}", image_tag(image or "", resolver), text or "")


def render_menubar(permission: Union[Permission, bool, None] = None, content: Optional[str] = None) -> SafeString:
    """Umschließt die gerenderten Einträge mit ``<ul class="cssMenu">``.

    Ohne ``content`` oder bei verweigerter Berechtigung wird nichts
    ausgegeben. ``content`` gilt als fertiges Markup und wird unverändert
    übernommen.
    """
    if content is None or not Permission.coerce(permission).visible:
        return mark_safe("")
    return mark_safe(MENUBAR_OPEN + content + MENUBAR_CLOSE)


def render_menu_item(
    text: Optional[str] = "",
    image: Optional[str] = "",
    url: Optional[str] = "",
    permission: Union[Permission, bool, None] = None,
    html_options: Optional[Mapping[Any, Any]] = None,
    resolver: Optional[ImageResolver] = None,
) -> SafeString:
    """Erzeugt ein ``<li>`` mit Link, optional mit Icon vor dem Text."""
    if not Permission.coerce(permission).visible:
        return mark_safe("")
    label = _label(text, image, resolver)
    return format_html("<li>{}</li>", _link(label, url or "#", html_options))


def render_submenu(
    text: Optional[str] = "",
    image: Optional[str] = "",
    url: Optional[str] = "",
    permission: Union[Permission, bool, None] = None,
    html_options: Optional[Mapping[Any, Any]] = None,
    content: Optional[str] = None,
    resolver: Optional[ImageResolver] = None,
) -> SafeString:
    """Erzeugt einen Eintrag mit verschachtelter Liste für ``content``.

    Bei verweigerter Berechtigung entfällt das gesamte Untermenü. Der
    bereits gerenderte ``content`` wird dabei verworfen.
    """
    if content is None or not Permission.coerce(permission).visible:
        return mark_safe("")
    label = format_html("<span>{}</span>", _label(text, image, resolver))
    link = _link(label, url or "#", html_options)
    return mark_safe("    <li>" + link + "\n      <ul>\n" + content + "      </ul></li>\n")


def entry_permission(entry: MenuEntry, user=None) -> Permission:
    """Ermittelt die Berechtigung eines Eintrags, ggf. über ``user.has_perm``."""
    perm = entry.get("perm")
    if isinstance(perm, str):
        return Permission.coerce(user is not None and user.has_perm(perm))
    return Permission.coerce(perm)


def entry_url(entry: MenuEntry) -> str:
    if entry.get("url_name"):
        return reverse(entry["url_name"])
    return entry.get("url") or ""


def render_menu_entries(
    entries: Iterable[MenuEntry],
    user=None,
    resolver: Optional[ImageResolver] = None,
    render_hidden_children: Optional[bool] = None,
) -> SafeString:
    """Rendert eine Liste von Einträgen rekursiv, Kinder vor den Eltern."""
    if render_hidden_children is None:
        render_hidden_children = conf.render_hidden_children()
    resolver = resolver or ImageResolver.from_settings()

    parts: list[str] = []
    for entry in entries:
        permission = entry_permission(entry, user)
        if "children" in entry:
            if not permission.visible and not render_hidden_children:
                logger.debug("Untermenü '%s' ausgeblendet", entry.get("text", ""))
                continue
            content = render_menu_entries(
                entry["children"], user, resolver, render_hidden_children
            )
            parts.append(
                render_submenu(
                    entry.get("text", ""),
                    entry.get("icon", ""),
                    entry_url(entry) if permission.visible else "",
                    permission,
                    entry.get("attrs"),
                    content,
                    resolver,
                )
            )
        else:
            parts.append(
                render_menu_item(
                    entry.get("text", ""),
                    entry.get("icon", ""),
                    entry_url(entry) if permission.visible else "",
                    permission,
                    entry.get("attrs"),
                    resolver,
                )
            )
    return mark_safe("".join(conditional_escape(part) for part in parts))


def render_menu(
    entries: Iterable[MenuEntry],
    user=None,
    permission: Union[Permission, bool, None] = None,
    resolver: Optional[ImageResolver] = None,
    render_hidden_children: Optional[bool] = None,
) -> SafeString:
    """Rendert einen kompletten Menübaum inklusive Menüleiste."""
    if render_hidden_children is None:
        render_hidden_children = conf.render_hidden_children()
    if not Permission.coerce(permission).visible and not render_hidden_children:
        return mark_safe("")
    content = render_menu_entries(entries, user, resolver, render_hidden_children)
    return render_menubar(permission, content)
