"""Kontextprozessoren für die Django-Templates."""

from __future__ import annotations

from django.http import HttpRequest
from django.utils.functional import SimpleLazyObject

from .menu import render_menu
from .navigation import get_nav_items


def cssmenu_navigation(request: HttpRequest) -> dict[str, SimpleLazyObject | str]:
    """Stellt die konfigurierte Navigation für den aktuellen Benutzer bereit.

    Gerendert wird erst, wenn ein Template ``cssmenu_navigation`` ausgibt.
    Nicht angemeldete Benutzer erhalten eine leere Navigation.
    """

    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return {"cssmenu_navigation": ""}
    return {"cssmenu_navigation": SimpleLazyObject(lambda: render_menu(get_nav_items(), user=user))}
