"""Hilfsfilter für das Logging der Icon-Auflösung."""

from __future__ import annotations

import logging


class FallbackFilter(logging.Filter):
    """Lässt nur Einträge über fehlende Icons passieren."""

    def __init__(self, icon: str | None = None) -> None:
        super().__init__()
        self.icon = icon

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - Django-Style
        """Prüft das Fallback-Flag und optional den Icon-Namen."""
        if not getattr(record, "fallback", False):
            return False
        return self.icon is None or getattr(record, "icon", None) == self.icon
