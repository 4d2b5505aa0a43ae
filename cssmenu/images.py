"""Auflösung von Icon-Namen zu Bilddateien unterhalb des Asset-Verzeichnisses.

Icons werden üblicherweise nur mit ihrem Namen ohne Endung angegeben
(``"house"``). Gesucht wird im Asset-Verzeichnis selbst sowie in
``images/`` und ``images/icons/``, jeweils ohne Endung und mit ``.png``,
``.gif`` oder ``.jpg``. Explizit angegebene Pfade mit Endung werden
ebenfalls gefunden.
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Iterable, Optional

from . import conf

logger = logging.getLogger(__name__)

# Die häufigsten Fälle werden vor der vollständigen Suche geprüft.
FAST_PATH_DIRECTORIES = ("images", "images/icons")


class ImageResolver:
    """Sucht zu einem Icon-Namen den passenden Bildpfad.

    ``match`` legt fest, welcher Treffer der vollständigen Suche gewinnt:
    ``"last"`` überschreibt frühere Treffer mit jedem späteren (je Endung
    gilt das erste passende Verzeichnis), ``"first"`` bricht beim ersten
    Treffer ab. Es wird nichts zwischengespeichert.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        extensions: Optional[Iterable[str]] = None,
        directories: Optional[Iterable[str]] = None,
        match: str = conf.MATCH_LAST,
        fallback: str = conf.DEFAULT_BROKEN_IMAGE,
        url_prefix: str = "",
    ) -> None:
        if match not in conf.MATCH_MODES:
            raise ValueError(f"Unbekannter Suchmodus: {match!r}")
        self.root = Path(root)
        self.extensions = list(conf.DEFAULT_EXTENSIONS if extensions is None else extensions)
        self.directories = list(conf.DEFAULT_DIRECTORIES if directories is None else directories)
        self.match = match
        self.fallback = fallback
        self.url_prefix = url_prefix.rstrip("/")

    @classmethod
    def from_settings(cls, **overrides) -> "ImageResolver":
        """Erzeugt einen Resolver aus den ``CSSMENU_*``-Einstellungen."""
        options = {
            "extensions": conf.image_extensions(),
            "directories": conf.image_directories(),
            "match": conf.image_match(),
            "fallback": conf.broken_image(),
            "url_prefix": conf.asset_url(),
        }
        options.update(overrides)
        root = options.pop("root", None) or conf.asset_root()
        return cls(root, **options)

    def candidates(self, name: str) -> list[str]:
        """Alle Pfade der vollständigen Suche in Prüfreihenfolge."""
        return [
            self._relative(directory, name + ext)
            for ext in self.extensions
            for directory in self.directories
        ]

    def resolve(self, name: str) -> str:
        """Gibt den Pfad (mit führendem ``/``) oder das Ersatzbild zurück."""
        name = "" if name is None else str(name)
        if not name.strip():
            return self.fallback

        for directory in FAST_PATH_DIRECTORIES:
            candidate = self._relative(directory, f"{name}.png")
            if self._exists(candidate):
                logger.debug("Icon '%s' gefunden: %s", name, candidate)
                return candidate

        filename = ""
        for ext in self.extensions:
            for directory in self.directories:
                candidate = self._relative(directory, name + ext)
                if self._exists(candidate):
                    filename = candidate
                    break
            if filename and self.match == conf.MATCH_FIRST:
                break

        if not filename:
            logger.warning(
                "Kein Bild für Icon '%s' unter %s gefunden",
                name,
                self.root,
                extra={"icon": name, "fallback": True},
            )
            return self.fallback
        logger.debug("Icon '%s' gefunden: %s", name, filename)
        return filename

    def url(self, name: str) -> str:
        """Wie :meth:`resolve`, aber mit vorangestelltem ``url_prefix``."""
        return self.url_prefix + self.resolve(name)

    @staticmethod
    def _relative(directory: str, filename: str) -> str:
        return "/" + posixpath.join(directory.strip("/"), filename.lstrip("/")).lstrip("/")

    def _exists(self, relative: str) -> bool:
        try:
            candidate = (self.root / relative.lstrip("/")).resolve()
            # Nur Dateien innerhalb des Asset-Verzeichnisses zählen.
            if not candidate.is_relative_to(self.root.resolve()):
                return False
            return candidate.exists()
        except (OSError, ValueError) as exc:
            logger.debug("Pfad %s nicht prüfbar: %s", relative, exc)
            return False


def resolve_image(name: str, root: Path | str | None = None) -> str:
    """Löst ``name`` mit den konfigurierten Einstellungen auf."""
    if root is None:
        return ImageResolver.from_settings().resolve(name)
    return ImageResolver.from_settings(root=root).resolve(name)
