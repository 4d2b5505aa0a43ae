import logging

from django.apps import AppConfig

from . import conf


logger = logging.getLogger(__name__)


class CssMenuConfig(AppConfig):
    name = "cssmenu"
    verbose_name = "CSS-Menü"

    def ready(self):
        """Prüft die Einstellungen und protokolliert die wirksame Konfiguration."""
        logger.debug(
            "cssmenu cfg root=%s url=%r match=%s hidden_children=%s",
            conf.asset_root(),
            conf.asset_url(),
            conf.image_match(),
            conf.render_hidden_children(),
        )
