from django.core.management.base import BaseCommand, CommandError

from cssmenu import conf
from cssmenu.cli_utils import print_icon_table
from cssmenu.images import ImageResolver
from cssmenu.navigation import get_nav_items, iter_icons


class Command(BaseCommand):
    """Prüft, ob die Icons der Navigation im Asset-Verzeichnis vorhanden sind."""

    help = (
        "Löst Icon-Namen wie die Menü-Tags auf. Ohne Namen werden alle Icons "
        "der konfigurierten Navigation geprüft."
    )

    def add_arguments(self, parser) -> None:  # noqa: ANN001 - Argparser ist trivial
        parser.add_argument("names", nargs="*", help="Zu prüfende Icon-Namen")
        parser.add_argument(
            "--match",
            choices=conf.MATCH_MODES,
            default=None,
            help="Suchmodus überschreiben (Standard: CSSMENU_IMAGE_MATCH)",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Mit Fehler beenden, wenn ein Icon fehlt",
        )

    def handle(self, *args, **options) -> None:  # noqa: ANN001
        names = options.get("names") or list(dict.fromkeys(iter_icons(get_nav_items())))
        overrides = {"match": options["match"]} if options.get("match") else {}
        resolver = ImageResolver.from_settings(**overrides)

        rows = []
        for name in names:
            path = resolver.resolve(name)
            rows.append((name, path, path != resolver.fallback))
        print_icon_table(rows)

        missing = [name for name, _, found in rows if not found]
        if missing and options.get("strict"):
            raise CommandError(f"Fehlende Icons: {', '.join(missing)}")
        self.stdout.write(
            self.style.SUCCESS(f"Geprüft: {len(rows)} Icons, fehlend: {len(missing)}")
        )
