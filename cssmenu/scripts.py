"""JavaScript-Schnipsel, die Menüeinträge in Submit-Buttons verwandeln.

Gedacht für Listen mit Checkboxen innerhalb eines Formulars: Ein
Menüeintrag setzt den Wert des Submit-Felds auf ein Kommando und sendet
das Formular ab, optional nach einer Sicherheitsabfrage.
"""

from __future__ import annotations

from typing import Optional

from django.utils.html import escapejs

from . import conf


def js_submit(
    command: str = "",
    form_name: Optional[str] = None,
    tag_name: Optional[str] = None,
    confirm: Optional[str] = None,
) -> str:
    """Gibt den ``onclick``-Code zum Absenden von ``form_name`` zurück.

    ``command``, ``tag_name`` und ``confirm`` werden für String-Literale
    escaped. ``form_name`` wird als Bezeichner eingesetzt und muss daher
    ein gültiger JavaScript-Bezeichner sein.
    """
    form_name = conf.form_name() if form_name is None else form_name
    tag_name = conf.tag_name() if tag_name is None else tag_name
    if not conf.JS_IDENTIFIER.match(form_name or ""):
        raise ValueError(f"Ungültiger Formularname: {form_name!r}")

    submit = (
        f"document.{form_name}['{escapejs(tag_name)}'].value='{escapejs(command or '')}'; "
        f"document.{form_name}.submit(); return false;"
    )
    if confirm is not None:
        return f"if (confirm('{escapejs(confirm)}')) {{ {submit} }} else {{ return false; }}"
    return submit
