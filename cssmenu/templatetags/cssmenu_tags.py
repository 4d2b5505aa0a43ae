"""Template-Tags für CSS-Menüs.

Beispiel::

    {% load cssmenu_tags %}
    {% menubar %}
      {% menu_item "Startseite" "house" "home" %}
      {% submenu "Markierte Einträge" "tag" %}
        {% js_submit "email" as mail_js %}
        {% menu_item "Mail senden" "email" "" None onclick=mail_js %}
        {% js_submit "delete" confirm="Wirklich löschen?" as delete_js %}
        {% menu_item "Löschen" "delete" "" None onclick=delete_js %}
      {% endsubmenu %}
    {% endmenubar %}
"""

from django import template
from django.shortcuts import resolve_url
from django.template.base import kwarg_re
from django.templatetags.static import static
from django.utils.html import format_html

from .. import conf
from ..menu import Permission, render_menu, render_menu_item, render_menubar, render_submenu
from ..scripts import js_submit as build_js_submit

register = template.Library()

SUBMENU_ARGS = ("text", "image", "url", "permission")


def _permission(value):
    """Wandelt Template-Werte nach Wahrheitswert in eine Berechtigung um."""
    if value is None or isinstance(value, Permission):
        return Permission.coerce(value)
    return Permission.coerce(bool(value))


def _menu_url(url) -> str:
    if not url:
        return ""
    if isinstance(url, str) and url.startswith("#"):
        return url
    return resolve_url(url)


def _html_options(attrs, html_options) -> dict:
    options = dict(attrs or {})
    options.update({key.replace("_", "-"): value for key, value in html_options.items()})
    return options


def _parse_bits(parser, bits, tag_name, max_positional):
    args = []
    kwargs = {}
    for bit in bits:
        match = kwarg_re.match(bit)
        name, value = match.groups() if match else (None, bit)
        if name:
            if name in kwargs:
                raise template.TemplateSyntaxError(
                    f"'{tag_name}' erhielt das Argument '{name}' mehrfach"
                )
            kwargs[name] = parser.compile_filter(value)
        elif kwargs:
            raise template.TemplateSyntaxError(
                f"'{tag_name}': Positionsargumente müssen vor Schlüsselwortargumenten stehen"
            )
        else:
            args.append(parser.compile_filter(value))
    if len(args) > max_positional:
        raise template.TemplateSyntaxError(
            f"'{tag_name}' akzeptiert höchstens {max_positional} Positionsargumente"
        )
    return args, kwargs


class MenuBarNode(template.Node):
    def __init__(self, permission, nodelist):
        self.permission = permission
        self.nodelist = nodelist

    def render(self, context):
        permission = _permission(self.permission.resolve(context) if self.permission else None)
        if not permission.visible and not conf.render_hidden_children():
            return ""
        content = self.nodelist.render(context)
        return render_menubar(permission, content)


class SubMenuNode(template.Node):
    def __init__(self, args, kwargs, nodelist):
        self.args = args
        self.kwargs = kwargs
        self.nodelist = nodelist

    def render(self, context):
        values = dict(zip(SUBMENU_ARGS, (arg.resolve(context) for arg in self.args)))
        options = {key: value.resolve(context) for key, value in self.kwargs.items()}
        attrs = options.pop("attrs", None)
        permission = _permission(values.get("permission"))
        if not permission.visible and not conf.render_hidden_children():
            return ""
        content = self.nodelist.render(context)
        if not permission.visible:
            return ""
        return render_submenu(
            values.get("text", ""),
            values.get("image", ""),
            _menu_url(values.get("url")),
            permission,
            _html_options(attrs, options),
            content,
        )


@register.tag
def menubar(parser, token):
    """``{% menubar [permission] %}…{% endmenubar %}``"""
    bits = token.split_contents()
    if len(bits) > 2:
        raise template.TemplateSyntaxError(
            f"'{bits[0]}' akzeptiert höchstens ein Argument (permission)"
        )
    permission = parser.compile_filter(bits[1]) if len(bits) == 2 else None
    nodelist = parser.parse(("endmenubar",))
    parser.delete_first_token()
    return MenuBarNode(permission, nodelist)


@register.tag
def submenu(parser, token):
    """``{% submenu [text] [image] [url] [permission] [key=value…] %}…{% endsubmenu %}``"""
    bits = token.split_contents()
    args, kwargs = _parse_bits(parser, bits[1:], bits[0], len(SUBMENU_ARGS))
    nodelist = parser.parse(("endsubmenu",))
    parser.delete_first_token()
    return SubMenuNode(args, kwargs, nodelist)


@register.simple_tag
def menu_item(text="", image="", url="", permission=None, attrs=None, **html_options):
    """Ein einzelner Menüeintrag; ``data_id=1`` wird zu ``data-id="1"``."""
    permission = _permission(permission)
    if not permission.visible:
        return ""
    return render_menu_item(text, image, _menu_url(url), permission, _html_options(attrs, html_options))


@register.simple_tag(name="js_submit")
def js_submit_tag(command="", form_name=None, tag_name=None, confirm=None):
    return build_js_submit(command, form_name=form_name, tag_name=tag_name, confirm=confirm)


@register.simple_tag(takes_context=True)
def menu_tree(context, entries, permission=None):
    """Rendert einen Menübaum aus ``MenuEntry``-Einträgen samt Menüleiste."""
    return render_menu(entries or [], user=context.get("user"), permission=_permission(permission))


@register.simple_tag
def cssmenu_stylesheet():
    return format_html('<link rel="stylesheet" href="{}" />', static("cssmenu/cssmenu.css"))
