"""Build icon markup for ``icon:`` tokens."""

import re

from .config import get_icon_family

ICON_PREFIX = "fa-"
UNDEFINED_ICON = "notdef"

_ICON_NAME = re.compile(rf"(?:{ICON_PREFIX})?([a-z-]{{2,}})")
_EXTRA_CLASS = re.compile(r"[a-zA-Z_-]{2,}")


def get_html_for_icon_name(icon_name: str | None, additional_class: str | None = "") -> str:
    """
    Get the HTML for an icon.

    Args:
        icon_name: Icon name, with or without the ``fa-`` prefix. Case
            insensitive. An illegal name gives the not-defined icon.
        additional_class: Extra class for the element. Ignored unless it only
            contains ``a-z``, ``A-Z``, ``_`` and ``-``.

    Returns:
        A single ``<i>`` element
    """
    match = _ICON_NAME.fullmatch((icon_name or "").lower())
    icon_class = match.group(1) if match else UNDEFINED_ICON
    extra = (
        f" {additional_class}"
        if additional_class and _EXTRA_CLASS.fullmatch(additional_class)
        else ""
    )
    return f'<i class="{get_icon_family()} {ICON_PREFIX}{icon_class}{extra}"></i>'
