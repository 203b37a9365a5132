"""
Resolve emoji definitions to HTML.

A definition is either a name from PREDEFINED_EMOJIS or a sequence of Unicode
code points written as ``U+XXXX`` (e.g. ``U+1F600U+1F3FD``).
"""

import logging
import re

from .errors import get_error_attribute_html

logger = logging.getLogger(__name__)

# Keys must be uppercase. A value starting with @ is an alias for another key.
# Avoid underscores in names as they would be read as emphasis.
PREDEFINED_EMOJIS = {
    "GRINNING": "&#x1F600;",
    ")": "@GRINNING",
    "-)": "@GRINNING",
    "SMILEY": "@GRINNING",
    "SMILING": "@GRINNING",
    "HAPPY": "@GRINNING",
    "WORRIED": "&#x1F61F;",
    "SAD": "@WORRIED",
    "LAUGHING": "&#x1F602;",
    "LAUGH": "@LAUGHING",
    "CRYING": "&#x1F622;",
    "TEAR": "@CRYING",
    "FROWNING": "&#x1F641;",
    "(": "@FROWNING",
    "-(": "@FROWNING",
    "NEUTRAL": "&#x1F610;",
    "ANGRY": "&#x1F620;",
    "GRUMPY": "@ANGRY",
    "WINK": "&#x1F609;",
    "WINKY": "@WINK",
    "WINKING": "@WINK",
    "THUMBS-UP": "&#x1F44D;",
    "THUMBS-DOWN": "&#x1F44E;",
    "TICK": "&#x2714;&#xFE0F;",
    "CROSS": "&#x274C;",
    "STAR": "&#x2B50;",
    "WARNING": "&#x26A0;&#xFE0F;",
    "ALERT": "@WARNING",
    "ERROR": "@WARNING",
    "WHITE-QUESTION-MARK": "&#x2754;",
}

_UNICODE_SEQUENCE = re.compile(r"U\+([A-F0-9]+)")


def get_emoji_html(original_definition: str | None) -> str:
    """
    Get the HTML for an emoji definition.

    Args:
        original_definition: Emoji name or ``U+XXXX`` sequence. Case insensitive.

    Returns:
        HTML entities for the emoji. A blank definition gives a single space;
        an unknown name gives a question mark glyph in a span carrying a
        ``data-error`` attribute.
    """
    if not original_definition:
        logger.debug("Blank emoji definition")
        return " "
    definition = original_definition.upper()
    if definition.startswith("U+"):
        return _UNICODE_SEQUENCE.sub(r"&#x\1;", definition)

    code = PREDEFINED_EMOJIS.get(definition)
    if code and code.startswith("@"):
        code = PREDEFINED_EMOJIS.get(code[1:])
    if not code:
        logger.warning("Cannot find emoji %s", original_definition)
        error_attribute = get_error_attribute_html(
            f"Cannot find emoji {original_definition}"
        )
        return f"<span {error_attribute}>{PREDEFINED_EMOJIS['WHITE-QUESTION-MARK']}</span>"
    return code
