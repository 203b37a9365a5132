"""
Environment-driven settings for lesson parsing.

Values are read at call time so tests and hosts can change the environment
without reloading the package.
"""

import os

DEFAULT_ICON_FAMILY = "fa-solid"


def get_icon_family() -> str:
    """Get the icon font family class used for ``icon:`` tokens."""
    return os.getenv("TEXT2LESSON_ICON_FAMILY", DEFAULT_ICON_FAMILY).strip() or (
        DEFAULT_ICON_FAMILY
    )


def get_max_source_length() -> int:
    """
    Get the maximum accepted length of a lesson source.

    Returns:
        Maximum number of characters, or 0 for no limit. Invalid or negative
        values are treated as no limit.
    """
    try:
        value = int(os.getenv("TEXT2LESSON_MAX_SOURCE_LENGTH", "0"))
    except ValueError:
        return 0
    return max(value, 0)
