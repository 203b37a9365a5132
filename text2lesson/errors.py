"""Exceptions and inline error markers."""

from .encoding import base64_to_string, string_to_base64


class Text2LessonError(Exception):
    """Base class for errors raised by the lesson parser."""

    pass


class PrivateConstructorError(Text2LessonError, TypeError):
    """Raised when a parsed type is constructed without its factory."""

    pass


class LessonSourceTooLargeError(Text2LessonError, ValueError):
    """Raised when a lesson source exceeds the configured maximum length."""

    pass


def escape_attribute(content: str) -> str:
    """Escape content so that it is safe to include in an attribute."""
    return string_to_base64(content)


def unescape_attribute(escaped_content: str) -> str:
    """Reverse escape_attribute."""
    return base64_to_string(escaped_content)


def get_error_attribute_html(message: str) -> str:
    """
    Get a ``data-error`` attribute suitable for inserting into an HTML tag.

    Args:
        message: Diagnostic message shown by the presentation layer

    Returns:
        String of the form ``data-error="<escaped message>"``
    """
    return f'data-error="{escape_attribute(message)}"'
