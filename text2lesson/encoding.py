"""
Reversible encoding of arbitrary text for use inside HTML attributes.

The text is percent-encoded with ``encodeURIComponent`` semantics and the
result is base64 encoded, so the attribute value only ever contains
``[A-Za-z0-9+/=]``.
"""

import base64
import logging
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

# Characters left untouched by encodeURIComponent besides alphanumerics and -_.~
_URI_COMPONENT_SAFE = "!*'()"


def safe_encode_uri_component(value: str) -> str:
    """Percent-encode a string, replacing lone surrogates if present."""
    try:
        return quote(value, safe=_URI_COMPONENT_SAFE)
    except UnicodeEncodeError as error:
        logger.error("Re-encoding string with lone surrogates: %s", error)
        return quote(value, safe=_URI_COMPONENT_SAFE, errors="replace")


def string_to_base64(value: str) -> str:
    """Encode a string to base64 via its URI-component encoding."""
    encoded = safe_encode_uri_component(value)
    return base64.b64encode(encoded.encode("ascii")).decode("ascii")


def base64_to_string(value: str) -> str:
    """Decode a string previously produced by string_to_base64."""
    return unquote(base64.b64decode(value).decode("ascii"))
