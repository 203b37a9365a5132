# text2lesson/tests/test_encoding.py
"""Tests for attribute encoding and error markers."""

import re

from text2lesson.encoding import base64_to_string, string_to_base64
from text2lesson.errors import get_error_attribute_html, unescape_attribute


class TestEncoding:
    """Test reversible base64 encoding."""

    def test_ascii(self):
        """Plain text should encode the same way as encodeURIComponent + btoa."""
        assert string_to_base64("Paris") == "UGFyaXM="
        assert base64_to_string("UGFyaXM=") == "Paris"

    def test_non_ascii_and_quotes(self):
        """Characters unsafe in attributes should survive the round trip."""
        text = 'café "quoted" <tag> & \U0001F600'
        encoded = string_to_base64(text)
        assert re.fullmatch(r"[A-Za-z0-9+/=]+", encoded)
        assert base64_to_string(encoded) == text

    def test_lone_surrogate(self, caplog):
        """Lone surrogates should be replaced rather than raising."""
        encoded = string_to_base64("a\ud800b")
        assert base64_to_string(encoded).startswith("a")
        assert "lone surrogates" in caplog.text


class TestErrorAttribute:
    """Test data-error attributes."""

    def test_error_attribute(self):
        """The attribute value should decode to the message."""
        attribute = get_error_attribute_html('Cannot find metadata "X"')
        encoded = re.fullmatch(r'data-error="([^"]*)"', attribute).group(1)
        assert unescape_attribute(encoded) == 'Cannot find metadata "X"'
