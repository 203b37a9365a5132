"""
Parse lesson metadata: the ``key: value`` lines at the start of a lesson.
"""

import re
from collections.abc import Iterator

from .errors import PrivateConstructorError
from .markdown_renderer import escape_html

# Key of word characters, a separator of : ; or . optionally followed by a
# hyphen, then the value. Surrounding whitespace is ignored.
METADATA_LINE_PATTERN = re.compile(r"^\s*(\w+)\s*[:;.]-?\s*(.*?)\s*$", re.ASCII)

_FACTORY_TOKEN = object()


class Metadata:
    """Case-insensitive, read-only lookup of metadata values."""

    def __init__(self, values: dict[str, str], *, _token: object = None):
        if _token is not _FACTORY_TOKEN:
            raise PrivateConstructorError(
                "Private constructor. Use Metadata.create_from_source"
            )
        self._values = dict(values)

    @classmethod
    def create_from_source(cls, source: str | None) -> "Metadata":
        """
        Create Metadata from the metadata section of a lesson.

        Lines that are not ``key: value`` pairs are ignored. Keys are stored in
        uppercase and a repeated key overwrites the earlier value. Values are
        HTML escaped once, here, so consumers can insert them directly into HTML.

        Args:
            source: Raw metadata text

        Returns:
            Metadata instance
        """
        values = {}
        for line in (source or "").split("\n"):
            match = METADATA_LINE_PATTERN.match(line)
            if match:
                values[match.group(1).upper()] = escape_html(match.group(2))
        return cls(values, _token=_FACTORY_TOKEN)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get the value for a key (case insensitive), or default if absent."""
        return self._values.get(key.upper(), default)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def items(self) -> list[tuple[str, str]]:
        return list(self._values.items())

    def __repr__(self) -> str:
        return f"Metadata({self._values!r})"
