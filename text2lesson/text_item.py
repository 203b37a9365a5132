# text2lesson/text_item.py
"""
Render the text of a problem field.

Field text is converted to HTML by the Markdown renderer and then passed
through an ordered chain of item replacements:

1. ``\\>`` becomes ``&gt;`` so a literal > can appear inside an item.
2. Missing words: ``...WORD`` blanks carrying a word, and a bare `` 123`` at
   the end of a line for a blank with no word.
3. ``emoji:NAME``
4. ``meta:KEY``
5. ``icon:NAME``
6. ``text:CONTENT``
7. ``{class}content{class}``

Item tokens may be followed by ``>class``. Only classes in SAFE_CLASSES are
used; anything else is dropped.
"""

import functools
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from .emoji import get_emoji_html
from .encoding import base64_to_string, string_to_base64
from .errors import PrivateConstructorError, get_error_attribute_html
from .icons import get_html_for_icon_name
from .markdown_renderer import html_to_plain_text, render_inline
from .metadata import Metadata

logger = logging.getLogger(__name__)

# Lowercase only.
SAFE_CLASSES = (
    "big",
    "bigger",
    "biggest",
    "massive",
    "giant",
    "small",
    "smaller",
    "smallest",
    "column",
)

MISSING_WORD_CLASS = "missing-word"
MISSING_WORD_ATTRIBUTE = "data-missing-word"

# Item must start at the start of a line, after whitespace or after a tag's >.
_START = r"(^|[\s>])"
# Word: HTML entities or anything except whitespace and angle brackets.
_WORD = r"((?:&#?[a-zA-Z0-9]+?;|[^\s<>])+?)"
_CLASS = r"(?:>([a-zA-Z]*))?"
# Item ends at end of line, whitespace, punctuation or a closing tag.
_END = r"(?=[\s,;:.?!]|$|</.+?>)"

_FACTORY_TOKEN = object()


def make_class_safe(requested_class: str | None) -> str:
    """Return the requested class (lowercase) if it is safe, otherwise ''."""
    if not requested_class:
        return ""
    requested_class = requested_class.lower()
    return requested_class if requested_class in SAFE_CLASSES else ""


def encode_missing_word(word: str | None) -> str:
    """Encode a missing word for the ``data-missing-word`` attribute."""
    return string_to_base64(word) if word else ""


def decode_missing_word(encoded: str) -> str | None:
    """Decode a ``data-missing-word`` attribute. Empty gives None."""
    return base64_to_string(encoded) if encoded else None


@dataclass
class ReplacementTracker:
    """State threaded through the replacement chain for one text item."""

    metadata: Metadata | None = None
    missing_words: list[str | None] = field(default_factory=list)


ReplaceFunction = Callable[[re.Match, ReplacementTracker], str]


@dataclass(frozen=True)
class Replacer:
    """A single rewrite rule in the replacement chain."""

    pattern: re.Pattern
    replacement: str | ReplaceFunction

    def apply(self, text: str, tracker: ReplacementTracker) -> str:
        if isinstance(self.replacement, str):
            return self.pattern.sub(self.replacement, text)
        return self.pattern.sub(lambda match: self.replacement(match, tracker), text)


def get_item_pattern(prefix: str) -> re.Pattern:
    """
    Build the pattern for an item of the form ``prefixWORD>class``.

    Any groups in ``prefix`` must be non-capturing. Groups:

    1. the character preceding the item, to be restored by the replacement
    2. the WORD, or None if empty
    3. the class without the >, or None

    Args:
        prefix: Regex fragment identifying the item

    Returns:
        Compiled case-insensitive, multiline pattern
    """
    return re.compile(
        f"{_START}{prefix}{_WORD}?{_CLASS}{_END}", re.MULTILINE | re.IGNORECASE
    )


def _missing_word_html(start: str, word: str | None, requested_class: str | None) -> str:
    classes = MISSING_WORD_CLASS
    safe_class = make_class_safe(requested_class)
    if safe_class:
        classes = f"{classes} {safe_class}"
    return (
        f'{start}<span class="{classes}" '
        f'{MISSING_WORD_ATTRIBUTE}="{encode_missing_word(word)}"></span>'
    )


# Bare blank at the end of a line and ...WORD blanks share one pattern so the
# tracker sees them in document order.
_MISSING_WORD_PATTERN = re.compile(
    r"(?P<bare_start>[ \t])123(?:>(?P<bare_class>[a-zA-Z]*))?"
    r"(?=(?:[ \t]*</(?:p|li|ul|ol|h\d|blockquote)>)*[ \t]*$)"
    r"|(?P<start>^|[\s>])\.{3}(?P<word>(?:&#?[a-zA-Z0-9]+?;|[^\s<>])+?)"
    r"(?:>(?P<class>[a-zA-Z]*))?" + _END,
    re.MULTILINE | re.IGNORECASE,
)


def _replace_missing_word(match: re.Match, tracker: ReplacementTracker) -> str:
    if match.group("bare_start") is not None:
        tracker.missing_words.append(None)
        return _missing_word_html(match.group("bare_start"), None, match.group("bare_class"))
    word = match.group("word")
    tracker.missing_words.append(word)
    return _missing_word_html(match.group("start"), word, match.group("class"))


def _replace_emoji(match: re.Match, tracker: ReplacementTracker) -> str:
    start, word, emoji_class = match.groups()
    classes = "emoji"
    safe_class = make_class_safe(emoji_class)
    if safe_class:
        classes = f"{classes} {safe_class}"
    return f'{start}<span class="{classes}">{get_emoji_html(word)}</span>'


def _replace_meta(match: re.Match, tracker: ReplacementTracker) -> str:
    start, word, _ = match.groups()
    word = word or ""
    value = tracker.metadata.get(word) if tracker.metadata else None
    if value is None:
        logger.warning("Cannot find metadata %s", word)
        error_attribute = get_error_attribute_html(f"Cannot find metadata {word}")
        return f"{start}<span {error_attribute}>{word}</span>"
    return f"{start}{value}"


def _replace_icon(match: re.Match, tracker: ReplacementTracker) -> str:
    start, word, icon_class = match.groups()
    return f"{start}{get_html_for_icon_name(word, make_class_safe(icon_class))}"


def _replace_text(match: re.Match, tracker: ReplacementTracker) -> str:
    start, word, text_class = match.groups()
    safe_class = make_class_safe(text_class)
    class_attribute = f' class="{safe_class}"' if safe_class else ""
    return f"{start}<span{class_attribute}>{word or ''}</span>"


def _replace_class_brackets(match: re.Match, tracker: ReplacementTracker) -> str:
    return f'<span class="{match.group(1).lower()}">{match.group(2)}</span>'


ITEM_REPLACERS = (
    Replacer(re.compile(r"\\>"), "&gt;"),
    Replacer(_MISSING_WORD_PATTERN, _replace_missing_word),
    Replacer(get_item_pattern("emoji:"), _replace_emoji),
    Replacer(get_item_pattern("meta:"), _replace_meta),
    Replacer(get_item_pattern("icon:"), _replace_icon),
    Replacer(get_item_pattern("text:"), _replace_text),
    Replacer(
        re.compile(
            r"\{(" + "|".join(SAFE_CLASSES) + r")\}(.*?)\{\1\}",
            re.IGNORECASE | re.DOTALL,
        ),
        _replace_class_brackets,
    ),
)


class TextItem:
    """Rendered text of one problem field."""

    def __init__(
        self,
        html: str = "",
        missing_words: list[str | None] | None = None,
        metadata: Metadata | None = None,
        *,
        _token: object = None,
    ):
        if _token is not _FACTORY_TOKEN:
            raise PrivateConstructorError(
                "Private constructor. Use TextItem.create_from_source"
            )
        self._html = html
        self._missing_words = list(missing_words or [])
        self._metadata = metadata

    @classmethod
    def create_from_source(
        cls, source: str | None, metadata: Metadata | None = None
    ) -> "TextItem":
        """
        Create a TextItem from field source text.

        Args:
            source: Source using the lesson Markdown and item syntax
            metadata: Metadata used for ``meta:`` substitutions

        Returns:
            TextItem. Empty source gives empty HTML and no missing words.
        """
        if not source:
            return cls(metadata=metadata, _token=_FACTORY_TOKEN)
        tracker = ReplacementTracker(metadata=metadata)
        post = [functools.partial(rule.apply, tracker=tracker) for rule in ITEM_REPLACERS]
        html = render_inline(source, post=post)
        return cls(html, tracker.missing_words, metadata, _token=_FACTORY_TOKEN)

    @property
    def html(self) -> str:
        return self._html

    @property
    def missing_words(self) -> list[str | None]:
        """Copy of the missing words in source order; None for blanks without a word."""
        return list(self._missing_words)

    @property
    def metadata(self) -> Metadata | None:
        return self._metadata

    @property
    def plain_text(self) -> str:
        """Text without tags; missing words are shown as ``...``."""
        html = re.sub(rf"<[^>]*{MISSING_WORD_CLASS}[^>]*>", "...", self._html)
        return html_to_plain_text(html)

    @property
    def first_word(self) -> str:
        """First word of the HTML after skipping leading tags, or ''."""
        match = re.match(r"(?:\s|<[^>]*>)*([^\s<]*)", self._html)
        return match.group(1) if match else ""

    def __bool__(self) -> bool:
        return bool(self._html.strip())

    def __repr__(self) -> str:
        return f"TextItem(html={self._html!r}, missing_words={self._missing_words!r})"


def resolve(raw: str | None, metadata: Metadata | None = None) -> TextItem:
    """Resolve raw field text into a TextItem."""
    return TextItem.create_from_source(raw, metadata)
