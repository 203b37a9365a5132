# text2lesson/markdown_renderer.py
"""
Convert the light version of Markdown used in lessons into HTML.

Not all Markdown is supported:

- Blockquotes: each line must start with ``>``; lazy and nested quotes are
  not supported.
- Lists: simple, single level lists only.
- HTML: inline HTML is escaped, with the exception of entities and the
  ``<br>``, ``<sub>`` and ``<sup>`` tags. The ``>`` character is left as is
  so that it can be used as a class delimiter by later processing.
- Reference links are not supported.

Callers can pass ``pre`` and ``post`` processors: callables taking and
returning a string, applied in order before escaping and after all Markdown
rules respectively.
"""

import re
from collections.abc import Callable, Iterable

from .maths import parse_maths

PostProcessor = Callable[[str], str]


def _encode_char_to_entity(chr_: str) -> str:
    return f"&#{ord(chr_)};"


def encode_to_entities(data: str) -> str:
    """Encode every character of a string as a numeric HTML entity."""
    return "".join(_encode_char_to_entity(c) for c in data)


def _all_lines_start_with(
    start: str,
    block_prefix: str = "",
    block_suffix: str = "",
    line_prefix: str = "",
    line_suffix: str = "",
    trim_contents: bool = False,
) -> tuple[re.Pattern, Callable[[re.Match], str]]:
    """
    Create a rule for consecutive lines that all begin with ``start``.

    ``start`` is a regex fragment; any groups in it must be non-capturing.
    """
    block_re = re.compile(rf"(?:^|\n){start}.*?(?:\n(?!{start})|\Z)", re.DOTALL)
    line_re = re.compile(rf"^{start}([ \t]*.*)$", re.MULTILINE)

    def replace(match: re.Match) -> str:
        contents = line_re.sub(
            lambda m: f"{line_prefix}{m.group(1)}{line_suffix}", match.group(0)
        )
        if trim_contents:
            contents = contents.lstrip("\r\n").rstrip()
        return f"\n\n{block_prefix}{contents}{block_suffix}\n\n"

    return block_re, replace


def _atx_heading(match: re.Match) -> str:
    level = min(len(match.group(1)), 6)
    return f"\n\n<h{level}>{match.group(2).strip()}</h{level}>\n\n"


# Block elements. Each produces an independent block surrounded by blank lines.
_BLOCK_RULES = [
    # Anchored so matching only starts at line starts.
    (re.compile(r"^(.+)\n=+\n", re.MULTILINE), r"\n\n<h1>\1</h1>\n\n"),
    (re.compile(r"^(.+)\n-+\n", re.MULTILINE), r"\n\n<h2>\1</h2>\n\n"),
    (re.compile(r"^(#+) *(.+?)#*[ \t]*$", re.MULTILINE), _atx_heading),
    _all_lines_start_with(
        r">[ \t]*", block_prefix="<blockquote>", block_suffix="</blockquote>"
    ),
    _all_lines_start_with(
        r"(?: {4}|\t)",
        block_prefix="<pre><code>",
        block_suffix="</code></pre>",
        trim_contents=True,
    ),
    # Horizontal rule must come before lists so - is not taken as a bullet.
    (re.compile(r"^(?:[*_-] *){3,}[ \t]*$", re.MULTILINE), "\n\n<hr>\n\n"),
    _all_lines_start_with(
        r" {0,3}[*+-][ \t]+",
        block_prefix="<ul>",
        block_suffix="</ul>",
        line_prefix="<li>",
        line_suffix="</li>",
    ),
    _all_lines_start_with(
        r" {0,3}\d+\.[ \t]+",
        block_prefix="<ol>",
        block_suffix="</ol>",
        line_prefix="<li>",
        line_suffix="</li>",
    ),
    (
        re.compile(r"^[ \t]*maths?:[ \t]*(.+?)[ \t]*$", re.MULTILINE),
        lambda m: f"\n\n{parse_maths(m.group(1), inline=False)}\n\n",
    ),
    (
        re.compile(
            r"(?:^|\n{2,})(?!\s*<(?:h\d|ul|ol|blockquote|pre|hr|div)\b)"
            r"((?:.(?:\n(?!\n))?)+)"
        ),
        r"\n\n<p>\1</p>\n\n",
    ),
    (re.compile(r"\n{2,}"), "\n\n"),
]


def _image(match: re.Match) -> str:
    return f'<img alt="{match.group(1)}" src="{match.group(2)}" title="{match.group(3) or ""}"/>'


def _link(match: re.Match) -> str:
    return (
        f'<a target="_blank" href="{match.group(2)}" '
        f'title="{match.group(3) or ""}">{match.group(1)}</a>'
    )


def _email(match: re.Match) -> str:
    encoded = encode_to_entities(match.group(1))
    return f'<a href="mailto:{encoded}">{encoded}</a>'


_URL = r"https?://[-\w@:%.+~#=/?&;]+"

_SPAN_RULES = [
    (
        re.compile(r"\{maths?\}(.+?)\{maths?\}"),
        lambda m: parse_maths(m.group(1), inline=True),
    ),
    (re.compile(rf'!\[(.*?)\]\(({_URL})(?: +"(.*?)")?\)'), _image),
    (re.compile(rf'\[(.*?)\]\(({_URL})(?: +"(.*?)")?\)'), _link),
    (
        re.compile(r"(?:&lt;|<)(https?://[-\w@:%.+~#=/]+)>"),
        r'<a target="_blank" href="\1">\1</a>',
    ),
    (
        re.compile(r"(?:&lt;|<)(\w+(?:[.-]?\w+)*@\w+(?:[.-]?\w+)*(?:\.\w{2,4})+)>"),
        _email,
    ),
    (
        re.compile(r"`{2,}(.*?)`{2,}|`(.*?)`"),
        lambda m: f"<code>{m.group(1) if m.group(1) is not None else m.group(2)}</code>",
    ),
    (re.compile(r"\*\*(\S)(.*?)(\S)\*\*"), r"<strong>\1\2\3</strong>"),
    (re.compile(r"(?<!\w)__(\S)(.*?)(\S)__(?!\w)"), r"<strong>\1\2\3</strong>"),
    (re.compile(r"\*(\S)(.*?)(\S)\*"), r"<em>\1\2\3</em>"),
    (re.compile(r"(?<!\w)_([^\s_])(.*?)([^\s_])_(?!\w)"), r"<em>\1\2\3</em>"),
]

_MARKDOWN_ESCAPES = [
    (
        re.compile(r"\\([\\`*_{}\[\]()#+.!-])"),
        lambda m: _encode_char_to_entity(m.group(1)),
    ),
]

_SECURITY_RULES = [
    (re.compile("\0"), "\ufffd"),
]

_HTML_ESCAPE_IGNORING_BR = [
    (re.compile(r"&(?![\w#]+?;)"), "&amp;"),
    (re.compile(r"<(?!/?(?:br|sub|sup)>)", re.IGNORECASE), "&lt;"),
]

_HTML_ESCAPE_ALL = [
    (re.compile(r"&(?![\w#]+?;)"), "&amp;"),
    (re.compile(r"<"), "&lt;"),
]

_HTML_CLEAN_UP = [
    (re.compile(r"^\s*$", re.MULTILINE), ""),
    (re.compile(r"<(p|div)>\s*?</\1>", re.IGNORECASE), ""),
]


def _apply_rules(data: str, rules: Iterable[tuple]) -> str:
    for pattern, replacement in rules:
        data = pattern.sub(replacement, data)
    return data


def _apply_processors(data: str, processors: Iterable[PostProcessor]) -> str:
    for processor in processors:
        data = processor(data)
    return data


def render_inline(
    text: str,
    post: Iterable[PostProcessor] | None = None,
    pre: Iterable[PostProcessor] | None = None,
) -> str:
    """
    Convert lesson Markdown into HTML.

    Args:
        text: Markdown source
        post: Processors applied, in order, after the Markdown rules
        pre: Processors applied, in order, before any escaping

    Returns:
        Resulting HTML. Empty input gives an empty string.
    """
    if not text:
        return ""
    result = text.replace("\r", "")
    result = _apply_rules(result, _SECURITY_RULES)
    if pre:
        result = _apply_processors(result, pre)
    result = _apply_rules(result, _HTML_ESCAPE_IGNORING_BR)
    result = _apply_rules(result, _MARKDOWN_ESCAPES)
    result = _apply_rules(result, _BLOCK_RULES)
    result = _apply_rules(result, _SPAN_RULES)
    result = _apply_rules(result, _HTML_CLEAN_UP)
    if post:
        result = _apply_processors(result, post)
    return result


def escape_html(data: str) -> str:
    """Escape HTML without processing any Markdown. Existing entities are kept."""
    if not data:
        return data
    data = _apply_rules(data, _SECURITY_RULES)
    return _apply_rules(data, _HTML_ESCAPE_ALL)


def html_to_plain_text(html: str) -> str:
    """Strip tags and collapse whitespace."""
    return re.sub(r"\s+", " ", re.sub(r"<[^>]*>", "", html)).strip()
