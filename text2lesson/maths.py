"""
Simple maths notation rendered to HTML.

Supports Greek letter names, a handful of operators written as text, stacked
fractions and super/subscripts. Letters and digits are converted to the
mathematical alphanumeric code points so equations render in an italic face
without any additional styling.
"""

import re

_MATHS_UPPER_A = 0x1D434
_MATHS_LOWER_A = 0x1D44E
_MATHS_ZERO = 0x1D7F6

GREEK_LETTERS = [
    "Alpha",
    "Beta",
    "Gamma",
    "Delta",
    "Epsilon",
    "Zeta",
    "Eta",
    "Theta",
    "Iota",
    "Kappa",
    "Lambda",
    "Mu",
    "Nu",
    "Xi",
    "Omicron",
    "Pi",
    "Rho",
    "Sigma",
    "Tau",
    "Upsilon",
    "Phi",
    "Chi",
    "Psi",
    "Omega",
]

# Replacements that only produce entities. No tags allowed here.
_ENTITY_REPLACEMENTS = [
    (re.compile(r"\s*-\s*"), " &minus; "),
    (re.compile(r"\s*\*\s*"), " &times; "),
    (re.compile(r"\s+ne(?= )"), " &ne; "),
    (re.compile(r"\s*(?:!=|/=)\s*"), " &ne; "),
    (re.compile(r"\s*(?:<|&lt;)="), " &le; "),
    (re.compile(r"\s*(?:>|&gt;)="), " &ge; "),
    (re.compile(r"(?<![a-zA-Z])sqrt(?![a-zA-Z])", re.IGNORECASE), "&radic;"),
    (re.compile(r"(?<![a-zA-Z])sum(?![a-zA-Z])", re.IGNORECASE), "&sum;"),
    (re.compile(r"(?<![a-zA-Z])int(?![a-zA-Z])", re.IGNORECASE), "&int;"),
    (re.compile(r"\s*(?<![a-zA-Z])d:"), " &part;"),
    (re.compile(r"([a-zA-Z0-9])\.(?=[a-zA-Z])"), r"\1&sdot;"),
]

_TAG_REPLACEMENTS = [
    (
        re.compile(r"((?:\(.*?\))|\S+?)\s*/\s*((?:\(.*?\))|\S+)"),
        r"<table><tr><td>\1</td></tr><tr><td>\2</td></tr></table>",
    ),
    (re.compile(r"\s*\^\s*((?:\(.*?\))|[^\s)]+)"), r"<sup>\1</sup>"),
    (re.compile(r"\s*_\s*((?:\(.*?\))|[^\s)]+)"), r"<sub>\1</sub>"),
    (re.compile(r" +"), "&nbsp;"),
    (re.compile(r"(&int;)"), r'<span class="high-symbol">\1</span>'),
    (
        re.compile(r"&radic;\[([^\]]*?)\]"),
        r'<span class="radic">&radic;</span><span class="sqrt">\1</span>',
    ),
]


def get_maths_character(chr_: str) -> str:
    """Convert a single ASCII letter or digit to its maths equivalent."""
    if "A" <= chr_ <= "Z":
        return chr(_MATHS_UPPER_A + ord(chr_) - ord("A"))
    if "a" <= chr_ <= "z":
        return chr(_MATHS_LOWER_A + ord(chr_) - ord("a"))
    if "0" <= chr_ <= "9":
        return chr(_MATHS_ZERO + ord(chr_) - ord("0"))
    return chr_


def _to_maths_characters(match: re.Match) -> str:
    return "".join(get_maths_character(c) for c in match.group(0))


def _replace_greek_letters(data: str) -> str:
    for letter in GREEK_LETTERS:
        for name in (letter, letter.lower()):
            data = re.sub(rf"(?<![a-zA-Z&]){name}(?![a-zA-Z;])", f"&{name};", data)
    return data


def _replace_alphanumerics(data: str) -> str:
    """Convert letters and digits to maths characters, leaving entities intact."""
    parts = re.split(r"(&#?[a-zA-Z0-9]+;)", data)
    for index in range(0, len(parts), 2):
        parts[index] = re.sub(r"[a-zA-Z0-9]+", _to_maths_characters, parts[index])
    return "".join(parts)


def parse_maths(data: str, inline: bool) -> str:
    """
    Render a maths expression.

    Args:
        data: Expression using the plain text maths notation
        inline: True for a span, otherwise a block level div

    Returns:
        HTML for the expression
    """
    tag = "span" if inline else "div"
    data = _replace_greek_letters(data.strip())
    for pattern, replacement in _ENTITY_REPLACEMENTS:
        data = pattern.sub(replacement, data)
    data = _replace_alphanumerics(data)
    for pattern, replacement in _TAG_REPLACEMENTS:
        data = pattern.sub(replacement, data)
    return f'<{tag} class="maths">{data.strip()}</{tag}>'
