"""Codepoint notations used by the source documents.

The metadata documents write codepoints as ``U+E050``. The SVG font names
glyphs ``uniE050`` and may also carry the glyph's character in a ``unicode``
attribute. These helpers convert between the notations so a glyph can be
found under either naming scheme.
"""

import re

from smufljson.exceptions import MalformedCodepointError

CODEPOINT_PREFIX = "U+"
SVG_KEY_PREFIX = "uni"

_CODEPOINT_RE = re.compile(r"^U\+[0-9A-Fa-f]+$")
_SVG_KEY_RE = re.compile(r"^uni([0-9A-Fa-f]+)$")


def is_codepoint(value: object) -> bool:
    """Check if a value is a ``U+XXXX`` codepoint string."""
    return isinstance(value, str) and _CODEPOINT_RE.match(value) is not None


def normalize_codepoint(codepoint: str) -> str:
    """Get the canonical lookup key for a codepoint.

    Args:
        codepoint: Codepoint in ``U+XXXX`` notation, hex in any case

    Returns:
        Codepoint with upper-cased hex digits

    Raises:
        MalformedCodepointError: If the value is not in ``U+XXXX`` notation
    """
    if not is_codepoint(codepoint):
        raise MalformedCodepointError(str(codepoint))
    return CODEPOINT_PREFIX + codepoint[len(CODEPOINT_PREFIX):].upper()


def to_svg_key(codepoint: str) -> str:
    """Convert ``U+E050`` to the SVG glyph name ``uniE050``.

    Hex digits are kept verbatim.

    Raises:
        MalformedCodepointError: If the value is not in ``U+XXXX`` notation
    """
    if not is_codepoint(codepoint):
        raise MalformedCodepointError(str(codepoint))
    return SVG_KEY_PREFIX + codepoint[len(CODEPOINT_PREFIX):]


def from_svg_key(glyph_name: str) -> str | None:
    """Convert the SVG glyph name ``uniE050`` to ``U+E050``.

    Returns:
        Upper-cased codepoint, or None for names that are not ``uni`` names
    """
    match = _SVG_KEY_RE.match(glyph_name)
    if match is None:
        return None
    return CODEPOINT_PREFIX + match.group(1).upper()


def from_unicode_char(char: str) -> str:
    """Convert a single character to its ``U+XXXX`` codepoint.

    Characters outside the Basic Multilingual Plane resolve to their full
    scalar value (``"\\U0001D11E"`` gives ``U+1D11E``).

    Raises:
        MalformedCodepointError: If the value is not exactly one code point
    """
    if not isinstance(char, str) or len(char) != 1:
        raise MalformedCodepointError(repr(char))
    return f"{CODEPOINT_PREFIX}{ord(char):04X}"
