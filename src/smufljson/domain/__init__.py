"""Domain models for smufljson.

This module contains the glyph records assembled into the output dictionary
and the entries read from the source documents. Models are independent of
the JSON and XML parsers.

Key classes:
- GlyphRecord: A glyph of the output dictionary
- GlyphDictionary: The assembled output document
- AlternateGlyph: A named alternate of a base glyph
- SvgGlyph: A glyph element of the SVG font
- WhiteList: Optional glyph filter

Key functions:
- to_svg_key / from_svg_key: ``U+XXXX`` <-> ``uniXXXX``
- from_unicode_char: character -> ``U+XXXX``
"""

from smufljson.domain.codepoint import (
    from_svg_key,
    from_unicode_char,
    is_codepoint,
    normalize_codepoint,
    to_svg_key,
)
from smufljson.domain.glyph import (
    AlternateGlyph,
    GlyphDictionary,
    GlyphRecord,
    SvgGlyph,
    WhiteList,
)

__all__: list[str] = [
    # Core types
    "AlternateGlyph",
    "GlyphDictionary",
    "GlyphRecord",
    "SvgGlyph",
    "WhiteList",
    # Codepoints
    "from_svg_key",
    "from_unicode_char",
    "is_codepoint",
    "normalize_codepoint",
    "to_svg_key",
]
