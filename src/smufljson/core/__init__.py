"""Core processing for smufljson.

This module contains the glyph resolution pipeline:

- White list filtering of main glyphs and alternates
- Flattening of alternate-glyph groups
- Assembly of identities, metadata and SVG outlines
- Transcoding of SVG path data (scale, vertical flip, translation)
- Measurement of transcoded outlines

Key functions:
- filter_main: Keep white-listed main glyphs (unknown names are fatal)
- filter_alternates: Keep white-listed alternates (unknown names warn)
- flatten_alternates: Alternate groups -> alternates keyed by name
- tokenize_path / render_path: Path data transcoding
- measure_glyphs: Add rendered height and width to glyphs

Key classes:
- GlyphAssembler: Merges the three glyph namespaces
- PathTranscoder: Path transcoding with a one-entry memo
- DictionaryBuilder: Loads, assembles and writes a dictionary
"""

from smufljson.core.assembler import GlyphAssembler, SvgFontIndex, extract_svg_font
from smufljson.core.builder import DictionaryBuilder, build_glyph_dictionary
from smufljson.core.filtering import (
    filter_alternates,
    filter_main,
    flatten_alternates,
    select_alternate_groups,
)
from smufljson.core.measure import measure_glyphs, measure_path
from smufljson.core.path import PathTranscoder, format_number, render_path, tokenize_path

__all__ = [
    # Assembly
    "DictionaryBuilder",
    "GlyphAssembler",
    "SvgFontIndex",
    "build_glyph_dictionary",
    "extract_svg_font",
    # Filtering
    "filter_alternates",
    "filter_main",
    "flatten_alternates",
    "select_alternate_groups",
    # Paths
    "PathTranscoder",
    "format_number",
    "measure_glyphs",
    "measure_path",
    "render_path",
    "tokenize_path",
]
