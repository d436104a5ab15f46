"""smufljson - Convert a SMuFL font to a JSON glyph dictionary.

smufljson merges the SMuFL ``glyphnames.json`` table, a font's ``metadata.json``
and its ``font.svg`` outlines into a single JSON document that a music
rendering library can draw glyphs from (path data plus metrics).

Example:
    $ smufljson build -f ./bravura-1.02 -m ./glyphnames.json -o ./bravura.json

This will write bravura.json with every glyph that has a codepoint, a bounding
box and an outline in the SVG font.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
