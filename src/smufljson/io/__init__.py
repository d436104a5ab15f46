"""Document I/O layer for smufljson.

This module handles reading the source documents and writing the output.
It keeps the JSON and XML parsers away from the core pipeline.

Key responsibilities:
- Load the glyphnames, metadata, SVG font and white list documents concurrently
- Convert parsed SVG elements to nested mappings
- Write output documents atomically

Key classes:
- SourceLoader: Load the source documents of a font
- DocumentWriter: Save output documents
"""

from smufljson.io.reader import (
    SourceDocuments,
    SourceLoader,
    load_json,
    load_json_object,
    load_svg,
    load_whitelist,
)
from smufljson.io.writer import DocumentWriter, serialize

__all__ = [
    "DocumentWriter",
    "SourceDocuments",
    "SourceLoader",
    "load_json",
    "load_json_object",
    "load_svg",
    "load_whitelist",
    "serialize",
]
