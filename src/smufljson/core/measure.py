"""Glyph measurement from transcoded path data.

Each glyph's path is transcoded and drawn into a bounds pen; the rounded
height and width of the outline are stored on the record as ``h``/``w``.
A document built with transcoded paths is measured as stored, so the
transform is never applied twice.
"""

import math

from fontTools.pens.boundsPen import BoundsPen
from fontTools.svgLib.path import parse_path

from smufljson.core.path import PathTranscoder
from smufljson.domain import GlyphDictionary
from smufljson.exceptions import PathCommandError
from smufljson.utils import AssemblyLogger


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def measure_path(d: str) -> tuple[int, int]:
    """Measure the outline of transcoded path data.

    Args:
        d: SVG path data

    Returns:
        Tuple of (height, width), rounded half up; (0, 0) for empty paths
    """
    pen = BoundsPen(None)
    parse_path(d, pen)
    if pen.bounds is None:
        return 0, 0
    x_min, y_min, x_max, y_max = pen.bounds
    return _round_half_up(y_max - y_min), _round_half_up(x_max - x_min)


def measure_glyphs(
    document: GlyphDictionary,
    transcoder: PathTranscoder | None = None,
    log: AssemblyLogger | None = None,
) -> GlyphDictionary:
    """Add rendered height and width to every glyph of a document, in place.

    Glyphs without a path, or whose path cannot be transcoded, are removed.
    When ``document.path_transcoded`` is set the stored paths are measured
    directly and ``transcoder`` is not used.

    Args:
        document: Assembled glyph dictionary
        transcoder: Transcoder applied before measuring (identity by default)
        log: Receives per-glyph warnings and statistics

    Returns:
        The same document
    """
    transcoder = transcoder if transcoder is not None else PathTranscoder()
    log = log if log is not None else AssemblyLogger()

    unusable: list[tuple[str, str]] = []
    for name, record in document.glyphs.items():
        if not record.path:
            unusable.append((name, "has no path data"))
            continue
        try:
            if document.path_transcoded:
                rendered = record.path
            else:
                rendered = transcoder.render(record.path)
        except PathCommandError as e:
            unusable.append((name, str(e)))
            continue
        record.height, record.width = measure_path(rendered)
        log.log_glyph_measured(name, record.height, record.width)

    for name, reason in unusable:
        del document.glyphs[name]
        log.log_glyph_dropped(name, reason)

    return document
