"""Glyph dictionary assembly.

This module merges the three glyph namespaces into one dictionary:
- Glyph identities (name -> codepoint) from glyphnames and the alternates
- Per-glyph metadata (bounding box, anchors) from the font metadata
- Outlines from the SVG font, found by ``uniXXXX`` glyph name or by the
  ``unicode`` attribute

Glyphs that cannot be completed are dropped with a warning; structural
problems with the documents abort the whole assembly.
"""

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from smufljson.config import PathConfig
from smufljson.core.path import PathTranscoder
from smufljson.domain import (
    GlyphDictionary,
    GlyphRecord,
    SvgGlyph,
    from_svg_key,
    from_unicode_char,
    is_codepoint,
    normalize_codepoint,
)
from smufljson.exceptions import (
    InvalidFontDocumentError,
    MalformedCodepointError,
    PathCommandError,
)
from smufljson.utils import AssemblyLogger

BBOX_SECTION = "glyphBBoxes"
ANCHORS_SECTION = "glyphsWithAnchors"


@dataclass
class SvgFontIndex:
    """Lookup of SVG glyphs by codepoint.

    Attributes:
        by_name: Glyphs keyed by the codepoint derived from ``uniXXXX`` names
        by_unicode: Glyphs keyed by the codepoint of their ``unicode`` attribute
    """

    by_name: dict[str, SvgGlyph]
    by_unicode: dict[str, SvgGlyph]

    @classmethod
    def build(cls, svg_glyphs: Iterable[SvgGlyph]) -> "SvgFontIndex":
        """Index SVG glyphs under both naming schemes.

        Glyph names without the ``uni`` prefix and ``unicode`` attributes
        longer than one character (ligatures) are not indexed. Later glyphs
        replace earlier ones with the same key.
        """
        by_name: dict[str, SvgGlyph] = {}
        by_unicode: dict[str, SvgGlyph] = {}
        for svg_glyph in svg_glyphs:
            name_key = from_svg_key(svg_glyph.glyph_name)
            if name_key is not None:
                by_name[name_key] = svg_glyph
            if svg_glyph.unicode_char is not None and len(svg_glyph.unicode_char) == 1:
                by_unicode[from_unicode_char(svg_glyph.unicode_char)] = svg_glyph
        return cls(by_name=by_name, by_unicode=by_unicode)

    def lookup(self, codepoint: str) -> SvgGlyph | None:
        """Find the SVG glyph of a codepoint, by name first then by unicode.

        Raises:
            MalformedCodepointError: If the codepoint is not ``U+XXXX``
        """
        key = normalize_codepoint(codepoint)
        return self.by_name.get(key) or self.by_unicode.get(key)


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    return [value]


def extract_svg_font(svg_doc: Mapping[str, Any]) -> tuple[list[SvgGlyph], dict[str, str]]:
    """Read the glyphs and font-face attributes of a parsed SVG font.

    Args:
        svg_doc: Parsed SVG tree (``defs.font.glyph[]`` and
            ``defs.font['font-face']``, attributes under ``"@"``)

    Returns:
        Tuple of (SVG glyphs in document order, font-face attributes)

    Raises:
        InvalidFontDocumentError: If the tree does not have the expected shape
    """
    defs = svg_doc.get("defs") if isinstance(svg_doc, Mapping) else None
    if not isinstance(defs, Mapping):
        raise InvalidFontDocumentError("missing <defs> element")

    font = defs.get("font")
    if not isinstance(font, Mapping):
        raise InvalidFontDocumentError("missing <font> element")

    font_face = font.get("font-face")
    if not isinstance(font_face, Mapping):
        raise InvalidFontDocumentError("missing <font-face> element")

    glyph_elements = font.get("glyph")
    if glyph_elements is None:
        raise InvalidFontDocumentError("missing <glyph> elements")

    svg_glyphs = [
        SvgGlyph.from_attributes(element.get("@", {}))
        for element in _as_list(glyph_elements)
        if isinstance(element, Mapping)
    ]
    return svg_glyphs, dict(font_face.get("@", {}))


def _to_record(entry: GlyphRecord | Mapping[str, Any]) -> GlyphRecord:
    if isinstance(entry, GlyphRecord):
        codepoint = entry.codepoint
    else:
        codepoint = entry.get("codepoint")
    if not is_codepoint(codepoint):
        raise MalformedCodepointError(str(codepoint))

    if isinstance(entry, GlyphRecord):
        return dataclasses.replace(entry, anchors=dict(entry.anchors))
    return GlyphRecord.from_dict(entry)


class GlyphAssembler:
    """Assembles the glyph dictionary from the source documents.

    Example:
        assembler = GlyphAssembler()
        document = assembler.assemble(main_glyphs, alternates, metadata, svg_doc)
        json.dumps(document.to_dict())
    """

    def __init__(
        self,
        path_config: PathConfig | None = None,
        log: AssemblyLogger | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            path_config: Path settings; raw SVG path data is stored unless
                ``transcode`` is enabled
            log: Receives per-glyph warnings and statistics
        """
        self.path_config = path_config if path_config is not None else PathConfig()
        self.log = log if log is not None else AssemblyLogger()

    def assemble(
        self,
        main_glyphs: Mapping[str, GlyphRecord | Mapping[str, Any]],
        alternate_glyphs: Mapping[str, GlyphRecord | Mapping[str, Any]],
        metadata: Mapping[str, Any],
        svg_doc: Mapping[str, Any],
    ) -> GlyphDictionary:
        """Build the glyph dictionary.

        Args:
            main_glyphs: Filtered glyphnames entries keyed by glyph name
            alternate_glyphs: Filtered, flattened alternates keyed by name
            metadata: Font metadata document
            svg_doc: Parsed SVG font document

        Returns:
            Assembled dictionary; every glyph in it has a path

        Raises:
            InvalidFontDocumentError: If the SVG document is not a font
            MalformedCodepointError: If a glyph codepoint is malformed
        """
        self.log.log_stage("merge-identities")
        glyphs = self.merge_identities(main_glyphs, alternate_glyphs)

        self.log.log_stage("fill-metadata")
        self.merge_metadata(glyphs, metadata)

        self.log.log_stage("fill-paths")
        svg_glyphs, font_face = extract_svg_font(svg_doc)
        index = SvgFontIndex.build(svg_glyphs)
        self.resolve_paths(glyphs, index)

        self.log.stats.assembled_count = len(glyphs)

        return GlyphDictionary(
            glyphs=glyphs,
            engraving_defaults=metadata.get("engravingDefaults"),
            font_name=metadata.get("fontName"),
            font_version=metadata.get("fontVersion"),
            meta=font_face,
            path_transcoded=self.path_config.transcode,
        )

    def merge_identities(
        self,
        main_glyphs: Mapping[str, GlyphRecord | Mapping[str, Any]],
        alternate_glyphs: Mapping[str, GlyphRecord | Mapping[str, Any]],
    ) -> dict[str, GlyphRecord]:
        """Union main and alternate glyphs into fresh records.

        An alternate sharing a main glyph's name replaces it, with a warning.
        """
        glyphs = {name: _to_record(entry) for name, entry in main_glyphs.items()}
        for name, entry in alternate_glyphs.items():
            if name in glyphs:
                self.log.log_name_collision(name)
            glyphs[name] = _to_record(entry)

        self.log.stats.main_count = len(main_glyphs)
        self.log.stats.alternate_count = len(alternate_glyphs)
        return glyphs

    def merge_metadata(
        self,
        glyphs: dict[str, GlyphRecord],
        metadata: Mapping[str, Any],
    ) -> None:
        """Merge bounding boxes and anchors onto the records in place.

        A glyph without a bounding box is not supported by this font build
        and is removed. Anchors are optional.
        """
        bboxes = metadata.get(BBOX_SECTION) or {}
        missing: list[str] = []
        for name, record in glyphs.items():
            entry = bboxes.get(name)
            if entry is None:
                missing.append(name)
            else:
                record.merge_bbox(entry)
        for name in missing:
            del glyphs[name]
            self.log.log_glyph_dropped(
                name,
                f"not present inside the `{BBOX_SECTION}` meta-data section",
            )

        anchors = metadata.get(ANCHORS_SECTION) or {}
        for name, record in glyphs.items():
            entry = anchors.get(name)
            if entry is not None:
                record.merge_anchors(entry)

    def resolve_paths(self, glyphs: dict[str, GlyphRecord], index: SvgFontIndex) -> None:
        """Attach path data to the records in place.

        Glyphs without a usable outline are removed.
        """
        transcoder = (
            PathTranscoder.from_config(self.path_config)
            if self.path_config.transcode
            else None
        )

        unresolved: list[tuple[str, str]] = []
        for name, record in glyphs.items():
            svg_glyph = index.lookup(record.codepoint)
            if svg_glyph is None:
                unresolved.append((name, f"[{record.codepoint}] does not appear in the svg file"))
                continue
            if not svg_glyph.path:
                unresolved.append((name, f"[{record.codepoint}] has no path data"))
                continue
            if transcoder is None:
                record.path = svg_glyph.path
                continue
            try:
                record.path = transcoder.render(svg_glyph.path)
            except PathCommandError as e:
                unresolved.append((name, f"[{record.codepoint}] {e}"))

        for name, reason in unresolved:
            del glyphs[name]
            self.log.log_glyph_dropped(name, reason)
