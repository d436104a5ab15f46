"""Glyph records and source document entries.

This module defines the glyph domain model assembled into the output
dictionary, and the small records read from the source documents
(white list, alternates, SVG glyphs).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

Coordinates = list[float]


@dataclass
class GlyphRecord:
    """A single glyph of the output dictionary.

    Attributes:
        codepoint: Codepoint in ``U+XXXX`` notation
        description: Human readable description from glyphnames
        alternate_codepoint: Alternate (non-SMuFL) codepoint from glyphnames
        bbox_ne: North-east corner of the bounding box, in staff spaces
        bbox_sw: South-west corner of the bounding box, in staff spaces
        anchors: Named anchor points, in staff spaces
        path: SVG path data of the outline
        height: Rendered height, set by the measurement pass
        width: Rendered width, set by the measurement pass
    """

    codepoint: str
    description: str | None = None
    alternate_codepoint: str | None = None
    bbox_ne: Coordinates | None = None
    bbox_sw: Coordinates | None = None
    anchors: dict[str, Coordinates] = field(default_factory=dict)
    path: str | None = None
    height: int | None = None
    width: int | None = None

    def merge_bbox(self, data: Mapping[str, Any]) -> None:
        """Merge a ``glyphBBoxes`` entry onto this record."""
        if "bBoxNE" in data:
            self.bbox_ne = list(data["bBoxNE"])
        if "bBoxSW" in data:
            self.bbox_sw = list(data["bBoxSW"])

    def merge_anchors(self, data: Mapping[str, Any]) -> None:
        """Merge a ``glyphsWithAnchors`` entry onto this record.

        Anchors with the same name are overwritten.
        """
        for anchor_name, coordinates in data.items():
            self.anchors[anchor_name] = list(coordinates)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with SMuFL field names.

        Anchors are written at the top level of the record, next to the
        bounding box.

        Returns:
            Dictionary representation of the glyph
        """
        data: dict[str, Any] = {"codepoint": self.codepoint}
        if self.alternate_codepoint is not None:
            data["alternateCodepoint"] = self.alternate_codepoint
        if self.description is not None:
            data["description"] = self.description
        if self.bbox_ne is not None:
            data["bBoxNE"] = self.bbox_ne
        if self.bbox_sw is not None:
            data["bBoxSW"] = self.bbox_sw
        data.update(self.anchors)
        if self.path is not None:
            data["path"] = self.path
        if self.height is not None:
            data["h"] = self.height
        if self.width is not None:
            data["w"] = self.width
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GlyphRecord":
        """Deserialize from a glyphnames entry or an output record.

        Keys that are not record fields are read back as anchors.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            GlyphRecord instance
        """
        known = {
            "codepoint", "alternateCodepoint", "description",
            "bBoxNE", "bBoxSW", "path", "h", "w",
        }
        record = cls(
            codepoint=data["codepoint"],
            description=data.get("description"),
            alternate_codepoint=data.get("alternateCodepoint"),
            path=data.get("path"),
            height=data.get("h"),
            width=data.get("w"),
        )
        record.merge_bbox(data)
        record.merge_anchors({
            key: value for key, value in data.items()
            if key not in known and isinstance(value, list)
        })
        return record


@dataclass(frozen=True)
class AlternateGlyph:
    """A named alternate of a base glyph."""

    name: str
    codepoint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlternateGlyph":
        """Deserialize a ``glyphsWithAlternates`` alternates entry."""
        return cls(name=data["name"], codepoint=data["codepoint"])


@dataclass(frozen=True)
class SvgGlyph:
    """A ``<glyph>`` element of the SVG font.

    Attributes:
        glyph_name: The ``glyph-name`` attribute (e.g. ``uniE050``)
        unicode_char: The ``unicode`` attribute, if any
        path: The ``d`` attribute
    """

    glyph_name: str
    unicode_char: str | None
    path: str

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "SvgGlyph":
        """Create from a parsed element's attribute mapping."""
        return cls(
            glyph_name=attributes.get("glyph-name", ""),
            unicode_char=attributes.get("unicode"),
            path=attributes.get("d", ""),
        )


def _names(value: Iterable[str] | Mapping[str, Any] | None) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, (Mapping, list)):
        raise ValueError(f"expected an object or an array of glyph names, got {value!r}")
    if not all(isinstance(name, str) for name in value):
        raise ValueError(f"glyph names must be strings, got {value!r}")
    # dict.fromkeys keeps first-seen order
    return tuple(dict.fromkeys(value))


@dataclass(frozen=True)
class WhiteList:
    """Optional filter restricting the glyphs written to the output.

    ``None`` means no filtering for that category, an empty tuple filters
    everything out.

    Attributes:
        main_glyphs: Main glyph names to keep, in white list order
        alternate_glyphs: Alternate glyph names to keep, in white list order
    """

    main_glyphs: tuple[str, ...] | None = None
    alternate_glyphs: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WhiteList":
        """Deserialize a white list document.

        The ``mainGlyphes`` and ``alternateGlyphes`` values may be objects
        keyed by glyph name or arrays of names.

        Raises:
            ValueError: If a section is neither an object nor an array of names
        """
        return cls(
            main_glyphs=_names(data.get("mainGlyphes")),
            alternate_glyphs=_names(data.get("alternateGlyphes")),
        )


@dataclass
class GlyphDictionary:
    """The assembled output document.

    Attributes:
        glyphs: Glyph records keyed by glyph name
        engraving_defaults: ``engravingDefaults`` section of the font metadata
        font_name: Font name from the metadata
        font_version: Font version from the metadata
        meta: Attributes of the SVG ``font-face`` element
        path_transcoded: Whether glyph paths were already transcoded; such
            paths are measured as stored
    """

    glyphs: dict[str, GlyphRecord] = field(default_factory=dict)
    engraving_defaults: dict[str, Any] | None = None
    font_name: str | None = None
    font_version: Any = None
    meta: dict[str, str] = field(default_factory=dict)
    path_transcoded: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the output document shape.

        Metadata fields absent from the source are omitted.
        """
        data: dict[str, Any] = {
            "glyphs": {name: record.to_dict() for name, record in self.glyphs.items()},
        }
        if self.engraving_defaults is not None:
            data["engravingDefaults"] = self.engraving_defaults
        if self.font_name is not None:
            data["fontName"] = self.font_name
        if self.font_version is not None:
            data["fontVersion"] = self.font_version
        data["meta"] = self.meta
        if self.path_transcoded:
            data["pathTranscoded"] = True
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GlyphDictionary":
        """Deserialize a previously written output document."""
        return cls(
            glyphs={
                name: GlyphRecord.from_dict(record)
                for name, record in data.get("glyphs", {}).items()
            },
            engraving_defaults=data.get("engravingDefaults"),
            font_name=data.get("fontName"),
            font_version=data.get("fontVersion"),
            meta=dict(data.get("meta", {})),
            path_transcoded=bool(data.get("pathTranscoded", False)),
        )
