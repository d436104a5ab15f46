"""Tests for domain models to verify they work correctly."""

import pytest

from smufljson.domain import (
    AlternateGlyph,
    GlyphDictionary,
    GlyphRecord,
    SvgGlyph,
    WhiteList,
)


class TestGlyphRecord:
    """Tests for GlyphRecord class."""

    def test_record_creation(self) -> None:
        """Test basic record creation."""
        record = GlyphRecord(codepoint="U+E050")
        assert record.codepoint == "U+E050"
        assert record.anchors == {}
        assert record.path is None

    def test_merge_bbox(self) -> None:
        """Test bounding box merge."""
        record = GlyphRecord(codepoint="U+E050")
        record.merge_bbox({"bBoxNE": [2.684, 4.392], "bBoxSW": [0.0, -2.632]})
        assert record.bbox_ne == [2.684, 4.392]
        assert record.bbox_sw == [0.0, -2.632]

    def test_merge_bbox_overwrites(self) -> None:
        """Test that a second bounding box replaces the first."""
        record = GlyphRecord(codepoint="U+E050", bbox_ne=[1, 1], bbox_sw=[0, 0])
        record.merge_bbox({"bBoxNE": [2, 2]})
        assert record.bbox_ne == [2, 2]
        assert record.bbox_sw == [0, 0]

    def test_merge_anchors(self) -> None:
        """Test anchors merge overwrites same-named anchors."""
        record = GlyphRecord(codepoint="U+E0A4", anchors={"stemUpSE": [1.0, 0.1]})
        record.merge_anchors({"stemUpSE": [1.18, 0.168], "stemDownNW": [0.0, -0.168]})
        assert record.anchors == {"stemUpSE": [1.18, 0.168], "stemDownNW": [0.0, -0.168]}

    def test_to_dict_field_names(self) -> None:
        """Test serialization uses SMuFL field names and flattens anchors."""
        record = GlyphRecord(
            codepoint="U+E0A4",
            description="Black notehead",
            bbox_ne=[1.18, 0.5],
            bbox_sw=[0.0, -0.5],
            anchors={"stemUpSE": [1.18, 0.168]},
            path="M0 0Z",
            height=12,
            width=30,
        )
        assert record.to_dict() == {
            "codepoint": "U+E0A4",
            "description": "Black notehead",
            "bBoxNE": [1.18, 0.5],
            "bBoxSW": [0.0, -0.5],
            "stemUpSE": [1.18, 0.168],
            "path": "M0 0Z",
            "h": 12,
            "w": 30,
        }

    def test_to_dict_omits_missing_fields(self) -> None:
        """Test that unset optional fields are not serialized."""
        assert GlyphRecord(codepoint="U+F472").to_dict() == {"codepoint": "U+F472"}

    def test_from_glyphnames_entry(self) -> None:
        """Test reading a glyphnames entry."""
        record = GlyphRecord.from_dict(
            {"alternateCodepoint": "U+266D", "codepoint": "U+E260", "description": "Flat"}
        )
        assert record.codepoint == "U+E260"
        assert record.alternate_codepoint == "U+266D"
        assert record.description == "Flat"
        assert record.anchors == {}

    def test_serialization(self) -> None:
        """Test record serialization and deserialization."""
        r1 = GlyphRecord(
            codepoint="U+E0A4",
            bbox_ne=[1.18, 0.5],
            bbox_sw=[0.0, -0.5],
            anchors={"stemUpSE": [1.18, 0.168]},
            path="M0 0Z",
        )
        r2 = GlyphRecord.from_dict(r1.to_dict())
        assert r2 == r1


class TestAlternateGlyph:
    """Tests for AlternateGlyph class."""

    def test_from_dict(self) -> None:
        alternate = AlternateGlyph.from_dict({"codepoint": "U+F472", "name": "gClefSmall"})
        assert alternate == AlternateGlyph(name="gClefSmall", codepoint="U+F472")

    def test_immutable(self) -> None:
        alternate = AlternateGlyph(name="gClefSmall", codepoint="U+F472")
        with pytest.raises(AttributeError):
            alternate.name = "other"  # type: ignore


class TestSvgGlyph:
    """Tests for SvgGlyph class."""

    def test_from_attributes(self) -> None:
        glyph = SvgGlyph.from_attributes(
            {"glyph-name": "uniE050", "unicode": "\uE050", "d": "M0 0Z"}
        )
        assert glyph.glyph_name == "uniE050"
        assert glyph.unicode_char == "\uE050"
        assert glyph.path == "M0 0Z"

    def test_from_attributes_without_unicode(self) -> None:
        glyph = SvgGlyph.from_attributes({"glyph-name": "uniE0A4", "d": "M0 0Z"})
        assert glyph.unicode_char is None


class TestWhiteList:
    """Tests for WhiteList class."""

    def test_default_has_no_filters(self) -> None:
        whitelist = WhiteList()
        assert whitelist.main_glyphs is None
        assert whitelist.alternate_glyphs is None

    def test_from_object_keys(self) -> None:
        """Test white list sections given as objects keyed by name."""
        whitelist = WhiteList.from_dict(
            {"mainGlyphes": {"gClef": 1, "noteheadBlack": 1}, "alternateGlyphes": {"gClefSmall": 1}}
        )
        assert whitelist.main_glyphs == ("gClef", "noteheadBlack")
        assert whitelist.alternate_glyphs == ("gClefSmall",)

    def test_from_arrays(self) -> None:
        """Test white list sections given as arrays, duplicates removed in order."""
        whitelist = WhiteList.from_dict({"mainGlyphes": ["segno", "gClef", "segno"]})
        assert whitelist.main_glyphs == ("segno", "gClef")
        assert whitelist.alternate_glyphs is None

    def test_empty_section_differs_from_missing(self) -> None:
        whitelist = WhiteList.from_dict({"mainGlyphes": {}})
        assert whitelist.main_glyphs == ()
        assert whitelist.alternate_glyphs is None

    @pytest.mark.parametrize("section", ["gClef", 3, True, ["gClef", 1]])
    def test_rejects_malformed_section(self, section) -> None:
        """A bare string is not split into single-character names."""
        with pytest.raises(ValueError):
            WhiteList.from_dict({"mainGlyphes": section})


class TestGlyphDictionary:
    """Tests for GlyphDictionary class."""

    def test_to_dict(self) -> None:
        document = GlyphDictionary(
            glyphs={"gClef": GlyphRecord(codepoint="U+E050", path="M0 0Z")},
            engraving_defaults={"stemThickness": 0.12},
            font_name="Bravura",
            font_version=1.02,
            meta={"font-family": "Bravura"},
        )
        data = document.to_dict()
        assert list(data) == ["glyphs", "engravingDefaults", "fontName", "fontVersion", "meta"]
        assert data["glyphs"] == {"gClef": {"codepoint": "U+E050", "path": "M0 0Z"}}
        assert data["meta"] == {"font-family": "Bravura"}

    def test_to_dict_omits_missing_metadata(self) -> None:
        data = GlyphDictionary().to_dict()
        assert data == {"glyphs": {}, "meta": {}}

    def test_serialization(self) -> None:
        d1 = GlyphDictionary(
            glyphs={"gClef": GlyphRecord(codepoint="U+E050", bbox_ne=[1, 2], bbox_sw=[0, 0])},
            font_name="Bravura",
        )
        d2 = GlyphDictionary.from_dict(d1.to_dict())
        assert d2 == d1

    def test_path_transcoded_marker(self) -> None:
        """The marker is written only for transcoded documents and read back."""
        document = GlyphDictionary(font_name="Bravura", path_transcoded=True)
        data = document.to_dict()
        assert list(data) == ["glyphs", "fontName", "meta", "pathTranscoded"]
        assert data["pathTranscoded"] is True
        assert GlyphDictionary.from_dict(data).path_transcoded is True
        assert GlyphDictionary.from_dict({"glyphs": {}}).path_transcoded is False
