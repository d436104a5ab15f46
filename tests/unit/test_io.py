"""Unit tests for the document I/O layer.

Tests for SVG tree conversion, source loading and document writing.
"""

import json
import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest
from fontTools.misc import etree

from smufljson.config import OutputConfig, SourceConfig
from smufljson.domain import WhiteList
from smufljson.exceptions import DocumentLoadError, DocumentWriteError
from smufljson.io.reader import (
    SourceLoader,
    load_json,
    load_json_object,
    load_svg,
    load_whitelist,
)
from smufljson.io.svg import element_to_dict, local_name
from smufljson.io.writer import DocumentWriter, serialize

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
FONT_DIR = FIXTURES_DIR / "bravura-test"


class TestElementToDict:
    """Tests for SVG element conversion."""

    def test_attributes_and_children(self):
        root = etree.fromstring(
            '<svg xmlns="http://www.w3.org/2000/svg"><defs><font id="F">'
            '<font-face units-per-em="1000"/>'
            '<glyph glyph-name="uniE050" d="M0 0"/>'
            '<glyph glyph-name="uniE062" d="M1 1"/>'
            "</font></defs></svg>"
        )
        assert element_to_dict(root) == {
            "defs": {
                "font": {
                    "@": {"id": "F"},
                    "font-face": {"@": {"units-per-em": "1000"}},
                    "glyph": [
                        {"@": {"glyph-name": "uniE050", "d": "M0 0"}},
                        {"@": {"glyph-name": "uniE062", "d": "M1 1"}},
                    ],
                }
            }
        }

    def test_single_child_is_not_a_list(self):
        root = etree.fromstring('<font><glyph d="M0 0"/></font>')
        assert element_to_dict(root) == {"glyph": {"@": {"d": "M0 0"}}}

    def test_comments_are_skipped(self):
        root = etree.fromstring("<font><!-- comment --><glyph/></font>")
        assert element_to_dict(root) == {"glyph": {}}

    def test_local_name(self):
        assert local_name("{http://www.w3.org/2000/svg}glyph") == "glyph"
        assert local_name("glyph") == "glyph"


class TestLoadJson:
    """Tests for JSON document loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert load_json(path) == {"a": 1}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError) as exc_info:
            load_json(tmp_path / "missing.json")
        assert exc_info.value.path == str(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="malformed JSON"):
            load_json(path)

    def test_object_required(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="expected a JSON object"):
            load_json_object(path)


class TestLoadSvg:
    """Tests for SVG document loading."""

    def test_load_fixture(self):
        doc = load_svg(FONT_DIR / "font.svg")
        font = doc["defs"]["font"]
        assert font["font-face"]["@"]["font-family"] == "TestBravura"
        assert len(font["glyph"]) == 5
        assert font["glyph"][0]["@"]["unicode"] == "\uE050"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError, match="file not found"):
            load_svg(tmp_path / "font.svg")

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "font.svg"
        path.write_text("<svg><defs></svg>", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="malformed XML"):
            load_svg(path)


class TestLoadWhitelist:
    """Tests for white list loading."""

    def test_no_path(self):
        assert load_whitelist(None) == WhiteList()

    def test_load_fixture(self):
        whitelist = load_whitelist(FIXTURES_DIR / "whitelist.json")
        assert whitelist.main_glyphs == ("gClef", "noteheadBlack")
        assert whitelist.alternate_glyphs == ("gClefSmall", "gClefTiny")

    def test_scalar_section(self, tmp_path):
        path = tmp_path / "whitelist.json"
        path.write_text('{"mainGlyphes": "gClef"}', encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="malformed white list"):
            load_whitelist(path)


class TestSourceLoader:
    """Tests for concurrent source loading."""

    def test_paths(self):
        loader = SourceLoader(FONT_DIR, FIXTURES_DIR / "glyphnames.json")
        assert loader.metadata_path == FONT_DIR / "metadata.json"
        assert loader.font_path == FONT_DIR / "font.svg"

    def test_custom_file_names(self, tmp_path):
        config = SourceConfig(metadata_filename="bravura_metadata.json", font_filename="Bravura.svg")
        loader = SourceLoader(tmp_path, tmp_path / "glyphnames.json", config=config)
        assert loader.metadata_path == tmp_path / "bravura_metadata.json"
        assert loader.font_path == tmp_path / "Bravura.svg"

    def test_load(self):
        loader = SourceLoader(
            FONT_DIR,
            FIXTURES_DIR / "glyphnames.json",
            whitelist_path=FIXTURES_DIR / "whitelist.json",
        )
        sources = loader.load()
        assert "gClef" in sources.glyph_names
        assert sources.metadata["fontName"] == "TestBravura"
        assert "defs" in sources.svg
        assert sources.whitelist.main_glyphs == ("gClef", "noteheadBlack")

    def test_load_without_whitelist(self):
        sources = SourceLoader(FONT_DIR, FIXTURES_DIR / "glyphnames.json").load()
        assert sources.whitelist == WhiteList()

    def test_failure_is_raised_after_all_loads(self, tmp_path):
        """A failing document is reported once every load has finished."""
        calls = []

        def fake_load_svg(path):
            calls.append(path)
            return {}

        loader = SourceLoader(tmp_path, FIXTURES_DIR / "glyphnames.json")
        with patch("smufljson.io.reader.load_svg", side_effect=fake_load_svg):
            with pytest.raises(DocumentLoadError) as exc_info:
                loader.load()

        assert exc_info.value.path == str(tmp_path / "metadata.json")
        assert calls == [tmp_path / "font.svg"]


class TestDocumentWriter:
    """Tests for DocumentWriter class."""

    def test_compact_output(self, tmp_path):
        path = tmp_path / "out.json"
        DocumentWriter(path).write({"glyphs": {"gClef": {"codepoint": "U+E050"}}})
        assert path.read_text(encoding="utf-8") == '{"glyphs":{"gClef":{"codepoint":"U+E050"}}}'

    def test_indented_output(self, tmp_path):
        path = tmp_path / "out.json"
        DocumentWriter(path, OutputConfig(indent=2)).write({"a": [1]})
        assert path.read_text(encoding="utf-8") == '{\n  "a": [\n    1\n  ]\n}'

    def test_non_ascii(self):
        assert serialize({"meta": {"font-family": "Bravuraé"}}) == '{"meta":{"font-family":"Bravuraé"}}'

    def test_file_mode(self, tmp_path):
        path = tmp_path / "out.json"
        DocumentWriter(path, OutputConfig(file_mode=0o644)).write({})
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o644

    def test_replaces_existing_file(self, tmp_path):
        path = tmp_path / "out.json"
        path.write_text("old", encoding="utf-8")
        DocumentWriter(path).write({"new": True})
        assert json.loads(path.read_text(encoding="utf-8")) == {"new": True}
        assert list(tmp_path.iterdir()) == [path]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DocumentWriteError):
            DocumentWriter(tmp_path / "missing" / "out.json").write({})

    def test_failed_write_leaves_no_file(self, tmp_path):
        path = tmp_path / "out.json"
        with patch("smufljson.io.writer.os.replace", side_effect=OSError(28, "No space left")):
            with pytest.raises(DocumentWriteError, match="No space left"):
                DocumentWriter(path).write({})
        assert list(tmp_path.iterdir()) == []

    def test_get_measured_path(self):
        assert DocumentWriter.get_measured_path(Path("fonts/bravura.json")) == Path(
            "fonts/bravura-measured.json"
        )
