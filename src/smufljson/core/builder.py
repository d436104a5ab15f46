"""Build orchestration for the glyph dictionary.

This module coordinates the full workflow: concurrent loading of the source
documents, white list filtering, alternate flattening, assembly and writing.
The measurement pass re-reads an assembled document and records glyph sizes.

Key components:
- build_glyph_dictionary: Pure pipeline from parsed documents to dictionary
- DictionaryBuilder: Orchestrator class with logging and statistics
"""

import time
from pathlib import Path

from smufljson.config import SmuflJsonSettings
from smufljson.core.assembler import GlyphAssembler
from smufljson.core.filtering import (
    filter_alternates,
    filter_main,
    flatten_alternates,
    select_alternate_groups,
)
from smufljson.core.measure import measure_glyphs
from smufljson.core.path import PathTranscoder
from smufljson.domain import GlyphDictionary
from smufljson.exceptions import DocumentLoadError
from smufljson.io import DocumentWriter, SourceDocuments, SourceLoader, load_json_object
from smufljson.utils import AssemblyLogger, AssemblyStats, configure_logging


def build_glyph_dictionary(
    sources: SourceDocuments,
    settings: SmuflJsonSettings,
    log: AssemblyLogger,
) -> GlyphDictionary:
    """Filter, flatten and assemble loaded source documents.

    Args:
        sources: Parsed source documents
        settings: Application settings
        log: Receives per-glyph warnings and statistics

    Returns:
        Assembled glyph dictionary

    Raises:
        UnknownWhitelistedGlyphError: If a white-listed main glyph is unknown
        InvalidFontDocumentError: If the SVG document is not a font
        MalformedCodepointError: If a glyph codepoint is malformed
    """
    whitelist = sources.whitelist

    log.log_stage("filter-main")
    main_glyphs = filter_main(sources.glyph_names, whitelist)

    log.log_stage("filter-alternates")
    groups = select_alternate_groups(
        sources.metadata.get("glyphsWithAlternates") or {},
        whitelist,
    )
    alternate_glyphs = filter_alternates(flatten_alternates(groups), whitelist, log)

    assembler = GlyphAssembler(path_config=settings.path, log=log)
    return assembler.assemble(main_glyphs, alternate_glyphs, sources.metadata, sources.svg)


class DictionaryBuilder:
    """Orchestrates building and measuring glyph dictionaries.

    Manages the complete workflow:
    1. Load the source documents concurrently
    2. Filter main glyphs and alternates with the white list
    3. Assemble identities, metadata and paths
    4. Write the output document

    Example:
        settings = SmuflJsonSettings()
        builder = DictionaryBuilder(settings)
        stats = builder.build(
            font_dir=Path("bravura-1.02"),
            glyph_names_path=Path("glyphnames.json"),
            output_path=Path("bravura.json"),
        )
    """

    def __init__(self, config: SmuflJsonSettings) -> None:
        """Initialize the builder with configuration.

        Args:
            config: Application settings
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )

    def build(
        self,
        font_dir: Path,
        glyph_names_path: Path,
        output_path: Path,
        whitelist_path: Path | None = None,
    ) -> AssemblyStats:
        """Build the glyph dictionary of a font and write it.

        Args:
            font_dir: Folder holding the font metadata and SVG font
            glyph_names_path: Path to the SMuFL ``glyphnames.json``
            output_path: Path of the output document
            whitelist_path: Optional white list document

        Returns:
            Statistics of the run

        Raises:
            SmuflJsonError: On any fatal error; nothing is written
        """
        log = AssemblyLogger(self.logger)
        log.stats.start_time = time.time()

        loader = SourceLoader(
            font_dir,
            glyph_names_path,
            whitelist_path=whitelist_path,
            config=self.config.sources,
            log=log,
        )
        sources = loader.load()

        document = build_glyph_dictionary(sources, self.config, log)

        log.log_stage("write", path=str(output_path))
        DocumentWriter(output_path, self.config.output).write(document.to_dict())

        log.stats.end_time = time.time()
        return log.stats

    def measure(self, input_path: Path, output_path: Path) -> AssemblyStats:
        """Measure the glyphs of an assembled document and write the result.

        Args:
            input_path: Assembled document
            output_path: Path of the measured document

        Returns:
            Statistics of the run

        Raises:
            SmuflJsonError: On any fatal error; nothing is written
        """
        log = AssemblyLogger(self.logger)
        log.stats.start_time = time.time()

        data = load_json_object(input_path)
        if not isinstance(data.get("glyphs"), dict):
            raise DocumentLoadError(str(input_path), "missing `glyphs` section")
        document = GlyphDictionary.from_dict(data)

        log.log_stage("measure", glyphs=len(document.glyphs))
        measure_glyphs(document, PathTranscoder.from_config(self.config.path), log)

        log.log_stage("write", path=str(output_path))
        DocumentWriter(output_path, self.config.output).write(document.to_dict())

        log.stats.end_time = time.time()
        return log.stats
