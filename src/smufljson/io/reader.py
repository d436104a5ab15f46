"""Source document loading.

This module provides the SourceLoader class, which loads the glyphnames,
metadata, SVG font and white list documents concurrently and returns them
once every load has finished.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fontTools.misc import etree

from smufljson.config import SourceConfig
from smufljson.domain import WhiteList
from smufljson.exceptions import DocumentLoadError
from smufljson.io.svg import element_to_dict
from smufljson.utils import AssemblyLogger


def load_json(path: Path) -> Any:
    """Load and parse a JSON document.

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid JSON
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(str(path), e.strerror or str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(str(path), f"malformed JSON: {e}") from e


def load_json_object(path: Path) -> dict[str, Any]:
    """Load a JSON document whose top level must be an object.

    Raises:
        DocumentLoadError: If the file cannot be loaded or is not an object
    """
    data = load_json(path)
    if not isinstance(data, dict):
        raise DocumentLoadError(str(path), "expected a JSON object")
    return data


def load_svg(path: Path) -> dict[str, Any]:
    """Load and parse an SVG document into a nested mapping.

    Raises:
        DocumentLoadError: If the file cannot be read or is not valid XML
    """
    if not path.is_file():
        raise DocumentLoadError(str(path), "file not found")

    try:
        root = etree.parse(str(path)).getroot()
    except (etree.ParseError, OSError) as e:
        raise DocumentLoadError(str(path), f"malformed XML: {e}") from e

    return element_to_dict(root)


def load_whitelist(path: Path | None) -> WhiteList:
    """Load the optional white list; no path means no filtering.

    Raises:
        DocumentLoadError: If the file cannot be loaded or a section is not
            an object or an array of glyph names
    """
    if path is None:
        return WhiteList()
    try:
        return WhiteList.from_dict(load_json_object(path))
    except ValueError as e:
        raise DocumentLoadError(str(path), f"malformed white list: {e}") from e


@dataclass
class SourceDocuments:
    """The parsed source documents of one run."""

    glyph_names: dict[str, Any]
    metadata: dict[str, Any]
    svg: dict[str, Any]
    whitelist: WhiteList


class SourceLoader:
    """Loads the source documents of a font.

    The font folder must contain the metadata and SVG font files named in
    :class:`SourceConfig`. The documents are loaded concurrently; ``load``
    returns only after every load has finished and raises the first failure.

    Example:
        loader = SourceLoader(Path("bravura-1.02"), Path("glyphnames.json"))
        sources = loader.load()
    """

    def __init__(
        self,
        font_dir: Path,
        glyph_names_path: Path,
        whitelist_path: Path | None = None,
        config: SourceConfig | None = None,
        log: AssemblyLogger | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            font_dir: Folder holding the font metadata and SVG font
            glyph_names_path: Path to the SMuFL ``glyphnames.json``
            whitelist_path: Optional white list document
            config: Source settings
            log: Receives loading events
        """
        self._font_dir = font_dir
        self._glyph_names_path = glyph_names_path
        self._whitelist_path = whitelist_path
        self._config = config if config is not None else SourceConfig()
        self._log = log if log is not None else AssemblyLogger()

    @property
    def metadata_path(self) -> Path:
        """Path of the font metadata document."""
        return self._config.metadata_path(self._font_dir)

    @property
    def font_path(self) -> Path:
        """Path of the SVG font document."""
        return self._config.font_path(self._font_dir)

    def load(self) -> SourceDocuments:
        """Load every source document.

        Raises:
            DocumentLoadError: If any document cannot be loaded
        """
        tasks = {
            "glyph_names": (load_json_object, self._glyph_names_path),
            "metadata": (load_json_object, self.metadata_path),
            "svg": (load_svg, self.font_path),
            "whitelist": (load_whitelist, self._whitelist_path),
        }

        with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
            futures = {}
            for kind, (loader, path) in tasks.items():
                if path is not None:
                    self._log.log_stage("loading", kind=kind, path=str(path))
                futures[kind] = executor.submit(loader, path)

        results = {}
        for kind, future in futures.items():
            results[kind] = future.result()
            self._log.log_document_loaded(kind, str(tasks[kind][1]))

        return SourceDocuments(**results)
