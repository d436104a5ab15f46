"""Output document writing.

This module provides the DocumentWriter class. The document is written to a
temporary file next to the target and moved into place, so a failed run
never leaves a partial output file.
"""

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from smufljson.config import OutputConfig
from smufljson.exceptions import DocumentWriteError


def serialize(document: Mapping[str, Any], indent: int | None = None) -> str:
    """Serialize a document to JSON text.

    Without an indent the output is compact, otherwise pretty printed.
    """
    if indent is None:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(document, ensure_ascii=False, indent=indent)


class DocumentWriter:
    """Writes JSON output documents.

    Example:
        writer = DocumentWriter(Path("bravura.json"), OutputConfig(indent=2))
        writer.write(document.to_dict())
    """

    def __init__(self, output_path: Path, config: OutputConfig | None = None) -> None:
        """Initialize the document writer.

        Args:
            output_path: Path where the document will be saved
            config: Output settings
        """
        self._output_path = output_path
        self._config = config if config is not None else OutputConfig()

    @property
    def output_path(self) -> Path:
        """Path where the document will be saved."""
        return self._output_path

    def write(self, document: Mapping[str, Any]) -> None:
        """Serialize and save the document.

        Raises:
            DocumentWriteError: If the file cannot be written
        """
        text = serialize(document, self._config.indent)
        directory = self._output_path.parent

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._output_path.name}.",
                suffix=".tmp",
                dir=directory,
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.chmod(tmp_name, self._config.file_mode)
                os.replace(tmp_name, self._output_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise DocumentWriteError(str(self._output_path), e.strerror or str(e)) from e

    @staticmethod
    def get_measured_path(input_path: Path) -> Path:
        """Generate the default output path of the measurement pass.

        Converts: bravura.json -> bravura-measured.json

        Args:
            input_path: Assembled document path

        Returns:
            Path with -measured suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-measured{input_path.suffix}"
