"""Configuration settings for smufljson."""

from pathlib import Path

from pydantic import BaseModel, Field


class SourceConfig(BaseModel):
    """Configuration for locating and loading source documents."""

    metadata_filename: str = Field(
        default="metadata.json",
        description="Name of the font metadata file inside the font folder",
    )
    font_filename: str = Field(
        default="font.svg",
        description="Name of the SVG font file inside the font folder",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Max threads used to load source documents concurrently",
    )

    def metadata_path(self, font_dir: Path) -> Path:
        """Get the metadata document path for a font folder."""
        return font_dir / self.metadata_filename

    def font_path(self, font_dir: Path) -> Path:
        """Get the SVG font document path for a font folder."""
        return font_dir / self.font_filename


class PathConfig(BaseModel):
    """Configuration for path data transcoding.

    Coordinates are mapped as ``(origin_x + x * scale, origin_y - y * scale)``
    for absolute commands and ``(x * scale, -y * scale)`` for relative ones.
    """

    origin_x: float = Field(default=0.0, description="Horizontal translation")
    origin_y: float = Field(default=0.0, description="Vertical translation")
    scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Uniform scale applied to every coordinate",
    )
    precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum fractional digits written per operand",
    )
    transcode: bool = Field(
        default=False,
        description="Store transcoded path data instead of the raw SVG path",
    )


class OutputConfig(BaseModel):
    """Configuration for the output document."""

    indent: int | None = Field(
        default=None,
        ge=0,
        le=8,
        description="Indent for pretty printing (None = compact)",
    )
    file_mode: int = Field(
        default=0o644,
        description="Permissions of the written file",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SmuflJsonSettings(BaseModel):
    """Main application settings."""

    sources: SourceConfig = Field(default_factory=SourceConfig)
    path: PathConfig = Field(default_factory=PathConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
