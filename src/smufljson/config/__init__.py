"""Configuration management for smufljson.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SourceConfig: Source document locations and loading settings
- PathConfig: Path transcoding settings
- OutputConfig: Output document settings
- LoggingConfig: Logging settings
- SmuflJsonSettings: Main application settings
"""

from smufljson.config.settings import (
    LoggingConfig,
    OutputConfig,
    PathConfig,
    SmuflJsonSettings,
    SourceConfig,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "PathConfig",
    "SmuflJsonSettings",
    "SourceConfig",
]
