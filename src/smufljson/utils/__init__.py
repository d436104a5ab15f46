"""Utility functions for smufljson.

This module provides utility functions including:

- Logging setup and configuration
- Per-run statistics for assembly and measurement
"""

from smufljson.utils.logging import (
    AssemblyLogger,
    AssemblyStats,
    configure_logging,
)

__all__ = [
    "AssemblyLogger",
    "AssemblyStats",
    "configure_logging",
]
