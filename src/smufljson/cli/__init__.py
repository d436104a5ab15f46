"""Command-line interface for smufljson.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- build: assemble a font's glyph dictionary
- measure: add rendered glyph sizes to an assembled dictionary
- Verbose/quiet output modes
- Detailed error reporting
"""

from smufljson.cli.app import cli

__all__ = ["cli"]
