"""CLI application entry point for smufljson.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from smufljson import __version__
from smufljson.cli.output import (
    console,
    print_dropped,
    print_error,
    print_header,
    print_sources,
    print_step,
    print_success,
)
from smufljson.config import (
    LoggingConfig,
    OutputConfig,
    PathConfig,
    SmuflJsonSettings,
)
from smufljson.core import DictionaryBuilder
from smufljson.exceptions import DocumentLoadError, DocumentWriteError, SmuflJsonError
from smufljson.io import DocumentWriter

USAGE = (
    "Convert a SMuFL font to a JSON glyph dictionary for music rendering.\n\n"
    "The font folder must contain 2 files:\n\n"
    " - font.svg, an XML file containing the SVG paths\n\n"
    " - metadata.json, a JSON file containing the font metadata"
)

# Create the Typer app
app = typer.Typer(
    name="smufljson",
    help=USAGE,
    add_completion=False,
    no_args_is_help=True,
)

IndentOption = Annotated[
    int | None,
    typer.Option("--indent", "-i", help="Indent value for pretty print", min=0, max=8),
]
ScaleOption = Annotated[
    float,
    typer.Option("--scale", "-s", help="Scale applied to path coordinates", min=0.0001),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose console output"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]smufljson[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert a SMuFL font to a JSON glyph dictionary for music rendering."""


def _make_settings(
    indent: int | None,
    scale: float,
    transcode: bool,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> SmuflJsonSettings:
    return SmuflJsonSettings(
        path=PathConfig(scale=scale, transcode=transcode),
        output=OutputConfig(indent=indent),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )


@app.command()
def build(
    font: Annotated[
        Path,
        typer.Option("--font", "-f", help="The font folder", show_default=False),
    ],
    metadata: Annotated[
        Path,
        typer.Option(
            "--metadata",
            "-m",
            help="The SMuFL `glyphnames.json` file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Path to the output file", show_default=False),
    ],
    white_list: Annotated[
        Path | None,
        typer.Option(
            "--whiteList",
            "-w",
            help="Path to a white list file to filter glyphes to include in the output",
        ),
    ] = None,
    indent: IndentOption = None,
    transcode: Annotated[
        bool,
        typer.Option(
            "--transcode",
            help="Store transcoded path data (scaled, y axis flipped) instead of raw SVG paths",
        ),
    ] = False,
    scale: ScaleOption = 1.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Assemble the glyph dictionary of a SMuFL font.

    Example:
        smufljson build -f ./bravura-1.02 -m ./glyphnames.json -o ./bravura.json -w ./whiteList.json -i 2
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not font.is_dir():
        print_error(
            f"Font folder not found: {font}",
            details="The font folder must contain font.svg and metadata.json.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = _make_settings(indent, scale, transcode, log_file, log_level, quiet)

    try:
        if not quiet:
            print_step("Loading")
            print_sources(str(font), str(metadata), str(white_list) if white_list else None)

        builder = DictionaryBuilder(settings)
        stats = builder.build(
            font_dir=font,
            glyph_names_path=metadata,
            output_path=output,
            whitelist_path=white_list,
        )

        if not quiet:
            print_dropped(stats, verbose)
            print_success(str(output), _format_file_size(output), stats)

    except DocumentLoadError as e:
        print_error(f"Could not load {e.path}: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentWriteError as e:
        print_error(f"Could not write {e.path}: {e.reason}")
        raise typer.Exit(code=1)
    except SmuflJsonError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def measure(
    input_file: Annotated[
        Path,
        typer.Argument(help="Assembled glyph dictionary", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-measured.json)",
        ),
    ] = None,
    indent: IndentOption = None,
    scale: ScaleOption = 1.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Add the rendered height and width (h, w) of every glyph.

    Glyphs without usable path data are removed. Paths of a dictionary built
    with --transcode are measured as stored and --scale is not applied.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    actual_output_path = output if output is not None else DocumentWriter.get_measured_path(input_file)
    settings = _make_settings(indent, scale, False, log_file, log_level, quiet)

    try:
        if not quiet:
            print_step("Measuring glyphs")

        builder = DictionaryBuilder(settings)
        stats = builder.measure(input_file, actual_output_path)

        if not quiet:
            print_dropped(stats, verbose)
            print_success(str(actual_output_path), _format_file_size(actual_output_path), stats)

    except SmuflJsonError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
