"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step markers, summaries, and formatted messages.
"""

from rich.console import Console
from rich.text import Text

from smufljson.utils import AssemblyStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]smufljson[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_sources(font_dir: str, glyph_names: str, whitelist: str | None) -> None:
    """Print the source documents of a build."""
    line = Text("  ")
    line.append(font_dir)
    console.print(line)
    line = Text("  ")
    line.append(glyph_names)
    console.print(line)
    if whitelist:
        line = Text("  white list ")
        line.append(whitelist)
        console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_dropped(stats: AssemblyStats, verbose: bool) -> None:
    """Print glyphs removed or skipped during the run.

    Args:
        stats: Run statistics
        verbose: Whether to list every glyph
    """
    if not verbose:
        return
    for glyph_name, reason in stats.dropped[:50]:
        console.print(f"  [yellow]{SYM_WARN}[/yellow] {glyph_name} {SYM_DOT} {reason}")
    if len(stats.dropped) > 50:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(stats.dropped) - 50} more)")
    for glyph_name in stats.skipped_alternates:
        console.print(
            f"  [yellow]{SYM_WARN}[/yellow] {glyph_name} {SYM_DOT} "
            "alternate from the white list is not inside the font metadata"
        )
    for glyph_name in stats.collisions:
        console.print(
            f"  [yellow]{SYM_WARN}[/yellow] {glyph_name} {SYM_DOT} alternate overrides main glyph"
        )


def print_success(output_path: str, file_size: str, stats: AssemblyStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        stats: Run statistics
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    warning_style = "yellow" if stats.warning_count > 0 else "green"
    if stats.measured_count:
        counts = f"  {stats.measured_count} glyphs measured"
    else:
        counts = (
            f"  {stats.assembled_count} glyphs {SYM_DOT} {stats.main_count} main "
            f"{SYM_DOT} {stats.alternate_count} alternates"
        )
    console.print(
        f"{counts} {SYM_DOT} [{warning_style}]{stats.dropped_count} dropped[/{warning_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
