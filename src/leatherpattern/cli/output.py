"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from leatherpattern.core import LinkedCircleGeometry, StitchReport

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
    console.print(f"\n[bold]Leatherpattern[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_pattern_info(path: str, name: str, nodes: int, shapes: int, asymmetric: bool) -> None:
    """Print pattern document information.

    Args:
        path: Path to the pattern document
        name: Pattern display name
        nodes: Number of outline nodes
        shapes: Number of shapes
        asymmetric: Whether the outline is drawn in full
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    if name:
        line.append(f" ({name})")
    console.print(line)
    mode = "asymmetric" if asymmetric else "symmetric"
    console.print(f"  {nodes} nodes {SYM_DOT} {shapes} shapes {SYM_DOT} {mode}")


def print_outline_summary(width: float, height: float, area: float, perimeter: float) -> None:
    """Print merged outline measurements (mm)."""
    console.print(f"  Size        {width:.1f} x {height:.1f} mm")
    console.print(f"  Area        {area:.1f} mm²")
    console.print(f"  Perimeter   {perimeter:.1f} mm")


def print_stitch_report(report: StitchReport) -> None:
    """Print stitch counts per stitch line."""
    if not report.lines:
        console.print("  No stitch lines")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Line")
    table.add_column("Holes", justify="right")
    for label, count in report.lines:
        table.add_row(label, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{report.total}[/bold]")
    console.print(table)


def print_linked_circles(circles: list[tuple[int, LinkedCircleGeometry]]) -> None:
    """Print linked circle radii and stitch counts."""
    for idx, circle in circles:
        console.print(
            f"  shape {idx + 1}: r={circle.radius:.2f} mm {SYM_DOT} "
            f"{circle.source_length:.1f} mm source {SYM_DOT} {circle.stitch_count} holes"
        )


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"  [yellow]{SYM_WARN} {message}[/yellow]")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, file_size: str, total_time_s: float, stitches: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        stitches: Total number of stitch holes exported
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {stitches} stitch holes")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
