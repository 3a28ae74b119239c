"""CLI application entry point for leatherpattern.

This module provides the main CLI interface using Typer.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from leatherpattern import __version__
from leatherpattern.cli.output import (
    console,
    print_error,
    print_header,
    print_linked_circles,
    print_outline_summary,
    print_pattern_info,
    print_step,
    print_stitch_report,
    print_success,
    print_warning,
)
from leatherpattern.config import LoggingConfig, PatternSettings, StitchConfig
from leatherpattern.core import PatternEngine, compare_stitch_counts
from leatherpattern.core.geometry import bounding_box, path_length, polygon_area
from leatherpattern.exceptions import (
    DocumentLoadError,
    DocumentSaveError,
    LeatherPatternError,
)
from leatherpattern.io import GeometryWriter, PatternReader
from leatherpattern.utils import configure_console_logging, configure_logging

# Create the Typer app
app = typer.Typer(
    name="leatherpattern",
    help="Compute outlines, stitch lines and stitch counts for leather patterns.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CommonOptions:
    """Options shared by every command."""

    log_file: Path | None = None
    log_level: str = "WARNING"
    verbose: bool = False
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Leatherpattern[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Compute outlines, stitch lines and stitch counts for leather patterns."""
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    ctx.obj = CommonOptions(log_file=log_file, log_level=log_level, verbose=verbose, quiet=quiet)


def _settings(options: CommonOptions, margin: float | None, spacing: float | None) -> PatternSettings:
    """Create settings from CLI arguments."""
    overrides = {
        key: value
        for key, value in (("margin", margin), ("spacing", spacing))
        if value is not None
    }
    return PatternSettings(
        stitch=StitchConfig(**overrides),
        logging=LoggingConfig(
            log_file=options.log_file,
            log_level=options.log_level if not options.quiet else "ERROR",
        ),
    )


def _setup_logging(settings: PatternSettings, quiet: bool) -> None:
    if settings.logging.log_file is not None:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    else:
        configure_console_logging(settings.logging.log_level)


def _load_engine(document: Path, settings: PatternSettings) -> PatternEngine:
    """Load a document into a fresh engine.

    Raises:
        DocumentLoadError: If the path is not a readable file
    """
    if not document.is_file():
        raise DocumentLoadError(str(document), "not a file")
    reader = PatternReader(document)
    return PatternEngine(reader.load(), settings)


MarginOption = Annotated[
    float | None,
    typer.Option(
        "--margin",
        "-m",
        help="Default stitch line inset from the edge (mm)",
        min=0.0,
        max=50.0,
    ),
]
SpacingOption = Annotated[
    float | None,
    typer.Option(
        "--spacing",
        "-s",
        help="Default stitch hole spacing (mm)",
        min=0.5,
        max=50.0,
    ),
]


@app.command()
def report(
    ctx: typer.Context,
    document: Annotated[
        Path,
        typer.Argument(
            help="Path to the JSON pattern document",
            show_default=False,
        ),
    ],
    compare: Annotated[
        Path | None,
        typer.Option(
            "--compare",
            "-c",
            help="Second layer whose stitch count must match",
        ),
    ] = None,
    margin: MarginOption = None,
    spacing: SpacingOption = None,
) -> None:
    """Print outline measurements and stitch counts for a pattern.

    Example:
        leatherpattern report holster.json --compare liner.json
    """
    options: CommonOptions = ctx.obj or CommonOptions()
    settings = _settings(options, margin, spacing)
    _setup_logging(settings, options.quiet)

    try:
        engine = _load_engine(document, settings)
        outline = engine.merged_outline()
        stitch_report = engine.stitch_report()
        circles = engine.linked_circles()

        if not options.quiet:
            print_header(__version__)
            print_step("Pattern")
            doc = engine.document
            print_pattern_info(
                path=str(document),
                name=doc.name,
                nodes=len(doc.nodes),
                shapes=len(doc.shapes),
                asymmetric=doc.asymmetric,
            )

            print_step("Outline")
            if outline:
                bounds = bounding_box(outline)
                print_outline_summary(
                    width=bounds.width,
                    height=bounds.height,
                    area=polygon_area(outline),
                    perimeter=path_length(outline, closed=True),
                )
            else:
                console.print("  Empty outline")

            print_step("Stitches")
        print_stitch_report(stitch_report)

        if circles and not options.quiet:
            print_step("Linked circles")
            print_linked_circles(circles)

        stats = engine.stats
        if stats.missing_references:
            print_warning(f"{stats.missing_references} stitch lines or shapes reference missing ranges")
        if stats.collapsed_paths and options.verbose:
            print_warning(f"{stats.collapsed_paths} stitch paths collapsed at their margin")

        if compare is not None:
            other = _load_engine(compare, settings)
            difference = compare_stitch_counts(stitch_report, other.stitch_report())
            if difference:
                print_warning(
                    f"Stitch count differs from {compare.name} by {difference:+d}"
                )
            elif not options.quiet:
                console.print(f"  Stitch counts match {compare.name}")

    except DocumentLoadError as e:
        print_error(f"Could not load pattern: {e.reason}")
        raise typer.Exit(code=1)
    except LeatherPatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def export(
    ctx: typer.Context,
    document: Annotated[
        Path,
        typer.Argument(
            help="Path to the JSON pattern document",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-geometry.json)",
        ),
    ] = None,
    margin: MarginOption = None,
    spacing: SpacingOption = None,
) -> None:
    """Write the computed geometry of a pattern as JSON.

    Example:
        leatherpattern export holster.json

    This will create holster-geometry.json with the merged outline,
    stitch holes, hole outlines and linked circles.
    """
    options: CommonOptions = ctx.obj or CommonOptions()
    settings = _settings(options, margin, spacing)
    _setup_logging(settings, options.quiet)

    started = time.perf_counter()
    output_path = output if output is not None else GeometryWriter.get_geometry_path(document)

    try:
        engine = _load_engine(document, settings)
        payload = GeometryWriter(engine, output_path).save()
    except DocumentLoadError as e:
        print_error(f"Could not load pattern: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save geometry: {e.reason}")
        raise typer.Exit(code=1)
    except LeatherPatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not options.quiet:
        print_success(
            output_path=str(output_path),
            file_size=_format_file_size(output_path),
            total_time_s=time.perf_counter() - started,
            stitches=payload["total_stitches"],
        )


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
