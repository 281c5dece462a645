"""CLI application entry point for borderline.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from borderline import __version__
from borderline.cli.output import (
    console,
    print_contour_info,
    print_error,
    print_header,
    print_step,
    print_summary,
)
from borderline.config import (
    BorderConfig,
    BorderlineSettings,
    BorderMode,
    LoggingConfig,
    ShapeConfig,
    ShapeMode,
)
from borderline.core import ShapeCache
from borderline.exceptions import BorderlineError, ContourLoadError, GeometrySaveError
from borderline.io import ContourReader, GeometryWriter
from borderline.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="borderline",
    help="Derive triangles, border panels and physics shapes from a 2D contour.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Borderline[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def compute(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON contour file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.geometry.json)",
        ),
    ] = None,
    width: Annotated[
        float,
        typer.Option(
            "--width",
            "-w",
            help="Border ribbon width in contour units (0 disables the border)",
            min=0.0,
        ),
    ] = 2.0,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Grow the border inside or outside the contour (inside|outside)",
        ),
    ] = "inside",
    corner_segments: Annotated[
        int,
        typer.Option(
            "--corner-segments",
            "-s",
            help="Arc segments per full circle at corners (0 = sharp miters)",
            min=0,
            max=720,
        ),
    ] = 0,
    shape_mode: Annotated[
        str,
        typer.Option(
            "--shape-mode",
            help="Physics shapes from the triangulation or the border (triangulated|border)",
        ),
    ] = "triangulated",
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
    """Compute the derived geometry of a contour and write it as JSON.

    The contour file holds {"points": [[x, y], ...]} (or just the list of
    pairs). Coordinates are snapped to the integer grid first.

    Example:
        borderline body.json --width 8 --corner-segments 16

    This will create body.geometry.json next to the input.
    """
    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        border_mode = BorderMode(mode.lower())
    except ValueError:
        print_error(f"Invalid mode: {mode}", details="Valid values: inside, outside")
        raise typer.Exit(code=1)

    try:
        physics_mode = ShapeMode(shape_mode.lower())
    except ValueError:
        print_error(
            f"Invalid shape mode: {shape_mode}",
            details="Valid values: triangulated, border",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = BorderlineSettings(
        border=BorderConfig(
            width=width,
            mode=border_mode,
            corner_segments=corner_segments,
        ),
        shape=ShapeConfig(mode=physics_mode),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    output_path = output or GeometryWriter.get_output_path(input_file)

    try:
        if not quiet:
            print_step("Loading contour")

        contour = ContourReader(input_file).read()

        if not quiet:
            print_contour_info(
                path=str(input_file),
                point_count=len(contour),
                area=abs(contour.signed_area()),
                winding=contour.winding().name.replace("_", " "),
            )
            print_step("Computing geometry")

        cache = ShapeCache(settings, logger=logger)
        geometry = cache.recompute(contour)
        GeometryWriter(output_path).write(geometry)

        if not quiet:
            print_summary(
                geometry,
                output_path=str(output_path),
                duration_ms=cache.stats.last_duration_ms or 0.0,
            )

    except ContourLoadError as e:
        print_error(f"Could not load contour: {e.reason}")
        raise typer.Exit(code=1)
    except GeometrySaveError as e:
        print_error(f"Could not save geometry: {e.reason}")
        raise typer.Exit(code=1)
    except BorderlineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
