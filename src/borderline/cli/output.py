"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summaries.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from borderline.domain import ComputedGeometry, PanelKind

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Borderline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_contour_info(path: str, point_count: int, area: float, winding: str) -> None:
    """Print contour information.

    Args:
        path: Path to the contour file
        point_count: Number of points in the file
        area: Absolute enclosed area
        winding: Winding direction name
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {point_count:,} points {SYM_DOT} area {area:,.1f} {SYM_DOT} {winding.lower()}")


def _format_time(ms: float) -> str:
    if ms < 1000:
        return f"{ms:.1f}ms"
    return f"{ms / 1000:.2f}s"


def print_summary(geometry: ComputedGeometry, output_path: str, duration_ms: float) -> None:
    """Print the result summary.

    Args:
        geometry: The computed geometry
        output_path: Where the geometry was written
        duration_ms: Recompute duration in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(duration_ms)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    if geometry.is_empty():
        console.print("  [yellow]No shapes derived[/yellow] (fewer than 3 usable points)")
        return

    quads = sum(1 for p in geometry.panels if p.kind is PanelKind.QUAD)
    fans = sum(1 for p in geometry.panels if p.kind is PanelKind.ARC_FAN)
    wrapped = sum(1 for c in geometry.corners if c.wrapped)
    beveled = sum(1 for c in geometry.corners if c.beveled)
    console.print(
        f"  {len(geometry.triangles)} triangles {SYM_DOT} {quads} panels {SYM_DOT} "
        f"{fans} arcs {SYM_DOT} {len(geometry.shapes)} shapes"
    )
    if wrapped:
        console.print(f"  {wrapped} reflex corners wrapped")
    if beveled:
        console.print(f"  {beveled} corners beveled")

    if geometry.bounds is not None:
        min_x, min_y, max_x, max_y = geometry.bounds
        console.print(f"  bounds ({min_x:g}, {min_y:g}) {SYM_DOT} ({max_x:g}, {max_y:g})")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
