"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from surfaceloops.core import FundamentalPolygon
from surfaceloops.domain import Loop
from surfaceloops.geometry import NoIntersection, Point, Segment
from surfaceloops.io import format_loop, format_point
from surfaceloops.utils import SessionStats

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
    console.print(f"\n[bold]SurfaceLoops[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(polygon: FundamentalPolygon) -> None:
    """Print the size of a fundamental polygon."""
    console.print(
        f"  genus {polygon.genus} {SYM_DOT} {polygon.side_count} sides "
        f"{SYM_DOT} {polygon.edge_count} edges"
    )


def print_polygon_table(polygon: FundamentalPolygon) -> None:
    """Print the side table of a fundamental polygon.

    Args:
        polygon: Polygon whose sides are listed
    """
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Side", justify="right")
    table.add_column("Edge", justify="right")
    table.add_column("Paired side", justify="right")
    for side in polygon.sides:
        table.add_row(str(side.index), str(side.edge), str(side.partner))
    console.print(table)


def print_warning(token: str, message: str) -> None:
    """Print a rejected input as a warning.

    Args:
        token: Input token that was rejected
        message: User-facing reason
    """
    line = Text(f"  {SYM_WARN} ", style="yellow")
    line.append(token, style="bold")
    line.append(f" {SYM_DOT} {message}")
    console.print(line)


def print_loops(loops: tuple[Loop, ...]) -> None:
    """Print committed loops, one segment per line.

    Args:
        loops: Committed loops in commit order
    """
    for i, loop in enumerate(loops, start=1):
        console.print(f"\n  [bold]Loop {i}[/bold] {SYM_DOT} {len(loop)} segments")
        for segment_text in format_loop(loop):
            console.print(Text(f"    {segment_text}"))


def print_trace_summary(stats: SessionStats, open_segments: int | None) -> None:
    """Print trace statistics.

    Args:
        stats: Session statistics
        open_segments: Segment count of the loop left open, if any
    """
    style = "yellow" if stats.rejected_count else "green"
    console.print(
        f"\n[bold green]{SYM_OK} Done[/bold green] {SYM_DOT} "
        f"{stats.loops_committed} loops {SYM_DOT} "
        f"[{style}]{stats.rejected_count} rejected[/{style}]"
    )
    if open_segments is not None:
        console.print(f"  Loop left open with {open_segments} segments")


def print_intersection(result: NoIntersection | Point | Segment) -> None:
    """Print the result of a segment intersection.

    Args:
        result: Intersection result
    """
    if isinstance(result, Point):
        console.print(f"  Point {format_point(result)}")
    elif isinstance(result, Segment):
        console.print(f"  Segment {format_point(result.p0)} -> {format_point(result.p1)}")
    else:
        console.print("  No intersection")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
