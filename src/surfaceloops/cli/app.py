"""CLI application entry point for surfaceloops.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from surfaceloops import __version__
from surfaceloops.cli.output import (
    console,
    print_error,
    print_header,
    print_intersection,
    print_loops,
    print_polygon_info,
    print_polygon_table,
    print_step,
    print_trace_summary,
    print_warning,
)
from surfaceloops.config import LoggingConfig, PolygonConfig, SurfaceLoopsSettings
from surfaceloops.core import DrawingSession, FundamentalPolygon
from surfaceloops.exceptions import SurfaceLoopsError
from surfaceloops.io import parse_position, parse_segment
from surfaceloops.utils import configure_logging

# Token closing the current loop in a trace
CLOSE_TOKEN = "close"

# Create the Typer app
app = typer.Typer(
    name="surfaceloops",
    help="Trace closed loops on the fundamental polygon of a genus-g surface.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]SurfaceLoops[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Also print structured logs to the console",
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
    """Trace closed loops on the fundamental polygon of a genus-g surface."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=not verbose,
    )
    ctx.obj = {"logging": logging_config, "quiet": quiet}


def _is_quiet(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("quiet"))


GenusOption = Annotated[
    int,
    typer.Option(
        "--genus",
        "-g",
        help="Genus of the surface",
        min=1,
        max=64,
    ),
]


@app.command()
def polygon(ctx: typer.Context, genus: GenusOption = 2) -> None:
    """Show the sides of the fundamental polygon and how they are glued."""
    quiet = _is_quiet(ctx)
    try:
        fundamental_polygon = FundamentalPolygon(genus)
    except SurfaceLoopsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_polygon_info(fundamental_polygon)
    print_polygon_table(fundamental_polygon)


@app.command()
def trace(
    ctx: typer.Context,
    tokens: Annotated[
        list[str],
        typer.Argument(
            help=(
                "Positions to replay: in:X,Y | side:K@T | out, "
                f"and '{CLOSE_TOKEN}' to close the current loop"
            ),
            show_default=False,
        ),
    ],
    genus: GenusOption = 2,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with an error when no loop gets committed",
        ),
    ] = False,
) -> None:
    """Replay a sequence of positions and print the committed loops.

    Example:
        surfaceloops trace -g 1 in:1/2,1/2 side:0@1/3 in:1/4,1/4 side:2@1/2 close
    """
    quiet = _is_quiet(ctx)
    logging_config = ctx.obj["logging"] if ctx.obj else LoggingConfig()
    settings = SurfaceLoopsSettings(
        polygon=PolygonConfig(genus=genus),
        logging=logging_config,
    )

    try:
        session = DrawingSession(settings)

        if not quiet:
            print_header(__version__)
            print_polygon_info(session.polygon)
            print_step(f"Replaying {len(tokens)} positions")

        for token in tokens:
            if token.strip().lower() == CLOSE_TOKEN:
                outcome = session.close()
            else:
                outcome = session.submit(parse_position(token))
            if outcome.warning and not quiet:
                print_warning(token, outcome.warning)

    except SurfaceLoopsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_loops(session.loops)

    if not quiet:
        builder = session.current_loop
        print_trace_summary(
            session.stats,
            open_segments=builder.segment_count if builder is not None else None,
        )

    if strict and not session.loops:
        raise typer.Exit(code=1)


@app.command()
def intersect(
    first: Annotated[
        str,
        typer.Argument(help="First segment as X0,Y0:X1,Y1", show_default=False),
    ],
    second: Annotated[
        str,
        typer.Argument(help="Second segment as X0,Y0:X1,Y1", show_default=False),
    ],
    overlap: Annotated[
        bool,
        typer.Option(
            "--overlap",
            help="Clip aligned segments to their common part instead",
        ),
    ] = False,
) -> None:
    """Compute the exact intersection of two segments.

    Use '--' before segments starting with a minus sign.
    """
    try:
        s0 = parse_segment(first)
        s1 = parse_segment(second)
    except SurfaceLoopsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    result = s0.overlap(s1) if overlap else s0.crossing(s1)
    print_intersection(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
