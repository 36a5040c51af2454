"""CLI application entry point for algeo.

This module provides the command-line front end using Typer. Control points
are given as a single string of space-separated "x,y" pairs, e.g.
"0,0 5,11 7,2 16,0".
"""

import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from algeo import __version__
from algeo.cli.output import (
    console,
    create_progress,
    format_polynomial,
    print_batch_info,
    print_cancellation_summary,
    print_curve,
    print_error,
    print_header,
    print_intersections,
    print_step,
    print_success,
    print_value,
)
from algeo.config import AlgeoSettings, GeometryConfig, LoggingConfig, ProcessingConfig
from algeo.core import (
    IntersectionProcessor,
    arclen,
    derive,
    evaluate,
    hull_arclen_bounds,
    implicit_cubic,
    intersect_cubic,
    subdivide,
)
from algeo.domain import Point2
from algeo.exceptions import AlgeoError, ProcessingCancelledError
from algeo.io import CurvePairReader, ResultWriter

app = typer.Typer(
    name="algeo",
    help="Bezier curve algebra: evaluate, subdivide, implicitize and intersect curves.",
    add_completion=False,
    no_args_is_help=True,
)

PointsArg = Annotated[
    str,
    typer.Argument(help='Control points as space-separated "x,y" pairs', show_default=False),
]


class LogLevel(str, Enum):
    """Console logging levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def parse_points(text: str) -> list[Point2]:
    """Parse '"x,y x,y ..."' into points.

    Raises:
        typer.BadParameter: If a pair is not two comma-separated numbers
    """
    points = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise typer.BadParameter(f"Expected 'x,y', got '{token}'")
        try:
            points.append(Point2(float(parts[0]), float(parts[1])))
        except ValueError:
            raise typer.BadParameter(f"Invalid coordinates '{token}'") from None
    if not points:
        raise typer.BadParameter("At least one control point is required")
    return points


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]algeo[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Bezier curve algebra toolkit."""


@app.command("evaluate")
def evaluate_command(
    points: PointsArg,
    t: Annotated[float, typer.Argument(help="Curve parameter")],
) -> None:
    """Evaluate a curve at parameter t."""
    try:
        curve = parse_points(points)
        print_curve("curve", curve)
        print_value(f"B({t:g})", evaluate(curve, t))
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("derive")
def derive_command(points: PointsArg) -> None:
    """Print the control vectors of the derivative curve."""
    try:
        curve = parse_points(points)
        print_curve("curve", curve)
        print_curve("derivative", derive(curve))
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("subdivide")
def subdivide_command(
    points: PointsArg,
    t: Annotated[float, typer.Argument(help="Split parameter")] = 0.5,
) -> None:
    """Split a curve at t into two curves."""
    try:
        left, right = subdivide(parse_points(points), t)
        print_curve("left", left)
        print_curve("right", right)
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("bounds")
def bounds_command(
    points: PointsArg,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", help="Arc length tolerance"),
    ] = 1e-6,
) -> None:
    """Print arc length bounds and the adaptive arc length."""
    try:
        settings = AlgeoSettings(geometry=GeometryConfig(arclen_tolerance=tolerance))
    except ValidationError:
        raise typer.BadParameter("Tolerance must be positive", param_hint="--tolerance") from None

    try:
        curve = parse_points(points)
        lower, upper = hull_arclen_bounds(curve)
        print_value("lower", lower)
        print_value("upper", upper)
        length = arclen(
            curve,
            tolerance=settings.geometry.arclen_tolerance,
            max_depth=settings.geometry.arclen_max_depth,
        )
        print_value("length", length)
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("implicit")
def implicit_command(points: PointsArg) -> None:
    """Print the implicit equation f(x, y) = 0 of a cubic."""
    try:
        poly = implicit_cubic(parse_points(points))
        console.print(f"  f(x, y) = {format_polynomial(poly)}")
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("intersect")
def intersect_command(
    curve_a: Annotated[str, typer.Argument(help="First cubic (4 points)", show_default=False)],
    curve_b: Annotated[str, typer.Argument(help="Second cubic (4 points)", show_default=False)],
) -> None:
    """Intersect two cubic curves. t refers to the first curve."""
    try:
        hits = sorted(
            intersect_cubic(parse_points(curve_a), parse_points(curve_b)),
            key=lambda hit: (hit[1].x, hit[1].y),
        )
        print_intersections(hits)
    except AlgeoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("batch")
def batch_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="JSON file of curve pairs", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-intersections.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto, 1 = no subprocesses)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Intersect every curve pair in a JSON file and write the results."""
    if not input_file.is_file():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = AlgeoSettings(
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level.value if not quiet else "ERROR",
        ),
    )
    output_path = output if output is not None else ResultWriter.get_results_path(input_file)

    try:
        if not quiet:
            print_step("Loading curves")
        with CurvePairReader(input_file) as reader:
            pairs = list(reader.iter_pairs())

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_batch_info(str(input_file), len(pairs), actual_workers, is_auto=workers is None)
            print_step("Intersecting")

        processor = IntersectionProcessor(settings)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(f"Intersecting {len(pairs)} pairs", total=len(pairs))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                results, stats = processor.process(
                    pairs, max_workers=workers, progress_callback=update_progress
                )
        else:
            results, stats = processor.process(pairs, max_workers=workers)

        ResultWriter(output_path).save(results)

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                intersections=stats.intersections_found,
                errors=stats.error_count,
                avg_time_ms=stats.avg_pair_time_ms,
            )

    except ProcessingCancelledError as e:
        if not quiet:
            print_cancellation_summary(e.processed_count, e.pending_count)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except AlgeoError as e:
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
