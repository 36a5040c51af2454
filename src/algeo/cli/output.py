"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from algeo.domain import BivariatePolynomial, Point2, Vector2

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def format_coord(value: Any) -> str:
    return f"{float(value):.6g}"


def format_element(element: Any) -> str:
    """Format a point, vector or scalar for display."""
    if isinstance(element, Point2):
        return f"({format_coord(element.x)}, {format_coord(element.y)})"
    if isinstance(element, Vector2):
        return f"<{format_coord(element.x)}, {format_coord(element.y)}>"
    return format_coord(element)


def format_polynomial(poly: BivariatePolynomial) -> str:
    """Format a bivariate polynomial as a sum of monomials."""
    parts = []
    for i, j, c in poly.terms():
        if c == 0:
            continue
        monomial = "x" * i + "y" * j
        parts.append(f"{format_coord(c)}{monomial}" if monomial else format_coord(c))
    return " + ".join(parts) if parts else "0"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]algeo[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_curve(label: str, elements: Iterable[Any]) -> None:
    """Print the control points of a curve on one line."""
    line = Text(f"  {label}: ")
    line.append(" ".join(format_element(e) for e in elements))
    console.print(line)


def print_value(label: str, value: Any) -> None:
    line = Text(f"  {label}: ")
    line.append(format_element(value), style="bold")
    console.print(line)


def print_intersections(hits: list[tuple[float, Point2]]) -> None:
    """Print intersections as t and point, one per line.

    Args:
        hits: (t, point) pairs, already sorted
    """
    noun = "intersection" if len(hits) == 1 else "intersections"
    console.print(f"  [green]{len(hits)}[/green] {noun}")
    for t, point in hits:
        console.print(f"  t={t:.6f} {SYM_DOT} {format_element(point)}")


def print_batch_info(input_path: str, pair_count: int, workers: int, is_auto: bool) -> None:
    """Print batch input and processing configuration."""
    line = Text("  ")
    line.append(input_path)
    console.print(line)
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {pair_count} pairs {SYM_DOT} {workers} workers{auto_suffix}")


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


def print_success(
    output_path: str,
    total_time_s: float,
    processed: int,
    intersections: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of pairs processed
        intersections: Total number of intersections found
        errors: Number of errors encountered
        avg_time_ms: Average processing time per pair in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} pairs {SYM_DOT} {intersections} intersections {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per pair")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of pairs processed before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} pairs completed {SYM_DOT} {cancelled} tasks cancelled")
    console.print("  No output file created")
