"""Command-line interface for algeo.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single-curve commands (evaluate, derive, subdivide, bounds, implicit)
- Cubic intersection
- Batch intersection of JSON files with a progress bar
"""

from algeo.cli.app import cli, main

__all__ = ["cli", "main"]
