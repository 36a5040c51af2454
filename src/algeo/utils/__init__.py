"""Utility functions for algeo.

This module provides logging setup and processing statistics for
applications built on the curve algorithms.
"""

from algeo.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
