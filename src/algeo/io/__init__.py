"""File I/O layer for algeo.

This module handles reading batches of curve pairs and writing intersection
results as JSON, converting between file data and domain models.

Key classes:
- CurvePairReader: Load and validate curve pair files
- ResultWriter: Save intersection results
"""

from algeo.io.reader import CurvePairReader
from algeo.io.writer import ResultWriter

__all__ = [
    "CurvePairReader",
    "ResultWriter",
]
