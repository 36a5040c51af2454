"""Reader for JSON files of curve pairs.

Expected document layout:

    {
      "pairs": [
        {"name": "p1", "a": [[0, 0], [5, 11], [7, 2], [16, 0]],
                       "b": [[1, 6], [2, 0], [14, 10], [11, 1]]}
      ]
    }
"""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from algeo.domain import CurvePair, Point2
from algeo.exceptions import CurveFileError

Coordinate = tuple[float, float]


class CurvePairModel(BaseModel):
    """Schema for a single curve pair."""

    name: str = Field(min_length=1)
    a: list[Coordinate] = Field(min_length=4, max_length=4)
    b: list[Coordinate] = Field(min_length=4, max_length=4)


class CurvePairDocument(BaseModel):
    """Schema for a curve pair file."""

    pairs: list[CurvePairModel]

    @field_validator("pairs")
    @classmethod
    def _unique_names(cls, pairs: list[CurvePairModel]) -> list[CurvePairModel]:
        names = [p.name for p in pairs]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate pair names: {', '.join(duplicates)}")
        return pairs


class CurvePairReader:
    """Loads curve pairs from a JSON file.

    Example:
        with CurvePairReader(Path("pairs.json")) as reader:
            for pair in reader.iter_pairs():
                print(pair.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON file
        """
        self._path = path
        self._document: CurvePairDocument | None = None

    def load(self) -> None:
        """Load and validate the file.

        Raises:
            CurveFileError: If the file is missing, not JSON, or malformed
        """
        if not self._path.exists():
            raise CurveFileError(str(self._path), "file not found")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CurveFileError(str(self._path), str(e)) from e

        try:
            self._document = CurvePairDocument.model_validate(data)
        except ValidationError as e:
            raise CurveFileError(str(self._path), str(e)) from e

    @property
    def pair_count(self) -> int:
        """Return the number of curve pairs.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Curves not loaded. Call load() first.")
        return len(self._document.pairs)

    def iter_pairs(self) -> Iterator[CurvePair]:
        """Iterate over curve pairs in file order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Curves not loaded. Call load() first.")

        for model in self._document.pairs:
            yield CurvePair(
                name=model.name,
                a=[Point2(x, y) for x, y in model.a],
                b=[Point2(x, y) for x, y in model.b],
            )

    def close(self) -> None:
        """Drop the loaded document."""
        self._document = None

    def __enter__(self) -> "CurvePairReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
