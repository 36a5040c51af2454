"""Writer for intersection results."""

import json
from datetime import datetime
from pathlib import Path

from algeo import __version__
from algeo.domain import CurvePair
from algeo.exceptions import ResultSaveError


class ResultWriter:
    """Writes intersection results as JSON.

    Example:
        writer = ResultWriter(Path("pairs-intersections.json"))
        writer.save(pairs)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination JSON file
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, pairs: list[CurvePair]) -> None:
        """Write results for every pair.

        Args:
            pairs: Processed curve pairs with intersections filled in

        Raises:
            ResultSaveError: If the file cannot be written
        """
        document = {
            "generator": f"algeo {__version__}",
            "created": datetime.now().isoformat(timespec="seconds"),
            "results": [pair.to_dict() for pair in pairs],
        }
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise ResultSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_results_path(input_path: Path) -> Path:
        """Generate the default output path for an input file.

        Args:
            input_path: Path to the curve pair file

        Returns:
            Path with "-intersections" suffix (e.g., "pairs-intersections.json")
        """
        return input_path.parent / f"{input_path.stem}-intersections.json"
