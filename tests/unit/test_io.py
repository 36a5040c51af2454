"""Unit tests for the curve file I/O layer.

Tests for CurvePairReader and ResultWriter.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from algeo.domain import CurvePair, Intersection, Point2
from algeo.exceptions import CurveFileError, ResultSaveError
from algeo.io import CurvePairReader, ResultWriter

PAIR = {
    "name": "p1",
    "a": [[0, 0], [5, 11], [7, 2], [16, 0]],
    "b": [[1, 6], [2, 0], [14, 10], [11, 1]],
}


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCurvePairReader:
    """Tests for CurvePairReader class."""

    def test_init(self):
        """Test CurvePairReader initialization."""
        path = Path("pairs.json")
        reader = CurvePairReader(path)
        assert reader._path == path
        assert reader._document is None

    def test_load_nonexistent_file(self):
        reader = CurvePairReader(Path("nonexistent.json"))
        with pytest.raises(CurveFileError, match="file not found"):
            reader.load()

    def test_pair_count_before_load(self):
        """Test accessing pair_count before loading raises RuntimeError."""
        reader = CurvePairReader(Path("pairs.json"))
        with pytest.raises(RuntimeError, match="Curves not loaded"):
            _ = reader.pair_count

    def test_iter_pairs_before_load(self):
        reader = CurvePairReader(Path("pairs.json"))
        with pytest.raises(RuntimeError, match="Curves not loaded"):
            list(reader.iter_pairs())

    def test_load_pairs(self, tmp_path):
        path = write_json(tmp_path / "pairs.json", {"pairs": [PAIR, {**PAIR, "name": "p2"}]})

        with CurvePairReader(path) as reader:
            assert reader.pair_count == 2
            pairs = list(reader.iter_pairs())

        assert [p.name for p in pairs] == ["p1", "p2"]
        assert pairs[0].a[1] == Point2(5.0, 11.0)
        assert pairs[0].b[3] == Point2(11.0, 1.0)
        assert pairs[0].intersections == []

    def test_close_drops_document(self, tmp_path):
        path = write_json(tmp_path / "pairs.json", {"pairs": [PAIR]})
        reader = CurvePairReader(path)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.pair_count

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "pairs.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CurveFileError):
            CurvePairReader(path).load()

    def test_wrong_point_count(self, tmp_path):
        """Each curve must have exactly four control points."""
        path = write_json(tmp_path / "pairs.json", {"pairs": [{**PAIR, "a": PAIR["a"][:3]}]})
        with pytest.raises(CurveFileError):
            CurvePairReader(path).load()

    def test_bad_coordinates(self, tmp_path):
        path = write_json(
            tmp_path / "pairs.json",
            {"pairs": [{**PAIR, "b": [[1, "x"], [2, 0], [14, 10], [11, 1]]}]},
        )
        with pytest.raises(CurveFileError):
            CurvePairReader(path).load()

    def test_missing_pairs_key(self, tmp_path):
        path = write_json(tmp_path / "pairs.json", {"curves": []})
        with pytest.raises(CurveFileError):
            CurvePairReader(path).load()

    def test_duplicate_names(self, tmp_path):
        path = write_json(tmp_path / "pairs.json", {"pairs": [PAIR, PAIR]})
        with pytest.raises(CurveFileError, match="duplicate pair names: p1"):
            CurvePairReader(path).load()

    def test_empty_name(self, tmp_path):
        path = write_json(tmp_path / "pairs.json", {"pairs": [{**PAIR, "name": ""}]})
        with pytest.raises(CurveFileError):
            CurvePairReader(path).load()


class TestResultWriter:
    """Tests for ResultWriter class."""

    @pytest.fixture
    def pair(self) -> CurvePair:
        return CurvePair(
            name="p1",
            a=[Point2(0.0, 0.0), Point2(5.0, 11.0), Point2(7.0, 2.0), Point2(16.0, 0.0)],
            b=[Point2(1.0, 6.0), Point2(2.0, 0.0), Point2(14.0, 10.0), Point2(11.0, 1.0)],
            intersections=[Intersection(t=0.1, point=Point2(2.43, 4.11))],
        )

    def test_get_results_path(self):
        assert ResultWriter.get_results_path(Path("data/pairs.json")) == Path(
            "data/pairs-intersections.json"
        )

    def test_save(self, tmp_path, pair):
        output = tmp_path / "out" / "results.json"
        writer = ResultWriter(output)
        assert writer.output_path == output

        writer.save([pair])

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["generator"].startswith("algeo ")
        assert "created" in document
        assert len(document["results"]) == 1
        result = document["results"][0]
        assert result["name"] == "p1"
        assert result["intersections"] == [{"t": 0.1, "x": 2.43, "y": 4.11}]

    def test_roundtrip_through_pair(self, tmp_path, pair):
        output = tmp_path / "results.json"
        ResultWriter(output).save([pair])
        document = json.loads(output.read_text(encoding="utf-8"))
        restored = CurvePair.from_dict(document["results"][0])
        assert restored.intersections == pair.intersections

    def test_save_failure(self, tmp_path, pair):
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with pytest.raises(ResultSaveError, match="disk full"):
                ResultWriter(tmp_path / "results.json").save([pair])
