"""Tests for the DOT graph loader adapter."""

from pathlib import Path

import pytest

from campus_routes.adapters.graph import DotGraphLoader
from campus_routes.domain.errors import GraphLoadError
from campus_routes.domain.models import EdgeTriple

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class TestDotGraphLoader:
    """Test suite for DotGraphLoader."""

    @pytest.fixture
    def loader(self):
        return DotGraphLoader()

    def test_parse_quoted_edge(self, loader):
        edge = loader.parse_line('    "Memorial Union" -> "Science Hall" [seconds=105.8];')
        assert edge == EdgeTriple("Memorial Union", "Science Hall", 105.8)

    def test_parse_unquoted_edge(self, loader):
        edge = loader.parse_line("A -> B [seconds=3]")
        assert edge == EdgeTriple("A", "B", 3.0)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "// a comment -> here [seconds=1]",
            "digraph campus {",
            "}",
            '"A" -> "B";',
            '"A" "B" [seconds=1]',
            ' -> "B" [seconds=1]',
        ],
    )
    def test_skips_non_edge_lines(self, loader, line):
        assert loader.parse_line(line) is None

    @pytest.mark.parametrize("weight", ["abc", "", "inf", "nan", "-4"])
    def test_skips_unusable_weights(self, loader, weight):
        assert loader.parse_line(f'"A" -> "B" [seconds={weight}]') is None

    def test_parse_lines_keeps_file_order(self, loader):
        edges = loader.parse_lines(
            [
                "digraph {",
                '"A" -> "B" [seconds=1.5];',
                "// skipped",
                '"B" -> "C" [seconds=2];',
                '"C" -> "A" [seconds=oops];',
                "}",
            ]
        )
        assert edges == [EdgeTriple("A", "B", 1.5), EdgeTriple("B", "C", 2.0)]

    def test_load_file(self, loader, tmp_path):
        dot = tmp_path / "small.dot"
        dot.write_text(
            'digraph {\n  "Hall" -> "Union" [seconds=60];\n  "Union" -> "Hall" [seconds=75.5];\n}\n',
            encoding="utf-8",
        )

        edges = loader.load(dot)

        assert edges == [
            EdgeTriple("Hall", "Union", 60.0),
            EdgeTriple("Union", "Hall", 75.5),
        ]

    def test_load_missing_file_wraps_oserror(self, loader, tmp_path):
        missing = tmp_path / "missing.dot"

        with pytest.raises(GraphLoadError) as exc_info:
            loader.load(str(missing))

        assert exc_info.value.file_path == str(missing)
        assert isinstance(exc_info.value.cause, OSError)

    def test_load_bundled_campus_graph(self, loader):
        edges = loader.load(DATA_DIR / "campus.dot")
        assert len(edges) == 22
        assert EdgeTriple("Observatory Hill", "Lakeshore Path", 160.0) in edges
