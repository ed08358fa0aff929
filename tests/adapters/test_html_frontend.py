"""Tests for the HTML front end adapter."""

from unittest.mock import MagicMock

import pytest

from campus_routes.adapters.rendering import HtmlFrontend
from campus_routes.adapters.graph import DotGraphLoader
from campus_routes.domain.errors import NodeNotFoundError
from campus_routes.graph import DijkstraGraph
from campus_routes.services import RouteBackend


class TestHtmlFrontendWithMockBackend:
    """Front end behaviour against a mocked backend."""

    @pytest.fixture
    def backend(self):
        mock = MagicMock(spec=RouteBackend)
        mock.closest_destinations_limit = 10
        mock.list_locations.return_value = ["Union", "Hall", "Library"]
        return mock

    @pytest.fixture
    def frontend(self, backend):
        return HtmlFrontend(backend=backend)

    def test_shortest_path_prompt_has_inputs(self, frontend):
        html = frontend.shortest_path_prompt()
        assert 'id="start"' in html
        assert 'id="end"' in html
        assert 'value="Find Shortest Path"' in html

    def test_closest_prompt_has_input(self, frontend):
        html = frontend.closest_destinations_prompt()
        assert 'id="from"' in html
        assert 'value="Ten Closest Destinations"' in html

    def test_closest_prompt_uses_configured_limit(self, frontend, backend):
        backend.closest_destinations_limit = 5
        assert 'value="5 Closest Destinations"' in frontend.closest_destinations_prompt()

    def test_shortest_path_response(self, frontend, backend):
        backend.find_locations_on_shortest_path.return_value = ["Union", "Hall", "Library"]
        backend.find_times_on_shortest_path.return_value = [60.0, 30.5]

        html = frontend.shortest_path_response("Union", "Library")

        assert "<p>Start: Union ~ End: Library</p>" in html
        assert "<ol>\n  <li>Union</li>\n  <li>Hall</li>\n  <li>Library</li>\n</ol>" in html
        assert "<p>Travel time: 90.5 seconds.</p>" in html

    @pytest.mark.parametrize(
        "times, expected",
        [
            ([12345.67], "12345.67"),
            ([999999.5, 0.5], "1000000"),
            ([0.1, 0.2], "0.3"),
            ([60.0], "60"),
        ],
    )
    def test_travel_time_keeps_full_precision(self, frontend, backend, times, expected):
        backend.find_locations_on_shortest_path.return_value = ["Union", "Library"]
        backend.find_times_on_shortest_path.return_value = times

        html = frontend.shortest_path_response("Union", "Library")

        assert f"<p>Travel time: {expected} seconds.</p>" in html

    @pytest.mark.parametrize(
        "start, end, message",
        [
            ("Nowhere", "Elsewhere", "Error: start and destination not found."),
            ("Nowhere", "Hall", "Error: start not found."),
            ("Hall", "Elsewhere", "Error: destination not found."),
        ],
    )
    def test_shortest_path_missing_locations(self, frontend, backend, start, end, message):
        html = frontend.shortest_path_response(start, end)

        assert html == f'<p style="color: red;">{message}</p>'
        backend.find_locations_on_shortest_path.assert_not_called()

    def test_shortest_path_no_path(self, frontend, backend):
        backend.find_locations_on_shortest_path.return_value = []

        html = frontend.shortest_path_response("Hall", "Union")

        assert html == '<p style="color: red;">Error: no path exists between Hall and Union.</p>'
        backend.find_times_on_shortest_path.assert_not_called()

    def test_closest_response(self, frontend, backend):
        backend.closest_destinations.return_value = ["Hall", "Library"]

        html = frontend.closest_destinations_response("Union")

        assert html == (
            "<p>Locations near Union:</p>\n<ul>\n  <li>Hall</li>\n  <li>Library</li>\n</ul>"
        )

    def test_closest_response_missing_location(self, frontend, backend):
        backend.closest_destinations.side_effect = NodeNotFoundError(
            "Node not found", node="Nowhere"
        )

        html = frontend.closest_destinations_response("Nowhere")

        assert html == '<p style="color: red;">Error: location not found.</p>'

    def test_closest_response_nothing_reachable(self, frontend, backend):
        backend.closest_destinations.return_value = []

        html = frontend.closest_destinations_response("Library")

        assert "Error: no destinations can be reached from Library." in html

    def test_names_are_escaped(self, frontend, backend):
        backend.list_locations.return_value = ["<b>A</b>", "B & C"]
        backend.find_locations_on_shortest_path.return_value = ["<b>A</b>", "B & C"]
        backend.find_times_on_shortest_path.return_value = [1.0]

        html = frontend.shortest_path_response("<b>A</b>", "B & C")

        assert "<b>A</b>" not in html
        assert "&lt;b&gt;A&lt;/b&gt;" in html
        assert "B &amp; C" in html


def test_frontend_end_to_end_on_lecture_graph(tmp_path):
    dot = tmp_path / "lecture.dot"
    dot.write_text(
        "\n".join(
            [
                "digraph {",
                '"A" -> "B" [seconds=4];',
                '"A" -> "C" [seconds=2];',
                '"B" -> "D" [seconds=1];',
                '"C" -> "D" [seconds=5];',
                '"G" -> "H" [seconds=4];',
                "}",
            ]
        ),
        encoding="utf-8",
    )
    backend = RouteBackend(graph=DijkstraGraph(), loader=DotGraphLoader())
    backend.load_graph_data(dot)
    frontend = HtmlFrontend(backend=backend)

    html = frontend.shortest_path_response("A", "D")
    assert "<li>A</li>\n  <li>B</li>\n  <li>D</li>" in html
    assert "Travel time: 5 seconds." in html

    assert "no path exists between C and G" in frontend.shortest_path_response("C", "G")
    assert frontend.closest_destinations_response("A").count("<li>") == 3
