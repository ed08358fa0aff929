"""HTML front end adapter.

Builds HTML fragments for the two queries the app offers and turns
missing locations or paths into red error paragraphs.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field

from ...domain.errors import NodeNotFoundError
from ...services.route_backend import RouteBackend


def _error(message: str) -> str:
    return f'<p style="color: red;">Error: {html.escape(message)}</p>'


def _format_seconds(seconds: float) -> str:
    # fixed point, trailing zeros dropped: 12345.67 stays 12345.67, 5.0 is 5
    return f"{seconds:.6f}".rstrip("0").rstrip(".")


@dataclass
class HtmlFrontend:
    """HTML renderer over a RouteBackend.

    This adapter implements RouteRendererPort.
    """

    backend: RouteBackend
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_path_prompt(self) -> str:
        return (
            '<label for="start">Start location:</label>\n'
            '<input id="start" type="text" placeholder="Enter start location here."/>\n'
            '<label for="end">Destination:</label>\n'
            '<input id="end" type="text" placeholder="Enter destination location here."/>\n'
            '<input type="button" value="Find Shortest Path"/>'
        )

    def shortest_path_response(self, start: str, end: str) -> str:
        """Describe the shortest path from start to end.

        Produces a paragraph naming both ends, an ordered list of the
        locations on the path and the total travel time, or an error
        paragraph saying which location is missing or that no path exists.
        """
        locations = set(self.backend.list_locations())
        has_start = start in locations
        has_end = end in locations
        if not has_start and not has_end:
            return _error("start and destination not found.")
        if not has_start:
            return _error("start not found.")
        if not has_end:
            return _error("destination not found.")

        path = self.backend.find_locations_on_shortest_path(start, end)
        if not path:
            self._logger.info("Rendering missing path", extra={"start": start, "end": end})
            return _error(f"no path exists between {start} and {end}.")

        total = sum(self.backend.find_times_on_shortest_path(start, end))
        items = "".join(f"  <li>{html.escape(location)}</li>\n" for location in path)
        return (
            f"<p>Start: {html.escape(start)} ~ End: {html.escape(end)}</p>\n"
            f"<ol>\n{items}</ol>\n"
            f"<p>Travel time: {_format_seconds(total)} seconds.</p>"
        )

    def closest_destinations_prompt(self) -> str:
        return (
            '<label for="from">Location:</label>\n'
            '<input id="from" type="text" placeholder="Enter location."/>\n'
            f'<input type="button" value="{self._closest_label()}"/>'
        )

    def closest_destinations_response(self, start: str) -> str:
        """List the destinations closest to start, or an error paragraph."""
        try:
            destinations = self.backend.closest_destinations(start)
        except NodeNotFoundError:
            return _error("location not found.")

        if not destinations:
            return _error(f"no destinations can be reached from {start}.")

        items = "".join(
            f"  <li>{html.escape(location)}</li>\n" for location in destinations
        )
        return f"<p>Locations near {html.escape(start)}:</p>\n<ul>\n{items}</ul>"

    def _closest_label(self) -> str:
        limit = self.backend.closest_destinations_limit
        if limit == 10:
            return "Ten Closest Destinations"
        return f"{limit} Closest Destinations"
