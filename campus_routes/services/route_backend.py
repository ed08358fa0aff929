"""Route backend service - façade over the graph engine.

Maps "named start/end" requests onto the engine's calls. Not-found
conditions become empty results where the front end expects them,
and propagate where it formats its own message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from ..domain.errors import NotFoundError
from ..domain.models import EdgeTriple, RouteResult
from ..graph import DijkstraGraph
from ..ports.graph import GraphLoaderPort, ShortestPathGraphPort


def _insert_edges(graph: ShortestPathGraphPort, edges: Iterable[EdgeTriple]) -> None:
    for edge in edges:
        for location in (edge.source, edge.target):
            if not graph.contains_node(location):
                graph.insert_node(location)
        graph.insert_edge(edge.source, edge.target, edge.weight)


@dataclass
class RouteBackend:
    """Backend answering location and route queries.

    Attributes:
        graph: Graph engine holding the loaded locations
        loader: Reads graph files into edge triples
        closest_destinations_limit: How many destinations to return
    """

    graph: ShortestPathGraphPort
    loader: GraphLoaderPort
    closest_destinations_limit: int = 10

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_graph_data(self, path: Union[str, Path]) -> None:
        """Replace the graph's contents with the edges of a graph file.

        The edges are first inserted into a scratch graph. The current
        graph is only cleared once every edge has been accepted, so a
        failed read or a rejected edge leaves the previous graph in place.

        Raises:
            GraphLoadError: If the file cannot be read.
            StructuralError: If an edge is rejected by the graph.
        """
        edges = self.loader.load(path)

        _insert_edges(DijkstraGraph(), edges)

        for location in list(self.graph.get_all_nodes()):
            self.graph.remove_node(location)
        _insert_edges(self.graph, edges)

        self._logger.info(
            "Graph data loaded",
            extra={
                "graph_path": str(path),
                "locations": len(self.graph.get_all_nodes()),
                "edges": len(edges),
            },
        )

    def list_locations(self) -> List[str]:
        """Return every location name in the graph."""
        return list(self.graph.get_all_nodes())

    def find_route(self, start: str, end: str) -> RouteResult:
        """Compute the shortest route with per-leg walking times.

        Raises:
            NodeNotFoundError: If start or end is not a location.
            NoPathFoundError: If end cannot be reached from start.
        """
        path = self.graph.shortest_path_data(start, end)
        legs = tuple(
            self.graph.get_edge(a, b) for a, b in zip(path, path[1:])
        )
        self._logger.info(
            "Route found",
            extra={"start": start, "end": end, "stops": len(path)},
        )
        return RouteResult(path=tuple(path), leg_seconds=legs)

    def find_locations_on_shortest_path(self, start: str, end: str) -> List[str]:
        """Return the locations along the shortest path, or [] if none."""
        try:
            return list(self.find_route(start, end).path)
        except NotFoundError as e:
            self._logger.info(
                "No route", extra={"start": start, "end": end, "reason": str(e)}
            )
            return []

    def find_times_on_shortest_path(self, start: str, end: str) -> List[float]:
        """Return the walking time of each leg, or [] if there is no path."""
        try:
            return list(self.find_route(start, end).leg_seconds)
        except NotFoundError as e:
            self._logger.info(
                "No route", extra={"start": start, "end": end, "reason": str(e)}
            )
            return []

    def closest_destinations(self, start: str) -> List[str]:
        """Return the destinations reachable most quickly from start.

        Raises:
            NodeNotFoundError: If start is not a location.
        """
        return list(
            self.graph.k_closest_destinations(start, self.closest_destinations_limit)
        )
