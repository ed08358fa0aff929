"""Graph ports - Abstractions for graph loading and path queries.

These protocols define the contracts between the path engine and the
layers around it: the loader that produces edge triples and the façade
that issues queries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Hashable, List, Protocol, Sequence, Union

if TYPE_CHECKING:
    from ..domain.models import EdgeTriple


class GraphLoaderPort(Protocol):
    """Port for reading graph data.

    Implementation: adapters/graph/dot_loader.py

    A loader turns a graph description file into well-formed
    ``(source, target, weight)`` triples. It does not touch the graph.
    """

    def load(self, path: Union[str, Path]) -> Sequence[EdgeTriple]:
        """Read every edge from a graph description file.

        Args:
            path: Location of the file.

        Returns:
            The parsed edges in file order.
        """
        ...


class ShortestPathGraphPort(Protocol):
    """Port for the graph engine as seen from the façade.

    Implementation: graph/dijkstra_graph.py (DijkstraGraph)
    """

    def insert_node(self, data: Hashable) -> None: ...

    def remove_node(self, data: Hashable) -> None: ...

    def insert_edge(self, source: Hashable, target: Hashable, weight: float) -> None: ...

    def remove_edge(self, source: Hashable, target: Hashable) -> None: ...

    def contains_node(self, data: Hashable) -> bool: ...

    def get_all_nodes(self) -> List[Hashable]: ...

    def get_edge(self, source: Hashable, target: Hashable) -> float: ...

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """Return node ids along the shortest path, start and end inclusive."""
        ...

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> float:
        """Return the total weight of the shortest path."""
        ...

    def k_closest_destinations(self, start: Hashable, k: int = 10) -> List[Hashable]:
        """Return up to k reachable nodes ordered by path cost."""
        ...
