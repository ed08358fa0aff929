"""Shortest-path computation using Dijkstra's algorithm.

Relaxation only ever pushes new ``SearchNode`` entries onto the heap;
there is no decrease-key. Entries whose node has already been finalized
are discarded when popped.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Generic, Hashable, List, Optional, Tuple, TypeVar

from ..domain.errors import (
    NodeNotFoundError,
    NoPathFoundError,
    PreconditionViolatedError,
)
from .base_graph import BaseGraph, Node
from .hashtable_map import DEFAULT_CAPACITY, HashtableMap

N = TypeVar("N", bound=Hashable)

DEFAULT_CLOSEST_DESTINATIONS = 10


@dataclass(eq=False)
class SearchNode(Generic[N]):
    """One candidate path from the query start to ``node``.

    Attributes:
        node: Last node on this path
        cost: Total weight of the path
        predecessor: Search node of the previous hop, None for the start
    """

    node: Node[N]
    cost: float
    predecessor: Optional[SearchNode[N]] = field(default=None, repr=False)

    def path(self) -> List[N]:
        """Walk the predecessor chain and return ids from start to here."""
        path: List[N] = []
        current: Optional[SearchNode[N]] = self
        while current is not None:
            path.append(current.node.data)
            current = current.predecessor
        path.reverse()
        return path


class DijkstraGraph(BaseGraph[N]):
    """Graph with shortest-path queries.

    Args:
        capacity: Initial capacity of the node hashtable.
        reject_negative_weights: Raise PreconditionViolatedError when a
            search relaxes a negative edge instead of returning a result
            that may not be optimal.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        reject_negative_weights: bool = True,
    ) -> None:
        super().__init__(capacity)
        self.reject_negative_weights = reject_negative_weights
        self._logger = logging.getLogger(__name__)

    def compute_shortest_path(self, start: N, end: N) -> SearchNode[N]:
        """Run the search from ``start`` until ``end`` is finalized.

        Returns:
            The search node for ``end``; its cost is the shortest path cost
            and its predecessor chain is the path, end first.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            NoPathFoundError: If end cannot be reached from start.
            PreconditionViolatedError: If a negative edge is relaxed and
                ``reject_negative_weights`` is set.
        """
        for data in (start, end):
            if not self.contains_node(data):
                raise NodeNotFoundError(f"Node not found: {data!r}", node=data)

        start_node = self.nodes.get(start)
        end_node = self.nodes.get(end)

        # ties pop in insertion order
        counter = itertools.count()
        queue: List[Tuple[float, int, SearchNode[N]]] = [
            (0.0, next(counter), SearchNode(start_node, 0.0))
        ]
        visited: HashtableMap[N, SearchNode[N]] = HashtableMap()

        while queue:
            _, _, current = heapq.heappop(queue)

            if visited.contains_key(current.node.data):
                continue

            visited.put(current.node.data, current)

            if current.node is end_node:
                self._logger.debug(
                    "Shortest path found",
                    extra={
                        "start": start,
                        "end": end,
                        "cost": current.cost,
                        "finalized": visited.size,
                    },
                )
                return current

            for edge in current.node.edges_leaving:
                succ = edge.successor
                if visited.contains_key(succ.data):
                    continue
                if edge.data < 0 and self.reject_negative_weights:
                    raise PreconditionViolatedError(
                        f"Negative edge weight {edge.data} on "
                        f"{current.node.data!r} -> {succ.data!r}",
                        source=current.node.data,
                        target=succ.data,
                        weight=edge.data,
                    )
                new_cost = current.cost + edge.data
                heapq.heappush(
                    queue, (new_cost, next(counter), SearchNode(succ, new_cost, current))
                )

        raise NoPathFoundError(
            f"No path found from {start!r} to {end!r}", start=start, end=end
        )

    def shortest_path_data(self, start: N, end: N) -> List[N]:
        """Return node ids along the shortest path, start and end inclusive."""
        return self.compute_shortest_path(start, end).path()

    def shortest_path_cost(self, start: N, end: N) -> float:
        """Return the sum of edge weights along the shortest path."""
        return self.compute_shortest_path(start, end).cost

    def k_closest_destinations(
        self, start: N, k: int = DEFAULT_CLOSEST_DESTINATIONS
    ) -> List[N]:
        """Return up to ``k`` reachable nodes ordered by shortest path cost.

        ``start`` itself and unreachable nodes are left out. An isolated
        start yields an empty list.

        Raises:
            NodeNotFoundError: If start is not in the graph.
            ValueError: If k is negative.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        if not self.contains_node(start):
            raise NodeNotFoundError(f"Node not found: {start!r}", node=start)

        ranked: List[Tuple[float, int, N]] = []
        for order, location in enumerate(self.get_all_nodes()):
            if location == start:
                continue
            try:
                cost = self.shortest_path_cost(start, location)
            except NoPathFoundError:
                continue
            ranked.append((cost, order, location))

        return [location for _, _, location in heapq.nsmallest(k, ranked)]
