"""Directed, weighted graph backed by a HashtableMap of nodes.

Each node owns the list of its outgoing edges. A node does not keep a
reference to its incoming edges, so removing a node scans the other
nodes' outgoing lists to detach edges pointing at it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Generic, Hashable, Iterator, List, Optional, TypeVar

from ..domain.errors import (
    DuplicateKeyError,
    DuplicateNodeError,
    EdgeNotFoundError,
    InvalidWeightError,
    KeyNotFoundError,
    NodeNotFoundError,
)
from .hashtable_map import DEFAULT_CAPACITY, HashtableMap

N = TypeVar("N", bound=Hashable)


@dataclass(eq=False)
class Node(Generic[N]):
    """A named vertex and its outgoing edges."""

    data: N
    edges_leaving: List[Edge[N]] = field(default_factory=list)


@dataclass(eq=False)
class Edge(Generic[N]):
    """A directed connection from ``predecessor`` to ``successor``."""

    data: float
    predecessor: Node[N] = field(repr=False)
    successor: Node[N] = field(repr=False)


class BaseGraph(Generic[N]):
    """Node and edge storage, independent of any path search."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.nodes: HashtableMap[N, Node[N]] = HashtableMap(capacity)
        self._edge_count = 0

    def _node(self, data: N) -> Node[N]:
        try:
            return self.nodes.get(data)
        except KeyNotFoundError as e:
            raise NodeNotFoundError(
                f"Node not found: {data!r}", node=data, cause=e
            ) from e

    @staticmethod
    def _find_edge(source: Node[N], target: Node[N]) -> Optional[Edge[N]]:
        for edge in source.edges_leaving:
            if edge.successor is target:
                return edge
        return None

    def insert_node(self, data: N) -> None:
        """Add a node with no edges.

        Raises:
            DuplicateNodeError: If a node with this identifier exists.
            NullKeyError: If data is None.
        """
        try:
            self.nodes.put(data, Node(data))
        except DuplicateKeyError as e:
            raise DuplicateNodeError(
                f"Node already exists: {data!r}", node=data, cause=e
            ) from e

    def remove_node(self, data: N) -> None:
        """Remove a node and every edge that starts or ends at it.

        Raises:
            NodeNotFoundError: If the node does not exist.
        """
        removed = self._node(data)
        self.nodes.remove(data)
        self._edge_count -= len(removed.edges_leaving)

        for node in self.nodes.values():
            kept = [e for e in node.edges_leaving if e.successor is not removed]
            self._edge_count -= len(node.edges_leaving) - len(kept)
            node.edges_leaving = kept

    def insert_edge(self, source: N, target: N, weight: float) -> None:
        """Add the edge ``source -> target`` or update its weight.

        Re-inserting an existing edge overwrites its weight; it is not an
        error. Negative weights are stored as given.

        Raises:
            NodeNotFoundError: If either endpoint does not exist.
            InvalidWeightError: If weight is not a finite real number.
        """
        if (
            isinstance(weight, bool)
            or not isinstance(weight, Real)
            or not math.isfinite(weight)
        ):
            raise InvalidWeightError(
                f"Edge weight must be a finite number, got {weight!r}",
                weight=weight,
            )

        pred = self._node(source)
        succ = self._node(target)

        existing = self._find_edge(pred, succ)
        if existing is not None:
            existing.data = float(weight)
            return

        pred.edges_leaving.append(Edge(float(weight), pred, succ))
        self._edge_count += 1

    def remove_edge(self, source: N, target: N) -> None:
        """Remove the edge ``source -> target``.

        Raises:
            EdgeNotFoundError: If the edge (or either endpoint) is absent.
        """
        edge = self._edge_or_raise(source, target)
        edge.predecessor.edges_leaving.remove(edge)
        self._edge_count -= 1

    def _edge_or_raise(self, source: N, target: N) -> Edge[N]:
        if self.contains_node(source) and self.contains_node(target):
            edge = self._find_edge(self.nodes.get(source), self.nodes.get(target))
            if edge is not None:
                return edge
        raise EdgeNotFoundError(
            f"Edge not found: {source!r} -> {target!r}",
            source=source,
            target=target,
        )

    def contains_node(self, data: N) -> bool:
        return self.nodes.contains_key(data)

    def contains_edge(self, source: N, target: N) -> bool:
        try:
            self._edge_or_raise(source, target)
        except EdgeNotFoundError:
            return False
        return True

    def get_edge(self, source: N, target: N) -> float:
        """Return the weight of ``source -> target``.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        return self._edge_or_raise(source, target).data

    def get_all_nodes(self) -> List[N]:
        """Return every node identifier in store order."""
        return self.nodes.keys()

    def get_node_count(self) -> int:
        return self.nodes.size

    def get_edge_count(self) -> int:
        return self._edge_count

    def edges_leaving(self, data: N) -> Iterator[Edge[N]]:
        """Iterate the outgoing edges of a node, for path searches."""
        return iter(self._node(data).edges_leaving)

    def clear(self) -> None:
        """Remove every node and edge."""
        self.nodes.clear()
        self._edge_count = 0
