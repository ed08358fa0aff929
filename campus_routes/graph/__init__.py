"""Graph engine: node store, graph structure and shortest paths.

This subpackage contains the hashtable used to index nodes, the
directed weighted graph built on it, and Dijkstra's algorithm on top
of that graph.
"""

from .base_graph import BaseGraph, Edge, Node
from .dijkstra_graph import DijkstraGraph, SearchNode
from .hashtable_map import HashtableMap, Pair

__all__ = [
    "HashtableMap",
    "Pair",
    "BaseGraph",
    "Node",
    "Edge",
    "DijkstraGraph",
    "SearchNode",
]
