"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph engine and the loader and
rendering adapters around it. They enable dependency injection and make
the system testable.
"""

from .graph import GraphLoaderPort, ShortestPathGraphPort
from .rendering import RouteRendererPort

__all__ = [
    # Graph
    "GraphLoaderPort",
    "ShortestPathGraphPort",
    # Rendering
    "RouteRendererPort",
]
