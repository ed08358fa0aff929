"""Immutable domain models for the campus route planner.

All models are frozen dataclasses with slots. They have no external
dependencies and sit between the graph engine and its outer layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EdgeTriple:
    """A directed, weighted connection as produced by a graph loader.

    Attributes:
        source: Origin location name
        target: Destination location name
        weight: Walking time in seconds
    """

    source: str
    target: str
    weight: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Shortest route between two locations.

    Attributes:
        path: Ordered tuple of location names, start and end inclusive
        leg_seconds: Walking time of each edge along the path
    """

    path: tuple[str, ...]
    leg_seconds: tuple[float, ...] = field(default_factory=tuple)

    @property
    def total_seconds(self) -> float:
        """Return the sum of the leg times."""
        return float(sum(self.leg_seconds))

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)
