"""Rendering port - Abstraction for presenting query results.

This protocol defines the contract for turning route queries into
markup, allowing different front ends to sit on the same backend.
"""

from __future__ import annotations

from typing import Protocol


class RouteRendererPort(Protocol):
    """Port for route rendering.

    Implementation: adapters/rendering/html_frontend.py

    Renderers ask the backend for results and format them, including
    user-facing messages for missing locations or paths.
    """

    def shortest_path_prompt(self) -> str:
        """Return input controls for a shortest path request."""
        ...

    def shortest_path_response(self, start: str, end: str) -> str:
        """Describe the shortest path between two locations."""
        ...

    def closest_destinations_prompt(self) -> str:
        """Return input controls for a closest destinations request."""
        ...

    def closest_destinations_response(self, start: str) -> str:
        """Describe the destinations closest to a location."""
        ...
