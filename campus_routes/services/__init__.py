"""Services layer - Application orchestration.

Available services:
- RouteBackend: Façade mapping location requests onto the graph engine
"""

from .route_backend import RouteBackend

__all__ = ["RouteBackend"]
