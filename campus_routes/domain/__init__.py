"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusRoutesError,
    ConfigurationError,
    DuplicateKeyError,
    DuplicateNodeError,
    EdgeNotFoundError,
    GraphLoadError,
    InvalidWeightError,
    KeyNotFoundError,
    NodeNotFoundError,
    NoPathFoundError,
    NotFoundError,
    NullKeyError,
    PreconditionViolatedError,
    StructuralError,
)
from .models import EdgeTriple, RouteResult

__all__ = [
    # Models
    "EdgeTriple",
    "RouteResult",
    # Errors
    "CampusRoutesError",
    "StructuralError",
    "NotFoundError",
    "NullKeyError",
    "DuplicateKeyError",
    "DuplicateNodeError",
    "InvalidWeightError",
    "KeyNotFoundError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "NoPathFoundError",
    "PreconditionViolatedError",
    "GraphLoadError",
    "ConfigurationError",
]
