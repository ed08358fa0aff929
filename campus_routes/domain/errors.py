"""Typed domain errors for the campus route planner.

Errors fall into three families that callers treat differently:

- ``StructuralError``: the call itself was malformed (duplicate insert,
  ``None`` key, non-finite weight). Signalled immediately, never retried.
- ``NotFoundError``: a node, edge, key or path is absent. These are normal,
  recoverable outcomes that the façade renders as "no path" messages.
- ``PreconditionViolatedError``: a negative edge weight met the shortest
  path search.

All errors inherit from CampusRoutesError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass
class CampusRoutesError(Exception):
    """Base error for the campus routes domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StructuralError(CampusRoutesError):
    """A mutation was rejected because it would break a store invariant."""


@dataclass
class NotFoundError(CampusRoutesError):
    """Something the caller asked for does not exist."""


@dataclass
class NullKeyError(StructuralError):
    """A ``None`` key was given to the hashtable."""


@dataclass
class DuplicateKeyError(StructuralError):
    """The key is already bound in the hashtable.

    Attributes:
        key: The key that was already present
    """

    key: Any = None


@dataclass
class DuplicateNodeError(StructuralError):
    """A node with this identifier is already in the graph.

    Attributes:
        node: The duplicated node identifier
    """

    node: Any = None


@dataclass
class InvalidWeightError(StructuralError):
    """Edge weight is not a finite number.

    Attributes:
        weight: The rejected weight
    """

    weight: Any = None


@dataclass
class KeyNotFoundError(NotFoundError):
    """Key is not bound in the hashtable.

    Attributes:
        key: The missing key
    """

    key: Any = None


@dataclass
class NodeNotFoundError(NotFoundError):
    """Node identifier not found in the graph.

    Attributes:
        node: The missing node identifier
    """

    node: Any = None


@dataclass
class EdgeNotFoundError(NotFoundError):
    """No directed edge between the two nodes.

    Attributes:
        source: Origin node identifier
        target: Destination node identifier
    """

    source: Any = None
    target: Any = None


@dataclass
class NoPathFoundError(NotFoundError):
    """No directed route exists between the requested nodes.

    Attributes:
        start: Start node identifier
        end: End node identifier
    """

    start: Any = None
    end: Any = None


@dataclass
class PreconditionViolatedError(CampusRoutesError):
    """A negative edge weight was reached during a shortest path search.

    Attributes:
        source: Origin of the offending edge
        target: Destination of the offending edge
        weight: The negative weight
    """

    source: Optional[Hashable] = None
    target: Optional[Hashable] = None
    weight: float = 0.0


@dataclass
class GraphLoadError(CampusRoutesError):
    """Graph data file could not be read.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(CampusRoutesError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
