"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DotGraphLoader: Reads edge triples from DOT files
"""

from .dot_loader import DotGraphLoader

__all__ = ["DotGraphLoader"]
