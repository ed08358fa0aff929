"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph engine to:
- Graph files (DOT)
- Rendering (HTML fragments)
"""
