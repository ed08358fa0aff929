"""Rendering adapters - Implementations of the RouteRendererPort.

Available implementations:
- HtmlFrontend: HTML fragments for path and closest destination queries
"""

from .html_frontend import HtmlFrontend

__all__ = ["HtmlFrontend"]
