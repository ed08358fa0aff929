"""Dependency injection container.

Wires the graph engine, the DOT loader, the backend façade and the HTML
front end together. Every binding is built once, on first resolve, so
the backend and the front end share one graph.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily built, shared instances keyed by port type.

    Usage:
        container = Container.create_default()
        frontend = container.resolve(RouteRendererPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    # gradio serves callbacks from worker threads
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``factory`` to ``port_type``, dropping any instance already built."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the shared instance for ``port_type``, building it if needed.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type not in self._instances:
                self._instances[port_type] = self._factories[port_type]()
            return self._instances[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        with self._lock:
            self._factories.clear()
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container bound to the DOT loader and Dijkstra engine."""
        from .adapters.graph import DotGraphLoader
        from .adapters.rendering import HtmlFrontend
        from .graph import DijkstraGraph
        from .ports.graph import GraphLoaderPort, ShortestPathGraphPort
        from .ports.rendering import RouteRendererPort
        from .services import RouteBackend

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphLoaderPort, DotGraphLoader)
        container.register(
            ShortestPathGraphPort,
            lambda: DijkstraGraph(
                capacity=config.graph.initial_capacity,
                reject_negative_weights=config.graph.reject_negative_weights,
            ),
        )
        container.register(
            RouteBackend,
            lambda: RouteBackend(
                graph=container.resolve(ShortestPathGraphPort),
                loader=container.resolve(GraphLoaderPort),
                closest_destinations_limit=config.query.closest_destinations,
            ),
        )
        container.register(
            RouteRendererPort,
            lambda: HtmlFrontend(backend=container.resolve(RouteBackend)),
        )

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the application container, creating it on first use."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Drop the application container so tests start fresh."""
    global _default_container
    with _container_lock:
        _default_container = None
