"""DOT graph loader adapter.

Reads Graphviz-style files where every edge line looks like::

    "Memorial Union" -> "Science Hall" [seconds=105.3];

Header, footer, comment and malformed lines are skipped. Only finite,
non-negative weights are turned into edges.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ...domain.errors import GraphLoadError
from ...domain.models import EdgeTriple

_EDGE_LINE = re.compile(
    r"^(?P<source>.+?)\s*->\s*(?P<target>.+?)\s*\[\s*seconds\s*=\s*(?P<weight>[^\]]*)\]"
)


def _unquote(name: str) -> str:
    name = name.strip()
    if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
        return name[1:-1]
    return name


@dataclass
class DotGraphLoader:
    """Graph loader for DOT files.

    This adapter implements GraphLoaderPort.

    Attributes:
        encoding: Text encoding of the files
    """

    encoding: str = "utf-8"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Union[str, Path]) -> List[EdgeTriple]:
        """Read every edge from a DOT file.

        Args:
            path: Location of the DOT file.

        Returns:
            The parsed edges in file order.

        Raises:
            GraphLoadError: If the file cannot be read.
        """
        path = Path(path)
        self._logger.debug("Loading graph", extra={"graph_path": str(path)})

        try:
            with path.open(encoding=self.encoding) as f:
                edges = self.parse_lines(f)
        except OSError as e:
            raise GraphLoadError(
                f"There is a problem reading from the file: {path}",
                file_path=str(path),
                cause=e,
            ) from e

        self._logger.info(
            "Graph file loaded",
            extra={"graph_path": str(path), "edges": len(edges)},
        )
        return edges

    def parse_lines(self, lines: Iterable[str]) -> List[EdgeTriple]:
        """Parse DOT text lines into edges, skipping anything malformed."""
        edges: List[EdgeTriple] = []
        for raw in lines:
            edge = self.parse_line(raw)
            if edge is not None:
                edges.append(edge)
        return edges

    def parse_line(self, raw: str) -> Optional[EdgeTriple]:
        line = raw.strip()
        if not line or line.startswith("//"):
            return None

        match = _EDGE_LINE.match(line)
        if match is None:
            return None

        source = _unquote(match.group("source"))
        target = _unquote(match.group("target"))
        if not source or not target:
            return None

        weight_str = match.group("weight").strip()
        try:
            weight = float(weight_str)
        except ValueError:
            self._logger.debug(
                "Skipping edge with invalid weight",
                extra={"line": line, "weight": weight_str},
            )
            return None

        if not math.isfinite(weight) or weight < 0:
            self._logger.warning(
                "Skipping edge with unusable weight",
                extra={"source": source, "target": target, "weight": weight},
            )
            return None

        return EdgeTriple(source=source, target=target, weight=weight)
