"""Graph model and lazy node validation.

A graph is the parsed JSON object

    {
        "A": {"start": true, "edges": {"B": 5, "C": 7}},
        "B": {"edges": {}},
        "C": {"edges": {}}
    }

Nodes are validated only when the walk first discovers them, never by a
pre-scan, so problems in unreachable parts of the graph go unnoticed.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from .errors import (
    DuplicateRootError,
    InvalidEdgesError,
    NegativeWeightError,
    NodeNotFoundError,
    NoRootError,
)

Graph = Mapping
Edges = List[Tuple[str, float]]

ROOT_FLAG = "start"
EDGES_FIELD = "edges"


def is_root(node: Any) -> bool:
    """Return True if `node` carries the literal `"start": true` flag."""
    return isinstance(node, Mapping) and node.get(ROOT_FLAG) is True


def is_weight(value: Any) -> bool:
    """Numbers only; JSON booleans are not weights."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def find_root(graph: Graph) -> Optional[str]:
    """Return the first start-flagged node name, or None for an empty graph.

    Further start-flagged nodes are tolerated here; they only fail if the
    walk reaches them.
    """
    if not graph:
        return None
    for name, node in graph.items():
        if is_root(node):
            return name
    raise NoRootError()


class NodeValidator:
    """Validates nodes on discovery and caches their traversable edges."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self._edges: Dict[str, Edges] = {}

    def validate(self, name: str, reached: bool = True) -> Edges:
        """Return the ordered `(target, weight)` pairs of node `name`.

        `reached` is False only for the initially chosen root. Any other
        arrival at a start-flagged node raises `DuplicateRootError`, on
        every arrival, even when the edges are already cached. That includes
        the chosen root itself: a cycle leading back to it (`A -> B -> A`)
        fails the same way a second root would.
        """
        if name not in self.graph:
            raise NodeNotFoundError(name)
        node = self.graph[name]
        if reached and is_root(node):
            raise DuplicateRootError(name)
        if name not in self._edges:
            self._edges[name] = self._filter_edges(name, node)
        return self._edges[name]

    def _filter_edges(self, name: str, node: Any) -> Edges:
        if not isinstance(node, Mapping):
            raise InvalidEdgesError(name, node)
        edges = node.get(EDGES_FIELD)
        if not isinstance(edges, Mapping):
            raise InvalidEdgesError(name, edges)
        out: Edges = []
        for target, weight in edges.items():
            if not is_weight(weight):
                continue
            if weight < 0:
                raise NegativeWeightError(name, target, weight)
            out.append((target, weight))
        return out
