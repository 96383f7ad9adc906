"""Error types raised while loading or walking a graph.

Every `GraphError` is fatal to the walk in progress: the walker does not
recover, retry or roll back. Announcements already handed to the sink stand.
"""

from typing import Any, Optional


class GraphError(ValueError):
    """Base class for graph validation failures found during a walk."""

    def __init__(self, message: str, node: Optional[str] = None) -> None:
        super().__init__(message)
        self.node = node


class NoRootError(GraphError):
    """A non-empty graph has no node flagged as the start."""

    def __init__(self) -> None:
        super().__init__("graph has no start node")


class DuplicateRootError(GraphError):
    """A start-flagged node was reached through an edge."""

    def __init__(self, node: str) -> None:
        super().__init__(f"node {node!r} is a second start node", node)


class NodeNotFoundError(GraphError):
    """An edge targets a node name that is not in the graph."""

    def __init__(self, node: str) -> None:
        super().__init__(f"node {node!r} does not exist", node)


class InvalidEdgesError(GraphError):
    """A node, or its edges field, is not an object."""

    def __init__(self, node: str, edges: Any) -> None:
        super().__init__(
            f"node {node!r} has invalid edges {edges!r}: expected an object", node
        )
        self.edges = edges


class NegativeWeightError(GraphError):
    """An edge weight is a negative number."""

    def __init__(self, node: str, target: str, weight: float) -> None:
        super().__init__(
            f"edge {node!r} -> {target!r} has negative weight {weight!r}", node
        )
        self.target = target
        self.weight = weight


class GraphLoadError(Exception):
    """The graph source could not produce a graph."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"cannot load graph from {source}: {reason}")
        self.source = source
        self.reason = reason
