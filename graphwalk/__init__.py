"""Delayed propagation through a weighted, directed, rooted graph."""

from .errors import (
    DuplicateRootError,
    GraphError,
    GraphLoadError,
    InvalidEdgesError,
    NegativeWeightError,
    NodeNotFoundError,
    NoRootError,
)
from .graph import NodeValidator, find_root
from .walker import GraphWalker, PendingVisit

__all__ = [
    "DuplicateRootError",
    "GraphError",
    "GraphLoadError",
    "GraphWalker",
    "InvalidEdgesError",
    "NegativeWeightError",
    "NodeNotFoundError",
    "NodeValidator",
    "NoRootError",
    "PendingVisit",
    "find_root",
]
