"""In-memory directed graph store with a cycle-tolerant topological sort."""

__all__ = [
    "NOT_FOUND",
    "Comparable",
    "Comparator",
    "CycleError",
    "GraphStore",
    "GraphVisitor",
    "TopoSortVisitor",
    "three_way_compare",
]

from ._compare import Comparable, Comparator, three_way_compare
from ._graph import NOT_FOUND, CycleError, GraphStore, GraphVisitor, TopoSortVisitor
