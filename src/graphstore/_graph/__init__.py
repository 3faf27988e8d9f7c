"""Graph module providing the vertex store and its visitors.

This module contains:
- GraphStore[T]: A mutable directed graph with integer vertex handles
- TopoSortVisitor: Depth-first topological sort tolerating cycles
"""

from ._store import NOT_FOUND, GraphStore
from ._visitor import CycleError, GraphVisitor, TopoSortVisitor

__all__ = ["NOT_FOUND", "CycleError", "GraphStore", "GraphVisitor", "TopoSortVisitor"]
