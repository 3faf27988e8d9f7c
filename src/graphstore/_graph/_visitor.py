"""Visitors that run an algorithm over a :class:`GraphStore`."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._store import GraphStore

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """Raised by a strict :class:`TopoSortVisitor` when the graph has a cycle."""

    def __init__(self, cycle: tuple[int, ...]) -> None:
        self.cycle = cycle
        path = " -> ".join(str(v) for v in (*cycle, cycle[0]))
        super().__init__(f"Cycle detected in graph: {path}")


class GraphVisitor[T, R](Protocol):
    """Anything that can be handed a store by :meth:`GraphStore.accept`."""

    def visit(self, store: GraphStore[T], /) -> R: ...


class TopoSortVisitor:
    """Depth-first topological sort that tolerates cycles.

    Every vertex is listed exactly once, and for each edge ``u -> v`` that is
    not part of a cycle ``u`` comes before ``v``. When the search reaches a
    vertex that is still on the active path, the edge leading to it is
    dropped and the search carries on, so a cyclic graph yields an order that
    violates exactly those back edges. The dropped cycles are available from
    :attr:`cycles` after :meth:`visit`.

    With ``strict=True`` the first cycle is recorded and then raised as
    :class:`CycleError`.

    The instance keeps its bookkeeping between calls but resets it at the
    start of each :meth:`visit`, so one visitor can be reused across stores.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._permanently_visited: set[int] = set()
        self._in_progress: set[int] = set()
        self._result: deque[int] = deque()
        self._cycles: list[tuple[int, ...]] = []

    @property
    def cycles(self) -> list[tuple[int, ...]]:
        """Cycles found by the last :meth:`visit`, each in path order."""
        return list(self._cycles)

    @property
    def cycle_detected(self) -> bool:
        """Whether the last :meth:`visit` had to drop a back edge."""
        return bool(self._cycles)

    def visit(self, store: GraphStore[Any]) -> list[int]:
        """Return the vertices of ``store`` in topological order.

        Raises:
            CycleError: If the visitor is strict and the graph has a cycle.

        """
        self._permanently_visited.clear()
        self._in_progress.clear()
        self._result.clear()
        self._cycles.clear()

        for vertex in store.vertices():
            if vertex not in self._permanently_visited:
                self._explore(store, vertex)

        if self._cycles:
            logger.debug("Topological sort dropped %d back edge(s)", len(self._cycles))
        return list(self._result)

    def _explore(self, store: GraphStore[Any], root: int) -> None:
        # Iterative form of the recursive search: each frame is a vertex on the
        # active path with the neighbours it has yet to descend into.
        path: list[int] = []
        frames: list[Iterator[int]] = []

        if not self._enter(root, path):
            return
        path.append(root)
        frames.append(iter(store.out_neighbors(root)))

        while frames:
            for neighbor in frames[-1]:
                if self._enter(neighbor, path):
                    path.append(neighbor)
                    frames.append(iter(store.out_neighbors(neighbor)))
                    break
            else:
                frames.pop()
                self._finish(path.pop())

    def _enter(self, vertex: int, path: list[int]) -> bool:
        if vertex in self._permanently_visited:
            return False
        if vertex in self._in_progress:
            cycle = tuple(path[path.index(vertex) :])
            logger.debug("Dropping back edge %d -> %d", path[-1], vertex)
            self._cycles.append(cycle)
            if self.strict:
                raise CycleError(cycle)
            return False
        self._in_progress.add(vertex)
        return True

    def _finish(self, vertex: int) -> None:
        self._in_progress.discard(vertex)
        self._permanently_visited.add(vertex)
        self._result.appendleft(vertex)
