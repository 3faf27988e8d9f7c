"""Mutable directed graph with integer vertex handles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from graphstore._compare import three_way_compare

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from graphstore._compare import Comparator

    from ._visitor import GraphVisitor

logger = logging.getLogger(__name__)

NOT_FOUND = -1
"""Returned by :meth:`GraphStore.find_id` when no payload matches."""


class GraphStore[T]:
    """A directed graph owning one payload per vertex.

    Vertices are named by integer handles handed out by :meth:`add`, starting
    at 0 and never reused, not even after :meth:`clear`. Edges are kept twice:
    ``_outward[u]`` holds the targets of ``u`` and ``_inward[v]`` the sources
    of ``v``, so predecessor lookups are as cheap as successor lookups. Both
    indices are only ever touched together.

    No operation raises for unknown vertices; lookups return ``None`` or
    :data:`NOT_FOUND` and edge mutations return ``False``.

    Attributes:
        _payloads: Mapping from vertex to its payload.
        _outward: Mapping from vertex to the vertices it has an edge to.
        _inward: Mapping from vertex to the vertices with an edge into it.
        _next_id: Handle assigned by the next :meth:`add`.

    """

    __slots__ = ("_compare", "_inward", "_next_id", "_outward", "_payloads")

    def __init__(self, comparator: Comparator[T] | None = None) -> None:
        self._payloads: dict[int, T] = {}
        self._outward: dict[int, set[int]] = {}
        self._inward: dict[int, set[int]] = {}
        self._next_id = 0
        self._compare: Comparator[T] = comparator if comparator is not None else three_way_compare

    @property
    def next_id(self) -> int:
        """Handle the next :meth:`add` will return."""
        return self._next_id

    def add(self, payload: T) -> int:
        """Store a payload under a fresh vertex handle and return the handle."""
        vertex = self._next_id
        self._payloads[vertex] = payload
        self._next_id += 1
        return vertex

    def get(self, vertex: int) -> T | None:
        """Return the payload of a vertex, or None if it is not present."""
        return self._payloads.get(vertex)

    def find_id(self, payload: T) -> int:
        """Return the first vertex whose payload compares equal to ``payload``.

        Payloads are scanned in :meth:`vertices` order. When several payloads
        are equal, which of their vertices is returned is not part of the
        contract.

        Returns:
            The matching vertex, or :data:`NOT_FOUND`.

        """
        for vertex, candidate in self._payloads.items():
            if self._compare(candidate, payload) == 0:
                return vertex
        return NOT_FOUND

    def bulk_get(self, vertices: Iterable[int]) -> list[T | None]:  # noqa: ARG002
        """Return the payload of every vertex currently in the store.

        ``vertices`` is accepted for compatibility and ignored: the result has
        one entry per existing vertex, in :meth:`vertices` order. Use
        :meth:`get_many` to fetch specific vertices.
        """
        return [self._payloads.get(vertex) for vertex in self.vertices()]

    def get_many(self, vertices: Iterable[int]) -> list[T | None]:
        """Return the payload of each requested vertex, None where absent."""
        return [self._payloads.get(vertex) for vertex in vertices]

    def link(self, u: int, v: int) -> bool:
        """Add the edge ``u -> v``.

        Returns:
            True if the edge was added, False if it already existed or either
            endpoint is not a live vertex.

        """
        if not (self._is_live(u) and self._is_live(v)):
            logger.debug("Refusing to link %d -> %d: unknown endpoint", u, v)
            return False
        targets = self._outward.setdefault(u, set())
        if v in targets:
            return False
        targets.add(v)
        self._inward.setdefault(v, set()).add(u)
        return True

    def unlink(self, u: int, v: int) -> bool:
        """Remove the edge ``u -> v``.

        Returns:
            True if the edge was removed, False if it did not exist or either
            endpoint is not a live vertex.

        """
        if not (self._is_live(u) and self._is_live(v)):
            logger.debug("Refusing to unlink %d -> %d: unknown endpoint", u, v)
            return False
        targets = self._outward.get(u)
        if targets is None or v not in targets:
            return False
        _discard(self._outward, u, v)
        _discard(self._inward, v, u)
        return True

    def out_neighbors(self, vertex: int) -> list[int]:
        """Vertices ``vertex`` has an edge to, in no particular order."""
        return list(self._outward.get(vertex, ()))

    def in_neighbors(self, vertex: int) -> list[int]:
        """Vertices with an edge into ``vertex``, in no particular order."""
        return list(self._inward.get(vertex, ()))

    def vertices(self) -> list[int]:
        """All vertices currently in the store."""
        return list(self._payloads)

    def edges(self) -> list[tuple[int, int]]:
        """All edges as ``(source, target)`` pairs."""
        return [(u, v) for u, targets in self._outward.items() for v in targets]

    def iterate(self) -> Iterator[tuple[int, T]]:
        """Iterate over ``(vertex, payload)`` pairs.

        The iterator is invalidated by any mutation of the store; call again
        for a fresh pass.
        """
        return iter(self._payloads.items())

    def clear(self) -> None:
        """Drop every vertex and edge. Handles keep counting from :attr:`next_id`."""
        logger.debug("Clearing %d vertices (next id stays %d)", len(self._payloads), self._next_id)
        self._payloads.clear()
        self._outward.clear()
        self._inward.clear()

    def accept[R](self, visitor: GraphVisitor[T, R]) -> R:
        """Run ``visitor`` over this store and return what it produces."""
        return visitor.visit(self)

    def _is_live(self, vertex: int) -> bool:
        # Handles from before a clear are below next_id but gone from payloads.
        return vertex < self._next_id and vertex in self._payloads

    def __len__(self) -> int:
        """Return the number of vertices in the store."""
        return len(self._payloads)

    def __contains__(self, vertex: Any) -> bool:
        """Check if a vertex is in the store."""
        return vertex in self._payloads

    def __repr__(self) -> str:
        n_edges = sum(len(targets) for targets in self._outward.values())
        return f"GraphStore(vertices={len(self._payloads)}, edges={n_edges}, next_id={self._next_id})"


def _discard(index: dict[int, set[int]], key: int, member: int) -> None:
    members = index[key]
    members.discard(member)
    if not members:
        del index[key]
