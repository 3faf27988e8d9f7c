"""Build stores from textual edge specs.

These are the functional core of the CLI - no I/O, no Rich rendering.
"""

from dataclasses import dataclass

from graphstore._graph import NOT_FOUND, GraphStore


class EdgeSyntaxError(ValueError):
    """Raised when an edge spec cannot be parsed."""


@dataclass(frozen=True, slots=True)
class EdgeSpec:
    """A parsed edge spec. ``target`` is None for a bare vertex."""

    source: str
    target: str | None = None


@dataclass(frozen=True, slots=True)
class VertexRow:
    """One vertex with its neighbours, resolved to labels."""

    vertex: int
    label: str
    outward: list[str]
    inward: list[str]


def parse_edge(text: str, separator: str) -> EdgeSpec:
    """Parse ``"a->b"`` into an edge, or ``"a"`` into a bare vertex.

    Raises:
        EdgeSyntaxError: If an endpoint is empty or the separator repeats.

    """
    parts = [part.strip() for part in text.split(separator)]
    if len(parts) > 2 or not all(parts):  # noqa: PLR2004
        msg = f"Invalid edge '{text}'. Expected 'source{separator}target' or a single vertex name"
        raise EdgeSyntaxError(msg)
    if len(parts) == 1:
        return EdgeSpec(source=parts[0])
    return EdgeSpec(source=parts[0], target=parts[1])


def _vertex_for(store: GraphStore[str], label: str) -> int:
    vertex = store.find_id(label)
    if vertex == NOT_FOUND:
        vertex = store.add(label)
    return vertex


def build_store(edges: list[str], separator: str) -> GraphStore[str]:
    """Build a store with one vertex per distinct label, in order of first mention."""
    store: GraphStore[str] = GraphStore()
    for text in edges:
        spec = parse_edge(text, separator)
        source = _vertex_for(store, spec.source)
        if spec.target is not None:
            store.link(source, _vertex_for(store, spec.target))
    return store


def label_order(store: GraphStore[str], order: list[int]) -> list[str]:
    """Translate a vertex order into payload labels."""
    return [label for label in store.get_many(order) if label is not None]


def vertex_rows(store: GraphStore[str]) -> list[VertexRow]:
    """Describe every vertex with its sorted neighbour labels."""
    rows: list[VertexRow] = []
    for vertex, label in store.iterate():
        rows.append(
            VertexRow(
                vertex=vertex,
                label=label,
                outward=sorted(label_order(store, store.out_neighbors(vertex))),
                inward=sorted(label_order(store, store.in_neighbors(vertex))),
            ),
        )
    return rows
