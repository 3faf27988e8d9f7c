"""Rich rendering utilities for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from .edges import VertexRow


def render_vertex_table(rows: list[VertexRow], console: Console) -> None:
    """Render vertices and their neighbours as a Rich table.

    Args:
        rows: List of VertexRow to render.
        console: Rich Console to output to.

    """
    if not rows:
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Id", justify="right", style="dim")
    table.add_column("Vertex", style="bold")
    table.add_column("Out")
    table.add_column("In")

    for row in rows:
        table.add_row(
            str(row.vertex),
            escape(row.label),
            escape(", ".join(row.outward)),
            escape(", ".join(row.inward)),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(rows)} vertices[/dim]")


def render_cycles(cycles: list[list[str]], console: Console) -> None:
    """Report the cycles a sort had to break."""
    for cycle in cycles:
        path = " -> ".join([*cycle, cycle[0]])
        console.print(f"  [yellow]•[/yellow] {escape(path)}")
