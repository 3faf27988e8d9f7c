import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from graphstore._graph import CycleError, GraphStore, TopoSortVisitor

from .config import ConfigError, GraphstoreConfig, get_config
from .edges import EdgeSyntaxError, build_store, label_order, vertex_rows
from .render import render_cycles, render_vertex_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str],
    typer.Argument(help="Edges as 'source->target', or a bare name for an isolated vertex"),
]
SeparatorOption = Annotated[
    str | None,
    typer.Option("--separator", help="Token between edge endpoints (default from [tool.graphstore] or '->')"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphstore CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> GraphstoreConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e


def _build(edges: list[str], separator: str) -> GraphStore[str]:
    try:
        return build_store(edges, separator)
    except EdgeSyntaxError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def sort(
    edges: EdgesArgument,
    *,
    separator: SeparatorOption = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--lenient", help="Fail on cycles instead of breaking them"),
    ] = None,
) -> None:
    """Print vertices in topological order."""
    config = _load_config()
    store = _build(edges, separator or config.separator)
    visitor = TopoSortVisitor(strict=config.strict if strict is None else strict)
    logger.debug("Sorting %r", store)

    try:
        order = store.accept(visitor)
    except CycleError as e:
        cycle = label_order(store, list(e.cycle))
        err_console.print("[red]✗ Graph contains a cycle:[/red]")
        render_cycles([cycle], err_console)
        raise typer.Exit(code=1) from e

    out_console.print("\n".join(label_order(store, order)), markup=False, highlight=False)

    if visitor.cycle_detected:
        err_console.print()
        err_console.print("[yellow]⚠ Cycles were broken to produce this order:[/yellow]")
        render_cycles([label_order(store, list(cycle)) for cycle in visitor.cycles], err_console)


@app.command()
def show(
    edges: EdgesArgument,
    *,
    separator: SeparatorOption = None,
) -> None:
    """Show each vertex with its outward and inward neighbours."""
    config = _load_config()
    store = _build(edges, separator or config.separator)
    render_vertex_table(vertex_rows(store), out_console)


def main() -> None:
    app()
