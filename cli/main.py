"""
adjgraph CLI

Console harness for the adjacency-list graph and its BFS visitor.
Loads a graph from an edge-list file, runs a breadth-first search and
prints the annotations the search leaves on the nodes.

Commands:
    adjgraph bfs <file> --source <label>                  Distances and predecessors
    adjgraph path <file> --source <label> --target <label>  One shortest path
    adjgraph info <file>                                   Node and edge summary

Usage:
    $ adjgraph bfs routes.txt --source a --order
    $ adjgraph path routes.txt -s a -t d
"""

import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from adjgraph import __version__
from adjgraph.config import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT, UNREACHABLE_MARK
from adjgraph.exceptions import GraphError
from adjgraph.graph import AdjacencyListDirectedGraph, build_graph_from_file
from adjgraph.models import GraphNode, NodeColor
from adjgraph.traversal import VisitOrderRecorder, path_to

# Initialize Typer app and Rich console
app = typer.Typer(
    name="adjgraph",
    help="adjgraph: breadth-first search over adjacency-list directed graphs",
    add_completion=False,
)
console = Console()


@app.command()
def bfs(
    path: Path = typer.Argument(
        ...,
        help="Edge-list file describing the graph",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    source: str = typer.Option(
        ...,
        "--source",
        "-s",
        help="Label of the node to start from",
    ),
    order: bool = typer.Option(
        False,
        "--order",
        "-o",
        help="Also print the order in which nodes were visited",
    ),
) -> None:
    """
    Run a breadth-first search and show distances and predecessors.

    Reachable nodes are listed by distance; unreachable nodes come last.
    """
    graph = _load_graph(path)
    start = _resolve_node(graph, source)

    visitor: VisitOrderRecorder = VisitOrderRecorder()
    reached = visitor.traverse(graph, start)

    _print_bfs_table(graph, start)
    console.print(
        f"\n[bold]{reached}[/bold] of [bold]{graph.node_count}[/bold] node(s) reachable "
        f"from [cyan]{start}[/cyan]"
    )

    if order:
        console.print("\n[bold]Visit order:[/bold] " + " → ".join(str(n) for n in visitor.visited))


@app.command("path")
def shortest_path(
    file: Path = typer.Argument(
        ...,
        help="Edge-list file describing the graph",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    source: str = typer.Option(..., "--source", "-s", help="Label of the first node"),
    target: str = typer.Option(..., "--target", "-t", help="Label of the last node"),
) -> None:
    """
    Show a shortest path, in number of edges, between two nodes.
    """
    graph = _load_graph(file)
    start = _resolve_node(graph, source)
    end = _resolve_node(graph, target)

    VisitOrderRecorder().traverse(graph, start)
    nodes = path_to(end)

    if not nodes:
        console.print(f"[yellow]{end} is not reachable from {start}.[/yellow]")
        raise typer.Exit(1)

    hops = len(nodes) - 1
    console.print(
        Panel(
            " → ".join(str(n) for n in nodes),
            title=f"[bold green]✓ {hops} hop(s)[/bold green]",
            border_style="green",
        )
    )


@app.command()
def info(
    file: Path = typer.Argument(
        ...,
        help="Edge-list file describing the graph",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
) -> None:
    """
    Summarize a graph: node and edge counts, and degrees per node.
    """
    graph = _load_graph(file)

    summary = Table(box=box.SIMPLE, show_header=False)
    summary.add_column("Label", style="dim")
    summary.add_column("Value", style="bold")
    summary.add_row("Nodes", str(graph.node_count))
    summary.add_row("Edges", str(graph.edge_count))
    summary.add_row("File", str(file))
    console.print(Panel(summary, title="[bold blue]Graph[/bold blue]", border_style="blue"))

    if graph.is_empty():
        return

    table = Table(box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Out", justify="right")
    table.add_column("In", justify="right")
    for node in sorted(graph.get_nodes(), key=lambda n: str(n.label)):
        table.add_row(
            str(node),
            str(len(graph.get_edges_of(node))),
            str(len(graph.get_ingoing_edges_of(node))),
        )
    console.print(table)


# Helper functions for loading and output formatting

def _load_graph(path: Path) -> AdjacencyListDirectedGraph:
    """Load a graph, turning load errors into a clean exit."""
    try:
        return build_graph_from_file(path)
    except (GraphError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _resolve_node(graph: AdjacencyListDirectedGraph, label: str) -> GraphNode:
    """Find the node for a label given on the command line."""
    node = graph.get_node_of(label)
    if node is None:
        console.print(f"[bold red]Error:[/bold red] node '{label}' is not in the graph")
        raise typer.Exit(1)
    return node


def _print_bfs_table(graph: AdjacencyListDirectedGraph, source: GraphNode) -> None:
    """Print color, distance and predecessor of every node."""
    table = Table(title=f"BFS from {source}", box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("State")
    table.add_column("Distance", justify="right")
    table.add_column("Predecessor")

    state_styles = {
        NodeColor.FINISHED: "green",
        NodeColor.DISCOVERED: "yellow",
        NodeColor.UNVISITED: "dim",
    }

    def sort_key(node: GraphNode) -> tuple:
        unreachable = node.distance is None
        return (unreachable, node.distance or 0, str(node.label))

    for node in sorted(graph.get_nodes(), key=sort_key):
        style = state_styles[node.color]
        table.add_row(
            str(node),
            f"[{style}]{node.color.value}[/{style}]",
            UNREACHABLE_MARK if node.distance is None else str(node.distance),
            str(node.previous) if node.previous is not None else "-",
        )

    console.print(table)


def _version_callback(value: bool) -> None:
    """Print the version and stop before any command runs."""
    if value:
        console.print(f"[bold]adjgraph[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """
    adjgraph: breadth-first search over adjacency-list directed graphs.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        console.print(f"[bold red]Error:[/bold red] unknown log level '{log_level}'")
        raise typer.Exit(1)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
