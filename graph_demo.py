"""
CLI that walks both Graph representations through a scripted session.

Without --config, replays: add three vertices, add four edges, update one,
delete one with weight 0, then remove a vertex. With --config, builds the
graph described by a YAML file instead and prints it once.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import click

from graph import Graph
from graph_config import build_graph, load_config
from graph_factory import GraphKind, empty_graph
from graph_render import describe, weight_matrix
from logging_config import configure_logging

Step = Tuple[str, Callable[[Graph], None]]


def _add_all(*labels: str) -> Callable[[Graph], None]:
    def apply(g: Graph) -> None:
        for label in labels:
            g.add(label)

    return apply


def _set_all(*edges: Tuple[str, str, int]) -> Callable[[Graph], None]:
    def apply(g: Graph) -> None:
        for source, target, weight in edges:
            g.set(source, target, weight)

    return apply


def _remove(label: str) -> Callable[[Graph], None]:
    def apply(g: Graph) -> None:
        g.remove(label)

    return apply


def demo_steps(a: str = "A", b: str = "B", c: str = "C") -> List[Step]:
    """Scripted session over three labels; c is the vertex removed at the end."""
    return [
        ("Empty graph", lambda g: None),
        (f"After adding vertices {a}, {b}, {c}", _add_all(a, b, c)),
        ("After adding edges", _set_all((a, b, 5), (a, c, 3), (b, c, 2), (c, a, 7))),
        (f"After updating {a} → {b} to weight 10", _set_all((a, b, 10))),
        (f"After removing edge {b} → {c}", _set_all((b, c, 0))),
        (f"After removing vertex {c} (and its edges)", _remove(c)),
    ]


def run_demo(kind: GraphKind, steps: Sequence[Step], show_matrix: bool = False) -> Graph:
    graph = empty_graph(kind)
    click.echo(f"=== {kind.value} representation ===")
    for caption, apply in steps:
        apply(graph)
        click.echo(f"\n{caption}:")
        click.echo(describe(graph), nl=False)
        if show_matrix:
            click.echo(str(weight_matrix(graph)))
    return graph


@click.command()
@click.option(
    "--impl",
    type=click.Choice(["edges", "vertices", "both"]),
    default=None,
    help="Representation to use (default: both, or the config's choice).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML graph config to load instead of the scripted session.",
)
@click.option("--matrix", "show_matrix", is_flag=True, help="Also print the weight matrix.")
@click.option("-v", "--verbose", is_flag=True, help="Log every graph mutation to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def main(
    impl: str | None,
    config_path: Path | None,
    show_matrix: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Print the state of a weighted digraph as it is built up and torn down."""
    configure_logging(verbose=verbose, log_json=log_json)

    if impl is None or impl == "both":
        kinds = list(GraphKind) if config_path is None or impl == "both" else []
    else:
        kinds = [GraphKind(impl)]

    if config_path is None:
        for i, kind in enumerate(kinds):
            if i:
                click.echo("")
            labels = ("A", "B", "C") if kind is GraphKind.VERTICES else ("X", "Y", "Z")
            run_demo(kind, demo_steps(*labels), show_matrix=show_matrix)
        return

    config = load_config(config_path)
    for kind in kinds or [config.implementation]:
        graph = build_graph(config, kind)
        click.echo(f"=== {kind.value} representation ({config_path.name}) ===")
        click.echo(describe(graph), nl=False)
        if show_matrix:
            click.echo(str(weight_matrix(graph)))


if __name__ == "__main__":
    main()
