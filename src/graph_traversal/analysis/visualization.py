"""Visualization helpers for traversal orders."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from graph_traversal.analysis.adapters import to_networkx
from graph_traversal.analysis.graph_builder import Graph, VertexId

VISITED_COLOUR = "#38bdf8"
START_COLOUR = "#f97316"
UNVISITED_COLOUR = "#cbd5e1"


def _node_colours(nx_graph: nx.Graph, order: Sequence[VertexId]) -> list[str]:
    visited = set(order)
    start = order[0] if order else None
    colours = []
    for node in nx_graph.nodes():
        if node == start:
            colours.append(START_COLOUR)
        elif node in visited:
            colours.append(VISITED_COLOUR)
        else:
            colours.append(UNVISITED_COLOUR)
    return colours


def plot_traversal(
    graph: Graph,
    output_path: Path,
    *,
    order: Sequence[VertexId] = (),
    layout: str = "spring",
    title: str | None = None,
) -> Path:
    """
    Render ``graph`` to ``output_path`` using matplotlib.

    Vertices in ``order`` are coloured and labelled with their visitation index; the first entry
    is treated as the start. Unvisited vertices are drawn greyed out.
    """

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if not graph.vertices:
        raise ValueError("Graph contains no vertices to visualize.")

    nx_graph = nx.DiGraph(to_networkx(graph)) if graph.is_directed else nx.Graph(to_networkx(graph))

    if layout == "kamada-kawai":
        positions = nx.kamada_kawai_layout(nx_graph)
    elif layout == "shell":
        positions = nx.shell_layout(nx_graph)
    else:
        positions = nx.spring_layout(nx_graph, seed=42, iterations=100)

    rank = {vertex: idx for idx, vertex in enumerate(order)}
    labels = {node: f"{node}\n#{rank[node] + 1}" if node in rank else str(node) for node in nx_graph.nodes()}

    plt.figure(figsize=(8, 8))
    nx.draw_networkx_edges(nx_graph, positions, alpha=0.5, width=1.0, arrows=graph.is_directed)
    nx.draw_networkx_nodes(nx_graph, positions, node_color=_node_colours(nx_graph, order), node_size=900, alpha=0.9)
    nx.draw_networkx_labels(nx_graph, positions, labels=labels, font_size=8)

    if title is None:
        title = f"{graph.directionality.value} graph: {len(order)} of {len(graph.vertices)} vertices visited"

    plt.title(title)
    plt.axis("off")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close()
    return output_path


__all__ = ["plot_traversal"]
