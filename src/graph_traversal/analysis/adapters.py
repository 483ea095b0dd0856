"""Conversions from :class:`Graph` into networkx and igraph objects."""

from __future__ import annotations

from pathlib import Path

import networkx as nx

from graph_traversal.analysis.graph_builder import Graph

try:
    import igraph as ig
except ImportError:  # pragma: no cover - igraph optional
    ig = None


def to_networkx(graph: Graph) -> nx.MultiDiGraph | nx.MultiGraph:
    """
    Mirror ``graph`` as a networkx multigraph.

    Vertex order and parallel edges are preserved. Undirected edges are added once even though
    the adjacency mapping stores them in both directions.
    """

    nx_graph: nx.MultiDiGraph | nx.MultiGraph
    if graph.is_directed:
        nx_graph = nx.MultiDiGraph(directionality=graph.directionality.value)
    else:
        nx_graph = nx.MultiGraph(directionality=graph.directionality.value)

    position = {vertex: idx for idx, vertex in enumerate(graph.vertices)}
    for vertex, idx in position.items():
        nx_graph.add_node(vertex, order=idx)

    nx_graph.add_edges_from(graph.added_edges())
    return nx_graph


def to_igraph(graph: Graph) -> "ig.Graph":
    """Convert a :class:`Graph` into an igraph.Graph."""

    if ig is None:  # pragma: no cover - import guard
        raise ImportError("igraph is not installed. Install optional dependency `pip install igraph`.")

    nx_graph = to_networkx(graph)
    vertices = list(nx_graph.nodes())
    ig_graph = ig.Graph(directed=graph.is_directed)
    ig_graph.add_vertices(len(vertices))
    ig_graph.vs["name"] = vertices
    index_map = {node: idx for idx, node in enumerate(vertices)}

    edge_indices = [(index_map[source], index_map[target]) for source, target in nx_graph.edges()]
    if edge_indices:
        ig_graph.add_edges(edge_indices)

    ig_graph["directionality"] = graph.directionality.value
    return ig_graph


def export_graphml(graph: Graph, destination: Path) -> Path:
    """Write ``graph`` to GraphML."""

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    nx.write_graphml(to_networkx(graph), destination)
    return destination


__all__ = ["export_graphml", "to_igraph", "to_networkx"]
