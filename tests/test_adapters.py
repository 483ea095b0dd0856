"""Tests for networkx/igraph conversion and GraphML export."""

from __future__ import annotations

from pathlib import Path

import networkx as nx
import pytest

from graph_traversal.analysis.adapters import export_graphml, to_igraph, to_networkx
from graph_traversal.analysis.graph_builder import build_graph


def test_to_networkx_directed() -> None:
    graph = build_graph("directed", {"a": ["b", "b"], "b": ["c"]})
    nx_graph = to_networkx(graph)

    assert nx_graph.is_directed()
    assert list(nx_graph.nodes()) == ["a", "b", "c"]
    assert nx_graph.number_of_edges("a", "b") == 2
    assert nx_graph.graph["directionality"] == "directed"


def test_to_networkx_undirected_adds_each_edge_once() -> None:
    graph = build_graph("undirected", {"a": ["b", "c"], "c": ["c"]})
    nx_graph = to_networkx(graph)

    assert not nx_graph.is_directed()
    assert nx_graph.number_of_edges() == graph.edge_count == 3
    assert nx_graph.number_of_edges("c", "c") == 1


def test_bfs_matches_networkx_reachability() -> None:
    from graph_traversal.analysis.traversal import bfs

    graph = build_graph("directed", {"a": ["b"], "b": ["c"], "d": ["a"]})
    nx_graph = to_networkx(graph)

    assert set(bfs(graph, "a")) == nx.descendants(nx_graph, "a") | {"a"}


def test_export_graphml(tmp_path: Path) -> None:
    graph = build_graph("undirected", {"a": ["b"]})
    destination = export_graphml(graph, tmp_path / "nested" / "graph.graphml")

    loaded = nx.read_graphml(destination)
    assert set(loaded.nodes()) == {"a", "b"}


def test_to_igraph() -> None:
    pytest.importorskip("igraph")

    graph = build_graph("directed", {"a": ["b", "c"], "b": ["c"]})
    ig_graph = to_igraph(graph)

    assert ig_graph.vcount() == 3
    assert ig_graph.ecount() == 3
    assert ig_graph.is_directed()
    assert ig_graph.vs["name"] == ["a", "b", "c"]
