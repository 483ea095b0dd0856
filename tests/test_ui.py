"""Tests for the Dash explorer helpers."""

from __future__ import annotations

from graph_traversal.io.request_codec import parse_request
from graph_traversal.pipelines.analyse import analyse
from graph_traversal.ui.app import create_app, traversal_elements


def _result(graph_type: str, edges: dict, start: str):
    return analyse(parse_request({"graph_type": graph_type, "edges": edges, "start": start}))


def test_traversal_elements_rank_vertices() -> None:
    result = _result("directed", {"a": ["c", "b"], "x": ["a"]}, "a")
    elements = traversal_elements(result, "dfs")

    nodes = {item["data"]["id"]: item["data"] for item in elements if "source" not in item["data"]}
    assert nodes["a"]["rank"] == 0
    assert nodes["c"]["rank"] == 1
    assert nodes["b"]["rank"] == 2
    assert nodes["x"]["rank"] is None
    assert nodes["a"]["label"] == "a (1)"


def test_traversal_elements_draw_undirected_edges_once() -> None:
    result = _result("undirected", {"a": ["b"], "b": ["c"]}, "a")
    edges = [item for item in traversal_elements(result) if "source" in item["data"]]

    assert len(edges) == 2
    assert all(item["classes"] == "undirected" for item in edges)


def test_create_app_layout() -> None:
    app = create_app()

    assert app.title == "Graph Traversal Explorer"
    assert app.layout is not None


def test_summary_reports_reachable_count() -> None:
    from graph_traversal.ui.app import _summary

    result = _result("directed", {"a": ["b"], "x": ["y"]}, "a")
    text = str(_summary(result))

    assert "4 vertices, 2 edges, 2 reachable from a" in text
