"""End-to-end scenarios through the analysis pipeline."""

from __future__ import annotations

import pytest

from graph_traversal.analysis.traversal import UnknownStartError
from graph_traversal.pipelines.analyse import analyse, analyse_payload
from graph_traversal.io.request_codec import parse_request


def _run(graph_type: str, edges: dict, start: str) -> dict:
    return analyse_payload({"graph_type": graph_type, "edges": edges, "start": start})


def test_directed_fan_out() -> None:
    response = _run("directed", {"a": ["b", "c"], "b": ["c"]}, "a")

    assert response["graph"]["vertices"] == ["a", "b", "c"]
    assert response["bfs_result"] == ["a", "b", "c"]
    assert response["dfs_result"] == ["a", "b", "c"]
    assert response["start"] == "a"


def test_undirected_single_edge_from_destination() -> None:
    response = _run("undirected", {"a": ["b"]}, "b")

    assert response["graph"]["edges"] == {"a": ["b"], "b": ["a"]}
    assert response["bfs_result"] == ["b", "a"]
    assert response["dfs_result"] == ["b", "a"]


def test_disconnected_components_are_skipped() -> None:
    response = _run("directed", {"a": ["b"], "x": ["y"]}, "a")

    assert response["graph"]["vertices"] == ["a", "b", "x", "y"]
    assert response["bfs_result"] == ["a", "b"]
    assert response["dfs_result"] == ["a", "b"]


def test_self_loop_terminates() -> None:
    response = _run("directed", {"a": ["a"]}, "a")

    assert response["bfs_result"] == ["a"]
    assert response["dfs_result"] == ["a"]


def test_duplicate_edges_kept_but_visited_once() -> None:
    response = _run("directed", {"a": ["b", "b"]}, "a")

    assert response["graph"]["edges"]["a"] == ["b", "b"]
    assert response["bfs_result"] == ["a", "b"]
    assert response["dfs_result"] == ["a", "b"]


def test_unknown_start_is_echoed() -> None:
    response = _run("undirected", {"a": ["b"]}, "zzz")

    assert response["bfs_result"] == ["zzz"]
    assert response["dfs_result"] == ["zzz"]
    assert response["start"] == "zzz"
    assert "zzz" not in response["graph"]["vertices"]


def test_unknown_start_strict() -> None:
    request = parse_request({"graph_type": "directed", "edges": {"a": ["b"]}, "start": "zzz"})

    with pytest.raises(UnknownStartError):
        analyse(request, strict_start=True)


@pytest.mark.parametrize("graph_type", ["directed", "undirected"])
def test_traversals_cover_the_same_reachable_set(graph_type: str) -> None:
    edges = {"a": ["b", "c"], "b": ["d", "a"], "c": ["e"], "e": ["c", "f"], "g": ["a"]}
    result = analyse(parse_request({"graph_type": graph_type, "edges": edges, "start": "a"}))

    assert len(result.bfs_result) == len(result.dfs_result)
    assert set(result.bfs_result) == set(result.dfs_result)
    assert len(set(result.bfs_result)) == len(result.bfs_result)
    assert result.bfs_result[0] == result.dfs_result[0] == "a"
    if graph_type == "directed":
        assert "g" not in result.bfs_result
    else:
        assert "g" in result.bfs_result
