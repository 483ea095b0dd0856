"""High-level orchestration for a single traversal request."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from graph_traversal.analysis.graph_builder import Graph, VertexId, build_graph
from graph_traversal.analysis.traversal import bfs, dfs
from graph_traversal.io.request_codec import AnalysisRequest, dump_result, parse_request

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    graph: Graph
    bfs_result: list[VertexId]
    dfs_result: list[VertexId]
    start: VertexId


def analyse(request: AnalysisRequest, *, strict_start: bool = False) -> AnalysisResult:
    """
    Build the graph described by ``request`` and compute both traversal orders.

    With ``strict_start`` an unknown start vertex raises
    :class:`~graph_traversal.analysis.traversal.UnknownStartError` instead of producing
    ``[start]``.
    """

    graph = build_graph(request.directionality, request.edges)
    result = AnalysisResult(
        graph=graph,
        bfs_result=bfs(graph, request.start, strict=strict_start),
        dfs_result=dfs(graph, request.start, strict=strict_start),
        start=request.start,
    )
    if request.start not in graph:
        LOGGER.debug("Start vertex %r is not part of the graph; traversals contain only the start", request.start)
    LOGGER.debug(
        "Analysed %s graph from %r: %s vertices, %s reachable",
        graph.directionality.value,
        request.start,
        len(graph.vertices),
        len(result.bfs_result),
    )
    return result


def analyse_payload(payload: Any, *, strict_start: bool = False) -> dict:
    """Decode a JSON payload, analyse it and return the response structure."""

    request = parse_request(payload)
    return dump_result(analyse(request, strict_start=strict_start))


__all__ = ["AnalysisResult", "analyse", "analyse_payload"]
