"""JSON wire format for analysis requests and responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from graph_traversal.analysis.graph_builder import Directionality, Graph, VertexId

REQUEST_FIELDS = ("graph_type", "edges", "start")


class RequestValidationError(ValueError):
    """The payload does not describe a well-formed analysis request."""


@dataclass(frozen=True, slots=True)
class AnalysisRequest:
    directionality: Directionality
    edges: dict[VertexId, list[VertexId]]
    start: VertexId


def _parse_edges(raw: Any) -> dict[VertexId, list[VertexId]]:
    if not isinstance(raw, Mapping):
        raise RequestValidationError("'edges' must be an object mapping vertices to lists of vertices")

    edges: dict[VertexId, list[VertexId]] = {}
    for origin, destinations in raw.items():
        if not isinstance(origin, str):
            raise RequestValidationError(f"Edge origin {origin!r} must be a string")
        if not isinstance(destinations, list):
            raise RequestValidationError(f"Destinations of {origin!r} must be a list")
        for destination in destinations:
            if not isinstance(destination, str):
                raise RequestValidationError(f"Destination {destination!r} of {origin!r} must be a string")
        edges[origin] = list(destinations)
    return edges


def parse_request(payload: Any) -> AnalysisRequest:
    """Validate a decoded JSON payload and turn it into an :class:`AnalysisRequest`."""

    if not isinstance(payload, Mapping):
        raise RequestValidationError("Request body must be a JSON object")

    missing = [name for name in REQUEST_FIELDS if name not in payload]
    if missing:
        raise RequestValidationError(f"Missing field(s): {', '.join(missing)}")

    try:
        directionality = Directionality.parse(payload["graph_type"])
    except ValueError as exc:
        raise RequestValidationError(str(exc)) from exc

    start = payload["start"]
    if not isinstance(start, str):
        raise RequestValidationError("'start' must be a string")

    return AnalysisRequest(directionality=directionality, edges=_parse_edges(payload["edges"]), start=start)


def load_request(path: Path) -> AnalysisRequest:
    """Read a request JSON file from disk."""

    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise RequestValidationError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_request(payload)


def dump_graph(graph: Graph) -> dict:
    return {
        "typ": graph.directionality.value,
        "vertices": list(graph.vertices),
        "edges": {vertex: list(neighbours) for vertex, neighbours in graph.adjacency.items()},
    }


def dump_result(result) -> dict:
    """Serialize an ``AnalysisResult`` into the response structure."""

    return {
        "graph": dump_graph(result.graph),
        "bfs_result": list(result.bfs_result),
        "dfs_result": list(result.dfs_result),
        "start": result.start,
    }


def write_result(result, destination: Path) -> Path:
    """Persist an analysis result as indented JSON."""

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as handle:
        json.dump(dump_result(result), handle, indent=2)
    return destination


__all__ = [
    "AnalysisRequest",
    "RequestValidationError",
    "dump_graph",
    "dump_result",
    "load_request",
    "parse_request",
    "write_result",
]
