"""Breadth-first and depth-first orderings over a built :class:`Graph`."""

from __future__ import annotations

from collections import deque
from typing import Callable, Literal

from graph_traversal.analysis.graph_builder import Graph, VertexId

TraversalMethod = Literal["bfs", "dfs"]


class UnknownStartError(LookupError):
    """Raised in strict mode when the start identifier is not a vertex of the graph."""

    def __init__(self, start: VertexId) -> None:
        super().__init__(f"Start vertex {start!r} is not part of the graph")
        self.start = start


def _check_start(graph: Graph, start: VertexId, strict: bool) -> None:
    if strict and start not in graph:
        raise UnknownStartError(start)


def bfs(graph: Graph, start: VertexId, *, strict: bool = False) -> list[VertexId]:
    """
    Breadth-first visitation order from ``start``.

    Neighbours are queued unconditionally in adjacency order and filtered when dequeued, so
    ties inside a layer follow the adjacency lists. An unknown ``start`` yields
    ``[start]`` unless ``strict`` is set.
    """

    _check_start(graph, start, strict)

    visited: set[VertexId] = set()
    order: list[VertexId] = []
    queue: deque[VertexId] = deque([start])

    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        queue.extend(graph.neighbors(node))

    return order


def dfs(graph: Graph, start: VertexId, *, strict: bool = False) -> list[VertexId]:
    """
    Pre-order depth-first visitation order from ``start`` using an explicit stack.

    Neighbours are pushed in reverse so they pop in adjacency order, matching a recursive
    walk. The visited check after popping is what keeps each vertex to a single visit.
    """

    _check_start(graph, start, strict)

    visited: set[VertexId] = set()
    order: list[VertexId] = []
    stack: list[VertexId] = [start]

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbour in reversed(graph.neighbors(node)):
            if neighbour not in visited:
                stack.append(neighbour)

    return order


TRAVERSALS: dict[str, Callable[..., list[VertexId]]] = {"bfs": bfs, "dfs": dfs}


def traverse(graph: Graph, start: VertexId, method: TraversalMethod | str = "bfs", *, strict: bool = False) -> list[VertexId]:
    """Run the traversal named by ``method`` (``"bfs"`` or ``"dfs"``)."""

    try:
        walker = TRAVERSALS[method.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported traversal method: {method}") from exc
    return walker(graph, start, strict=strict)


def reachable(graph: Graph, start: VertexId) -> set[VertexId]:
    """Vertices reachable from ``start``, including ``start`` itself."""

    return set(bfs(graph, start))


__all__ = ["TRAVERSALS", "TraversalMethod", "UnknownStartError", "bfs", "dfs", "reachable", "traverse"]
