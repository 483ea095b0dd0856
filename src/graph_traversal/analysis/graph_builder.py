"""Construction of the normalized vertex/adjacency model from a raw edge mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

LOGGER = logging.getLogger(__name__)

VertexId = str


class Directionality(str, Enum):
    """Whether edges are read as ordered pairs or as symmetric relations."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def parse(cls, value: "Directionality | str") -> "Directionality":
        """Resolve a wire tag (``"directed"`` / ``"undirected"``, case-sensitive)."""

        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unsupported graph type: {value!r} (expected 'directed' or 'undirected')")


@dataclass(frozen=True, slots=True)
class Graph:
    directionality: Directionality
    vertices: tuple[VertexId, ...] = ()
    adjacency: Mapping[VertexId, tuple[VertexId, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_directed(self) -> bool:
        return self.directionality is Directionality.DIRECTED

    @property
    def edge_count(self) -> int:
        """Number of edges added, counting parallel edges separately."""

        entries = sum(len(neighbours) for neighbours in self.adjacency.values())
        if self.is_directed:
            return entries
        # every undirected edge, self-loops included, stores two entries
        return entries // 2

    def neighbors(self, vertex: VertexId) -> tuple[VertexId, ...]:
        """Ordered neighbours of ``vertex``; unknown vertices have none."""

        return self.adjacency.get(vertex, ())

    def edges(self) -> Iterator[tuple[VertexId, VertexId]]:
        """Yield every adjacency entry as an ``(origin, destination)`` pair."""

        for origin, neighbours in self.adjacency.items():
            for destination in neighbours:
                yield origin, destination

    def added_edges(self) -> Iterator[tuple[VertexId, VertexId]]:
        """
        Yield each added edge once, walking the adjacency mapping in order.

        For undirected graphs the reciprocal adjacency entry of every edge is skipped, so
        parallel edges and self-loops still come out once per time they were added.
        """

        if self.is_directed:
            yield from self.edges()
            return

        pending: dict[tuple[VertexId, VertexId], int] = {}
        for origin, destination in self.edges():
            reverse = (destination, origin)
            if pending.get(reverse):
                pending[reverse] -= 1
                continue
            pending[(origin, destination)] = pending.get((origin, destination), 0) + 1
            yield origin, destination

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)


def iter_edge_pairs(edge_mapping: Mapping[VertexId, Sequence[VertexId]]) -> Iterator[tuple[VertexId, VertexId]]:
    """Flatten an origin -> destinations mapping in its given order."""

    for origin, destinations in edge_mapping.items():
        for destination in destinations:
            yield origin, destination


def build_graph(
    directionality: Directionality | str,
    edge_mapping: Mapping[VertexId, Sequence[VertexId]],
) -> Graph:
    """
    Build an immutable :class:`Graph` from ``edge_mapping``.

    Vertices are registered in first-seen order (origin before destination for every pair).
    Parallel edges and self-loops are kept as given; undirected edges are stored in both
    directions.
    """

    kind = Directionality.parse(directionality)
    return _fold_edges(kind, iter_edge_pairs(edge_mapping))


def _fold_edges(kind: Directionality, pairs: Iterable[tuple[VertexId, VertexId]]) -> Graph:
    # dict keys double as an insertion-ordered set for vertex registration
    seen: dict[VertexId, None] = {}
    adjacency: dict[VertexId, list[VertexId]] = {}

    for origin, destination in pairs:
        seen.setdefault(origin, None)
        seen.setdefault(destination, None)

        adjacency.setdefault(origin, []).append(destination)
        if kind is Directionality.UNDIRECTED:
            adjacency.setdefault(destination, []).append(origin)

    graph = Graph(
        directionality=kind,
        vertices=tuple(seen),
        adjacency=MappingProxyType({vertex: tuple(neighbours) for vertex, neighbours in adjacency.items()}),
    )
    LOGGER.debug(
        "Built %s graph with %s vertices and %s edges",
        kind.value,
        len(graph.vertices),
        graph.edge_count,
    )
    return graph


__all__ = ["Directionality", "Graph", "VertexId", "build_graph", "iter_edge_pairs"]
