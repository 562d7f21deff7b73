"""Minimum-weight paths between words (Dijkstra over edge weights)."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import NoPath, VertexAbsent
from .graph import Graph

logger = logging.getLogger("wordgraph.paths")


@dataclass
class PathResult:
    """A path from its first to its last vertex and its total edge weight."""

    vertices: list[str]
    weight: int

    @property
    def source(self) -> str:
        return self.vertices[0]

    @property
    def target(self) -> str:
        return self.vertices[-1]

    def edges(self) -> Iterator[tuple[str, str]]:
        """Consecutive ``(source, target)`` pairs along the path."""
        return zip(self.vertices, self.vertices[1:])


def _check_vertices(graph: Graph, *words: str) -> None:
    missing = tuple(word for word in words if not graph.has_vertex(word))
    if missing:
        raise VertexAbsent(missing)


def _dijkstra(graph: Graph, source: str, target: str | None = None) -> tuple[dict[str, int], dict[str, str]]:
    """Settle distances from ``source``; stop early once ``target`` is settled.

    Edge weight is the traversal cost. Returns ``(distance, predecessor)``;
    only settled vertices appear in ``distance``, in settle order.
    """
    distance: dict[str, int] = {source: 0}
    predecessor: dict[str, str] = {}
    settled: dict[str, int] = {}
    # The counter keeps heap entries comparable without comparing words.
    counter = 0
    heap: list[tuple[int, int, str]] = [(0, counter, source)]

    while heap:
        dist, _, word = heapq.heappop(heap)
        if word in settled:
            continue
        settled[word] = dist
        if word == target:
            break
        for edge in graph.outgoing(word):
            candidate = dist + edge.weight
            if edge.target not in distance or candidate < distance[edge.target]:
                distance[edge.target] = candidate
                predecessor[edge.target] = word
                counter += 1
                heapq.heappush(heap, (candidate, counter, edge.target))

    return settled, predecessor


def _unwind(predecessor: dict[str, str], source: str, target: str) -> list[str]:
    path = [target]
    while path[-1] != source:
        path.append(predecessor[path[-1]])
    path.reverse()
    return path


def shortest_path(graph: Graph, source: str, target: str) -> PathResult:
    """Return the minimum total-weight path from ``source`` to ``target``.

    Raises:
        VertexAbsent: either endpoint is not in the graph.
        NoPath: ``target`` cannot be reached following directed edges.
    """
    _check_vertices(graph, source, target)
    if source == target:
        return PathResult(vertices=[source], weight=0)

    distance, predecessor = _dijkstra(graph, source, target)
    if target not in distance:
        raise NoPath(source, target)

    logger.debug("shortest path %s -> %s: weight %d", source, target, distance[target])
    return PathResult(vertices=_unwind(predecessor, source, target), weight=distance[target])


def shortest_paths_from(graph: Graph, source: str) -> dict[str, PathResult]:
    """Shortest paths from ``source`` to every other reachable vertex."""
    _check_vertices(graph, source)
    distance, predecessor = _dijkstra(graph, source)
    return {
        target: PathResult(vertices=_unwind(predecessor, source, target), weight=dist)
        for target, dist in distance.items()
        if target != source
    }
