"""Core in-memory word graph primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Edge:
    """Directed adjacency between two words.

    ``weight`` counts how many times ``target`` immediately followed ``source``.
    """

    source: str
    target: str
    weight: int = 1


class Graph:
    """Directed weighted word graph. Plain dicts, insertion ordered."""

    def __init__(self) -> None:
        self._vertices: dict[str, None] = {}
        self._edges: dict[str, dict[str, Edge]] = {}

    # -- Vertices --

    def ensure_vertex(self, word: str) -> None:
        """Insert ``word`` as a vertex if it is not one already."""
        if word not in self._vertices:
            self._vertices[word] = None

    def has_vertex(self, word: str) -> bool:
        return word in self._vertices

    def __contains__(self, word: object) -> bool:
        return word in self._vertices

    def vertices(self) -> list[str]:
        """vertices."""
        return list(self._vertices)

    def vertex_count(self) -> int:
        """vertex count."""
        return len(self._vertices)

    # -- Edges --

    def record_adjacency(self, source: str, target: str) -> Edge:
        """Count one more occurrence of ``target`` right after ``source``.

        Both words must already be vertices.
        """
        source_edges = self._edges.setdefault(source, {})
        edge = source_edges.get(target)
        if edge is None:
            edge = Edge(source=source, target=target)
            source_edges[target] = edge
        else:
            edge.weight += 1
        return edge

    def get_edge(self, source: str, target: str) -> Edge | None:
        """get edge."""
        return self._edges.get(source, {}).get(target)

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._edges.get(source, {})

    def weight(self, source: str, target: str) -> int:
        """Weight of ``source -> target``, or 0 when there is no such edge."""
        edge = self.get_edge(source, target)
        return edge.weight if edge is not None else 0

    def outgoing(self, word: str) -> list[Edge]:
        """All outgoing edges of ``word``, in first-seen order."""
        return list(self._edges.get(word, {}).values())

    def successors(self, word: str) -> list[str]:
        """successors."""
        return list(self._edges.get(word, {}))

    def out_degree(self, word: str) -> int:
        """out degree."""
        return len(self._edges.get(word, {}))

    def edges(self) -> list[Edge]:
        """edges."""
        return [edge for source_edges in self._edges.values() for edge in source_edges.values()]

    def edge_count(self) -> int:
        """edge count."""
        return sum(len(edges) for edges in self._edges.values())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
