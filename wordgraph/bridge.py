"""Bridge-word lookup: single-hop intermediaries between two words."""

from __future__ import annotations

from .errors import VertexAbsent
from .graph import Graph


def find_bridge_words(graph: Graph, word1: str, word2: str) -> set[str]:
    """Return every ``w`` with edges ``word1 -> w`` and ``w -> word2``.

    Unknown words simply have no bridges.
    """
    return {word for word in graph.successors(word1) if graph.has_edge(word, word2)}


def bridge_words(graph: Graph, word1: str, word2: str) -> set[str]:
    """Strict bridge lookup.

    Raises:
        VertexAbsent: ``word1`` and/or ``word2`` is not a vertex; ``missing``
            names which ones.

    An empty set means both words exist but nothing bridges them.
    """
    missing = tuple(word for word in (word1, word2) if not graph.has_vertex(word))
    if missing:
        raise VertexAbsent(missing)
    return find_bridge_words(graph, word1, word2)
