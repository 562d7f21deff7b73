"""Read-only snapshots and text renderings of a word graph."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .graph import Graph
from .paths import PathResult


def graph_payload(graph: Graph) -> dict[str, Any]:
    """JSON-ready snapshot of all vertices and weighted edges."""
    return {
        "vertices": graph.vertices(),
        "edges": [
            {"source": edge.source, "target": edge.target, "weight": edge.weight}
            for edge in graph.edges()
        ],
    }


def format_adjacency(graph: Graph) -> str:
    """One line per vertex: ``word: next(weight) next(weight) ...``."""
    lines = ["Graph:"]
    for word in graph.vertices():
        targets = " ".join(f"{edge.target}({edge.weight})" for edge in graph.outgoing(word))
        lines.append(f"{word}: {targets}".rstrip())
    return "\n".join(lines)


def to_dot(graph: Graph, name: str = "wordgraph") -> str:
    """Graphviz DOT source with edge weights as labels."""
    lines = [f"digraph {name} {{"]
    lines.extend(f'  "{word}";' for word in graph.vertices())
    lines.extend(
        f'  "{edge.source}" -> "{edge.target}" [label="{edge.weight}"];'
        for edge in graph.edges()
    )
    lines.append("}")
    return "\n".join(lines)


def format_bridge_words(word1: str, word2: str, bridges: Iterable[str]) -> str:
    ordered = sorted(bridges)
    if not ordered:
        return f"No bridge words from {word1} to {word2}!"
    return f"The bridge words from {word1} to {word2} are: {', '.join(ordered)}"


def format_missing(word1: str, word2: str) -> str:
    return f"No {word1} or {word2} in the graph!"


def format_path(result: PathResult) -> str:
    return (
        f"Shortest path from {result.source} to {result.target} is: "
        f"{'->'.join(result.vertices)}. Path weight: {result.weight}"
    )
