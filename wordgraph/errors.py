"""Typed failures raised by graph construction and queries."""

from __future__ import annotations


class WordGraphError(RuntimeError):
    """Base class for every wordgraph failure."""


class InputUnavailable(WordGraphError):
    """Raised when the source document cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"input unavailable: {path}: {reason}")


class VertexAbsent(WordGraphError):
    """Raised when one or more query words are not vertices of the graph.

    ``missing`` lists the absent words in argument order.
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"not in the graph: {', '.join(self.missing)}")


class NoPath(WordGraphError):
    """Raised when ``target`` is unreachable from ``source``."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"no path from {source} to {target}")


class EmptyGraph(WordGraphError):
    """Raised when a walk is requested on a graph with no vertices."""

    def __init__(self) -> None:
        super().__init__("graph has no vertices")
