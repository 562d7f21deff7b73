"""Single-object query surface over a built word graph."""

from __future__ import annotations

import random
from pathlib import Path

from .bridge import bridge_words
from .build import BuildConfig, build_from_file, build_from_text
from .generate import TextGenerator
from .graph import Graph
from .paths import PathResult, shortest_path, shortest_paths_from
from .walk import RandomWalker, WalkResult


class WordGraph:
    """Bundle a graph with the random source its generator and walker share.

    The graph is only read after construction.
    """

    def __init__(self, graph: Graph, rng: random.Random | None = None) -> None:
        self.graph = graph
        self.rng = rng or random.Random()
        self._generator = TextGenerator(graph, self.rng)
        self._walker = RandomWalker(graph, self.rng)

    @classmethod
    def build_from_text(
        cls,
        text: str,
        rng: random.Random | None = None,
        config: BuildConfig | None = None,
    ) -> WordGraph:
        return cls(build_from_text(text, config), rng)

    @classmethod
    def build_from_file(
        cls,
        path: str | Path,
        rng: random.Random | None = None,
        config: BuildConfig | None = None,
    ) -> WordGraph:
        return cls(build_from_file(path, config), rng)

    def bridge_words(self, word1: str, word2: str) -> set[str]:
        return bridge_words(self.graph, word1, word2)

    def expand(self, text: str) -> str:
        return self._generator.expand(text)

    def shortest_path(self, word1: str, word2: str) -> PathResult:
        return shortest_path(self.graph, word1, word2)

    def shortest_paths_from(self, word: str) -> dict[str, PathResult]:
        return shortest_paths_from(self.graph, word)

    def walk(self) -> list[str]:
        return self._walker.walk()

    def walk_with_steps(self) -> WalkResult:
        return self._walker.walk_with_steps()

    def __repr__(self) -> str:
        return f"WordGraph({self.graph!r})"
