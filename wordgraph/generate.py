"""Bridge-word assisted text expansion."""

from __future__ import annotations

import random

from .bridge import find_bridge_words
from .graph import Graph
from .tokenize import is_word, iter_tokens


class TextGenerator:
    """Insert a random bridge word between consecutive words of a sentence."""

    def __init__(self, graph: Graph, rng: random.Random | None = None) -> None:
        self.graph = graph
        self.rng = rng or random.Random()

    def _pick(self, candidates: set[str]) -> str:
        return self.rng.choice(sorted(candidates))

    def expand(self, text: str) -> str:
        """Return ``text`` lower-cased and re-tokenized, with bridges spliced in.

        Non-word tokens are kept in place and do not break the pairing of the
        words around them.
        """
        output: list[str] = []
        previous_word: str | None = None
        for token in iter_tokens(text):
            if not is_word(token):
                output.append(token)
                continue
            if previous_word is not None:
                bridges = find_bridge_words(self.graph, previous_word, token)
                if bridges:
                    output.append(self._pick(bridges))
            output.append(token)
            previous_word = token
        return " ".join(output).strip()


def expand(graph: Graph, text: str, rng: random.Random | None = None) -> str:
    """Convenience wrapper around ``TextGenerator(graph, rng).expand(text)``."""
    return TextGenerator(graph, rng).expand(text)
