"""Graph construction from a document's word sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .errors import InputUnavailable
from .graph import Graph
from .tokenize import is_word, iter_tokens

logger = logging.getLogger("wordgraph.build")


@dataclass
class BuildConfig:
    """Construction policy.

    Attributes:
        reset_on_skip: when ``True`` a skipped non-word token (number,
            apostrophe or hyphen fragment) breaks the adjacency chain. The
            default ``False`` links the words on either side of it, so
            ``"one 2 three"`` records ``one -> three``.
    """

    reset_on_skip: bool = False


class GraphBuilder:
    """Populate a graph by linking consecutive accepted words."""

    def __init__(self, config: BuildConfig | None = None, graph: Graph | None = None) -> None:
        self.config = config or BuildConfig()
        self.graph = graph if graph is not None else Graph()
        self.previous_word: str | None = None

    def feed(self, word: str) -> None:
        """Add one accepted word and link it to the previous one."""
        self.graph.ensure_vertex(word)
        if self.previous_word is not None:
            self.graph.ensure_vertex(self.previous_word)
            self.graph.record_adjacency(self.previous_word, word)
        self.previous_word = word

    def skip(self, token: str) -> None:
        """Drop a non-word token."""
        if self.config.reset_on_skip:
            self.previous_word = None

    def build(self, tokens: Iterable[str]) -> Graph:
        """Feed every raw token and return the populated graph."""
        for token in tokens:
            if is_word(token):
                self.feed(token)
            else:
                self.skip(token)
        logger.debug(
            "built graph: %d vertices, %d edges",
            self.graph.vertex_count(),
            self.graph.edge_count(),
        )
        return self.graph


def build_graph(tokens: Iterable[str], config: BuildConfig | None = None) -> Graph:
    """Build a fresh graph from an iterable of raw tokens."""
    return GraphBuilder(config).build(tokens)


def build_from_text(text: str, config: BuildConfig | None = None) -> Graph:
    """Tokenize ``text`` and build its word graph."""
    return build_graph(iter_tokens(text), config)


def read_document(path: str | Path) -> str:
    """Read a text document, raising ``InputUnavailable`` on any failure."""
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise InputUnavailable(str(file_path), "file not found")
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailable(str(file_path), str(exc)) from exc


def build_from_file(path: str | Path, config: BuildConfig | None = None) -> Graph:
    """Build the word graph of the document at ``path``."""
    text = read_document(path)
    graph = build_from_text(text, config)
    logger.debug("loaded %s", path)
    return graph
