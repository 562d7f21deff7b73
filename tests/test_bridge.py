from __future__ import annotations

import pytest

from wordgraph.bridge import bridge_words, find_bridge_words
from wordgraph.build import build_from_text
from wordgraph.errors import VertexAbsent

CASTLES = (
    "To build grand castles, you must first build strong walls and deep moats. "
    "Strong walls and towers guard grand castles and the people inside!"
)


def test_query_bridge_words_valid() -> None:
    graph = build_from_text(CASTLES)
    assert bridge_words(graph, "build", "castles") == {"grand"}


def test_query_bridge_words_invalid() -> None:
    graph = build_from_text(CASTLES)
    with pytest.raises(VertexAbsent) as excinfo:
        bridge_words(graph, "to", "nonexistent")
    assert excinfo.value.missing == ("nonexistent",)


def test_query_bridge_words_no_bridge() -> None:
    """An empty set is a successful answer, not a failure."""
    graph = build_from_text(CASTLES)
    assert bridge_words(graph, "walls", "and") == set()


def test_missing_words_are_distinguished() -> None:
    graph = build_from_text(CASTLES)
    with pytest.raises(VertexAbsent) as first:
        bridge_words(graph, "ghost", "castles")
    with pytest.raises(VertexAbsent) as both:
        bridge_words(graph, "ghost", "phantom")
    assert first.value.missing == ("ghost",)
    assert both.value.missing == ("ghost", "phantom")


def test_multiple_bridges() -> None:
    graph = build_from_text("a x b. a y b. a z c")
    assert bridge_words(graph, "a", "b") == {"x", "y"}


def test_self_query_uses_general_rule() -> None:
    """bridge(w, w) needs w -> x -> w, which a self-loop can satisfy."""
    graph = build_from_text("a b a")
    assert bridge_words(graph, "a", "a") == {"b"}
    assert bridge_words(graph, "b", "b") == {"a"}

    loop = build_from_text("a a")
    assert bridge_words(loop, "a", "a") == {"a"}


def test_lenient_lookup_treats_unknown_words_as_no_bridge() -> None:
    graph = build_from_text(CASTLES)
    assert find_bridge_words(graph, "ghost", "castles") == set()
    assert find_bridge_words(graph, "build", "ghost") == set()
    assert find_bridge_words(graph, "build", "castles") == {"grand"}
