from __future__ import annotations

import random
from pathlib import Path

import pytest

from wordgraph import BuildConfig, EmptyGraph, NoPath, VertexAbsent, WordGraph

CASTLES = (
    "To build grand castles, you must first build strong walls and deep moats. "
    "Strong walls and towers guard grand castles and the people inside!"
)


def test_query_surface_from_text() -> None:
    wg = WordGraph.build_from_text(CASTLES, rng=random.Random(1))

    assert wg.bridge_words("build", "castles") == {"grand"}
    assert wg.expand("build castles") == "build grand castles"
    assert wg.shortest_path("to", "castles").weight == 4
    assert set(wg.shortest_paths_from("people")) == {"inside"}

    walk = wg.walk()
    assert walk
    assert all(word in wg.graph for word in walk)


def test_query_failures_surface_as_exceptions() -> None:
    wg = WordGraph.build_from_text(CASTLES)
    with pytest.raises(VertexAbsent):
        wg.bridge_words("to", "nonexistent")
    with pytest.raises(NoPath):
        wg.shortest_path("inside", "to")
    with pytest.raises(EmptyGraph):
        WordGraph.build_from_text("42 !!").walk()


def test_shared_seeded_rng_is_reproducible() -> None:
    first = WordGraph.build_from_text(CASTLES, rng=random.Random(5))
    second = WordGraph.build_from_text(CASTLES, rng=random.Random(5))
    assert first.walk_with_steps().vertices == second.walk_with_steps().vertices
    assert first.walk() == second.walk()


def test_build_from_file_with_config(tmp_path: Path) -> None:
    doc = tmp_path / "doc.txt"
    doc.write_text("one 2 three", encoding="utf-8")

    linked = WordGraph.build_from_file(doc)
    unlinked = WordGraph.build_from_file(doc, config=BuildConfig(reset_on_skip=True))
    assert linked.graph.has_edge("one", "three")
    assert not unlinked.graph.has_edge("one", "three")
    assert repr(linked) == "WordGraph(Graph(vertices=2, edges=1))"
