"""
Mini example of the WordGraph query surface.

Run: python examples/hello_world.py
"""

from __future__ import annotations

import random

from wordgraph import NoPath, VertexAbsent, WordGraph, format_adjacency, format_walk

TEXT = """
To build grand castles, you must first build strong walls and deep moats.
Strong walls and towers guard grand castles and the people inside!
"""


def main() -> None:
    wg = WordGraph.build_from_text(TEXT, rng=random.Random(42))
    print(format_adjacency(wg.graph))

    print(f"Bridge words build->castles: {sorted(wg.bridge_words('build', 'castles'))}")
    try:
        wg.bridge_words("to", "dragons")
    except VertexAbsent as exc:
        print(f"Missing: {', '.join(exc.missing)}")

    print(f"Expanded: {wg.expand('We build castles and towers')}")

    path = wg.shortest_path("to", "castles")
    print(f"Path: {'->'.join(path.vertices)} (weight {path.weight})")
    try:
        wg.shortest_path("inside", "to")
    except NoPath as exc:
        print(f"Unreachable: {exc}")

    print(f"Walk: {format_walk(wg.walk())}")


if __name__ == "__main__":
    main()
