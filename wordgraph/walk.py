"""Random walks that stop at dead ends or on the first revisited word."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .errors import EmptyGraph
from .graph import Edge, Graph

logger = logging.getLogger("wordgraph.walk")

STOP_DEAD_END = "dead_end"
STOP_REVISIT = "revisit"


@dataclass
class WalkResult:
    """Walk output.

    ``edges`` holds every traversed edge, including the one that led back to
    an already visited word when the walk stopped on a revisit.
    """

    vertices: list[str]
    edges: list[Edge] = field(default_factory=list)
    stop_reason: str = STOP_DEAD_END


class RandomWalker:
    """Follow uniformly random outgoing edges from a random start word."""

    def __init__(self, graph: Graph, rng: random.Random | None = None) -> None:
        self.graph = graph
        self.rng = rng or random.Random()

    def walk_with_steps(self) -> WalkResult:
        """Run one walk and report its vertices, edges and stop reason."""
        vertices = self.graph.vertices()
        if not vertices:
            raise EmptyGraph()

        current = self.rng.choice(vertices)
        result = WalkResult(vertices=[current])
        visited = {current}

        while True:
            outgoing = self.graph.outgoing(current)
            if not outgoing:
                result.stop_reason = STOP_DEAD_END
                break

            edge = self.rng.choice(outgoing)
            result.edges.append(edge)
            if edge.target in visited:
                result.stop_reason = STOP_REVISIT
                break

            result.vertices.append(edge.target)
            visited.add(edge.target)
            if self.graph.out_degree(edge.target) == 0:
                result.stop_reason = STOP_DEAD_END
                break
            current = edge.target

        logger.debug("walk of %d vertices stopped: %s", len(result.vertices), result.stop_reason)
        return result

    def walk(self) -> list[str]:
        """Return the visited words of one random walk, in order."""
        return self.walk_with_steps().vertices


def format_walk(vertices: list[str]) -> str:
    """Whitespace-joined walk text, as handed to an output sink."""
    return " ".join(vertices)
