"""wordgraph public API.

Build a directed, weighted graph of word adjacencies from a text and query it:
bridge words, bridge-word text expansion, shortest paths and random walks.

CLI:
  python -m wordgraph
  wordgraph  # via console_scripts entry point
"""

__version__ = "1.0.0"

from .bridge import bridge_words, find_bridge_words
from .build import BuildConfig, GraphBuilder, build_from_file, build_from_text, build_graph, read_document
from .display import format_adjacency, graph_payload, to_dot
from .engine import WordGraph
from .errors import EmptyGraph, InputUnavailable, NoPath, VertexAbsent, WordGraphError
from .generate import TextGenerator, expand
from .graph import Edge, Graph
from .paths import PathResult, shortest_path, shortest_paths_from
from .tokenize import TokenStream, is_word, iter_tokens, iter_words
from .walk import RandomWalker, WalkResult, format_walk

__all__ = [
    # --- Core ---
    "Graph",
    "Edge",
    "WordGraph",
    "GraphBuilder",
    "BuildConfig",
    "build_graph",
    "build_from_text",
    "build_from_file",
    "read_document",
    # --- Tokenizer ---
    "TokenStream",
    "iter_tokens",
    "iter_words",
    "is_word",
    # --- Queries ---
    "bridge_words",
    "find_bridge_words",
    "TextGenerator",
    "expand",
    "PathResult",
    "shortest_path",
    "shortest_paths_from",
    "RandomWalker",
    "WalkResult",
    "format_walk",
    # --- Presentation ---
    "graph_payload",
    "format_adjacency",
    "to_dot",
    # --- Errors ---
    "WordGraphError",
    "InputUnavailable",
    "VertexAbsent",
    "NoPath",
    "EmptyGraph",
]
