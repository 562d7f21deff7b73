"""Thin, stdlib-only CLI over the word graph queries."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from . import __version__
from .bridge import bridge_words
from .build import BuildConfig, build_from_file
from .display import (
    format_adjacency,
    format_bridge_words,
    format_missing,
    format_path,
    graph_payload,
    to_dot,
)
from .errors import EmptyGraph, InputUnavailable, NoPath, VertexAbsent
from .generate import TextGenerator
from .graph import Graph
from .journal import (
    journal_stats,
    log_bridge,
    log_build,
    log_generate,
    log_path,
    log_walk,
    read_journal,
)
from .paths import PathResult, shortest_path, shortest_paths_from
from .walk import RandomWalker, format_walk

logger = logging.getLogger("wordgraph.cli")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--journal", help="journal file (default: $WORDGRAPH_JOURNAL or ~/.wordgraph/journal.jsonl)")
    parser.add_argument("--no-log", action="store_true", help="disable journal logging")


def _add_graph_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="plain-text document to build the graph from")
    parser.add_argument(
        "--reset-on-skip",
        action="store_true",
        help="break word adjacency at skipped non-word tokens",
    )
    _add_common_args(parser)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordgraph")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="print the graph as an adjacency listing")
    _add_graph_args(show)
    show.add_argument("--dot", action="store_true", help="emit Graphviz DOT instead")

    bridge = sub.add_parser("bridge", help="query bridge words between two words")
    _add_graph_args(bridge)
    bridge.add_argument("word1")
    bridge.add_argument("word2")

    generate = sub.add_parser("generate", help="insert bridge words into a sentence")
    _add_graph_args(generate)
    generate.add_argument("text")
    generate.add_argument("--seed", type=int, default=None)

    path = sub.add_parser("path", help="shortest path between two words, or from one word to all others")
    _add_graph_args(path)
    path.add_argument("word1")
    path.add_argument("word2", nargs="?")

    walk = sub.add_parser("walk", help="random walk until a dead end or a revisited word")
    _add_graph_args(walk)
    walk.add_argument("--seed", type=int, default=None)
    walk.add_argument("--output", help="write the walk text to this file")

    journal = sub.add_parser("journal", help="read recent journal entries or summary stats")
    journal.add_argument("--last", type=int, default=10)
    journal.add_argument("--stats", action="store_true")
    _add_common_args(journal)

    return parser


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("wordgraph")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False


def _journal_path(args: argparse.Namespace) -> str | None:
    return args.journal


def _load_graph(args: argparse.Namespace) -> Graph:
    config = BuildConfig(reset_on_skip=args.reset_on_skip)
    try:
        graph = build_from_file(args.file, config)
    except InputUnavailable as exc:
        raise SystemExit(str(exc)) from exc
    logger.info("loaded %s: %r", args.file, graph)
    if not args.no_log:
        log_build(
            source=str(Path(args.file).expanduser()),
            vertex_count=graph.vertex_count(),
            edge_count=graph.edge_count(),
            journal_path=_journal_path(args),
        )
    return graph


def _path_payload(result: PathResult) -> dict:
    return {"vertices": result.vertices, "weight": result.weight}


def cmd_show(args: argparse.Namespace) -> int:
    """cmd show."""
    graph = _load_graph(args)
    if args.json:
        print(json.dumps(graph_payload(graph), indent=2))
    elif args.dot:
        print(to_dot(graph))
    else:
        print(format_adjacency(graph))
    return 0


def cmd_bridge(args: argparse.Namespace) -> int:
    """Print bridge words, or which query words are missing."""
    graph = _load_graph(args)
    word1, word2 = args.word1.lower(), args.word2.lower()
    try:
        bridges = sorted(bridge_words(graph, word1, word2))
    except VertexAbsent as exc:
        if not args.no_log:
            log_bridge(word1, word2, None, journal_path=_journal_path(args))
        if args.json:
            print(json.dumps({"word1": word1, "word2": word2, "missing": list(exc.missing)}))
        else:
            print(format_missing(word1, word2), file=sys.stderr)
        return 1

    if not args.no_log:
        log_bridge(word1, word2, bridges, journal_path=_journal_path(args))
    if args.json:
        print(json.dumps({"word1": word1, "word2": word2, "bridges": bridges}))
    else:
        print(format_bridge_words(word1, word2, bridges))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """cmd generate."""
    graph = _load_graph(args)
    output = TextGenerator(graph, random.Random(args.seed)).expand(args.text)
    if not args.no_log:
        log_generate(args.text, output, journal_path=_journal_path(args))
    print(json.dumps({"input": args.text, "output": output}) if args.json else output)
    return 0


def cmd_path(args: argparse.Namespace) -> int:
    """Print one shortest path, or all shortest paths from a single word."""
    graph = _load_graph(args)
    word1 = args.word1.lower()
    word2 = args.word2.lower() if args.word2 else None

    if word2 is None:
        try:
            results = shortest_paths_from(graph, word1)
        except VertexAbsent as exc:
            raise SystemExit(f"No {word1} in the graph!") from exc
        if not args.no_log:
            log_path(word1, None, None, journal_path=_journal_path(args))
        if args.json:
            print(json.dumps({target: _path_payload(result) for target, result in results.items()}, indent=2))
        else:
            print("\n".join(format_path(result) for result in results.values()) or f"No paths from {word1}!")
        return 0

    try:
        result = shortest_path(graph, word1, word2)
    except VertexAbsent:
        print("One or both of the words are not in the graph!", file=sys.stderr)
        return 1
    except NoPath:
        if not args.no_log:
            log_path(word1, word2, None, journal_path=_journal_path(args))
        print(f"No path found between {word1} and {word2}!", file=sys.stderr)
        return 1

    if not args.no_log:
        log_path(word1, word2, result.weight, journal_path=_journal_path(args))
    print(json.dumps(_path_payload(result)) if args.json else format_path(result))
    return 0


def cmd_walk(args: argparse.Namespace) -> int:
    """Run one random walk and optionally save its text."""
    graph = _load_graph(args)
    try:
        result = RandomWalker(graph, random.Random(args.seed)).walk_with_steps()
    except EmptyGraph as exc:
        raise SystemExit(str(exc)) from exc

    text = format_walk(result.vertices)
    if args.output:
        output_path = Path(args.output).expanduser()
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"failed to write walk: {output_path}: {exc}") from exc
        logger.info("walk written to %s", output_path)
    if not args.no_log:
        log_walk(result.vertices, result.stop_reason, journal_path=_journal_path(args))
    if args.json:
        print(json.dumps({"vertices": result.vertices, "stop_reason": result.stop_reason}))
    else:
        print(text)
    return 0


def cmd_journal(args: argparse.Namespace) -> int:
    """cmd journal."""
    journal_path = _journal_path(args)
    if args.last <= 0:
        raise SystemExit("--last must be a positive integer")
    if args.stats:
        stats = journal_stats(journal_path=journal_path)
        print(
            json.dumps(stats, indent=2)
            if args.json
            else "\n".join(f"{k}: {v}" for k, v in stats.items())
        )
        return 0
    entries = read_journal(last_n=args.last, journal_path=journal_path)
    print(
        json.dumps(entries, indent=2)
        if args.json
        else "\n".join(f"{idx+1:>2}. {entry.get('type')} @ {entry.get('iso', entry.get('ts', ''))}: {entry}" for idx, entry in enumerate(entries))
        or "No entries."
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """main."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return {
        "show": cmd_show,
        "bridge": cmd_bridge,
        "generate": cmd_generate,
        "path": cmd_path,
        "walk": cmd_walk,
        "journal": cmd_journal,
    }[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
