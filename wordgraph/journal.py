"""Append-only JSONL journal for build/query telemetry."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path

from .tokenize import iter_tokens

DEFAULT_JOURNAL_PATH = "~/.wordgraph/journal.jsonl"
JOURNAL_ENV_VAR = "WORDGRAPH_JOURNAL"


def resolve_journal_path(journal_path: str | None = None) -> Path:
    """Explicit path, else ``$WORDGRAPH_JOURNAL``, else the default location."""
    raw = journal_path or os.environ.get(JOURNAL_ENV_VAR) or DEFAULT_JOURNAL_PATH
    return Path(raw).expanduser()


def log_event(event: dict, journal_path: str | None = None) -> None:
    """Append an event to the journal file."""
    path = resolve_journal_path(journal_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    event["ts"] = time.time()
    event["iso"] = time.strftime("%Y-%m-%dT%H:%M:%S%z")
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(event, default=str) + "\n")


def log_build(source: str, vertex_count: int, edge_count: int, journal_path: str | None = None) -> None:
    log_event(
        {
            "type": "build",
            "source": source,
            "vertices": vertex_count,
            "edges": edge_count,
        },
        journal_path,
    )


def log_bridge(word1: str, word2: str, bridges: list[str] | None, journal_path: str | None = None) -> None:
    log_event(
        {
            "type": "bridge",
            "word1": word1,
            "word2": word2,
            "bridges": bridges,
            "found": bool(bridges),
        },
        journal_path,
    )


def log_generate(input_text: str, output_text: str, journal_path: str | None = None) -> None:
    log_event(
        {
            "type": "generate",
            "input": input_text,
            "output": output_text,
            "inserted": len(output_text.split()) - sum(1 for _ in iter_tokens(input_text)),
        },
        journal_path,
    )


def log_path(source: str, target: str | None, weight: int | None, journal_path: str | None = None) -> None:
    log_event(
        {
            "type": "path",
            "source": source,
            "target": target,
            "weight": weight,
        },
        journal_path,
    )


def log_walk(vertices: list[str], stop_reason: str, journal_path: str | None = None) -> None:
    log_event(
        {
            "type": "walk",
            "vertices": vertices,
            "length": len(vertices),
            "stop_reason": stop_reason,
        },
        journal_path,
    )


def read_journal(journal_path: str | None = None, last_n: int | None = None) -> list[dict]:
    """Read journal entries. Optionally return only the last N entries."""
    path = resolve_journal_path(journal_path)
    if not path.exists():
        return []
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    entries = [json.loads(line) for line in lines if line.strip()]
    if last_n is not None:
        entries = entries[-last_n:]
    return entries


def journal_stats(journal_path: str | None = None) -> dict:
    """Return summary stats from journal entries."""
    entries = read_journal(journal_path)
    bridges = [e for e in entries if e.get("type") == "bridge"]
    walks = [e for e in entries if e.get("type") == "walk"]
    return {
        "total_entries": len(entries),
        "builds": sum(1 for e in entries if e.get("type") == "build"),
        "bridge_queries": len(bridges),
        "bridges_found": sum(1 for e in bridges if e.get("found")),
        "generations": sum(1 for e in entries if e.get("type") == "generate"),
        "path_queries": sum(1 for e in entries if e.get("type") == "path"),
        "walks": len(walks),
        "avg_walk_length": sum(e.get("length", 0) for e in walks) / max(len(walks), 1),
    }
