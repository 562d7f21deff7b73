"""Tests for the JSONL telemetry journal."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wordgraph.journal import (
    DEFAULT_JOURNAL_PATH,
    JOURNAL_ENV_VAR,
    journal_stats,
    log_bridge,
    log_build,
    log_event,
    log_generate,
    log_path,
    log_walk,
    read_journal,
    resolve_journal_path,
)


def test_log_event_appends_stamped_lines(tmp_path: Path) -> None:
    journal = tmp_path / "nested" / "journal.jsonl"
    log_event({"type": "custom", "value": 1}, str(journal))
    log_event({"type": "custom", "value": 2}, str(journal))

    lines = journal.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["value"] == 1
    assert "ts" in first and "iso" in first


def test_read_journal_last_n(tmp_path: Path) -> None:
    journal = str(tmp_path / "journal.jsonl")
    for idx in range(5):
        log_event({"type": "custom", "idx": idx}, journal)
    entries = read_journal(journal, last_n=2)
    assert [entry["idx"] for entry in entries] == [3, 4]


def test_read_missing_journal_is_empty(tmp_path: Path) -> None:
    assert read_journal(str(tmp_path / "absent.jsonl")) == []


def test_journal_stats(tmp_path: Path) -> None:
    journal = str(tmp_path / "journal.jsonl")
    log_build("doc.txt", 4, 5, journal)
    log_bridge("build", "castles", ["grand"], journal)
    log_bridge("walls", "and", [], journal)
    log_bridge("to", "ghost", None, journal)
    log_generate("build castles", "build grand castles", journal)
    log_path("a", "c", 2, journal)
    log_walk(["a", "b", "c"], "dead_end", journal)
    log_walk(["a"], "revisit", journal)

    stats = journal_stats(journal)
    assert stats == {
        "total_entries": 8,
        "builds": 1,
        "bridge_queries": 3,
        "bridges_found": 1,
        "generations": 1,
        "path_queries": 1,
        "walks": 2,
        "avg_walk_length": 2.0,
    }
    generate_entry = read_journal(journal)[4]
    assert generate_entry["inserted"] == 1


def test_env_var_overrides_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "env.jsonl"
    monkeypatch.setenv(JOURNAL_ENV_VAR, str(target))
    assert resolve_journal_path() == target
    log_walk(["x"], "dead_end")
    assert read_journal()[0]["type"] == "walk"

    explicit = tmp_path / "explicit.jsonl"
    assert resolve_journal_path(str(explicit)) == explicit


def test_default_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(JOURNAL_ENV_VAR, raising=False)
    assert resolve_journal_path() == Path(DEFAULT_JOURNAL_PATH).expanduser()


def test_generate_insertions_count_tokens_not_whitespace(tmp_path: Path) -> None:
    journal = str(tmp_path / "journal.jsonl")
    log_generate("a;b", "a b", journal)
    log_generate("Build, castles!", "build grand castles", journal)
    entries = read_journal(journal)
    assert [entry["inserted"] for entry in entries] == [0, 1]
