"""Tests for the Hall of Shame log."""

import tempfile
from pathlib import Path

from rudeshare.board.shame import HallOfShame
from rudeshare.board.store import hash_ip


def test_record_and_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        shame = HallOfShame(Path(tmpdir))
        first = shame.record("please thank you", ["please", "thank you"], "Grow a spine.", "10.0.0.1")
        second = shame.record("much love, thanks", ["thanks", "much love"], "Ugh.")

        assert first.ip_hash == hash_ip("10.0.0.1")
        assert second.ip_hash == ""
        assert shame.count() == 2

        entries = shame.list_entries()
        assert [e.id for e in entries] == [second.id, first.id]
        assert entries[1].flagged_terms == ["please", "thank you"]
        assert entries[1].rude_response == "Grow a spine."
        assert len(shame.list_entries(limit=1)) == 1


def test_entries_survive_a_new_instance():
    with tempfile.TemporaryDirectory() as tmpdir:
        HallOfShame(Path(tmpdir)).record("kindly, sorry", ["kindly", "sorry"], "No.")
        assert HallOfShame(Path(tmpdir)).count() == 1


def test_unreadable_lines_are_skipped():
    with tempfile.TemporaryDirectory() as tmpdir:
        shame = HallOfShame(Path(tmpdir))
        shame.record("kindly, sorry", ["kindly", "sorry"], "No.")
        with (Path(tmpdir) / "2000-01-01.jsonl").open("w") as fh:
            fh.write("not json\n\n{\"bogus\": 1}\n")
        assert shame.count() == 1


def test_undecodable_bytes_are_skipped():
    with tempfile.TemporaryDirectory() as tmpdir:
        shame = HallOfShame(Path(tmpdir))
        shame.record("kindly, sorry", ["kindly", "sorry"], "No.")
        (Path(tmpdir) / "2000-01-01.jsonl").write_bytes(b"\xff\xfe garbage\n")
        assert shame.count() == 1
        assert [e.content for e in shame.list_entries()] == ["kindly, sorry"]


def test_count_reparses_only_changed_files(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        shame = HallOfShame(Path(tmpdir))
        shame.record("kindly, sorry", ["kindly", "sorry"], "No.")
        assert shame.count() == 1

        parsed = []
        read_file = shame._read_file
        monkeypatch.setattr(shame, "_read_file", lambda path: parsed.append(path) or read_file(path))
        assert shame.count() == 1
        assert parsed == []

        shame.record("thanks, please", ["please", "thanks"], "Spineless.")
        assert shame.count() == 2
        assert len(parsed) == 1


def test_empty_hall():
    with tempfile.TemporaryDirectory() as tmpdir:
        shame = HallOfShame(Path(tmpdir) / "nested")
        assert shame.list_entries() == []
        assert shame.count() == 0
