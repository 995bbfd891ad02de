"""Tests for high score persistence."""

from __future__ import annotations

import logging

from neon_grid_snake.engine import SimulationEngine
from neon_grid_snake.storage import FileHighScoreStore, MemoryHighScoreStore


class TestFileHighScoreStore:
    def test_missing_file_reads_as_absent(self, tmp_path):
        assert FileHighScoreStore(tmp_path / "nope.txt").read() is None

    def test_write_then_read(self, tmp_path):
        store = FileHighScoreStore(tmp_path / "highscore.txt")
        store.write(120)
        assert store.read() == 120
        assert (tmp_path / "highscore.txt").read_text(encoding="utf-8") == "120"

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "highscore.txt"
        FileHighScoreStore(path).write(40)
        assert path.exists()

    def test_corrupt_file_reads_as_absent(self, tmp_path, caplog):
        path = tmp_path / "highscore.txt"
        path.write_text("not a number", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert FileHighScoreStore(path).read() is None
        assert "corrupt" in caplog.text

    def test_blank_and_negative_values(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("  \n", encoding="utf-8")
        assert FileHighScoreStore(path).read() == 0
        path.write_text("-30", encoding="utf-8")
        assert FileHighScoreStore(path).read() == 0

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        store = FileHighScoreStore(tmp_path)  # a directory, not a file
        with caplog.at_level(logging.WARNING):
            store.write(10)
        assert "Could not save high score" in caplog.text

    def test_engine_reads_persisted_value(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("250", encoding="utf-8")
        engine = SimulationEngine(FileHighScoreStore(path))
        assert engine.high_score == 250


class TestMemoryHighScoreStore:
    def test_records_writes(self):
        store = MemoryHighScoreStore(initial=5)
        assert store.read() == 5
        store.write(20)
        store.write(30)
        assert store.read() == 30
        assert store.writes == [20, 30]
