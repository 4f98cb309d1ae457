"""Tests for the injectable log consumers."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from condmatch.logging import FileLogConsumer, LevelLogConsumer, LogLevel


class TestLogLevel:
    def test_maps_to_stdlib_levels(self) -> None:
        assert int(LogLevel.DEBUG) == logging.DEBUG
        assert int(LogLevel.ERROR) == logging.ERROR

    def test_from_string(self) -> None:
        assert LogLevel.from_string("warning") is LogLevel.WARNING
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.from_string("verbose")


class TestLevelLogConsumer:
    def test_prefix_and_fields(self, caplog) -> None:
        consumer = LevelLogConsumer(logging.getLogger("condmatch.test.consumer"))
        with caplog.at_level(logging.DEBUG, logger="condmatch"):
            consumer.log(LogLevel.INFO, "hello", {"b": 2, "a": 1})
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["[condmatch] hello a=1 b=2"]
        assert caplog.records[0].levelno == logging.INFO

    def test_filters_below_level(self, caplog) -> None:
        consumer = LevelLogConsumer(
            logging.getLogger("condmatch.test.consumer"), level=LogLevel.WARNING
        )
        with caplog.at_level(logging.DEBUG, logger="condmatch"):
            consumer.log(LogLevel.INFO, "dropped", {})
            consumer.set_log_level(LogLevel.DEBUG)
            consumer.log(LogLevel.INFO, "kept", {})
        assert consumer.level is LogLevel.DEBUG
        assert [r.getMessage() for r in caplog.records] == ["[condmatch] kept"]


class TestFileLogConsumer:
    def test_writes_lines_and_closes(self, tmp_path: Path) -> None:
        path = tmp_path / "decisions.log"
        with FileLogConsumer(path, level=LogLevel.INFO, name="req-7") as consumer:
            consumer.log(LogLevel.DEBUG, "ignored", {})
            consumer.log(LogLevel.WARNING, "bad version", {"condition": "v"})
            assert not consumer.closed
        assert consumer.closed

        lines = path.read_text().splitlines()
        assert lines == ["[condmatch][WARNING][req-7] bad version condition=v"]

    def test_appends_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "decisions.log"
        for message in ("one", "two"):
            consumer = FileLogConsumer(path)
            consumer.log(LogLevel.ERROR, message, {})
            consumer.close()
        assert path.read_text().splitlines() == [
            "[condmatch][ERROR][] one",
            "[condmatch][ERROR][] two",
        ]

    def test_close_idempotent_and_log_after_close_fails(self, tmp_path: Path) -> None:
        consumer = FileLogConsumer(tmp_path / "x.log")
        consumer.close()
        consumer.close()
        with pytest.raises(ValueError, match="closed"):
            consumer.log(LogLevel.ERROR, "late", {})
