"""Tests for lessonbase.core.logging."""

from __future__ import annotations

import json

from lessonbase.core.logging import LogContext, configure_logging, get_logger


def _last_json_line(text: str) -> dict:
    lines = [line for line in text.splitlines() if line.strip()]
    return json.loads(lines[-1])


class TestConfigureLogging:
    def test_json_lines_on_stderr(self, capsys):
        configure_logging(level="INFO", json_format=True, service="lessonbase-test")

        get_logger("lessonbase.tests").info("migration_applied", migration="001.sql")

        captured = capsys.readouterr()
        assert captured.out == ""
        event = _last_json_line(captured.err)
        assert event["event"] == "migration_applied"
        assert event["migration"] == "001.sql"
        assert event["log.level"] == "info"
        assert event["service.name"] == "lessonbase-test"
        assert "@timestamp" in event

    def test_level_filtering(self, capsys):
        configure_logging(level="WARNING", json_format=True)

        log = get_logger("lessonbase.tests")
        log.info("quiet")
        log.warning("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_log_context_binds_and_unbinds(self, capsys):
        configure_logging(level="INFO", json_format=True)
        log = get_logger("lessonbase.tests")

        with LogContext(request_id="req-1"):
            log.info("inside")
        log.info("outside")

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
        inside = next(line for line in lines if line["event"] == "inside")
        outside = next(line for line in lines if line["event"] == "outside")
        assert inside["request_id"] == "req-1"
        assert "request_id" not in outside

    def test_default_level_carries_logger_name(self, capsys):
        configure_logging(json_format=True)

        get_logger("lessonbase.migrations.runner").info("migration_started", migration="002.sql")

        event = _last_json_line(capsys.readouterr().err)
        assert event["event"] == "migration_started"
        assert event["logger"] == "lessonbase.migrations.runner"

    def test_exception_renders_traceback(self, capsys):
        configure_logging(level="INFO", json_format=True)
        log = get_logger("lessonbase.tests")

        try:
            raise RuntimeError("no such table: lessons")
        except RuntimeError:
            log.exception("op_failed", op="get_content_summary")

        event = _last_json_line(capsys.readouterr().err)
        assert event["log.level"] == "error"
        assert "no such table: lessons" in event["exception"]
