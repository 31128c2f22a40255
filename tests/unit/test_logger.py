"""Test structured logging setup and request-id tagging."""

import json
import logging

import pytest
import structlog

from journal_analytics.observability import get_logger, new_request_id, setup_logging


def _json_lines(text):
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.fixture(autouse=True)
def fresh_context():
    yield
    structlog.contextvars.clear_contextvars()


class TestRequestId:
    def test_new_request_id_is_bound(self):
        rid = new_request_id()
        assert len(rid) == 12
        assert structlog.contextvars.get_contextvars() == {"request_id": rid}

    def test_new_run_clears_previous_context(self):
        new_request_id()
        structlog.contextvars.bind_contextvars(section="overview")
        rid = new_request_id()
        assert structlog.contextvars.get_contextvars() == {"request_id": rid}

    def test_new_ids_differ(self):
        assert new_request_id() != new_request_id()


class TestSetupLogging:
    def test_module_logs_carry_request_id(self, capsys):
        setup_logging(level="INFO", format="json")
        rid = new_request_id()
        logging.getLogger("journal_analytics.storage.loader").info("Loaded %d trades from %s", 3, "t.json")

        (entry,) = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "Loaded 3 trades from t.json"
        assert entry["request_id"] == rid
        assert entry["level"] == "info"
        assert entry["logger"] == "journal_analytics.storage.loader"
        assert "timestamp" in entry

    def test_structlog_logger_renders_fields(self, capsys):
        setup_logging(level="INFO", format="json")
        rid = new_request_id()
        get_logger("journal_analytics.cli").info("trades_selected", count=3, strategy="Breakout")

        (entry,) = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "trades_selected"
        assert entry["count"] == 3
        assert entry["strategy"] == "Breakout"
        assert entry["request_id"] == rid

    def test_level_filters(self, capsys):
        setup_logging(level="WARNING", format="json")
        logging.getLogger("journal_analytics.analytics.report").info("Report built")
        get_logger("journal_analytics.cli").debug("trades_selected")
        assert capsys.readouterr().err == ""

    def test_console_format(self, capsys):
        setup_logging(level="INFO", format="console")
        get_logger("journal_analytics.cli").info("trades_selected", count=3)
        err = capsys.readouterr().err
        assert "trades_selected" in err
        with pytest.raises(json.JSONDecodeError):
            json.loads(err)

    def test_repeated_setup_keeps_one_handler(self, capsys):
        setup_logging(level="INFO", format="json")
        setup_logging(level="INFO", format="json")
        logging.getLogger("journal_analytics.test").info("once")
        assert len(_json_lines(capsys.readouterr().err)) == 1

    def test_report_json_stays_off_stderr(self, capsys):
        setup_logging(level="INFO", format="json")
        logging.getLogger("journal_analytics.test").info("to stderr")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err
