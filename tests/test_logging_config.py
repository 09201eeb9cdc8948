"""JSON logging configuration tests."""

import json
import logging

import pytest

from src.logging_config import SERVICE_NAME, setup_logging


@pytest.fixture
def restore_loggers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    client_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, client_level in client_levels.items():
        logging.getLogger(name).setLevel(client_level)


def test_setup_logging_emits_json(capsys, restore_loggers):
    setup_logging("info")
    logging.getLogger("src.test").info("de score completed", extra={"total_score": 97})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["level"] == "INFO"
    assert record["logger"] == "src.test"
    assert record["message"] == "de score completed"
    assert record["service"] == SERVICE_NAME
    assert record["total_score"] == 97
    assert "timestamp" in record


def test_setup_logging_unknown_level_defaults_to_info(restore_loggers):
    setup_logging("nonsense")
    assert logging.getLogger().level == logging.INFO


def test_http_client_logs_follow_debug_level(restore_loggers):
    setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG
    assert logging.getLogger("httpcore").level == logging.DEBUG
