import io
import json
import logging
import re

import pytest
import structlog

from messagely.core.logging import configure_logging


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    configure_logging()


def lines(stream):
    return [line for line in stream.getvalue().splitlines() if line.strip()]


def test_json_logs_are_rendered_once(log_stream):
    configure_logging(json_logs=True, stream=log_stream)

    structlog.get_logger("messagely.tests.json").info("User registered", username="alice")

    [line] = lines(log_stream)
    payload = json.loads(line)
    assert payload["event"] == "User registered"
    assert payload["username"] == "alice"
    assert payload["level"] == "info"
    assert payload["logger"] == "messagely.tests.json"
    assert "timestamp" in payload


def test_stdlib_records_share_the_json_format(log_stream):
    configure_logging(json_logs=True, stream=log_stream)

    logging.getLogger("sqlalchemy.tests").warning("pool %s exhausted", "main")

    [line] = lines(log_stream)
    payload = json.loads(line)
    assert payload["event"] == "pool main exhausted"
    assert payload["level"] == "warning"


def test_json_logs_include_exception(log_stream):
    configure_logging(json_logs=True, stream=log_stream)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        structlog.get_logger("messagely.tests.exc").exception("Request failed")

    payload = json.loads(lines(log_stream)[0])
    assert "RuntimeError: boom" in payload["exception"]


def test_console_logs_have_one_timestamp(log_stream):
    configure_logging(json_logs=False, stream=log_stream)

    structlog.get_logger("messagely.tests.console").info("User registered", username="alice")

    [line] = lines(log_stream)
    assert "User registered" in line
    assert len(re.findall(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", line)) == 1


def test_reconfiguring_does_not_duplicate_output(log_stream):
    configure_logging(json_logs=True, stream=log_stream)
    configure_logging(json_logs=True, stream=log_stream)

    structlog.get_logger("messagely.tests.twice").info("once")

    assert len(lines(log_stream)) == 1
