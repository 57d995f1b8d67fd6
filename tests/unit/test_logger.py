"""
Name: Structured Logger Tests

Responsibilities:
  - JSON output with request context
  - Secrets never reach the log line
"""

import json
import logging

import pytest

from user_api.context import clear_context, request_id_var
from user_api.logger import JSONFormatter


pytestmark = pytest.mark.unit


def _format(**extra) -> dict:
    record = logging.LogRecord(
        "user-api", logging.INFO, __file__, 1, "hello", None, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(JSONFormatter().format(record))


def test_includes_message_and_extras():
    line = _format(user_id=7)

    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["user_id"] == 7


def test_drops_sensitive_keys():
    line = _format(password="secret123", password_hash="$argon2id$...", token="abc")

    assert "password" not in line
    assert "password_hash" not in line
    assert "token" not in line


def test_includes_request_context():
    request_id_var.set("req-42")
    try:
        line = _format()
    finally:
        clear_context()

    assert line["request_id"] == "req-42"
