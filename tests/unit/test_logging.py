"""
Tests for structured logging helpers.
"""

import json
import logging

from app.shared.utils.logging import (
    SERVICE_NAME,
    JSONFormatter,
    get_logger,
    log_context,
    request_id_var,
)


def make_record(message: str = "hello", **attributes) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tests.logging",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in attributes.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_context():
    formatter = JSONFormatter("%(message)s")

    with log_context(request_id="req-123"):
        payload = json.loads(formatter.format(make_record()))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["service"] == SERVICE_NAME
    assert payload["request_id"] == "req-123"


def test_json_formatter_nests_extra_fields():
    formatter = JSONFormatter("%(message)s")

    payload = json.loads(formatter.format(make_record(extra_fields={"movie_ids": [1, 2]})))

    assert payload["extra"] == {"movie_ids": [1, 2]}
    assert "extra_fields" not in payload
    assert "request_id" not in payload


def test_log_context_resets_after_exit():
    with log_context() as context:
        assert request_id_var.get() == context["request_id"]

    assert request_id_var.get() == ""


def test_get_logger_is_cached():
    assert get_logger("tests.cached") is get_logger("tests.cached")


def test_business_event_fields(caplog):
    logger = get_logger("tests.business")

    with caplog.at_level(logging.INFO, logger="tests.business"):
        logger.log_business_event(
            "rental_created",
            "Rental 7 created",
            entity_id=7,
            entity_type="rental",
            extra={"user_id": 1},
        )

    record = caplog.records[-1]
    assert record.getMessage() == "Rental 7 created"
    assert record.extra_fields == {
        "event_type": "business_event",
        "business_event_type": "rental_created",
        "description": "Rental 7 created",
        "user_id": 1,
        "entity_id": 7,
        "entity_type": "rental",
    }
