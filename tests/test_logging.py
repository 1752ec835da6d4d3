"""Tests for the logging helpers."""
import logging

from payrex.core.logging import LOG_FORMAT, ContextFormatter, log_context, resource_name


def make_record(**extra):
    record = logging.LogRecord("payrex.core.http", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_defaults_missing_context():
    line = ContextFormatter(LOG_FORMAT).format(make_record())
    assert "[resource=- request_id=-]" in line
    assert line.endswith("- hello")


def test_formatter_uses_supplied_context():
    line = ContextFormatter(LOG_FORMAT).format(make_record(**log_context("customers", "req_1")))
    assert "[resource=customers request_id=req_1]" in line


def test_log_context_fills_blanks():
    assert log_context() == {"resource": "-", "request_id": "-"}


def test_resource_name():
    assert resource_name("/customers/cus_1") == "customers"
    assert resource_name("/payment_intents") == "payment_intents"
    assert resource_name("") == "-"
