"""
Unit tests for safe_execute and log_error.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

import logging

from leadbuilder.agents.error_handler import log_error, safe_execute


def test_returns_function_result():
    assert safe_execute(lambda a, b=0: a + b, args=(2,), kwargs={"b": 3}) == 5


def test_returns_fallback_on_error(caplog):
    def boom():
        raise ValueError("bad input")

    with caplog.at_level(logging.WARNING, logger="leadbuilder.error_handler"):
        assert safe_execute(boom, phase="copy", action="email", fallback="fb") == "fb"
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.phase == "copy"
    assert record.action == "email"
    assert "ValueError" in record.getMessage()


def test_severity_levels(caplog):
    with caplog.at_level(logging.DEBUG, logger="leadbuilder.error_handler"):
        log_error("api", error_message="a", severity="error")
        log_error("api", error_message="b", severity="critical")
    levels = [r.levelno for r in caplog.records[-2:]]
    assert levels == [logging.ERROR, logging.CRITICAL]
