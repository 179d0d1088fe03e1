"""Tests for the logging helpers."""

import io
import logging

import pytest

from tasmee import _logging
from tasmee.core.match import match_text
from tasmee.exceptions import ConfigurationError


@pytest.fixture
def stream():
    buffer = io.StringIO()
    yield buffer
    _logging.disable_logging()
    logging.getLogger("tasmee").setLevel(logging.NOTSET)


def test_configure_logging_replaces_handlers(stream) -> None:
    _logging.configure_logging(level=logging.INFO, stream=stream)
    logger = _logging.configure_logging(level=logging.INFO, stream=stream)
    assert logger.name == "tasmee"
    assert len(logger.handlers) == 1


def test_level_by_name(stream) -> None:
    logger = _logging.configure_logging(level="debug", stream=stream)
    assert logger.level == logging.DEBUG


def test_match_logged_at_debug(stream) -> None:
    _logging.configure_logging(level=logging.DEBUG, stream=stream, format_string="%(message)s")
    match_text("بسم الله", "بسم")
    output = stream.getvalue()
    assert "against 2 reference words" in output
    assert "accuracy=50%" in output


def test_match_silent_at_info(stream) -> None:
    _logging.configure_logging(level=logging.INFO, stream=stream)
    match_text("بسم الله", "بسم")
    assert stream.getvalue() == ""


def test_log_warning_context(stream) -> None:
    _logging.configure_logging(level=logging.INFO, stream=stream, format_string="%(message)s")
    _logging.log_warning("Empty reference", surah=1, ayah=2)
    assert stream.getvalue().strip() == "Empty reference (surah=1, ayah=2)"


def test_unknown_level_name_rejected(stream) -> None:
    before = list(logging.getLogger("tasmee").handlers)
    with pytest.raises(ConfigurationError) as exc_info:
        _logging.configure_logging(level="verbose", stream=stream)
    assert exc_info.value.setting_name == "log_level"
    assert logging.getLogger("tasmee").handlers == before
