"""Tests for logging configuration helpers."""

import logging
from unittest.mock import MagicMock

import structlog

from toolchat.utils.logger import resolve_level, select_renderer, tool_result_log


def test_resolve_level_accepts_names_and_numbers():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("30") == 30


def test_resolve_level_falls_back_to_default():
    assert resolve_level(None) == logging.INFO
    assert resolve_level("") == logging.INFO
    assert resolve_level("chatty", default=logging.ERROR) == logging.ERROR


def test_select_renderer():
    json_renderer = select_renderer("json", colors=True)
    console_renderer = select_renderer("pretty", colors=False)
    assert isinstance(json_renderer, structlog.processors.JSONRenderer)
    assert isinstance(console_renderer, structlog.dev.ConsoleRenderer)


def test_tool_result_log_reports_size_and_preview():
    log = MagicMock()
    tool_result_log(log, "read_file", "é" + "x" * 300, call_id="c1")

    log.info.assert_called_once()
    _, kwargs = log.info.call_args
    assert kwargs["tool"] == "read_file"
    assert kwargs["size_bytes"] == 302
    assert len(kwargs["preview"]) == 200
    assert kwargs["call_id"] == "c1"
