"""Tests for runner log formatting."""

from __future__ import annotations

import logging

import pytest

from cargocache.host.log import WorkflowCommandFormatter, build_handler, escape_data


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("cargocache.test", level, __file__, 1, message, None, None)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        pytest.param(logging.DEBUG, "::debug::hello", id="debug"),
        pytest.param(logging.INFO, "hello", id="info"),
        pytest.param(logging.WARNING, "::warning::hello", id="warning"),
        pytest.param(logging.ERROR, "::error::hello", id="error"),
    ],
)
def test_workflow_command_levels(level: int, expected: str) -> None:
    assert WorkflowCommandFormatter("%(message)s").format(_record(level, "hello")) == expected


def test_workflow_command_escapes_multiline_messages() -> None:
    formatted = WorkflowCommandFormatter("%(message)s").format(_record(logging.ERROR, "50% done\nnext"))

    assert formatted == "::error::50%25 done%0Anext"


def test_escape_data_handles_carriage_return() -> None:
    assert escape_data("a\r\nb") == "a%0D%0Ab"


def test_plain_handler_uses_level_prefix() -> None:
    handler = build_handler("plain")

    assert handler.format(_record(logging.WARNING, "careful")) == "WARNING careful"
