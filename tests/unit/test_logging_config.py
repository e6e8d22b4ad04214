"""Tests for the logging configuration."""

import logging

import pytest

from jira_mcp.logging_config import (
    ContextFilter,
    context_string,
    log_operation,
    mask_sensitive,
    setup_logger,
)


@pytest.fixture
def logger_name(request):
    name = f"jira-mcp-test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logger_writes_to_stderr(logger_name, capsys):
    logger = setup_logger(logger_name, level="INFO")
    logger.info("hello from the logger")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello from the logger" in captured.err
    assert "[no-context]" in captured.err


def test_setup_logger_is_idempotent(logger_name):
    setup_logger(logger_name)
    logger = setup_logger(logger_name)
    assert len(logger.handlers) == 1


def test_setup_logger_file_output(logger_name, tmp_path):
    logger = setup_logger(logger_name, level="DEBUG", log_to_file=True, log_dir=str(tmp_path))
    logger.debug("to the file")
    for handler in logger.handlers:
        handler.flush()

    assert "to the file" in (tmp_path / f"{logger_name}.log").read_text()


def test_log_operation_sets_and_restores_context():
    logger = logging.getLogger("jira-mcp-test.operation")
    assert context_string() == "no-context"

    with log_operation(logger, "search", trace_id="abc123"):
        assert "operation=search" in context_string()
        assert "trace_id=abc123" in context_string()

    assert context_string() == "no-context"


def test_context_filter_adds_context():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    with log_operation(logging.getLogger("jira-mcp-test.filter"), "op", trace_id="t1"):
        assert ContextFilter().filter(record) is True
    assert record.context == "operation=op,trace_id=t1"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "Not Provided"),
        ("", "Not Provided"),
        ("short", "*****"),
        ("abcdefghijkl", "********ijkl"),
    ],
)
def test_mask_sensitive(value, expected):
    assert mask_sensitive(value) == expected
