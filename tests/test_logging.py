"""Tests for logging utilities."""

import logging
from io import StringIO

from relgraph import Pathway, Relation
from relgraph.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "relgraph.test_module"


def test_get_logger_module_name_kept():
    assert get_logger("relgraph.core").name == "relgraph.core"
    assert get_logger().name == "relgraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    assert get_logger("test_module").propagate is False


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")
    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        set_log_level("debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_stream():
    """Test configure_logging routes messages to the given stream."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        get_logger("test_module").debug("Debug message")
        assert "[DEBUG] relgraph.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_custom_format():
    stream = StringIO()
    configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
    try:
        get_logger("test_module").info("hello")
        assert stream.getvalue().strip() == "INFO|hello"
    finally:
        configure_logging(level=logging.WARNING)


def test_negative_cycle_warning():
    """Test that Bellman-Ford logs a warning on a negative cycle."""
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    try:
        g = Pathway([Relation("a", "b", 1), Relation("b", "a", -2)])
        assert g.bellman_ford("a") is None
        assert "Negative cycle detected" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
