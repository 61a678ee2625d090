"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from dagpath.algorithms.types import AlgorithmCounters
from dagpath.logging import (
    configure_cli_logging,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    level_from_flags,
    log_counters,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    """Info is emitted by default; debug only after enabling it."""
    disable_debug_logging()
    logger = get_logger("dagpath.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)
        disable_debug_logging()


def test_child_loggers_inherit_level():
    logger1 = get_logger("dagpath.algorithms.scc")
    logger2 = get_logger("dagpath.algorithms.paths")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    try:
        assert logging.getLogger("dagpath").level == logging.WARNING
        assert logger1.getEffectiveLevel() == logging.WARNING
        assert logger2.getEffectiveLevel() == logging.WARNING
    finally:
        set_global_log_level(logging.INFO)


def test_single_root_handler():
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger("dagpath").handlers) == 1


def test_reset_and_custom_handler():
    capture = StringIO()
    reset_logging()
    try:
        setup_root_logger(
            level=logging.DEBUG,
            format_string="%(levelname)s:%(message)s",
            handler=logging.StreamHandler(capture),
        )
        get_logger("dagpath.custom").debug("hello")
        assert capture.getvalue() == "DEBUG:hello\n"
    finally:
        reset_logging()
        setup_root_logger()


def test_engine_debug_records(chain, caplog):
    from dagpath.algorithms.scc import find_components

    caplog.set_level(logging.DEBUG, logger="dagpath.algorithms.scc")
    find_components(chain)
    assert any(
        r.name == "dagpath.algorithms.scc" and "3 components" in r.getMessage()
        for r in caplog.records
    )


@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_from_flags(verbose, quiet, expected):
    assert level_from_flags(verbose, quiet) == expected


def test_configure_cli_logging_sets_root_level():
    try:
        assert configure_cli_logging(quiet=True) == logging.WARNING
        assert logging.getLogger("dagpath").level == logging.WARNING
    finally:
        disable_debug_logging()


def test_log_counters_only_at_debug(caplog):
    logger = get_logger("dagpath.test.counters")
    counters = AlgorithmCounters(vertices_visited=4, edges_relaxed=3)

    caplog.set_level(logging.INFO, logger="dagpath.test.counters")
    log_counters(logger, "analysis", counters)
    assert not caplog.records

    caplog.set_level(logging.DEBUG, logger="dagpath.test.counters")
    log_counters(logger, "analysis", counters)
    log_counters(logger, "analysis", None)
    assert len(caplog.records) == 1
    assert "analysis counters: vertices_visited=4, edges_relaxed=3" in caplog.text


def test_analysis_logs_counters(chain, caplog):
    from dagpath.analysis import analyze

    caplog.set_level(logging.DEBUG, logger="dagpath.analysis")
    analyze(chain, counters=AlgorithmCounters())
    assert "analysis counters: vertices_visited=9" in caplog.text
