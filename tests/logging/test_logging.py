"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from routegraph.algorithms.dfs import dfs
from routegraph.graph.directed_graph import DirectedGraph
from routegraph.graph.elements import Edge, Vertex
from routegraph.logging import (
    LOG_LEVEL_ENV,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test(monkeypatch):
    """Reset logging state before and after each test to avoid cross-test bleed."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("routegraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.handlers.clear()


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("routegraph.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("routegraph.module2").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("routegraph")
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(
        level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(capture)
    )

    get_logger("routegraph.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:routegraph.test.format" in out
    assert "MSG:hello" in out


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger("routegraph").level == logging.DEBUG


def test_invalid_environment_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger("routegraph").level == logging.INFO


def test_searches_log_at_debug(caplog):
    g = DirectedGraph()
    a, b = Vertex("A"), Vertex("B")
    g.add_or_get_edge(Edge(a, b))

    caplog.set_level(logging.DEBUG, logger="routegraph")
    dfs(g, "A", "B")
    dfs(g, "B", "A")
    messages = [
        r.getMessage()
        for r in caplog.records
        if r.name == "routegraph.algorithms.dfs"
    ]
    assert any("1 hops" in m for m in messages)
    assert any("no route" in m for m in messages)


def test_prune_logs_removed_count_at_debug(caplog):
    g = DirectedGraph()
    g.add_vertices(Vertex("A"), Vertex("B"))

    caplog.set_level(logging.DEBUG, logger="routegraph")
    assert g.prune_unconnected() == 2
    assert any(
        r.name == "routegraph.graph.directed_graph"
        and r.levelno == logging.DEBUG
        and "Pruned 2" in r.getMessage()
        for r in caplog.records
    )
