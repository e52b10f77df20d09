"""Logging for routegraph.

What gets logged:
    - DEBUG: one line per search with its outcome (hops or weight, number of
      vertices visited), and the number of vertices removed by
      ``DirectedGraph.prune_unconnected``.
    - WARNING: edges rejected because an endpoint key is bound to another
      vertex instance, right before ``InvariantViolation`` is raised.

Every module logs through ``get_logger(__name__)``, so all records end up
under the ``routegraph`` logger. That logger gets one stdout handler at
import time. Set ``ROUTEGRAPH_LOG_LEVEL=DEBUG`` to trace searches without
touching code, or call :func:`enable_debug_logging` at runtime.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "routegraph"
LOG_LEVEL_ENV = "ROUTEGRAPH_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure the ``routegraph`` logger once.

    Later calls return immediately until :func:`reset_logging` runs, so the
    import-time call wins unless tests reset first.

    Args:
        level: Logging level. Defaults to ``ROUTEGRAPH_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Where records go. Defaults to a stdout ``StreamHandler``;
            tests pass one writing to a ``StringIO``.
    """
    global _configured

    if _configured:
        return

    if level is None:
        level = _level_from_env(logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog hooks the global root logger
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a routegraph module.

    ``get_logger("routegraph.algorithms.spf")`` and friends carry no handler
    or level of their own; the ``routegraph`` logger decides what is emitted.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the threshold for all routegraph records, handlers included."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Emit the per-search DEBUG lines."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Silence the per-search DEBUG lines again."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler and allow :func:`setup_root_logger` to run again."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
