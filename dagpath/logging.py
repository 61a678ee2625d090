"""Package-wide logging for dagpath.

Every module logs through ``get_logger(__name__)``; records flow to a single
``dagpath`` root logger with one handler. The engines only emit debug
summaries and warnings, so the default INFO level keeps library use quiet
while the CLI maps ``--verbose``/``--quiet`` onto the root level.
"""

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER_NAME = "dagpath"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def _root() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single handler of the ``dagpath`` root logger.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Root level (default: INFO).
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler, a stdout StreamHandler when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root = _root()
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    # pytest's caplog listens on the interpreter root
    root.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, deferring its level to ``dagpath``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``dagpath`` root logger and its handlers."""
    setup_root_logger()
    root = _root()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-stage engine summaries."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply the CLI verbosity flags to the root logger and return the level."""
    level = level_from_flags(verbose, quiet)
    set_global_log_level(level)
    return level


def log_counters(logger: logging.Logger, stage: str, counters: Any) -> None:
    """Log the work counters collected by ``stage`` at debug level.

    Args:
        logger: Destination logger.
        stage: Label for the record, e.g. ``"analysis"``.
        counters: An ``AlgorithmCounters`` instance or None.
    """
    if counters is None or not logger.isEnabledFor(logging.DEBUG):
        return
    summary = ", ".join(f"{k}={v}" for k, v in counters.to_dict().items())
    logger.debug("%s counters: %s", stage, summary)


def reset_logging() -> None:
    """Drop the root handler so the next setup starts fresh (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root = _root()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
