"""
Logging configuration for Lineage Insight.

Handlers are attached to the ``lineage_insight`` logger only, so calling
``setup_logging`` again (one CLI invocation after another in the same
process) replaces them instead of stacking duplicates.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import InsightConfig

ROOT_LOGGER = "lineage_insight"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(config: Optional[InsightConfig] = None) -> logging.Logger:
    """
    Configure package logging from ``config.verbosity`` and ``config.log_file``.

    Args:
        config: Loaded configuration; defaults apply when None

    Returns:
        Configured lineage_insight logger
    """
    config = config or InsightConfig()
    level = LEVELS[config.verbosity]
    verbose = config.verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=True,
            show_time=True,
            show_path=verbose,
        )
    ]

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'lineage_insight.workspace')
              If None, returns the root lineage_insight logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
