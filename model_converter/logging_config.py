"""Logging configuration for model_converter.

Every module obtains its logger through :func:`get_logger` so that the
whole package shares one hierarchy rooted at ``model_converter``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "model_converter"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the model_converter hierarchy.

    Args:
        name: Module name (usually ``__name__``). Names already inside the
            package hierarchy are used as-is.

    Returns:
        The configured logger instance.
    """
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the package logger with a rich console handler.

    Args:
        verbose: Emit DEBUG messages when True, INFO otherwise.
        log_file: Optional file that receives a plain-text copy of the log.
        console: Rich console used by the handler (stderr if None).

    Returns:
        The package root logger.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate output when the CLI runs more than once per process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
    )
    rich_handler.setLevel(level)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["get_logger", "setup_logging"]
