"""Progress reporting for generation runs.

Every pipeline stage reports through a ``report(fmt, *args)`` callable. By
default that callable is the ``info`` method of a stage logger named
``tfdocgen.<stage>``, so the console shows which stage a message came from.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

_LOGGER_NAME = "tfdocgen"

Report = Callable[..., None]


def get_logger(stage: str | None = None) -> logging.Logger:
    full_name = f"{_LOGGER_NAME}.{stage}" if stage else _LOGGER_NAME
    return logging.getLogger(full_name)


def progress_reporter(stage: str) -> Report:
    """Return the default report sink for ``stage``."""
    return get_logger(stage).info


class ProgressFormatter(logging.Formatter):
    """Formats records as ``[tfdocgen] stage: message``.

    Progress (INFO) lines carry no level name. Anything else is prefixed with
    it so warnings about cleanup stand out from step messages.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        stage = _stage_of(record.name)
        if stage:
            message = f"{stage}: {message}"
        if record.levelno != logging.INFO:
            message = f"{record.levelname} {message}"
        text = f"[{_LOGGER_NAME}] {message}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


def _stage_of(logger_name: str) -> str:
    prefix = f"{_LOGGER_NAME}."
    return logger_name[len(prefix):] if logger_name.startswith(prefix) else ""


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send stage progress to stderr, and to ``log_file`` with timestamps.

    ``verbose`` lowers the threshold to DEBUG.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(ProgressFormatter())
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["ProgressFormatter", "Report", "configure_logging", "get_logger", "progress_reporter"]
