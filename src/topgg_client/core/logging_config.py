"""Logging setup for topgg_client.

The library only creates named loggers (`topgg_client.*`) and never adds
handlers on import. Applications that want output call `setup_logging()`.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable

PACKAGE_LOGGER = "topgg_client"

_HANDLER_NAME = "topgg_client.stdout"


def _configure_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: int | str = logging.INFO, extra_loggers: Iterable[str] | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Format:
      [2025-01-01 10:00:00] [INFO] [topgg_client.client:request:42] message

    Safe to call more than once: the previous handler is replaced. The
    package logger stops propagating to root, so an application that also
    configures root handlers does not print each record twice.
    """

    if isinstance(level, str):
        level = level.upper()

    formatter = logging.Formatter(
        fmt="[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for h in list(logger.handlers):
        if h.get_name() == _HANDLER_NAME:
            logger.removeHandler(h)
    logger.addHandler(_configure_handler(formatter))
    logger.propagate = False

    for name in [f"{PACKAGE_LOGGER}.client", *(extra_loggers or [])]:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.propagate = True

    return logger


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
