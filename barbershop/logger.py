"""Console narration for the shop.

Modules log under the ``barbershop`` logger and never configure anything at
import time. The CLI attaches a single stdout handler before the shop opens.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

from barbershop.errors import InvalidConfiguration


PACKAGE_LOGGER = "barbershop"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(threadName)s | %(message)s"

_handler: Optional[logging.Handler] = None


def parse_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise InvalidConfiguration(f"unknown log level {level!r}")
    return value


def configure_logging(level: str, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Point shop narration at ``stream`` (stdout by default) at ``level``.

    Calling it again swaps the handler instead of stacking a second one,
    so the UI mode can quieten the console after the fact.
    """
    global _handler

    resolved = parse_level(level)
    shop_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        shop_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    shop_logger.addHandler(_handler)
    shop_logger.setLevel(resolved)
    shop_logger.propagate = False
    return shop_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
