from __future__ import annotations

import io
import logging

import pytest

from barbershop.errors import InvalidConfiguration
from barbershop.logger import PACKAGE_LOGGER, configure_logging, get_logger, parse_level


def test_parse_level_accepts_names_in_any_case() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING


def test_parse_level_rejects_unknown_names() -> None:
    with pytest.raises(InvalidConfiguration):
        parse_level("loud")


def test_reconfiguring_replaces_the_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    configure_logging("INFO", stream=first)
    shop_logger = configure_logging("WARNING", stream=second)

    get_logger("barbershop.room").info("quiet")
    get_logger("barbershop.room").warning("Barber 0 finished work.")

    assert shop_logger.name == PACKAGE_LOGGER
    assert len(shop_logger.handlers) == 1
    assert first.getvalue() == ""
    line = second.getvalue().strip()
    assert line.endswith("| WARNING | MainThread | Barber 0 finished work.")
    assert "quiet" not in second.getvalue()


def test_bad_level_leaves_existing_setup_alone() -> None:
    stream = io.StringIO()
    shop_logger = configure_logging("INFO", stream=stream)
    with pytest.raises(InvalidConfiguration):
        configure_logging("loud")
    assert shop_logger.handlers[0].stream is stream
