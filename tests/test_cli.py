from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator

import pytest

from barbershop.cli import build_parser, main, prompt_int, resolve_config
from barbershop.config import Settings, ShopConfig, get_settings


def answers(*values: str):
    it: Iterator[str] = iter(values)
    asked: list[str] = []

    def fake_input(prompt: str) -> str:
        asked.append(prompt)
        return next(it)

    fake_input.asked = asked
    return fake_input


def test_empty_answer_keeps_default() -> None:
    assert prompt_int("Number of chairs", 5, answers("")) == 5


def test_bad_answer_asks_again(capsys) -> None:
    fake = answers("lots", " 4 ")
    assert prompt_int("Number of chairs", 5, fake) == 4
    assert len(fake.asked) == 2
    assert "whole number" in capsys.readouterr().out


def test_only_missing_values_are_prompted() -> None:
    args = build_parser().parse_args(["--barbers", "3"])
    fake = answers("0", "")

    config = resolve_config(args, Settings(), fake)

    assert config == ShopConfig(
        num_barbers=3,
        num_chairs=0,
        haircut_time_ms=Settings.haircut_time_ms,
    )
    assert fake.asked[0].startswith("Number of chairs")
    assert fake.asked[1].startswith("Haircut time (ms)")


def test_invalid_values_exit_with_usage_error(capsys) -> None:
    code = main(["--barbers", "0", "--chairs", "1", "--haircut-ms", "10"])
    assert code == 2
    assert "num_barbers" in capsys.readouterr().err


def test_console_run_for_a_short_while() -> None:
    code = main(
        ["--barbers", "1", "--chairs", "1", "--haircut-ms", "0", "--speed", "5", "--duration", "0.2"]
    )
    assert code == 0


@pytest.fixture
def fresh_settings():
    """Make get_settings re-read the environment, before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.parametrize(
    "name, value",
    [
        ("BARBERSHOP_CHAIRS", "many"),
        ("BARBERSHOP_BARBERS", "two"),
        ("BARBERSHOP_HAIRCUT_MS", "1.5"),
        ("BARBERSHOP_LOG_LEVEL", "loud"),
    ],
)
def test_bad_environment_exits_with_usage_error(monkeypatch, capsys, fresh_settings, name, value) -> None:
    monkeypatch.setenv(name, value)

    code = main(["--barbers", "1", "--chairs", "1", "--haircut-ms", "0", "--duration", "0.05"])

    assert code == 2
    assert name in capsys.readouterr().err


def test_unknown_log_level_flag_exits_with_usage_error(capsys) -> None:
    code = main(["--barbers", "1", "--chairs", "1", "--haircut-ms", "0", "--log-level", "loud"])
    assert code == 2
    assert "loud" in capsys.readouterr().err


def test_module_entry_point_reports_bad_environment() -> None:
    root = Path(__file__).resolve().parents[1]
    env = dict(os.environ, BARBERSHOP_CHAIRS="many")
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root), env.get("PYTHONPATH")]))

    proc = subprocess.run(
        [sys.executable, "-m", "barbershop", "--barbers", "1", "--chairs", "1", "--haircut-ms", "0", "--duration", "0.1"],
        env=env,
        capture_output=True,
        text=True,
        timeout=30,
    )

    assert proc.returncode == 2
    assert "BARBERSHOP_CHAIRS must be an integer" in proc.stderr
    assert "Traceback" not in proc.stderr
