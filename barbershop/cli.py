"""Command line entry point.

Shop parameters missing from the command line are asked for interactively;
an empty answer keeps the default from the environment settings.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from barbershop.config import Settings, ShopConfig, get_settings
from barbershop.dispatcher import ARRIVAL_SPEEDS, Dispatcher
from barbershop.errors import InvalidConfiguration
from barbershop.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barbershop",
        description="Sleeping barber simulation with real threads.",
    )
    parser.add_argument("--barbers", type=int, help="number of barbers (>= 1)")
    parser.add_argument("--chairs", type=int, help="number of waiting chairs (>= 0)")
    parser.add_argument("--haircut-ms", type=int, help="haircut time in milliseconds (>= 0)")
    parser.add_argument(
        "--speed",
        type=int,
        choices=sorted(ARRIVAL_SPEEDS),
        help="client arrival speed, 1 (slow) to 5 (fast)",
    )
    parser.add_argument("--duration", type=float, help="seconds to keep the shop open")
    parser.add_argument("--ui", action="store_true", help="show the curses animation")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser


def prompt_int(prompt: str, default: int, input_fn: Callable[[str], str] = input) -> int:
    while True:
        answer = input_fn(f"{prompt} [{default}]: ").strip()
        if not answer:
            return default
        try:
            return int(answer)
        except ValueError:
            print(f"Please enter a whole number, not {answer!r}.")



def resolve_config(
    args: argparse.Namespace,
    settings: Settings,
    input_fn: Callable[[str], str] = input,
) -> ShopConfig:
    barbers = args.barbers
    if barbers is None:
        barbers = prompt_int("Number of barbers", settings.num_barbers, input_fn)
    chairs = args.chairs
    if chairs is None:
        chairs = prompt_int("Number of chairs", settings.num_chairs, input_fn)
    haircut_ms = args.haircut_ms
    if haircut_ms is None:
        haircut_ms = prompt_int("Haircut time (ms)", settings.haircut_time_ms, input_fn)
    return ShopConfig(num_barbers=barbers, num_chairs=chairs, haircut_time_ms=haircut_ms)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        # Anything below WARNING would scribble over the curses screen
        default_level = "WARNING" if args.ui else settings.log_level
        configure_logging(args.log_level or default_level)
        config = resolve_config(args, settings)
        dispatcher = Dispatcher(
            config,
            arrival_speed=args.speed if args.speed is not None else settings.arrival_speed,
        )
    except InvalidConfiguration as exc:
        print(f"barbershop: {exc}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        return 1

    if args.ui:
        from barbershop.ui import run_curses

        run_curses(dispatcher)
    else:
        dispatcher.run_for(args.duration)
    return 0
