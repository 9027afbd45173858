"""Shop parameters and process-wide defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from barbershop.errors import InvalidConfiguration
from barbershop.logger import parse_level


@dataclass(frozen=True)
class ShopConfig:
    num_barbers: int
    num_chairs: int
    haircut_time_ms: int


def validate_shop_config(config: ShopConfig) -> None:
    if config.num_barbers < 1:
        raise InvalidConfiguration("num_barbers must be >= 1")
    if config.num_chairs < 0:
        raise InvalidConfiguration("num_chairs must be >= 0")
    if config.haircut_time_ms < 0:
        raise InvalidConfiguration("haircut_time_ms must be >= 0")


@dataclass(frozen=True)
class Settings:
    num_barbers: int = 1
    num_chairs: int = 5
    haircut_time_ms: int = 1600
    arrival_speed: int = 2
    log_level: str = "INFO"

    def shop_config(self) -> ShopConfig:
        return ShopConfig(
            num_barbers=self.num_barbers,
            num_chairs=self.num_chairs,
            haircut_time_ms=self.haircut_time_ms,
        )


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from None


def _log_level_from_env(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        parse_level(raw)
    except InvalidConfiguration:
        raise InvalidConfiguration(f"{name} is not a logging level, got {raw!r}") from None
    return raw.strip().upper()


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``BARBERSHOP_*`` environment variables."""
    if env is None:
        env = os.environ
    return Settings(
        num_barbers=_int_from_env(env, "BARBERSHOP_BARBERS", Settings.num_barbers),
        num_chairs=_int_from_env(env, "BARBERSHOP_CHAIRS", Settings.num_chairs),
        haircut_time_ms=_int_from_env(env, "BARBERSHOP_HAIRCUT_MS", Settings.haircut_time_ms),
        arrival_speed=_int_from_env(env, "BARBERSHOP_ARRIVAL_SPEED", Settings.arrival_speed),
        log_level=_log_level_from_env(env, "BARBERSHOP_LOG_LEVEL", Settings.log_level),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
