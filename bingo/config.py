"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def resolve_random_seed() -> int | None:
    """Resolve the seed for the number pool's random source.

    BINGO_RANDOM_SEED makes every game reproducible. Unset, empty or
    non-integer values fall back to system randomness.
    """

    raw = os.getenv("BINGO_RANDOM_SEED")
    if raw is None or not raw.strip():
        return None

    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    BINGO_RANDOM_SEED: int | None = resolve_random_seed()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
