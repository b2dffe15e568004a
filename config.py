"""Runtime configuration for the garage and its web front end."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Mapping, Optional

from exceptions import GarageConfigError

_ENV_PREFIX = "GARAGE_"


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_log_level(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise GarageConfigError(f"{_ENV_PREFIX}LOG_LEVEL is not a logging level: {value!r}")
    return level


def _env_int(environ: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise GarageConfigError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise GarageConfigError(f"{_ENV_PREFIX}{name} must be at least {minimum}, got {value}")
    return value


@dataclasses.dataclass(frozen=True)
class GarageConfig:
    """Garage configuration.

    Parameters
    ----------
    levels : int
        Number of parking levels. Must be positive.
    lots_per_level : int
        Number of lots on every level. Must not be negative.
    log_level : str
        Name of the logging level used by the web app (e.g. ``"DEBUG"``).
    debug : bool
        Run the Flask development server in debug mode.
    host : str
        Address the development server binds to.
    port : int
        Port the development server listens on.
    """

    levels: int = 2
    lots_per_level: int = 4
    log_level: str = "INFO"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GarageConfig:
        """Build a config from ``GARAGE_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            levels=_env_int(env, "LEVELS", defaults.levels, minimum=1),
            lots_per_level=_env_int(env, "LOTS_PER_LEVEL", defaults.lots_per_level),
            log_level=_env_log_level(env.get(_ENV_PREFIX + "LOG_LEVEL"), defaults.log_level),
            debug=_env_bool(env.get(_ENV_PREFIX + "DEBUG"), defaults.debug),
            host=env.get(_ENV_PREFIX + "HOST") or defaults.host,
            port=_env_int(env, "PORT", defaults.port),
        )
