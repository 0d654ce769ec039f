"""
Centralized configuration for facetpivot.

Settings are read from environment variables so dashboards can change the
defaults used by widgets without code changes. Transform functions never read
settings themselves; they take explicit keyword arguments.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_AXIS_LABEL = "Y-Axis"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_ZERO_TOTAL_POLICIES = ("zero", "nan", "skip", "raise")


def _env(name: str, default: str) -> str:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    val = _env(name, default).lower()
    return val if val in choices else default


def _env_log_level(name: str, default: str) -> str:
    val = _env(name, default).upper()
    return val if isinstance(logging.getLevelName(val), int) else default


@dataclass(frozen=True)
class Settings:
    """Widget defaults loaded from environment variables."""

    default_axis_label: str = DEFAULT_AXIS_LABEL
    zero_total_policy: str = "zero"
    log_level: str = "WARNING"

    @staticmethod
    def load() -> "Settings":
        return Settings(
            default_axis_label=_env("FACETPIVOT_DEFAULT_AXIS_LABEL", DEFAULT_AXIS_LABEL),
            zero_total_policy=_env_choice("FACETPIVOT_ZERO_TOTAL_POLICY", _ZERO_TOTAL_POLICIES, "zero"),
            log_level=_env_log_level("FACETPIVOT_LOG_LEVEL", "WARNING"),
        )


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a console handler to the ``facetpivot`` logger.

    Calling this more than once only updates the level; handlers are not
    duplicated.

    Args:
        level: Logging level name or number.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("facetpivot")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger
