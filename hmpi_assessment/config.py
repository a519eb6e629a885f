"""Configuration utilities for the HMPI assessment core."""
from __future__ import annotations

import logging
import os

LOG_LEVEL = os.environ.get("HMPI_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def read_env_int(name: str, default: int, minimum: int = 0) -> int:
    """Read an integer setting from the environment, rejecting values below ``minimum``."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


DEFAULT_TOP_POLLUTANTS = read_env_int("HMPI_TOP_POLLUTANTS", 2)

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# (category, hpi upper bound, pli upper bound), evaluated in order
QUALITY_THRESHOLDS = (
    ("excellent", 25.0, 1.0),
    ("good", 50.0, 2.0),
    ("moderate", 75.0, 3.0),
    ("poor", 100.0, 5.0),
)
FALLBACK_CATEGORY = "unsuitable"

HIGH_RISK_CATEGORIES = ("poor", "unsuitable")


def configure_logging(level: str | int | None = None) -> None:
    """Attach a basic stream handler to the root logger."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
