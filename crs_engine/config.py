"""
Engine settings.

Values come from the environment (optionally a .env file). The point tables
are not configurable; only the ceiling, the job-offer switch and logging are.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

MAX_POINTS = 1200


@dataclass(frozen=True)
class Settings:
    max_points: int = MAX_POINTS
    award_job_offer_points: bool = True
    log_level: str = "WARNING"


def _bool(v: str | None, default: bool) -> bool:
    if v is None or v.strip() == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "y")


def _int(v: str | None, default: int) -> int:
    if v is None:
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings once per process. Call get_settings.cache_clear() to re-read."""
    load_dotenv()
    return Settings(
        # May lower the ceiling, never raise it above the CRS maximum.
        max_points=min(MAX_POINTS, max(0, _int(os.getenv("CRS_MAX_POINTS"), MAX_POINTS))),
        award_job_offer_points=_bool(os.getenv("CRS_AWARD_JOB_OFFER_POINTS"), True),
        log_level=os.getenv("CRS_LOG_LEVEL", "WARNING").upper(),
    )


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger (for scripts and notebooks)."""
    logger = logging.getLogger("crs_engine")
    logger.setLevel(getattr(logging, (level or get_settings().log_level).upper(), logging.WARNING))
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)
    return logger
