"""Environment-driven settings for the BuildCalc API."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS: tuple[str, ...] = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Attributes:
        price_table_path: JSON price table to use instead of the defaults.
        cors_origins: Origins allowed to call the API from a browser.
        log_level: Level name for the ``buildcalc`` logger.
    """

    price_table_path: Path | None = None
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    When ``environ`` is omitted, a ``.env`` file at the project root is
    loaded into ``os.environ`` first (existing variables win).

    Recognized variables: ``BUILDCALC_PRICE_TABLE``,
    ``BUILDCALC_CORS_ORIGINS`` (comma-separated) and ``BUILDCALC_LOG_LEVEL``.
    """
    if environ is None:
        load_dotenv(_PROJECT_ROOT / ".env")
        environ = os.environ

    price_table = environ.get("BUILDCALC_PRICE_TABLE", "").strip()
    origins_raw = environ.get("BUILDCALC_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    log_level = environ.get("BUILDCALC_LOG_LEVEL", "").strip().upper() or "INFO"

    if logging.getLevelName(log_level) == f"Level {log_level}":
        logger.warning("Unknown BUILDCALC_LOG_LEVEL %r, using INFO", log_level)
        log_level = "INFO"

    return Settings(
        price_table_path=Path(price_table) if price_table else None,
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        log_level=log_level,
    )
