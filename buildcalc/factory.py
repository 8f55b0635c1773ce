"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from buildcalc.data.prices import DEFAULT_PRICE_TABLE, PriceTable
from buildcalc.engine import EstimationEngine

if TYPE_CHECKING:
    from buildcalc.config import Settings

logger = logging.getLogger(__name__)


def create_default_engine() -> EstimationEngine:
    """Create an EstimationEngine wired up with the default price table.

    This is the recommended way to create an engine for typical usage.

    Example::

        from buildcalc import create_default_engine, ProjectSpec

        engine = create_default_engine()
        result = engine.estimate(project, MaterialSelection(), RateConfig())
    """
    return EstimationEngine(DEFAULT_PRICE_TABLE)


def create_engine_from_settings(settings: Settings) -> EstimationEngine:
    """Create an EstimationEngine using the price table named in ``settings``.

    Raises:
        PriceTableError: If the configured price table file is unusable.
    """
    if settings.price_table_path is None:
        return create_default_engine()
    logger.info("Using price table %s", settings.price_table_path)
    return EstimationEngine(PriceTable.from_json_file(settings.price_table_path))
