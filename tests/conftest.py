"""Shared fixtures for the BuildCalc test suite."""

from __future__ import annotations

import pytest

from buildcalc.data.prices import DEFAULT_PRICE_TABLE
from buildcalc.engine import EstimationEngine
from buildcalc.models.enums import BuildingType
from buildcalc.models.project import MaterialSelection, ProjectSpec, RateConfig


@pytest.fixture()
def engine() -> EstimationEngine:
    """Engine wired to the default price table."""
    return EstimationEngine(DEFAULT_PRICE_TABLE)


@pytest.fixture()
def garage() -> ProjectSpec:
    """60 x 40 ft single-storey residential building, 10 ft walls, 4 in slab."""
    return ProjectSpec(
        name="Garage",
        building_type=BuildingType.RESIDENTIAL,
        length_ft=60,
        width_ft=40,
        wall_height_ft=10,
        floors=1,
        slab_thickness_in=4,
    )


@pytest.fixture()
def concrete_only() -> MaterialSelection:
    return MaterialSelection()


@pytest.fixture()
def default_rates() -> RateConfig:
    """10% labor, 5% contingency."""
    return RateConfig(labor_rate_percent=10, contingency_rate_percent=5)
