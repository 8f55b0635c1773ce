"""BuildCalc construction cost estimation engine.

Usage::

    from buildcalc import create_default_engine, MaterialSelection, ProjectSpec, RateConfig

    engine = create_default_engine()
    project = ProjectSpec(length_ft=60, width_ft=40, wall_height_ft=10)
    result = engine.estimate(project, MaterialSelection(), RateConfig())
"""

from buildcalc.data.prices import DEFAULT_PRICE_TABLE, PriceTable
from buildcalc.engine import EstimationEngine
from buildcalc.exceptions import BuildCalcError, PriceTableError, ReportError
from buildcalc.factory import create_default_engine
from buildcalc.geometry import BuildingGeometry, resolve_geometry
from buildcalc.models.enums import BuildingType, MaterialCategory, UpperFloorType
from buildcalc.models.estimate import EstimateResult, LineItem
from buildcalc.models.project import MaterialSelection, ProjectSpec, RateConfig
from buildcalc.report import render_text_report

__all__ = [
    "DEFAULT_PRICE_TABLE",
    "BuildCalcError",
    "BuildingGeometry",
    "BuildingType",
    "EstimateResult",
    "EstimationEngine",
    "LineItem",
    "MaterialCategory",
    "MaterialSelection",
    "PriceTable",
    "PriceTableError",
    "ProjectSpec",
    "RateConfig",
    "ReportError",
    "UpperFloorType",
    "create_default_engine",
    "render_text_report",
    "resolve_geometry",
]
