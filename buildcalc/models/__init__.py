"""Domain models for the BuildCalc estimation engine."""

from buildcalc.models.enums import BuildingType, MaterialCategory, UpperFloorType
from buildcalc.models.estimate import EstimateResult, LineItem
from buildcalc.models.project import MaterialSelection, ProjectSpec, RateConfig

__all__ = [
    "BuildingType",
    "EstimateResult",
    "LineItem",
    "MaterialCategory",
    "MaterialSelection",
    "ProjectSpec",
    "RateConfig",
    "UpperFloorType",
]
