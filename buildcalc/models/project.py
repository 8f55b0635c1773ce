"""Input models for the BuildCalc estimation engine.

Dimension fields accept whatever a form submits. Anything that does not
read as a number becomes ``0`` instead of raising, so a half-filled form
produces a trivial estimate rather than an error.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from buildcalc.models.enums import BuildingType, MaterialCategory, UpperFloorType

# Leading numeric prefix, e.g. "60", "12.5", ".5", "60ft", "1e3"
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

LABOR_RATE_BOUNDS: tuple[float, float] = (5.0, 30.0)
CONTINGENCY_RATE_BOUNDS: tuple[float, float] = (0.0, 20.0)

# Short names used by the web form
_UPPER_FLOOR_ALIASES: dict[str, UpperFloorType] = {
    "slab": UpperFloorType.SLAB_ON_GRADE,
    "slabongrade": UpperFloorType.SLAB_ON_GRADE,
    "suspended": UpperFloorType.SUSPENDED_CONCRETE,
    "suspendedconcrete": UpperFloorType.SUSPENDED_CONCRETE,
    "suspendedslab": UpperFloorType.SUSPENDED_CONCRETE,
    "wood": UpperFloorType.WOOD_FRAME,
    "woodframe": UpperFloorType.WOOD_FRAME,
}


def coerce_float(value: Any) -> float:
    """Read a user-entered value as a float, falling back to ``0.0``.

    Strings are read up to the first character that can't be part of a
    number, so ``"60ft"`` gives ``60.0``. Any real number type, ``Decimal``
    included, is accepted. NaN and infinities give ``0.0``.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, numbers.Real | Decimal):
        try:
            result = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return 0.0
        result = float(match.group(1))
    else:
        return 0.0
    if not math.isfinite(result):
        return 0.0
    return result


def coerce_floors(value: Any) -> int:
    """Read a floor count, treating anything below one as a single floor."""
    floors = 0
    if isinstance(value, bool) or value is None:
        floors = 0
    elif isinstance(value, int):
        floors = value
    elif isinstance(value, float):
        floors = int(value) if math.isfinite(value) else 0
    elif isinstance(value, str):
        match = _INT_PREFIX.match(value)
        floors = int(match.group(1)) if match else 0
    return max(floors, 1)


class ProjectSpec(BaseModel):
    """Building geometry and configuration for one estimate."""

    name: str = ""
    building_type: BuildingType = BuildingType.RESIDENTIAL
    length_ft: float = 0.0
    width_ft: float = 0.0
    wall_height_ft: float = 0.0
    floors: int = 1
    slab_thickness_in: float = 4.0
    upper_floor_type: UpperFloorType = UpperFloorType.SLAB_ON_GRADE

    @field_validator("name", mode="before")
    @classmethod
    def name_to_str(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator(
        "length_ft", "width_ft", "wall_height_ft", "slab_thickness_in", mode="before"
    )
    @classmethod
    def dimensions_to_float(cls, v: Any) -> float:
        # Negative sizes are not a building; read them as blank
        return max(coerce_float(v), 0.0)

    @field_validator("floors", mode="before")
    @classmethod
    def floors_to_int(cls, v: Any) -> int:
        return coerce_floors(v)

    @field_validator("building_type", mode="before")
    @classmethod
    def normalize_building_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("upper_floor_type", mode="before")
    @classmethod
    def normalize_upper_floor_type(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, UpperFloorType):
            key = v.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
            return _UPPER_FLOOR_ALIASES.get(key, v)
        return v

    @property
    def has_upper_floors(self) -> bool:
        return self.floors > 1


class MaterialSelection(BaseModel):
    """Which material categories to include in the estimate.

    Defaults match a fresh form: concrete only.
    """

    concrete: bool = True
    bricks: bool = False
    lumber: bool = False
    roofing: bool = False
    drywall: bool = False
    flooring: bool = False
    windows: bool = False
    electrical: bool = False
    plumbing: bool = False

    @classmethod
    def all_selected(cls) -> MaterialSelection:
        return cls(**{category.value: True for category in MaterialCategory})

    @classmethod
    def none_selected(cls) -> MaterialSelection:
        return cls(**{category.value: False for category in MaterialCategory})

    @classmethod
    def only(cls, *categories: MaterialCategory) -> MaterialSelection:
        """Selection with exactly the given categories enabled."""
        chosen = set(categories)
        return cls(**{c.value: c in chosen for c in MaterialCategory})

    def is_selected(self, category: MaterialCategory) -> bool:
        return bool(getattr(self, category.value))

    def enabled(self) -> list[MaterialCategory]:
        """Enabled categories in breakdown order."""
        return [c for c in MaterialCategory if self.is_selected(c)]


class RateConfig(BaseModel):
    """Labor and contingency markups, in percent.

    The form limits these to LABOR_RATE_BOUNDS and CONTINGENCY_RATE_BOUNDS,
    but any non-negative value is accepted here and applied as given.
    Negative rates read as 0.
    """

    labor_rate_percent: float = Field(default=10.0)
    contingency_rate_percent: float = Field(default=5.0)

    @field_validator("labor_rate_percent", "contingency_rate_percent", mode="before")
    @classmethod
    def rates_to_float(cls, v: Any) -> float:
        return max(coerce_float(v), 0.0)
