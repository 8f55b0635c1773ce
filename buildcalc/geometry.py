"""Geometry resolver: building dimensions to areas, lengths and volumes.

All quantities are in feet, square feet or cubic yards. Degenerate
dimensions (zero after coercion) give zero quantities, never an error.
Quantities too large for a float also read as zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildcalc.models.project import ProjectSpec

CUBIC_FEET_PER_CUBIC_YARD = 27.0
INCHES_PER_FOOT = 12.0
WALL_AREA_PER_WINDOW_SF = 100.0


@dataclass(frozen=True)
class BuildingGeometry:
    """Quantities derived from a project's dimensions."""

    length_ft: float
    width_ft: float
    wall_height_ft: float
    floors: int
    floor_area: float
    total_floor_area: float
    wall_area_per_floor: float
    total_wall_area: float
    perimeter: float
    window_count: int
    slab_cubic_yards: float

    @property
    def additional_floors(self) -> int:
        return self.floors - 1


def ceil_count(value: float) -> int:
    """Round a quantity up to a whole count; non-finite quantities count as 0."""
    if not math.isfinite(value):
        return 0
    return math.ceil(value)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def window_count_for(total_wall_area: float) -> int:
    """One window per 100 sq ft of wall, rounded up to a whole window."""
    return ceil_count(total_wall_area / WALL_AREA_PER_WINDOW_SF)


def slab_volume_cubic_yards(
    length_ft: float, width_ft: float, thickness_in: float
) -> float:
    """Volume of a ground-floor slab in cubic yards."""
    thickness_ft = thickness_in / INCHES_PER_FOOT
    return (length_ft * width_ft * thickness_ft) / CUBIC_FEET_PER_CUBIC_YARD


def resolve_geometry(project: ProjectSpec) -> BuildingGeometry:
    """Derive every quantity the line-item rules need from ``project``."""
    length = project.length_ft
    width = project.width_ft
    height = project.wall_height_ft
    floors = project.floors

    floor_area = _finite(length * width)
    perimeter = _finite(2 * (length + width))
    wall_area_per_floor = _finite(perimeter * height)
    total_wall_area = _finite(wall_area_per_floor * floors)

    return BuildingGeometry(
        length_ft=length,
        width_ft=width,
        wall_height_ft=height,
        floors=floors,
        floor_area=floor_area,
        total_floor_area=_finite(floor_area * floors),
        wall_area_per_floor=wall_area_per_floor,
        total_wall_area=total_wall_area,
        perimeter=perimeter,
        window_count=window_count_for(total_wall_area),
        slab_cubic_yards=_finite(
            slab_volume_cubic_yards(length, width, project.slab_thickness_in)
        ),
    )
