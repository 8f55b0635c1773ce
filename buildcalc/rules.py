"""Line-item rules: one entry per priced row the engine can emit.

Each rule says when it applies, how to measure its quantity from the
building geometry, which unit price it uses and whether the building-type
multiplier scales it. The engine walks :data:`LINE_ITEM_RULES` in order,
so adding a material is a matter of adding a rule and a price.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildcalc.data import prices
from buildcalc.formatting import format_number
from buildcalc.geometry import ceil_count
from buildcalc.models.enums import MaterialCategory, UpperFloorType

if TYPE_CHECKING:
    from buildcalc.geometry import BuildingGeometry
    from buildcalc.models.project import ProjectSpec

CEMENT_BAGS_PER_CUBIC_YARD = 1.25  # includes 25% waste over volumetric need
BRICKS_PER_SF_WALL = 7.0
BOARD_FEET_PER_SF_WALL = 1.5
ROOF_OVERHANG_FACTOR = 1.15
DRYWALL_SHEET_SF = 32.0  # 4x8 sheet

QuantityFn = Callable[["BuildingGeometry"], float]
NoteFn = Callable[["BuildingGeometry"], str]
Predicate = Callable[["ProjectSpec", "BuildingGeometry"], bool]


def _always(project: ProjectSpec, geometry: BuildingGeometry) -> bool:
    return True


def _upper_floors_of(floor_type: UpperFloorType) -> Predicate:
    """Predicate: project has more than one floor built with ``floor_type``."""

    def applies(project: ProjectSpec, geometry: BuildingGeometry) -> bool:
        return project.has_upper_floors and project.upper_floor_type == floor_type

    return applies


def _all_floors_note(geometry: BuildingGeometry) -> str:
    return f"All {geometry.floors} floor(s)"


def _fixed_note(text: str) -> NoteFn:
    return lambda geometry: text


def _additional_floors_note(geometry: BuildingGeometry) -> str:
    return (
        f"{format_number(geometry.floor_area)} sq ft × "
        f"{geometry.additional_floors} floors"
    )


def _additional_floor_area(geometry: BuildingGeometry) -> float:
    return geometry.floor_area * geometry.additional_floors


@dataclass(frozen=True)
class LineItemRule:
    """How to produce one line item.

    Attributes:
        name: Display name of the line item.
        category: Selection flag that gates the rule. ``None`` means the
            rule is not tied to a checkbox and only ``applies`` decides.
        unit: Unit the quantity is reported in.
        price_key: Key into the price table.
        quantity: Reported quantity.
        note: Human-readable qualifier for the row.
        applies: Extra applicability condition beyond the selection flag.
        apply_multiplier: Whether the building-type multiplier scales cost.
        priced_quantity: Quantity the unit price is charged against, when it
            differs from the reported quantity.
    """

    name: str
    category: MaterialCategory | None
    unit: str
    price_key: str
    quantity: QuantityFn
    note: NoteFn
    applies: Predicate = _always
    apply_multiplier: bool = True
    priced_quantity: QuantityFn | None = None

    def billable_quantity(self, geometry: BuildingGeometry) -> float:
        if self.priced_quantity is not None:
            return self.priced_quantity(geometry)
        return self.quantity(geometry)


LINE_ITEM_RULES: tuple[LineItemRule, ...] = (
    LineItemRule(
        name="Foundation Concrete",
        category=MaterialCategory.CONCRETE,
        unit="cu yd",
        price_key=prices.CONCRETE,
        quantity=lambda g: g.slab_cubic_yards,
        note=_fixed_note("Ground floor slab"),
    ),
    LineItemRule(
        name="Cement Bags",
        category=MaterialCategory.CONCRETE,
        unit="bags",
        price_key=prices.CEMENT,
        quantity=lambda g: ceil_count(g.slab_cubic_yards * CEMENT_BAGS_PER_CUBIC_YARD),
        note=_fixed_note("For foundation"),
        apply_multiplier=False,
    ),
    # Slab-on-grade upper floors add no structural line of their own.
    LineItemRule(
        name="Suspended Slabs",
        category=None,
        unit="floors",
        price_key=prices.SUSPENDED_CONCRETE,
        quantity=lambda g: g.additional_floors,
        note=_additional_floors_note,
        applies=_upper_floors_of(UpperFloorType.SUSPENDED_CONCRETE),
        priced_quantity=_additional_floor_area,
    ),
    LineItemRule(
        name="Wood Frame Floors",
        category=None,
        unit="floors",
        price_key=prices.WOOD_FRAME,
        quantity=lambda g: g.additional_floors,
        note=_additional_floors_note,
        applies=_upper_floors_of(UpperFloorType.WOOD_FRAME),
        priced_quantity=_additional_floor_area,
    ),
    LineItemRule(
        name="Bricks",
        category=MaterialCategory.BRICKS,
        unit="pcs",
        price_key=prices.BRICKS,
        quantity=lambda g: ceil_count(g.total_wall_area * BRICKS_PER_SF_WALL),
        note=_all_floors_note,
    ),
    LineItemRule(
        name="Lumber Framing",
        category=MaterialCategory.LUMBER,
        unit="board ft",
        price_key=prices.LUMBER,
        quantity=lambda g: ceil_count(
            g.perimeter * g.wall_height_ft * BOARD_FEET_PER_SF_WALL * g.floors
        ),
        note=_all_floors_note,
    ),
    LineItemRule(
        name="Roofing",
        category=MaterialCategory.ROOFING,
        unit="sq ft",
        price_key=prices.ROOFING,
        quantity=lambda g: g.floor_area * ROOF_OVERHANG_FACTOR,
        note=_fixed_note("Top floor only"),
    ),
    LineItemRule(
        name="Drywall",
        category=MaterialCategory.DRYWALL,
        unit="sheets",
        price_key=prices.DRYWALL,
        quantity=lambda g: ceil_count(g.total_wall_area / DRYWALL_SHEET_SF),
        note=_all_floors_note,
    ),
    LineItemRule(
        name="Flooring",
        category=MaterialCategory.FLOORING,
        unit="sq ft",
        price_key=prices.FLOORING,
        quantity=lambda g: g.total_floor_area,
        note=_all_floors_note,
    ),
    LineItemRule(
        name="Windows",
        category=MaterialCategory.WINDOWS,
        unit="units",
        price_key=prices.WINDOWS,
        quantity=lambda g: g.window_count,
        note=_fixed_note("Standard size estimate"),
    ),
    LineItemRule(
        name="Electrical Rough-in",
        category=MaterialCategory.ELECTRICAL,
        unit="sq ft",
        price_key=prices.ELECTRICAL,
        quantity=lambda g: g.total_floor_area,
        note=_all_floors_note,
    ),
    LineItemRule(
        name="Plumbing Rough-in",
        category=MaterialCategory.PLUMBING,
        unit="sq ft",
        price_key=prices.PLUMBING,
        quantity=lambda g: g.total_floor_area,
        note=_all_floors_note,
    ),
)
