"""Formatting helpers for estimate output.

The engine returns full-precision numbers; everything a person reads goes
through these helpers (e.g., '$5,014.44', '29.63', '2,400').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildcalc.models.enums import BuildingType, UpperFloorType

if TYPE_CHECKING:
    from buildcalc.models.estimate import LineItem

_TWO_DECIMAL_UNITS = frozenset({"cu yd"})
_AREA_UNITS = frozenset({"sq ft"})

UPPER_FLOOR_LABELS: dict[UpperFloorType, str] = {
    UpperFloorType.SLAB_ON_GRADE: "Slab on Grade",
    UpperFloorType.SUSPENDED_CONCRETE: "Suspended Concrete",
    UpperFloorType.WOOD_FRAME: "Wood Frame",
}


def format_currency(amount: float) -> str:
    """Format a currency amount with cents and comma separators ('$1,234.56')."""
    return f"${amount:,.2f}"


def format_number(value: float) -> str:
    """Format a plain number with comma separators and at most 3 decimals.

    Trailing zeros are dropped, so 2400.0 gives '2,400' and 1234.5 gives
    '1,234.5'.
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_quantity(item: LineItem) -> str:
    """Format a line item's quantity with rounding suited to its unit.

    - Volumes ('cu yd'): two decimals ('29.63')
    - Areas ('sq ft'): whole square feet with separators ('2,760')
    - Everything else is a count: whole number with separators ('16,800')
    """
    if item.unit in _TWO_DECIMAL_UNITS:
        return f"{item.quantity:.2f}"
    if item.unit in _AREA_UNITS:
        return f"{item.quantity:,.0f}"
    return f"{round(item.quantity):,d}"


def format_percent(rate: float) -> str:
    """Format a percentage rate without a trailing '.0' ('10%', '7.5%')."""
    return f"{format_number(rate)}%"


def building_type_label(building_type: BuildingType) -> str:
    return building_type.value.capitalize()


def upper_floor_label(floor_type: UpperFloorType) -> str:
    return UPPER_FLOOR_LABELS[floor_type]


def multiplier_label(building_type: BuildingType, multiplier: float) -> str:
    """Describe the building-type rate adjustment ('Commercial rates applied (+25%)')."""
    label = building_type_label(building_type)
    adjustment = round((multiplier - 1.0) * 100, 2)
    if adjustment == 0:
        return f"{label} rates applied"
    sign = "+" if adjustment > 0 else ""
    return f"{label} rates applied ({sign}{format_number(adjustment)}%)"
