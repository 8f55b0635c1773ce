"""Estimate output models for the BuildCalc estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """One priced row in the materials breakdown.

    ``quantity`` and ``cost`` are full precision; rounding for display is
    left to :mod:`buildcalc.formatting`.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    quantity: float
    unit: str
    cost: float
    note: str

    # Pricing derivation (transparency layer)
    unit_price: float
    multiplier: float = 1.0


class EstimateResult(BaseModel):
    """Complete output of one engine run."""

    model_config = ConfigDict(frozen=True)

    line_items: tuple[LineItem, ...] = Field(default_factory=tuple)
    material_subtotal: float
    labor_cost: float
    contingency_cost: float
    total: float

    floor_area: float
    total_floor_area: float
    total_wall_area: float
    floors: int

    perimeter: float = 0.0
    window_count: int = 0
    multiplier: float = 1.0
    labor_rate_percent: float = 0.0
    contingency_rate_percent: float = 0.0

    @property
    def subtotal_with_labor(self) -> float:
        return self.material_subtotal + self.labor_cost

    def line_item(self, name: str) -> LineItem | None:
        """Return the first line item with the given display name."""
        for item in self.line_items:
            if item.name == name:
                return item
        return None

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings for a results screen."""
        from buildcalc.formatting import format_currency, format_quantity

        return {
            "num_line_items": len(self.line_items),
            "line_items": [
                {
                    "name": item.name,
                    "quantity_formatted": format_quantity(item),
                    "cost_formatted": format_currency(item.cost),
                    "note": item.note,
                }
                for item in self.line_items
            ],
            "material_subtotal_formatted": format_currency(self.material_subtotal),
            "labor_cost_formatted": format_currency(self.labor_cost),
            "contingency_cost_formatted": format_currency(self.contingency_cost),
            "total_formatted": format_currency(self.total),
            "floor_area_formatted": f"{self.floor_area:,.0f} sq ft",
            "total_floor_area_formatted": f"{self.total_floor_area:,.0f} sq ft",
            "total_wall_area_formatted": f"{self.total_wall_area:,.0f} sq ft",
            "floors": self.floors,
        }
