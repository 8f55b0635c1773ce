"""Core estimation engine for BuildCalc.

The EstimationEngine prices a building in three stages:

1. **Geometry** — Resolve floor, wall and slab quantities from the project
   dimensions (:func:`buildcalc.geometry.resolve_geometry`).
2. **Line items** — Walk the rule table in order and price every rule whose
   material is selected and whose condition holds. Cost is
   ``quantity * unit price * building multiplier``; cement bags are a fixed
   commodity cost and skip the multiplier.
3. **Aggregation** — Sum the line items into a material subtotal, add labor
   as a percentage of materials, then add contingency as a percentage of
   materials plus labor.

The engine is a pure function of its inputs and its price table. It never
raises for degenerate dimensions; they simply price at zero.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from buildcalc.geometry import resolve_geometry
from buildcalc.models.estimate import EstimateResult, LineItem
from buildcalc.rules import LINE_ITEM_RULES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from buildcalc.data.prices import PriceTable
    from buildcalc.geometry import BuildingGeometry
    from buildcalc.models.project import MaterialSelection, ProjectSpec, RateConfig
    from buildcalc.rules import LineItemRule

logger = logging.getLogger(__name__)


class EstimationEngine:
    """Turns a project, a material selection and rates into an estimate.

    Args:
        price_table: Unit prices and building-type multipliers.
        rules: Line-item rules in breakdown order. Defaults to
            :data:`buildcalc.rules.LINE_ITEM_RULES`.

    Example::

        from buildcalc.data import DEFAULT_PRICE_TABLE

        engine = EstimationEngine(DEFAULT_PRICE_TABLE)
        result = engine.estimate(project, MaterialSelection(), RateConfig())
    """

    def __init__(
        self,
        price_table: PriceTable,
        rules: Sequence[LineItemRule] = LINE_ITEM_RULES,
    ) -> None:
        self._price_table = price_table
        self._rules = tuple(rules)

    @property
    def price_table(self) -> PriceTable:
        return self._price_table

    def estimate(
        self,
        project: ProjectSpec,
        materials: MaterialSelection,
        rates: RateConfig,
    ) -> EstimateResult:
        """Produce an itemized estimate.

        Args:
            project: Building dimensions and configuration.
            materials: Which material categories to include.
            rates: Labor and contingency percentages.

        Returns:
            An EstimateResult with full-precision quantities and costs.

        Raises:
            PriceTableError: If the price table lacks a price or multiplier
                a selected rule needs.
        """
        geometry = resolve_geometry(project)
        multiplier = self._price_table.multiplier(project.building_type)

        line_items = self._calculate_line_items(project, materials, geometry, multiplier)

        material_subtotal = sum((item.cost for item in line_items), 0.0)
        labor_cost = material_subtotal * (rates.labor_rate_percent / 100)
        contingency_cost = (material_subtotal + labor_cost) * (
            rates.contingency_rate_percent / 100
        )
        total = material_subtotal + labor_cost + contingency_cost

        logger.debug(
            "Estimated %r: %d line items, materials=%.2f total=%.2f",
            project.name,
            len(line_items),
            material_subtotal,
            total,
        )

        return EstimateResult(
            line_items=tuple(line_items),
            material_subtotal=material_subtotal,
            labor_cost=labor_cost,
            contingency_cost=contingency_cost,
            total=total,
            floor_area=geometry.floor_area,
            total_floor_area=geometry.total_floor_area,
            total_wall_area=geometry.total_wall_area,
            floors=geometry.floors,
            perimeter=geometry.perimeter,
            window_count=geometry.window_count,
            multiplier=multiplier,
            labor_rate_percent=rates.labor_rate_percent,
            contingency_rate_percent=rates.contingency_rate_percent,
        )

    def _calculate_line_items(
        self,
        project: ProjectSpec,
        materials: MaterialSelection,
        geometry: BuildingGeometry,
        multiplier: float,
    ) -> list[LineItem]:
        """Price every applicable rule, in rule order."""
        items: list[LineItem] = []
        for rule in self._rules:
            if rule.category is not None and not materials.is_selected(rule.category):
                continue
            if not rule.applies(project, geometry):
                continue

            unit_price = self._price_table.price(rule.price_key)
            applied_multiplier = multiplier if rule.apply_multiplier else 1.0
            cost = rule.billable_quantity(geometry) * unit_price * applied_multiplier

            items.append(
                LineItem(
                    name=rule.name,
                    category=rule.category.value if rule.category else "structure",
                    quantity=rule.quantity(geometry),
                    unit=rule.unit,
                    cost=cost,
                    note=rule.note(geometry),
                    unit_price=unit_price,
                    multiplier=applied_multiplier,
                )
            )
        return items
