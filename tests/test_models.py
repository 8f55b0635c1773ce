"""Tests for the input models and their numeric coercion."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from buildcalc.models.enums import BuildingType, MaterialCategory, UpperFloorType
from buildcalc.models.estimate import EstimateResult, LineItem
from buildcalc.models.project import (
    MaterialSelection,
    ProjectSpec,
    RateConfig,
    coerce_float,
    coerce_floors,
)


class TestCoerceFloat:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (60, 60.0),
            (12.5, 12.5),
            ("60", 60.0),
            ("12.5", 12.5),
            (" 8 ", 8.0),
            ("60ft", 60.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("", 0.0),
            ("abc", 0.0),
            (None, 0.0),
            (math.nan, 0.0),
            (math.inf, 0.0),
            (True, 0.0),
            ([1, 2], 0.0),
            (Decimal("12.5"), 12.5),
            (Fraction(1, 2), 0.5),
            (Decimal("NaN"), 0.0),
            (10**400, 0.0),
        ],
    )
    def test_values(self, raw: object, expected: float) -> None:
        assert coerce_float(raw) == expected


class TestCoerceFloors:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (3, 3),
            ("3", 3),
            ("2.7", 2),
            (2.7, 2),
            ("0", 1),
            (0, 1),
            (-2, 1),
            ("", 1),
            ("abc", 1),
            (None, 1),
        ],
    )
    def test_values(self, raw: object, expected: int) -> None:
        assert coerce_floors(raw) == expected


class TestProjectSpec:
    def test_defaults(self) -> None:
        project = ProjectSpec()
        assert project.name == ""
        assert project.building_type == BuildingType.RESIDENTIAL
        assert project.floors == 1
        assert project.slab_thickness_in == 4.0
        assert project.upper_floor_type == UpperFloorType.SLAB_ON_GRADE
        assert project.has_upper_floors is False

    def test_form_strings_are_coerced(self) -> None:
        project = ProjectSpec(
            length_ft="60", width_ft="40", wall_height_ft="", floors="2", slab_thickness_in="6"
        )
        assert project.length_ft == 60.0
        assert project.width_ft == 40.0
        assert project.wall_height_ft == 0.0
        assert project.floors == 2
        assert project.slab_thickness_in == 6.0
        assert project.has_upper_floors is True

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("slab", UpperFloorType.SLAB_ON_GRADE),
            ("suspended", UpperFloorType.SUSPENDED_CONCRETE),
            ("wood", UpperFloorType.WOOD_FRAME),
            ("slabOnGrade", UpperFloorType.SLAB_ON_GRADE),
            ("suspendedConcrete", UpperFloorType.SUSPENDED_CONCRETE),
            ("woodFrame", UpperFloorType.WOOD_FRAME),
            ("wood_frame", UpperFloorType.WOOD_FRAME),
            (UpperFloorType.SUSPENDED_CONCRETE, UpperFloorType.SUSPENDED_CONCRETE),
        ],
    )
    def test_upper_floor_aliases(self, raw: str, expected: UpperFloorType) -> None:
        assert ProjectSpec(upper_floor_type=raw).upper_floor_type == expected

    def test_building_type_is_case_insensitive(self) -> None:
        assert ProjectSpec(building_type="Commercial").building_type == BuildingType.COMMERCIAL

    def test_unknown_building_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectSpec(building_type="villa")

    def test_unknown_upper_floor_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectSpec(upper_floor_type="steel deck")

    def test_none_name_becomes_empty(self) -> None:
        assert ProjectSpec(name=None).name == ""

    def test_negative_dimensions_become_zero(self) -> None:
        project = ProjectSpec(
            length_ft="-60", width_ft=-40, wall_height_ft=-10, slab_thickness_in=-4
        )
        assert project.length_ft == 0.0
        assert project.width_ft == 0.0
        assert project.wall_height_ft == 0.0
        assert project.slab_thickness_in == 0.0


class TestMaterialSelection:
    def test_defaults_to_concrete_only(self) -> None:
        assert MaterialSelection().enabled() == [MaterialCategory.CONCRETE]

    def test_all_selected_in_breakdown_order(self) -> None:
        assert MaterialSelection.all_selected().enabled() == list(MaterialCategory)

    def test_none_selected(self) -> None:
        assert MaterialSelection.none_selected().enabled() == []

    def test_only(self) -> None:
        selection = MaterialSelection.only(MaterialCategory.WINDOWS, MaterialCategory.BRICKS)
        assert selection.enabled() == [MaterialCategory.BRICKS, MaterialCategory.WINDOWS]
        assert selection.is_selected(MaterialCategory.CONCRETE) is False


class TestRateConfig:
    def test_defaults(self) -> None:
        rates = RateConfig()
        assert rates.labor_rate_percent == 10.0
        assert rates.contingency_rate_percent == 5.0

    def test_non_numeric_rates_become_zero(self) -> None:
        rates = RateConfig(labor_rate_percent="abc", contingency_rate_percent=None)
        assert rates.labor_rate_percent == 0.0
        assert rates.contingency_rate_percent == 0.0

    def test_out_of_range_rates_are_kept(self) -> None:
        rates = RateConfig(labor_rate_percent=45, contingency_rate_percent=25)
        assert rates.labor_rate_percent == 45.0
        assert rates.contingency_rate_percent == 25.0

    def test_negative_rates_become_zero(self) -> None:
        rates = RateConfig(labor_rate_percent=-10, contingency_rate_percent="-5")
        assert rates.labor_rate_percent == 0.0
        assert rates.contingency_rate_percent == 0.0


class TestOutputModels:
    def _line_item(self) -> LineItem:
        return LineItem(
            name="Windows",
            category="windows",
            quantity=4,
            unit="units",
            cost=1800.0,
            note="Standard size estimate",
            unit_price=450.0,
        )

    def test_line_item_is_frozen(self) -> None:
        item = self._line_item()
        with pytest.raises(ValidationError):
            item.cost = 0.0  # type: ignore[misc]

    def test_estimate_result_lookup_and_summary(self) -> None:
        result = EstimateResult(
            line_items=(self._line_item(),),
            material_subtotal=1800.0,
            labor_cost=180.0,
            contingency_cost=99.0,
            total=2079.0,
            floor_area=100.0,
            total_floor_area=100.0,
            total_wall_area=400.0,
            floors=1,
        )
        assert result.line_item("Windows") is not None
        assert result.line_item("Bricks") is None
        assert result.subtotal_with_labor == 1980.0

        summary = result.to_summary_dict()
        assert summary["num_line_items"] == 1
        assert summary["total_formatted"] == "$2,079.00"
        assert summary["line_items"][0]["quantity_formatted"] == "4"
        assert summary["total_wall_area_formatted"] == "400 sq ft"
