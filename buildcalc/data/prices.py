"""Unit price table for the BuildCalc estimation engine.

Default prices are 2024 US national averages. The table and its price
mappings are immutable; use :meth:`PriceTable.with_price` or
:meth:`PriceTable.from_json_file` to get an alternate table and hand it to
a new engine.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer, field_validator

from buildcalc.exceptions import PriceTableError
from buildcalc.models.enums import BuildingType

logger = logging.getLogger(__name__)

# Price keys
CONCRETE = "concrete"
CEMENT = "cement"
BRICKS = "bricks"
LUMBER = "lumber"
ROOFING = "roofing"
DRYWALL = "drywall"
FLOORING = "flooring"
WINDOWS = "windows"
ELECTRICAL = "electrical"
PLUMBING = "plumbing"
SUSPENDED_CONCRETE = "suspended_concrete"
WOOD_FRAME = "wood_frame"

DEFAULT_UNIT_PRICES: dict[str, float] = {
    CONCRETE: 150.0,  # per cubic yard
    BRICKS: 0.75,  # per brick
    LUMBER: 8.0,  # per board foot
    ROOFING: 5.0,  # per sq ft
    DRYWALL: 15.0,  # per 4x8 sheet
    CEMENT: 15.0,  # per 94 lb bag
    FLOORING: 8.0,  # per sq ft
    WINDOWS: 450.0,  # per window
    ELECTRICAL: 4.0,  # per sq ft
    PLUMBING: 6.0,  # per sq ft
    SUSPENDED_CONCRETE: 12.0,  # per sq ft of upper floor
    WOOD_FRAME: 6.0,  # per sq ft of upper floor
}

DEFAULT_BUILDING_MULTIPLIERS: dict[BuildingType, float] = {
    BuildingType.RESIDENTIAL: 1.0,
    BuildingType.APARTMENT: 1.15,
    BuildingType.COMMERCIAL: 1.25,
}


class PriceTable(BaseModel):
    """Unit prices by price key and cost multipliers by building type."""

    model_config = ConfigDict(frozen=True)

    unit_prices: Mapping[str, float]
    building_multipliers: Mapping[BuildingType, float]
    price_basis: str = "US national averages (2024)"

    @field_validator("unit_prices", "building_multipliers")
    @classmethod
    def values_must_be_non_negative(cls, v: Mapping[Any, float]) -> Mapping[Any, float]:
        for key, value in v.items():
            if value < 0:
                msg = f"Price table value for '{key}' must be non-negative, got {value}"
                raise ValueError(msg)
        return MappingProxyType(dict(v))

    @field_serializer("unit_prices", "building_multipliers")
    def _mapping_to_dict(self, v: Mapping[Any, float]) -> dict[Any, float]:
        return dict(v)

    def price(self, key: str) -> float:
        """Unit price for ``key``.

        Raises:
            PriceTableError: If the table has no price for ``key``.
        """
        try:
            return self.unit_prices[key]
        except KeyError:
            msg = f"No unit price configured for '{key}'"
            raise PriceTableError(msg) from None

    def multiplier(self, building_type: BuildingType) -> float:
        """Cost multiplier for ``building_type``.

        Raises:
            PriceTableError: If the table has no multiplier for the type.
        """
        try:
            return self.building_multipliers[building_type]
        except KeyError:
            msg = f"No cost multiplier configured for building type '{building_type}'"
            raise PriceTableError(msg) from None

    def with_price(self, key: str, value: float) -> PriceTable:
        """Return a copy of this table with one unit price replaced."""
        return type(self)(
            unit_prices={**self.unit_prices, key: value},
            building_multipliers=self.building_multipliers,
            price_basis=self.price_basis,
        )

    def with_multiplier(self, building_type: BuildingType, value: float) -> PriceTable:
        """Return a copy of this table with one building multiplier replaced."""
        return type(self)(
            unit_prices=self.unit_prices,
            building_multipliers={**self.building_multipliers, building_type: value},
            price_basis=self.price_basis,
        )

    @classmethod
    def default(cls) -> PriceTable:
        return cls(
            unit_prices=dict(DEFAULT_UNIT_PRICES),
            building_multipliers=dict(DEFAULT_BUILDING_MULTIPLIERS),
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> PriceTable:
        """Load a price table from JSON, layered over the defaults.

        The file may contain ``unit_prices``, ``building_multipliers`` and
        ``price_basis``; keys it leaves out keep their default values.

        Raises:
            PriceTableError: If the file can't be read or doesn't describe
                a valid price table.
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            msg = f"Cannot read price table file {path}: {exc}"
            raise PriceTableError(msg) from exc
        except json.JSONDecodeError as exc:
            msg = f"Price table file {path} is not valid JSON: {exc}"
            raise PriceTableError(msg) from exc

        if not isinstance(raw, dict):
            msg = f"Price table file {path} must contain a JSON object"
            raise PriceTableError(msg)

        try:
            data: dict[str, Any] = {
                "unit_prices": {**DEFAULT_UNIT_PRICES, **raw.get("unit_prices", {})},
                "building_multipliers": {
                    **{k.value: v for k, v in DEFAULT_BUILDING_MULTIPLIERS.items()},
                    **raw.get("building_multipliers", {}),
                },
            }
            if "price_basis" in raw:
                data["price_basis"] = raw["price_basis"]
            table = cls.model_validate(data)
        except (ValidationError, TypeError) as exc:
            msg = f"Price table file {path} is invalid: {exc}"
            raise PriceTableError(msg) from exc

        logger.info("Loaded price table from %s (%d unit prices)", path, len(table.unit_prices))
        return table


DEFAULT_PRICE_TABLE = PriceTable.default()
