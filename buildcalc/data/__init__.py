"""Price data for the BuildCalc estimation engine."""

from buildcalc.data.prices import DEFAULT_PRICE_TABLE, PriceTable

__all__ = [
    "DEFAULT_PRICE_TABLE",
    "PriceTable",
]
