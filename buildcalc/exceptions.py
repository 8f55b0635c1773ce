"""Custom exception hierarchy for BuildCalc.

The estimation engine itself never raises for bad input; these cover
configuration and export.
"""

from __future__ import annotations


class BuildCalcError(Exception):
    """Base exception for all BuildCalc errors."""


class PriceTableError(BuildCalcError):
    """Raised when a price table can't be loaded or lacks a needed price."""


class ReportError(BuildCalcError):
    """Raised when a report is requested for inputs that don't belong together."""
