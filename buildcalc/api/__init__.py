"""HTTP API for the BuildCalc estimation engine."""

from buildcalc.api.app import create_app

__all__ = ["create_app"]
