"""Enums for the BuildCalc domain models."""

from enum import StrEnum


class BuildingType(StrEnum):
    """Building use classes, each with its own cost multiplier."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    APARTMENT = "apartment"


class UpperFloorType(StrEnum):
    """Construction method for floors above the ground floor."""

    SLAB_ON_GRADE = "slab_on_grade"
    SUSPENDED_CONCRETE = "suspended_concrete"
    WOOD_FRAME = "wood_frame"


class MaterialCategory(StrEnum):
    """Material categories a user can include in an estimate.

    Declaration order is the order line items appear in the breakdown.
    """

    CONCRETE = "concrete"
    BRICKS = "bricks"
    LUMBER = "lumber"
    ROOFING = "roofing"
    DRYWALL = "drywall"
    FLOORING = "flooring"
    WINDOWS = "windows"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
