"""Plain-text estimate report.

Renders an EstimateResult, together with the project and rates that
produced it, in the layout of the downloadable estimate sheet.
"""

from __future__ import annotations

import re
import time
from datetime import date
from typing import TYPE_CHECKING

from buildcalc.exceptions import ReportError
from buildcalc.formatting import (
    building_type_label,
    format_currency,
    format_number,
    format_percent,
    format_quantity,
    multiplier_label,
    upper_floor_label,
)

if TYPE_CHECKING:
    from buildcalc.models.estimate import EstimateResult
    from buildcalc.models.project import ProjectSpec, RateConfig

REPORT_TITLE = "CONSTRUCTION COST ESTIMATE"
GENERATED_BY = "Generated by BuildCalc Pro"
DEFAULT_PRICE_BASIS = "US national averages (2024)"
DISCLAIMER = "This is an estimate only. Actual costs may vary."

_HEAVY_RULE = "═" * 44
_LIGHT_RULE = "─" * 44
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9 ._-]")


def _section(title: str) -> list[str]:
    return [_LIGHT_RULE, title, _LIGHT_RULE]


def _format_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def _check_consistency(
    rates: RateConfig, result: EstimateResult, project: ProjectSpec
) -> None:
    if result.floors != project.floors:
        msg = (
            f"Estimate covers {result.floors} floor(s) but project "
            f"'{project.name}' has {project.floors}"
        )
        raise ReportError(msg)
    if (
        result.labor_rate_percent != rates.labor_rate_percent
        or result.contingency_rate_percent != rates.contingency_rate_percent
    ):
        msg = "Estimate was produced with different labor/contingency rates"
        raise ReportError(msg)


def render_text_report(
    project: ProjectSpec,
    rates: RateConfig,
    result: EstimateResult,
    generated_on: date | None = None,
    price_basis: str = DEFAULT_PRICE_BASIS,
) -> str:
    """Render a human-readable estimate report.

    Args:
        project: The project the estimate was computed for.
        rates: The rates the estimate was computed with.
        result: The engine output.
        generated_on: Date printed on the report. Defaults to today.
        price_basis: Where the unit prices come from, for the footnote.

    Raises:
        ReportError: If ``result`` was not produced from ``project`` and
            ``rates`` (floor count or rates disagree).
    """
    _check_consistency(rates, result, project)
    day = generated_on or date.today()

    lines: list[str] = [
        _HEAVY_RULE,
        f"       {REPORT_TITLE}",
        _HEAVY_RULE,
        "",
        f"Project: {project.name or 'Untitled Project'}",
        f"Type: {building_type_label(project.building_type)}",
        f"Date: {_format_date(day)}",
        "",
        *_section("BUILDING DIMENSIONS"),
        f"Length: {format_number(project.length_ft)} ft",
        f"Width: {format_number(project.width_ft)} ft",
        f"Wall Height: {format_number(project.wall_height_ft)} ft per floor",
        f"Floors: {project.floors}",
        f"Floor Type: {upper_floor_label(project.upper_floor_type)}",
        f"Slab Thickness: {format_number(project.slab_thickness_in)} in",
        "",
        f"Floor Area (per floor): {format_number(result.floor_area)} sq ft",
        f"Total Floor Area: {format_number(result.total_floor_area)} sq ft",
        f"Total Wall Area: {format_number(result.total_wall_area)} sq ft",
        "",
        *_section("MATERIALS BREAKDOWN"),
    ]

    for index, item in enumerate(result.line_items):
        if index:
            lines.append("")
        lines.extend(
            [
                item.name,
                f"  Quantity: {format_quantity(item)} {item.unit}",
                f"  Cost: {format_currency(item.cost)}",
                f"  Note: {item.note}",
            ]
        )

    lines.extend(
        [
            "",
            *_section("COST SUMMARY"),
            f"Materials Subtotal:    {format_currency(result.material_subtotal)}",
            f"Labor ({format_percent(rates.labor_rate_percent)}):"
            f"            {format_currency(result.labor_cost)}",
            f"Contingency ({format_percent(rates.contingency_rate_percent)}):"
            f"      {format_currency(result.contingency_cost)}",
            "",
            _HEAVY_RULE,
            f"TOTAL ESTIMATE:        {format_currency(result.total)}",
            _HEAVY_RULE,
            "",
            f"* Prices based on {price_basis}",
            f"* {multiplier_label(project.building_type, result.multiplier)}",
            f"* {DISCLAIMER}",
            "",
            _LIGHT_RULE,
            GENERATED_BY,
        ]
    )
    return "\n".join(lines)


def report_filename(project: ProjectSpec, timestamp_ms: int | None = None) -> str:
    """Download filename for a report, e.g. 'Smith Garage-1760000000000.txt'."""
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    stem = _UNSAFE_FILENAME_CHARS.sub("_", project.name.strip()) or "estimate"
    return f"{stem}-{timestamp_ms}.txt"
