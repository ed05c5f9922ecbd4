"""
Builds the results view: one gauge card per metric.

Glue between raw readings, the reference-range table, the geometry
engine and the zone classifier. Everything here is recomputed on each
call; nothing is cached.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from graftgauge import config
from graftgauge.api.gauge_models import GaugeCard, GaugeState, ResultsReport, ZoneArc
from graftgauge.gauge.geometry import (
    calculate_needle_position,
    describe_arc,
    describe_full_arc,
    format_display_value,
    value_to_percentage,
    zone_to_arc_angles,
)
from graftgauge.metrics.glossary import METRIC_GLOSSARY
from graftgauge.metrics.reference_ranges import (
    DEFAULT_METRIC_VALUES,
    METRIC_KEYS,
    REFERENCE_RANGES,
    MetricRange,
    classify_value,
    format_reference_range,
)

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class GaugeLayout:
    """Dial dimensions, all derived from the overall size."""

    size: float = 200.0
    arc_width: float = 16.0

    @property
    def center_x(self) -> float:
        return self.size / 2

    @property
    def center_y(self) -> float:
        return self.size / 2

    @property
    def radius(self) -> float:
        return self.size * 0.35

    @property
    def needle_length(self) -> float:
        return self.radius - self.arc_width / 2


def default_layout() -> GaugeLayout:
    return GaugeLayout(size=config.GAUGE_SIZE)


def parse_metric_value(raw: Optional[str]) -> float:
    """Parse the leading number of *raw*; empty or unparseable text is 0.

    Trailing junk is ignored ("12.5 mL" -> 12.5), matching how the input
    form treats partially typed values.
    """
    if raw is None:
        return 0.0
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return 0.0
    return float(match.group(0))


def parse_metric_inputs(raw_inputs: Mapping[str, Optional[str]]) -> dict[str, float]:
    """Map raw form text to numbers for every known metric."""
    values: dict[str, float] = {}
    for key in METRIC_KEYS:
        values[key] = parse_metric_value(raw_inputs.get(key))
    ignored = sorted(set(raw_inputs) - set(METRIC_KEYS))
    if ignored:
        logger.debug("Ignoring unknown metric keys: %s", ", ".join(ignored))
    return values


def decimal_places_for_unit(unit: str) -> int:
    # Unitless ratios (pulsatility index) read with one decimal; flows,
    # pressures and percentages are whole numbers.
    if unit == "":
        return 1
    return 0


def build_gauge_state(
    value: float, metric_range: MetricRange, layout: Optional[GaugeLayout] = None
) -> GaugeState:
    layout = layout or default_layout()
    cx, cy, radius = layout.center_x, layout.center_y, layout.radius
    lo, hi = metric_range.min, metric_range.max

    zone_arcs: list[ZoneArc] = []
    for zone in metric_range.zones:
        angles = zone_to_arc_angles(zone.start, zone.end, lo, hi)
        zone_arcs.append(
            ZoneArc(
                category=zone.category,
                start_value=zone.start,
                end_value=zone.end,
                start_angle=angles.start_angle,
                end_angle=angles.end_angle,
                path=describe_arc(cx, cy, radius, angles.start_angle, angles.end_angle),
                color=config.ZONE_COLORS[zone.category],
            )
        )

    needle = calculate_needle_position(value, lo, hi, cx, cy, layout.needle_length)
    return GaugeState(
        value=value,
        percentage=value_to_percentage(value, lo, hi),
        angle_degrees=needle.angle,
        needle=needle,
        arc_path=describe_full_arc(cx, cy, radius),
        zone_arcs=zone_arcs,
    )


def build_gauge_card(
    metric_key: str,
    value: float,
    ranges: Mapping[str, MetricRange] = REFERENCE_RANGES,
    layout: Optional[GaugeLayout] = None,
) -> GaugeCard:
    rr = ranges[metric_key]
    category = classify_value(value, rr)
    return GaugeCard(
        metric_key=metric_key,
        label=rr.label,
        unit=rr.unit,
        value=value,
        display_value=format_display_value(value, decimal_places_for_unit(rr.unit)),
        category=category,
        color=config.ZONE_COLORS.get(category, config.DEFAULT_TEXT_COLOR),
        range_min=rr.min,
        range_max=rr.max,
        reference_range=format_reference_range(rr),
        description=METRIC_GLOSSARY.get(metric_key),
        gauge=build_gauge_state(value, rr, layout),
    )


def build_results(
    values: Mapping[str, float],
    ranges: Mapping[str, MetricRange] = REFERENCE_RANGES,
    layout: Optional[GaugeLayout] = None,
) -> ResultsReport:
    """One card per metric, in display order. Missing values read as 0."""
    layout = layout or default_layout()
    cards: list[GaugeCard] = []
    warnings: list[str] = []

    for key in METRIC_KEYS:
        if key not in ranges:
            warnings.append(f"No reference range for {key}; gauge skipped.")
            continue
        value = values.get(key, DEFAULT_METRIC_VALUES[key])
        card = build_gauge_card(key, value, ranges, layout)
        if not math.isfinite(value):
            warnings.append(f"{card.label} value is not a number; shown as {card.category.value}.")
        elif value < card.range_min or value > card.range_max:
            warnings.append(
                f"{card.label} value {card.display_value} is outside the "
                f"gauge range {card.range_min:g}-{card.range_max:g}."
            )
        cards.append(card)

    return ResultsReport(cards=cards, warnings=warnings)
