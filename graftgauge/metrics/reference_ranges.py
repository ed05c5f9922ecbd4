"""
Coronary bypass graft (CABG) flow-measurement reference ranges and zone
classification.

Each metric is drawn on a semicircular gauge whose display range is split
into colour-coded zones. The values here are representative educational
thresholds, not clinical standards; real thresholds would come from
validated guidelines.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from graftgauge.api.gauge_models import ZoneCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneBoundary:
    start: float
    end: float
    category: ZoneCategory


@dataclass(frozen=True)
class MetricRange:
    min: float
    max: float
    unit: str
    label: str
    zones: tuple[ZoneBoundary, ...] = ()
    source: str = "Representative intraoperative TTFM values"


_OPTIMAL = ZoneCategory.OPTIMAL
_CAUTION = ZoneCategory.CAUTION
_CONCERNING = ZoneCategory.CONCERNING


METRIC_KEYS: tuple[str, ...] = ("MF", "PI", "DF", "BF", "ACI", "MAP")

DEFAULT_METRIC_VALUES: Mapping[str, float] = MappingProxyType(
    {key: 0.0 for key in METRIC_KEYS}
)

REFERENCE_RANGES: Mapping[str, MetricRange] = MappingProxyType({
    # --- Mean Flow ---
    # Blood volume through the graft; higher is better
    "MF": MetricRange(
        min=0.0,
        max=200.0,
        unit="mL/min",
        label="Mean Flow",
        zones=(
            ZoneBoundary(0.0, 15.0, _CONCERNING),
            ZoneBoundary(15.0, 30.0, _CAUTION),
            ZoneBoundary(30.0, 200.0, _OPTIMAL),
        ),
    ),
    # --- Pulsatility Index ---
    # (max flow - min flow) / mean flow; lower is more consistent
    "PI": MetricRange(
        min=0.0,
        max=10.0,
        unit="",
        label="Pulsatility Index",
        zones=(
            ZoneBoundary(0.0, 3.0, _OPTIMAL),
            ZoneBoundary(3.0, 5.0, _CAUTION),
            ZoneBoundary(5.0, 10.0, _CONCERNING),
        ),
    ),
    # --- Diastolic Filling ---
    # Share of flow during diastole; higher is better for coronary grafts
    "DF": MetricRange(
        min=0.0,
        max=100.0,
        unit="%",
        label="Diastolic Filling",
        zones=(
            ZoneBoundary(0.0, 50.0, _CONCERNING),
            ZoneBoundary(50.0, 70.0, _CAUTION),
            ZoneBoundary(70.0, 100.0, _OPTIMAL),
        ),
    ),
    # --- Backflow ---
    # Share of reverse flow; lower is better
    "BF": MetricRange(
        min=0.0,
        max=50.0,
        unit="%",
        label="Backflow",
        zones=(
            ZoneBoundary(0.0, 3.0, _OPTIMAL),
            ZoneBoundary(3.0, 10.0, _CAUTION),
            ZoneBoundary(10.0, 50.0, _CONCERNING),
        ),
    ),
    # --- Acoustic Coupling Index ---
    # Ultrasound probe contact quality; higher is better
    "ACI": MetricRange(
        min=0.0,
        max=100.0,
        unit="%",
        label="Acoustic Coupling",
        zones=(
            ZoneBoundary(0.0, 50.0, _CONCERNING),
            ZoneBoundary(50.0, 80.0, _CAUTION),
            ZoneBoundary(80.0, 100.0, _OPTIMAL),
        ),
    ),
    # --- Mean Arterial Pressure ---
    # Flow readings are only valid inside a normal pressure window,
    # so both tails are concerning
    "MAP": MetricRange(
        min=0.0,
        max=200.0,
        unit="mmHg",
        label="Mean Arterial Pressure",
        zones=(
            ZoneBoundary(0.0, 60.0, _CONCERNING),
            ZoneBoundary(60.0, 70.0, _CAUTION),
            ZoneBoundary(70.0, 105.0, _OPTIMAL),
            ZoneBoundary(105.0, 120.0, _CAUTION),
            ZoneBoundary(120.0, 200.0, _CONCERNING),
        ),
    ),
})


def format_reference_range(rr: MetricRange) -> str:
    """Format the optimal band(s) as a human-readable string."""
    unit = f" {rr.unit}" if rr.unit else ""
    bands = [f"{z.start:g}-{z.end:g}" for z in rr.zones if z.category is _OPTIMAL]
    if not bands:
        return "N/A"
    return ", ".join(bands) + unit


def classify_value(value: float, metric_range: MetricRange) -> ZoneCategory:
    """Return the zone category containing *value*.

    The value is clamped to the display range first, so readings past
    either end take the colour of the end zone. Zones are checked in
    order with inclusive bounds; a value on a shared boundary belongs to
    the earlier zone. Anything that cannot be placed (non-finite input,
    zones that do not cover the value) falls back to CONCERNING.
    """
    if not math.isfinite(value):
        logger.debug("Non-finite value %r; using %s", value, _CONCERNING.value)
        return _CONCERNING

    clamped = max(metric_range.min, min(metric_range.max, value))

    for zone in metric_range.zones:
        if zone.start <= clamped <= zone.end:
            return zone.category

    logger.debug(
        "No zone of '%s' contains %r; using %s",
        metric_range.label, clamped, _CONCERNING.value,
    )
    return _CONCERNING


def get_zone_for_value(
    metric_key: str,
    value: float,
    ranges: Mapping[str, MetricRange] = REFERENCE_RANGES,
) -> ZoneCategory:
    """Classify *value* against the range registered under *metric_key*."""
    return classify_value(value, ranges[metric_key])
