"""
Authoring-time checks for reference-range tables.

Classification trusts the table it is given: zones are scanned in order
and the first inclusive match wins. These checks catch tables for which
that rule would give surprising answers (gaps, overlaps, unsorted zones)
before they reach a gauge.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping

from .reference_ranges import MetricRange

logger = logging.getLogger(__name__)


class ReferenceRangeError(ValueError):
    """Raised when a reference-range table is malformed."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(
            f"{len(problems)} reference range problem(s): " + "; ".join(problems)
        )


def find_range_problems(metric_range: MetricRange) -> list[str]:
    """Return a description of every problem in *metric_range*."""
    problems: list[str] = []
    lo, hi = metric_range.min, metric_range.max

    if not (math.isfinite(lo) and math.isfinite(hi)):
        problems.append(f"bounds must be finite (min={lo}, max={hi})")
        return problems
    if lo >= hi:
        problems.append(f"min ({lo:g}) must be less than max ({hi:g})")

    zones = metric_range.zones
    if not zones:
        problems.append("no zones defined")
        return problems

    for i, zone in enumerate(zones):
        if zone.start > zone.end:
            problems.append(f"zone {i} starts after it ends ({zone.start:g} > {zone.end:g})")

    if zones[0].start != lo:
        problems.append(f"first zone starts at {zones[0].start:g}, not at min {lo:g}")
    if zones[-1].end != hi:
        problems.append(f"last zone ends at {zones[-1].end:g}, not at max {hi:g}")

    for i, (prev, cur) in enumerate(zip(zones, zones[1:]), start=1):
        if cur.start < prev.start:
            problems.append(f"zone {i} is out of order (starts at {cur.start:g} after {prev.start:g})")
        elif cur.start > prev.end:
            problems.append(f"gap between zone {i - 1} and zone {i} ({prev.end:g} to {cur.start:g})")
        elif cur.start < prev.end:
            problems.append(f"zone {i - 1} and zone {i} overlap ({cur.start:g} to {prev.end:g})")

    return problems


def validate_reference_ranges(ranges: Mapping[str, MetricRange]) -> None:
    """Raise ReferenceRangeError listing every problem across *ranges*."""
    problems: list[str] = []
    for key, metric_range in ranges.items():
        for problem in find_range_problems(metric_range):
            problems.append(f"{key}: {problem}")

    if problems:
        raise ReferenceRangeError(problems)
    logger.info("Validated %d reference ranges", len(ranges))
