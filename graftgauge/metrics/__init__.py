from .reference_ranges import (
    DEFAULT_METRIC_VALUES,
    METRIC_KEYS,
    REFERENCE_RANGES,
    MetricRange,
    ZoneBoundary,
    classify_value,
    get_zone_for_value,
)
from .validation import ReferenceRangeError, find_range_problems, validate_reference_ranges

__all__ = [
    "DEFAULT_METRIC_VALUES",
    "METRIC_KEYS",
    "REFERENCE_RANGES",
    "MetricRange",
    "ZoneBoundary",
    "classify_value",
    "get_zone_for_value",
    "ReferenceRangeError",
    "find_range_problems",
    "validate_reference_ranges",
]
