"""
Angle, arc and needle calculations for the semicircle gauge.

Coordinate system:
- SVG-style: Y grows downward
- Angles in degrees where 0 = 3 o'clock, 90 = 12 o'clock, 180 = 9 o'clock
- The gauge runs from 180 (left, range min) to 0 (right, range max),
  forming an upward-facing semicircle

These functions sit behind live keystroke input, so none of them raise
on odd numbers. Out-of-range values clamp, zero-width ranges read as 0%,
and NaN falls back to the left end of the dial.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from graftgauge.api.gauge_models import ArcAngles, NeedlePosition, Point

_DEG_TO_RAD = math.pi / 180

# Sweep flag 0 is counter-clockwise in SVG coordinates, which reads as
# clockwise on screen when going from the left end to the right end.
_SWEEP_FLAG = 0

_EXP_PADDING = re.compile(r"e([+-])0*(\d)")
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21

_MAX_DECIMAL_PLACES = 100

NON_FINITE_DISPLAY = "--"


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    """Clamp *value* into [min_value, max_value]. NaN clamps to min_value."""
    if math.isnan(value):
        return min_value
    return max(min_value, min(max_value, value))


def value_to_percentage(value: float, min_value: float, max_value: float) -> float:
    """Position of *value* within the range as 0.0-1.0."""
    if max_value == min_value:
        return 0.0
    span = max_value - min_value
    # Infinite, NaN or overflowing bounds
    if not math.isfinite(span):
        return 0.0
    clamped = clamp_value(value, min_value, max_value)
    return (clamped - min_value) / span


def percentage_to_angle(percentage: float) -> float:
    """0.0 -> 180 degrees (left), 1.0 -> 0 degrees (right)."""
    clamped = clamp_value(percentage, 0.0, 1.0)
    return 180 - clamped * 180


def value_to_angle(value: float, min_value: float, max_value: float) -> float:
    return percentage_to_angle(value_to_percentage(value, min_value, max_value))


def polar_to_cartesian(
    center_x: float, center_y: float, radius: float, angle_degrees: float
) -> Point:
    """Point on a circle, with the Y contribution flipped for a downward Y axis.

    A non-finite angle or radius collapses to the centre point.
    """
    if not (math.isfinite(angle_degrees) and math.isfinite(radius)):
        return Point(x=center_x, y=center_y)
    angle_radians = angle_degrees * _DEG_TO_RAD
    return Point(
        x=center_x + radius * math.cos(angle_radians),
        y=center_y - radius * math.sin(angle_radians),
    )


def _format_number(number: float) -> str:
    """Render a float the way a JavaScript template literal would."""
    if number == 0:
        return "0"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    text = repr(float(number))
    # Positional between 1e-6 and 1e21, shortest round-trip digits either way
    if _POSITIONAL_MIN <= abs(number) < _POSITIONAL_MAX:
        text = format(Decimal(text), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return _EXP_PADDING.sub(r"e\1\2", text)


def describe_arc(
    center_x: float,
    center_y: float,
    radius: float,
    start_angle_deg: float,
    end_angle_deg: float,
) -> str:
    """SVG path for the arc from *start_angle_deg* to *end_angle_deg*.

    Start is normally the higher (more left) angle; the arc is always drawn
    clockwise on screen.
    """
    start = polar_to_cartesian(center_x, center_y, radius, start_angle_deg)
    end = polar_to_cartesian(center_x, center_y, radius, end_angle_deg)

    angular_span = abs(start_angle_deg - end_angle_deg)
    large_arc_flag = 1 if angular_span > 180 else 0

    r = _format_number(radius)
    return (
        f"M {_format_number(start.x)} {_format_number(start.y)} "
        f"A {r} {r} 0 {large_arc_flag} {_SWEEP_FLAG} "
        f"{_format_number(end.x)} {_format_number(end.y)}"
    )


def describe_full_arc(center_x: float, center_y: float, radius: float) -> str:
    """The whole dial, left end to right end."""
    return describe_arc(center_x, center_y, radius, 180, 0)


def calculate_needle_position(
    value: float,
    min_value: float,
    max_value: float,
    center_x: float,
    center_y: float,
    length: float,
) -> NeedlePosition:
    angle = value_to_angle(value, min_value, max_value)
    tip = polar_to_cartesian(center_x, center_y, length, angle)
    return NeedlePosition(tip_x=tip.x, tip_y=tip.y, angle=angle)


def zone_to_arc_angles(
    zone_start: float, zone_end: float, range_min: float, range_max: float
) -> ArcAngles:
    """Angles for a zone band.

    The mapping is decreasing: the zone's lower value gives the higher
    (more left) start angle.
    """
    return ArcAngles(
        start_angle=value_to_angle(zone_start, range_min, range_max),
        end_angle=value_to_angle(zone_end, range_min, range_max),
    )


def format_display_value(value: float, decimal_places: int = 1) -> str:
    """Text for the value readout.

    Whole numbers, or any value when *decimal_places* is 0, show as
    integers. Otherwise exactly *decimal_places* digits follow the point.
    Halves round up (2.5 -> "3", 0.125 at 2 places -> "0.13"). At most
    100 decimal places are shown.
    """
    if not math.isfinite(value):
        return NON_FINITE_DISPLAY
    decimal_places = min(max(int(decimal_places), 0), _MAX_DECIMAL_PLACES)
    if float(value).is_integer() or decimal_places == 0:
        return _format_number(float(math.floor(value + 0.5)))
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        ctx.prec = len(str(int(abs(value)))) + decimal_places + 1
        return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")
