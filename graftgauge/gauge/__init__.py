from .geometry import (
    calculate_needle_position,
    clamp_value,
    describe_arc,
    describe_full_arc,
    format_display_value,
    percentage_to_angle,
    polar_to_cartesian,
    value_to_angle,
    value_to_percentage,
    zone_to_arc_angles,
)

__all__ = [
    "calculate_needle_position",
    "clamp_value",
    "describe_arc",
    "describe_full_arc",
    "format_display_value",
    "percentage_to_angle",
    "polar_to_cartesian",
    "value_to_angle",
    "value_to_percentage",
    "zone_to_arc_angles",
]
