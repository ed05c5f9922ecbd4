"""Tests for the gauge geometry engine."""

import math
import re

import pytest

from graftgauge.gauge.geometry import (
    NON_FINITE_DISPLAY,
    _format_number,
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

_PATH = re.compile(
    r"^M (\S+) (\S+) A (\S+) (\S+) 0 ([01]) ([01]) (\S+) (\S+)$"
)


def _parse_path(path: str) -> dict:
    m = _PATH.match(path)
    assert m is not None, path
    sx, sy, rx, ry, large, sweep, ex, ey = m.groups()
    return {
        "start": (float(sx), float(sy)),
        "radius": (float(rx), float(ry)),
        "large_arc": int(large),
        "sweep": int(sweep),
        "end": (float(ex), float(ey)),
    }


class TestClampValue:
    def test_inside_range_unchanged(self):
        assert clamp_value(5, 0, 10) == 5

    def test_below_min(self):
        assert clamp_value(-3, 0, 10) == 0

    def test_above_max(self):
        assert clamp_value(42, 0, 10) == 10

    def test_nan_clamps_to_min(self):
        assert clamp_value(float("nan"), 2, 10) == 2

    def test_infinities(self):
        assert clamp_value(float("inf"), 0, 10) == 10
        assert clamp_value(float("-inf"), 0, 10) == 0


class TestValueToPercentage:
    @pytest.mark.parametrize("value", [0, -1, -1000, float("-inf")])
    def test_at_or_below_min_is_zero(self, value):
        assert value_to_percentage(value, 0, 200) == 0.0

    @pytest.mark.parametrize("value", [200, 201, 1e9, float("inf")])
    def test_at_or_above_max_is_one(self, value):
        assert value_to_percentage(value, 0, 200) == 1.0

    def test_midpoint(self):
        assert value_to_percentage(50, 0, 100) == pytest.approx(0.5)

    def test_offset_range(self):
        assert value_to_percentage(60, 50, 70) == pytest.approx(0.5)

    @pytest.mark.parametrize("value", [-5, 0, 5, 10, float("nan"), float("inf")])
    def test_degenerate_range_is_zero(self, value):
        assert value_to_percentage(value, 10, 10) == 0.0

    def test_nan_is_zero(self):
        assert value_to_percentage(float("nan"), 0, 100) == 0.0

    def test_unbounded_range_is_zero(self):
        assert value_to_percentage(5, float("-inf"), float("inf")) == 0.0

    @pytest.mark.parametrize("value", [-1.5e308, 0.0, 1.5e308])
    def test_overflowing_span_is_zero(self, value):
        assert value_to_percentage(value, -1.5e308, 1.5e308) == 0.0


class TestPercentageToAngle:
    def test_endpoints(self):
        assert percentage_to_angle(0) == 180
        assert percentage_to_angle(1) == 0

    def test_midpoint(self):
        assert percentage_to_angle(0.5) == pytest.approx(90)

    def test_out_of_range_percentage_is_clamped(self):
        assert percentage_to_angle(-0.5) == 180
        assert percentage_to_angle(1.5) == 0

    def test_nan_is_left_end(self):
        assert percentage_to_angle(float("nan")) == 180


class TestValueToAngle:
    @pytest.mark.parametrize("value", [0, -10, float("-inf")])
    def test_at_or_below_min_is_180(self, value):
        assert value_to_angle(value, 0, 200) == 180

    @pytest.mark.parametrize("value", [200, 250, float("inf")])
    def test_at_or_above_max_is_0(self, value):
        assert value_to_angle(value, 0, 200) == 0

    def test_monotonically_non_increasing(self):
        angles = [value_to_angle(v / 4, 0, 200) for v in range(0, 801)]
        assert all(a >= b for a, b in zip(angles, angles[1:]))
        assert angles[0] == 180
        assert angles[-1] == 0

    def test_within_bounds(self):
        for v in (-50, 0, 33.3, 100, 199.9, 500):
            assert 0 <= value_to_angle(v, 0, 200) <= 180


class TestPolarToCartesian:
    def test_left_end(self):
        p = polar_to_cartesian(100, 100, 70, 180)
        assert p.x == pytest.approx(30)
        assert p.y == pytest.approx(100)

    def test_right_end(self):
        p = polar_to_cartesian(100, 100, 70, 0)
        assert p.x == pytest.approx(170)
        assert p.y == pytest.approx(100)

    def test_top_is_above_center(self):
        p = polar_to_cartesian(100, 100, 70, 90)
        assert p.x == pytest.approx(100)
        assert p.y == pytest.approx(30)

    def test_distance_from_center_is_radius(self):
        for angle in (0, 17, 45, 90, 133, 180):
            p = polar_to_cartesian(10, 20, 5, angle)
            assert math.hypot(p.x - 10, p.y - 20) == pytest.approx(5)

    @pytest.mark.parametrize("angle", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_angle_is_center(self, angle):
        p = polar_to_cartesian(100, 50, 70, angle)
        assert (p.x, p.y) == (100, 50)

    def test_non_finite_radius_is_center(self):
        p = polar_to_cartesian(100, 50, float("inf"), 45)
        assert (p.x, p.y) == (100, 50)


class TestDescribeArc:
    def test_full_arc_shape(self):
        parsed = _parse_path(describe_full_arc(100, 100, 70))
        assert parsed["start"] == (pytest.approx(30), pytest.approx(100))
        assert parsed["end"] == (pytest.approx(170), pytest.approx(100))
        assert parsed["radius"] == (70, 70)
        assert parsed["large_arc"] == 0
        assert parsed["sweep"] == 0

    def test_full_arc_matches_describe_arc(self):
        assert describe_full_arc(100, 100, 70) == describe_arc(100, 100, 70, 180, 0)

    def test_integral_numbers_have_no_decimal_point(self):
        path = describe_arc(100, 100, 70, 180, 0)
        assert path.startswith("M 30 ")
        assert " A 70 70 0 0 0 170 100" in path

    def test_quarter_arc(self):
        parsed = _parse_path(describe_arc(0, 0, 10, 180, 90))
        assert parsed["start"] == (pytest.approx(-10), pytest.approx(0))
        assert parsed["end"] == (pytest.approx(0, abs=1e-9), pytest.approx(-10))
        assert parsed["large_arc"] == 0

    def test_large_arc_flag_above_180(self):
        parsed = _parse_path(describe_arc(0, 0, 10, 270, 0))
        assert parsed["large_arc"] == 1

    def test_exactly_180_is_not_large(self):
        assert _parse_path(describe_arc(0, 0, 10, 0, 180))["large_arc"] == 0

    def test_sweep_is_fixed_regardless_of_direction(self):
        assert _parse_path(describe_arc(0, 0, 10, 0, 120))["sweep"] == 0
        assert _parse_path(describe_arc(0, 0, 10, 120, 0))["sweep"] == 0

    def test_fractional_radius(self):
        assert " A 52.5 52.5 0 " in describe_arc(0, 0, 52.5, 180, 0)

    def test_small_coordinates_are_positional(self):
        assert describe_arc(0.00005, 0, 0, 180, 0) == "M 0.00005 0 A 0 0 0 0 0 0.00005 0"

    def test_fractional_coordinates(self):
        path = describe_arc(0.25, -1.5, 0, 180, 0)
        assert path == "M 0.25 -1.5 A 0 0 0 0 0 0.25 -1.5"


class TestFormatNumber:
    @pytest.mark.parametrize("number, expected", [
        (0.0, "0"),
        (-0.0, "0"),
        (30.0, "30"),
        (-2.5, "-2.5"),
        (0.1, "0.1"),
        (99.99999999999999, "99.99999999999999"),
        (0.00005, "0.00005"),
        (0.000001, "0.000001"),
        (1.2345e-5, "0.000012345"),
        (9.5e-7, "9.5e-7"),
        (1e-7, "1e-7"),
        (1.5e-10, "1.5e-10"),
        (6.123233995736766e-17, "6.123233995736766e-17"),
        (1e16, "10000000000000000"),
        (1.2345678901234568e20, "123456789012345680000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (-1e21, "-1e+21"),
    ])
    def test_matches_template_literal_text(self, number, expected):
        assert _format_number(number) == expected

    def test_non_finite(self):
        assert _format_number(float("nan")) == "NaN"
        assert _format_number(float("inf")) == "Infinity"
        assert _format_number(float("-inf")) == "-Infinity"


class TestNeedlePosition:
    def test_min_points_left(self):
        n = calculate_needle_position(0, 0, 200, 100, 100, 62)
        assert n.angle == 180
        assert n.tip_x == pytest.approx(38)
        assert n.tip_y == pytest.approx(100)

    def test_max_points_right(self):
        n = calculate_needle_position(200, 0, 200, 100, 100, 62)
        assert n.angle == 0
        assert n.tip_x == pytest.approx(162)
        assert n.tip_y == pytest.approx(100)

    def test_midpoint_points_up(self):
        n = calculate_needle_position(100, 0, 200, 100, 100, 62)
        assert n.angle == pytest.approx(90)
        assert n.tip_x == pytest.approx(100)
        assert n.tip_y == pytest.approx(38)

    def test_nan_value_points_left(self):
        n = calculate_needle_position(float("nan"), 0, 200, 100, 100, 62)
        assert n.angle == 180
        assert n.tip_x == pytest.approx(38)

    def test_degenerate_range_points_left(self):
        n = calculate_needle_position(5, 5, 5, 100, 100, 62)
        assert n.angle == 180


class TestZoneToArcAngles:
    def test_lower_value_maps_to_higher_angle(self):
        angles = zone_to_arc_angles(15, 30, 0, 200)
        assert angles.start_angle == pytest.approx(166.5)
        assert angles.end_angle == pytest.approx(153)
        assert angles.start_angle > angles.end_angle

    def test_zone_covering_full_range(self):
        angles = zone_to_arc_angles(0, 200, 0, 200)
        assert angles.start_angle == 180
        assert angles.end_angle == 0

    def test_zone_past_range_is_clamped(self):
        angles = zone_to_arc_angles(-50, 500, 0, 200)
        assert angles.start_angle == 180
        assert angles.end_angle == 0


class TestFormatDisplayValue:
    def test_integer_ignores_decimal_places(self):
        assert format_display_value(3, 1) == "3"
        assert format_display_value(3.0, 2) == "3"

    def test_rounds_to_decimal_places(self):
        assert format_display_value(3.456, 1) == "3.5"
        assert format_display_value(3.456, 2) == "3.46"

    def test_zero_places_rounds(self):
        assert format_display_value(3.456, 0) == "3"
        assert format_display_value(3.5, 0) == "4"
        assert format_display_value(2.5, 0) == "3"

    def test_pads_trailing_zeros(self):
        assert format_display_value(2.1, 3) == "2.100"

    def test_half_rounds_up_at_decimal_places(self):
        assert format_display_value(0.125, 2) == "0.13"

    def test_default_is_one_decimal(self):
        assert format_display_value(1.26) == "1.3"

    def test_negative(self):
        assert format_display_value(-1.25, 1) == "-1.3"
        assert format_display_value(-4, 1) == "-4"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        assert format_display_value(value, 1) == NON_FINITE_DISPLAY

    def test_many_decimal_places(self):
        assert format_display_value(0.1, 30) == "0.100000000000000005551115123126"
        assert format_display_value(1234567890123.5, 20) == "1234567890123.50000000000000000000"

    def test_decimal_places_capped_at_100(self):
        text = format_display_value(0.5, 150)
        assert text.startswith("0.5")
        assert len(text.split(".")[1]) == 100

    def test_tiny_value_stays_positional(self):
        assert format_display_value(1e-10, 12) == "0.000000000100"

    def test_huge_integers_use_exponent(self):
        assert format_display_value(1e21, 1) == "1e+21"
        assert format_display_value(2e22, 0) == "2e+22"


class TestScenarios:
    def test_low_mean_flow(self):
        assert value_to_percentage(10, 0, 200) == pytest.approx(0.05)
        assert value_to_angle(10, 0, 200) == pytest.approx(171)
