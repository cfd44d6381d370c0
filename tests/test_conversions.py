# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for angle unit conversions."""
import math

import pytest

from skypassage.domain.conversions import (
    deg_to_rad,
    dms_to_deg,
    hms_to_deg,
    normalize_degrees,
    rad_to_deg,
)


# ── Degrees / radians ─────────────────────────────────────────────

class TestDegreesRadians:

    def test_half_turn_to_radians(self):
        assert deg_to_rad(180) == math.pi

    def test_half_turn_to_degrees(self):
        assert rad_to_deg(math.pi) == 180.0

    def test_zero(self):
        assert deg_to_rad(0.0) == 0.0
        assert rad_to_deg(0.0) == 0.0

    @pytest.mark.parametrize("x", [-720.5, -90.0, 0.1, 23.4392911, 359.999, 1e6])
    def test_round_trip_degrees(self, x):
        """rad_to_deg(deg_to_rad(x)) recovers x to machine precision."""
        assert rad_to_deg(deg_to_rad(x)) == pytest.approx(x, rel=1e-15, abs=1e-15)

    @pytest.mark.parametrize("x", [-math.pi, -1.0, 0.5, 2.0 * math.pi, 100.0])
    def test_round_trip_radians(self, x):
        assert deg_to_rad(rad_to_deg(x)) == pytest.approx(x, rel=1e-15, abs=1e-15)


# ── Sexagesimal ───────────────────────────────────────────────────

class TestSexagesimal:

    def test_time_angle_meeus_example_1a(self):
        """9h14m55.8s = 138.7325 deg (Meeus Example 1.a)."""
        assert f"{hms_to_deg(9, 14, 55.8):.5f}" == "138.73250"

    def test_arc_angle_meeus_example_1a(self):
        """23 deg 26' 44" = 21101/900 deg."""
        assert dms_to_deg(23, 26, 44) == pytest.approx(21101 / 900, abs=1e-13)

    def test_one_hour_is_fifteen_degrees(self):
        assert hms_to_deg(1, 0, 0) == 15.0

    def test_negative_arcseconds(self):
        """Arcseconds alone carry the sign for small angles."""
        assert dms_to_deg(0, 0, -36.0) == pytest.approx(-0.01, abs=1e-15)


# ── Normalisation ─────────────────────────────────────────────────

class TestNormalizeDegrees:

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (359.5, 359.5),
        (360.0, 0.0),
        (720.25, 0.25),
        (-30.0, 330.0),
        (-360.0, 0.0),
    ])
    def test_reduces_into_range(self, angle, expected):
        assert normalize_degrees(angle) == pytest.approx(expected, abs=1e-12)

    def test_tiny_negative_stays_below_360(self):
        """A value just below zero must not come back as 360."""
        result = normalize_degrees(-1e-20)
        assert 0.0 <= result < 360.0
