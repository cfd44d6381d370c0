# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle unit conversions.

Degree/radian and sexagesimal conversions following Meeus,
"Astronomical Algorithms" (2nd ed.), Ch. 1.
"""
import math

_DEG_TO_RAD: float = math.pi / 180.0
_RAD_TO_DEG: float = 180.0 / math.pi

_DEGREES_PER_HOUR: float = 15.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * _DEG_TO_RAD


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * _RAD_TO_DEG


def hms_to_deg(hours: float, minutes: float, seconds: float) -> float:
    """Convert a time angle (hours, minutes, seconds) to degrees.

    One hour of time angle is 15 degrees of arc.
    """
    total_hours = (seconds / 60.0 + minutes) / 60.0 + hours
    return total_hours * _DEGREES_PER_HOUR


def dms_to_deg(degrees: float, arcminutes: float, arcseconds: float) -> float:
    """Convert an arc angle (degrees, arcminutes, arcseconds) to degrees."""
    return (arcseconds / 60.0 + arcminutes) / 60.0 + degrees


def normalize_degrees(angle_deg: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    reduced = angle_deg % 360.0
    # -1e-20 % 360.0 rounds up to 360.0
    if reduced >= 360.0:
        return 0.0
    return reduced
