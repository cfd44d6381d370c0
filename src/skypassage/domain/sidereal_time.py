# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Greenwich sidereal time.

Mean sidereal time from the IAU 1982 polynomial in Julian Day, and
apparent sidereal time corrected for the equation of the equinoxes.
Results are in degrees, reduced to [0, 360).

The instant is used on whatever scale it is given in; callers pass
civil UTC or a ``DynamicalTime`` as their formula requires.
"""
import math

from skypassage.domain.conversions import deg_to_rad, normalize_degrees
from skypassage.domain.nutation import nutation_in_longitude, true_obliquity
from skypassage.domain.time_systems import (
    J2000_JD,
    Instant,
    centuries_since_j2000,
    julian_day,
)


def mean_sidereal_time(instant: Instant) -> float:
    """Mean sidereal time at Greenwich, degrees, Meeus Eqn (12.4)."""
    jd = julian_day(instant)
    t = centuries_since_j2000(instant)
    theta = (280.46061837
             + 360.98564736629 * (jd - J2000_JD)
             + 0.000387933 * math.pow(t, 2)
             + math.pow(t, 3) / -38710000)
    return normalize_degrees(theta)


def apparent_sidereal_time(instant: Instant) -> float:
    """Apparent sidereal time at Greenwich, degrees.

    Adds the equation of the equinoxes, delta psi * cos(epsilon), to the
    mean sidereal time (Meeus Ch. 12).
    """
    t = centuries_since_j2000(instant)
    equation_of_equinoxes = (nutation_in_longitude(t)
                             * math.cos(deg_to_rad(true_obliquity(t))))
    return normalize_degrees(mean_sidereal_time(instant) + equation_of_equinoxes)
