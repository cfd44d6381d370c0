# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Low-order nutation and obliquity of the ecliptic.

Single-term nutation driven by the longitude of the Moon's ascending
node, accurate to about 0.5" in longitude and 0.1" in obliquity. This
is enough for the low-accuracy solar position and apparent sidereal
time used elsewhere in the package.

All functions take ``t`` in Julian centuries since J2000.0.

References:
    Meeus, J. (1998). Astronomical Algorithms, 2nd ed., Ch. 22.
"""
import math

from skypassage.domain.conversions import deg_to_rad, dms_to_deg

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

_NUTATION_LONGITUDE_AMPLITUDE_DEG: float = -0.00478
_NUTATION_OBLIQUITY_AMPLITUDE_DEG: float = 0.00256


def _nutation_correction_factor(t: float) -> float:
    """Longitude of the Moon's ascending node on the ecliptic, radians."""
    return deg_to_rad(125.04 - 1934.136 * t)


def nutation_in_longitude(t: float) -> float:
    """Nutation in longitude (delta psi), degrees."""
    return _NUTATION_LONGITUDE_AMPLITUDE_DEG * math.sin(_nutation_correction_factor(t))


def nutation_in_obliquity(t: float) -> float:
    """Nutation in obliquity (delta epsilon), degrees."""
    return _NUTATION_OBLIQUITY_AMPLITUDE_DEG * math.cos(_nutation_correction_factor(t))


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic, degrees, Meeus Eqn (22.2).

    The IAU polynomial gives the arcsecond part on top of 23 deg 26'.
    """
    arcseconds = (21.448
                  + -46.8150 * t
                  + -0.00059 * math.pow(t, 2)
                  + 0.001813 * math.pow(t, 3))
    return dms_to_deg(23, 26, arcseconds)


def true_obliquity(t: float) -> float:
    """True obliquity of the ecliptic (mean plus nutation), degrees."""
    return mean_obliquity(t) + nutation_in_obliquity(t)
