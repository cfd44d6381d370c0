# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Celestial bodies.

Low-accuracy analytical Sun from Meeus "Astronomical Algorithms" Ch. 25,
with the simplified nutation and aberration corrections of that chapter.
Accuracy ~0.01 deg, sufficient for daylength and sun-angle estimates.

"""
import math
from datetime import datetime

from skypassage.domain.conversions import deg_to_rad, normalize_degrees
from skypassage.domain.coordinates import EquatorialCoordinates
from skypassage.domain.nutation import nutation_in_longitude, true_obliquity
from skypassage.domain.time_systems import centuries_since_j2000, ut_to_td
from skypassage.ports import CelestialBody

_SUN_STANDARD_ALTITUDE_DEG: float = -5.0 / 6.0
_SUN_ABERRATION_DEG: float = -0.00569


class Sun:
    """The Sun as seen from the geocentre. Stateless."""

    def equatorial_coordinates(self, instant: datetime) -> EquatorialCoordinates:
        """
        Apparent right ascension and declination of the Sun.

        Args:
            instant: UTC datetime (naive values are taken as UTC).

        Returns:
            EquatorialCoordinates with RA in (-pi, pi] and declination,
            both in radians.
        """
        t = centuries_since_j2000(ut_to_td(instant))

        # Geometric mean longitude, mean equinox of the date, Eqn (25.2)
        l0 = normalize_degrees(280.46646
                               + 36000.76983 * t
                               + 0.0003032 * math.pow(t, 2))
        # Mean anomaly, Eqn (25.3)
        m = (357.52911
             + 35999.05029 * t
             + -0.0001537 * math.pow(t, 2))
        m_rad = deg_to_rad(m)

        # Equation of the centre
        c = ((1.914602 - 0.004817 * t - 0.000014 * math.pow(t, 2)) * math.sin(m_rad)
             + (0.019993 - 0.000101 * t) * math.sin(2 * m_rad)
             + 0.000289 * math.sin(3 * m_rad))

        true_longitude = l0 + c
        apparent_longitude = true_longitude + _SUN_ABERRATION_DEG + nutation_in_longitude(t)
        lam = deg_to_rad(apparent_longitude)
        eps = deg_to_rad(true_obliquity(t))

        # Eqns (25.6) and (25.7)
        ra_rad = math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam))
        dec_rad = math.asin(math.sin(eps) * math.sin(lam))

        return EquatorialCoordinates(right_ascension_rad=ra_rad, declination_rad=dec_rad)

    def standard_altitude(self) -> float:
        """-50' : solar semi-diameter 16' plus 34' of horizontal refraction (Meeus Ch. 15)."""
        return _SUN_STANDARD_ALTITUDE_DEG

    def __repr__(self) -> str:
        return "Sun()"


def equatorial_coordinates(body: CelestialBody, instant: datetime) -> EquatorialCoordinates:
    """Apparent equatorial coordinates of ``body`` at a UTC instant."""
    return body.equatorial_coordinates(instant)


def standard_altitude(body: CelestialBody) -> float:
    """Standard altitude of ``body`` at rising/setting, degrees."""
    return body.standard_altitude()
