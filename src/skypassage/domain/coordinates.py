# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Sky coordinate value objects shared by bodies, transforms and the solver."""
from dataclasses import dataclass


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Apparent equatorial position of a body at an instant.

    right_ascension_rad: Right ascension, radians, as returned by atan2
        (range (-pi, pi]); the passage solver unwraps it as needed.
    declination_rad: Declination north of the celestial equator, radians.
    """
    right_ascension_rad: float
    declination_rad: float


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Local horizontal position of a body for an observer.

    azimuth_rad: Azimuth measured westward from the south, radians.
    altitude_rad: Altitude above the horizon, radians (negative below).
    """
    azimuth_rad: float
    altitude_rad: float
