# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for celestial bodies.

Concrete bodies (the Sun, and later the Moon or planets) implement this
contract; the local-coordinate transform and the passage solver only
depend on it.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from skypassage.domain.coordinates import EquatorialCoordinates


@runtime_checkable
class CelestialBody(Protocol):
    """Port for a body whose apparent position can be computed."""

    def equatorial_coordinates(self, instant: datetime) -> EquatorialCoordinates:
        """
        Apparent right ascension and declination of the body.

        Args:
            instant: UTC datetime. Implementations convert to Dynamical
                Time themselves where their theory requires it.

        Returns:
            EquatorialCoordinates in radians.
        """
        ...

    def standard_altitude(self) -> float:
        """
        Geometric altitude of the body's centre at apparent rising or
        setting, degrees. Accounts for the body's angular size and
        standard refraction at the horizon.
        """
        ...
