# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Local (horizontal) coordinates of a celestial body.

Projects apparent equatorial coordinates onto the horizon of an observer
given by geographic longitude (east positive) and latitude (north
positive), Meeus Ch. 13. Refraction is not applied.

"""
import math
from datetime import datetime

import numpy as np

from skypassage.domain.conversions import deg_to_rad
from skypassage.domain.coordinates import HorizontalCoordinates
from skypassage.domain.sidereal_time import apparent_sidereal_time
from skypassage.domain.time_systems import ut_to_td
from skypassage.ports import CelestialBody


def validate_observer(longitude_deg: float, latitude_deg: float) -> None:
    """
    Reject observer coordinates the horizontal-coordinate formulas cannot handle.

    Raises:
        ValueError: If either coordinate is not finite, or the latitude
            is at or beyond a pole (cos(lat) = 0 divides by zero).
    """
    if not np.all(np.isfinite([longitude_deg, latitude_deg])):
        raise ValueError(
            f"Observer coordinates must be finite, got "
            f"longitude={longitude_deg}, latitude={latitude_deg}"
        )
    if abs(latitude_deg) >= 90.0:
        raise ValueError(
            f"Latitude must be strictly between -90 and 90 degrees, got {latitude_deg}"
        )


def local_coordinates(
    body: CelestialBody,
    instant: datetime,
    longitude_deg: float,
    latitude_deg: float,
) -> HorizontalCoordinates:
    """
    Compute azimuth and altitude of a body for an observer.

    Args:
        body: Body implementing the CelestialBody port.
        instant: UTC datetime.
        longitude_deg: Observer longitude, degrees east of Greenwich.
        latitude_deg: Observer latitude, degrees north of the equator.

    Returns:
        HorizontalCoordinates with azimuth (westward from south) and
        altitude, both in radians.

    Raises:
        ValueError: On non-finite coordinates or a polar latitude.
    """
    validate_observer(longitude_deg, latitude_deg)

    coords = body.equatorial_coordinates(instant)
    ra = coords.right_ascension_rad
    dec = coords.declination_rad
    lon = deg_to_rad(longitude_deg)
    lat = deg_to_rad(latitude_deg)

    theta0 = deg_to_rad(apparent_sidereal_time(ut_to_td(instant)))
    # Local hour angle; longitude is added since it is east positive here
    hour_angle = theta0 + lon - ra

    # Eqns (13.5) and (13.6)
    azimuth = math.atan2(
        math.sin(hour_angle),
        math.cos(hour_angle) * math.sin(lat) - math.tan(dec) * math.cos(lat),
    )
    altitude = math.asin(
        math.sin(lat) * math.sin(dec)
        + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
    )

    return HorizontalCoordinates(azimuth_rad=azimuth, altitude_rad=altitude)
