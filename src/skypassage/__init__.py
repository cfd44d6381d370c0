# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sky Passage

Apparent position of the Sun for an observer on Earth, and the UTC
instants of its rising, meridian transit and setting on a calendar date.
Includes Dynamical Time conversion via a delta-T table, low-order
nutation and obliquity, Greenwich sidereal time, horizontal coordinates,
civil/nautical/astronomical twilight, and CSV export of daily passage
tables. Based on the low-accuracy algorithms of Meeus, "Astronomical
Algorithms" (2nd ed.).
"""

from skypassage.domain.coordinates import (
    EquatorialCoordinates,
    HorizontalCoordinates,
)
from skypassage.domain.time_systems import (
    DynamicalTime,
    centuries_since_j2000,
    delta_t,
    julian_day,
    td_to_ut,
    ut_to_td,
)
from skypassage.domain.sidereal_time import (
    apparent_sidereal_time,
    mean_sidereal_time,
)
from skypassage.ports import CelestialBody
from skypassage.domain.bodies import (
    Sun,
    equatorial_coordinates,
    standard_altitude,
)
from skypassage.domain.local_coordinates import local_coordinates
from skypassage.domain.passages import (
    PassageConvergenceError,
    PassageResult,
    Twilight,
    Visibility,
    day_length,
    passage_table,
    passages,
)

__version__ = "0.2.0"

__all__ = [
    "CelestialBody",
    "DynamicalTime",
    "EquatorialCoordinates",
    "HorizontalCoordinates",
    "PassageConvergenceError",
    "PassageResult",
    "Sun",
    "Twilight",
    "Visibility",
    "apparent_sidereal_time",
    "centuries_since_j2000",
    "day_length",
    "delta_t",
    "equatorial_coordinates",
    "julian_day",
    "local_coordinates",
    "mean_sidereal_time",
    "passage_table",
    "passages",
    "standard_altitude",
    "td_to_ut",
    "ut_to_td",
]
