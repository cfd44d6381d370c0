# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Rising, transit and setting of a celestial body.

Meeus "Astronomical Algorithms" Ch. 15. The body's apparent position is
sampled at 0h on the day before, the day of, and the day after the
requested date. First estimates of the event times (as fractions of a
day after 0h UT) come from the approximate hour angle at the threshold
altitude. They are then refined together by interpolating right
ascension and declination until every correction falls below the
requested precision.

"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum

import numpy as np

from skypassage.domain.conversions import deg_to_rad, rad_to_deg
from skypassage.domain.local_coordinates import validate_observer
from skypassage.domain.sidereal_time import apparent_sidereal_time
from skypassage.domain.time_systems import delta_t
from skypassage.ports import CelestialBody

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

DEFAULT_PRECISION_DEG: float = 0.1
DEFAULT_MAX_ITERATIONS: int = 100

SIDEREAL_DEGREES_PER_DAY: float = 360.985647
MILLISECONDS_PER_DAY: int = 86_400_000

_TRANSIT, _RISING, _SETTING = 0, 1, 2


class Twilight(Enum):
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"

    @property
    def altitude_deg(self) -> float:
        """Sun altitude bounding this twilight (USNO definitions)."""
        return _TWILIGHT_ALTITUDE_DEG[self]


_TWILIGHT_ALTITUDE_DEG: dict[Twilight, float] = {
    Twilight.CIVIL: -6.0,
    Twilight.NAUTICAL: -12.0,
    Twilight.ASTRONOMICAL: -18.0,
}


class Visibility(Enum):
    """Whether the body crosses the threshold altitude on the date."""
    REGULAR = "regular"
    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"


class PassageConvergenceError(RuntimeError):
    """Refinement did not reach the requested precision within the iteration cap."""

    def __init__(self, iterations: int, max_correction_deg: float, precision_deg: float):
        self.iterations = iterations
        self.max_correction_deg = max_correction_deg
        self.precision_deg = precision_deg
        super().__init__(
            f"Passage refinement did not converge after {iterations} iterations: "
            f"last correction {max_correction_deg:.6g} deg, "
            f"requested precision {precision_deg:.6g} deg"
        )


@dataclass(frozen=True)
class PassageResult:
    """Rising, transit and setting instants (UTC) for one date and place.

    For ALWAYS_ABOVE / ALWAYS_BELOW the rising and setting instants are
    the clamped first estimates, not true horizon crossings.

    When the first transit estimate falls before 0h UT, the transit is
    refined onto that earlier meridian crossing and then shifted by one
    solar day. That is exact for the Sun, whose right ascension advances
    about 0.9856 deg per day. A body with a fixed right ascension then
    gets a transit about 3m56s late.
    """
    rising: datetime
    transit: datetime
    setting: datetime
    visibility: Visibility
    iterations: int


@dataclass(frozen=True)
class _PassageContext:
    """Quantities fixed for the whole refinement of one date."""
    theta0_deg: float
    longitude_deg: float
    latitude_rad: float
    threshold_deg: float
    ra_deg: np.ndarray
    dec_rad: np.ndarray
    delta_t_days: float
    refine_rise_set: bool


def _interpolate(values: np.ndarray, n: np.ndarray) -> np.ndarray:
    """Three-point interpolation about the middle value, Meeus Eqn (3.3)."""
    v0, v1, v2 = values
    a = v1 - v0
    b = v2 - v1
    c = b - a
    return v1 + (n * (a + b + n * c)) / 2


def _resolve_threshold(body: CelestialBody, twilight: Twilight | str | None) -> float:
    if twilight is None or twilight == "none":
        return body.standard_altitude()
    return Twilight(twilight).altitude_deg


def _approximate_hour_angle(
    threshold_deg: float,
    latitude_rad: float,
    declination_rad: float,
) -> tuple[float, Visibility]:
    """Hour angle at the threshold altitude, degrees in [0, 180], Meeus Eqn (15.1).

    cos(H0) outside [-1, 1] is clamped: the body stays below (H0 = 0) or
    above (H0 = 180) the threshold all day.
    """
    cos_h0 = ((math.sin(deg_to_rad(threshold_deg))
               - math.sin(latitude_rad) * math.sin(declination_rad))
              / (math.cos(latitude_rad) * math.cos(declination_rad)))
    if cos_h0 > 1:
        return 0.0, Visibility.ALWAYS_BELOW
    if cos_h0 < -1:
        return rad_to_deg(math.acos(-1)), Visibility.ALWAYS_ABOVE
    return rad_to_deg(math.acos(cos_h0)), Visibility.REGULAR


def _refine(m: np.ndarray, ctx: _PassageContext) -> tuple[np.ndarray, float]:
    """One simultaneous correction step for [transit, rising, setting].

    Returns the corrected day fractions and the largest absolute
    correction, in days.
    """
    n = m + ctx.delta_t_days
    ra = _interpolate(ctx.ra_deg, n)
    dec = _interpolate(ctx.dec_rad, n)
    theta = ctx.theta0_deg + SIDEREAL_DEGREES_PER_DAY * m
    h = theta + ctx.longitude_deg - ra

    delta = np.zeros(3)
    delta[_TRANSIT] = h[_TRANSIT] / -360

    if ctx.refine_rise_set:
        lat = ctx.latitude_rad
        dec_rs = dec[_RISING:]
        h_rs = deg_to_rad(h[_RISING:])
        altitude = rad_to_deg(np.arcsin(
            math.sin(lat) * np.sin(dec_rs)
            + math.cos(lat) * np.cos(dec_rs) * np.cos(h_rs)
        ))
        delta[_RISING:] = ((altitude - ctx.threshold_deg)
                           / (360 * np.cos(dec_rs) * math.cos(lat) * np.sin(h_rs)))

    return m + delta, float(np.max(np.abs(delta)))


def _split_transit(m: float) -> tuple[float, float]:
    fraction = m % 1
    return fraction, fraction - m


def _split_rise_set(m: float) -> tuple[float, float]:
    fraction = m % 1
    return fraction, m - fraction


def passages(
    body: CelestialBody,
    day: date,
    longitude_deg: float,
    latitude_deg: float,
    twilight: Twilight | str | None = None,
    precision_deg: float = DEFAULT_PRECISION_DEG,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> PassageResult:
    """
    Compute the UTC instants of rising, transit and setting of a body.

    Args:
        body: Body implementing the CelestialBody port.
        day: Calendar date (a datetime is reduced to its date).
        longitude_deg: Observer longitude, degrees east of Greenwich.
        latitude_deg: Observer latitude, degrees north of the equator.
        twilight: Use the civil/nautical/astronomical twilight altitude
            instead of the body's standard altitude. None or "none"
            keeps the standard altitude.
        precision_deg: Iterate until every correction, expressed in
            degrees of rotation, is at most this value.
        max_iterations: Upper bound on refinement steps.

    Returns:
        PassageResult with the three instants, the visibility class and
        the number of refinement steps taken.

    Raises:
        ValueError: On a non-positive or non-finite precision, a
            max_iterations below 1, an unknown twilight, non-finite
            coordinates or a polar latitude.
        PassageConvergenceError: If max_iterations steps do not reach
            the requested precision.
    """
    validate_observer(longitude_deg, latitude_deg)
    if not math.isfinite(precision_deg) or precision_deg <= 0:
        raise ValueError(f"precision_deg must be positive, got {precision_deg}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

    threshold_deg = _resolve_threshold(body, twilight)
    if isinstance(day, datetime):
        day = day.date()
    anchor = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

    m, offsets, ctx, visibility = _first_estimates(
        body, anchor, longitude_deg, latitude_deg, threshold_deg,
    )

    tolerance_days = precision_deg / 360
    max_correction = math.inf
    for iteration in range(1, max_iterations + 1):
        m, max_correction = _refine(m, ctx)
        logger.debug(
            "%s on %s, iteration %d: max correction %.3e deg",
            body, day, iteration, max_correction * 360,
        )
        if max_correction <= tolerance_days:
            break
    else:
        raise PassageConvergenceError(max_iterations, max_correction * 360, precision_deg)

    transit, rising, setting = (
        anchor + timedelta(milliseconds=int(days * MILLISECONDS_PER_DAY))
        for days in (m + offsets)
    )
    return PassageResult(
        rising=rising,
        transit=transit,
        setting=setting,
        visibility=visibility,
        iterations=iteration,
    )


def _first_estimates(
    body: CelestialBody,
    anchor: datetime,
    longitude_deg: float,
    latitude_deg: float,
    threshold_deg: float,
) -> tuple[np.ndarray, np.ndarray, _PassageContext, Visibility]:
    """Day fractions and day offsets for [transit, rising, setting], Meeus Eqn (15.2).

    Also returns the refinement context for ``anchor`` (0h UT) and the
    visibility class.
    """
    lat = deg_to_rad(latitude_deg)

    theta0 = apparent_sidereal_time(anchor)

    one_day = timedelta(days=1)
    samples = [body.equatorial_coordinates(t) for t in (anchor - one_day, anchor, anchor + one_day)]
    ra1, ra2, ra3 = (rad_to_deg(s.right_ascension_rad) for s in samples)
    # Unwrap across the +/-180 boundary so the samples can be interpolated
    if ra1 > ra2:
        ra1 -= 360
    if ra3 < ra2:
        ra3 += 360
    dec = np.array([s.declination_rad for s in samples])

    h0, visibility = _approximate_hour_angle(threshold_deg, lat, float(dec[1]))

    m_transit, d_transit = _split_transit((ra2 - longitude_deg - theta0) / 360)
    m_rising, d_rising = _split_rise_set(m_transit - h0 / 360)
    m_setting, d_setting = _split_rise_set(m_transit + h0 / 360)
    offsets = np.array([d_transit, d_rising, d_setting])

    ctx = _PassageContext(
        theta0_deg=theta0,
        longitude_deg=longitude_deg,
        latitude_rad=lat,
        threshold_deg=threshold_deg,
        ra_deg=np.array([ra1, ra2, ra3]),
        dec_rad=dec,
        delta_t_days=(delta_t(anchor) // timedelta(milliseconds=1)) / MILLISECONDS_PER_DAY,
        refine_rise_set=visibility is Visibility.REGULAR,
    )

    m = np.array([m_transit, m_rising, m_setting])
    return m, offsets, ctx, visibility


def passage_table(
    body: CelestialBody,
    start: date,
    end: date,
    longitude_deg: float,
    latitude_deg: float,
    **options,
) -> list[tuple[date, PassageResult]]:
    """
    Passages for every date from start to end inclusive.

    Keyword options are passed through to passages().

    Raises:
        ValueError: If end is before start.
    """
    if end < start:
        raise ValueError(f"End date {end} is before start date {start}")

    rows: list[tuple[date, PassageResult]] = []
    current = start
    while current <= end:
        rows.append((current, passages(body, current, longitude_deg, latitude_deg, **options)))
        current += timedelta(days=1)
    return rows


def day_length(result: PassageResult) -> timedelta:
    """Time from rising to setting."""
    return result.setting - result.rising
