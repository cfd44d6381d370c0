# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Time scales for solar-position work: UT, Dynamical Time and Julian Day.

UTC instants are plain ``datetime`` objects (naive values are treated as
UTC). Instants on the Dynamical Time (TD) scale are wrapped in
``DynamicalTime`` so the two scales never mix without an explicit
``ut_to_td`` / ``td_to_ut`` conversion.

References:
    Meeus, J. (1998). Astronomical Algorithms, 2nd ed., Ch. 7 and 10.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from skypassage.domain.delta_t import delta_t_for_year

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

J2000_JD: float = 2451545.0
"""Julian Day of the J2000.0 epoch."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

MICROSECONDS_PER_DAY: int = 86_400_000_000


# --------------------------------------------------------------------------- #
# Dynamical Time value object
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, order=True)
class DynamicalTime:
    """An instant on the Dynamical Time scale.

    ``moment`` is the TD calendar reading. It carries a zero-offset tzinfo
    only so that it can be compared and shifted like a UTC datetime.
    """

    moment: datetime

    def __post_init__(self) -> None:
        if self.moment.tzinfo is None:
            object.__setattr__(self, "moment", self.moment.replace(tzinfo=timezone.utc))

    @property
    def year(self) -> int:
        return self.moment.year

    def __add__(self, delta: timedelta) -> "DynamicalTime":
        if not isinstance(delta, timedelta):
            return NotImplemented
        return DynamicalTime(self.moment + delta)

    def __sub__(self, delta: timedelta) -> "DynamicalTime":
        if not isinstance(delta, timedelta):
            return NotImplemented
        return DynamicalTime(self.moment - delta)


Instant = datetime | DynamicalTime


def as_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime. Naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _calendar_reading(instant: Instant) -> datetime:
    if isinstance(instant, DynamicalTime):
        return instant.moment
    return as_utc(instant)


# --------------------------------------------------------------------------- #
# Delta T and scale conversion
# --------------------------------------------------------------------------- #

def delta_t(instant: Instant) -> timedelta:
    """Return TD - UT for the calendar year of ``instant``."""
    return delta_t_for_year(_calendar_reading(instant).year)


def ut_to_td(dt: datetime) -> DynamicalTime:
    """Convert a UTC instant to Dynamical Time.

    Raises:
        TypeError: If ``dt`` is already a Dynamical Time instant.
    """
    if isinstance(dt, DynamicalTime) or not isinstance(dt, datetime):
        raise TypeError(f"ut_to_td expects a UTC datetime, got {type(dt).__name__}")
    dt = as_utc(dt)
    return DynamicalTime(dt + delta_t(dt))


def td_to_ut(td: DynamicalTime) -> datetime:
    """Convert a Dynamical Time instant to UTC.

    Raises:
        TypeError: If ``td`` is not a ``DynamicalTime``.
    """
    if not isinstance(td, DynamicalTime):
        raise TypeError(f"td_to_ut expects a DynamicalTime, got {type(td).__name__}")
    return td.moment - delta_t(td)


# --------------------------------------------------------------------------- #
# Calendar helpers
# --------------------------------------------------------------------------- #

def day_of_year(instant: Instant) -> int:
    """Ordinal day of the year, 1 for January 1st."""
    return _calendar_reading(instant).timetuple().tm_yday


def decimal_day(instant: Instant) -> float:
    """Day of month with the time of day as a fraction (6h on the 25th -> 25.25)."""
    dt = _calendar_reading(instant)
    us_of_day = (
        ((dt.hour * 60 + dt.minute) * 60 + dt.second) * 1_000_000
        + dt.microsecond
    )
    return (dt.day * MICROSECONDS_PER_DAY + us_of_day) / MICROSECONDS_PER_DAY


def julian_day(instant: Instant) -> float:
    """Julian Day of an instant in the Gregorian calendar, Meeus Eqn (7.1)."""
    dt = _calendar_reading(instant)
    if dt.month > 2:
        y, m = dt.year, dt.month
    else:
        y, m = dt.year - 1, dt.month + 12

    a = int(y / 100)
    b = int(a / 4) + (2 - a)

    return (int(365.25 * (y + 4716))
            + int(30.6 * (m + 1))
            + decimal_day(dt)
            + b
            - 1524.5)


def centuries_since_j2000(instant: Instant) -> float:
    """Julian centuries elapsed since J2000.0, Meeus Eqn (12.1)."""
    return (julian_day(instant) - J2000_JD) / DAYS_PER_JULIAN_CENTURY
