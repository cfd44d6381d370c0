# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solar position and passages.

Usage:
    # Azimuth/altitude of the Sun at an instant (UTC)
    skypassage position --time 1989-10-18T00:04:00 --lon -122.42 --lat 37.77

    # Sunrise, transit and sunset
    skypassage passages --date 1989-10-17 --lon -122.42 --lat 37.77

    # Civil twilight for a week, written to CSV
    skypassage passages --date 2024-06-01 --days 7 --lon 4.9 --lat 52.37 \\
        --twilight civil --csv dawn_dusk.csv
"""
import argparse
import logging
import sys
from datetime import date, datetime, timedelta

from skypassage.adapters.csv_exporter import CsvPassageExporter
from skypassage.domain.bodies import Sun
from skypassage.domain.conversions import rad_to_deg
from skypassage.domain.local_coordinates import local_coordinates
from skypassage.domain.passages import (
    DEFAULT_PRECISION_DEG,
    PassageConvergenceError,
    Twilight,
    day_length,
    passage_table,
)
from skypassage.domain.time_systems import as_utc


def _format_instant(instant: datetime) -> str:
    return instant.isoformat(timespec='milliseconds')


def run_position(when: datetime, lon: float, lat: float) -> None:
    sun = Sun()
    when = as_utc(when)
    eq = sun.equatorial_coordinates(when)
    hz = local_coordinates(sun, when, lon, lat)
    print(f"Time (UTC):       {_format_instant(when)}")
    print(f"Right ascension:  {rad_to_deg(eq.right_ascension_rad):.6f} deg")
    print(f"Declination:      {rad_to_deg(eq.declination_rad):.6f} deg")
    print(f"Azimuth (S->W):   {rad_to_deg(hz.azimuth_rad):.4f} deg")
    print(f"Altitude:         {rad_to_deg(hz.altitude_rad):.4f} deg")


def run_passages(
    start: date,
    days: int,
    lon: float,
    lat: float,
    twilight: str | None = None,
    precision_deg: float = DEFAULT_PRECISION_DEG,
    csv_path: str | None = None,
) -> int:
    """Compute passages for ``days`` consecutive dates; print or export them."""
    if days < 1:
        raise ValueError(f"--days must be at least 1, got {days}")

    end = start + timedelta(days=days - 1)
    rows = passage_table(
        Sun(), start, end, lon, lat,
        twilight=twilight, precision_deg=precision_deg,
    )

    if csv_path:
        n = CsvPassageExporter().export(rows, csv_path)
        print(f"Exported {n} dates to {csv_path}")
        return n

    for day, result in rows:
        print(
            f"{day.isoformat()}  rise {_format_instant(result.rising)}  "
            f"transit {_format_instant(result.transit)}  "
            f"set {_format_instant(result.setting)}  "
            f"length {day_length(result)}  [{result.visibility.value}]"
        )
    return len(rows)


def main():
    parser = argparse.ArgumentParser(
        description="Sun position and rising/transit/setting times (Meeus low-accuracy model)"
    )
    parser.add_argument(
        '--log-level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="Logging level (default: WARNING)"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    position = sub.add_parser('position', help="Sun azimuth/altitude at an instant")
    position.add_argument(
        '--time', required=True, type=datetime.fromisoformat,
        help="ISO-8601 instant; naive values are taken as UTC"
    )
    position.add_argument('--lon', type=float, required=True, help="Longitude, degrees east")
    position.add_argument('--lat', type=float, required=True, help="Latitude, degrees north")

    passes = sub.add_parser('passages', help="Sunrise, transit and sunset")
    passes.add_argument(
        '--date', required=True, type=date.fromisoformat,
        help="First calendar date (YYYY-MM-DD)"
    )
    passes.add_argument('--lon', type=float, required=True, help="Longitude, degrees east")
    passes.add_argument('--lat', type=float, required=True, help="Latitude, degrees north")
    passes.add_argument('--days', type=int, default=1, help="Number of dates (default: 1)")

    options_group = passes.add_argument_group('options')
    options_group.add_argument(
        '--twilight', choices=['none', *(t.value for t in Twilight)],
        help="Use a twilight altitude instead of the Sun's standard altitude"
    )
    options_group.add_argument(
        '--precision', type=float, default=DEFAULT_PRECISION_DEG,
        help=f"Convergence precision in degrees (default: {DEFAULT_PRECISION_DEG})"
    )

    export_group = passes.add_argument_group('export')
    export_group.add_argument('--csv', help="Write the passage table to CSV")

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'position':
            run_position(args.time, args.lon, args.lat)
        else:
            run_passages(
                args.date, args.days, args.lon, args.lat,
                twilight=args.twilight,
                precision_deg=args.precision,
                csv_path=args.csv,
            )
    except (ValueError, PassageConvergenceError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot write output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
