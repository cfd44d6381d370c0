# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV passage exporter.

Exports daily rising, transit and setting instants as CSV.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from datetime import date

from skypassage.domain.passages import PassageResult, Visibility, day_length
from skypassage.ports.export import PassageExporter

logger = logging.getLogger(__name__)

_HEADER = [
    'date', 'rising', 'transit', 'setting', 'day_length_s', 'visibility',
]


def _format_instant(instant) -> str:
    return instant.isoformat(timespec='milliseconds')


class CsvPassageExporter(PassageExporter):
    """Exports a passage table to CSV with ISO-8601 UTC instants."""

    def export(
        self,
        rows: list[tuple[date, PassageResult]],
        path: str,
    ) -> int:
        degenerate = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for day, result in rows:
                if result.visibility is not Visibility.REGULAR:
                    degenerate += 1
                writer.writerow([
                    day.isoformat(),
                    _format_instant(result.rising),
                    _format_instant(result.transit),
                    _format_instant(result.setting),
                    f'{day_length(result).total_seconds():.3f}',
                    result.visibility.value,
                ])

        if degenerate:
            logger.warning(
                "%d of %d rows have no horizon crossing; their rising/setting "
                "columns are clamped estimates",
                degenerate, len(rows),
            )
        return len(rows)
