# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for passage table export.

Adapters implement this to write daily rising/transit/setting tables in
various formats.
"""
from datetime import date
from typing import Protocol, runtime_checkable

from skypassage.domain.passages import PassageResult


@runtime_checkable
class PassageExporter(Protocol):
    """Port for exporting passage tables to file."""

    def export(
        self,
        rows: list[tuple[date, PassageResult]],
        path: str,
    ) -> int:
        """
        Export one row per date.

        Args:
            rows: (date, PassageResult) pairs, as returned by passage_table().
            path: Output file path.

        Returns:
            Number of rows exported.
        """
        ...
