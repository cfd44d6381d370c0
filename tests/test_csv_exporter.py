# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for CSV passage export.

Verifies port compliance, output format, and adapter behavior.
"""
import ast
import csv
import logging
from datetime import date

import pytest

from skypassage.adapters.csv_exporter import CsvPassageExporter
from skypassage.domain.bodies import Sun
from skypassage.domain.passages import passage_table, passages
from skypassage.ports.export import PassageExporter


@pytest.fixture(scope="module")
def sf_rows():
    return passage_table(Sun(), date(1989, 10, 17), date(1989, 10, 19), -122.42, 37.77)


def _read(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.reader(f))


class TestPortCompliance:

    def test_is_passage_exporter(self):
        assert issubclass(CsvPassageExporter, PassageExporter)

    def test_instance_satisfies_port(self):
        assert isinstance(CsvPassageExporter(), PassageExporter)


class TestCsvExporter:

    def test_header_row(self, sf_rows, tmp_path):
        path = str(tmp_path / "passages.csv")
        CsvPassageExporter().export(sf_rows, path)
        assert _read(path)[0] == [
            'date', 'rising', 'transit', 'setting', 'day_length_s', 'visibility',
        ]

    def test_row_count(self, sf_rows, tmp_path):
        path = str(tmp_path / "passages.csv")
        count = CsvPassageExporter().export(sf_rows, path)
        assert count == 3
        assert len(_read(path)) == 4  # header + 3 rows

    def test_reference_row(self, sf_rows, tmp_path):
        path = str(tmp_path / "passages.csv")
        CsvPassageExporter().export(sf_rows, path)
        row = _read(path)[1]
        assert row == [
            '1989-10-17',
            '1989-10-17T14:20:09.093+00:00',
            '1989-10-17T19:55:11.088+00:00',
            '1989-10-18T01:30:38.175+00:00',
            '40229.082',
            'regular',
        ]

    def test_empty_table_writes_header_only(self, tmp_path):
        path = str(tmp_path / "empty.csv")
        assert CsvPassageExporter().export([], path) == 0
        assert len(_read(path)) == 1

    def test_unwritable_path_raises(self, sf_rows, tmp_path):
        with pytest.raises(OSError):
            CsvPassageExporter().export(sf_rows, str(tmp_path / "missing" / "out.csv"))


class TestDegenerateRows:

    def test_polar_rows_logged(self, tmp_path, caplog):
        rows = [
            (date(2024, 6, 21), passages(Sun(), date(2024, 6, 21), 18.96, 69.65)),
            (date(2024, 3, 20), passages(Sun(), date(2024, 3, 20), 18.96, 69.65)),
        ]
        path = str(tmp_path / "polar.csv")
        with caplog.at_level(logging.WARNING, logger="skypassage.adapters.csv_exporter"):
            CsvPassageExporter().export(rows, path)

        warnings = [
            r for r in caplog.records
            if r.name == "skypassage.adapters.csv_exporter" and r.levelno >= logging.WARNING
        ]
        assert len(warnings) == 1
        assert warnings[0].getMessage().startswith("1 of 2 rows")
        assert _read(path)[1][-1] == 'always_above'

    def test_regular_rows_not_logged(self, sf_rows, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="skypassage.adapters.csv_exporter"):
            CsvPassageExporter().export(sf_rows, str(tmp_path / "sf.csv"))

        assert not [
            r for r in caplog.records
            if r.name == "skypassage.adapters.csv_exporter" and r.levelno >= logging.WARNING
        ]


class TestExportPurity:
    """Adapter purity: the exporter uses stdlib csv and logging only."""

    def test_csv_exporter_no_external_deps(self):
        import skypassage.adapters.csv_exporter as mod
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        allowed = {'csv', 'datetime', 'logging', 'skypassage'}
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    assert alias.name.split('.')[0] in allowed, \
                        f"Forbidden import: {alias.name}"
            elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
                assert node.module.split('.')[0] in allowed, \
                    f"Forbidden import from: {node.module}"
