# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the command-line interface.

Covers both subcommands, CSV export dispatch, and error handling.
"""
import csv
import sys
from datetime import date, datetime

import pytest

from skypassage.cli import main, run_passages, run_position


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['skypassage', *argv])
    main()


class TestPositionCommand:

    def test_prints_coordinates(self, monkeypatch, capsys):
        _run(monkeypatch, 'position', '--time', '1989-10-18T00:04:00',
             '--lon', '-122.42', '--lat', '37.77')
        out = capsys.readouterr().out
        assert "Time (UTC):       1989-10-18T00:04:00.000+00:00" in out
        assert "Declination:      -9.531532 deg" in out
        assert "Altitude:" in out

    def test_offset_time_converted_to_utc(self, capsys):
        run_position(datetime.fromisoformat('1989-10-17T17:04:00-07:00'), -122.42, 37.77)
        assert "1989-10-18T00:04:00.000+00:00" in capsys.readouterr().out

    def test_polar_latitude_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'position', '--time', '2020-01-01T00:00:00',
                 '--lon', '0', '--lat', '90')
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestPassagesCommand:

    def test_prints_reference_day(self, monkeypatch, capsys):
        _run(monkeypatch, 'passages', '--date', '1989-10-17',
             '--lon', '-122.42', '--lat', '37.77')
        out = capsys.readouterr().out.strip().splitlines()
        assert len(out) == 1
        line = out[0]
        assert line.startswith("1989-10-17  rise 1989-10-17T14:20:09.093+00:00")
        assert "transit 1989-10-17T19:55:11.088+00:00" in line
        assert "set 1989-10-18T01:30:38.175+00:00" in line
        assert "length 11:10:29.082000" in line
        assert line.endswith("[regular]")

    def test_several_days(self, monkeypatch, capsys):
        _run(monkeypatch, 'passages', '--date', '2024-06-01', '--days', '3',
             '--lon', '4.9', '--lat', '52.37', '--twilight', 'civil')
        lines = capsys.readouterr().out.strip().splitlines()
        assert [line[:10] for line in lines] == ['2024-06-01', '2024-06-02', '2024-06-03']

    def test_csv_export(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "sf.csv"
        _run(monkeypatch, 'passages', '--date', '1989-10-17', '--days', '2',
             '--lon', '-122.42', '--lat', '37.77', '--csv', str(path))

        assert f"Exported 2 dates to {path}" in capsys.readouterr().out
        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert len(rows) == 3
        assert rows[1][2] == '1989-10-17T19:55:11.088+00:00'

    def test_twilight_none_matches_default(self, monkeypatch, capsys):
        args = ('passages', '--date', '1989-10-17', '--lon', '-122.42', '--lat', '37.77')
        _run(monkeypatch, *args)
        plain = capsys.readouterr().out
        _run(monkeypatch, *args, '--twilight', 'none')
        assert capsys.readouterr().out == plain

    def test_unknown_twilight_rejected_by_parser(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'passages', '--date', '2024-01-01',
                 '--lon', '0', '--lat', '0', '--twilight', 'dusk')
        assert exc_info.value.code == 2

    def test_bad_precision_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'passages', '--date', '2024-01-01',
                 '--lon', '0', '--lat', '0', '--precision', '0')
        assert exc_info.value.code == 1
        assert "precision" in capsys.readouterr().err

    def test_unwritable_csv_exits(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'passages', '--date', '2024-01-01',
                 '--lon', '0', '--lat', '0',
                 '--csv', str(tmp_path / "missing" / "out.csv"))
        assert exc_info.value.code == 1
        assert "Cannot write output" in capsys.readouterr().err

    def test_zero_days_rejected(self):
        with pytest.raises(ValueError, match="--days"):
            run_passages(date(2024, 1, 1), 0, 0.0, 0.0)

    def test_run_passages_returns_row_count(self, capsys):
        assert run_passages(date(2024, 1, 1), 4, 0.0, 45.0) == 4


class TestParser:

    def test_subcommand_required(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch)
        assert exc_info.value.code == 2

    def test_missing_latitude(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, 'passages', '--date', '2024-01-01', '--lon', '0')
        assert exc_info.value.code == 2
