"""Tests for writing the report CSV."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from csv_weather.exceptions import FileAccessError, SerializationError
from csv_weather.tabular import REPORT_COLUMNS, ReportRow, write_report

HEADER = "name,area,temperatureC,humidity,windSpeed,pressure"


def read_back(path: Path) -> list[list[str]]:
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


class TestWriteReport:
    """Header and rows."""

    def test_single_row(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        write_report([ReportRow("Kyiv", "Europe", 5.0, 80, 3.2, 1012)], out)
        assert out.read_text(encoding="utf-8").splitlines() == [
            HEADER,
            "Kyiv,Europe,5.0,80,3.2,1012",
        ]

    def test_returns_path(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        assert write_report([], out) == out

    def test_header_only_for_empty_rows(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        write_report([], out)
        assert out.read_text(encoding="utf-8") == HEADER + "\n"

    def test_header_matches_columns(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        write_report([], out)
        assert read_back(out)[0] == list(REPORT_COLUMNS)

    def test_rows_in_iteration_order(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        rows = [
            ReportRow("Lagos", "Africa", 30.1, 70, 2.0, 1009),
            ReportRow("Kyiv", "Europe", 5.0, 80, 3.2, 1012),
        ]
        write_report(iter(rows), out)
        assert [r[0] for r in read_back(out)[1:]] == ["Lagos", "Kyiv"]

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        out.write_text("old content\n" * 100)
        write_report([ReportRow("Kyiv", "Europe", 5.0, 80, 3.2, 1012)], out)
        assert len(out.read_text(encoding="utf-8").splitlines()) == 2

    def test_every_row_has_six_fields(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        rows = [ReportRow(f"City{i}", "", float(i), i, 1.5, 1000 + i) for i in range(10)]
        write_report(rows, out)
        assert all(len(r) == 6 for r in read_back(out))


class TestEscaping:
    """Values with delimiters, quotes or newlines survive a csv.reader round trip."""

    @pytest.mark.parametrize(
        "area",
        ["Oregon, USA", 'The "Big" Apple', "line one\nline two", "a,b\r\nc"],
    )
    def test_round_trip(self, tmp_path: Path, area: str) -> None:
        out = tmp_path / "report.csv"
        write_report([ReportRow("City", area, 1.0, 2, 3.0, 4)], out)
        assert read_back(out)[1][1] == area

    def test_delimiter_value_is_quoted(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        write_report([ReportRow("Portland", "Oregon, USA", 1.0, 2, 3.0, 4)], out)
        assert out.read_text(encoding="utf-8").splitlines()[1] == 'Portland,"Oregon, USA",1.0,2,3.0,4'


class TestWriteReportErrors:
    """Unwritable paths and unencodable values."""

    def test_missing_parent_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileAccessError) as exc_info:
            write_report([], tmp_path / "no-such-dir" / "report.csv")
        assert exc_info.value.path == tmp_path / "no-such-dir" / "report.csv"

    def test_path_is_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileAccessError):
            write_report([], tmp_path)

    def test_none_value(self, tmp_path: Path) -> None:
        with pytest.raises(SerializationError, match="temperatureC"):
            write_report([ReportRow("Kyiv", "Europe", None, 80, 3.2, 1012)], tmp_path / "r.csv")  # type: ignore[arg-type]

    def test_bool_value(self, tmp_path: Path) -> None:
        with pytest.raises(SerializationError):
            write_report([ReportRow("Kyiv", "Europe", 5.0, True, 3.2, 1012)], tmp_path / "r.csv")

    def test_nan_value(self, tmp_path: Path) -> None:
        with pytest.raises(SerializationError, match="non-finite"):
            write_report(
                [ReportRow("Kyiv", "Europe", float("nan"), 80, 3.2, 1012)], tmp_path / "r.csv"
            )


class TestAtomicWrite:
    """Temp file + rename."""

    def test_writes_same_content(self, tmp_path: Path) -> None:
        plain = tmp_path / "plain.csv"
        atomic = tmp_path / "atomic.csv"
        rows = [ReportRow("Kyiv", "Europe", 5.0, 80, 3.2, 1012)]
        write_report(rows, plain)
        write_report(rows, atomic, atomic=True)
        assert atomic.read_bytes() == plain.read_bytes()

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        write_report([], tmp_path / "report.csv", atomic=True)
        assert [p.name for p in tmp_path.iterdir()] == ["report.csv"]

    def test_failure_keeps_previous_file(self, tmp_path: Path) -> None:
        out = tmp_path / "report.csv"
        write_report([ReportRow("Kyiv", "Europe", 5.0, 80, 3.2, 1012)], out)
        before = out.read_bytes()

        bad = [
            ReportRow("Lagos", "Africa", 30.0, 70, 2.0, 1009),
            ReportRow("Lima", "Peru", None, 70, 2.0, 1009),  # type: ignore[arg-type]
        ]
        with pytest.raises(SerializationError):
            write_report(bad, out, atomic=True)

        assert out.read_bytes() == before
        assert [p.name for p in tmp_path.iterdir()] == ["report.csv"]

    def test_missing_parent_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileAccessError):
            write_report([], tmp_path / "no-such-dir" / "report.csv", atomic=True)
