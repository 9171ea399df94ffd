from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from openpyxl import Workbook, load_workbook

from core.exceptions import LoggingError
from freshness.scorer import calculate_freshness
from logger import HEADER, SampleExcelLogger

SAMPLE = {"Mata": 8, "Insang": 7, "Lendir": 9, "Daging": 8, "Bau": 7, "Tekstur": 8}


def test_logger_append_and_cancel():
    with TemporaryDirectory() as td:
        log_path = Path(td) / "samples" / "test_samples.xlsx"
        xl = SampleExcelLogger(str(log_path))
        xl.log_sample(calculate_freshness(SAMPLE, fish_name="Tongkol"))
        xl.log_sample(calculate_freshness({**SAMPLE, "Bau": 4}))

        wb = load_workbook(log_path)
        ws = wb.active
        assert ws.max_row == 3  # header + 2 rows
        assert [c.value for c in ws[1]] == HEADER

        ok = xl.cancel_last()
        assert ok
        wb = load_workbook(log_path)
        ws = wb.active
        assert ws.max_row == 2  # header + 1 row


def test_cancel_on_empty_workbook():
    with TemporaryDirectory() as td:
        xl = SampleExcelLogger(str(Path(td) / "empty.xlsx"))
        assert xl.cancel_last() is False


def test_read_samples_round_trip():
    with TemporaryDirectory() as td:
        xl = SampleExcelLogger(str(Path(td) / "samples.xlsx"))
        first = calculate_freshness(SAMPLE, fish_name="Kembung")
        second = calculate_freshness({"Mata": 9, "Insang": 4})
        xl.log_sample(first)
        xl.log_sample(second)

        samples = xl.read_samples()

        assert [s.id for s in samples] == [first.id, second.id]
        assert samples[0] == first
        assert samples[1].lendir is None
        assert samples[1].skor == second.skor
        assert samples[1].fish_name is None


def test_read_samples_without_workbook():
    with TemporaryDirectory() as td:
        assert SampleExcelLogger(str(Path(td) / "missing.xlsx")).read_samples() == []


def test_foreign_workbook_is_rejected():
    with TemporaryDirectory() as td:
        log_path = Path(td) / "other.xlsx"
        wb = Workbook()
        wb.active.append(["Date", "Time", "Boat", "Species"])
        wb.save(log_path)

        with pytest.raises(LoggingError):
            SampleExcelLogger(str(log_path)).log_sample(calculate_freshness(SAMPLE))
