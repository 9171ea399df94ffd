from __future__ import annotations

from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import List, Optional

from loguru import logger

from core.exceptions import LoggingError
from freshness.models import PARAMETER_FIELDS, FishSample
from freshness.scorer import calculate_freshness

HEADER = ["Date", "Time", "Fish", *PARAMETER_FIELDS, "Skor", "Kategori", "ID", "Timestamp"]


class SampleExcelLogger:
    """Appends scored samples to an Excel workbook, one row per sample."""

    def __init__(self, file_path: Optional[str] = None) -> None:
        default_path = Path("logs/samples/") / "samples.xlsx"
        self.file_path = Path(file_path).absolute() if file_path else default_path.absolute()
        self.lock = Lock()

    def _ensure_workbook(self) -> None:
        """Create the workbook with its header row if it does not exist yet."""
        with self.lock:
            if not self.file_path.exists():
                self._create_new_workbook()

    def _create_new_workbook(self) -> None:
        """Create a new workbook with the sample header.

        Raises:
            LoggingError: If workbook creation fails
        """
        from openpyxl import Workbook  # type: ignore

        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            wb = Workbook()
            ws = wb.active
            ws.title = "Samples"
            ws.append(HEADER)
            wb.save(self.file_path)
        except Exception as e:
            raise LoggingError(f"Failed to create workbook: {e}") from e

    def _read_header(self, ws) -> List[str]:
        return [c.value for c in next(ws.iter_rows(min_row=1, max_row=1))]

    def log_sample(self, sample: FishSample) -> None:
        try:
            self._ensure_workbook()
            from openpyxl import load_workbook  # type: ignore

            created = datetime.fromtimestamp(sample.timestamp / 1000)
            row = [
                created.strftime("%Y-%m-%d"),
                created.strftime("%H:%M:%S"),
                sample.fish_name or "",
                *(value for _, value in sample.parameters.items()),
                float(sample.skor),
                sample.kategori,
                sample.id,
                int(sample.timestamp),
            ]
            with self.lock:
                wb = load_workbook(self.file_path)
                ws = wb.active
                if self._read_header(ws) != HEADER:
                    raise LoggingError(f"Unexpected header in {self.file_path.name}")
                ws.append(row)
                wb.save(self.file_path)
            logger.debug(f"[excel] Appended sample {sample.id} to {self.file_path}")
        except LoggingError:
            raise
        except Exception as e:
            raise LoggingError(f"Failed to log sample: {e}") from e

    def cancel_last(self) -> bool:
        try:
            self._ensure_workbook()
            from openpyxl import load_workbook  # type: ignore

            with self.lock:
                wb = load_workbook(self.file_path)
                ws = wb.active
                if ws.max_row <= 1:
                    return False
                ws.delete_rows(ws.max_row, 1)
                wb.save(self.file_path)
                return True
        except LoggingError:
            raise
        except Exception as e:
            raise LoggingError(f"Failed to cancel last sample: {e}") from e

    def read_samples(self) -> List[FishSample]:
        """Samples stored in the workbook, rescored from their parameter cells.

        A missing workbook holds no samples.
        """
        if not self.file_path.exists():
            return []
        try:
            from openpyxl import load_workbook  # type: ignore

            with self.lock:
                wb = load_workbook(self.file_path, read_only=True)
                try:
                    rows = list(wb.active.iter_rows(min_row=2, values_only=True))
                finally:
                    wb.close()
        except Exception as e:
            raise LoggingError(f"Failed to read samples: {e}") from e

        samples = []
        for row in rows:
            if not row or all(cell is None for cell in row):
                continue
            record = dict(zip(HEADER, row))
            samples.append(
                calculate_freshness(
                    {name: record.get(name) for name in PARAMETER_FIELDS},
                    fish_name=record.get("Fish") or None,
                    sample_id=str(record["ID"]) if record.get("ID") is not None else None,
                    timestamp=int(record["Timestamp"]) if record.get("Timestamp") is not None else None,
                )
            )
        return samples
