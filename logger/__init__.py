"""Workbook logging of scored samples."""
from __future__ import annotations

from .excel_logger import HEADER, SampleExcelLogger

__all__ = ["SampleExcelLogger", "HEADER"]
