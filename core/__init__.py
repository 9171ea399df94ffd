"""Core infrastructure: exceptions, result type and error-handling helpers."""
from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    CsvFormatError,
    FreshnessError,
    LoggingError,
    ParsingError,
    UsageLimitError,
)
from .numeric import round_half_up
from .result import Failure, Result, Success

__all__ = [
    "FreshnessError",
    "ParsingError",
    "CsvFormatError",
    "LoggingError",
    "ConfigurationError",
    "UsageLimitError",
    "Result",
    "Success",
    "Failure",
    "round_half_up",
]
