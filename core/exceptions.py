"""Exception hierarchy for the freshness scoring application."""
from __future__ import annotations


class FreshnessError(Exception):
    """Base exception for all freshness application errors."""
    pass


class ParsingError(FreshnessError):
    """Raised when an AI analysis response cannot be processed."""
    pass


class CsvFormatError(FreshnessError):
    """Raised when a CSV sample file is malformed and strict parsing is requested."""

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.line_number = line_number


class LoggingError(FreshnessError):
    """Raised when writing scored samples to the workbook fails."""
    pass


class ConfigurationError(FreshnessError):
    """Raised when configuration is invalid or missing."""
    pass


class UsageLimitError(FreshnessError):
    """Raised when a free-tier user has used up the daily allowance for a feature."""

    def __init__(self, feature: str, limit: int):
        super().__init__(f"Free tier limit of {limit} reached for '{feature}'")
        self.feature = feature
        self.limit = limit
