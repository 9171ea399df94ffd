"""Use cases for freshness scoring and AI analysis parsing.

Each use case wraps one operation of the domain packages and reports
failures as ``Failure`` values instead of raising, so callers such as the
command line can render errors uniformly.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from loguru import logger

from analysis.models import EnhancedAnalysisResult
from analysis.parser import EnhancedResultParser
from core.error_handler import as_result
from core.exceptions import CsvFormatError, LoggingError, ParsingError, UsageLimitError
from core.result import Failure, Result, Success
from freshness.csv_io import generate_csv, parse_csv_file
from freshness.models import FishParameter, FishSample
from freshness.scorer import calculate_freshness
from usage.limiter import UsageLimiter


class ScoreSampleUseCase:
    """Scores one set of manual observations."""

    def execute(
        self,
        params: Union[FishParameter, Mapping[str, Any]],
        fish_name: Optional[str] = None,
    ) -> Result[FishSample, ParsingError]:
        try:
            sample = calculate_freshness(params, fish_name=fish_name)
            logger.info(f"[score] {sample.id} skor={sample.skor} kategori={sample.kategori}")
            return Success(sample)
        except Exception as e:
            logger.error(f"Failed to score sample: {e}")
            return Failure(ParsingError(f"Failed to score: {e}"))


class AnalyzeResponseUseCase:
    """Parses an AI analysis, counting it against the user's free tier.

    Premium users are not counted.
    """

    def __init__(self, parser: EnhancedResultParser, limiter: UsageLimiter):
        self.parser = parser
        self.limiter = limiter

    def execute(
        self,
        raw_text: str,
        user_id: str,
        feature: str = "freshness",
        is_premium: bool = False,
    ) -> Result[EnhancedAnalysisResult, Exception]:
        """Parse ``raw_text`` for ``user_id``.

        Returns:
            Result with the parsed analysis, UsageLimitError when the free
            allowance is used up, or ParsingError on unexpected failure
        """
        if not is_premium and not self.limiter.track(user_id, feature):
            logger.warning(f"[analyze] user={user_id} over free tier for {feature}")
            return Failure(UsageLimitError(feature, self.limiter.limit))

        try:
            result = self.parser.parse_analysis_result(raw_text)
            return Success(result)
        except Exception as e:
            logger.error(f"Failed to parse analysis for user={user_id}: {e}")
            return Failure(ParsingError(f"Failed to parse analysis: {e}"))


class ImportCsvUseCase:
    """Imports samples from CSV text."""

    def __init__(self, delimiter: str = ",", strict: bool = False):
        self.delimiter = delimiter
        self.strict = strict

    def execute(self, text: str) -> Result[List[FishSample], CsvFormatError]:
        try:
            samples = parse_csv_file(text, self.delimiter, strict=self.strict)
            return Success(samples)
        except CsvFormatError as e:
            logger.error(f"CSV import failed at line {e.line_number}: {e}")
            return Failure(e)
        except Exception as e:
            logger.error(f"CSV import failed: {e}")
            return Failure(CsvFormatError(f"Failed to import CSV: {e}"))


class ExportCsvUseCase:
    """Renders samples as CSV text."""

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    @as_result()
    def execute(self, samples: List[FishSample]) -> str:
        csv_text = generate_csv(samples, self.delimiter)
        logger.info(f"[export] {len(samples)} samples rendered as CSV")
        return csv_text


class LogSampleUseCase:
    """Persists a scored sample to the workbook."""

    def __init__(self, excel_logger):
        self.excel_logger = excel_logger

    def execute(self, sample: FishSample) -> Result[FishSample, LoggingError]:
        try:
            self.excel_logger.log_sample(sample)
            logger.info(f"[excel] Logged sample {sample.id} skor={sample.skor} kategori={sample.kategori}")
            return Success(sample)
        except Exception as e:
            logger.error(f"Failed to log sample: {e}")
            error = e if isinstance(e, LoggingError) else LoggingError(f"Failed to log: {e}")
            return Failure(error)


class CancelLastSampleUseCase:
    """Removes the most recent workbook row."""

    def __init__(self, excel_logger):
        self.excel_logger = excel_logger

    def execute(self) -> Result[bool, LoggingError]:
        try:
            ok = self.excel_logger.cancel_last()
            if ok:
                logger.info("[excel] CANCEL -> removed last sample")
            else:
                logger.info("[excel] CANCEL -> nothing to remove")
            return Success(ok)
        except Exception as e:
            logger.error(f"Failed to cancel last sample: {e}")
            return Failure(LoggingError(f"Failed to cancel: {e}"))
