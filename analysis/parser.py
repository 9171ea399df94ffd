"""
Parser for AI freshness analyses (SNI 2729-2013).

Turns the free text returned by a hosted AI model into a structured
assessment of the six SNI parameters.

Classes:
    EnhancedResultParser: Coordinates rule matching, fallback estimation
        and aggregation

Processing pipeline, per parameter:
    1. Pattern rules, most structured layout first
    2. Keyword estimation when no rule produced a valid score

followed by overall score, category, quality assessment and
recommendations over all six parameters.

Parsing never raises: malformed or unrelated text ends in keyword estimates,
and the quality assessment reports how little could be read.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from analysis.aggregation import (
    assess_quality,
    calculate_overall_score,
    determine_category,
    generate_recommendations,
    get_analyzable_count,
)
from analysis.config import ConfigManager
from analysis.fallback import FallbackEstimator
from analysis.models import EnhancedAnalysisResult, ParsedParameter
from analysis.parameters import ALL_PARAMETERS, PARAMETER_CLASSIFICATIONS, default_condition
from analysis.patterns import DEFAULT_RULES, PatternRule, match_parameter
from core.error_handler import log_execution_time


class EnhancedResultParser:
    """
    Extracts SNI parameter scores from AI analysis text.

    Usage:
        parser = EnhancedResultParser()
        result = parser.parse_analysis_result(ai_text)
        print(result.overall_score, result.category)
    """

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        rules: Sequence[PatternRule] = DEFAULT_RULES,
    ) -> None:
        """
        Args:
            config: Configuration manager (loads defaults if None)
            rules: Pattern rules in priority order
        """
        if config is None:
            config = ConfigManager()
        self.config = config
        self.rules = tuple(rules)
        self.fallback = FallbackEstimator(self.config.indicators)

        self.stats: Dict[str, Any] = self._empty_stats()
        logger.info(f"EnhancedResultParser initialized with {len(self.rules)} pattern rules")

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            'total_parses': 0,
            'pattern_matches': 0,
            'fallback_estimates': 0,
            'rule_hits': {},
        }

    @log_execution_time()
    def parse_analysis_result(self, raw_result: str) -> EnhancedAnalysisResult:
        """
        Parse one AI analysis into a structured assessment.

        Args:
            raw_result: Raw text from the AI model, possibly with markdown tables

        Returns:
            EnhancedAnalysisResult with all six parameters scored
        """
        self.stats['total_parses'] += 1
        text = raw_result or ""
        if not text.strip():
            logger.debug("Empty analysis text provided")

        thresholds = self.config.thresholds
        parameters = self.parse_parameters(text)
        analyzable_count = get_analyzable_count(parameters)
        overall_score = calculate_overall_score(parameters, thresholds.default_overall_score)
        category = determine_category(overall_score, parameters)
        quality = assess_quality(
            parameters,
            text,
            min_analyzable=thresholds.min_analyzable,
            low_confidence_limit=thresholds.low_confidence_limit,
            variance_limit=thresholds.variance_limit,
            confidence_floor=thresholds.confidence_floor,
        )
        recommendations = generate_recommendations(quality, parameters)

        logger.info(
            f"Analysis parsed: score={overall_score} category={category} "
            f"analyzable={analyzable_count} confidence={quality.confidence}"
        )

        return EnhancedAnalysisResult(
            parameters=parameters,
            overall_score=overall_score,
            category=category,
            quality_assessment=quality,
            recommendations=recommendations,
            analyzable_count=analyzable_count,
        )

    def parse_parameters(self, text: str) -> List[ParsedParameter]:
        """Parse all six parameters in canonical order."""
        return [self.parse_parameter(text, key) for key in ALL_PARAMETERS]

    def parse_parameter(self, text: str, key: str) -> ParsedParameter:
        """Parse one parameter, falling back to keyword estimation."""
        classification = PARAMETER_CLASSIFICATIONS[key]

        match = match_parameter(text, key, self.rules)
        if match is None:
            self.stats['fallback_estimates'] += 1
            return self.fallback.estimate(text, key)

        self.stats['pattern_matches'] += 1
        hits = self.stats['rule_hits']
        hits[match.rule] = hits.get(match.rule, 0) + 1

        return ParsedParameter(
            key=key,
            name=classification.name,
            condition=match.condition or default_condition(key, match.score),
            score=match.score,
            justification=match.justification or "Berdasarkan analisis AI",
            confidence=match.confidence,
            is_analyzable=classification.is_analyzable,
            source=match.rule,
        )

    def get_parsing_stats(self) -> Dict[str, Any]:
        """Counters since creation or the last reset, with the pattern match rate."""
        stats = dict(self.stats)
        stats['rule_hits'] = dict(self.stats['rule_hits'])
        attempts = stats['pattern_matches'] + stats['fallback_estimates']
        stats['pattern_rate'] = stats['pattern_matches'] / attempts if attempts else 0.0
        return stats

    def reset_stats(self) -> None:
        self.stats = self._empty_stats()


_default_parser: Optional[EnhancedResultParser] = None


def parse_analysis_result(raw_result: str) -> EnhancedAnalysisResult:
    """Parse with a shared parser built from the default configuration."""
    global _default_parser
    if _default_parser is None:
        _default_parser = EnhancedResultParser()
    return _default_parser.parse_analysis_result(raw_result)
