"""
Analysis parser for AI-generated fish freshness assessments.

Reads the six SNI 2729-2013 parameters (mata, insang, lendir, daging, bau,
tekstur) out of free Indonesian text produced by a hosted AI model, then
aggregates them into a weighted score, a category, a quality assessment and
recommendations.

Main Components:
    EnhancedResultParser: Facade running the per-parameter pipeline
    PatternRule: One regex layout (markdown table, inline text, ...)
    FallbackEstimator: Keyword estimation when no rule matches
    aggregation: Overall score, category, quality and recommendations
    prompts: AI model catalog and the prompts that request parseable tables
"""
from __future__ import annotations

from .fallback import FallbackEstimator
from .models import EnhancedAnalysisResult, ParsedParameter, QualityAssessment
from .parser import EnhancedResultParser, parse_analysis_result
from .patterns import DEFAULT_RULES, PatternRule, RuleMatch

__all__ = [
    "EnhancedResultParser",
    "parse_analysis_result",
    "EnhancedAnalysisResult",
    "ParsedParameter",
    "QualityAssessment",
    "PatternRule",
    "RuleMatch",
    "DEFAULT_RULES",
    "FallbackEstimator",
]
