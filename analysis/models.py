"""Result types produced by the analysis parser."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

HIGH = "high"
MEDIUM = "medium"
LOW = "low"


@dataclass(frozen=True)
class ParsedParameter:
    """One SNI parameter as read from an AI analysis.

    Attributes:
        key: Lowercase parameter identifier (mata, insang, ...)
        name: Display name
        condition: Observed condition description
        score: SNI score 1-9
        justification: Reason or remark attached to the score
        confidence: high, medium or low
        is_analyzable: Whether the parameter can be judged from a photo
        source: Name of the pattern rule that matched, or "fallback"
    """
    key: str
    name: str
    condition: str
    score: Optional[int]
    justification: str
    confidence: str
    is_analyzable: bool
    source: str = "fallback"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "condition": self.condition,
            "score": self.score,
            "justification": self.justification,
            "confidence": self.confidence,
            "is_analyzable": self.is_analyzable,
            "source": self.source,
        }


@dataclass(frozen=True)
class QualityAssessment:
    """How much the parsed result can be trusted.

    Issues are hard problems that make the result invalid; warnings are soft
    concerns that only lower the confidence.
    """
    is_valid: bool
    issues: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    confidence: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "issues": list(self.issues),
            "warnings": list(self.warnings),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class EnhancedAnalysisResult:
    """Structured freshness assessment extracted from one AI response."""
    parameters: List[ParsedParameter]
    overall_score: float
    category: str
    quality_assessment: QualityAssessment
    recommendations: List[str]
    analyzable_count: int

    def get(self, key: str) -> Optional[ParsedParameter]:
        """Parsed parameter by key or display name."""
        key = key.lower()
        for parameter in self.parameters:
            if parameter.key == key:
                return parameter
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parameters": [p.to_dict() for p in self.parameters],
            "overall_score": self.overall_score,
            "category": self.category,
            "quality_assessment": self.quality_assessment.to_dict(),
            "recommendations": list(self.recommendations),
            "analyzable_count": self.analyzable_count,
        }
