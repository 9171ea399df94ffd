"""Aggregation of parsed parameters into an overall assessment."""
from __future__ import annotations

from typing import Dict, List, Sequence

from loguru import logger

from analysis.models import HIGH, LOW, MEDIUM, ParsedParameter, QualityAssessment
from analysis.parameters import ESTIMABLE, PARAMETER_CLASSIFICATIONS, VISUAL
from core.numeric import round_half_up
from freshness.categories import get_analysis_category
from freshness.models import EXCLUDED_VALUE

# Weight of a score by parameter kind and confidence tier.
CONFIDENCE_WEIGHTS: Dict[str, Dict[str, float]] = {
    VISUAL: {HIGH: 1.0, MEDIUM: 0.9, LOW: 0.7},
    ESTIMABLE: {HIGH: 0.8, MEDIUM: 0.6, LOW: 0.5},
}

NOT_A_FISH_MARKER = "bukan ikan"


def _scored_analyzable(parameters: Sequence[ParsedParameter]) -> List[ParsedParameter]:
    return [p for p in parameters if p.is_analyzable and p.score is not None]


def get_analyzable_count(parameters: Sequence[ParsedParameter]) -> int:
    """Number of analyzable parameters that received a score."""
    return len(_scored_analyzable(parameters))


def parameter_weight(parameter: ParsedParameter) -> float:
    classification = PARAMETER_CLASSIFICATIONS.get(parameter.key)
    if classification is None or classification.kind not in CONFIDENCE_WEIGHTS:
        return 1.0
    return CONFIDENCE_WEIGHTS[classification.kind].get(parameter.confidence, 1.0)


def calculate_overall_score(parameters: Sequence[ParsedParameter], default_score: float = 7.0) -> float:
    """Confidence-weighted mean of the analyzable scores, one decimal.

    Scores of 4 are left out. When nothing qualifies ``default_score`` is
    returned rather than an error or zero.
    """
    scored = [p for p in _scored_analyzable(parameters) if p.score != EXCLUDED_VALUE]
    if not scored:
        logger.debug(f"No analyzable scores, using default overall score {default_score}")
        return default_score

    weighted_sum = 0.0
    total_weight = 0.0
    for parameter in scored:
        weight = parameter_weight(parameter)
        logger.debug(f"Parameter {parameter.name}: score={parameter.score}, weight={weight}")
        weighted_sum += parameter.score * weight
        total_weight += weight

    return round_half_up(weighted_sum / total_weight, 1)


def determine_category(score: float, parameters: Sequence[ParsedParameter]) -> str:
    """Analysis-scale category from the plain mean of the analyzable scores.

    The weighted ``score`` is used only when no analyzable parameter has a
    score.
    """
    scored = _scored_analyzable(parameters)
    average = sum(p.score for p in scored) / len(scored) if scored else score
    logger.debug(f"Category from analyzable average {average:.2f}")
    return get_analysis_category(average)


def calculate_variance(scores: Sequence[float]) -> float:
    """Population variance; 0 for fewer than two scores."""
    if len(scores) <= 1:
        return 0.0
    mean = sum(scores) / len(scores)
    return sum((s - mean) ** 2 for s in scores) / len(scores)


def assess_quality(
    parameters: Sequence[ParsedParameter],
    raw_text: str,
    *,
    min_analyzable: int = 3,
    low_confidence_limit: int = 2,
    variance_limit: float = 4.0,
    confidence_floor: float = 0.6,
) -> QualityAssessment:
    """Judge how trustworthy the parsed parameters are.

    Confidence is ``1 - 0.15 * issues - 0.05 * warnings``, never below
    ``confidence_floor``.
    """
    issues: List[str] = []
    warnings: List[str] = []

    scored = _scored_analyzable(parameters)
    if len(scored) < min_analyzable:
        issues.append(f"Kurang dari {min_analyzable} parameter yang berhasil dianalisis")

    if NOT_A_FISH_MARKER in (raw_text or "").lower():
        issues.append("Analisis AI menyatakan gambar bukan ikan")

    low_confidence = sum(1 for p in parameters if p.confidence == LOW)
    if low_confidence > low_confidence_limit:
        warnings.append("Beberapa parameter dinilai dengan tingkat kepercayaan rendah")

    if calculate_variance([p.score for p in scored]) > variance_limit:
        warnings.append("Skor parameter bervariasi, hasil mungkin perlu validasi")

    confidence = 1 - len(issues) * 0.15 - len(warnings) * 0.05
    confidence = max(confidence_floor, round_half_up(confidence, 2))

    return QualityAssessment(
        is_valid=not issues,
        issues=issues,
        warnings=warnings,
        confidence=confidence,
    )


def generate_recommendations(quality: QualityAssessment, parameters: Sequence[ParsedParameter]) -> List[str]:
    recommendations: List[str] = []

    if not quality.is_valid:
        recommendations.append("Hasil analisis memerlukan verifikasi manual sesuai SNI 2729-2013")

    if quality.confidence < 0.8:
        recommendations.append("Gunakan gambar dengan kualitas lebih tinggi untuk hasil yang lebih akurat")

    non_analyzable = [p.name for p in parameters if not p.is_analyzable]
    if non_analyzable:
        recommendations.append(f"Parameter {', '.join(non_analyzable)} memerlukan pemeriksaan fisik langsung")

    return recommendations
