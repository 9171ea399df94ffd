"""Keyword-based score estimation for parameters no pattern rule could read.

The estimator always returns a score. Analyzable parameters get a
``medium`` confidence estimate; bau and tekstur get a ``low`` confidence
estimate so aggregation can leave them out.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from loguru import logger

from analysis.models import LOW, MEDIUM, ParsedParameter
from analysis.parameters import DEFAULT_INDICATORS, PARAMETER_CLASSIFICATIONS


class FallbackEstimator:
    """Estimates a parameter score from positive and negative keywords."""

    def __init__(self, indicators: Optional[Mapping[str, Mapping[str, List[str]]]] = None) -> None:
        self.indicators: Dict[str, Dict[str, List[str]]] = {
            key: {"positive": list(lists["positive"]), "negative": list(lists["negative"])}
            for key, lists in DEFAULT_INDICATORS.items()
        }
        for key, lists in (indicators or {}).items():
            entry = self.indicators.setdefault(key.lower(), {"positive": [], "negative": []})
            for polarity in ("positive", "negative"):
                if polarity in lists:
                    entry[polarity] = [word.lower() for word in lists[polarity] if isinstance(word, str) and word]

    def _first_found(self, words: List[str], text: str) -> Optional[str]:
        for word in words:
            if word in text:
                return word
        return None

    def estimate(self, text: str, key: str) -> ParsedParameter:
        """Estimate ``key`` from the keywords present anywhere in ``text``.

        Positive words only give the parameter's positive score, negative
        words only its negative score, and both or neither its neutral score.
        """
        classification = PARAMETER_CLASSIFICATIONS[key]
        lists = self.indicators.get(key, self.indicators["mata"])
        lower_text = (text or "").lower()

        positive = self._first_found(lists["positive"], lower_text)
        negative = self._first_found(lists["negative"], lower_text)
        scores = classification.fallback

        if classification.is_analyzable:
            confidence = MEDIUM
            justification = "Estimasi berdasarkan analisis visual"
            if positive and not negative:
                score = scores.positive
                condition = f"Kondisi baik - {positive} terdeteksi"
            elif negative and not positive:
                score = scores.negative
                condition = f"Kondisi kurang baik - {negative} terdeteksi"
            else:
                score = scores.neutral
                condition = "Kondisi baik berdasarkan analisis visual"
        else:
            confidence = LOW
            justification = "Estimasi saja - tidak dapat dianalisis akurat dari foto"
            if positive and not negative:
                score = scores.positive
                condition = "Estimasi berdasarkan korelasi visual"
            elif negative and not positive:
                score = scores.negative
                condition = "Estimasi rendah berdasarkan indikator"
            else:
                score = scores.neutral
                condition = "Estimasi netral - tidak dapat dianalisis dari foto"

        logger.debug(f"Fallback estimate for {key}: score={score}, condition={condition}")

        return ParsedParameter(
            key=key,
            name=classification.name,
            condition=condition,
            score=score,
            justification=justification,
            confidence=confidence,
            is_analyzable=classification.is_analyzable,
            source="fallback",
        )
