"""Freshness scoring of manually observed samples (SNI 2729-2013).

A sample's score is the mean of its scorable parameter values: integers
1-9 excluding the reserved value 4. Values outside that domain are dropped
silently, and a sample with nothing scorable gets ``Skor=0`` and the
``Invalid`` category instead of an error.
"""
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from core.numeric import round_half_up
from freshness.categories import get_freshness_category
from freshness.models import (
    EXCLUDED_VALUE,
    METADATA_KEYS,
    PARAMETER_FIELDS,
    FishParameter,
    FishSample,
    attribute_for,
    is_scorable,
)

SampleLike = Union[FishSample, Mapping[str, Any]]


@dataclass(frozen=True)
class BestParameter:
    """Parameter with the highest mean across a set of samples."""
    parameter: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"parameter": self.parameter, "score": self.score}


def _generate_id() -> str:
    return uuid.uuid4().hex


def _now_millis() -> int:
    return int(time.time() * 1000)


def calculate_freshness(
    params: Union[FishParameter, Mapping[str, Any]],
    *,
    fish_name: Optional[str] = None,
    sample_id: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> FishSample:
    """Score a set of observations.

    Args:
        params: FishParameter or mapping keyed by ``Mata``..``Tekstur``
        fish_name: Optional label carried on the sample
        sample_id: Identifier to keep; a new one is generated when omitted
        timestamp: Epoch milliseconds to keep; the current time when omitted

    Returns:
        FishSample with Skor, Kategori, id and timestamp filled in
    """
    if not isinstance(params, FishParameter):
        params = FishParameter.from_dict(params)

    total = 0.0
    valid = 0
    for _, value in params.items():
        if is_scorable(value):
            total += value
            valid += 1

    skor = round_half_up(total / valid, 2) if valid else 0.0
    kategori = get_freshness_category(skor)

    if valid < len(PARAMETER_FIELDS):
        logger.debug(f"Scored {valid}/{len(PARAMETER_FIELDS)} parameters (others unset or excluded)")

    return FishSample(
        mata=params.mata,
        insang=params.insang,
        lendir=params.lendir,
        daging=params.daging,
        bau=params.bau,
        tekstur=params.tekstur,
        skor=skor,
        kategori=kategori,
        id=sample_id or _generate_id(),
        timestamp=timestamp if timestamp is not None else _now_millis(),
        fish_name=fish_name,
    )


def find_best_parameter(samples: Iterable[FishSample]) -> BestParameter:
    """Parameter with the highest mean value across ``samples``.

    Unlike per-sample scoring, value 4 observations are included in the
    means; this answers which sensory aspect scores highest on average.
    Unset values are skipped. Ties go to the earlier parameter in
    Mata..Tekstur order. An empty input yields ``BestParameter("", 0.0)``.
    """
    samples = list(samples)
    best = BestParameter(parameter="", score=0.0)
    best_mean = 0.0

    for name in PARAMETER_FIELDS:
        values = [s.get(name) for s in samples]
        values = [v for v in values if isinstance(v, (int, float)) and not isinstance(v, bool)]
        if not values:
            continue
        mean = sum(values) / len(values)
        if mean > best_mean:
            best_mean = mean
            best = BestParameter(parameter=name, score=round_half_up(mean, 2))

    return best


def _parameter_entries(sample: SampleLike):
    data = sample.to_dict() if isinstance(sample, FishSample) else sample
    return ((key, value) for key, value in data.items() if key not in METADATA_KEYS)


def has_invalid_values(sample: SampleLike) -> bool:
    """True when any non-metadata field of ``sample`` holds the reserved value 4."""
    return len(get_invalid_parameters_list(sample)) > 0


def get_invalid_parameters_list(sample: SampleLike) -> List[str]:
    """Names of the fields whose value is exactly 4, in field order."""
    return [
        key for key, value in _parameter_entries(sample)
        if not isinstance(value, bool) and value == EXCLUDED_VALUE
    ]


def sort_samples(samples: Iterable[FishSample], field: str, ascending: bool = True) -> List[FishSample]:
    """Return a new list of samples ordered by ``field``.

    ``field`` may be a wire key (``Skor``) or attribute name (``skor``).
    Unset values sort first when ascending and last when descending; numbers
    sort before text. Equal values keep their input order.

    Raises:
        KeyError: If ``field`` names no sample field
    """
    attr = attribute_for(field)

    def sort_key(sample: FishSample):
        value = getattr(sample, attr)
        if value is None:
            return (0, 0, 0)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (1, 0, value)
        return (1, 1, str(value))

    return sorted(samples, key=sort_key, reverse=not ascending)
