"""
Freshness scoring for manually observed fish samples (SNI 2729-2013).

Six sensory parameters (Mata, Insang, Lendir, Daging, Bau, Tekstur) are
scored 1-9 with the value 4 reserved. ``calculate_freshness`` turns a set of
observations into a scored, categorized ``FishSample``; the helpers around
it summarize, validate, sort, and move samples in and out of CSV.
"""
from __future__ import annotations

from .categories import (
    get_analysis_category,
    get_detailed_explanation,
    get_freshness_badge_color,
    get_freshness_category,
    get_freshness_status,
    get_recommendation,
)
from .csv_io import generate_csv, parse_csv_file
from .models import PARAMETER_FIELDS, FishParameter, FishSample
from .scorer import (
    BestParameter,
    calculate_freshness,
    find_best_parameter,
    get_invalid_parameters_list,
    has_invalid_values,
    sort_samples,
)

__all__ = [
    "FishParameter",
    "FishSample",
    "BestParameter",
    "PARAMETER_FIELDS",
    "calculate_freshness",
    "get_freshness_category",
    "get_analysis_category",
    "get_freshness_status",
    "get_freshness_badge_color",
    "get_recommendation",
    "get_detailed_explanation",
    "find_best_parameter",
    "has_invalid_values",
    "get_invalid_parameters_list",
    "sort_samples",
    "generate_csv",
    "parse_csv_file",
]
