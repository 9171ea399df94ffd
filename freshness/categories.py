"""Category tables for freshness scores.

Two scales live here side by side:

- the sample scale (``get_freshness_category``) used for manually scored
  samples: Baik / Sedang / Buruk / Invalid;
- the analysis scale (``get_analysis_category``) used for parsed AI
  analyses: Prima / Baik / Sedang / Buruk.

Both claim to follow SNI 2729-2013 but use different thresholds and labels.
Which one is canonical is an open product decision; see DESIGN.md.
"""
from __future__ import annotations

from typing import Dict

PRIMA = "Prima"
BAIK = "Baik"
SEDANG = "Sedang"
BURUK = "Buruk"
INVALID = "Invalid"

SAMPLE_CATEGORIES = (BAIK, SEDANG, BURUK, INVALID)
ANALYSIS_CATEGORIES = (PRIMA, BAIK, SEDANG, BURUK)

_STATUS: Dict[str, str] = {
    PRIMA: "success",
    BAIK: "success",
    SEDANG: "warning",
    BURUK: "error",
}

_BADGE_COLOR: Dict[str, str] = {
    PRIMA: "blue",
    BAIK: "green",
    SEDANG: "amber",
    BURUK: "red",
}

_RECOMMENDATIONS: Dict[str, str] = {
    PRIMA: "Ikan dalam kondisi sangat baik, layak untuk dikonsumsi dan dijual.",
    BAIK: "Ikan dalam kondisi baik, sangat layak untuk dikonsumsi atau dijual.",
    SEDANG: "Ikan dalam kondisi sedang, disarankan untuk segera diolah atau dikonsumsi.",
    BURUK: "Ikan dalam kondisi buruk, tidak layak untuk dikonsumsi atau dijual.",
}

_EXPLANATIONS: Dict[str, str] = {
    PRIMA: (
        "Berdasarkan analisis parameter visual, ikan ini menunjukkan ciri-ciri kesegaran "
        "optimal. Mata jernih dan menonjol, insang berwarna merah cerah, tekstur daging "
        "elastis dan padat, serta tidak ada tanda-tanda pembusukan."
    ),
    BAIK: (
        "Ikan ini masih dalam kondisi segar dengan sebagian besar parameter menunjukkan "
        "kualitas yang baik. Secara keseluruhan ikan masih layak konsumsi dan aman untuk "
        "diolah menjadi berbagai hidangan."
    ),
    SEDANG: (
        "Ikan menunjukkan tanda-tanda penurunan kesegaran dengan beberapa parameter berada "
        "di batas toleransi. Disarankan untuk segera mengolah atau mengonsumsi ikan ini "
        "dan memasaknya dengan suhu yang cukup tinggi."
    ),
    BURUK: (
        "Ikan menunjukkan tanda-tanda pembusukan yang jelas. Mata cekung dan keruh, insang "
        "pucat atau kehitaman, tekstur daging lunak, dan kemungkinan berbau tidak sedap. "
        "Ikan ini tidak aman untuk dikonsumsi dan sebaiknya dibuang."
    ),
}


def get_freshness_category(score: float) -> str:
    """Sample-scale category for a score.

    [8, 9] Baik, [6, 8) Sedang, [4, 6) Sedang, [1, 4) Buruk, anything else
    (including 0 for "no valid data") Invalid. The two Sedang bands are not
    distinguished.
    """
    if 8 <= score <= 9:
        return BAIK
    if 6 <= score < 8:
        return SEDANG
    if 4 <= score < 6:
        return SEDANG
    if 1 <= score < 4:
        return BURUK
    return INVALID


def get_analysis_category(average: float) -> str:
    """Analysis-scale category: >=8.5 Prima, >=7 Baik, >=5 Sedang, else Buruk."""
    if average >= 8.5:
        return PRIMA
    if average >= 7:
        return BAIK
    if average >= 5:
        return SEDANG
    return BURUK


def get_freshness_status(category: str) -> str:
    """Presentation status: success, warning, error, or neutral for anything else."""
    return _STATUS.get(category, "neutral")


def get_freshness_badge_color(category: str) -> str:
    return _BADGE_COLOR.get(category, "gray")


def get_recommendation(category: str) -> str:
    """One-sentence Indonesian advice for a category."""
    return _RECOMMENDATIONS.get(category, "Data tidak valid untuk analisis.")


def get_detailed_explanation(category: str) -> str:
    return _EXPLANATIONS.get(
        category, "Tidak dapat memberikan penjelasan untuk kategori yang tidak dikenal."
    )
