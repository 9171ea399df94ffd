"""Static classification of the six SNI 2729-2013 parameters.

Whether a parameter can be judged from a photograph is fixed per parameter
and never inferred at runtime:

- visual (mata, insang, lendir): seen directly, analyzable
- estimable (daging): inferred from body shape, analyzable
- non-visual (bau, tekstur): needs smell or touch, not analyzable
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

VISUAL = "visual"
ESTIMABLE = "estimable"
NON_VISUAL = "non-visual"

VISUAL_PARAMETERS: Tuple[str, ...] = ("mata", "insang", "lendir")
ESTIMABLE_PARAMETERS: Tuple[str, ...] = ("daging",)
NON_ANALYZABLE_PARAMETERS: Tuple[str, ...] = ("bau", "tekstur")

# Parsing order of the six parameters.
ALL_PARAMETERS: Tuple[str, ...] = VISUAL_PARAMETERS + ESTIMABLE_PARAMETERS + NON_ANALYZABLE_PARAMETERS


@dataclass(frozen=True)
class FallbackScores:
    """Scores assigned by keyword estimation when no pattern matched."""
    positive: int
    negative: int
    neutral: int


@dataclass(frozen=True)
class ParameterClassification:
    """Everything known about one parameter before reading any text."""
    key: str
    name: str
    kind: str
    reliability: str
    analysis_method: str
    description: str
    fallback: FallbackScores
    good_condition: str
    visual_indicators: List[str] = field(default_factory=list)
    limitations: List[str] = field(default_factory=list)

    @property
    def is_analyzable(self) -> bool:
        return self.kind in (VISUAL, ESTIMABLE)


PARAMETER_CLASSIFICATIONS: Dict[str, ParameterClassification] = {
    "mata": ParameterClassification(
        key="mata",
        name="Mata",
        kind=VISUAL,
        reliability="high",
        analysis_method="direct",
        description="Dapat dianalisis langsung dari foto dengan akurasi tinggi",
        fallback=FallbackScores(positive=8, negative=5, neutral=7),
        good_condition="Mata jernih dan cembung",
        visual_indicators=["Kejernihan kornea", "Bentuk mata (cembung/cekung)", "Warna pupil"],
        limitations=["Kualitas foto mempengaruhi akurasi", "Sudut pengambilan gambar"],
    ),
    "insang": ParameterClassification(
        key="insang",
        name="Insang",
        kind=VISUAL,
        reliability="high",
        analysis_method="direct",
        description="Dapat dianalisis langsung dari warna dan kondisi visual",
        fallback=FallbackScores(positive=8, negative=5, neutral=7),
        good_condition="Insang merah cerah",
        visual_indicators=["Warna (merah cerah/pucat)", "Tekstur permukaan", "Kelembaban visual"],
        limitations=["Perlu foto yang jelas pada area insang", "Pencahayaan mempengaruhi persepsi warna"],
    ),
    "lendir": ParameterClassification(
        key="lendir",
        name="Lendir",
        kind=VISUAL,
        reliability="medium",
        analysis_method="inference",
        description="Dapat diestimasikan dari indikator visual permukaan tubuh",
        fallback=FallbackScores(positive=7, negative=6, neutral=7),
        good_condition="Lendir jernih mengkilap",
        visual_indicators=["Kilap permukaan", "Tekstur visual", "Refleksi cahaya"],
        limitations=["Sulit membedakan antara air dan lendir alami", "Interpretasi subjektif"],
    ),
    "daging": ParameterClassification(
        key="daging",
        name="Daging",
        kind=ESTIMABLE,
        reliability="low",
        analysis_method="estimation",
        description="Diestimasi dari bentuk tubuh; elastisitas memerlukan sentuhan fisik",
        fallback=FallbackScores(positive=7, negative=6, neutral=6),
        good_condition="Daging elastis dan padat",
        visual_indicators=["Bentuk tubuh", "Tonus otot visual"],
        limitations=["Tidak dapat menilai elastisitas", "Estimasi berdasarkan penampakan luar saja"],
    ),
    "bau": ParameterClassification(
        key="bau",
        name="Bau",
        kind=NON_VISUAL,
        reliability="impossible",
        analysis_method="impossible",
        description="Tidak mungkin dianalisis dari foto - memerlukan indra penciuman",
        fallback=FallbackScores(positive=6, negative=5, neutral=6),
        good_condition="Bau segar khas ikan",
        visual_indicators=["Kondisi mata dan insang sebagai indikator tidak langsung"],
        limitations=["Tidak dapat mencium aroma dari foto"],
    ),
    "tekstur": ParameterClassification(
        key="tekstur",
        name="Tekstur",
        kind=NON_VISUAL,
        reliability="low",
        analysis_method="estimation",
        description="Tidak dapat dianalisis dari foto - tekstur memerlukan sentuhan fisik",
        fallback=FallbackScores(positive=6, negative=5, neutral=6),
        good_condition="Tekstur halus dan lembut",
        visual_indicators=["Penampakan permukaan kulit"],
        limitations=["Tidak dapat menilai kekasaran/kehalusan aktual", "Tekstur visual berbeda dengan tekstur fisik"],
    ),
}

# Keyword lists used by the fallback estimator, matched as lowercase substrings.
DEFAULT_INDICATORS: Dict[str, Dict[str, List[str]]] = {
    "mata": {
        "positive": ["jernih", "transparan", "cembung", "hitam", "terang", "segar", "cerah"],
        "negative": ["keruh", "abu", "cekung", "kusam", "pucat", "rata", "putih"],
    },
    "insang": {
        "positive": ["merah", "cerah", "segar", "terang", "merah muda"],
        "negative": ["pucat", "abu", "coklat", "kusam", "berlendir", "keabu"],
    },
    "lendir": {
        "positive": ["jernih", "transparan", "mengkilap", "tipis", "bening"],
        "negative": ["keruh", "kental", "lengket", "berbusa", "kotor"],
    },
    "daging": {
        "positive": ["elastis", "kenyal", "padat", "segar", "kencang"],
        "negative": ["lembek", "keras", "rusak", "busuk", "kendur"],
    },
    "bau": {
        "positive": ["segar", "normal", "khas", "tidak berbau"],
        "negative": ["amis", "busuk", "menyengat", "tidak sedap", "tengik"],
    },
    "tekstur": {
        "positive": ["halus", "lembut", "elastis", "baik", "licin"],
        "negative": ["kasar", "keras", "kering", "rusak", "pecah"],
    },
}


def get_parameter_reliability(name: str) -> Optional[ParameterClassification]:
    """Classification for a parameter name in any case; None when unknown."""
    return PARAMETER_CLASSIFICATIONS.get(name.strip().lower())


def is_analyzable(key: str) -> bool:
    classification = get_parameter_reliability(key)
    return classification is not None and classification.is_analyzable


def display_name(key: str) -> str:
    classification = get_parameter_reliability(key)
    return classification.name if classification else key


def default_condition(key: str, score: Optional[int]) -> str:
    """Condition text for a score found without a condition description."""
    if not score:
        return "Kondisi tidak diketahui"
    if score >= 8:
        classification = get_parameter_reliability(key)
        return classification.good_condition if classification else "Kondisi sangat baik"
    if score >= 6:
        return "Kondisi baik"
    return "Kondisi kurang baik"
