"""AI model catalog and the prompts sent with fish photos.

The prompts ask the model for the markdown tables that the pattern rules
in ``analysis.patterns`` read. Only prompt text is produced here; invoking
the model is left to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

NEPTUNE_FLOW = "neptune-flow"
CORAL_WAVE = "coral-wave"
REGAL_TIDE = "regal-tide"


@dataclass(frozen=True)
class AIModel:
    id: str
    name: str
    description: str
    is_premium: bool
    icon_type: str


AVAILABLE_MODELS: Tuple[AIModel, ...] = (
    AIModel(
        id=NEPTUNE_FLOW,
        name="Neptune Flow",
        description="Model standar untuk identifikasi spesies ikan dan analisis kesegaran.",
        is_premium=False,
        icon_type="fish",
    ),
    AIModel(
        id=CORAL_WAVE,
        name="Coral Wave",
        description="Model premium dengan akurasi lebih tinggi dan detail analisis yang lebih mendalam.",
        is_premium=True,
        icon_type="bot",
    ),
    AIModel(
        id=REGAL_TIDE,
        name="Regal Tide",
        description="Model eksklusif dengan kemampuan analisis tercanggih dan fitur tambahan.",
        is_premium=True,
        icon_type="activity",
    ),
)

_MODELS_BY_ID: Dict[str, AIModel] = {model.id: model for model in AVAILABLE_MODELS}


def get_model(model_id: str) -> AIModel:
    """Catalog entry for ``model_id``; unknown ids get the free model."""
    return _MODELS_BY_ID.get(model_id, _MODELS_BY_ID[NEPTUNE_FLOW])


def has_premium_access(is_premium: bool) -> bool:
    return is_premium


def can_use_model(model_id: str, is_premium: bool) -> bool:
    """Free users may only use models that are not premium."""
    return has_premium_access(is_premium) or not get_model(model_id).is_premium


SPECIES_PROMPT = """ANALISIS IDENTIFIKASI SPESIES IKAN

INSTRUKSI: Berikan identifikasi spesies ikan yang akurat dalam format tabel terstruktur.

| Kategori | Detail |
|----------|--------|
| **Nama Spesies** | [Nama spesies yang paling sesuai] |
| **Nama Ilmiah** | *[Nama ilmiah lengkap]* |
| **Famili** | [Nama famili taksonomi] |
| **Habitat Alami** | [Habitat spesifik] |
| **Karakteristik Utama** | [Ciri khas yang dapat diidentifikasi dari foto] |
| **Distribusi** | [Wilayah penyebaran geografis] |

**Tingkat Keyakinan Identifikasi:** [Tinggi/Sedang/Rendah] - [Alasan singkat]

ATURAN KHUSUS:
- Fokus HANYA pada identifikasi spesies, BUKAN analisis kesegaran
- Gunakan bahasa Indonesia yang profesional dan mudah dipahami
- Jika bukan ikan: "BUKAN IKAN: [penjelasan singkat apa yang terlihat dalam gambar]\""""

_PARAMETER_TABLE = """| Parameter | Kondisi Teramati | Skor SNI | Keterangan |
|-----------|------------------|----------|------------|
| **Mata** | [Kondisi mata ikan] | [1-3, 5-9] | [Cembung/rata/cekung, jernih/keruh] |
| **Insang** | [Kondisi insang] | [1-3, 5-9] | [Merah cerah/pucat/coklat/abu-abu] |
| **Lendir** | [Kondisi lendir tubuh] | [1-3, 5-9] | [Jernih/agak keruh/keruh] |
| **Daging** | [Perkiraan elastisitas] | [1-3, 5-9] | *Estimasi berdasarkan bentuk tubuh |
| **Bau** | [Perkiraan berdasarkan visual] | [1-3, 5-9] | *Tidak dapat dinilai dari foto |
| **Tekstur** | [Perkiraan permukaan] | [1-3, 5-9] | *Tidak dapat dinilai dari foto |"""

FRESHNESS_PROMPT = f"""ANALISIS KESEGARAN IKAN - STANDAR SNI 2729-2013

INSTRUKSI: Berikan analisis kesegaran ikan berdasarkan parameter SNI yang dapat dinilai dari foto.

**WAJIB GUNAKAN FORMAT TABEL PARAMETER SNI:**

{_PARAMETER_TABLE}

**PANDUAN PENILAIAN SNI:**
- **Skor 9:** Prima - Kondisi sangat segar
- **Skor 7-8:** Baik - Kondisi segar
- **Skor 5-6:** Sedang - Kurang segar, perlu segera diolah
- **Skor 1-3:** Buruk - Tidak segar, tidak layak konsumsi
- **Nilai 4 DIABAIKAN** sesuai standar SNI

**Keterbatasan Analisis Visual:**
Parameter bau dan tekstur daging tidak dapat dinilai secara akurat dari foto.

ATURAN KHUSUS:
- Gunakan skala SNI 1-9 (hindari nilai 4 sesuai standar)
- Jika bukan ikan: "BUKAN IKAN: [deskripsi objek yang terlihat]\""""

COMBINED_PROMPT = f"""ANALISIS LENGKAP IKAN - IDENTIFIKASI SPESIES & KESEGARAN SNI

## BAGIAN 1: IDENTIFIKASI SPESIES

| Kategori | Detail |
|----------|--------|
| **Nama Spesies** | [Nama spesies yang teridentifikasi] |
| **Nama Ilmiah** | *[Nama ilmiah lengkap]* |
| **Famili** | [Famili taksonomi] |

## BAGIAN 2: ANALISIS KESEGARAN (SNI 2729-2013)

{_PARAMETER_TABLE}

**Keterbatasan Analisis:**
Parameter bau dan tekstur memerlukan pemeriksaan fisik langsung sesuai standar SNI 2729-2013.

ATURAN KHUSUS:
- Gunakan skala SNI 1-9 (hindari nilai 4 sesuai standar)
- Jika bukan ikan: "BUKAN IKAN: [deskripsi objek yang terlihat]\""""

_MODEL_ENHANCEMENTS: Dict[str, str] = {
    CORAL_WAVE: (
        "**ENHANCEMENT MODE - CORAL WAVE:**\n"
        "Tambahkan detail ilmiah tambahan dan analisis morfologi yang lebih mendalam."
    ),
    REGAL_TIDE: (
        "**PREMIUM MODE - REGAL TIDE:**\n"
        "Berikan analisis paling komprehensif dengan insight mendalam dan rekomendasi praktis."
    ),
}


def _enhance(prompt: str, model_id: str) -> str:
    enhancement = _MODEL_ENHANCEMENTS.get(model_id)
    return f"{prompt}\n\n{enhancement}" if enhancement else prompt


def get_model_prompt(model_id: str, is_species_id: bool) -> str:
    """Species identification or freshness prompt, tuned for the model tier."""
    return _enhance(SPECIES_PROMPT if is_species_id else FRESHNESS_PROMPT, model_id)


def get_combined_analysis_prompt(model_id: str) -> str:
    return _enhance(COMBINED_PROMPT, model_id)
