"""Unit tests for the AI model catalog and prompts."""
import pytest

from analysis import EnhancedResultParser
from analysis.config import ConfigManager
from analysis.prompts import (
    AVAILABLE_MODELS,
    CORAL_WAVE,
    NEPTUNE_FLOW,
    REGAL_TIDE,
    can_use_model,
    get_combined_analysis_prompt,
    get_model,
    get_model_prompt,
    has_premium_access,
)
from config.config import AppConfig, ExportConfig, ParserConfig, ScoringConfig, UsageConfig


class TestModelCatalog:
    """Tests for the model catalog."""

    def test_only_first_model_is_free(self):
        # Assert
        assert [m.is_premium for m in AVAILABLE_MODELS] == [False, True, True]

    def test_unknown_model_falls_back_to_free(self):
        # Assert
        assert get_model("does-not-exist").id == NEPTUNE_FLOW

    @pytest.mark.parametrize("model_id,is_premium,expected", [
        (NEPTUNE_FLOW, False, True),
        (CORAL_WAVE, False, False),
        (REGAL_TIDE, True, True),
    ])
    def test_can_use_model(self, model_id, is_premium, expected):
        # Assert
        assert can_use_model(model_id, is_premium) is expected

    def test_premium_access(self):
        # Assert
        assert has_premium_access(True)
        assert not has_premium_access(False)


class TestPrompts:
    """Tests for prompt construction."""

    def test_species_prompt(self):
        # Act
        prompt = get_model_prompt(NEPTUNE_FLOW, True)

        # Assert
        assert "IDENTIFIKASI SPESIES" in prompt
        assert "ENHANCEMENT MODE" not in prompt

    def test_freshness_prompt_with_enhancement(self):
        # Act
        prompt = get_model_prompt(CORAL_WAVE, False)

        # Assert
        assert "SNI 2729-2013" in prompt
        assert prompt.endswith("analisis morfologi yang lebih mendalam.")

    def test_combined_prompt(self):
        # Act
        prompt = get_combined_analysis_prompt(REGAL_TIDE)

        # Assert
        assert "BAGIAN 1" in prompt and "BAGIAN 2" in prompt
        assert "PREMIUM MODE - REGAL TIDE" in prompt

    def test_requested_table_layout_is_parseable(self):
        # Arrange
        config = AppConfig(ScoringConfig(), ParserConfig(), UsageConfig(), ExportConfig())
        parser = EnhancedResultParser(ConfigManager(config))
        answer = get_model_prompt(NEPTUNE_FLOW, False).replace("[1-3, 5-9]", "7")

        # Act
        result = parser.parse_analysis_result(answer)

        # Assert
        assert all(p.source == "table_row" for p in result.parameters)
        assert all(p.score == 7 for p in result.parameters)
