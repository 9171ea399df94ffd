"""Unit tests for configuration loading and the configuration service."""
import json

import pytest
from unittest.mock import Mock, patch

from config.config import (
    AppConfig,
    ConfigLoader,
    ExportConfig,
    ParserConfig,
    ScoringConfig,
    UsageConfig,
)
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.exceptions import ConfigurationError

ENV_VARS = ("FRESHNESS_FREE_TIER_LIMIT", "FRESHNESS_EXCEL_PATH", "DEBUG", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfigurationService:
    """Tests for ConfigurationService facade."""

    @pytest.fixture
    def app_config(self):
        """Create an AppConfig for testing."""
        return AppConfig(
            scoring=ScoringConfig(csv_delimiter=";"),
            parser=ParserConfig(default_overall_score=6.5, min_analyzable=2, confidence_floor=0.5),
            usage=UsageConfig(free_tier_limit=3),
            export=ExportConfig(excel_output_path="logs/samples/test.xlsx"),
            indicator_overrides={"mata": {"positive": ["bening"], "negative": []}},
            debug=False,
            log_level="INFO",
        )

    def test_scoring_property(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.csv_delimiter == ";"

    def test_parser_properties(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.default_overall_score == 6.5
        assert service.min_analyzable == 2
        assert service.confidence_floor == 0.5

    def test_free_tier_limit_property(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.free_tier_limit == 3

    def test_excel_path_property(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.excel_path == "logs/samples/test.xlsx"

    def test_debug_property(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.debug is False
        assert service.log_level == "INFO"

    def test_raw_config_property(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Assert
        assert service.raw_config is app_config

    def test_to_dict(self, app_config):
        # Arrange
        service = ConfigurationService(app_config)

        # Act
        result = service.to_dict()

        # Assert
        assert result["scoring"]["csv_delimiter"] == ";"
        assert result["parser"]["min_analyzable"] == 2
        assert result["usage"]["free_tier_limit"] == 3
        assert result["export"]["excel_path"] == "logs/samples/test.xlsx"
        assert result["indicator_overrides"] == ["mata"]
        assert result["debug"] is False


class TestConfigValidation:
    """Tests for dataclass validation."""

    def test_invalid_delimiter(self):
        # Assert
        with pytest.raises(ConfigurationError):
            ScoringConfig(csv_delimiter=",,")

    def test_invalid_default_score(self):
        # Assert
        with pytest.raises(ConfigurationError):
            ParserConfig(default_overall_score=12)

    def test_negative_limit(self):
        # Assert
        with pytest.raises(ConfigurationError):
            UsageConfig(free_tier_limit=-1)

    def test_invalid_log_level(self):
        # Assert
        with pytest.raises(ConfigurationError):
            AppConfig(
                scoring=ScoringConfig(),
                parser=ParserConfig(),
                usage=UsageConfig(),
                export=ExportConfig(),
                log_level="VERBOSE",
            )


class TestConfigLoader:
    """Tests for configuration precedence."""

    def test_defaults(self, tmp_path):
        # Act
        config, unknown = ConfigLoader(tmp_path).load([])

        # Assert
        assert config.usage.free_tier_limit == 5
        assert config.parser.default_overall_score == 7.0
        assert config.scoring.csv_delimiter == ","
        assert unknown == []

    def test_json_files_override_defaults(self, tmp_path):
        # Arrange
        (tmp_path / "settings.json").write_text(json.dumps({"usage": {"free_tier_limit": 10}}))
        (tmp_path / "indicators.json").write_text(json.dumps({"mata": {"positive": ["bening"]}}))

        # Act
        config, _ = ConfigLoader(tmp_path).load([])

        # Assert
        assert config.usage.free_tier_limit == 10
        assert config.parser.min_analyzable == 3
        assert config.indicator_overrides == {"mata": {"positive": ["bening"]}}

    def test_broken_json_is_skipped(self, tmp_path):
        # Arrange
        (tmp_path / "settings.json").write_text("{not json")

        # Act
        config, _ = ConfigLoader(tmp_path).load([])

        # Assert
        assert config.usage.free_tier_limit == 5

    def test_env_overrides_json(self, tmp_path, monkeypatch):
        # Arrange
        (tmp_path / "settings.json").write_text(json.dumps({"usage": {"free_tier_limit": 10}}))
        monkeypatch.setenv("FRESHNESS_FREE_TIER_LIMIT", "2")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        # Act
        config, _ = ConfigLoader(tmp_path).load([])

        # Assert
        assert config.usage.free_tier_limit == 2
        assert config.log_level == "WARNING"

    def test_invalid_env_limit(self, tmp_path, monkeypatch):
        # Arrange
        monkeypatch.setenv("FRESHNESS_FREE_TIER_LIMIT", "many")

        # Assert
        with pytest.raises(ConfigurationError):
            ConfigLoader(tmp_path).load([])

    def test_cli_overrides_env_and_keeps_unknown(self, tmp_path, monkeypatch):
        # Arrange
        monkeypatch.setenv("FRESHNESS_FREE_TIER_LIMIT", "2")

        # Act
        config, unknown = ConfigLoader(tmp_path).load(
            ["--free-tier-limit", "8", "score", "--mata", "7", "--debug"]
        )

        # Assert
        assert config.usage.free_tier_limit == 8
        assert config.debug is True
        assert config.log_level == "DEBUG"
        assert unknown == ["score", "--mata", "7"]

    def test_unknown_section_key_raises(self, tmp_path):
        # Arrange
        (tmp_path / "settings.json").write_text(json.dumps({"usage": {"daily": 1}}))

        # Assert
        with pytest.raises(ConfigurationError):
            ConfigLoader(tmp_path).load([])


class TestConfigurationServiceFactory:
    """Tests for ConfigurationServiceFactory."""

    @patch('config.service.ConfigLoader')
    def test_create_from_args(self, mock_loader_class):
        # Arrange
        mock_loader = Mock()
        mock_config = Mock(spec=AppConfig)
        mock_loader.load.return_value = (mock_config, ["score"])
        mock_loader_class.return_value = mock_loader

        # Act
        service, unknown = ConfigurationServiceFactory.create_from_args(["--debug", "score"])

        # Assert
        assert isinstance(service, ConfigurationService)
        assert unknown == ["score"]
        mock_loader.load.assert_called_once_with(["--debug", "score"])

    def test_create_from_config(self):
        # Arrange
        mock_config = Mock(spec=AppConfig)

        # Act
        service = ConfigurationServiceFactory.create_from_config(mock_config)

        # Assert
        assert isinstance(service, ConfigurationService)
        assert service.raw_config is mock_config

    @patch('config.service.ConfigLoader')
    def test_create_default(self, mock_loader_class):
        # Arrange
        mock_loader = Mock()
        mock_config = Mock(spec=AppConfig)
        mock_loader.load.return_value = (mock_config, [])
        mock_loader_class.return_value = mock_loader

        # Act
        service = ConfigurationServiceFactory.create_default()

        # Assert
        assert isinstance(service, ConfigurationService)
        mock_loader.load.assert_called_once_with([])
