"""Configuration facade giving flat access to nested settings."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from config.config import AppConfig, ConfigLoader


class ConfigurationService:
    """Flat, read-only view over an AppConfig.

    Example:
        config_service = ConfigurationService(config)
        limit = config_service.free_tier_limit  # instead of config.usage.free_tier_limit
    """

    def __init__(self, config: AppConfig):
        self._config = config

    # Scoring
    @property
    def csv_delimiter(self) -> str:
        return self._config.scoring.csv_delimiter

    # Parser thresholds
    @property
    def default_overall_score(self) -> float:
        return self._config.parser.default_overall_score

    @property
    def min_analyzable(self) -> int:
        return self._config.parser.min_analyzable

    @property
    def confidence_floor(self) -> float:
        return self._config.parser.confidence_floor

    # Usage
    @property
    def free_tier_limit(self) -> int:
        return self._config.usage.free_tier_limit

    # Export
    @property
    def excel_path(self) -> str:
        return self._config.export.excel_output_path

    # General
    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def log_level(self) -> str:
        return self._config.log_level

    def get_indicator_overrides(self) -> dict[str, Any]:
        """Keyword lists that replace the built-in fallback indicators."""
        return self._config.indicator_overrides

    @property
    def raw_config(self) -> AppConfig:
        return self._config

    def to_dict(self) -> dict[str, Any]:
        """Configuration summary for logging."""
        parser = self._config.parser
        return {
            "scoring": {"csv_delimiter": self.csv_delimiter},
            "parser": {
                "default_overall_score": parser.default_overall_score,
                "min_analyzable": parser.min_analyzable,
                "low_confidence_limit": parser.low_confidence_limit,
                "variance_limit": parser.variance_limit,
                "confidence_floor": parser.confidence_floor,
            },
            "usage": {"free_tier_limit": self.free_tier_limit},
            "export": {"excel_path": self.excel_path},
            "indicator_overrides": sorted(self.get_indicator_overrides()),
            "debug": self.debug,
            "log_level": self.log_level,
        }


class ConfigurationServiceFactory:
    """Construction helpers for ConfigurationService."""

    @staticmethod
    def create_from_args(
        args: list[str], config_dir: Optional[Path] = None
    ) -> tuple[ConfigurationService, list[str]]:
        """Build from command-line arguments; returns unconsumed arguments too."""
        loader = ConfigLoader(config_dir) if config_dir is not None else ConfigLoader()
        config, unknown_args = loader.load(args)
        return ConfigurationService(config), unknown_args

    @staticmethod
    def create_from_config(config: AppConfig) -> ConfigurationService:
        return ConfigurationService(config)

    @staticmethod
    def create_default() -> ConfigurationService:
        config, _ = ConfigLoader().load([])
        return ConfigurationService(config)
