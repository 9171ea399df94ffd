"""Hierarchical configuration loading and validation.

Configuration is assembled with the following precedence:
1. Default values (lowest priority)
2. JSON configuration files in the config directory
3. Environment variables
4. Command-line arguments (highest priority)

Sources are deep-merged, so a file or variable may override a single nested
value without restating its whole section.
"""
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ScoringConfig:
    """Freshness scorer settings.

    Attributes:
        csv_delimiter: Field separator for sample CSV import/export
    """
    csv_delimiter: str = ","

    def __post_init__(self):
        if len(self.csv_delimiter) != 1:
            raise ConfigurationError(f"csv_delimiter must be one character, got {self.csv_delimiter!r}")


@dataclass(frozen=True)
class ParserConfig:
    """Thresholds used when aggregating parsed AI analyses.

    Attributes:
        default_overall_score: Score reported when no analyzable parameter has a score
        min_analyzable: Fewer analyzable scores than this is reported as an issue
        low_confidence_limit: More low-confidence parameters than this is a warning
        variance_limit: Score variance above this is a warning
        confidence_floor: Lower bound of the assessment confidence
    """
    default_overall_score: float = 7.0
    min_analyzable: int = 3
    low_confidence_limit: int = 2
    variance_limit: float = 4.0
    confidence_floor: float = 0.6

    def __post_init__(self):
        if not 1 <= self.default_overall_score <= 9:
            raise ConfigurationError(f"default_overall_score out of range: {self.default_overall_score}")
        if not 0 <= self.confidence_floor <= 1:
            raise ConfigurationError(f"confidence_floor out of range: {self.confidence_floor}")
        if self.min_analyzable < 0 or self.low_confidence_limit < 0:
            raise ConfigurationError("Parameter count thresholds must not be negative")


@dataclass(frozen=True)
class UsageConfig:
    """Free tier settings.

    Attributes:
        free_tier_limit: Daily uses per feature for non-premium users
    """
    free_tier_limit: int = 5

    def __post_init__(self):
        if self.free_tier_limit < 0:
            raise ConfigurationError(f"free_tier_limit must not be negative: {self.free_tier_limit}")


@dataclass(frozen=True)
class ExportConfig:
    """Sample workbook settings."""
    excel_output_path: str = "logs/samples/samples.xlsx"


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration.

    Attributes:
        scoring: Freshness scorer settings
        parser: Analysis aggregation thresholds
        usage: Free tier limits
        export: Workbook output settings
        indicator_overrides: Keyword lists loaded from indicators.json
        debug: Debug mode flag
        log_level: Logging verbosity level
    """
    scoring: ScoringConfig
    parser: ParserConfig
    usage: UsageConfig
    export: ExportConfig

    indicator_overrides: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")


class ConfigLoader:
    """Loads configuration from every source and builds a validated AppConfig."""

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration: defaults → files → env → CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, arguments not consumed here)
        """
        config_dict = self._get_defaults()

        self._deep_update(config_dict, self._load_json_configs())
        self._deep_update(config_dict, self._load_env_overrides())

        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)

        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            "scoring": {"csv_delimiter": ","},
            "parser": {
                "default_overall_score": 7.0,
                "min_analyzable": 3,
                "low_confidence_limit": 2,
                "variance_limit": 4.0,
                "confidence_floor": 0.6,
            },
            "usage": {"free_tier_limit": 5},
            "export": {"excel_output_path": "logs/samples/samples.xlsx"},
            "indicator_overrides": {},
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_configs(self) -> Dict[str, Any]:
        """Load settings.json (section overrides) and indicators.json (keyword lists).

        Missing files are skipped; unreadable files are logged and skipped.
        """
        loaded: Dict[str, Any] = {}

        settings = self._read_json(self.config_dir / "settings.json")
        if settings:
            loaded.update(settings)

        indicators = self._read_json(self.config_dir / "indicators.json")
        if indicators:
            loaded["indicator_overrides"] = indicators

        return loaded

    @staticmethod
    def _read_json(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load {path.name}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {path.name}: top level must be an object")
            return {}
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Read overrides from the environment.

        Supported variables:
        - FRESHNESS_FREE_TIER_LIMIT: Daily free uses per feature
        - FRESHNESS_EXCEL_PATH: Sample workbook path
        - DEBUG: Enable debug mode
        - LOG_LEVEL: Logging level
        """
        overrides: Dict[str, Any] = {}

        limit = os.getenv("FRESHNESS_FREE_TIER_LIMIT")
        if limit:
            try:
                overrides.setdefault("usage", {})["free_tier_limit"] = int(limit)
            except ValueError as e:
                raise ConfigurationError(f"FRESHNESS_FREE_TIER_LIMIT must be an integer: {limit!r}") from e

        excel_path = os.getenv("FRESHNESS_EXCEL_PATH")
        if excel_path:
            overrides.setdefault("export", {})["excel_output_path"] = excel_path

        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        """Parse global options; command arguments are returned as unknown."""
        parser = argparse.ArgumentParser(add_help=False)
        parser.add_argument("--debug", action="store_true")
        parser.add_argument("--log-level", choices=list(LOG_LEVELS))
        parser.add_argument("--free-tier-limit", type=int)
        parser.add_argument("--excel-path")

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        if known.debug:
            overrides["debug"] = True
            overrides["log_level"] = "DEBUG"
        if known.log_level:
            overrides["log_level"] = known.log_level
        if known.free_tier_limit is not None:
            overrides.setdefault("usage", {})["free_tier_limit"] = known.free_tier_limit
        if known.excel_path:
            overrides.setdefault("export", {})["excel_output_path"] = known.excel_path

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build the final configuration object.

        Raises:
            ConfigurationError: If a section holds unknown keys or invalid values
        """
        try:
            return AppConfig(
                scoring=ScoringConfig(**config_dict.get("scoring", {})),
                parser=ParserConfig(**config_dict.get("parser", {})),
                usage=UsageConfig(**config_dict.get("usage", {})),
                export=ExportConfig(**config_dict.get("export", {})),
                indicator_overrides=config_dict.get("indicator_overrides", {}),
                debug=config_dict.get("debug", False),
                log_level=config_dict.get("log_level", "INFO"),
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration section: {e}") from e

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively merge ``updates`` into ``target`` without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)
            else:
                target[key] = new_val


def load_default_config(config_dir: Optional[Path] = None) -> AppConfig:
    """Load configuration without command-line arguments."""
    loader = ConfigLoader(config_dir) if config_dir is not None else ConfigLoader()
    config, _ = loader.load([])
    return config


__all__ = [
    "AppConfig",
    "ScoringConfig",
    "ParserConfig",
    "UsageConfig",
    "ExportConfig",
    "ConfigLoader",
    "load_default_config",
]
