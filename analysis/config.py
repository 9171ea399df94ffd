"""Configuration access for the analysis parser."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from config.config import AppConfig, ParserConfig, load_default_config


class ConfigManager:
    """Parser-facing view of the application configuration."""

    def __init__(self, app_config: Optional[AppConfig] = None):
        """Use ``app_config`` or load the default configuration."""
        if app_config is None:
            app_config = load_default_config()

        self.app_config = app_config
        self.thresholds: ParserConfig = app_config.parser

    @property
    def indicators(self) -> Dict[str, Dict[str, List[str]]]:
        """Keyword list overrides keyed by parameter name.

        Entries that are not a mapping of ``positive``/``negative`` lists of
        strings are ignored.
        """
        overrides: Dict[str, Any] = self.app_config.indicator_overrides
        valid: Dict[str, Dict[str, List[str]]] = {}
        for key, value in overrides.items():
            if isinstance(value, dict) and all(
                isinstance(value.get(p, []), list)
                and all(isinstance(word, str) for word in value.get(p, []))
                for p in ("positive", "negative")
            ):
                valid[key] = value
            else:
                logger.warning(f"Ignoring malformed indicator override for '{key}'")
        return valid
