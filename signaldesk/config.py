# signaldesk/config.py
"""
Configuration management for the signaldesk library.

Settings are loaded from environment variables or a .env file.

Optional environment variables:
    LOG_LEVEL                 - Logging level (default: INFO)
    SIGNALDESK_CSV_DELIMITER  - Delimiter for candle CSV files (default: ",")

Indicator setups are described in YAML files:

    indicators:
      - name: Envelopes
        params:
          ma: SMA(20)
          k: 0.1
      - name: KlingerVolumeOscillator
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from signaldesk.indicators import INDICATORS, IndicatorConfig

log = logging.getLogger(__name__)

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Global settings for the signaldesk library.

    Values are loaded from environment variables on initialization.
    Users can override these programmatically if needed:

        from signaldesk.config import settings
        settings.log_level = "DEBUG"
    """

    log_level: str = "INFO"
    csv_delimiter: str = ","

    def __post_init__(self) -> None:
        # Populate from environment at import-time.
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()
        self.csv_delimiter = os.getenv("SIGNALDESK_CSV_DELIMITER", self.csv_delimiter)

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ValueError: If a setting is invalid
        """
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{self.log_level}'"
            )
        if not self.csv_delimiter:
            raise ValueError("SIGNALDESK_CSV_DELIMITER must not be empty")


def load_indicator_config(config_path: str | Path) -> dict:
    """
    Load indicator configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dictionary containing configuration
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ValueError(f"Empty config file: {config_path}")
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    return config


def build_indicator(name: str, params: dict[str, Any] | None = None) -> IndicatorConfig:
    """
    Create a default configuration for indicator `name` and apply `params`.

    Each parameter is applied through `IndicatorConfig.set` using its
    textual form, so YAML scalars and strings are handled the same way.

    Raises:
        ValueError: If the indicator name is unknown
        ParameterParseError: If a parameter name or value is rejected
    """
    cls = INDICATORS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown indicator {name!r}. Known indicators: {', '.join(sorted(INDICATORS))}"
        )

    if params is not None and not isinstance(params, dict):
        raise ValueError(f"'params' must be a mapping, got {params!r}")

    cfg = cls()
    for field_name, value in (params or {}).items():
        cfg.set(str(field_name), str(value))

    if not cfg.validate():
        log.warning("%s configured with invalid parameters: %s", name, cfg.params())

    return cfg


def build_indicators(config: dict) -> list[IndicatorConfig]:
    """Build every indicator listed under the `indicators` key of a loaded config."""
    entries = config.get("indicators") or []
    if not isinstance(entries, list):
        raise ValueError("'indicators' must be a list")

    configs: list[IndicatorConfig] = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict) or "name" not in entry:
            raise ValueError(f"Indicator entry must have a 'name': {entry!r}")
        configs.append(build_indicator(entry["name"], entry.get("params")))

    log.info("Built %d indicator configuration%s", len(configs), "s" if len(configs) != 1 else "")
    return configs


# Global settings instance - loaded when module is imported
settings = Settings()
