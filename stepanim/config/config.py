"""Configuration management for stepanim.

Provides centralized configuration with TOML support and validation, loaded
hierarchically from defaults, then the config file, then the environment.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import toml

from stepanim.models import AnimationDefaultsConfig, Config, ObservabilityConfig
from stepanim.utils.exceptions import ConfigurationError
from stepanim.utils.logging_config import setup_logging

CONFIG_FILE_NAME = "stepanim.toml"

# Environment variable -> config path
ENV_MAPPINGS: dict[str, str] = {
    # Observability
    "STEPANIM_LOG_LEVEL": "observability.log_level",
    "STEPANIM_LOG_FILE": "observability.log_file",
    "STEPANIM_STRUCTURED_LOGGING": "observability.structured_logging",
    "STEPANIM_LOG_CORRELATION_ID": "observability.log_correlation_id",
    # Animation defaults
    "STEPANIM_STEP_DURATION": "animation.step_duration",
    "STEPANIM_FRAME_INTERVAL": "animation.frame_interval",
    "STEPANIM_HIGHLIGHT_COLOR": "animation.highlight_color",
    "STEPANIM_TRAIL_LENGTH": "animation.trail_length",
    "STEPANIM_TRAIL_DIM_FACTOR": "animation.trail_dim_factor",
    "STEPANIM_REPEAT": "animation.repeat",
    "STEPANIM_ADVANCE_MODE": "animation.advance_mode",
    "STEPANIM_SPINNER_TYPE": "animation.spinner_type",
}

logger = logging.getLogger(__name__)

# Global configuration instance
_config_manager: ConfigManager | None = None


def _parse_env_value(raw: str) -> bool | int | float | str | None:
    low = raw.strip().lower()
    if low in {"", "none", "null"}:
        return None
    if low in {"true", "yes", "on"}:
        return True
    if low in {"false", "no", "off"}:
        return False
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def _set_nested(d: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    cur = d
    for p in parts[:-1]:
        cur = cur.setdefault(p, {})
    cur[parts[-1]] = value


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, config_file: str | Path | None = None, setup_logs: bool = True):
        """Initialize configuration manager.

        Args:
            config_file: Path to TOML config file. If None, searches for stepanim.toml
            setup_logs: Whether to configure logging from the loaded config

        """
        self.config_file = self._find_config_file(config_file)
        self.config = self._load_config()
        if setup_logs:
            self._setup_logging()

    def _find_config_file(
        self,
        config_file: str | Path | None,
    ) -> Path | None:
        """Find configuration file in standard locations."""
        if config_file:
            return Path(config_file)

        # Search in current directory, then home directory
        search_paths = [
            Path.cwd() / CONFIG_FILE_NAME,
            Path.home() / ".config" / "stepanim" / CONFIG_FILE_NAME,
            Path.home() / f".{CONFIG_FILE_NAME}",
        ]

        for path in search_paths:
            if path.exists():
                return path

        return None

    def _load_config(self) -> Config:
        """Load configuration from file and environment.

        Raises:
            ConfigurationError: If the file cannot be parsed or values are invalid

        """
        config_data: dict[str, Any] = {}

        if self.config_file and self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    config_data.update(toml.load(f))
            except (OSError, toml.TomlDecodeError) as e:
                msg = f"Failed to load config file {self.config_file}: {e}"
                raise ConfigurationError(msg, {"path": str(self.config_file)}) from e
            logger.debug("Loaded configuration from %s", self.config_file)

        env_config = self._get_env_config()
        config_data = self._merge_config(config_data, env_config)

        try:
            return Config(**config_data)
        except Exception as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigurationError(msg) from e

    def _get_env_config(self) -> dict[str, Any]:
        """Get configuration from STEPANIM_* environment variables."""
        env_config: dict[str, Any] = {}
        for env_name, cfg_path in ENV_MAPPINGS.items():
            raw = os.getenv(env_name)
            if raw is None:
                continue
            _set_nested(env_config, cfg_path, _parse_env_value(raw))
        return env_config

    def _merge_config(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Merge configuration dictionaries recursively."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result

    def export(self, fmt: str = "toml") -> str:
        """Export current configuration as a string.

        Args:
            fmt: one of "toml" or "json"

        """
        data = self.config.model_dump(mode="json")

        fmt = (fmt or "toml").lower()
        if fmt == "toml":
            return toml.dumps(data)
        if fmt == "json":
            return json.dumps(data, indent=2)
        msg = f"Unsupported export format: {fmt}"
        raise ConfigurationError(msg, {"format": fmt})

    def _setup_logging(self) -> None:
        """Set up logging configuration."""
        setup_logging(self.config.observability)


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.config


def init_config(config_file: str | Path | None = None) -> ConfigManager:
    """Initialize the global configuration manager."""
    global _config_manager
    _config_manager = ConfigManager(config_file)
    return _config_manager


def reload_config() -> Config:
    """Reload configuration from file."""
    if _config_manager is None:
        msg = "Configuration not initialized"
        raise ConfigurationError(msg)

    _config_manager.config = _config_manager._load_config()  # noqa: SLF001
    _config_manager._setup_logging()  # noqa: SLF001
    return _config_manager.config


def set_config(new_config: Config) -> None:
    """Replace the global configuration at runtime and reconfigure logging."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(None)
    _config_manager.config = new_config
    _config_manager._setup_logging()  # noqa: SLF001


def get_observability_config() -> ObservabilityConfig:
    return get_config().observability


def get_animation_config() -> AnimationDefaultsConfig:
    return get_config().animation
