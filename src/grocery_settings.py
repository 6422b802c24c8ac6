#!/usr/bin/env python3
"""
Grocery list settings.
Defaults come from environment variables and may be overridden by a
YAML or JSON settings file.
"""

import os
import logging
import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, fields, replace

import yaml
import structlog

from grocery_errors import ConfigurationError
from grocery_models import TEXT_BULLETS
from logging_config import LOG_FORMATS

logger = structlog.wrap_logger(logging.getLogger(__name__))

EXPORT_STYLES = tuple(TEXT_BULLETS) + ("json",)

# Case folding for keyword-like settings, applied to env and file values alike
_CASE_FOLDING = {
    "export_style": str.lower,
    "log_format": str.lower,
    "log_level": str.upper,
}


def _normalize_value(key: str, value: Any) -> str:
    text = str(value).strip()
    fold = _CASE_FOLDING.get(key)
    return fold(text) if fold else text


@dataclass(frozen=True)
class GrocerySettings:
    """Settings for building and exporting grocery lists."""
    list_name: str = "My Grocery List"
    default_package: str = "standard package"
    export_style: str = "share"  # 'share', 'notes', 'json'
    log_level: str = "INFO"
    log_format: str = "text"  # 'text' or 'json'

    @classmethod
    def from_env(cls) -> "GrocerySettings":
        """Build settings from environment variables."""
        defaults = cls()
        env = {
            "list_name": os.getenv("GROCERY_LIST_NAME", defaults.list_name),
            "default_package": os.getenv("GROCERY_DEFAULT_PACKAGE", defaults.default_package),
            "export_style": os.getenv("GROCERY_EXPORT_STYLE", defaults.export_style),
            "log_level": os.getenv("LOG_LEVEL", defaults.log_level),
            "log_format": os.getenv("LOG_FORMAT", defaults.log_format),
        }
        return cls(**{key: _normalize_value(key, value) for key, value in env.items()})

    def validate(self) -> "GrocerySettings":
        """Raise ConfigurationError on invalid values."""
        if self.export_style not in EXPORT_STYLES:
            raise ConfigurationError(
                f"Invalid export style: {self.export_style}",
                details={"allowed": list(EXPORT_STYLES)}
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format: {self.log_format}",
                details={"allowed": list(LOG_FORMATS)}
            )
        return self


def _read_settings_file(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if config_path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {config_path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Malformed settings file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {config_path} must contain a mapping")
    return data


def load_settings(config_path: Optional[str] = None) -> GrocerySettings:
    """
    Load settings.

    Args:
        config_path: Optional YAML (.yaml/.yml) or JSON (.json) file whose
            keys override the environment defaults

    Returns:
        Validated settings
    """
    settings = GrocerySettings.from_env()

    if config_path:
        data = _read_settings_file(Path(config_path))
        known = {f.name for f in fields(GrocerySettings)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("unknown_settings_ignored", keys=unknown, path=str(config_path))
        overrides = {
            key: _normalize_value(key, value) for key, value in data.items() if key in known
        }
        settings = replace(settings, **overrides)

    return settings.validate()
