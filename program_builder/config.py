"""
Configuration loading from config.yaml with environment overrides.
"""

import copy
import os

import yaml
from dotenv import load_dotenv


CONFIG_ENV = "PROGRAM_BUILDER_CONFIG"
LOG_LEVEL_ENV = "PROGRAM_BUILDER_LOG_LEVEL"
DEFAULT_CONFIG_FILE = "config.yaml"

DEFAULT_CONFIG = {
    "defaults": {
        "style": "Strength only",
        "mode": "template",
        "difficulty": "just-right",
        "enjoyment": "neutral",
    },
    "output": {
        "folder": "output",
    },
    "logging": {
        "level": "WARNING",
        "file": None,
    },
}


class ConfigError(Exception):
    """Raised when a configuration file is missing or malformed."""


def _merge(base, overrides):
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path=None):
    """
    Load configuration, layering config.yaml over built-in defaults.

    Args:
        path: explicit config file; falls back to $PROGRAM_BUILDER_CONFIG,
            then ./config.yaml

    Returns:
        dict with defaults, output and logging sections

    Raises:
        ConfigError: if an explicitly requested file is missing or any
            file is not valid YAML mapping
    """
    load_dotenv()

    explicit = path or os.getenv(CONFIG_ENV)
    config_path = explicit or DEFAULT_CONFIG_FILE

    user_config = {}
    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        if not isinstance(user_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping at the top level")
    elif explicit:
        raise ConfigError(f"Config file not found: {config_path}")

    config = _merge(DEFAULT_CONFIG, user_config)

    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        config["logging"]["level"] = level.upper()

    return config
