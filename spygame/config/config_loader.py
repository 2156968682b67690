"""
Configuration loading: YAML file first, then environment overrides.
"""

import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .game_config import GameConfig

# Environment variables that point the game at other files on disk
ENV_OVERRIDES = {
    "SPYGAME_RUNS_DIR": "runs_dir",
    "SPYGAME_PREFERENCES": "preferences_path",
}

CONFIG_KEYS = frozenset(f.name for f in fields(GameConfig))


def read_config_file(config_path: str) -> Dict[str, Any]:
    """
    Read the raw mapping stored in a YAML config file.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If the document is not a mapping
    """
    config_file = Path(config_path)
    if not config_file.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def apply_settings(config: GameConfig, values: Mapping[str, Any], source: str = "YAML file") -> GameConfig:
    """Copy known keys from values onto config, warning about the rest."""
    for key, value in values.items():
        if key in CONFIG_KEYS:
            setattr(config, key, value)
        else:
            print(f"Warning: Unknown config key '{key}' in {source}")
    return config


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Build a configuration from a YAML file.

    Keys missing from the file keep their defaults.
    """
    return apply_settings(GameConfig(), read_config_file(config_path))


def load_config(config_path: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Load configuration for one session.

    Args:
        config_path: Optional YAML config file. Defaults are used when None.
        environ: Environment to read path overrides from (os.environ by default)

    Returns:
        A fresh GameConfig instance
    """
    config = load_config_from_yaml(config_path) if config_path else GameConfig()

    environ = os.environ if environ is None else environ
    overrides = {key: environ[var] for var, key in ENV_OVERRIDES.items() if environ.get(var)}
    return apply_settings(config, overrides, source="environment")
