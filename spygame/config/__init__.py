"""Game configuration module."""

from .game_config import GameConfig, default_config
from .config_loader import apply_settings, load_config, load_config_from_yaml, read_config_file
from .preferences import PreferencesStore, DEFAULT_PLAYERS

__all__ = [
    'GameConfig',
    'default_config',
    'apply_settings',
    'load_config',
    'load_config_from_yaml',
    'read_config_file',
    'PreferencesStore',
    'DEFAULT_PLAYERS',
]
