"""
File-backed storage for setup preferences (settings and player names).
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from .game_config import GameConfig, default_config

SETTINGS_KEY = "settings"
PLAYERS_KEY = "players"

DEFAULT_PLAYERS: List[str] = ["", "", ""]

INT_SETTINGS = ("spy_count", "timer_duration")
BOOL_SETTINGS = ("show_category_to_spy", "show_letter_count_to_spy", "show_first_letter_to_spy")


def _has_setting_type(key: str, value: Any) -> bool:
    """Check a restored setting has the type its default has."""
    if key in INT_SETTINGS:
        # bool is an int subclass but never a count or duration
        return isinstance(value, int) and not isinstance(value, bool)
    if key in BOOL_SETTINGS:
        return isinstance(value, bool)
    if key == "categories":
        return isinstance(value, list) and all(isinstance(c, str) for c in value)
    return True


class PreferencesStore:
    """
    Persists the last used settings and player names in a YAML file.

    Restored values are validated here; callers always receive a usable
    settings dict and a list of at least three names.
    """

    def __init__(self, path: str, config: GameConfig = default_config):
        self.path = Path(path)
        self.config = config

    def default_settings(self) -> Dict[str, Any]:
        return {
            "spy_count": self.config.spy_count,
            "categories": list(self.config.categories),
            "timer_duration": self.config.timer_duration,
            "show_category_to_spy": self.config.show_category_to_spy,
            "show_letter_count_to_spy": self.config.show_letter_count_to_spy,
            "show_first_letter_to_spy": self.config.show_first_letter_to_spy,
        }

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: could not read preferences from {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
        except OSError as e:
            print(f"Warning: could not save preferences to {self.path}: {e}")

    def load_settings(self) -> Dict[str, Any]:
        """Load stored settings merged over the defaults."""
        defaults = self.default_settings()
        stored = self._read().get(SETTINGS_KEY)
        if not isinstance(stored, dict):
            return defaults

        settings = dict(defaults)
        for key, value in stored.items():
            if key in defaults and _has_setting_type(key, value):
                settings[key] = value
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> None:
        self._write(SETTINGS_KEY, dict(settings))

    def load_players(self) -> List[str]:
        """
        Load stored player names.

        Falls back to three blank names unless a list of at least three
        strings was stored.
        """
        stored: Optional[Any] = self._read().get(PLAYERS_KEY)
        if isinstance(stored, list) and all(isinstance(name, str) for name in stored):
            if len(stored) >= 3:
                return list(stored)
        return list(DEFAULT_PLAYERS)

    def save_players(self, player_names: List[str]) -> None:
        self._write(PLAYERS_KEY, list(player_names))
