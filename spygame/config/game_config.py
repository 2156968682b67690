"""
Game configuration and constants.
"""

from dataclasses import dataclass, field
from typing import List, Optional


def _default_categories() -> List[str]:
    return ["animals", "cities", "professions", "objects", "food"]


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Match defaults (used when no preferences are stored)
    spy_count: int = 1
    categories: List[str] = field(default_factory=_default_categories)
    timer_duration: int = 300  # seconds
    show_category_to_spy: bool = True
    show_letter_count_to_spy: bool = False
    show_first_letter_to_spy: bool = False

    # Roster and timer limits
    min_players: int = 3
    max_players: int = 10
    min_timer: int = 60  # seconds
    max_timer: int = 1800

    # Judge announcements
    use_judge_announcements: bool = True

    # Storage
    preferences_path: str = "spygame_preferences.yaml"
    runs_dir: str = "runs"
    record_events: bool = True

    random_seed: Optional[int] = None  # Seeds role assignment and word selection


# Default configuration instance
default_config = GameConfig()
