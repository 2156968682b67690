"""
Pytest fixtures for spy game tests.
"""

import pytest
from typing import List, Sequence

from spygame.core import GameState, GameSettings, Judge, Player
from spygame.content import WordCategory
from spygame.config.game_config import GameConfig
from spygame.events import EventEmitter


def make_players(count: int, spies: int = 0, inactive: Sequence[str] = ()) -> List[Player]:
    """
    Create players with ids "1".."count"; the first ``spies`` are spies.
    Players whose id is in ``inactive`` start eliminated.
    """
    return [
        Player(id=str(i), name=f"Player {i}", is_spy=i <= spies, is_active=str(i) not in inactive)
        for i in range(1, count + 1)
    ]


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        use_judge_announcements=False,  # Disable for cleaner test output
        record_events=False,
        random_seed=42,
    )


@pytest.fixture
def settings():
    """Match settings with two spies and a short timer."""
    return GameSettings(
        spy_count=2,
        categories=(WordCategory.ANIMALS, WordCategory.FOOD),
        timer_duration=120,
    )


@pytest.fixture
def event_emitter():
    """Event emitter without recording that keeps every event in a list."""
    emitter = EventEmitter()
    emitter.events = []
    emitter.register_listener(lambda event_type, data: emitter.events.append((event_type, data)))
    return emitter


@pytest.fixture
def game_state(event_emitter):
    """Create a fresh game state with a seeded shuffle."""
    return GameState(random_seed=7, event_emitter=event_emitter)


@pytest.fixture
def started_state(game_state, settings):
    """Game state in gameplay with four players."""
    game_state.start_match(make_players(4), settings)
    game_state.complete_role_reveal()
    return game_state


@pytest.fixture
def judge(game_config):
    """Create a judge instance."""
    return Judge(game_config)
