"""
Core game engine managing match state and stage transitions.
"""

import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass, field

from .judge import VotingState, process_voting_result
from .player import Player
from .roles import assign_roles
from ..content.categories import WordCategory, parse_categories
from ..config.game_config import GameConfig

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter


class GameStage(Enum):
    """Current match stage."""
    SETUP = "setup"
    ROLE_REVEAL = "roleReveal"
    GAMEPLAY = "gameplay"
    VOTING_RESULT = "votingResult"
    TIMER_EXPIRED = "timerExpired"


@dataclass(frozen=True)
class GameSettings:
    """Settings fixed for the duration of a match."""
    spy_count: int
    categories: Tuple[WordCategory, ...]
    timer_duration: int  # seconds
    show_category_to_spy: bool = True
    show_letter_count_to_spy: bool = False
    show_first_letter_to_spy: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameSettings':
        """Build settings from a preferences/config style dict."""
        return cls(
            spy_count=int(data["spy_count"]),
            categories=tuple(parse_categories(data["categories"])),
            timer_duration=int(data["timer_duration"]),
            show_category_to_spy=bool(data.get("show_category_to_spy", True)),
            show_letter_count_to_spy=bool(data.get("show_letter_count_to_spy", False)),
            show_first_letter_to_spy=bool(data.get("show_first_letter_to_spy", False)),
        )

    @classmethod
    def from_config(cls, config: GameConfig) -> 'GameSettings':
        return cls.from_dict({
            "spy_count": config.spy_count,
            "categories": config.categories,
            "timer_duration": config.timer_duration,
            "show_category_to_spy": config.show_category_to_spy,
            "show_letter_count_to_spy": config.show_letter_count_to_spy,
            "show_first_letter_to_spy": config.show_first_letter_to_spy,
        })

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spy_count": self.spy_count,
            "categories": [c.value for c in self.categories],
            "timer_duration": self.timer_duration,
            "show_category_to_spy": self.show_category_to_spy,
            "show_letter_count_to_spy": self.show_letter_count_to_spy,
            "show_first_letter_to_spy": self.show_first_letter_to_spy,
        }


@dataclass
class GameState:
    """
    Complete match state and the transitions between stages.

    Callers are expected to validate input and respect the stage order:
    setup -> roleReveal -> gameplay -> votingResult -> gameplay/setup, with
    timerExpired reachable from gameplay and votingResult. Out-of-sequence
    calls are not checked.
    """
    stage: GameStage = GameStage.SETUP
    players: List[Player] = field(default_factory=list)
    settings: Optional[GameSettings] = None
    eliminated_player: Optional[Player] = None
    time_left: int = 0

    # Game history
    action_log: List[Dict[str, Any]] = field(default_factory=list)

    random_seed: Optional[int] = None  # Random seed for reproducible role assignment
    shuffle: Optional[Callable[[list], None]] = None

    # Event emitter for recording (optional)
    event_emitter: Optional['EventEmitter'] = None

    def __post_init__(self):
        if self.shuffle is None:
            self.shuffle = random.Random(self.random_seed).shuffle

    @property
    def active_players(self) -> List[Player]:
        """Get all players not yet eliminated."""
        return [p for p in self.players if p.is_active]

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_spies(self) -> List[Player]:
        """Get all spies, eliminated or not."""
        return [p for p in self.players if p.is_spy]

    def start_match(self, players: List[Player], settings: GameSettings) -> None:
        """
        Start a new match with pre-validated players and settings.

        Assigns roles, resets the countdown to the configured duration and
        moves to role reveal.
        """
        previous = self.stage
        self.players = assign_roles(players, settings.spy_count, shuffle=self.shuffle)
        self.settings = settings
        self.eliminated_player = None
        self.time_left = settings.timer_duration
        self.stage = GameStage.ROLE_REVEAL

        self._log_action("match_start", {
            "players": len(self.players),
            "spies": settings.spy_count,
            "timer_duration": settings.timer_duration,
        })
        if self.event_emitter:
            self.event_emitter.emit_match_start(
                [p.to_dict() for p in self.players],
                [p.id for p in self.get_spies()],
                settings.timer_duration,
                [c.value for c in settings.categories],
            )
        self._emit_stage_change(previous)

    def complete_role_reveal(self) -> None:
        """Transition from role reveal to gameplay."""
        self._set_stage(GameStage.GAMEPLAY)

    def complete_voting(self, votes: VotingState) -> Optional[Player]:
        """
        Apply a completed round of votes.

        If a single player is eliminated, they are marked inactive and the
        match moves to the voting result. Otherwise nothing changes.

        Returns:
            The eliminated player, or None
        """
        eliminated, updated_players = process_voting_result(self.players, votes)
        if eliminated is None:
            return None

        self.players = updated_players
        self.eliminated_player = eliminated
        self._log_action("player_eliminated", {
            "player": eliminated.id,
            "name": eliminated.name,
            "was_spy": eliminated.is_spy,
        })
        if self.event_emitter:
            self.event_emitter.emit_elimination(eliminated.id, eliminated.name, eliminated.is_spy)

        self._set_stage(GameStage.VOTING_RESULT)
        return eliminated

    def continue_match(self) -> None:
        """Return from the voting result to gameplay."""
        self.eliminated_player = None
        self._set_stage(GameStage.GAMEPLAY)

    def end_match(self) -> None:
        """Wipe the match and return to setup."""
        previous = self.stage
        self.players = []
        self.settings = None
        self.eliminated_player = None
        self.time_left = 0
        self.stage = GameStage.SETUP
        self._log_action("match_end", {"previous_stage": previous.value})
        self._emit_stage_change(previous)

    def reset(self) -> None:
        """Abandon the current match."""
        self.end_match()

    def timer_expired(self) -> None:
        """End the match in favor of the spies because time ran out."""
        self._set_stage(GameStage.TIMER_EXPIRED)
        if self.event_emitter:
            self.event_emitter.emit_match_over("spies", "timer_expired", self.time_left)

    def update_time(self, seconds: int) -> None:
        """Record the time reported by the countdown."""
        self.time_left = seconds
        if self.event_emitter:
            self.event_emitter.emit_time_update(seconds)

    def _set_stage(self, stage: GameStage) -> None:
        previous = self.stage
        self.stage = stage
        self._log_action("stage_change", {"from": previous.value, "to": stage.value})
        self._emit_stage_change(previous)

    def _emit_stage_change(self, previous: GameStage) -> None:
        if self.event_emitter:
            self.event_emitter.emit_stage_change(self.stage.value, previous.value)
            self.event_emitter.emit_game_state_update(self.get_game_summary())

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "stage": self.stage.value,
            "time_left": self.time_left,
            "data": data
        })

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current match state."""
        active = self.active_players
        return {
            "stage": self.stage.value,
            "time_left": self.time_left,
            "players": [p.to_dict() for p in self.players],
            "active_players": len(active),
            "active_spies": len([p for p in active if p.is_spy]),
            "active_civilians": len([p for p in active if not p.is_spy]),
            "eliminated_player": self.eliminated_player.id if self.eliminated_player else None,
            "settings": self.settings.to_dict() if self.settings else None,
        }
