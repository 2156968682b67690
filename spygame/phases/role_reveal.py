"""
Role reveal: the device is passed around so each player sees their role privately.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TYPE_CHECKING

from ..core import GameState, Player
from ..content import WordCategory, generate_spy_hints, get_category_display_name, select_random_word
from ..content.words import WordsData

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter


@dataclass
class RoleCard:
    """What a single player sees when their role is revealed."""
    player_name: str
    is_spy: bool
    title: str
    word: Optional[str] = None
    hints: List[str] = field(default_factory=list)


class RoleRevealHandler:
    """
    Walks through the roster one player at a time.

    Each player first sees a hand-over prompt; ``advance`` reveals their
    card, and the next ``advance`` moves on to the next player. Advancing
    past the last revealed card completes the role reveal on the game state.
    """

    def __init__(self, game_state: GameState,
                 words: Optional[WordsData] = None,
                 pick: Callable = random.choice,
                 event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.event_emitter = event_emitter
        # Word selection errors propagate to the caller
        self.word, self.category = select_random_word(
            game_state.settings.categories, words=words, pick=pick
        )
        self.current_index = 0
        self.role_revealed = False
        self.finished = False

        if self.event_emitter:
            self.event_emitter.emit_word_selected(self.word, self.category.value)

    @property
    def current_player(self) -> Player:
        return self.game_state.players[self.current_index]

    @property
    def is_last_player(self) -> bool:
        return self.current_index == len(self.game_state.players) - 1

    def build_role_card(self, player: Player) -> RoleCard:
        """Build the role card for a player."""
        if player.is_spy:
            hints = generate_spy_hints(self.word, self.category, self.game_state.settings)
            return RoleCard(
                player_name=player.name,
                is_spy=True,
                title="YOU ARE THE SPY",
                hints=hints.as_lines(),
            )

        return RoleCard(
            player_name=player.name,
            is_spy=False,
            title="YOU ARE A CIVILIAN",
            word=self.word,
            hints=[f"Category: {get_category_display_name(self.category)}"],
        )

    def current_card(self) -> Optional[RoleCard]:
        """Card of the current player, or None while it is still hidden."""
        if not self.role_revealed:
            return None
        return self.build_role_card(self.current_player)

    def advance(self) -> Optional[RoleCard]:
        """
        Reveal the current card, or hand over to the next player.

        Returns:
            The card just revealed, or None when moving on
        """
        if self.finished:
            return None

        if not self.role_revealed:
            self.role_revealed = True
            return self.current_card()

        if self.is_last_player:
            self.finished = True
            self.game_state.complete_role_reveal()
        else:
            self.current_index += 1
            self.role_revealed = False
        return None
