"""
Core game engine components: match state, players, roles, and vote rules.
"""

from .game_engine import GameState, GameStage, GameSettings
from .player import Player, generate_player_id
from .roles import Team, assign_roles, check_win_condition
from .judge import (
    Judge,
    VotingState,
    count_votes,
    get_eliminated_player,
    get_tied_players,
    has_tie_vote,
    process_voting_result,
)
from .exceptions import (
    SpyGameError,
    SetupValidationError,
    EmptyCategorySelectionError,
    EmptyWordPoolError,
)

__all__ = [
    'GameState',
    'GameStage',
    'GameSettings',
    'Player',
    'generate_player_id',
    'Team',
    'assign_roles',
    'check_win_condition',
    'Judge',
    'VotingState',
    'count_votes',
    'get_eliminated_player',
    'get_tied_players',
    'has_tie_vote',
    'process_voting_result',
    'SpyGameError',
    'SetupValidationError',
    'EmptyCategorySelectionError',
    'EmptyWordPoolError',
]
