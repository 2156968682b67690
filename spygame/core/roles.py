"""
Role assignment and win conditions for the spy game.
"""

import random
from dataclasses import replace
from enum import Enum
from typing import Callable, List, Optional

from .player import Player


class Team(Enum):
    """Player team affiliation."""
    SPIES = "spies"
    CIVILIANS = "civilians"


def assign_roles(players: List[Player], spy_count: int,
                 shuffle: Callable[[list], None] = random.shuffle) -> List[Player]:
    """
    Assign spy roles to a random subset of players.

    The roster is shuffled with ``shuffle`` (an in-place permutation such as
    ``random.Random(seed).shuffle``) and the first ``spy_count`` players become
    spies. Returns new Player objects in the original roster order; only
    ``is_spy`` differs from the input.

    Args:
        players: Roster to assign roles to
        spy_count: Number of spies, 0 <= spy_count <= len(players)
        shuffle: In-place shuffle function

    Returns:
        Roster with roles assigned
    """
    shuffled = list(players)
    shuffle(shuffled)
    spy_ids = {p.id for p in shuffled[:spy_count]}

    return [replace(p, is_spy=p.id in spy_ids) for p in players]


def check_win_condition(active_players: List[Player]) -> Optional[Team]:
    """
    Check if the match has a winner.

    Civilians win when no active spy remains. Spies win only when exactly one
    active spy faces exactly one active civilian. Any other distribution,
    including spies outnumbering civilians, means the match continues.
    Inactive players are ignored.
    """
    active_spies = [p for p in active_players if p.is_spy and p.is_active]
    active_civilians = [p for p in active_players if not p.is_spy and p.is_active]

    if len(active_spies) == 0:
        return Team.CIVILIANS

    if len(active_spies) == 1 and len(active_civilians) == 1:
        return Team.SPIES

    return None
