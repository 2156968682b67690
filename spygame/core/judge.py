"""
Judge/Moderator: vote rules, setup validation, and announcements.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from .exceptions import SetupValidationError
from .player import Player, generate_player_id
from .roles import Team
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter

VotingState = Dict[str, str]  # {voter_key: target_player_id}


def count_votes(votes: VotingState) -> Dict[str, int]:
    """Count how many votes each target received."""
    counts: Dict[str, int] = {}
    for target in votes.values():
        counts[target] = counts.get(target, 0) + 1
    return counts


def get_tied_players(players: List[Player], votes: VotingState) -> List[str]:
    """
    Get ids of active players sharing the highest vote count.

    Returns an empty list when no active player received a vote. A single
    entry means there is a clear leader.
    """
    counts = count_votes(votes)
    active = [p for p in players if p.is_active]
    if not active:
        return []

    max_votes = max(counts.get(p.id, 0) for p in active)
    if max_votes == 0:
        return []

    return [p.id for p in active if counts.get(p.id, 0) == max_votes]


def get_eliminated_player(players: List[Player], votes: VotingState) -> Optional[Player]:
    """
    Determine who is eliminated by the votes.

    Only active players are considered. Returns None on a tie at the top or
    when no active player received a vote.
    """
    leaders = get_tied_players(players, votes)
    if len(leaders) != 1:
        return None

    for player in players:
        if player.id == leaders[0]:
            return player
    return None


def has_tie_vote(players: List[Player], votes: VotingState) -> bool:
    """Check if two or more active players share the highest non-zero count."""
    return len(get_tied_players(players, votes)) > 1


def process_voting_result(players: List[Player], votes: VotingState
                          ) -> Tuple[Optional[Player], List[Player]]:
    """
    Apply a completed round to the roster.

    Returns:
        (eliminated player or None, updated roster). The roster is returned
        unchanged when nobody is eliminated.
    """
    eliminated = get_eliminated_player(players, votes)
    if eliminated is None:
        return None, players

    updated = [replace(p, is_active=False) if p.id == eliminated.id else p for p in players]
    eliminated = next(p for p in updated if p.id == eliminated.id)
    return eliminated, updated


class Judge:
    """Judge/Moderator that validates setup input and makes announcements."""

    def __init__(self, config: GameConfig = default_config,
                 event_emitter: Optional['EventEmitter'] = None):
        self.config = config
        self.event_emitter = event_emitter
        self.announcements: List[str] = []

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        if self.config.use_judge_announcements:
            self.announcements.append(message)
            print(f"[JUDGE] {message}")

    def max_spies(self, player_count: int) -> int:
        """Upper bound for the spy count offered during setup."""
        return max(1, player_count - 2)

    def validate_setup(self, names: List[str], spy_count: int,
                       timer_duration: Optional[int] = None) -> List[str]:
        """
        Validate player names, spy count and timer before a match starts.

        Names are trimmed and blanks dropped. The timer is only checked when
        given.

        Returns:
            The valid, trimmed names in input order

        Raises:
            SetupValidationError: If fewer than ``min_players`` names remain,
                the spy count is not between 1 and the player count,
                or the timer is outside min_timer..max_timer
        """
        valid = [name.strip() for name in names if name and name.strip()]

        if len(valid) < self.config.min_players:
            raise SetupValidationError(
                f"At least {self.config.min_players} players are required",
                valid_player_count=len(valid),
                spy_count=spy_count,
            )

        if len(valid) > self.config.max_players:
            raise SetupValidationError(
                f"At most {self.config.max_players} players can play",
                valid_player_count=len(valid),
                spy_count=spy_count,
            )

        if spy_count >= len(valid):
            raise SetupValidationError(
                "Spy count must be less than the number of players",
                valid_player_count=len(valid),
                spy_count=spy_count,
            )

        if spy_count < 1:
            raise SetupValidationError(
                "At least one spy is required",
                valid_player_count=len(valid),
                spy_count=spy_count,
            )

        if timer_duration is not None and not (
            self.config.min_timer <= timer_duration <= self.config.max_timer
        ):
            raise SetupValidationError(
                f"Timer must be between {self.config.min_timer} and {self.config.max_timer} seconds",
                valid_player_count=len(valid),
                spy_count=spy_count,
            )

        return valid

    def create_players(self, names: List[str]) -> List[Player]:
        """Create a fresh roster of active civilians from validated names."""
        players = []
        used_ids = set()
        for name in names:
            player_id = generate_player_id()
            while player_id in used_ids:
                player_id = generate_player_id()
            used_ids.add(player_id)
            players.append(Player(id=player_id, name=name.strip()))
        return players

    def announce_winner(self, winner: Team, reason: str = "win_condition", time_left: int = 0) -> None:
        """Announce the winning team and record the end of the match."""
        if winner == Team.SPIES:
            self.announce("The spies win!")
        else:
            self.announce("The civilians win!")

        if self.event_emitter:
            self.event_emitter.emit_match_over(winner.value, reason, time_left)
