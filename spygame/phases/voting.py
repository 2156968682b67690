"""
Voting tally for a single elimination round.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from ..core import Player, VotingState, count_votes, get_tied_players, has_tie_vote

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter


class TallyStage(Enum):
    """Sub-state of a voting round."""
    COLLECTING = "collecting"
    COMPLETE_UNIQUE = "complete_unique"
    COMPLETE_TIE = "complete_tie"


class VoteOutcome(Enum):
    """Result of casting a single vote."""
    PENDING = "pending"    # More votes are needed
    TIE = "tie"            # Round voided by a tie, votes were reset
    VOID = "void"          # Nobody active received a vote, votes were reset
    COMPLETE = "complete"  # A single player was voted out


class VotingTally:
    """
    Collects one vote per active player and reports the outcome.

    Voters are anonymous: every cast vote gets a fresh ``voter_<n>`` key.
    Once the number of cast votes reaches the number of active players the
    round is evaluated immediately. A tie clears the votes and calls
    ``on_tie_vote``; a single most-voted player triggers
    ``on_voting_complete`` with a snapshot of the votes and the tally stops
    accepting votes until it is reset.
    """

    def __init__(self, players: List[Player],
                 on_voting_complete: Callable[[VotingState], None],
                 on_tie_vote: Optional[Callable[[], None]] = None,
                 event_emitter: Optional['EventEmitter'] = None):
        self.players = players
        self.on_voting_complete = on_voting_complete
        self.on_tie_vote = on_tie_vote
        self.event_emitter = event_emitter
        self.votes: VotingState = {}
        self.vote_count = 0
        self.stage = TallyStage.COLLECTING
        self.tie_count = 0  # Ties since the tally was created

    @property
    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.is_active]

    @property
    def vote_counts(self) -> Dict[str, int]:
        """Live vote counts keyed by target player id."""
        return count_votes(self.votes)

    def tally(self) -> Dict[str, int]:
        return self.vote_counts

    @property
    def has_tie(self) -> bool:
        return has_tie_vote(self.players, self.votes)

    @property
    def all_voted(self) -> bool:
        return self.vote_count >= len(self.active_players)

    @property
    def is_closed(self) -> bool:
        return self.stage == TallyStage.COMPLETE_UNIQUE

    def votes_for(self, player_id: str) -> int:
        return self.vote_counts.get(player_id, 0)

    def cast_vote(self, target_id: str) -> VoteOutcome:
        """
        Record one vote against ``target_id`` and evaluate the round if everyone has voted.

        Returns:
            The outcome of the round after this vote
        """
        if self.is_closed:
            return VoteOutcome.COMPLETE

        voter_key = f"voter_{self.vote_count}"
        self.votes[voter_key] = target_id
        self.vote_count += 1

        if self.event_emitter:
            self.event_emitter.emit_vote(voter_key, target_id, self.vote_count)

        return self._check_completion()

    def reset_votes(self) -> None:
        """Discard all votes of the current round."""
        self.votes = {}
        self.vote_count = 0
        self.stage = TallyStage.COLLECTING

    def _check_completion(self) -> VoteOutcome:
        if not (self.all_voted and self.active_players and self.votes):
            return VoteOutcome.PENDING

        counts = self.vote_counts

        if self.has_tie:
            self.stage = TallyStage.COMPLETE_TIE
            self.tie_count += 1
            if self.event_emitter:
                self.event_emitter.emit_tie(get_tied_players(self.players, self.votes), counts)
            self.reset_votes()
            if self.on_tie_vote:
                self.on_tie_vote()
            return VoteOutcome.TIE

        if not get_tied_players(self.players, self.votes):
            # Every vote went to a player who is no longer active
            self.reset_votes()
            return VoteOutcome.VOID

        self.stage = TallyStage.COMPLETE_UNIQUE
        if self.event_emitter:
            self.event_emitter.emit_vote_results(counts)
        self.on_voting_complete(dict(self.votes))
        return VoteOutcome.COMPLETE
