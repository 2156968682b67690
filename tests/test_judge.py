"""
Tests for vote rules and setup validation.
"""

import pytest
from spygame.core import (
    Judge, Player, SetupValidationError, count_votes, get_eliminated_player,
    get_tied_players, has_tie_vote, process_voting_result,
)
from spygame.config.game_config import GameConfig

from conftest import make_players


def test_count_votes():
    """Test vote counting."""
    votes = {"v1": "1", "v2": "1", "v3": "2"}

    counts = count_votes(votes)

    assert counts == {"1": 2, "2": 1}
    assert sum(counts.values()) == len(votes)


def test_count_votes_empty():
    assert count_votes({}) == {}


def test_majority_elimination():
    """Test that the most voted player is eliminated."""
    players = make_players(3)
    votes = {"v1": "1", "v2": "1", "v3": "2"}

    eliminated = get_eliminated_player(players, votes)

    assert eliminated.id == "1"
    assert not has_tie_vote(players, votes)


def test_three_way_tie():
    """Test that one vote each is a tie even though everyone voted."""
    players = make_players(3)
    votes = {"v1": "1", "v2": "2", "v3": "3"}

    assert get_eliminated_player(players, votes) is None
    assert has_tie_vote(players, votes)
    assert set(get_tied_players(players, votes)) == {"1", "2", "3"}


def test_two_way_tie_with_lower_candidate():
    """Test that a tie at the top voids the round regardless of others."""
    players = make_players(5)
    votes = {"v1": "1", "v2": "1", "v3": "2", "v4": "2", "v5": "3"}

    assert get_eliminated_player(players, votes) is None
    assert has_tie_vote(players, votes)
    assert get_tied_players(players, votes) == ["1", "2"]


def test_no_votes():
    """Test that no votes means no elimination and no tie."""
    players = make_players(3)

    assert get_eliminated_player(players, {}) is None
    assert not has_tie_vote(players, {})
    assert get_tied_players(players, {}) == []


def test_votes_for_inactive_players_ignored():
    """Test that votes for eliminated players do not count."""
    players = make_players(3, inactive=["1"])
    votes = {"v1": "1", "v2": "1", "v3": "2"}

    eliminated = get_eliminated_player(players, votes)

    assert eliminated.id == "2"


def test_only_stale_votes():
    """Test that votes only for inactive or unknown ids eliminate nobody."""
    players = make_players(3, inactive=["1"])
    votes = {"v1": "1", "v2": "ghost"}

    assert get_eliminated_player(players, votes) is None
    assert not has_tie_vote(players, votes)


def test_no_active_players():
    players = make_players(2, inactive=["1", "2"])

    assert get_eliminated_player(players, {"v1": "1"}) is None
    assert not has_tie_vote(players, {"v1": "1"})


@pytest.mark.parametrize("votes", [
    {"v1": "1"},
    {"v1": "1", "v2": "2"},
    {"v1": "2", "v2": "2", "v3": "3"},
    {"v1": "1", "v2": "2", "v3": "3", "v4": "4"},
    {"v1": "4", "v2": "4", "v3": "4", "v4": "1"},
])
def test_tie_iff_no_elimination(votes):
    """Test that a tie is reported exactly when nobody is eliminated."""
    players = make_players(4)

    assert has_tie_vote(players, votes) == (get_eliminated_player(players, votes) is None)


def test_process_voting_result_marks_inactive():
    """Test that the eliminated player is marked inactive in the new roster."""
    players = make_players(3)
    votes = {"v1": "2", "v2": "2", "v3": "1"}

    eliminated, updated = process_voting_result(players, votes)

    assert eliminated.id == "2"
    assert not eliminated.is_active
    assert [p.is_active for p in updated] == [True, False, True]
    # Input roster is not mutated
    assert players[1].is_active


def test_process_voting_result_tie_unchanged():
    """Test that a tie returns the roster unchanged."""
    players = make_players(3)

    eliminated, updated = process_voting_result(players, {"v1": "1", "v2": "2"})

    assert eliminated is None
    assert updated is players


def test_validate_setup_trims_and_drops_blanks(judge):
    """Test that names are trimmed and blank entries ignored."""
    names = ["  Alice ", "", "Bob", "   ", "Carol"]

    assert judge.validate_setup(names, 1) == ["Alice", "Bob", "Carol"]


def test_validate_setup_too_few_players(judge):
    """Test rejection of fewer than three valid names."""
    with pytest.raises(SetupValidationError) as exc_info:
        judge.validate_setup(["Alice", " ", "Bob"], 1)

    assert "At least 3 players" in exc_info.value.message
    assert exc_info.value.valid_player_count == 2


def test_validate_setup_too_many_spies(judge):
    """Test rejection of a spy count not below the player count."""
    with pytest.raises(SetupValidationError) as exc_info:
        judge.validate_setup(["A", "B", "C"], 3)

    assert "less than the number of players" in exc_info.value.message


def test_validate_setup_no_spies(judge):
    with pytest.raises(SetupValidationError):
        judge.validate_setup(["A", "B", "C"], 0)


def test_validate_setup_too_many_players():
    judge = Judge(GameConfig(use_judge_announcements=False, max_players=4))

    with pytest.raises(SetupValidationError):
        judge.validate_setup(["A", "B", "C", "D", "E"], 1)


@pytest.mark.parametrize("timer_duration", [-30, 0, 59, 1801])
def test_validate_setup_timer_out_of_range(judge, timer_duration):
    """Test that the countdown must fit between one and thirty minutes."""
    with pytest.raises(SetupValidationError) as exc_info:
        judge.validate_setup(["A", "B", "C"], 1, timer_duration)

    assert exc_info.value.message == "Timer must be between 60 and 1800 seconds"


@pytest.mark.parametrize("timer_duration", [60, 300, 1800, None])
def test_validate_setup_timer_in_range(judge, timer_duration):
    assert judge.validate_setup(["A", "B", "C"], 1, timer_duration) == ["A", "B", "C"]


def test_create_players(judge):
    """Test roster creation from names."""
    players = judge.create_players(["Alice", "Bob", "Carol"])

    assert [p.name for p in players] == ["Alice", "Bob", "Carol"]
    assert all(p.is_active and not p.is_spy for p in players)
    assert len({p.id for p in players}) == 3
    assert all(p.id.startswith("player_") for p in players)


def test_max_spies(judge):
    assert judge.max_spies(3) == 1
    assert judge.max_spies(6) == 4
    assert judge.max_spies(0) == 1


def test_announce_disabled(judge, capsys):
    """Test that announcements are silent when disabled."""
    judge.announce("Hello")

    assert judge.announcements == []
    assert capsys.readouterr().out == ""


def test_announce_enabled(capsys):
    judge = Judge(GameConfig(use_judge_announcements=True))

    judge.announce("Tie vote!")

    assert judge.announcements == ["Tie vote!"]
    assert "[JUDGE] Tie vote!" in capsys.readouterr().out


def test_announce_winner_records_match_over(event_emitter, game_config):
    from spygame.core import Team
    judge = Judge(game_config, event_emitter=event_emitter)

    judge.announce_winner(Team.CIVILIANS, time_left=42)

    assert ("match_over", {"winner": "civilians", "reason": "win_condition", "time_left": 42}) in event_emitter.events
