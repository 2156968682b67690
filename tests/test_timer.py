"""
Tests for the match countdown and haptic feedback.
"""

import pytest
from unittest.mock import Mock
from spygame.core import GameStage
from spygame.phases import Countdown, HapticFeedback, VibrationStyle, format_time, get_time_color


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def backend():
    return Mock()


@pytest.fixture
def countdown(started_state, clock, backend):
    countdown = Countdown(started_state, haptics=HapticFeedback(backend), clock=clock)
    countdown.start()
    return countdown


def test_format_time():
    assert format_time(0) == "00:00"
    assert format_time(59) == "00:59"
    assert format_time(300) == "05:00"
    assert format_time(3725) == "62:05"
    assert format_time(-3) == "00:00"


def test_time_color_thresholds():
    assert get_time_color(30) == "red"
    assert get_time_color(60) == "red"
    assert get_time_color(61) == "yellow"
    assert get_time_color(180) == "yellow"
    assert get_time_color(181) == "green"


def test_tick_updates_time(countdown, started_state):
    countdown.tick()

    assert started_state.time_left == 119


def test_sync_applies_elapsed_seconds(countdown, started_state, clock):
    """Test that whole elapsed seconds become ticks."""
    clock.advance(3.6)

    assert countdown.sync() == 3
    assert started_state.time_left == 117

    # The fractional remainder carries over
    clock.advance(0.5)
    assert countdown.sync() == 1
    assert started_state.time_left == 116


def test_sync_before_start_does_nothing(started_state, clock):
    countdown = Countdown(started_state, clock=clock)
    clock.advance(10)

    assert countdown.sync() == 0
    assert started_state.time_left == 120


def test_minute_boundary_vibrates(countdown, started_state, backend):
    """Test a medium pulse when a whole minute is crossed."""
    started_state.update_time(61)

    countdown.tick()

    backend.assert_called_once_with(VibrationStyle.MEDIUM)


def test_expiry_ends_match(countdown, started_state, backend, clock):
    """Test that reaching zero expires the timer."""
    started_state.update_time(2)
    clock.advance(5)

    applied = countdown.sync()

    assert applied == 2
    assert started_state.time_left == 0
    assert started_state.stage == GameStage.TIMER_EXPIRED
    backend.assert_called_with(VibrationStyle.HEAVY)
    assert not countdown.is_running


def test_not_running_outside_play(countdown, started_state, clock):
    started_state.end_match()
    clock.advance(5)

    assert countdown.sync() == 0
    assert started_state.time_left == 0


def test_runs_during_voting_result(countdown, started_state, clock):
    started_state.complete_voting({"voter_0": "1"})
    clock.advance(2)

    countdown.sync()

    assert started_state.time_left == 118


def test_pause_and_resume(countdown, started_state, clock):
    """Test that paused time is not counted."""
    clock.advance(1)
    countdown.pause()
    clock.advance(30)

    assert countdown.sync() == 0

    countdown.resume()
    clock.advance(1)
    countdown.sync()

    assert started_state.time_left == 118


def test_haptics_without_backend_is_noop():
    haptics = HapticFeedback()

    assert not haptics.available
    haptics.vibrate_heavy()


def test_haptics_failure_is_swallowed(capsys):
    """Test that a failing device never raises."""
    backend = Mock(side_effect=RuntimeError("no motor"))
    haptics = HapticFeedback(backend)

    haptics.vibrate(VibrationStyle.SOFT)

    backend.assert_called_once_with(VibrationStyle.SOFT)
    assert "no motor" in capsys.readouterr().out


def test_failing_haptics_do_not_stop_countdown(started_state, clock):
    countdown = Countdown(started_state, haptics=HapticFeedback(Mock(side_effect=OSError)), clock=clock)
    countdown.start()
    started_state.update_time(1)

    countdown.tick()

    assert started_state.stage == GameStage.TIMER_EXPIRED


def test_pause_without_sync_drops_pending_time(countdown, started_state, clock):
    """Test that a decided match is not expired by the time since the last sync."""
    started_state.update_time(1)
    clock.advance(0.6)
    countdown.sync()
    clock.advance(0.6)

    countdown.pause(sync=False)

    assert started_state.time_left == 1
    assert started_state.stage == GameStage.GAMEPLAY
    assert countdown.sync() == 0


def test_pause_with_sync_applies_pending_time(countdown, started_state, clock):
    started_state.update_time(1)
    clock.advance(1.2)

    countdown.pause()

    assert started_state.stage == GameStage.TIMER_EXPIRED
