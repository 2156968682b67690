"""
Match countdown: relays elapsed seconds to the game state.
"""

import time
from typing import Callable, Optional

from ..core import GameState, GameStage
from .haptics import HapticFeedback

RUNNING_STAGES = (GameStage.GAMEPLAY, GameStage.VOTING_RESULT)


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    seconds = max(0, int(seconds))
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


def get_time_color(seconds: int) -> str:
    """Display color for the remaining time."""
    if seconds <= 60:
        return "red"
    if seconds <= 180:
        return "yellow"
    return "green"


class Countdown:
    """
    One-second countdown driven by an external clock.

    The countdown never sleeps: callers invoke ``sync`` whenever they regain
    control and every whole second elapsed since the previous sync is applied
    as a tick. Each tick reports the new time to the game state; reaching
    zero reports timer expiry. Haptic pulses mark every whole minute and the
    expiry.
    """

    def __init__(self, game_state: GameState,
                 haptics: Optional[HapticFeedback] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.game_state = game_state
        self.haptics = haptics or HapticFeedback()
        self.clock = clock
        self.paused = False
        self._last_sync: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self.game_state.stage in RUNNING_STAGES and not self.paused

    def start(self) -> None:
        """Start counting from now."""
        self.paused = False
        self._last_sync = self.clock()

    def pause(self, sync: bool = True) -> None:
        """
        Stop counting. With sync=False the seconds elapsed since the last
        sync are dropped, so a decided match cannot expire afterwards.
        """
        if sync:
            self.sync()
        self.paused = True

    def resume(self) -> None:
        self.start()

    def tick(self) -> None:
        """Apply one elapsed second."""
        if not self.is_running:
            return

        new_time = max(0, self.game_state.time_left - 1)
        self.game_state.update_time(new_time)

        if new_time == 0:
            self.haptics.vibrate_heavy()
            self.game_state.timer_expired()
        elif new_time % 60 == 0:
            self.haptics.vibrate_medium()

    def sync(self) -> int:
        """
        Apply all whole seconds elapsed since the last sync.

        Returns:
            Number of ticks applied
        """
        if self._last_sync is None or self.paused:
            return 0

        now = self.clock()
        elapsed = int(now - self._last_sync)
        if elapsed <= 0:
            return 0
        self._last_sync += elapsed

        applied = 0
        for _ in range(elapsed):
            if not self.is_running:
                break
            self.tick()
            applied += 1
        return applied
