"""
Event emitter for recording match events and notifying live listeners.
"""

from typing import Callable, Dict, Any, Optional, List
from threading import Lock

from .run_recorder import RunRecorder

Listener = Callable[[str, Dict[str, Any]], None]


class EventEmitter:
    """Event emitter that records match events to files and forwards them to listeners."""

    def __init__(self, run_recorder: Optional[RunRecorder] = None):
        self.run_recorder = run_recorder
        self._listeners: List[Listener] = []
        self._lock = Lock()

    def register_listener(self, listener: Listener) -> None:
        """Register a callable receiving (event_type, data) for every event."""
        with self._lock:
            self._listeners.append(listener)

    def unregister_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event by recording it to file and notifying listeners."""
        if self.run_recorder:
            try:
                self.run_recorder.record_event(event_type, data)
            except Exception as e:
                # Don't let recording errors break the game
                print(f"Error recording event: {e}")

        for listener in list(self._listeners):
            listener(event_type, data)

    def emit_match_start(self, players: List[Dict[str, Any]], spies: List[str],
                         timer_duration: int, categories: List[str]) -> None:
        """Emit match start event."""
        self._emit("match_start", {
            "players": players,
            "spies": spies,
            "timer_duration": timer_duration,
            "categories": categories
        })

    def emit_stage_change(self, stage: str, previous_stage: str) -> None:
        """Emit stage change event."""
        self._emit("stage_change", {
            "stage": stage,
            "previous_stage": previous_stage
        })

    def emit_word_selected(self, word: str, category: str) -> None:
        self._emit("word_selected", {
            "word": word,
            "category": category
        })

    def emit_vote(self, voter_key: str, target: str, vote_count: int) -> None:
        """Emit individual vote event."""
        self._emit("vote", {
            "voter_key": voter_key,
            "target": target,
            "vote_count": vote_count
        })

    def emit_vote_results(self, vote_counts: Dict[str, int]) -> None:
        """Emit final tally of a completed round."""
        self._emit("vote_results", {
            "vote_counts": vote_counts
        })

    def emit_tie(self, tied_players: List[str], vote_counts: Dict[str, int]) -> None:
        """Emit tie detection event."""
        self._emit("tie", {
            "tied_players": tied_players,
            "vote_counts": vote_counts
        })

    def emit_elimination(self, player_id: str, name: str, was_spy: bool) -> None:
        """Emit player elimination event."""
        self._emit("elimination", {
            "player_id": player_id,
            "name": name,
            "was_spy": was_spy
        })

    def emit_time_update(self, time_left: int) -> None:
        self._emit("time_update", {
            "time_left": time_left
        })

    def emit_game_state_update(self, game_state: Dict[str, Any]) -> None:
        """Emit game state update event."""
        self._emit("game_state_update", {
            "game_state": game_state
        })

    def emit_match_over(self, winner: Optional[str], reason: str, time_left: int) -> None:
        """Emit match over event."""
        self._emit("match_over", {
            "winner": winner,
            "reason": reason,
            "time_left": time_left
        })
