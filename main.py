"""
Console driver for the spy word game.
"""

import argparse
import os
import random
import time
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

from spygame.core import (
    GameState, GameStage, GameSettings, Judge, Team,
    SpyGameError, SetupValidationError, check_win_condition,
)
from spygame.content import HintQuestions, get_category_display_name, parse_categories
from spygame.phases import (
    Countdown, HapticFeedback, RoleRevealHandler, VoteOutcome, VotingTally,
    format_time, terminal_bell,
)
from spygame.config import PreferencesStore, load_config
from spygame.events import EventEmitter, RunRecorder

CLEAR_SCREEN = "\n" * 40

HINT_TOGGLES = (
    ("show_category_to_spy", "Show the category to spies?"),
    ("show_letter_count_to_spy", "Show the letter count to spies?"),
    ("show_first_letter_to_spy", "Show the first letter to spies?"),
)


class SpyGame:
    """Main game controller for a single shared device."""

    def __init__(self, config=None, preferences: Optional[PreferencesStore] = None,
                 event_emitter: Optional[EventEmitter] = None, run_name: Optional[str] = None,
                 input_func: Callable[[str], str] = input,
                 clock: Callable[[], float] = time.monotonic,
                 haptics: Optional[HapticFeedback] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        self.config = config or load_config()
        self.overrides = overrides or {}

        if event_emitter is None:
            if self.config.record_events:
                run_recorder = RunRecorder(self.config.runs_dir)
                run_name = run_recorder.create_run(run_name)
                self.event_emitter = EventEmitter(run_recorder)
                self.run_recorder = run_recorder
                print(f"Recording game to: {self.config.runs_dir}/{run_name}/")
            else:
                self.event_emitter = EventEmitter()
                self.run_recorder = None
        else:
            self.event_emitter = event_emitter
            self.run_recorder = event_emitter.run_recorder

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)
        self.rng = random.Random(self.config.random_seed)

        self.game_state = GameState(shuffle=self.rng.shuffle, event_emitter=self.event_emitter)
        self.judge = Judge(self.config, event_emitter=self.event_emitter)
        self.preferences = preferences or PreferencesStore(self.config.preferences_path, self.config)
        self.countdown = Countdown(self.game_state, haptics=haptics, clock=clock)
        self.questions = HintQuestions()
        self.input_func = input_func

        self.role_reveal: Optional[RoleRevealHandler] = None
        self.tally: Optional[VotingTally] = None
        self.results: List[str] = []

        if self.run_recorder:
            self.run_recorder.save_metadata({
                "random_seed": self.config.random_seed,
                "config": {
                    "timer_duration": self.config.timer_duration,
                    "min_players": self.config.min_players,
                    "max_players": self.config.max_players,
                },
            })

    def prompt(self, message: str) -> str:
        """Read a line of input and apply the time that passed meanwhile."""
        answer = self.input_func(message)
        self.countdown.sync()
        return answer.strip()

    def run_game(self) -> List[str]:
        """
        Run matches until the players quit.
        Returns the winning team of every finished match.
        """
        print("=" * 60)
        print("SPY - Starting")
        print("=" * 60)

        try:
            while self._step():
                pass
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")

        return self.results

    def _step(self) -> bool:
        stage = self.game_state.stage
        if stage == GameStage.SETUP:
            return self._run_setup()
        if stage == GameStage.ROLE_REVEAL:
            return self._run_role_reveal()
        if stage == GameStage.GAMEPLAY:
            return self._run_gameplay()
        if stage == GameStage.VOTING_RESULT:
            return self._run_voting_result()
        if stage == GameStage.TIMER_EXPIRED:
            return self._run_timer_expired()
        return False

    # Setup

    def _load_setup_settings(self) -> Dict[str, Any]:
        settings = self.preferences.load_settings()
        settings.update(self.overrides)
        return settings

    def _save_settings(self, settings_data: Dict[str, Any]) -> None:
        """Remember the chosen settings; values taken from command line overrides are not stored."""
        stored = self.preferences.load_settings()
        for key, value in settings_data.items():
            if key in self.overrides and value == self.overrides[key]:
                continue
            stored[key] = value
        self.preferences.save_settings(stored)

    def _run_setup(self) -> bool:
        settings_data = self._load_setup_settings()
        names = self.preferences.load_players()

        print("\n--- NEW GAME ---")
        saved = [n for n in names if n.strip()]
        hint = f" [Enter to keep: {', '.join(saved)}]" if saved else ""
        answer = self.prompt(f"Player names, comma separated{hint} ('q' to quit): ")
        if answer.lower() == "q":
            return False
        if answer:
            names = [name.strip() for name in answer.split(",")]
            self.preferences.save_players(names)

        valid_count = len([n for n in names if n.strip()])
        default_spies = settings_data["spy_count"]
        answer = self.prompt(
            f"Number of spies (1-{self.judge.max_spies(valid_count)}) [{default_spies}]: "
        )
        try:
            spy_count = int(answer) if answer else int(default_spies)
        except ValueError:
            self.judge.announce(f"'{answer}' is not a number")
            return True

        current = ", ".join(str(c) for c in settings_data["categories"])
        answer = self.prompt(f"Categories [{current}]: ")
        if answer:
            try:
                settings_data["categories"] = [c.value for c in parse_categories(
                    c.strip().lower() for c in answer.split(",") if c.strip()
                )]
            except ValueError as e:
                self.judge.announce(f"Unknown category: {e}")
                return True

        answer = self.prompt(
            f"Timer in minutes ({self.config.min_timer // 60}-{self.config.max_timer // 60}) "
            f"[{format_time(settings_data['timer_duration'])}]: "
        )
        if answer:
            try:
                settings_data["timer_duration"] = int(answer) * 60
            except ValueError:
                self.judge.announce(f"'{answer}' is not a number")
                return True

        for key, question in HINT_TOGGLES:
            default = "y" if settings_data[key] else "n"
            answer = self.prompt(f"{question} (y/n) [{default}]: ").lower()
            if not answer:
                continue
            if answer not in ("y", "n"):
                self.judge.announce(f"Please answer 'y' or 'n', not '{answer}'")
                return True
            settings_data[key] = answer == "y"

        try:
            valid_names = self.judge.validate_setup(names, spy_count, settings_data["timer_duration"])
        except SetupValidationError as e:
            self.judge.announce(e.message)
            return True

        settings_data["spy_count"] = spy_count
        self._save_settings(settings_data)

        try:
            settings = GameSettings.from_dict(settings_data)
        except (KeyError, TypeError, ValueError) as e:
            self.judge.announce(f"Invalid settings: {e}")
            return True
        self.game_state.start_match(self.judge.create_players(valid_names), settings)

        try:
            self.role_reveal = RoleRevealHandler(
                self.game_state, pick=self.rng.choice, event_emitter=self.event_emitter
            )
        except SpyGameError as e:
            self.judge.announce(f"Cannot start the match: {e.message}")
            self.game_state.end_match()
            return True

        self.judge.announce(
            f"{len(valid_names)} players, {spy_count} "
            f"{'spy' if spy_count == 1 else 'spies'}, {format_time(settings.timer_duration)} on the clock."
        )
        return True

    # Role reveal

    def _run_role_reveal(self) -> bool:
        handler = self.role_reveal
        player = handler.current_player

        print(CLEAR_SCREEN)
        print(f"Pass the device to {player.name}")
        self.prompt("Press Enter to see your role...")

        card = handler.advance()
        print(f"\n{card.player_name}: {card.title}")
        if card.word:
            print(f"  Word: {card.word}")
        for line in card.hints:
            print(f"  {line}")
        self.prompt("Remember it, then press Enter to hide...")
        print(CLEAR_SCREEN)

        handler.advance()
        if self.game_state.stage == GameStage.GAMEPLAY:
            self.judge.announce("Everyone knows their role. Start asking questions!")
            self.countdown.start()
            self._new_tally()
        return True

    # Gameplay

    def _new_tally(self) -> None:
        self.tally = VotingTally(
            self.game_state.players,
            on_voting_complete=self.game_state.complete_voting,
            on_tie_vote=lambda: self.judge.announce("Tie vote! The votes are reset."),
            event_emitter=self.event_emitter,
        )

    def _run_gameplay(self) -> bool:
        if self.tally is None:
            self._new_tally()

        active = self.game_state.active_players
        print(f"\n[{format_time(self.game_state.time_left)}] Question: {self.questions.current}")
        for index, player in enumerate(active, start=1):
            print(f"  {index}. {player.name} - {self.tally.votes_for(player.id)} votes")
        print(f"Votes cast: {self.tally.vote_count}/{len(active)}")

        answer = self.prompt("Vote by number, 'n' next question, 'q' abandon match: ").lower()

        if self.game_state.stage != GameStage.GAMEPLAY:
            # Time ran out while waiting; the pending votes no longer count
            self.tally = None
            return True

        if answer == "n":
            self.questions.next()
            return True
        if answer == "q":
            self._abandon_match()
            return True

        try:
            choice = int(answer)
        except ValueError:
            print("Unknown command")
            return True
        if not 1 <= choice <= len(active):
            print(f"Choose a number between 1 and {len(active)}")
            return True

        outcome = self.tally.cast_vote(active[choice - 1].id)
        if outcome == VoteOutcome.VOID:
            self.judge.announce("Nobody received a vote. The votes are reset.")
        elif outcome == VoteOutcome.COMPLETE:
            self.tally = None
        return True

    def _abandon_match(self) -> None:
        self.judge.announce("Match abandoned.")
        self.tally = None
        self.role_reveal = None
        self.game_state.end_match()

    # Results

    def _finish_match(self, winner: Team) -> bool:
        self.results.append(winner.value)
        self._print_game_summary()
        answer = self.prompt("Press Enter for a new game, 'q' to quit: ").lower()
        self.tally = None
        self.role_reveal = None
        self.game_state.end_match()
        return answer != "q"

    def _run_voting_result(self) -> bool:
        eliminated = self.game_state.eliminated_player
        winner = check_win_condition(self.game_state.active_players)

        self.judge.announce(f"{eliminated.name} has been eliminated.")
        if eliminated.is_spy and winner == Team.CIVILIANS:
            self.judge.announce(f"{eliminated.name} was a spy!")

        if winner:
            self.countdown.pause(sync=False)
            self.judge.announce_winner(winner, time_left=self.game_state.time_left)
            return self._finish_match(winner)

        active = self.game_state.active_players
        print(f"[{format_time(self.game_state.time_left)}] Players left: {len(active)}")
        for player in active:
            print(f"  • {player.name}")
        self.prompt("Press Enter to continue the game...")

        if self.game_state.stage == GameStage.VOTING_RESULT:
            self.game_state.continue_match()
            self._new_tally()
        return True

    def _run_timer_expired(self) -> bool:
        self.judge.announce("Time is up! The spies win!")
        return self._finish_match(Team.SPIES)

    def _print_game_summary(self) -> None:
        """Print a formatted match summary."""
        print("\n📊 MATCH SUMMARY")
        print("-" * 60)
        if self.role_reveal:
            category = get_category_display_name(self.role_reveal.category)
            print(f"Word: {self.role_reveal.word} ({category})")
        print(f"Time left: {format_time(self.game_state.time_left)}")
        print(f"Random Seed: {self.config.random_seed}")

        spies = self.game_state.get_spies()
        print(f"\nSpies ({len(spies)}):")
        for spy in spies:
            status = "active" if spy.is_active else "eliminated"
            print(f"  • {spy.name} ({status})")

        eliminated = [p for p in self.game_state.players if not p.is_active]
        if eliminated:
            print(f"\nEliminated Players ({len(eliminated)}):")
            for player in eliminated:
                role = "Spy" if player.is_spy else "Civilian"
                print(f"  • {player.name}: {role}")


def print_runs(runs_dir: str) -> None:
    runs = RunRecorder(runs_dir).list_runs()
    if not runs:
        print(f"No runs recorded in {runs_dir}/")
        return
    for run in runs:
        outcomes = ", ".join(o for o in run["outcomes"] if o) or "no finished matches"
        print(f"{run['name']}: {run['event_count']} events, winners: {outcomes}")


def main():
    """Entry point for playing on this device."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play the spy word game on a single shared device",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                              # Use default config
  python main.py --config configs/party.yaml  # Use a YAML config
  python main.py --timer 180 --spies 2        # Override match settings
  python main.py --list-runs                  # Show recorded runs
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.environ.get("SPYGAME_CONFIG"),
        help="Path to YAML configuration file (default: $SPYGAME_CONFIG or built-in defaults)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible roles and words"
    )
    parser.add_argument(
        "--run-name",
        "-r",
        type=str,
        default=None,
        help="Custom name for this run (default: auto-generated timestamp)"
    )
    parser.add_argument(
        "--timer",
        "-t",
        type=int,
        default=None,
        help="Countdown duration in seconds"
    )
    parser.add_argument(
        "--spies",
        type=int,
        default=None,
        help="Default number of spies"
    )
    parser.add_argument(
        "--no-record",
        action="store_true",
        help="Do not record match events"
    )
    parser.add_argument(
        "--list-runs",
        action="store_true",
        help="List recorded runs and exit"
    )

    args = parser.parse_args()

    config = load_config(args.config)

    if args.list_runs:
        print_runs(config.runs_dir)
        return

    if args.seed is not None:
        config.random_seed = args.seed
    if args.no_record:
        config.record_events = False

    overrides: Dict[str, Any] = {}
    if args.timer is not None:
        overrides["timer_duration"] = args.timer
    if args.spies is not None:
        overrides["spy_count"] = args.spies

    game = SpyGame(config=config, overrides=overrides, haptics=HapticFeedback(terminal_bell))
    game.run_game()

    if game.run_recorder:
        run_path = game.run_recorder.get_run_path()
        if run_path:
            print(f"\nGame events saved to: {run_path}")


if __name__ == "__main__":
    main()
