"""
Tests for event recording.
"""

import json

import pytest
from unittest.mock import Mock
from spygame.events import EventEmitter, RunRecorder
from spygame.events.run_recorder import read_events, summarize_run


def test_create_run_named(tmp_path):
    recorder = RunRecorder(str(tmp_path / "runs"))

    name = recorder.create_run("party")

    assert name == "party"
    assert recorder.get_run_path() == tmp_path / "runs" / "party"
    assert recorder.get_run_path().is_dir()


def test_create_run_timestamped(tmp_path):
    recorder = RunRecorder(str(tmp_path))

    assert recorder.create_run().startswith("run_")


def test_record_event_sequence(tmp_path):
    """Test that events are appended as JSON lines with a sequence number."""
    recorder = RunRecorder(str(tmp_path))
    recorder.create_run("r")

    recorder.record_event("vote", {"target": "1"})
    recorder.record_event("tie", {"tied_players": ["1", "2"]})

    events = list(read_events(recorder.events_file))
    assert [e["event_type"] for e in events] == ["vote", "tie"]
    assert [e["sequence"] for e in events] == [0, 1]
    assert events[1]["data"] == {"tied_players": ["1", "2"]}


def test_record_event_without_run_is_noop(tmp_path):
    recorder = RunRecorder(str(tmp_path))

    recorder.record_event("vote", {})

    assert list(tmp_path.iterdir()) == []


def test_save_metadata(tmp_path):
    recorder = RunRecorder(str(tmp_path))
    recorder.create_run("r")

    recorder.save_metadata({"random_seed": 5})

    assert json.loads(recorder.metadata_file.read_text()) == {"random_seed": 5}


def test_list_runs(tmp_path):
    """Test that runs report their event counts and winners."""
    recorder = RunRecorder(str(tmp_path))
    recorder.create_run("a_run")
    recorder.record_event("match_over", {"winner": "spies"})
    recorder.create_run("b_run")
    recorder.record_event("vote", {})
    recorder.save_metadata({"random_seed": 1})

    runs = recorder.list_runs()

    assert [r["name"] for r in runs] == ["b_run", "a_run"]
    assert runs[0]["event_count"] == 1
    assert runs[0]["metadata"] == {"random_seed": 1}
    assert runs[1]["outcomes"] == ["spies"]


def test_list_runs_missing_dir(tmp_path):
    assert RunRecorder(str(tmp_path / "nothing")).list_runs() == []


def test_emitter_records_and_notifies(tmp_path):
    recorder = RunRecorder(str(tmp_path))
    recorder.create_run("r")
    emitter = EventEmitter(recorder)
    listener = Mock()
    emitter.register_listener(listener)

    emitter.emit_time_update(42)

    listener.assert_called_once_with("time_update", {"time_left": 42})
    assert next(read_events(recorder.events_file))["data"] == {"time_left": 42}


def test_unregister_listener():
    emitter = EventEmitter()
    listener = Mock()
    emitter.register_listener(listener)
    emitter.unregister_listener(listener)

    emitter.emit_tie(["1", "2"], {"1": 1, "2": 1})

    listener.assert_not_called()


def test_recording_errors_do_not_break_the_game(capsys):
    """Test that a failing recorder is reported and ignored."""
    recorder = Mock()
    recorder.record_event.side_effect = OSError("disk full")
    emitter = EventEmitter(recorder)
    listener = Mock()
    emitter.register_listener(listener)

    emitter.emit_elimination("1", "Ann", True)

    assert "disk full" in capsys.readouterr().out
    listener.assert_called_once()


def test_summary_skips_corrupt_lines(tmp_path):
    """Test that a damaged event log is still summarized."""
    run_dir = tmp_path / "damaged"
    run_dir.mkdir()
    (run_dir / "events.jsonl").write_text(
        '{"event_type": "match_over", "data": {"winner": "civilians"}}\n'
        '{"event_type": "vote", "da\n'
        '\n'
    )
    (run_dir / "metadata.json").write_text("not json")

    summary = summarize_run(run_dir)

    assert summary["event_count"] == 1
    assert summary["outcomes"] == ["civilians"]
    assert "metadata" not in summary
