"""
Run recorder: one directory per session holding an event log and metadata.

Layout of a run directory::

    runs/<run_name>/events.jsonl   one JSON object per event
    runs/<run_name>/metadata.json  seed and config of the session
"""

import json
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterator, List, Optional

EVENTS_FILENAME = "events.jsonl"
METADATA_FILENAME = "metadata.json"


def read_events(events_file: Path) -> Iterator[Dict[str, Any]]:
    """Yield the events of a log, skipping blank and corrupt lines."""
    with open(events_file, 'r', encoding='utf-8') as f:
        for line in f:
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except ValueError:
                continue


def summarize_run(run_dir: Path) -> Dict[str, Any]:
    """Describe a recorded run: how many events it holds and who won each match."""
    summary: Dict[str, Any] = {
        "name": run_dir.name,
        "path": str(run_dir),
        "event_count": 0,
        "outcomes": [],
    }

    metadata_file = run_dir / METADATA_FILENAME
    if metadata_file.exists():
        try:
            summary["metadata"] = json.loads(metadata_file.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            print(f"Warning: unreadable metadata in {run_dir.name}: {e}")

    events_file = run_dir / EVENTS_FILENAME
    if events_file.exists():
        for event in read_events(events_file):
            summary["event_count"] += 1
            if event.get("event_type") == "match_over":
                summary["outcomes"].append(event.get("data", {}).get("winner"))

    return summary


class RunRecorder:
    """Appends session events to the current run directory."""

    def __init__(self, runs_dir: str = "runs"):
        self.runs_dir = Path(runs_dir)
        self.current_run_dir: Optional[Path] = None
        self._lock = Lock()
        self._sequence = 0

    @property
    def events_file(self) -> Optional[Path]:
        if self.current_run_dir is None:
            return None
        return self.current_run_dir / EVENTS_FILENAME

    @property
    def metadata_file(self) -> Optional[Path]:
        if self.current_run_dir is None:
            return None
        return self.current_run_dir / METADATA_FILENAME

    def create_run(self, run_name: Optional[str] = None) -> str:
        """
        Start a new run directory, created on demand.

        Args:
            run_name: Directory name. Defaults to run_<timestamp>.

        Returns:
            The run name
        """
        run_name = run_name or datetime.now().strftime("run_%Y%m%d_%H%M%S")
        self.current_run_dir = self.runs_dir / run_name
        self.current_run_dir.mkdir(parents=True, exist_ok=True)
        self._sequence = 0
        return run_name

    def record_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Append one event; a no-op until a run is created."""
        if self.events_file is None:
            return

        with self._lock:
            line = json.dumps({
                "sequence": self._sequence,
                "timestamp": datetime.now().isoformat(),
                "event_type": event_type,
                "data": data,
            }, ensure_ascii=False)
            self._sequence += 1
            with open(self.events_file, 'a', encoding='utf-8') as f:
                f.write(line + '\n')

    def save_metadata(self, metadata: Dict[str, Any]) -> None:
        if self.metadata_file is None:
            return
        with self._lock:
            self.metadata_file.write_text(json.dumps(metadata, indent=2, ensure_ascii=False), encoding='utf-8')

    def get_run_path(self) -> Optional[Path]:
        return self.current_run_dir

    def list_runs(self) -> List[Dict[str, Any]]:
        """Summaries of every recorded run, newest first."""
        if not self.runs_dir.is_dir():
            return []
        run_dirs = sorted((d for d in self.runs_dir.iterdir() if d.is_dir()), reverse=True)
        return [summarize_run(run_dir) for run_dir in run_dirs]
