"""Run artifact logger — writes structured files into {base_dir}/{run_id}/.

Produces:
  - config.json       Full experiment config snapshot
  - metrics.jsonl     Per-step metric records (append)
  - events.jsonl      Semantic event records (append)
  - run_summary.json  Per-episode summaries plus aggregates (written once at end)

Uses only stdlib (json, pathlib, datetime). No database dependency.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class RunLogger:
    """Writes simulation artifacts to a run directory."""

    def __init__(self, base_dir: str | Path, run_id: str) -> None:
        self._run_dir = Path(base_dir) / run_id
        self._run_dir.mkdir(parents=True, exist_ok=True)
        self._metrics_path = self._run_dir / "metrics.jsonl"
        self._events_path = self._run_dir / "events.jsonl"

    @property
    def run_dir(self) -> Path:
        return self._run_dir

    def write_config(self, config_dict: dict[str, Any]) -> None:
        """Write the experiment config as config.json."""
        self._write_json("config.json", config_dict)

    def log_step_metrics(self, records: list[dict[str, Any]]) -> None:
        """Append step metric records to metrics.jsonl."""
        self._append_jsonl(self._metrics_path, records)

    def log_events(self, events: list[dict[str, Any]]) -> None:
        """Append semantic events to events.jsonl."""
        self._append_jsonl(self._events_path, events)

    def write_run_summary(self, summary: dict[str, Any]) -> None:
        """Write the run summary as run_summary.json."""
        if not summary:
            return
        self._write_json("run_summary.json", summary)

    # ------------------------------------------------------------------

    def _write_json(self, name: str, payload: dict[str, Any]) -> None:
        stamped = {
            "written_at": datetime.now(timezone.utc).isoformat(),
            **payload,
        }
        (self._run_dir / name).write_text(
            json.dumps(stamped, indent=2, default=str), encoding="utf-8"
        )

    @staticmethod
    def _append_jsonl(path: Path, records: list[dict[str, Any]]) -> None:
        if not records:
            return
        with path.open("a", encoding="utf-8") as f:
            for rec in records:
                f.write(json.dumps(rec, default=str) + "\n")
