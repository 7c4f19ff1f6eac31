from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Protocol

from careermapper import config
from careermapper.models import MapperRun


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _best_effort_lockdown_file_permissions(path: Path) -> None:
    """
    Best-effort privacy: on Unix, set 600. On Windows, chmod only toggles read-only.
    """
    try:
        os.chmod(path, 0o600)
    except OSError:
        pass


class RunHistory(Protocol):
    def record_run(self, run: MapperRun, *, meta: Optional[dict] = None) -> None:
        ...

    def load_runs(self) -> List[dict]:
        ...


class JsonRunHistory:
    """
    Local run log.

    Layout:
      <base_dir>/
        runs.jsonl -> JSON lines: {"user_id": "...", "ran_at": "...", "top_career_id": "...", "meta": {...}}
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir
        self.runs_path = base_dir / "runs.jsonl"
        _ensure_dir(self.base_dir)

    def record_run(self, run: MapperRun, *, meta: Optional[dict] = None) -> None:
        record = run.to_dict()
        record["meta"] = meta or {}
        line = json.dumps(record, sort_keys=True)
        with self.runs_path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
        _best_effort_lockdown_file_permissions(self.runs_path)

    def load_runs(self) -> List[dict]:
        if not self.runs_path.exists():
            return []
        runs: List[dict] = []
        for raw in self.runs_path.read_text(encoding="utf-8").splitlines():
            raw = raw.strip()
            if not raw:
                continue
            record = json.loads(raw)
            # Validate the timestamp so a corrupted log fails loudly.
            datetime.fromisoformat(record["ran_at"])
            runs.append(record)
        return runs


def default_history_dir() -> Path:
    return config.default_home_dir()
