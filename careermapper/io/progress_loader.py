from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from careermapper.models import ProgressError, ProgressLevel, SubjectProgress
from careermapper.progress import ProgressStore


@dataclass(frozen=True)
class LoadedProgress:
    store: ProgressStore
    source: str  # "file" | "default"
    path: Optional[str] = None


def _subject_from_dict(entry: Any) -> SubjectProgress:
    if not isinstance(entry, dict) or not entry.get("id"):
        raise ProgressError(f"subject entry needs an 'id', got {entry!r}")
    progress = entry.get("progress") or {}
    if not isinstance(progress, dict):
        raise ProgressError(f"subject '{entry['id']}': 'progress' must be an object")

    levels: Dict[str, int] = {}
    for level in ProgressLevel:
        raw = progress.get(level.value, 0)
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ProgressError(f"subject '{entry['id']}': {level.value} must be a number, got {raw!r}")
        levels[level.value] = raw

    return SubjectProgress(
        subject_id=str(entry["id"]),
        name=str(entry.get("name") or entry["id"]),
        category=str(entry.get("category") or ""),
        **levels,
    )


def progress_from_dict(data: Any) -> ProgressStore:
    """Build a store from {"subjects": [...]} (a bare list is accepted too)."""
    items = data.get("subjects") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise ProgressError("progress snapshot must contain a 'subjects' list")
    subjects: List[SubjectProgress] = [_subject_from_dict(e) for e in items]
    return ProgressStore(subjects)


def load_progress_snapshot(*, progress_path: Optional[str]) -> LoadedProgress:
    """
    Load learner progress locally.
    Precedence:
      1) progress_path (.json)
      2) built-in demo progress
    Raises FileNotFoundError for a missing file and ProgressError for malformed content.
    """
    if not progress_path:
        return LoadedProgress(store=ProgressStore.with_defaults(), source="default", path=None)

    p = Path(progress_path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProgressError(f"{p}: invalid JSON ({e})") from e
    return LoadedProgress(store=progress_from_dict(data), source="file", path=str(p))
