from __future__ import annotations

import json
from pathlib import Path

import pytest

from careermapper.catalog import load_catalog
from careermapper.io.progress_loader import load_progress_snapshot, progress_from_dict
from careermapper.mapping import score_career
from careermapper.models import ProgressError


def test_loads_fixture_snapshot(fixtures_dir: Path) -> None:
    loaded = load_progress_snapshot(progress_path=str(fixtures_dir / "progress.json"))
    assert loaded.source == "file"
    assert loaded.path.endswith("progress.json")

    completions = loaded.store.completions()
    assert completions == {"learn-apt": 70, "learn-math": 30, "learn-developer": 0}
    assert loaded.store.get_subject("learn-developer").intermediate == 0  # absent levels default to 0


def test_fixture_snapshot_reproduces_worked_example(fixtures_dir: Path) -> None:
    store = load_progress_snapshot(progress_path=str(fixtures_dir / "progress.json")).store
    fintech = load_catalog(fixtures_dir / "catalog.json")[0]
    result = score_career(fintech, store.completions())
    assert result.score == 30
    assert [m.subject_id for m in result.missing] == ["learn-developer"]


def test_no_path_uses_demo_progress() -> None:
    loaded = load_progress_snapshot(progress_path=None)
    assert loaded.source == "default"
    assert loaded.path is None
    assert len(loaded.store.subjects()) == 10


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_progress_snapshot(progress_path=str(tmp_path / "missing.json"))


def test_invalid_json_raises_progress_error(tmp_path: Path) -> None:
    p = tmp_path / "progress.json"
    p.write_text("{", encoding="utf-8")
    with pytest.raises(ProgressError):
        load_progress_snapshot(progress_path=str(p))


@pytest.mark.parametrize(
    "payload",
    [
        {"subjects": "nope"},
        {"subjects": [{"name": "No id"}]},
        {"subjects": [{"id": "a", "progress": {"basics": "high"}}]},
        {"subjects": [{"id": "a", "progress": [1, 2, 3]}]},
        {"subjects": [{"id": "a"}, {"id": "a"}]},
        {"subjects": [{"id": "a", "progress": {"basics": float("nan")}}]},
        {"subjects": [{"id": "a", "progress": {"intermediate": float("inf")}}]},
        {"subjects": [{"id": "a", "progress": {"advanced": float("-inf")}}]},
    ],
)
def test_malformed_snapshots_rejected(payload) -> None:
    with pytest.raises(ProgressError):
        progress_from_dict(json.loads(json.dumps(payload)))


def test_bare_list_accepted() -> None:
    store = progress_from_dict([{"id": "learn-ai", "progress": {"basics": 90, "intermediate": 60, "advanced": 30}}])
    assert store.completions() == {"learn-ai": 60}
    assert store.get_subject("learn-ai").name == "learn-ai"


def test_nan_literal_in_file_rejected(tmp_path: Path) -> None:
    p = tmp_path / "progress.json"
    p.write_text('{"subjects": [{"id": "learn-ai", "progress": {"basics": NaN}}]}', encoding="utf-8")
    with pytest.raises(ProgressError, match="finite"):
        load_progress_snapshot(progress_path=str(p))
