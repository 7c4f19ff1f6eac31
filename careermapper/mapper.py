from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from careermapper import config
from careermapper.catalog import DEFAULT_CAREER_PATHS, load_catalog
from careermapper.gap import GapRecommendation, recommend_gaps
from careermapper.history import JsonRunHistory, RunHistory, default_history_dir
from careermapper.io.progress_loader import load_progress_snapshot
from careermapper.io.roadmap_pdf import write_roadmap_pdf
from careermapper.mapping.engine import score_all_careers, sort_by_score
from careermapper.mapping.types import ScoredCareer
from careermapper.models import CareerPath, CatalogError, MapperRun, ProgressError
from careermapper.progress import ProgressStore
from careermapper.roadmap import build_roadmap
from careermapper.salary import estimate_salary


@dataclass(frozen=True)
class CareerMapperResult:
    user_id: str
    total_progress: float
    top_subject_id: Optional[str]
    careers: List[ScoredCareer]  # ranked, best first
    salary_estimate: int
    missing_links: List[GapRecommendation]
    duration_ms: int
    dry_run: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "total_progress": self.total_progress,
            "top_subject_id": self.top_subject_id,
            "careers": [
                {
                    "career": c.career.to_dict(),
                    "suitability": c.suitability.to_dict(),
                }
                for c in self.careers
            ],
            "salary_estimate": self.salary_estimate,
            "missing_links": [g.to_dict() for g in self.missing_links],
            "duration_ms": self.duration_ms,
            "dry_run": self.dry_run,
        }


def run_career_mapper(
        *,
        user_id: str,
        store: ProgressStore,
        catalog: Optional[Sequence[CareerPath]] = None,
        history: Optional[RunHistory] = None,
        dry_run: bool = False,
        cfg: Optional[config.MapperConfig] = None,
) -> CareerMapperResult:
    """
    Score every career against one progress snapshot, then derive the salary
    estimate and missing links from the same snapshot.
    """
    start = time.time()
    cfg = cfg or config.load_mapper_config()
    catalog = DEFAULT_CAREER_PATHS if catalog is None else catalog

    scored = score_all_careers(catalog, store.completions())
    salary = estimate_salary(
        scored,
        min_score=cfg.salary_min_score,
        top_n=cfg.salary_top_n,
        floor=cfg.salary_floor,
    )
    gaps = recommend_gaps(
        scored,
        salary,
        subject_names=store.subject_names(),
        min_score=cfg.gap_min_score,
        salary_factor=cfg.gap_salary_factor,
        min_increase=cfg.gap_min_increase,
        max_results=cfg.gap_max_results,
    )
    ranked = sort_by_score(scored)
    top = store.top_subject()

    if not dry_run:
        history = history or JsonRunHistory(default_history_dir())
        history.record_run(
            MapperRun(user_id=user_id, top_career_id=ranked[0].career.career_id if ranked else None),
            meta={
                "careers": len(scored),
                "unlocked": sum(1 for s in scored if s.unlocked),
                "salary_estimate": salary,
                "missing_links": [g.subject_id for g in gaps],
            },
        )

    duration_ms = int((time.time() - start) * 1000)

    return CareerMapperResult(
        user_id=user_id,
        total_progress=store.total_progress(),
        top_subject_id=top.subject_id if top else None,
        careers=ranked,
        salary_estimate=salary,
        missing_links=gaps,
        duration_ms=duration_ms,
        dry_run=dry_run,
    )


def print_human_summary(result: CareerMapperResult, store: ProgressStore) -> None:
    print("\n=== Career Mapper ===")
    print(f"User: {result.user_id}")
    print(f"Overall progress: {result.total_progress:.0f}%")
    if result.dry_run:
        print("Mode: DRY RUN (no run history written)")
    print(f"Duration: {result.duration_ms}ms")

    print("\nProgress:")
    for s in store.subjects():
        print(f"   {s.name}: {s.completion:.0f}%")

    print(f"\nEstimated market value: ₹{result.salary_estimate} LPA")

    print("\nCareers:")
    for idx, c in enumerate(result.careers, start=1):
        lock = "unlocked" if c.unlocked else "locked"
        print(f"\n{idx}) {c.career.title}  [{c.score}% match, {lock}]")
        print(f"   {c.career.salary_range} - {c.career.market_trend}")
        for m in c.suitability.missing:
            print(f"   needs {m.subject_id}: {m.current:.0f}% / {m.required:.0f}%")

    if result.missing_links:
        print("\nMissing links:")
        for g in result.missing_links:
            print(f"   Complete {g.subject_name} to unlock ₹{g.salary_increase}+ LPA ({g.career_title})")


def _parse_update(raw: str) -> Tuple[str, str, float]:
    """SUBJECT.LEVEL=VALUE, e.g. learn-ai.basics=80"""
    target, sep, value = raw.partition("=")
    subject_id, dot, level = target.rpartition(".")
    if not sep or not dot or not subject_id or not level:
        raise ProgressError(f"invalid --set value '{raw}' (expected SUBJECT.LEVEL=VALUE)")
    try:
        return subject_id.strip(), level.strip(), float(value)
    except ValueError:
        raise ProgressError(f"invalid --set value '{raw}': '{value}' is not a number") from None


def _fail(message: str) -> None:
    print(f"\n[CareerMapper] {message}", file=sys.stderr)
    raise SystemExit(2)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Career Mapper: career suitability, salary estimate and missing links")
    parser.add_argument("--user-id", default="local-user", help="User identifier for run history")
    parser.add_argument("--progress", type=str, default="", help="Path to a progress snapshot .json (default: demo progress)")
    parser.add_argument("--catalog", type=str, default="", help="Path to a career catalog .json (default: built-in catalog)")
    parser.add_argument("--set", dest="updates", action="append", default=[], metavar="SUBJECT.LEVEL=VALUE",
                        help="Apply a progress update before scoring (repeatable)")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--dry-run", action="store_true", help="Run without writing run history")
    parser.add_argument("--roadmap-pdf", type=str, default="", help="Also write a PDF career roadmap to this path")
    args = parser.parse_args(argv)

    try:
        loaded = load_progress_snapshot(progress_path=args.progress or None)
        catalog = load_catalog(Path(args.catalog)) if args.catalog else DEFAULT_CAREER_PATHS
        store = loaded.store
        for raw in args.updates:
            subject_id, level, value = _parse_update(raw)
            store.update_progress(subject_id, level, value)
    except FileNotFoundError as e:
        _fail(f"File not found: {e.filename}")
    except (ProgressError, CatalogError) as e:
        _fail(str(e))

    result = run_career_mapper(
        user_id=args.user_id,
        store=store,
        catalog=catalog,
        dry_run=args.dry_run,
    )

    if args.roadmap_pdf:
        roadmap = build_roadmap(store, catalog)
        try:
            pages = write_roadmap_pdf(roadmap, args.roadmap_pdf)
        except OSError as e:
            _fail(f"Could not write roadmap to {args.roadmap_pdf}: {e.strerror or e}")
        print(f"[CareerMapper] Roadmap written to {args.roadmap_pdf} ({pages} page(s))", file=sys.stderr)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_human_summary(result, store=store)
        print("\nJSON Output (for skills/agents):")
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
