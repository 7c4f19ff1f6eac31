from __future__ import annotations

import tempfile
from pathlib import Path
from pprint import pprint

from careermapper.catalog import DEFAULT_CAREER_PATHS
from careermapper.io.roadmap_pdf import write_roadmap_pdf
from careermapper.mapper import run_career_mapper
from careermapper.progress import ProgressStore
from careermapper.roadmap import build_roadmap


def main() -> int:
    print("=== Career Mapper Smoke Test ===")
    print(f"Careers in catalog: {len(DEFAULT_CAREER_PATHS)}")
    print("")

    store = ProgressStore.with_defaults()

    # --- Demo progress ---
    print(">>> Scoring demo progress...")
    result = run_career_mapper(user_id="smoke", store=store, dry_run=True)
    print(f"Salary estimate: {result.salary_estimate} LPA")
    print("Best match:")
    pprint(result.careers[0].suitability.to_dict())
    print("")

    # --- After finishing two tracks ---
    print(">>> Completing learn-ai and learn-developer...")
    for subject_id in ("learn-ai", "learn-developer"):
        for level in ("basics", "intermediate", "advanced"):
            store.update_progress(subject_id, level, 100)
    result = run_career_mapper(user_id="smoke", store=store, dry_run=True)
    print(f"Salary estimate: {result.salary_estimate} LPA")
    for g in result.missing_links:
        print(f"Missing link: {g.subject_name} -> +{g.salary_increase} LPA ({g.career_title})")
    print("")

    # --- Roadmap ---
    print(">>> Rendering roadmap PDF...")
    with tempfile.TemporaryDirectory() as tmp:
        out = Path(tmp) / "roadmap.pdf"
        pages = write_roadmap_pdf(build_roadmap(store), out)
        size = out.stat().st_size
    print(f"Pages: {pages} | Bytes: {size}")
    print("")

    # --- Basic assertions ---
    print(">>> Running basic assertions...")
    assert all(0 <= c.score <= 100 for c in result.careers)
    assert result.careers[0].score >= result.careers[-1].score
    assert len(result.missing_links) <= 3
    assert pages >= 1
    print("OK ✅")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
