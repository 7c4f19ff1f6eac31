from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from careermapper import config
from careermapper.catalog import DEFAULT_CAREER_PATHS
from careermapper.core.rounding import round_half_up
from careermapper.gap import GapRecommendation, recommend_gaps
from careermapper.mapping.engine import score_all_careers, top_careers
from careermapper.models import CareerPath
from careermapper.progress import ProgressStore
from careermapper.salary import estimate_salary


@dataclass(frozen=True)
class RoadmapLine:
    text: str
    size: int = 10
    indent: int = 0
    space_before: int = 0


@dataclass(frozen=True)
class RoadmapCareer:
    title: str
    score: int
    salary_range: str
    market_trend: str


@dataclass(frozen=True)
class CareerRoadmap:
    """
    Printable summary: market value, per-subject progress, best careers and missing links.
    """
    salary_estimate: int
    subjects: List[Dict[str, Any]]  # [{"name": ..., "completion": int}]
    top_careers: List[RoadmapCareer]
    missing_links: List[GapRecommendation]
    generated_on: date = field(default_factory=date.today)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "salary_estimate": self.salary_estimate,
            "subjects": [dict(s) for s in self.subjects],
            "top_careers": [
                {
                    "title": c.title,
                    "score": c.score,
                    "salary_range": c.salary_range,
                    "market_trend": c.market_trend,
                }
                for c in self.top_careers
            ],
            "missing_links": [g.to_dict() for g in self.missing_links],
            "generated_on": self.generated_on.isoformat(),
        }

    def to_lines(self) -> List[RoadmapLine]:
        lines = [
            RoadmapLine("My Career Roadmap", size=20),
            RoadmapLine(f"Estimated Market Value: ₹{self.salary_estimate} LPA", size=14, space_before=6),
            RoadmapLine("My Learning Progress:", size=12, space_before=8),
        ]
        for s in self.subjects:
            lines.append(RoadmapLine(f"{s['name']}: {s['completion']}%", size=10, indent=5))

        lines.append(RoadmapLine("Top Career Matches:", size=12, space_before=10))
        for idx, c in enumerate(self.top_careers, start=1):
            lines.append(RoadmapLine(f"{idx}. {c.title} ({c.score}% match)", size=11, indent=5))
            lines.append(RoadmapLine(f"   {c.salary_range} - {c.market_trend}", size=9, indent=5))

        if self.missing_links:
            lines.append(RoadmapLine("Unlock Higher Salaries:", size=12, space_before=5))
            for g in self.missing_links:
                lines.append(
                    RoadmapLine(f"• Complete {g.subject_name} to unlock ₹{g.salary_increase}+ LPA", size=10, indent=5)
                )

        lines.append(RoadmapLine(config.ROADMAP_FOOTER, size=8, space_before=10))
        lines.append(RoadmapLine(self.generated_on.isoformat(), size=8))
        return lines

    def to_text(self) -> str:
        return "\n".join((" " * (line.indent // 5 * 2)) + line.text for line in self.to_lines())


def build_roadmap(
        store: ProgressStore,
        catalog: Optional[Sequence[CareerPath]] = None,
        *,
        generated_on: Optional[date] = None,
        cfg: Optional[config.MapperConfig] = None,
) -> CareerRoadmap:
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
    top = top_careers(scored, min_score=cfg.roadmap_min_score, top_n=cfg.roadmap_top_n)

    return CareerRoadmap(
        salary_estimate=salary,
        subjects=[{"name": s.name, "completion": round_half_up(s.completion)} for s in store.subjects()],
        top_careers=[
            RoadmapCareer(
                title=s.career.title,
                score=s.score,
                salary_range=s.career.salary_range,
                market_trend=s.career.market_trend,
            )
            for s in top
        ],
        missing_links=gaps,
        generated_on=generated_on or date.today(),
    )
