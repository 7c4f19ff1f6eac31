from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from careermapper import config
from careermapper.core.rounding import round_half_up
from careermapper.mapping.types import ScoredCareer


@dataclass(frozen=True)
class GapRecommendation:
    """A "missing link": finishing one subject would unlock a better-paid career."""
    subject_id: str
    subject_name: str
    career_id: str
    career_title: str
    salary_increase: int
    current: float
    required: float
    deficit: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "career_id": self.career_id,
            "career_title": self.career_title,
            "salary_increase": self.salary_increase,
            "current": self.current,
            "required": self.required,
            "deficit": self.deficit,
        }


def recommend_gaps(
        results: Sequence[ScoredCareer],
        current_salary_estimate: float,
        *,
        subject_names: Optional[Mapping[str, str]] = None,
        min_score: Optional[int] = None,
        salary_factor: Optional[float] = None,
        min_increase: Optional[float] = None,
        max_results: Optional[int] = None,
) -> List[GapRecommendation]:
    """
    Up to `max_results` nudges, highest promised salary increase first.

    - only locked careers scoring above `min_score` are considered
    - each missing subject promises (avg_salary - current) * salary_factor,
      kept when strictly above `min_increase`
    - one nudge per subject: the larger increase wins, ties keep the first seen
    """
    min_score = config.GAP_MIN_MATCH_SCORE if min_score is None else min_score
    salary_factor = config.GAP_SALARY_FACTOR if salary_factor is None else salary_factor
    min_increase = config.GAP_MIN_INCREASE_LPA if min_increase is None else min_increase
    max_results = config.GAP_MAX_RESULTS if max_results is None else max_results
    names = subject_names or {}

    by_subject: Dict[str, GapRecommendation] = {}
    for r in results:
        if r.unlocked or r.score <= min_score:
            continue
        for m in r.suitability.missing:
            potential = (r.career.avg_salary - current_salary_estimate) * salary_factor
            if potential <= min_increase:
                continue
            gap = GapRecommendation(
                subject_id=m.subject_id,
                subject_name=names.get(m.subject_id, m.subject_id),
                career_id=r.career.career_id,
                career_title=r.career.title,
                salary_increase=round_half_up(potential),
                current=m.current,
                required=m.required,
                deficit=m.deficit,
            )
            existing = by_subject.get(m.subject_id)
            if existing is None or gap.salary_increase > existing.salary_increase:
                # Replacement moves the subject to the end, before the final sort.
                by_subject.pop(m.subject_id, None)
                by_subject[m.subject_id] = gap

    ranked = sorted(by_subject.values(), key=lambda g: g.salary_increase, reverse=True)
    return ranked[:max_results]
