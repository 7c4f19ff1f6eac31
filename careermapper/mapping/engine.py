from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from careermapper.models import CareerPath

from .scoring import score_career
from .types import ScoredCareer


def score_all_careers(catalog: Sequence[CareerPath], completions: Mapping[str, float]) -> List[ScoredCareer]:
    """Score every career, preserving catalog order."""
    return [ScoredCareer(career=c, suitability=score_career(c, completions)) for c in catalog]


def sort_by_score(scored: Sequence[ScoredCareer]) -> List[ScoredCareer]:
    # sorted() is stable: equal scores keep catalog order.
    return sorted(scored, key=lambda x: x.score, reverse=True)


def top_careers(
        scored: Sequence[ScoredCareer],
        *,
        min_score: Optional[int] = None,
        top_n: Optional[int] = None,
) -> List[ScoredCareer]:
    """Best first, keeping scores strictly above `min_score`, cut to `top_n`."""
    if min_score is not None:
        scored = [s for s in scored if s.score > min_score]
    ranked = sort_by_score(scored)
    return ranked[:top_n] if top_n is not None else ranked


def rank_careers(
        catalog: Sequence[CareerPath],
        completions: Mapping[str, float],
        *,
        min_score: Optional[int] = None,
        top_n: Optional[int] = None,
) -> List[ScoredCareer]:
    return top_careers(score_all_careers(catalog, completions), min_score=min_score, top_n=top_n)
