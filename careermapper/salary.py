from __future__ import annotations

from typing import Optional, Sequence

from careermapper import config
from careermapper.core.rounding import round_half_up
from careermapper.mapping.engine import sort_by_score
from careermapper.mapping.types import ScoredCareer


def estimate_salary(
        results: Sequence[ScoredCareer],
        *,
        min_score: Optional[int] = None,
        top_n: Optional[int] = None,
        floor: Optional[int] = None,
) -> int:
    """
    Blended market value (LPA) from the learner's strongest career matches.

    Takes careers scoring above `min_score`, best first, up to `top_n`, and
    returns sum(avg_salary * score/100) / count. The divisor is the number of
    matches, not the sum of their scores, so weak matches pull the figure down.
    Returns `floor` when nothing qualifies.
    """
    min_score = config.SALARY_MIN_MATCH_SCORE if min_score is None else min_score
    top_n = config.SALARY_TOP_N if top_n is None else top_n
    floor = config.SALARY_FLOOR_LPA if floor is None else floor

    top = sort_by_score([r for r in results if r.score > min_score])[:top_n]
    if not top:
        return floor

    weighted = sum(r.career.avg_salary * r.score / 100 for r in top)
    return round_half_up(weighted / len(top))
