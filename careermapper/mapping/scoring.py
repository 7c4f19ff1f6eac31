from __future__ import annotations

from typing import List, Mapping

from careermapper.core.rounding import round_half_up
from careermapper.models import CareerPath

from .types import MissingRequirement, SuitabilityResult


def completion_for(completions: Mapping[str, float], subject_id: str) -> float:
    # Unknown subjects count as untouched rather than an error.
    value = completions.get(subject_id)
    return float(value) if value is not None else 0.0


def score_career(career: CareerPath, completions: Mapping[str, float]) -> SuitabilityResult:
    """
    Weighted suitability of one career for a learner.

    Met prerequisites add weight * completion/100 to the numerator. Unmet ones
    add nothing but are listed as missing. Every weight counts toward the
    denominator, so one unmet prerequisite caps the score below 100.
    A career with no prerequisites (zero total weight) scores 0 and is unlocked.
    """
    numer = 0.0
    denom = 0.0
    missing: List[MissingRequirement] = []

    for req in career.prerequisites:
        current = completion_for(completions, req.subject_id)
        if current >= req.min_progress:
            numer += req.weight * (current / 100)
        else:
            missing.append(
                MissingRequirement(
                    subject_id=req.subject_id,
                    current=current,
                    required=req.min_progress,
                    deficit=req.min_progress - current,
                )
            )
        denom += req.weight

    score = round_half_up(100 * numer / denom) if denom > 0 else 0
    return SuitabilityResult(career_id=career.career_id, score=score, missing=missing)
