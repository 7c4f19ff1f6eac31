from .engine import rank_careers, score_all_careers, top_careers
from .scoring import score_career
from .types import MissingRequirement, ScoredCareer, SuitabilityResult

__all__ = [
    "rank_careers",
    "score_all_careers",
    "score_career",
    "top_careers",
    "MissingRequirement",
    "ScoredCareer",
    "SuitabilityResult",
]
