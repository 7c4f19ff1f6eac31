from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from careermapper.models import CareerPath


@dataclass(frozen=True)
class MissingRequirement:
    subject_id: str
    current: float
    required: float
    deficit: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "current": self.current,
            "required": self.required,
            "deficit": self.deficit,
        }


@dataclass(frozen=True)
class SuitabilityResult:
    career_id: str
    score: int  # 0-100
    missing: List[MissingRequirement] = field(default_factory=list)

    @property
    def unlocked(self) -> bool:
        return not self.missing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "career_id": self.career_id,
            "score": self.score,
            "missing": [m.to_dict() for m in self.missing],
            "unlocked": self.unlocked,
        }


@dataclass(frozen=True)
class ScoredCareer:
    career: CareerPath
    suitability: SuitabilityResult

    @property
    def score(self) -> int:
        return self.suitability.score

    @property
    def unlocked(self) -> bool:
        return self.suitability.unlocked
