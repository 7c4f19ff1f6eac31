from __future__ import annotations

import math
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from careermapper.core.rounding import round_half_up


class ProgressLevel(str, Enum):
    BASICS = "basics"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CatalogError(ValueError):
    """Raised when a career catalog entry is malformed."""


class ProgressError(ValueError):
    """Raised for malformed progress snapshots or updates to unknown subjects/levels."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def clamp_progress(value: float) -> int:
    if not math.isfinite(value):
        raise ProgressError(f"progress must be a finite number, got {value!r}")
    return min(100, max(0, round_half_up(value)))


@dataclass
class SubjectProgress:
    """
    One learning app/subject and the learner's progress through its three levels.
    Completion is the mean of the three level percentages.
    """
    subject_id: str
    name: str
    category: str = ""
    basics: int = 0
    intermediate: int = 0
    advanced: int = 0

    def __post_init__(self) -> None:
        self.subject_id = normalize_whitespace(self.subject_id)
        self.name = normalize_whitespace(self.name) or self.subject_id
        self.category = normalize_whitespace(self.category)
        for level in ProgressLevel:
            setattr(self, level.value, clamp_progress(getattr(self, level.value)))

    @property
    def completion(self) -> float:
        return (self.basics + self.intermediate + self.advanced) / 3

    def level_value(self, level: ProgressLevel) -> int:
        return getattr(self, level.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.subject_id,
            "name": self.name,
            "category": self.category,
            "progress": {level.value: self.level_value(level) for level in ProgressLevel},
            "completion": self.completion,
        }


@dataclass(frozen=True)
class Prerequisite:
    subject_id: str
    min_progress: float
    weight: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "subject_id", normalize_whitespace(self.subject_id))
        if not self.subject_id:
            raise CatalogError("prerequisite subject_id must not be empty")
        if not 0 <= self.min_progress <= 100:
            raise CatalogError(f"min_progress for {self.subject_id} must be within [0, 100], got {self.min_progress}")
        if not 0 <= self.weight <= 1:
            raise CatalogError(f"weight for {self.subject_id} must be within [0, 1], got {self.weight}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CareerPath:
    """
    Static career definition. Descriptive metadata is carried through untouched.
    """
    career_id: str
    title: str
    salary_range: str
    avg_salary: float
    prerequisites: List[Prerequisite] = field(default_factory=list)

    description: str = ""
    icon: str = ""
    trending_skills: List[str] = field(default_factory=list)
    market_trend: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "career_id", normalize_whitespace(self.career_id))
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        if not self.career_id:
            raise CatalogError("career_id must not be empty")
        if not math.isfinite(self.avg_salary):
            raise CatalogError(f"avg_salary for {self.career_id} must be finite, got {self.avg_salary}")
        object.__setattr__(self, "prerequisites", list(self.prerequisites))
        object.__setattr__(self, "trending_skills", list(self.trending_skills))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.career_id,
            "title": self.title,
            "salary_range": self.salary_range,
            "avg_salary": self.avg_salary,
            "prerequisites": [p.to_dict() for p in self.prerequisites],
            "description": self.description,
            "icon": self.icon,
            "trending_skills": list(self.trending_skills),
            "market_trend": self.market_trend,
        }


@dataclass(frozen=True)
class MapperRun:
    """
    Instrumentation primitive: one career-mapper invocation.
    """
    user_id: str
    ran_at: datetime = field(default_factory=utc_now)
    top_career_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"user_id": self.user_id, "ran_at": self.ran_at.isoformat(), "top_career_id": self.top_career_id}
