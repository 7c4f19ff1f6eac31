from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from careermapper.models import ProgressError, ProgressLevel, SubjectProgress, clamp_progress


def default_subjects() -> List[SubjectProgress]:
    """Demo progress for the ten learning apps, used when no snapshot is supplied."""
    return [
        SubjectProgress("learn-ai", "Learn AI", "Technology", 0, 0, 0),
        SubjectProgress("learn-apt", "Learn Aptitude", "Foundation", 45, 20, 0),
        SubjectProgress("learn-math", "Learn Math", "Foundation", 60, 30, 10),
        SubjectProgress("learn-physics", "Learn Physics", "Science", 30, 0, 0),
        SubjectProgress("learn-chemistry", "Learn Chemistry", "Science", 25, 0, 0),
        SubjectProgress("learn-geography", "Learn Geography", "Social Science", 40, 15, 0),
        SubjectProgress("learn-pr", "Learn PR", "Professional", 35, 10, 0),
        SubjectProgress("learn-management", "Learn Management", "Professional", 50, 25, 5),
        SubjectProgress("learn-finesse", "Learn Finesse", "Professional", 0, 0, 0),
        SubjectProgress("learn-developer", "Learn Developer", "Technology", 20, 0, 0),
    ]


class ProgressStore:
    """
    In-memory learner progress, keyed by subject id.

    Scoring never reads the store directly: callers take a `completions()`
    snapshot and pass it to the pure scoring functions.
    """

    def __init__(self, subjects: Iterable[SubjectProgress]) -> None:
        self._subjects: Dict[str, SubjectProgress] = {}
        for s in subjects:
            if s.subject_id in self._subjects:
                raise ProgressError(f"duplicate subject id '{s.subject_id}'")
            self._subjects[s.subject_id] = s

    @classmethod
    def with_defaults(cls) -> "ProgressStore":
        return cls(default_subjects())

    def subjects(self) -> List[SubjectProgress]:
        return list(self._subjects.values())

    def get_subject(self, subject_id: str) -> Optional[SubjectProgress]:
        return self._subjects.get(subject_id)

    def update_progress(self, subject_id: str, level: Union[ProgressLevel, str], value: float) -> SubjectProgress:
        subject = self._subjects.get(subject_id)
        if subject is None:
            raise ProgressError(f"unknown subject '{subject_id}'")
        try:
            lvl = ProgressLevel(level)
        except ValueError:
            allowed = ", ".join(lv.value for lv in ProgressLevel)
            raise ProgressError(f"unknown progress level '{level}' (expected one of: {allowed})") from None
        setattr(subject, lvl.value, clamp_progress(value))
        return subject

    def completions(self) -> Dict[str, float]:
        return {sid: s.completion for sid, s in self._subjects.items()}

    def subject_names(self) -> Dict[str, str]:
        return {sid: s.name for sid, s in self._subjects.items()}

    def total_progress(self) -> float:
        if not self._subjects:
            return 0.0
        return sum(s.completion for s in self._subjects.values()) / len(self._subjects)

    def top_subject(self) -> Optional[SubjectProgress]:
        top: Optional[SubjectProgress] = None
        for s in self._subjects.values():
            if top is None or s.completion > top.completion:
                top = s
        return top
