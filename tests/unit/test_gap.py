from __future__ import annotations

from typing import List, Tuple

from careermapper.catalog import DEFAULT_CAREER_PATHS
from careermapper.gap import recommend_gaps
from careermapper.mapping import score_all_careers
from careermapper.models import CareerPath, Prerequisite
from careermapper.salary import estimate_salary


def _locked_career(career_id: str, avg_salary: float, missing_subjects: List[str]) -> CareerPath:
    """A career scoring 90 on subject 'core' with each missing subject unmet."""
    prereqs = [Prerequisite("core", 0, 0.9)]
    prereqs += [Prerequisite(s, 50, 0.1 / len(missing_subjects)) for s in missing_subjects]
    return CareerPath(career_id=career_id, title=career_id.title(), salary_range="", avg_salary=avg_salary,
                      prerequisites=prereqs)


def _scored(*careers: CareerPath):
    return score_all_careers(list(careers), {"core": 100})


def _pairs(gaps) -> List[Tuple[str, int]]:
    return [(g.subject_id, g.salary_increase) for g in gaps]


def test_developer_learner_gets_math_nudge(developer_store):
    scored = score_all_careers(DEFAULT_CAREER_PATHS, developer_store.completions())
    salary = estimate_salary(scored)
    gaps = recommend_gaps(scored, salary, subject_names=developer_store.subject_names())

    # AI/ML (80, avg 22): (22 - 12) * 0.7 = 7. Full Stack (70, avg 13) promises 0.7 and is dropped.
    assert len(gaps) == 1
    g = gaps[0]
    assert g.subject_id == "learn-math"
    assert g.subject_name == "Learn Math"
    assert g.career_title == "AI/ML Engineer"
    assert g.salary_increase == 7
    assert g.current == 0.0
    assert g.required == 40
    assert g.deficit == 40


def test_unlocked_and_weak_careers_are_ignored():
    weak = CareerPath(
        career_id="weak",
        title="Weak",
        salary_range="",
        avg_salary=50,
        prerequisites=[Prerequisite("core", 0, 0.5), Prerequisite("x", 50, 0.5)],
    )
    unlocked = CareerPath(
        career_id="done",
        title="Done",
        salary_range="",
        avg_salary=50,
        prerequisites=[Prerequisite("core", 0, 1.0)],
    )
    scored = score_all_careers([weak, unlocked], {"core": 100})
    assert [s.score for s in scored] == [50, 100]
    assert recommend_gaps(scored, 8) == []


def test_increase_must_exceed_minimum():
    scored = _scored(_locked_career("edge", 12, ["x"]))
    # exactly 2.0 is not enough
    assert recommend_gaps(scored, 10, salary_factor=1.0, min_increase=2) == []
    assert _pairs(recommend_gaps(scored, 9, salary_factor=1.0, min_increase=2)) == [("x", 3)]


def test_dedupe_keeps_larger_increase():
    scored = _scored(_locked_career("small", 30, ["x"]), _locked_career("big", 40, ["x"]))
    gaps = recommend_gaps(scored, 10)
    # (30-10)*0.7 = 14 vs (40-10)*0.7 = 21
    assert _pairs(gaps) == [("x", 21)]
    assert gaps[0].career_id == "big"


def test_dedupe_tie_keeps_first_seen():
    scored = _scored(_locked_career("first", 30, ["x"]), _locked_career("second", 30, ["x"]))
    gaps = recommend_gaps(scored, 10)
    assert len(gaps) == 1
    assert gaps[0].career_id == "first"


def test_sorted_and_truncated_to_three():
    scored = _scored(
        _locked_career("a", 20, ["s1", "s2"]),
        _locked_career("b", 40, ["s3"]),
        _locked_career("c", 30, ["s4"]),
    )
    gaps = recommend_gaps(scored, 10)
    # b: 21, c: 14, a: 7 (two subjects)
    assert _pairs(gaps) == [("s3", 21), ("s4", 14), ("s1", 7)]


def test_subject_name_falls_back_to_id():
    scored = _scored(_locked_career("a", 40, ["x"]))
    gaps = recommend_gaps(scored, 10)
    assert gaps[0].subject_name == "x"
    assert gaps[0].to_dict()["career_title"] == "A"


def test_empty_results_give_no_gaps():
    assert recommend_gaps([], 8) == []
