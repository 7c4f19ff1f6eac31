from careermapper.catalog import DEFAULT_CAREER_PATHS
from careermapper.mapping import rank_careers, score_all_careers, top_careers
from careermapper.progress import ProgressStore


def test_score_all_careers_preserves_catalog_order():
    scored = score_all_careers(DEFAULT_CAREER_PATHS, {})
    assert [s.career.career_id for s in scored] == [c.career_id for c in DEFAULT_CAREER_PATHS]
    assert all(s.score == 0 for s in scored)


def test_empty_catalog_yields_empty_results():
    assert score_all_careers([], {"learn-ai": 100}) == []


def test_scoring_is_deterministic():
    completions = ProgressStore.with_defaults().completions()
    first = score_all_careers(DEFAULT_CAREER_PATHS, completions)
    second = score_all_careers(DEFAULT_CAREER_PATHS, completions)
    assert [s.suitability.to_dict() for s in first] == [s.suitability.to_dict() for s in second]


def test_default_demo_progress_scores():
    by_id = {
        s.career.career_id: s
        for s in score_all_careers(DEFAULT_CAREER_PATHS, ProgressStore.with_defaults().completions())
    }
    # Only math (33.3%) clears a threshold anywhere.
    assert by_id["fintech-architect"].score == 10
    assert by_id["operations-manager"].score == 7
    assert by_id["ai-ml-engineer"].score == 0
    # learn-govt-jobs is not in the demo store: treated as 0, never an error.
    assert any(m.subject_id == "learn-govt-jobs" for m in by_id["govt-services-officer"].suitability.missing)


def test_rank_careers_sorts_filters_and_cuts(developer_store):
    ranked = rank_careers(DEFAULT_CAREER_PATHS, developer_store.completions())
    assert [r.career.career_id for r in ranked[:4]] == [
        "ai-ml-engineer",
        "full-stack-developer",
        "fintech-architect",  # ties keep catalog order
        "data-scientist",
    ]
    assert [r.score for r in ranked[:4]] == [80, 70, 40, 40]

    top = rank_careers(DEFAULT_CAREER_PATHS, developer_store.completions(), min_score=40, top_n=5)
    assert [r.career.career_id for r in top] == ["ai-ml-engineer", "full-stack-developer"]


def test_top_careers_matches_rank_careers(developer_store):
    completions = developer_store.completions()
    scored = score_all_careers(DEFAULT_CAREER_PATHS, completions)
    assert top_careers(scored, min_score=30, top_n=3) == rank_careers(
        DEFAULT_CAREER_PATHS, completions, min_score=30, top_n=3
    )
    assert [s.score for s in top_careers(scored, min_score=30)] == [80, 70, 40, 40]
    assert top_careers([], min_score=0, top_n=5) == []
