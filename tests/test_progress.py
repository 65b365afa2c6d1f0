import pytest

from practicehealth.core.enums import Category, ModuleStatus, Priority
from practicehealth.core.errors import NotFoundError
from practicehealth.core.progress import ProgressTrackingSystem


def _answers(n):
    return [{"question_id": f"fin_pricing_{i}", "value": 4} for i in range(n)]


@pytest.fixture
def tracker(clock):
    return ProgressTrackingSystem(clock=clock)


@pytest.fixture
def started(tracker):
    return tracker.initialize_assessment("user-1", "practice-1", "PHYSIOTHERAPY", "SMALL")


def test_initialize_tracks_relevant_modules(started, fixed_now):
    assert len(started.modules) == 14
    assert started.current_module_id == "fin-pricing"
    assert started.overall_progress == 0
    assert started.started_at == fixed_now
    assert all(s.status == ModuleStatus.NOT_STARTED for s in started.modules)


def test_solo_practices_skip_team_modules(tracker):
    ids = [m.id for m in tracker.get_relevant_modules(size="SOLO")]
    assert "ops-workflow" not in ids
    assert "tech-telehealth" not in ids
    assert len(ids) == 12


def test_partial_update_is_immutable(tracker, started):
    updated = tracker.update_module_progress(started, "fin-pricing", _answers(5))

    state = updated.module_state("fin-pricing")
    assert state.status == ModuleStatus.IN_PROGRESS
    assert state.progress == 50
    assert started.module_state("fin-pricing").status == ModuleStatus.NOT_STARTED
    # 50 over 13 required modules
    assert updated.overall_progress == 4
    assert updated.current_module_id == "fin-pricing"


def test_completing_a_module_advances_current(tracker, started):
    updated = tracker.update_module_progress(started, "fin-pricing", _answers(10), is_complete=True)

    assert updated.module_state("fin-pricing").progress == 100
    assert updated.module_state("fin-pricing").completed_at is not None
    assert updated.current_module_id == "fin-cashflow"


def test_unknown_module_raises(tracker, started):
    with pytest.raises(NotFoundError, match="Module with ID nope not found"):
        tracker.update_module_progress(started, "nope", [])


def test_estimated_completion_time(tracker, started):
    assert tracker.get_estimated_completion_time(started) == 245

    updated = tracker.update_module_progress(started, "fin-pricing", _answers(5))
    # 15 minute module half done -> 8 minutes left
    assert tracker.get_estimated_completion_time(updated) == 238


def test_recommended_modules(tracker, started):
    suggestions = tracker.get_recommended_modules(started)

    assert [(s.module.id, s.priority) for s in suggestions] == [
        ("fin-pricing", Priority.HIGH),
        ("fin-cashflow", Priority.MEDIUM),
        ("fin-revenue", Priority.MEDIUM),
        ("fin-billing", Priority.MEDIUM),
        ("tech-telehealth", Priority.LOW),
    ]


def test_category_completion_stats(tracker, started):
    updated = tracker.update_module_progress(started, "fin-pricing", _answers(10), is_complete=True)
    stats = tracker.get_category_completion_stats(updated)

    assert stats[Category.FINANCIAL].completed == 1
    assert stats[Category.FINANCIAL].total == 5
    assert stats[Category.FINANCIAL].percentage == 20
    assert stats[Category.MARKETING].total == 0
    assert stats[Category.MARKETING].percentage == 0


def test_tracked_responses_feed_the_score_calculator(tracker, started):
    updated = tracker.update_module_progress(started, "fin-pricing", _answers(5))
    progress = tracker.to_assessment_progress(updated)

    assert [m.module_id for m in progress.modules] == ["fin-pricing"]
    assert progress.modules[0].category == Category.FINANCIAL
    assert len(progress.responses_by_category()[Category.FINANCIAL]) == 5
