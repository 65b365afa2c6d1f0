import pytest

from practicehealth.core.scoring import BusinessHealthScoreCalculator
from practicehealth.database import AssessmentStore


@pytest.fixture
def store(tmp_path):
    return AssessmentStore(tmp_path / "db" / "assessments.db")


def test_unknown_user_is_not_started(store):
    assert store.load_practice("nobody") is None
    assert store.load_responses("nobody") is None
    assert store.latest_result("nobody", "health_score") is None


def test_practice_round_trip_and_overwrite(store):
    store.save_practice("u1", {"name": "Harbour Physio", "size": "SMALL"})
    store.save_practice("u1", {"name": "Harbour Physio", "size": "MEDIUM"})

    assert store.load_practice("u1") == {"name": "Harbour Physio", "size": "MEDIUM"}


def test_latest_responses_win(store):
    store.save_responses("u1", {"fin_1": 2})
    store.save_responses("u1", {"fin_1": 4, "ops_1": True})
    store.save_responses("u2", {"fin_1": 1})

    assert store.load_responses("u1") == {"fin_1": 4, "ops_1": True}


def test_results_are_stored_by_kind(store, sample_responses):
    score = BusinessHealthScoreCalculator().calculate_score(sample_responses)
    store.save_result("u1", "health_score", score)

    saved = store.latest_result("u1", "health_score")
    assert saved["overall"] == score.overall
    assert saved["position"] == score.position.value
    assert store.latest_result("u1", "financial") is None


def test_unknown_result_kind_rejected(store):
    with pytest.raises(ValueError):
        store.save_result("u1", "horoscope", {})
