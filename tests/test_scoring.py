import pytest

from practicehealth.core.enums import Category, ScorePosition
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import CategoryScore, QuestionResponse
from practicehealth.core.scoring import (
    BusinessHealthScoreCalculator,
    calculate_category_score,
    determine_position,
    get_benchmark,
    get_benchmarks,
    get_category_metrics,
    get_geographic_adjustment,
    identify_strengths_and_weaknesses,
    response_points,
)


def _responses(*pairs):
    return [QuestionResponse(question_id=q, value=v) for q, v in pairs]


def _category(category, score):
    return CategoryScore(category=category, score=score, position=determine_position(score))


# -------------------------------------------------
# OVERALL SCORE
# -------------------------------------------------
def test_overall_score_normalises_by_present_weights():
    overall = BusinessHealthScoreCalculator.calculate_overall_score([
        _category(Category.FINANCIAL, 80),
        _category(Category.OPERATIONS, 60),
    ])
    assert overall == 71


def test_overall_score_is_zero_without_categories():
    assert BusinessHealthScoreCalculator.calculate_overall_score([]) == 0


def test_empty_assessment_scores_critical():
    result = BusinessHealthScoreCalculator().calculate_score({})
    assert result.overall == 0
    assert result.position == ScorePosition.CRITICAL
    assert result.categories == ()


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, ScorePosition.EXCEPTIONAL),
        (85, ScorePosition.EXCEPTIONAL),
        (84, ScorePosition.STRONG),
        (75, ScorePosition.STRONG),
        (74, ScorePosition.STABLE),
        (65, ScorePosition.STABLE),
        (64, ScorePosition.CONCERNING),
        (50, ScorePosition.CONCERNING),
        (49, ScorePosition.CRITICAL),
        (0, ScorePosition.CRITICAL),
    ],
)
def test_position_thresholds_are_inclusive(score, expected):
    assert determine_position(score) == expected


# -------------------------------------------------
# RESPONSE POINTS
# -------------------------------------------------
def test_response_points_by_type():
    assert response_points(True) == (5.0, 5.0)
    assert response_points(False) == (0.0, 5.0)
    assert response_points(3) == (3.0, 5.0)
    assert response_points(["a", "b"]) == (4.0, 10.0)
    assert response_points("sometimes") == (3.0, 5.0)


def test_numeric_responses_are_clamped():
    assert response_points(9) == (5.0, 5.0)
    assert response_points(-2) == (0.0, 5.0)


def test_category_score_rounds_half_up():
    # 5 of 40 points = 12.5 -> 13
    responses = _responses(("a", 5), ("b", 0), ("c", 0), ("d", 0), ("e", 0), ("f", 0), ("g", 0), ("h", 0))
    assert calculate_category_score(responses) == 13


def test_category_score_without_responses_is_zero():
    assert calculate_category_score([]) == 0


def test_calculator_scores_categories_in_first_seen_order(sample_responses):
    result = BusinessHealthScoreCalculator().calculate_score(sample_responses)

    assert [c.category for c in result.categories] == [
        Category.FINANCIAL,
        Category.OPERATIONS,
        Category.COMPLIANCE,
    ]
    # financial: 5 + 4 + 1 + 0 of 20
    assert result.category_score(Category.FINANCIAL).score == 50
    assert result.category_score(Category.MARKETING) is None


def test_identical_responses_score_identically(sample_responses):
    calc = BusinessHealthScoreCalculator()
    assert calc.calculate_score(sample_responses) == calc.calculate_score(sample_responses)


# -------------------------------------------------
# STRENGTHS & WEAKNESSES
# -------------------------------------------------
def test_strengths_and_weaknesses_come_from_topics():
    responses = _responses(
        ("pricing_review", 5),
        ("fee_schedule", 5),
        ("billing_process", 1),
    )
    strengths, weaknesses = identify_strengths_and_weaknesses(Category.FINANCIAL, responses)

    assert strengths == ("Revenue & Pricing",)
    assert weaknesses == ("Billing & Collections",)


def test_untagged_responses_give_no_topics():
    strengths, weaknesses = identify_strengths_and_weaknesses(
        Category.FINANCIAL, _responses(("q1", 5), ("q2", 1))
    )
    assert strengths == ()
    assert weaknesses == ()


# -------------------------------------------------
# BENCHMARKS
# -------------------------------------------------
def test_benchmarks_for_small_physio_practice():
    b = get_benchmarks("PHYSIOTHERAPY", "SMALL")
    assert b.industry == 68
    assert b.similar_size == b.industry
    assert b.top_performers == 88


def test_unknown_discipline_falls_back_to_physiotherapy():
    assert get_benchmarks("ACUPUNCTURE", "MEDIUM") == get_benchmarks("PHYSIOTHERAPY", "MEDIUM")


def test_geographic_adjustment_is_case_sensitive():
    assert get_geographic_adjustment("AU-VIC").adjustment_factor == -0.025
    assert get_geographic_adjustment("au-vic").adjustment_factor == -0.01


def test_category_metrics_follow_practice_size():
    solo = get_category_metrics(Category.FINANCIAL, "SOLO")
    large = get_category_metrics(Category.FINANCIAL, "LARGE")
    assert solo[0]["metric"] == "Operating Profit Margin"
    assert solo[0]["benchmark"] == 25
    assert large[0]["benchmark"] == 15


def test_named_benchmark_lookup():
    row = get_benchmark("FINANCIAL", "collection rate")
    assert row["benchmark"] == 95
    assert row["unit"] == "%"


def test_missing_named_benchmark_raises():
    with pytest.raises(NotFoundError):
        get_benchmark("FINANCIAL", "Unicorn Ratio")


def test_response_timestamps_accept_utc_suffix():
    response = QuestionResponse.from_dict(
        {"questionId": "fin_pricing_review", "value": 4, "timestamp": "2025-01-31T09:30:00.000Z"}
    )

    assert response.question_id == "fin_pricing_review"
    assert (response.timestamp.year, response.timestamp.month, response.timestamp.day) == (2025, 1, 31)
    assert response.timestamp.utcoffset().total_seconds() == 0
