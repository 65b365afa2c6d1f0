import pytest

from practicehealth.core.financial import FinancialAssessmentCalculator, summarize_gaps


BENCHMARK_ANSWERS = {
    "revenuePerProvider": 250000,
    "revenuePerHour": 150,
    "utilizationRate": 85,
    "laborCostPercentage": 55,
    "rentCostPercentage": 8,
    "operatingExpensesPercentage": 25,
    "profitMargin": 15,
    "ownerCompensation": 20,
    "collectionRate": 95,
    "daysInAR": 30,
    "noShowRate": 5,
    "annualProfit": 100000,
}


@pytest.fixture
def calc():
    return FinancialAssessmentCalculator()


def _scores(result):
    return {c.category: c.score for c in result.category_scores}


def test_benchmark_practice_scores_full_marks_outside_pricing(calc):
    result = calc.calculate_financial_health(BENCHMARK_ANSWERS, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    scores = _scores(result)

    assert scores["Revenue Generation"] == pytest.approx(100)
    assert scores["Expense Management"] == pytest.approx(100)
    assert scores["Billing Efficiency"] == pytest.approx(100)
    assert scores["Profitability"] == pytest.approx(100)


def test_sub_scores_are_clamped(calc):
    extreme = dict(BENCHMARK_ANSWERS, revenuePerProvider=10_000_000, daysInAR=500, rentCostPercentage=90)
    result = calc.calculate_financial_health(extreme, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")

    assert all(0 <= c.score <= 100 for c in result.category_scores)
    assert 0 <= result.overall_score <= 100


def test_missing_answers_score_low_but_do_not_fail(calc):
    result = calc.calculate_financial_health({}, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")

    assert result.overall_score < 50
    assert result.projections.current == 0
    assert result.projections.potential == 0


def test_overall_score_rounded_to_one_decimal(calc):
    result = calc.calculate_financial_health({"revenuePerHour": 77}, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    assert result.overall_score == round(result.overall_score, 1)


def test_comparisons_only_for_matched_benchmarks(calc):
    physio = calc.calculate_financial_health(BENCHMARK_ANSWERS, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    podiatry = calc.calculate_financial_health(BENCHMARK_ANSWERS, "PODIATRY", "SMALL", "AUSTRALIA")

    assert len(physio.benchmark_comparisons) == 10
    assert podiatry.benchmark_comparisons == ()


def test_lower_is_better_percentile(calc):
    answers = dict(BENCHMARK_ANSWERS, daysInAR=60, noShowRate=0)
    result = calc.calculate_financial_health(answers, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    rows = {r.metric: r for r in result.benchmark_comparisons}

    assert rows["Days in AR"].percentile == pytest.approx(50)
    assert rows["No-Show Rate"].percentile == 100


def test_projection_grows_with_gap(calc):
    weak = dict(BENCHMARK_ANSWERS, collectionRate=60, daysInAR=70, profitMargin=5)
    result = calc.calculate_financial_health(weak, "PHYSIOTHERAPY", "MEDIUM", "AUSTRALIA")

    assert result.projections.potential > result.projections.current
    assert result.projections.improvement == pytest.approx(
        result.projections.potential - result.projections.current
    )
    assert result.projections.timeframe == "12-18 months"


def test_recommendations_end_with_general_advice(calc):
    result = calc.calculate_financial_health({}, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    assert result.recommendations[-1] == "Consider engaging a healthcare financial consultant for detailed analysis"
    assert len(result.recommendations) > 3


def test_summarize_gaps_largest_first(calc):
    result = calc.calculate_financial_health({}, "PHYSIOTHERAPY", "SMALL", "AUSTRALIA")
    gaps = [gap for _, gap in summarize_gaps(result)]
    assert gaps == sorted(gaps, reverse=True)


def test_to_dict_includes_gap(calc):
    data = calc.calculate_financial_health(BENCHMARK_ANSWERS).to_dict()
    first = data["category_scores"][0]
    assert first["gap"] == pytest.approx(first["benchmark"] - first["score"])


@pytest.mark.parametrize("country", ["Canada", "NZ", None])
def test_unknown_country_falls_back_to_default_benchmarks(calc, country):
    result = calc.calculate_financial_health(BENCHMARK_ANSWERS, "PHYSIOTHERAPY", "SMALL", country)

    assert result.benchmark_comparisons == ()
    assert _scores(result)["Revenue Generation"] == pytest.approx(100)
    assert _scores(result)["Billing Efficiency"] == pytest.approx(100)
