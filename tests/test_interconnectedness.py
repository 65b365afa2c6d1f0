import pytest

from practicehealth.core.enums import Category, ImpactDirection, PracticeSize
from practicehealth.core.interconnectedness import (
    InterconnectednessAnalyzer,
    adjust_base_strength,
    alignment_term,
    confidence_factor,
    generate_visualization_data,
    impact_direction,
    strength_matrix,
)
from practicehealth.core.models import QuestionResponse
from practicehealth.data import BASE_CONNECTIONS


def _responses(value, count):
    return [QuestionResponse(question_id=f"q{i}", value=value) for i in range(count)]


# -------------------------------------------------
# EDGE RULES
# -------------------------------------------------
@pytest.mark.parametrize("base", [0.0, 0.3, 0.5, 0.9, 1.0])
@pytest.mark.parametrize("offset", [-2.0, -0.2, 0.0, 0.1, 1.5])
def test_adjusted_strength_is_clamped(base, offset):
    value = adjust_base_strength(base, offset)
    assert 0.0 <= value <= 1.0


def test_confidence_factor_bands():
    assert confidence_factor(0, 12) == 0.5
    assert confidence_factor(2, 12) == 0.8
    assert confidence_factor(5, 5) == 1.0
    assert confidence_factor(10, 10) == 1.05


def test_alignment_term_range():
    assert alignment_term(70, 70) == pytest.approx(0.05)
    assert alignment_term(0, 100) == pytest.approx(-0.05)
    assert alignment_term(40, 90) == pytest.approx(0.0)


def test_impact_direction_from_source_score():
    assert impact_direction([], _responses(1, 3)) == ImpactDirection.POSITIVE
    assert impact_direction(_responses(5, 3), _responses(1, 3)) == ImpactDirection.POSITIVE
    assert impact_direction(_responses(1, 3), _responses(5, 3)) == ImpactDirection.NEGATIVE
    # 3 of 5 -> 60
    assert impact_direction(_responses(3, 3), _responses(5, 3)) == ImpactDirection.NEUTRAL


# -------------------------------------------------
# ANALYZER
# -------------------------------------------------
def test_one_connection_per_declared_edge_and_no_self_loops(sample_responses):
    analysis = InterconnectednessAnalyzer().analyze(sample_responses, size="SMALL")

    expected = sum(len(targets) for targets in BASE_CONNECTIONS.values())
    assert len(analysis.connections) == expected
    assert all(c.source != c.target for c in analysis.connections)


def test_connections_sorted_strongest_first(sample_responses):
    analysis = InterconnectednessAnalyzer().analyze(sample_responses, size="MEDIUM")
    strengths = [c.strength for c in analysis.connections]

    assert strengths == sorted(strengths, reverse=True)
    assert all(0.0 <= s <= 1.0 for s in strengths)


def test_analysis_is_deterministic(sample_responses):
    analyzer = InterconnectednessAnalyzer()
    first = analyzer.analyze(sample_responses, size=PracticeSize.SMALL)
    second = analyzer.analyze(sample_responses, size=PracticeSize.SMALL)
    assert first == second


def test_without_responses_every_edge_is_halved():
    analysis = InterconnectednessAnalyzer().analyze({}, size="LARGE")

    assert all(c.strength <= 0.5 for c in analysis.connections)
    assert all(c.impact_direction == ImpactDirection.POSITIVE for c in analysis.connections)
    # nothing crosses the "strong" line, so no edge list in the insights
    assert not any(line.startswith("- ") for line in analysis.key_insights)


def test_insights_name_top_categories_and_size(sample_responses):
    analysis = InterconnectednessAnalyzer().analyze(sample_responses, size="SOLO")

    assert analysis.key_insights[0].startswith(analysis.most_influential.label)
    assert analysis.key_insights[1].startswith(analysis.most_dependent.label)
    assert any("solo practice" in line for line in analysis.key_insights)


def test_strength_matrix_covers_all_categories(sample_responses):
    analysis = InterconnectednessAnalyzer().analyze(sample_responses)
    matrix = strength_matrix(analysis.connections)

    assert matrix.shape == (len(Category), len(Category))
    assert matrix.loc["FINANCIAL", "FINANCIAL"] == 0.0
    assert matrix.loc["FINANCIAL", "GEOGRAPHY"] == 0.0


def test_visualization_data(sample_responses):
    analysis = InterconnectednessAnalyzer().analyze(sample_responses)
    data = generate_visualization_data(analysis)

    assert len(data["nodes"]) == len(Category)
    assert len(data["links"]) == len(analysis.connections)

    first = data["links"][0]
    assert first["value"] == pytest.approx(analysis.connections[0].strength * 10)
