from datetime import datetime, timedelta

import pytest

from practicehealth.compliance import ComplianceVerificationSystem
from practicehealth.core.enums import (
    ComplianceState,
    FrameworkType,
    ReviewFrequency,
    RiskLevel,
)
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import ComplianceRequirement, ComplianceStatus


NOW = datetime(2025, 2, 1, 12, 0)


def _requirement(rid, risk=RiskLevel.HIGH, framework=FrameworkType.PRIVACY,
                 frequency=ReviewFrequency.ANNUALLY):
    return ComplianceRequirement(
        id=rid,
        title=f"Requirement {rid}",
        description="",
        framework=framework,
        authority="OAIC",
        risk_level=risk,
        verification_methods=("Document review",),
        implementation_steps=(f"Implement {rid}", f"Record evidence for {rid}"),
        review_frequency=frequency,
    )


@pytest.fixture
def system():
    return ComplianceVerificationSystem()


# -------------------------------------------------
# EVALUATION
# -------------------------------------------------
def test_evaluation_rules(system):
    reqs = [_requirement(r) for r in ("a", "b", "c", "d")]
    data = {
        "implemented_a": True, "evidence_a": "Policy v2",
        "implemented_b": True,
        "not_applicable_c": True,
        "notes_d": "Waiting on vendor",
    }
    statuses = {s.requirement_id: s for s in system.evaluate(data, reqs, now=NOW)}

    assert statuses["a"].status == ComplianceState.COMPLIANT
    assert statuses["a"].evidence == "Policy v2"
    assert statuses["b"].status == ComplianceState.PARTIALLY_COMPLIANT
    assert statuses["c"].status == ComplianceState.NOT_APPLICABLE
    assert statuses["d"].status == ComplianceState.NON_COMPLIANT
    assert statuses["d"].notes == "Waiting on vendor"


def test_only_non_compliant_items_carry_action_items(system):
    reqs = [_requirement("a"), _requirement("b")]
    statuses = system.evaluate({"implemented_a": True}, reqs, now=NOW)

    assert statuses[0].action_items == ()
    assert statuses[1].action_items == ("Implement b", "Record evidence for b")


def test_next_review_follows_frequency(system):
    reqs = [
        _requirement("m", frequency=ReviewFrequency.MONTHLY),
        _requirement("y", frequency=ReviewFrequency.ANNUALLY),
    ]
    monthly, yearly = system.evaluate({}, reqs, now=NOW)

    assert monthly.last_reviewed == NOW
    assert monthly.next_review_date == datetime(2025, 3, 1, 12, 0)
    assert yearly.next_review_date == datetime(2026, 2, 1, 12, 0)


def test_empty_practice_data_is_all_non_compliant(system):
    statuses = system.evaluate({}, now=NOW)
    assert statuses
    assert all(s.status == ComplianceState.NON_COMPLIANT for s in statuses)


# -------------------------------------------------
# DASHBOARD
# -------------------------------------------------
def test_overall_compliance_percentage(system):
    reqs = [_requirement(f"r{i}") for i in range(8)]
    data = {}
    for i in range(4):
        data[f"implemented_r{i}"] = True
        data[f"evidence_r{i}"] = True
    data["implemented_r4"] = True
    data["implemented_r5"] = True
    data["not_applicable_r6"] = True

    statuses = system.evaluate(data, reqs, now=NOW)
    dashboard = system.generate_dashboard_data(statuses, reqs, now=NOW)

    assert dashboard.overall_compliance == 71.43


def test_percentages_by_framework_and_risk(system):
    reqs = [
        _requirement("p1", RiskLevel.HIGH, FrameworkType.PRIVACY),
        _requirement("p2", RiskLevel.LOW, FrameworkType.PRIVACY),
        _requirement("n1", RiskLevel.HIGH, FrameworkType.NDIS),
    ]
    data = {"implemented_p1": True, "evidence_p1": True, "implemented_n1": True}

    dashboard = system.generate_dashboard_data(system.evaluate(data, reqs, now=NOW), reqs, now=NOW)

    assert dashboard.by_framework[FrameworkType.PRIVACY] == 50.0
    assert dashboard.by_framework[FrameworkType.NDIS] == 50.0
    assert dashboard.by_risk_level[RiskLevel.HIGH] == 75.0
    assert dashboard.by_risk_level[RiskLevel.LOW] == 0.0


def test_nothing_applicable_is_zero_percent(system):
    reqs = [_requirement("x")]
    statuses = system.evaluate({"not_applicable_x": True}, reqs, now=NOW)
    dashboard = system.generate_dashboard_data(statuses, reqs, now=NOW)

    assert dashboard.overall_compliance == 0
    assert dashboard.by_framework == {}


def test_upcoming_reviews_window(system):
    reqs = [
        _requirement("m", frequency=ReviewFrequency.MONTHLY),
        _requirement("q", frequency=ReviewFrequency.QUARTERLY),
    ]
    statuses = system.evaluate({}, reqs, now=NOW)
    statuses.append(
        ComplianceStatus(
            requirement_id="ghost",
            status=ComplianceState.NON_COMPLIANT,
            last_reviewed=NOW,
            next_review_date=NOW + timedelta(days=3),
        )
    )
    dashboard = system.generate_dashboard_data(statuses, reqs, now=NOW)

    assert [r.requirement_id for r in dashboard.upcoming_reviews] == ["ghost", "m"]
    assert dashboard.upcoming_reviews[0].title == "Unknown Requirement"


# -------------------------------------------------
# ACTION PLAN
# -------------------------------------------------
def test_action_plan_priority_order(system):
    reqs = [
        _requirement("med-nc", RiskLevel.MEDIUM),
        _requirement("high-p", RiskLevel.HIGH),
        _requirement("high-nc", RiskLevel.HIGH),
        _requirement("ok", RiskLevel.HIGH),
    ]
    data = {"implemented_high-p": True, "implemented_ok": True, "evidence_ok": True}

    plan = system.generate_action_plan(system.evaluate(data, reqs, now=NOW), reqs)

    assert [(i.requirement_id, i.priority) for i in plan] == [
        ("high-nc", 1),
        ("high-p", 2),
        ("med-nc", 3),
    ]
    assert plan[0].steps == ("Implement high-nc", "Record evidence for high-nc")


# -------------------------------------------------
# LOOKUPS
# -------------------------------------------------
def test_get_requirement(system):
    assert system.get_requirement("wc-001").framework == FrameworkType.WORKCOVER
    with pytest.raises(NotFoundError, match="Requirement with ID nope not found"):
        system.get_requirement("nope")


def test_applicable_frameworks_by_country(system):
    assert len(system.get_applicable_frameworks("PHYSIOTHERAPY", "SMALL", "AUSTRALIA")) == 6
    assert system.get_applicable_frameworks("PHYSIOTHERAPY", "SMALL", "NEW_ZEALAND") == []


def test_high_priority_requirements(system):
    high = system.get_high_priority_requirements()
    assert high
    assert all(r.risk_level == RiskLevel.HIGH for r in high)
