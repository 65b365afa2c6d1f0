from datetime import datetime

import pytest
import yaml

from practicehealth.core.enums import Category
from practicehealth.core.models import Benchmarks, BusinessHealthScore, CategoryScore
from practicehealth.core.scoring import determine_position


FIXED_NOW = datetime(2025, 1, 31, 9, 30)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock():
    """Deterministic clock for engines that stamp dates."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_health_score():
    """
    Build a BusinessHealthScore straight from category scores,
    bypassing response scoring.
    """
    def _make(scores):
        categories = tuple(
            CategoryScore(
                category=Category.parse(key),
                score=value,
                position=determine_position(value),
            )
            for key, value in scores.items()
        )
        overall = round(sum(scores.values()) / len(scores)) if scores else 0
        return BusinessHealthScore(
            overall=overall,
            position=determine_position(overall),
            categories=categories,
            benchmarks=Benchmarks(industry=68, similar_size=68, top_performers=88),
        )

    return _make


@pytest.fixture
def sample_responses():
    """Deterministic responses covering several categories and topics."""
    return {
        "FINANCIAL": [
            {"question_id": "fin_pricing_review", "value": 5},
            {"question_id": "fin_fee_schedule", "value": 4},
            {"question_id": "fin_billing_process", "value": 1},
            {"question_id": "fin_claim_followup", "value": False},
        ],
        "OPERATIONS": [
            {"question_id": "ops_scheduling_system", "value": 4},
            {"question_id": "ops_workflow_documented", "value": True},
            {"question_id": "ops_quality_audit", "value": 2},
        ],
        "COMPLIANCE": [
            {"question_id": "comp_privacy_policy", "value": True},
            {"question_id": "comp_audit_schedule", "value": 3},
        ],
    }


@pytest.fixture
def submission_file(tmp_path, sample_responses):
    data = {
        "user_id": "clinic-001",
        "practice": {
            "name": "Harbour Physio",
            "discipline": "PHYSIOTHERAPY",
            "size": "SMALL",
            "country": "AUSTRALIA",
            "region": "AU-NSW",
        },
        "responses": sample_responses,
        "financial": {
            "revenuePerProvider": 200000,
            "revenuePerHour": 120,
            "utilizationRate": 75,
            "laborCostPercentage": 60,
            "rentCostPercentage": 10,
            "operatingExpensesPercentage": 28,
            "profitMargin": 12,
            "ownerCompensation": 15,
            "collectionRate": 90,
            "daysInAR": 40,
            "noShowRate": 8,
            "annualProfit": 80000,
        },
        "compliance": {
            "implemented_wc-001": True,
            "evidence_wc-001": "Registration certificate on file",
        },
    }
    path = tmp_path / "clinic-001.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture
def test_config(tmp_path):
    """Config with charts off and outputs inside tmp_path."""
    return {
        "practice": {
            "name": None,
            "discipline": "PHYSIOTHERAPY",
            "size": "SMALL",
            "country": "AUSTRALIA",
            "region": None,
        },
        "report": {"title": "Practice Health Assessment", "top_n": 5, "include_compliance": True},
        "sop": {"format": "markdown"},
        "batch": {"retries": 1, "delay": 0, "patterns": [".yaml", ".yml", ".json"]},
        "output_dir": str(tmp_path / "runs"),
        "database": str(tmp_path / "runs" / "assessments.db"),
        "export_html": False,
        "export_pdf": False,
        "charts": False,
        "metadata": {},
    }
