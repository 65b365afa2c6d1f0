"""
Compliance verification against the Australian regulatory frameworks.

Practice data is a flat mapping of flags keyed by requirement id:
``implemented_<id>``, ``evidence_<id>``, ``not_applicable_<id>`` and
``notes_<id>``.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from practicehealth.core.enums import ComplianceState, Country, FrameworkType, RiskLevel
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import (
    ActionPlanItem,
    ComplianceDashboard,
    ComplianceFramework,
    ComplianceRequirement,
    ComplianceStatus,
    UpcomingReview,
)
from practicehealth.data.compliance_requirements import (
    COMPLIANCE_FRAMEWORKS,
    COMPLIANCE_REQUIREMENTS,
)
from practicehealth.utils.dates import next_review_date

logger = logging.getLogger(__name__)

REVIEW_WINDOW_DAYS = 30
UNKNOWN_TITLE = "Unknown Requirement"

# (risk level, state) -> rank; lower is more urgent
ACTION_PRIORITY = {
    (RiskLevel.HIGH, ComplianceState.NON_COMPLIANT): 1,
    (RiskLevel.HIGH, ComplianceState.PARTIALLY_COMPLIANT): 2,
    (RiskLevel.MEDIUM, ComplianceState.NON_COMPLIANT): 3,
    (RiskLevel.MEDIUM, ComplianceState.PARTIALLY_COMPLIANT): 4,
    (RiskLevel.LOW, ComplianceState.NON_COMPLIANT): 5,
    (RiskLevel.LOW, ComplianceState.PARTIALLY_COMPLIANT): 6,
}

_CREDIT = {
    ComplianceState.COMPLIANT: 1.0,
    ComplianceState.PARTIALLY_COMPLIANT: 0.5,
    ComplianceState.NON_COMPLIANT: 0.0,
}


def _flag(practice_data: Mapping, key: str) -> bool:
    return bool(practice_data.get(key))


def _percentage(credits: pd.Series) -> float:
    if credits.empty:
        return 0.0
    return round(float(credits.mean()) * 100, 2)


class ComplianceVerificationSystem:
    def __init__(
        self,
        requirements: Optional[Sequence[ComplianceRequirement]] = None,
        frameworks: Optional[Sequence[ComplianceFramework]] = None,
    ):
        self.requirements = tuple(requirements) if requirements is not None else COMPLIANCE_REQUIREMENTS
        self.frameworks = tuple(frameworks) if frameworks is not None else COMPLIANCE_FRAMEWORKS

    # -------------------------------------------------
    # LOOKUPS
    # -------------------------------------------------
    def _index(self, requirements: Optional[Sequence[ComplianceRequirement]]) -> Dict[str, ComplianceRequirement]:
        return {r.id: r for r in (requirements if requirements is not None else self.requirements)}

    def get_requirement(self, requirement_id: str) -> ComplianceRequirement:
        for requirement in self.requirements:
            if requirement.id == requirement_id:
                return requirement
        raise NotFoundError("Requirement", requirement_id)

    def get_applicable_frameworks(self, discipline=None, size=None, country=Country.AUSTRALIA) -> List[ComplianceFramework]:
        # Frameworks apply by country only; discipline and size do not narrow them.
        try:
            country = Country.parse(country)
        except ValueError:
            return []
        return [f for f in self.frameworks if country in f.applicable_countries]

    def get_high_priority_requirements(
        self, requirements: Optional[Sequence[ComplianceRequirement]] = None
    ) -> List[ComplianceRequirement]:
        pool = requirements if requirements is not None else self.requirements
        return [r for r in pool if r.risk_level == RiskLevel.HIGH]

    # -------------------------------------------------
    # EVALUATION
    # -------------------------------------------------
    def evaluate(
        self,
        practice_data: Mapping,
        requirements: Optional[Sequence[ComplianceRequirement]] = None,
        now: Optional[datetime] = None,
    ) -> List[ComplianceStatus]:
        practice_data = practice_data or {}
        now = now or datetime.now()
        pool = requirements if requirements is not None else self.requirements

        statuses = []
        for requirement in pool:
            rid = requirement.id
            implemented = _flag(practice_data, f"implemented_{rid}")
            evidenced = _flag(practice_data, f"evidence_{rid}")

            if implemented and evidenced:
                state = ComplianceState.COMPLIANT
            elif implemented:
                state = ComplianceState.PARTIALLY_COMPLIANT
            elif _flag(practice_data, f"not_applicable_{rid}"):
                state = ComplianceState.NOT_APPLICABLE
            else:
                state = ComplianceState.NON_COMPLIANT

            evidence = practice_data.get(f"evidence_{rid}")
            notes = practice_data.get(f"notes_{rid}")

            statuses.append(
                ComplianceStatus(
                    requirement_id=rid,
                    status=state,
                    last_reviewed=now,
                    next_review_date=next_review_date(requirement.review_frequency, now),
                    evidence=str(evidence) if evidence else None,
                    notes=str(notes) if notes else None,
                    action_items=(
                        requirement.implementation_steps
                        if state == ComplianceState.NON_COMPLIANT
                        else ()
                    ),
                )
            )

        logger.debug("Evaluated %d compliance requirements", len(statuses))
        return statuses

    # -------------------------------------------------
    # ACTION PLAN
    # -------------------------------------------------
    def generate_action_plan(
        self,
        statuses: Sequence[ComplianceStatus],
        requirements: Optional[Sequence[ComplianceRequirement]] = None,
    ) -> List[ActionPlanItem]:
        index = self._index(requirements)
        plan = []

        for status in statuses:
            if status.status not in (ComplianceState.NON_COMPLIANT, ComplianceState.PARTIALLY_COMPLIANT):
                continue
            requirement = index.get(status.requirement_id)
            if requirement is None:
                logger.warning("Skipping unknown requirement %s in action plan", status.requirement_id)
                continue

            plan.append(
                ActionPlanItem(
                    requirement_id=requirement.id,
                    title=requirement.title,
                    risk_level=requirement.risk_level,
                    status=status.status,
                    priority=ACTION_PRIORITY[(requirement.risk_level, status.status)],
                    steps=requirement.implementation_steps,
                )
            )

        plan.sort(key=lambda item: item.priority)
        return plan

    # -------------------------------------------------
    # DASHBOARD
    # -------------------------------------------------
    def generate_dashboard_data(
        self,
        statuses: Sequence[ComplianceStatus],
        requirements: Optional[Sequence[ComplianceRequirement]] = None,
        now: Optional[datetime] = None,
    ) -> ComplianceDashboard:
        """
        Compliance percentages and upcoming reviews.

        Percentages credit compliant items fully and partial items by half,
        over applicable items only. Not-applicable items are left out of
        both numerator and denominator.
        """
        index = self._index(requirements)
        now = now or datetime.now()

        rows = []
        for status in statuses:
            if status.status == ComplianceState.NOT_APPLICABLE:
                continue
            requirement = index.get(status.requirement_id)
            rows.append({
                "requirement_id": status.requirement_id,
                "framework": requirement.framework if requirement else None,
                "risk_level": requirement.risk_level if requirement else None,
                "credit": _CREDIT[status.status],
            })

        df = pd.DataFrame(rows, columns=["requirement_id", "framework", "risk_level", "credit"])

        overall = _percentage(df["credit"])
        by_framework = {
            FrameworkType.parse(key): _percentage(group["credit"])
            for key, group in df.dropna(subset=["framework"]).groupby("framework", sort=False)
        }
        by_risk = {
            RiskLevel.parse(key): _percentage(group["credit"])
            for key, group in df.dropna(subset=["risk_level"]).groupby("risk_level", sort=False)
        }

        horizon = now + timedelta(days=REVIEW_WINDOW_DAYS)
        upcoming = [
            UpcomingReview(
                requirement_id=s.requirement_id,
                title=index[s.requirement_id].title if s.requirement_id in index else UNKNOWN_TITLE,
                due_date=s.next_review_date,
            )
            for s in statuses
            if now <= s.next_review_date <= horizon
        ]
        upcoming.sort(key=lambda r: r.due_date)

        return ComplianceDashboard(
            overall_compliance=overall,
            by_framework=by_framework,
            by_risk_level=by_risk,
            upcoming_reviews=tuple(upcoming),
        )
