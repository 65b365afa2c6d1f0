"""
Financial assessment.

Scores the practice's financial answers against fee schedules and
discipline/country benchmarks. Missing answers count as zero so a partial
questionnaire still yields a (lower) score.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from practicehealth.core.enums import Country, DisciplineType, PracticeSize, ServiceType
from practicehealth.core.models import (
    BenchmarkComparison,
    FinancialAssessmentResult,
    FinancialCategoryScore,
    FinancialProjection,
)
from practicehealth.core.scoring import parse_country, parse_discipline, parse_size
from practicehealth.data.fee_schedules import (
    DEFAULT_FINANCIAL_BENCHMARKS,
    FINANCIAL_BENCHMARKS,
    WORKCOVER_FEES,
    average_fee,
)

logger = logging.getLogger(__name__)

# Private fees are expected to sit about 15% above the WorkCover average.
PRIVATE_FEE_PREMIUM = 1.15
FEE_TOLERANCE = 0.1

OVERALL_WEIGHTS = {
    "revenue": 0.25,
    "expense": 0.2,
    "billing": 0.2,
    "pricing": 0.15,
    "profitability": 0.2,
}

REVENUE = "Revenue Generation"
EXPENSE = "Expense Management"
BILLING = "Billing Efficiency"
PRICING = "Pricing Strategy"
PROFITABILITY = "Profitability"

CATEGORY_BENCHMARKS = (
    ("revenue", REVENUE, 85),
    ("expense", EXPENSE, 80),
    ("billing", BILLING, 90),
    ("pricing", PRICING, 75),
    ("profitability", PROFITABILITY, 85),
)

PROGRAMMES = (
    "participatesInWorkCover",
    "participatesInDVA",
    "participatesInNDIS",
    "participatesInPrivateHealth",
    "participatesInMedicare",
)

PROJECTION_TIMEFRAMES = {
    PracticeSize.SOLO: "6-12 months",
    PracticeSize.SMALL: "6-12 months",
    PracticeSize.MEDIUM: "12-18 months",
    PracticeSize.LARGE: "12-24 months",
    PracticeSize.ENTERPRISE: "18-36 months",
}

# answer key, benchmark id, display name, lower-is-better
COMPARISON_METRICS = (
    ("revenuePerProvider", "benchmark-revenue-per-provider", "Revenue per Provider", False),
    ("revenuePerHour", "benchmark-revenue-per-hour", "Revenue per Hour", False),
    ("utilizationRate", "benchmark-utilization-rate", "Provider Utilization Rate", False),
    ("laborCostPercentage", "benchmark-labor-cost", "Labor Cost %", False),
    ("rentCostPercentage", "benchmark-rent-cost", "Rent Cost %", False),
    ("operatingExpensesPercentage", "benchmark-operating-expenses", "Operating Expenses %", False),
    ("profitMargin", "benchmark-profit-margin", "Net Profit Margin", False),
    ("collectionRate", "benchmark-collection-rate", "Collection Rate", False),
    ("daysInAR", "benchmark-days-in-ar", "Days in AR", True),
    ("noShowRate", "benchmark-no-show-rate", "No-Show Rate", True),
)

GENERAL_RECOMMENDATIONS = (
    "Conduct quarterly financial reviews to track progress against benchmarks",
    "Implement a financial dashboard to monitor key performance indicators",
    "Consider engaging a healthcare financial consultant for detailed analysis",
)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _num(answers: Mapping[str, Any], key: str) -> float:
    value = answers.get(key) or 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _ratio_score(value: float, benchmark: float) -> float:
    return min(100.0, value / benchmark * 100)


def _small_practice(size: PracticeSize) -> bool:
    return size in (PracticeSize.SOLO, PracticeSize.SMALL)


def optimal_private_fees() -> Dict[ServiceType, float]:
    return {
        service: average_fee(WORKCOVER_FEES, service) * PRIVATE_FEE_PREMIUM
        for service in (ServiceType.INITIAL, ServiceType.STANDARD, ServiceType.COMPLEX)
    }


class FinancialAssessmentCalculator:
    """Financial sub-scores, recommendations, projections and comparisons."""

    def calculate_financial_health(
        self,
        answers: Mapping[str, Any],
        discipline=DisciplineType.PHYSIOTHERAPY,
        size=PracticeSize.SMALL,
        country=Country.AUSTRALIA,
    ) -> FinancialAssessmentResult:
        answers = answers or {}
        discipline = parse_discipline(discipline)
        size = parse_size(size)
        country = parse_country(country)

        matched = self.applicable_benchmarks(discipline, country)
        values = dict(DEFAULT_FINANCIAL_BENCHMARKS)
        values.update(matched)

        sub_scores = {
            "revenue": self.revenue_score(answers, values),
            "expense": self.expense_score(answers, values),
            "billing": self.billing_score(answers, values),
            "pricing": self.pricing_score(answers),
            "profitability": self.profitability_score(answers, values),
        }

        overall = round(sum(sub_scores[k] * w for k, w in OVERALL_WEIGHTS.items()), 1)

        category_scores = tuple(
            FinancialCategoryScore(category=label, score=sub_scores[key], benchmark=benchmark)
            for key, label, benchmark in CATEGORY_BENCHMARKS
        )

        logger.debug("Financial sub-scores: %s (overall %.1f)", sub_scores, overall)

        return FinancialAssessmentResult(
            overall_score=overall,
            category_scores=category_scores,
            recommendations=tuple(self.recommendations(category_scores, answers, size)),
            projections=self.projections(answers, category_scores, size),
            benchmark_comparisons=tuple(self.benchmark_comparisons(answers, matched)),
        )

    # -------------------------------------------------
    # BENCHMARKS
    # -------------------------------------------------
    @staticmethod
    def applicable_benchmarks(discipline: DisciplineType, country: Country) -> Dict[str, float]:
        return {
            b.id: b.value
            for b in FINANCIAL_BENCHMARKS
            if b.discipline == discipline and b.country == country
        }

    # -------------------------------------------------
    # SUB-SCORES (each clamped to 0..100)
    # -------------------------------------------------
    @staticmethod
    def revenue_score(answers, b) -> float:
        score = (
            _ratio_score(_num(answers, "revenuePerProvider"), b["benchmark-revenue-per-provider"]) * 0.4
            + _ratio_score(_num(answers, "revenuePerHour"), b["benchmark-revenue-per-hour"]) * 0.3
            + _ratio_score(_num(answers, "utilizationRate"), b["benchmark-utilization-rate"]) * 0.3
        )
        return _clamp(score)

    @staticmethod
    def expense_score(answers, b) -> float:
        # closer to benchmark is better in either direction
        labor = _clamp(100 - abs(_num(answers, "laborCostPercentage") - b["benchmark-labor-cost"]) * 2)
        rent = _clamp(100 - abs(_num(answers, "rentCostPercentage") - b["benchmark-rent-cost"]) * 5)
        opex = _clamp(
            100 - abs(_num(answers, "operatingExpensesPercentage") - b["benchmark-operating-expenses"]) * 2
        )
        return _clamp(labor * 0.5 + rent * 0.2 + opex * 0.3)

    @staticmethod
    def billing_score(answers, b) -> float:
        collection = _ratio_score(_num(answers, "collectionRate"), b["benchmark-collection-rate"])

        ar_benchmark = b["benchmark-days-in-ar"]
        no_show_benchmark = b["benchmark-no-show-rate"]
        days_in_ar = _clamp(
            100 - (_num(answers, "daysInAR") - ar_benchmark) / ar_benchmark * 100
        )
        no_show = _clamp(
            100 - (_num(answers, "noShowRate") - no_show_benchmark) / no_show_benchmark * 100
        )
        return _clamp(collection * 0.4 + days_in_ar * 0.4 + no_show * 0.2)

    @staticmethod
    def pricing_score(answers) -> float:
        optimal = optimal_private_fees()
        fees = {
            ServiceType.INITIAL: _num(answers, "privateInitialFee"),
            ServiceType.STANDARD: _num(answers, "privateStandardFee"),
            ServiceType.COMPLEX: _num(answers, "privateComplexFee"),
        }
        parts = [
            _clamp(100 - abs(fees[s] - optimal[s]) / optimal[s] * 100)
            for s in fees
        ]
        structure = sum(parts) / len(parts)

        participation = 20 * sum(1 for key in PROGRAMMES if answers.get(key))
        return _clamp(structure * 0.6 + participation * 0.4)

    @staticmethod
    def profitability_score(answers, b) -> float:
        margin = _ratio_score(_num(answers, "profitMargin"), b["benchmark-profit-margin"])
        owner = _ratio_score(_num(answers, "ownerCompensation"), b["benchmark-owner-compensation"])
        return _clamp(margin * 0.6 + owner * 0.4)

    # -------------------------------------------------
    # RECOMMENDATIONS
    # -------------------------------------------------
    def recommendations(
        self,
        category_scores: Sequence[FinancialCategoryScore],
        answers: Mapping[str, Any],
        size: PracticeSize,
    ) -> List[str]:
        builders = {
            REVENUE: self._revenue_lines,
            EXPENSE: self._expense_lines,
            BILLING: self._billing_lines,
            PRICING: self._pricing_lines,
            PROFITABILITY: self._profitability_lines,
        }

        lines: List[str] = []
        by_gap = sorted(category_scores, key=lambda c: -c.gap)
        for entry in by_gap[:3]:
            if entry.gap <= 0:
                continue
            lines.extend(builders[entry.category](answers, size))

        lines.extend(GENERAL_RECOMMENDATIONS)
        return lines

    @staticmethod
    def _revenue_lines(answers, size) -> List[str]:
        lines = []
        if _num(answers, "utilizationRate") < 80:
            lines += [
                "Implement online booking system to reduce scheduling gaps",
                "Develop a wait list management system for filling cancellations",
                "Optimize provider schedules based on peak demand periods",
            ]
        if _num(answers, "revenuePerHour") < 140:
            lines += [
                "Review service mix to increase proportion of higher-value services",
                "Implement tiered pricing structure based on provider experience",
                "Consider adding specialized services with higher reimbursement rates",
            ]
        if _small_practice(size):
            lines += [
                "Consider expanding operating hours to include early mornings or evenings",
                "Develop referral relationships with complementary healthcare providers",
            ]
        else:
            lines += [
                "Implement productivity incentives for providers",
                "Analyze provider performance data to identify improvement opportunities",
            ]
        return lines

    @staticmethod
    def _expense_lines(answers, size) -> List[str]:
        lines = []
        if _num(answers, "laborCostPercentage") > 60:
            lines += [
                "Review staffing mix and adjust to optimize productivity",
                "Implement scheduling efficiency measures to reduce overtime",
                "Consider performance-based compensation models",
            ]
        if _num(answers, "rentCostPercentage") > 10:
            lines += [
                "Evaluate space utilization and consider downsizing or reconfiguring",
                "Negotiate lease terms at renewal",
                "Consider shared space arrangements for satellite locations",
            ]
        if _num(answers, "operatingExpensesPercentage") > 28:
            lines += [
                "Conduct supplier audit and renegotiate contracts",
                "Implement inventory management system to reduce waste",
                "Review utility usage and implement conservation measures",
            ]
        if _small_practice(size):
            lines += [
                "Consider outsourcing non-clinical functions like billing",
                "Join group purchasing organizations to reduce supply costs",
            ]
        else:
            lines += [
                "Implement centralized purchasing for all locations",
                "Conduct regular expense audits by department",
            ]
        return lines

    @staticmethod
    def _billing_lines(answers, size) -> List[str]:
        lines = []
        if _num(answers, "collectionRate") < 90:
            lines += [
                "Implement time-of-service collections for patient portions",
                "Verify insurance eligibility prior to appointments",
                "Develop clear financial policies and communicate to patients",
            ]
        if _num(answers, "daysInAR") > 35:
            lines += [
                "Submit claims within 48 hours of service",
                "Implement claim scrubbing software to reduce rejections",
                "Follow up on unpaid claims after 30 days",
            ]
        if _num(answers, "noShowRate") > 7:
            lines += [
                "Implement appointment reminder system (SMS, email)",
                "Develop and enforce no-show policy with fees",
                "Analyze no-show patterns and adjust scheduling accordingly",
            ]
        if _small_practice(size):
            lines += [
                "Consider outsourcing billing to specialized medical billing service",
                "Implement electronic payment options for patients",
            ]
        else:
            lines += [
                "Conduct regular billing staff training on program requirements",
                "Implement key performance indicators for billing department",
            ]
        return lines

    @staticmethod
    def _pricing_lines(answers, size) -> List[str]:
        optimal = optimal_private_fees()
        initial = optimal[ServiceType.INITIAL]
        standard = optimal[ServiceType.STANDARD]

        lines = []
        if abs(_num(answers, "privateInitialFee") - initial) / initial > FEE_TOLERANCE:
            lines += [
                f"Adjust initial consultation fee to approximately ${round(initial)} based on market rates",
                "Develop tiered initial assessment options based on complexity",
            ]
        if abs(_num(answers, "privateStandardFee") - standard) / standard > FEE_TOLERANCE:
            lines += [
                f"Adjust standard consultation fee to approximately ${round(standard)} based on market rates",
                "Consider length-based pricing for standard consultations",
            ]

        if not answers.get("participatesInWorkCover"):
            lines.append("Apply for WorkCover provider status to expand revenue streams")
        if not answers.get("participatesInDVA"):
            lines.append("Register as a DVA provider to access veteran patient population")
        if not answers.get("participatesInNDIS"):
            lines.append("Consider NDIS registration to tap into disability sector funding")

        lines += [
            "Conduct annual fee review based on updated fee schedules",
            "Develop package pricing for multiple-session treatment plans",
            "Implement value-based pricing for specialized services",
        ]
        return lines

    @staticmethod
    def _profitability_lines(answers, size) -> List[str]:
        lines = []
        if _num(answers, "profitMargin") < 12:
            lines += [
                "Conduct service line profitability analysis",
                "Implement minimum productivity standards for providers",
                "Review and optimize provider compensation models",
            ]
        if _num(answers, "ownerCompensation") < 15:
            lines += [
                "Separate owner compensation from profit distributions",
                "Establish market-based compensation for clinical work",
                "Structure regular profit distributions based on performance",
            ]
        if _small_practice(size):
            lines += [
                "Consider adding associate providers to increase capacity",
                "Develop passive revenue streams (products, rental income)",
            ]
        else:
            lines += [
                "Implement location-specific profit and loss tracking",
                "Develop performance-based bonus system for location managers",
            ]
        return lines

    # -------------------------------------------------
    # PROJECTIONS & COMPARISONS
    # -------------------------------------------------
    @staticmethod
    def projections(
        answers: Mapping[str, Any],
        category_scores: Sequence[FinancialCategoryScore],
        size: PracticeSize,
    ) -> FinancialProjection:
        current = _num(answers, "annualProfit")
        average_gap = sum(c.gap for c in category_scores) / len(category_scores)

        # Revenue would improve by min(30, gap/2)%; only profit is reported.
        profit_pct = min(50.0, average_gap)
        potential = current * (1 + profit_pct / 100)

        return FinancialProjection(
            current=current,
            potential=potential,
            improvement=potential - current,
            timeframe=PROJECTION_TIMEFRAMES[size],
        )

    @staticmethod
    def benchmark_comparisons(
        answers: Mapping[str, Any],
        matched: Mapping[str, float],
    ) -> List[BenchmarkComparison]:
        """One row per metric that has a matching benchmark for the practice."""
        rows = []
        for key, benchmark_id, label, lower_is_better in COMPARISON_METRICS:
            if benchmark_id not in matched:
                continue

            practice = _num(answers, key)
            benchmark = matched[benchmark_id]
            if lower_is_better:
                percentile = 100.0 if practice == 0 else _clamp(benchmark / practice * 100)
            else:
                percentile = _clamp(practice / benchmark * 100)

            rows.append(
                BenchmarkComparison(metric=label, practice=practice, benchmark=benchmark, percentile=percentile)
            )
        return rows


def summarize_gaps(result: FinancialAssessmentResult) -> List[Tuple[str, float]]:
    """Category gaps, largest first; used by the report."""
    return sorted(((c.category, c.gap) for c in result.category_scores), key=lambda t: -t[1])
