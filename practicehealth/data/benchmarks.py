"""
Benchmark tables for the business health score.

Values come from physiotherapy practice benchmarks; Physiotherapy is the
only discipline with its own rows and is the fallback for all others.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from practicehealth.core.enums import Category, DisciplineType, PracticeSize


@dataclass(frozen=True)
class SizeBenchmark:
    industry: float
    top_performers: float
    financial_margin: float
    revenue_per_practitioner: float
    average_fee_per_visit: float


DEFAULT_DISCIPLINE = DisciplineType.PHYSIOTHERAPY
DEFAULT_SIZE = PracticeSize.SMALL

HEALTH_BENCHMARKS = MappingProxyType({
    DisciplineType.PHYSIOTHERAPY: MappingProxyType({
        PracticeSize.SOLO: SizeBenchmark(65, 85, 25, 150000, 80),
        PracticeSize.SMALL: SizeBenchmark(68, 88, 22, 145000, 75),
        PracticeSize.MEDIUM: SizeBenchmark(70, 90, 18, 140000, 70),
        PracticeSize.LARGE: SizeBenchmark(72, 92, 15, 135000, 65),
        PracticeSize.ENTERPRISE: SizeBenchmark(75, 95, 15, 135000, 65),
    }),
})

# Region tokens are matched case-sensitively, in this order.
GEOGRAPHIC_ADJUSTMENTS = (
    ("AU", -0.025),
    ("NZ", -0.025),
    ("UK", -0.015),
    ("EU", -0.015),
    ("US", 0.0),
)
DEFAULT_GEOGRAPHIC_ADJUSTMENT = -0.01


# -------------------------------------------------
# PER-CATEGORY METRICS
# -------------------------------------------------
@dataclass(frozen=True)
class CategoryMetric:
    metric: str
    unit: str
    benchmark: Optional[float] = None
    by_size: Optional[MappingProxyType] = None

    def value_for(self, size: PracticeSize) -> float:
        if self.by_size is None:
            return self.benchmark
        return self.by_size.get(size, self.by_size[DEFAULT_SIZE])


CATEGORY_METRICS = MappingProxyType({
    Category.FINANCIAL: (
        CategoryMetric(
            "Operating Profit Margin", "%",
            by_size=MappingProxyType({
                PracticeSize.SOLO: 25,
                PracticeSize.SMALL: 22,
                PracticeSize.MEDIUM: 18,
                PracticeSize.LARGE: 15,
                PracticeSize.ENTERPRISE: 15,
            }),
        ),
        CategoryMetric("Days in Accounts Receivable", "days", 30),
        CategoryMetric("Collection Rate", "%", 95),
        CategoryMetric("Cash Reserve", "months", 4.5),
    ),
    Category.OPERATIONS: (
        CategoryMetric("Schedule Utilization", "%", 80),
        CategoryMetric("No-show Rate", "%", 10),
        CategoryMetric("Rebooking Rate", "%", 75),
        CategoryMetric("Patient Throughput", "patients/day", 10),
        CategoryMetric("Documentation Time", "minutes", 15),
    ),
    Category.PATIENT_CARE: (
        CategoryMetric("Functional Improvement", "%", 30),
        CategoryMetric("Pain Reduction", "%", 40),
        CategoryMetric("ROM Improvement", "%", 25),
        CategoryMetric("Patient Satisfaction Score", "%", 85),
        CategoryMetric("Net Promoter Score", "score", 60),
    ),
    Category.TECHNOLOGY: (
        CategoryMetric("EMR Utilization", "%", 95),
        CategoryMetric("Online Booking Rate", "%", 30),
        CategoryMetric("Digital Communication Adoption", "%", 60),
    ),
    Category.STAFFING: (
        CategoryMetric("Staff Turnover", "%", 15),
        CategoryMetric("Continuing Education Hours", "hours/year", 20),
        CategoryMetric("Clinician Productivity", "%", 75),
    ),
    Category.MARKETING: (
        CategoryMetric("New Patient Rate", "%", 20),
        CategoryMetric("Referral Rate", "%", 40),
        CategoryMetric("Marketing ROI", "%", 300),
    ),
    Category.FACILITIES: (
        CategoryMetric("Treatment Room Utilization", "%", 75),
        CategoryMetric("Cleanliness Score", "%", 95),
        CategoryMetric("Maintenance Completion", "%", 90),
    ),
})
