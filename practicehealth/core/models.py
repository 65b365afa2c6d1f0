from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from dateutil.parser import isoparse

from practicehealth.core.enums import (
    Category,
    ComplianceState,
    Country,
    DisciplineType,
    Effort,
    FeeScheduleType,
    FrameworkType,
    ImpactDirection,
    ModuleStatus,
    PracticeSize,
    Priority,
    ReviewFrequency,
    RiskLevel,
    ScorePosition,
    ServiceType,
    SOPStatus,
    SOPType,
    Timeframe,
)
from practicehealth.utils.serialization import to_jsonable

ResponseValue = Union[int, float, bool, str, List[str]]


# -------------------------------------------------
# RESPONSES
# -------------------------------------------------
@dataclass(frozen=True)
class QuestionResponse:
    question_id: str
    value: ResponseValue
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionResponse":
        question_id = data.get("question_id", data.get("questionId", ""))
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = isoparse(timestamp)
        return cls(
            question_id=str(question_id),
            value=data.get("value"),
            timestamp=timestamp or datetime.now(),
        )


def coerce_response(item) -> QuestionResponse:
    if isinstance(item, QuestionResponse):
        return item
    return QuestionResponse.from_dict(item)


@dataclass
class ModuleProgress:
    module_id: str
    category: Category
    responses: List[QuestionResponse] = field(default_factory=list)
    completed_questions: int = 0
    total_questions: int = 0


@dataclass
class AssessmentProgress:
    user_id: str
    modules: List[ModuleProgress] = field(default_factory=list)
    last_updated: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_responses(
        cls,
        responses_by_category: Dict[Any, List[Any]],
        user_id: str = "anonymous",
    ) -> "AssessmentProgress":
        """One synthetic module per category key."""
        modules = []
        for key, items in responses_by_category.items():
            category = Category.parse(key)
            responses = [coerce_response(r) for r in (items or [])]
            modules.append(
                ModuleProgress(
                    module_id=f"{category.value.lower()}-responses",
                    category=category,
                    responses=responses,
                    completed_questions=len(responses),
                    total_questions=len(responses),
                )
            )
        return cls(user_id=user_id, modules=modules)

    def responses_by_category(self) -> Dict[Category, List[QuestionResponse]]:
        grouped: Dict[Category, List[QuestionResponse]] = {}
        for module in self.modules:
            grouped.setdefault(module.category, []).extend(module.responses)
        return grouped


# -------------------------------------------------
# SCORES
# -------------------------------------------------
@dataclass(frozen=True)
class CategoryScore:
    category: Category
    score: int
    position: ScorePosition
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Benchmarks:
    industry: float
    similar_size: float
    top_performers: float


@dataclass(frozen=True)
class GeographicAdjustment:
    region: str
    adjustment_factor: float


@dataclass(frozen=True)
class BusinessHealthScore:
    overall: int
    position: ScorePosition
    categories: Tuple[CategoryScore, ...]
    benchmarks: Benchmarks
    geographic_adjustment: Optional[GeographicAdjustment] = None

    def category_score(self, category: Category) -> Optional[CategoryScore]:
        for entry in self.categories:
            if entry.category == category:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


# -------------------------------------------------
# INTERCONNECTEDNESS
# -------------------------------------------------
@dataclass(frozen=True)
class CategoryConnection:
    source: Category
    target: Category
    strength: float
    description: str
    impact_direction: ImpactDirection = ImpactDirection.POSITIVE
    research_basis: Optional[str] = None


@dataclass(frozen=True)
class InterconnectednessAnalysis:
    connections: Tuple[CategoryConnection, ...]
    most_influential: Category
    most_dependent: Category
    key_insights: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


# -------------------------------------------------
# RECOMMENDATIONS
# -------------------------------------------------
@dataclass(frozen=True)
class ROIEstimate:
    min: float
    max: float
    timeframe_months: int

    @property
    def average(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class RegulatoryRelevance:
    authority: Optional[str] = None
    standard: Optional[str] = None
    risk_level: Optional[RiskLevel] = None


@dataclass(frozen=True)
class Resource:
    title: str
    description: str
    type: str = "other"     # article | tool | template | service | other
    url: Optional[str] = None


@dataclass(frozen=True)
class Recommendation:
    id: str
    title: str
    description: str
    category: Category
    priority: Priority
    effort: Effort
    timeframe: Timeframe
    estimated_roi: ROIEstimate
    implementation_steps: Tuple[str, ...]
    resources: Tuple[Resource, ...] = ()
    regulatory_relevance: Optional[RegulatoryRelevance] = None
    geographic_relevance: Optional[Tuple[str, ...]] = None
    practice_type_relevance: Optional[Tuple[DisciplineType, ...]] = None
    practice_size_relevance: Optional[Tuple[PracticeSize, ...]] = None
    research_basis: Optional[str] = None


@dataclass(frozen=True)
class RecommendationSet:
    top_recommendations: Tuple[Recommendation, ...]
    category_recommendations: Dict[Category, Tuple[Recommendation, ...]]
    quick_wins: Tuple[Recommendation, ...]
    strategic_initiatives: Tuple[Recommendation, ...]
    compliance_priorities: Tuple[Recommendation, ...]
    region_specific: Optional[Tuple[Recommendation, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


# -------------------------------------------------
# SOP DOCUMENTS
# -------------------------------------------------
@dataclass(frozen=True)
class SOPSection:
    title: str
    content: str
    is_required: bool = True
    variables: Tuple[str, ...] = ()
    regulatory_reference: Optional[str] = None


@dataclass(frozen=True)
class RegulatoryBasis:
    authority: str
    standards: Tuple[str, ...]

    @property
    def standard(self) -> str:
        return "; ".join(self.standards)


@dataclass(frozen=True)
class SOPTemplate:
    id: str
    title: str
    type: SOPType
    description: str
    related_categories: Tuple[Category, ...]
    applicable_disciplines: Tuple[DisciplineType, ...]
    applicable_sizes: Tuple[PracticeSize, ...]
    sections: Tuple[SOPSection, ...]
    recommended_review_frequency: ReviewFrequency
    regulatory_basis: Optional[RegulatoryBasis] = None
    industry_standards: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RegulatoryCompliance:
    authority: str
    standard: str
    last_verified: datetime


@dataclass(frozen=True)
class GeneratedSOP:
    id: str
    template_id: str
    title: str
    type: SOPType
    created_at: datetime
    last_modified: datetime
    sections: Tuple[SOPSection, ...]
    status: SOPStatus
    next_review_date: datetime
    regulatory_compliance: Optional[RegulatoryCompliance] = None

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


# -------------------------------------------------
# COMPLIANCE
# -------------------------------------------------
@dataclass(frozen=True)
class ComplianceRequirement:
    id: str
    title: str
    description: str
    framework: FrameworkType
    authority: str
    risk_level: RiskLevel
    verification_methods: Tuple[str, ...]
    implementation_steps: Tuple[str, ...]
    review_frequency: ReviewFrequency
    legislation: Optional[str] = None
    standard: Optional[str] = None


@dataclass(frozen=True)
class ComplianceFramework:
    id: str
    name: str
    type: FrameworkType
    description: str
    authority: str
    version: str
    last_updated: date
    requirement_ids: Tuple[str, ...]
    applicable_jurisdictions: Tuple[str, ...] = ()
    applicable_countries: Tuple[Country, ...] = (Country.AUSTRALIA,)


@dataclass(frozen=True)
class ComplianceStatus:
    requirement_id: str
    status: ComplianceState
    last_reviewed: datetime
    next_review_date: datetime
    evidence: Optional[str] = None
    notes: Optional[str] = None
    action_items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ActionPlanItem:
    requirement_id: str
    title: str
    risk_level: RiskLevel
    status: ComplianceState
    priority: int
    steps: Tuple[str, ...]


@dataclass(frozen=True)
class UpcomingReview:
    requirement_id: str
    title: str
    due_date: datetime


@dataclass(frozen=True)
class ComplianceDashboard:
    overall_compliance: float
    by_framework: Dict[FrameworkType, float]
    by_risk_level: Dict[RiskLevel, float]
    upcoming_reviews: Tuple[UpcomingReview, ...]

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


# -------------------------------------------------
# FINANCIAL ASSESSMENT
# -------------------------------------------------
@dataclass(frozen=True)
class FinancialCategoryScore:
    category: str
    score: float
    benchmark: float

    @property
    def gap(self) -> float:
        return self.benchmark - self.score


@dataclass(frozen=True)
class FinancialProjection:
    current: float
    potential: float
    improvement: float
    timeframe: str


@dataclass(frozen=True)
class BenchmarkComparison:
    metric: str
    practice: float
    benchmark: float
    percentile: float


@dataclass(frozen=True)
class FinancialAssessmentResult:
    overall_score: float
    category_scores: Tuple[FinancialCategoryScore, ...]
    recommendations: Tuple[str, ...]
    projections: FinancialProjection
    benchmark_comparisons: Tuple[BenchmarkComparison, ...]

    def to_dict(self) -> Dict[str, Any]:
        data = to_jsonable(self)
        for entry, score in zip(data["category_scores"], self.category_scores):
            entry["gap"] = score.gap
        return data


# -------------------------------------------------
# PROGRESS TRACKING
# -------------------------------------------------
@dataclass(frozen=True)
class AssessmentModule:
    id: str
    title: str
    description: str
    category: Category
    estimated_time_minutes: int
    question_count: int
    order: int
    is_required: bool = True


@dataclass(frozen=True)
class ModuleState:
    module_id: str
    status: ModuleStatus = ModuleStatus.NOT_STARTED
    progress: int = 0
    responses: Tuple[QuestionResponse, ...] = ()
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class TrackedAssessment:
    user_id: str
    practice_id: str
    discipline: DisciplineType
    size: PracticeSize
    modules: Tuple[ModuleState, ...]
    current_module_id: Optional[str]
    overall_progress: int
    started_at: datetime
    last_updated: datetime

    def module_state(self, module_id: str) -> Optional[ModuleState]:
        for state in self.modules:
            if state.module_id == module_id:
                return state
        return None

    def to_dict(self) -> Dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True)
class ModuleSuggestion:
    module: AssessmentModule
    priority: Priority
    reason: str


@dataclass(frozen=True)
class CategoryCompletion:
    category: Category
    completed: int
    total: int
    percentage: int


# -------------------------------------------------
# FEE SCHEDULES
# -------------------------------------------------
@dataclass(frozen=True)
class FeeItem:
    id: str
    schedule_type: FeeScheduleType
    service_type: ServiceType
    description: str
    fee: float
    jurisdiction: str
    effective_date: date
    requires_approval: bool = False
    duration_minutes: Optional[int] = None
    item_number: Optional[str] = None
    allows_travel: bool = False
    expiry_date: Optional[date] = None


@dataclass(frozen=True)
class FinancialBenchmark:
    id: str
    metric: str
    description: str
    value: float
    unit: str
    discipline: DisciplineType
    country: Country
    source: str
    effective_date: date
