import re
from enum import Enum


def _normalize(token: str) -> str:
    return re.sub(r"[^a-z0-9]", "", str(token).lower())


class _ParseMixin:
    """Lenient lookup by value or name, ignoring case and separators."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        wanted = _normalize(value)
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.name)):
                return member
        raise ValueError(f"Unknown {cls.__name__}: {value!r}")


# -------------------------------------------------
# ASSESSMENT CATEGORIES
# -------------------------------------------------
class Category(_ParseMixin, str, Enum):
    # Declaration order is the tie-break order everywhere.
    FINANCIAL = "FINANCIAL"
    OPERATIONS = "OPERATIONS"
    PATIENT_CARE = "PATIENT_CARE"
    TECHNOLOGY = "TECHNOLOGY"
    COMPLIANCE = "COMPLIANCE"
    FACILITIES = "FACILITIES"
    MARKETING = "MARKETING"
    GEOGRAPHY = "GEOGRAPHY"
    STAFFING = "STAFFING"
    AUTOMATION = "AUTOMATION"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.FINANCIAL: "Financial Management",
    Category.OPERATIONS: "Operations",
    Category.PATIENT_CARE: "Patient Care",
    Category.TECHNOLOGY: "Technology",
    Category.COMPLIANCE: "Compliance & Risk",
    Category.FACILITIES: "Facilities",
    Category.MARKETING: "Marketing",
    Category.GEOGRAPHY: "Geographic Factors",
    Category.STAFFING: "Staffing",
    Category.AUTOMATION: "Automation",
}


class ScorePosition(_ParseMixin, str, Enum):
    EXCEPTIONAL = "Exceptional"
    STRONG = "Strong"
    STABLE = "Stable"
    CONCERNING = "Concerning"
    CRITICAL = "Critical"


# -------------------------------------------------
# PRACTICE METADATA
# -------------------------------------------------
class DisciplineType(_ParseMixin, str, Enum):
    PHYSIOTHERAPY = "PHYSIOTHERAPY"
    OCCUPATIONAL_THERAPY = "OCCUPATIONAL_THERAPY"
    SPEECH_THERAPY = "SPEECH_THERAPY"
    CHIROPRACTIC = "CHIROPRACTIC"
    PODIATRY = "PODIATRY"
    GENERAL = "GENERAL"


class PracticeSize(_ParseMixin, str, Enum):
    SOLO = "SOLO"
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    ENTERPRISE = "ENTERPRISE"


class Country(_ParseMixin, str, Enum):
    AUSTRALIA = "AUSTRALIA"
    NEW_ZEALAND = "NEW_ZEALAND"
    UNITED_KINGDOM = "UNITED_KINGDOM"
    UNITED_STATES = "UNITED_STATES"
    OTHER = "OTHER"


# -------------------------------------------------
# RECOMMENDATION ATTRIBUTES
# -------------------------------------------------
class Priority(_ParseMixin, str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Effort(_ParseMixin, str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class Timeframe(_ParseMixin, str, Enum):
    IMMEDIATE = "immediate"
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


class RiskLevel(_ParseMixin, str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ImpactDirection(_ParseMixin, str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


# -------------------------------------------------
# DOCUMENTS & COMPLIANCE
# -------------------------------------------------
class ReviewFrequency(_ParseMixin, str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUALLY = "biannually"
    ANNUALLY = "annually"


class SOPType(_ParseMixin, str, Enum):
    FINANCIAL = "Financial"
    OPERATIONS = "Operations"
    PATIENT_CARE = "Patient Care"
    TECHNOLOGY = "Technology"
    COMPLIANCE = "Compliance"
    STAFFING = "Staffing"
    FACILITIES = "Facilities"
    MARKETING = "Marketing"


class SOPStatus(_ParseMixin, str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class FrameworkType(_ParseMixin, str, Enum):
    WORKCOVER = "WORKCOVER"
    NDIS = "NDIS"
    DVA = "DVA"
    INSURANCE = "INSURANCE"
    CYBERSECURITY = "CYBERSECURITY"
    PRIVACY = "PRIVACY"
    CLINICAL = "CLINICAL"
    GENERAL = "GENERAL"


class ComplianceState(_ParseMixin, str, Enum):
    COMPLIANT = "compliant"
    PARTIALLY_COMPLIANT = "partially-compliant"
    NON_COMPLIANT = "non-compliant"
    NOT_APPLICABLE = "not-applicable"


class ModuleStatus(_ParseMixin, str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# -------------------------------------------------
# FEE SCHEDULES
# -------------------------------------------------
class FeeScheduleType(_ParseMixin, str, Enum):
    WORKCOVER = "WORKCOVER"
    DVA = "DVA"
    NDIS = "NDIS"
    PRIVATE = "PRIVATE"
    MEDICARE = "MEDICARE"


class ServiceType(_ParseMixin, str, Enum):
    INITIAL = "INITIAL"
    STANDARD = "STANDARD"
    COMPLEX = "COMPLEX"
    REPORT = "REPORT"
    ASSESSMENT = "ASSESSMENT"
    THERAPY = "THERAPY"
    HOME_VISIT = "HOME_VISIT"
    TRAVEL = "TRAVEL"
