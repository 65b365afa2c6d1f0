"""Core types for practicehealth.

Engines are imported from their own modules (or from the package root);
this init stays lightweight so the reference tables can import the types.
"""

from .enums import (
    Category,
    ComplianceState,
    Country,
    DisciplineType,
    Effort,
    FrameworkType,
    ImpactDirection,
    ModuleStatus,
    PracticeSize,
    Priority,
    ReviewFrequency,
    RiskLevel,
    ScorePosition,
    SOPStatus,
    SOPType,
    Timeframe,
)
from .errors import NotFoundError, PracticeHealthError, ReferenceDataError

__all__ = [
    "Category",
    "ComplianceState",
    "Country",
    "DisciplineType",
    "Effort",
    "FrameworkType",
    "ImpactDirection",
    "ModuleStatus",
    "PracticeSize",
    "Priority",
    "ReviewFrequency",
    "RiskLevel",
    "ScorePosition",
    "SOPStatus",
    "SOPType",
    "Timeframe",
    "NotFoundError",
    "PracticeHealthError",
    "ReferenceDataError",
]
