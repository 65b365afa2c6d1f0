from types import MappingProxyType

from practicehealth.core.enums import Category, ScorePosition

# Category weights for the overall score (sum 1.0).
CATEGORY_WEIGHTS = MappingProxyType({
    Category.FINANCIAL: 0.20,
    Category.OPERATIONS: 0.15,
    Category.PATIENT_CARE: 0.15,
    Category.COMPLIANCE: 0.12,
    Category.TECHNOLOGY: 0.10,
    Category.MARKETING: 0.08,
    Category.STAFFING: 0.08,
    Category.FACILITIES: 0.05,
    Category.GEOGRAPHY: 0.04,
    Category.AUTOMATION: 0.03,
})

# Evaluated top-down, first match wins.
SCORE_THRESHOLDS = MappingProxyType({
    ScorePosition.EXCEPTIONAL: 85,
    ScorePosition.STRONG: 75,
    ScorePosition.STABLE: 65,
    ScorePosition.CONCERNING: 50,
    ScorePosition.CRITICAL: 0,
})
