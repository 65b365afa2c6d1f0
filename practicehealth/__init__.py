"""
practicehealth

Business health assessment for allied-health practices: weighted
category scoring, category interconnectedness, ranked recommendations,
SOP generation and Australian compliance verification.
"""

from .__version__ import __version__

# Keep package init lightweight; reporting, batch and the store
# (matplotlib, reportlab, sqlite) are imported explicitly by callers.

from .core.enums import Category, DisciplineType, PracticeSize
from .core.errors import NotFoundError, PracticeHealthError, ReferenceDataError
from .core.financial import FinancialAssessmentCalculator
from .core.interconnectedness import InterconnectednessAnalyzer
from .core.progress import ProgressTrackingSystem
from .core.recommendations import RecommendationEngine
from .core.scoring import BusinessHealthScoreCalculator

from .compliance import ComplianceVerificationSystem
from .documents import SOPExporter, SOPGenerator

__all__ = [
    "__version__",
    "Category",
    "DisciplineType",
    "PracticeSize",
    "NotFoundError",
    "PracticeHealthError",
    "ReferenceDataError",
    "BusinessHealthScoreCalculator",
    "FinancialAssessmentCalculator",
    "InterconnectednessAnalyzer",
    "ProgressTrackingSystem",
    "RecommendationEngine",
    "ComplianceVerificationSystem",
    "SOPExporter",
    "SOPGenerator",
]
