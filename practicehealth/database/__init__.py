from .store import AssessmentStore

__all__ = ["AssessmentStore"]
