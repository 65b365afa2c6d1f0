from .verification import ACTION_PRIORITY, ComplianceVerificationSystem

__all__ = ["ACTION_PRIORITY", "ComplianceVerificationSystem"]
