"""Exception types raised by practicehealth."""


class PracticeHealthError(Exception):
    """Base class for package errors."""


class NotFoundError(PracticeHealthError, LookupError):
    """A template, requirement, module or benchmark lookup by id failed."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} with ID {key} not found")


class ReferenceDataError(PracticeHealthError):
    """Static reference tables are inconsistent."""
