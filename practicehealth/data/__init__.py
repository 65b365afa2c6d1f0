"""
Static reference tables.

The tables are immutable and loaded once. ``validate_reference_data`` runs
at import so a broken table fails fast instead of producing a skewed score.
"""

import math
from itertools import permutations

from practicehealth.core.enums import Category
from practicehealth.core.errors import ReferenceDataError

from .connections import ABSENT_CONNECTIONS, BASE_CONNECTIONS, CONNECTION_DESCRIPTIONS
from .topics import CATEGORY_TOPICS
from .weights import CATEGORY_WEIGHTS, SCORE_THRESHOLDS


def _check_coverage(table, label: str) -> None:
    missing = [c.value for c in Category if c not in table]
    extra = [str(k) for k in table if k not in set(Category)]
    if missing or extra:
        raise ReferenceDataError(
            f"{label} must cover every category exactly (missing={missing}, extra={extra})"
        )


def validate_reference_data() -> None:
    """Raise ReferenceDataError when any static table is inconsistent."""

    _check_coverage(CATEGORY_WEIGHTS, "CATEGORY_WEIGHTS")
    if not math.isclose(sum(CATEGORY_WEIGHTS.values()), 1.0, abs_tol=1e-9):
        raise ReferenceDataError(
            f"CATEGORY_WEIGHTS must sum to 1.0, got {sum(CATEGORY_WEIGHTS.values())}"
        )

    _check_coverage(CATEGORY_TOPICS, "CATEGORY_TOPICS")
    for category, topics in CATEGORY_TOPICS.items():
        if not topics:
            raise ReferenceDataError(f"No topics declared for {category.value}")

    for source in list(BASE_CONNECTIONS) + list(ABSENT_CONNECTIONS):
        if source in BASE_CONNECTIONS.get(source, {}) or source in ABSENT_CONNECTIONS.get(source, ()):
            raise ReferenceDataError(f"Self-connection declared for {source.value}")

    for source, target in permutations(Category, 2):
        present = target in BASE_CONNECTIONS.get(source, {})
        absent = target in ABSENT_CONNECTIONS.get(source, ())
        pair = f"{source.value}-{target.value}"

        if present and absent:
            raise ReferenceDataError(f"Connection {pair} is both present and absent")
        if not present and not absent:
            raise ReferenceDataError(f"Connection {pair} is not declared")
        if not present:
            continue

        strength = BASE_CONNECTIONS[source][target]
        if not 0.0 <= strength <= 1.0:
            raise ReferenceDataError(f"Connection {pair} strength {strength} outside [0, 1]")
        if not CONNECTION_DESCRIPTIONS.get(source, {}).get(target):
            raise ReferenceDataError(f"Connection {pair} has no description")


validate_reference_data()

__all__ = [
    "ABSENT_CONNECTIONS",
    "BASE_CONNECTIONS",
    "CATEGORY_TOPICS",
    "CATEGORY_WEIGHTS",
    "CONNECTION_DESCRIPTIONS",
    "SCORE_THRESHOLDS",
    "validate_reference_data",
]
