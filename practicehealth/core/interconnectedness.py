"""
Cross-category influence analysis.

Edges come from the static adjacency table, adjusted for practice size and
for how much response data backs each side. Everything here is a pure
function of its inputs: identical responses always give identical edges.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from practicehealth.core.enums import Category, ImpactDirection, PracticeSize
from practicehealth.core.models import (
    AssessmentProgress,
    CategoryConnection,
    InterconnectednessAnalysis,
    QuestionResponse,
    coerce_response,
)
from practicehealth.core.scoring import calculate_category_score, parse_size
from practicehealth.data import BASE_CONNECTIONS, CONNECTION_DESCRIPTIONS
from practicehealth.data.connections import CATEGORY_GROUPS, CONNECTION_RESEARCH, SIZE_ADJUSTMENTS

logger = logging.getLogger(__name__)

STRONG_CONNECTION = 0.8
MAX_STRONG_CONNECTIONS = 3
ALIGNMENT_WEIGHT = 0.05

POSITIVE_FROM = 65
NEGATIVE_BELOW = 50

SIZE_INSIGHTS = {
    PracticeSize.SOLO: (
        "As a solo practice, your operational efficiency and financial management are closely linked.",
        "Technology investments can have outsized impact on your practice performance.",
    ),
    PracticeSize.SMALL: (
        "For small practices, staff management and operational processes show strong interconnection.",
        "Marketing effectiveness directly impacts your financial performance.",
    ),
    PracticeSize.MEDIUM: (
        "Medium-sized practices benefit from standardized processes that connect operations and compliance.",
        "Technology integration across business areas becomes increasingly important at your practice size.",
    ),
    PracticeSize.LARGE: (
        "Large practices must carefully manage the complex relationship between staffing and operations.",
        "Compliance requirements have significant downstream effects across your organization.",
        "Geographic considerations impact multiple business areas in multi-location practices.",
    ),
}
SIZE_INSIGHTS[PracticeSize.ENTERPRISE] = SIZE_INSIGHTS[PracticeSize.LARGE]


# -------------------------------------------------
# EDGE RULES
# -------------------------------------------------
def adjust_base_strength(base: float, offset: float) -> float:
    """Base strength plus size offset, clamped to [0, 1]."""
    return float(np.clip(base + offset, 0.0, 1.0))


def confidence_factor(source_count: int, target_count: int) -> float:
    if source_count == 0 or target_count == 0:
        return 0.5
    if source_count < 3 or target_count < 3:
        return 0.8
    if source_count >= 10 and target_count >= 10:
        return 1.05
    return 1.0


def alignment_term(source_score: float, target_score: float) -> float:
    """
    +0.05 when both categories score alike, -0.05 when they are 100 apart.
    """
    similarity = 1 - abs(source_score - target_score) / 100
    return ALIGNMENT_WEIGHT * (2 * similarity - 1)


def impact_direction(source_responses: Sequence, target_responses: Sequence) -> ImpactDirection:
    if not source_responses or not target_responses:
        return ImpactDirection.POSITIVE

    score = calculate_category_score(source_responses)
    if score >= POSITIVE_FROM:
        return ImpactDirection.POSITIVE
    if score < NEGATIVE_BELOW:
        return ImpactDirection.NEGATIVE
    return ImpactDirection.NEUTRAL


def connection_strength(
    base: float,
    offset: float,
    source_responses: Sequence[QuestionResponse],
    target_responses: Sequence[QuestionResponse],
) -> float:
    strength = adjust_base_strength(base, offset)
    strength *= confidence_factor(len(source_responses), len(target_responses))
    strength = min(1.0, strength)

    if source_responses and target_responses:
        strength += alignment_term(
            calculate_category_score(source_responses),
            calculate_category_score(target_responses),
        )

    return round(float(np.clip(strength, 0.0, 1.0)), 2)


# -------------------------------------------------
# MATRIX & VISUALISATION
# -------------------------------------------------
def strength_matrix(connections: Sequence[CategoryConnection]) -> pd.DataFrame:
    """Source x target strengths over all categories; absent edges are 0."""
    labels = [c.value for c in Category]
    matrix = pd.DataFrame(0.0, index=labels, columns=labels)
    for conn in connections:
        matrix.loc[conn.source.value, conn.target.value] = conn.strength
    return matrix


def generate_visualization_data(
    analysis: Union[InterconnectednessAnalysis, Sequence[CategoryConnection]],
) -> Dict[str, List[Dict[str, Any]]]:
    connections = getattr(analysis, "connections", analysis)

    nodes = [
        {"id": c.value, "group": CATEGORY_GROUPS[c], "label": c.label}
        for c in Category
    ]
    links = [
        {
            "source": conn.source.value,
            "target": conn.target.value,
            "value": conn.strength * 10,
            "direction": conn.impact_direction.value,
            "description": conn.description,
        }
        for conn in connections
    ]
    return {"nodes": nodes, "links": links}


# -------------------------------------------------
# ANALYZER
# -------------------------------------------------
def _group_responses(responses_by_category) -> Dict[Category, List[QuestionResponse]]:
    if isinstance(responses_by_category, AssessmentProgress):
        return responses_by_category.responses_by_category()

    grouped: Dict[Category, List[QuestionResponse]] = {}
    for key, items in (responses_by_category or {}).items():
        grouped.setdefault(Category.parse(key), []).extend(
            coerce_response(r) for r in (items or [])
        )
    return grouped


class InterconnectednessAnalyzer:
    """Builds the directed influence graph between business categories."""

    def analyze(
        self,
        responses_by_category: Union[AssessmentProgress, Mapping[Any, Sequence[Any]]],
        discipline=None,
        size=PracticeSize.SMALL,
    ) -> InterconnectednessAnalysis:
        # discipline is accepted for symmetry with the other engines; the
        # adjacency table is shared by every discipline.
        size = parse_size(size)
        responses = _group_responses(responses_by_category)

        connections = self.build_connections(responses, size)
        matrix = strength_matrix(connections)

        most_influential = Category(matrix.sum(axis=1).idxmax())
        most_dependent = Category(matrix.sum(axis=0).idxmax())

        insights = self.key_insights(connections, most_influential, most_dependent, size)

        logger.debug(
            "Built %d connections (influential=%s, dependent=%s)",
            len(connections), most_influential.value, most_dependent.value,
        )

        return InterconnectednessAnalysis(
            connections=tuple(connections),
            most_influential=most_influential,
            most_dependent=most_dependent,
            key_insights=tuple(insights),
        )

    def build_connections(
        self,
        responses: Mapping[Category, Sequence[QuestionResponse]],
        size: PracticeSize,
    ) -> List[CategoryConnection]:
        offsets = SIZE_ADJUSTMENTS.get(size, {})
        connections = []

        for source in Category:
            for target in Category:
                base: Optional[float] = BASE_CONNECTIONS.get(source, {}).get(target)
                if source == target or base is None:
                    continue

                source_responses = responses.get(source, [])
                target_responses = responses.get(target, [])

                connections.append(
                    CategoryConnection(
                        source=source,
                        target=target,
                        strength=connection_strength(
                            base,
                            offsets.get((source, target), 0.0),
                            source_responses,
                            target_responses,
                        ),
                        description=CONNECTION_DESCRIPTIONS[source][target],
                        impact_direction=impact_direction(source_responses, target_responses),
                        research_basis=CONNECTION_RESEARCH.get(source, {}).get(target),
                    )
                )

        # stable: equal strengths keep category declaration order
        connections.sort(key=lambda c: -c.strength)
        return connections

    @staticmethod
    def key_insights(
        connections: Sequence[CategoryConnection],
        most_influential: Category,
        most_dependent: Category,
        size: PracticeSize,
    ) -> List[str]:
        insights = [
            f"{most_influential.label} is your most influential business area, "
            "with significant impact across your practice.",
            f"{most_dependent.label} is most affected by other business areas "
            "and should be monitored for downstream effects.",
        ]
        insights.extend(SIZE_INSIGHTS.get(size, ()))

        strongest = [c for c in connections if c.strength > STRONG_CONNECTION][:MAX_STRONG_CONNECTIONS]
        if strongest:
            insights.append("Your strongest business area connections are:")
            for conn in strongest:
                insights.append(
                    f"- {conn.source.label} → {conn.target.label} ({conn.impact_direction.value} impact)"
                )
        return insights
