"""
Recommendation engine.

Filters the static catalog down to what is relevant for a practice,
ranks it against the practice's weakest categories and splits it into
the buckets shown in reports.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from practicehealth.core.enums import (
    Category,
    DisciplineType,
    Effort,
    PracticeSize,
    Priority,
    RiskLevel,
    Timeframe,
)
from practicehealth.core.models import BusinessHealthScore, Recommendation, RecommendationSet
from practicehealth.core.scoring import parse_discipline, parse_size
from practicehealth.data.recommendation_catalog import RECOMMENDATIONS

logger = logging.getLogger(__name__)

TOP_N = 5
LOWEST_CATEGORIES = 3
MAX_PER_CATEGORY = 2
STRATEGIC_MIN_ROI = 15

# A recommendation stops showing once its category reaches this score.
SUPPRESS_AT = {
    Priority.HIGH: 85,
    Priority.MEDIUM: 75,
    Priority.LOW: 65,
}

PRIORITY_BONUS = {Priority.HIGH: 30, Priority.MEDIUM: 20, Priority.LOW: 10}
RISK_BONUS = {RiskLevel.HIGH: 25, RiskLevel.MEDIUM: 15, RiskLevel.LOW: 5}
TIMEFRAME_BONUS = {Timeframe.IMMEDIATE: 15, Timeframe.SHORT_TERM: 10, Timeframe.LONG_TERM: 5}

UNSCORED_GAP_POINTS = 50


def _region_matches(recommendation: Recommendation, region: str) -> bool:
    region = region.lower()
    return any(geo.lower() in region for geo in recommendation.geographic_relevance or ())


def _risk_level(recommendation: Recommendation) -> Optional[RiskLevel]:
    if recommendation.regulatory_relevance is None:
        return None
    return recommendation.regulatory_relevance.risk_level


class RecommendationEngine:
    """Ranks the recommendation catalog for one scored practice."""

    def __init__(self, catalog: Optional[Sequence[Recommendation]] = None):
        self.catalog = tuple(catalog) if catalog is not None else RECOMMENDATIONS

    # -------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------
    def generate(
        self,
        health_score: BusinessHealthScore,
        discipline=DisciplineType.PHYSIOTHERAPY,
        size=PracticeSize.SMALL,
        region: Optional[str] = None,
    ) -> RecommendationSet:
        discipline = parse_discipline(discipline)
        size = parse_size(size)
        scores = {entry.category: entry.score for entry in health_score.categories}

        relevant = self.filter_relevant(scores, discipline, size, region)
        ranked = self.rank(relevant, scores)

        logger.debug("%d of %d recommendations relevant", len(ranked), len(self.catalog))

        by_category: Dict[Category, tuple] = {
            category: tuple(r for r in ranked if r.category == category)
            for category in Category
        }

        region_specific = None
        if region:
            region_specific = tuple(
                r for r in ranked if r.geographic_relevance and _region_matches(r, region)
            )

        return RecommendationSet(
            top_recommendations=tuple(self.select_top(ranked, health_score)),
            category_recommendations=by_category,
            quick_wins=tuple(r for r in ranked if self.is_quick_win(r)),
            strategic_initiatives=tuple(r for r in ranked if self.is_strategic(r)),
            compliance_priorities=tuple(
                r for r in ranked if _risk_level(r) in (RiskLevel.HIGH, RiskLevel.MEDIUM)
            ),
            region_specific=region_specific,
        )

    # -------------------------------------------------
    # FILTERING
    # -------------------------------------------------
    def filter_relevant(
        self,
        scores: Dict[Category, int],
        discipline: DisciplineType,
        size: PracticeSize,
        region: Optional[str] = None,
    ) -> List[Recommendation]:
        return [
            r for r in self.catalog
            if self.is_relevant(r, scores, discipline, size, region)
        ]

    @staticmethod
    def is_relevant(
        recommendation: Recommendation,
        scores: Dict[Category, int],
        discipline: DisciplineType,
        size: PracticeSize,
        region: Optional[str] = None,
    ) -> bool:
        disciplines = recommendation.practice_type_relevance
        if disciplines and discipline not in disciplines and DisciplineType.GENERAL not in disciplines:
            return False

        sizes = recommendation.practice_size_relevance
        if sizes and size not in sizes:
            return False

        if region and recommendation.geographic_relevance and not _region_matches(recommendation, region):
            return False

        score = scores.get(recommendation.category)
        if score is not None and score >= SUPPRESS_AT[recommendation.priority]:
            return False

        return True

    # -------------------------------------------------
    # RANKING
    # -------------------------------------------------
    @staticmethod
    def priority_score(recommendation: Recommendation, scores: Dict[Category, int]) -> float:
        score = scores.get(recommendation.category)
        gap = UNSCORED_GAP_POINTS if score is None else (100 - score) * 0.5

        total = gap
        total += PRIORITY_BONUS[recommendation.priority]
        total += recommendation.estimated_roi.average * 0.5
        total += RISK_BONUS.get(_risk_level(recommendation), 0)
        total += TIMEFRAME_BONUS[recommendation.timeframe]
        return total

    def rank(
        self,
        recommendations: Iterable[Recommendation],
        scores: Dict[Category, int],
    ) -> List[Recommendation]:
        # sorted() is stable, so equal totals keep catalog order
        return sorted(recommendations, key=lambda r: -self.priority_score(r, scores))

    # -------------------------------------------------
    # BUCKETS
    # -------------------------------------------------
    @staticmethod
    def is_quick_win(recommendation: Recommendation) -> bool:
        return (
            recommendation.priority in (Priority.HIGH, Priority.MEDIUM)
            and recommendation.effort == Effort.MINIMAL
            and recommendation.timeframe in (Timeframe.IMMEDIATE, Timeframe.SHORT_TERM)
        )

    @staticmethod
    def is_strategic(recommendation: Recommendation) -> bool:
        return (
            recommendation.priority == Priority.HIGH
            and recommendation.effort in (Effort.MODERATE, Effort.SIGNIFICANT)
            and recommendation.timeframe in (Timeframe.SHORT_TERM, Timeframe.LONG_TERM)
            and recommendation.estimated_roi.min >= STRATEGIC_MIN_ROI
        )

    @staticmethod
    def select_top(
        ranked: Sequence[Recommendation],
        health_score: BusinessHealthScore,
    ) -> List[Recommendation]:
        """
        Top picks:
        1. best entry from each of the three weakest categories
        2. a high-risk compliance entry if compliance is not yet covered
        3. fill from the ranked list, at most two per category
        """
        top: List[Recommendation] = []
        seen_ids = set()
        covered = set()

        def add(rec: Recommendation) -> None:
            top.append(rec)
            seen_ids.add(rec.id)
            covered.add(rec.category)

        weakest = sorted(health_score.categories, key=lambda c: c.score)[:LOWEST_CATEGORIES]
        for entry in weakest:
            for rec in ranked:
                if rec.category == entry.category:
                    if rec.id not in seen_ids:
                        add(rec)
                    break

        if Category.COMPLIANCE not in covered:
            for rec in ranked:
                if rec.category == Category.COMPLIANCE and _risk_level(rec) == RiskLevel.HIGH:
                    if rec.id not in seen_ids:
                        add(rec)
                    break

        for rec in ranked:
            if len(top) >= TOP_N:
                break
            if rec.id in seen_ids:
                continue
            if sum(1 for t in top if t.category == rec.category) >= MAX_PER_CATEGORY:
                continue
            add(rec)

        return top[:TOP_N]
