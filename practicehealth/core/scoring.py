"""
Business health score.

Turns assessment responses into per-category scores, an overall weighted
score, a qualitative position and the benchmark context for the practice.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from practicehealth.core.enums import Category, Country, DisciplineType, PracticeSize, ScorePosition
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import (
    AssessmentProgress,
    Benchmarks,
    BusinessHealthScore,
    CategoryScore,
    GeographicAdjustment,
    QuestionResponse,
)
from practicehealth.data import CATEGORY_TOPICS, CATEGORY_WEIGHTS, SCORE_THRESHOLDS
from practicehealth.data.benchmarks import (
    CATEGORY_METRICS,
    DEFAULT_DISCIPLINE,
    DEFAULT_GEOGRAPHIC_ADJUSTMENT,
    DEFAULT_SIZE,
    GEOGRAPHIC_ADJUSTMENTS,
    HEALTH_BENCHMARKS,
)

logger = logging.getLogger(__name__)

ProgressInput = Union[AssessmentProgress, Mapping[Any, Sequence[Any]]]

# A topic at or above this score is a strength, below it a weakness.
TOPIC_STRENGTH_THRESHOLD = SCORE_THRESHOLDS[ScorePosition.STABLE]
MAX_TOPICS_LISTED = 2


# -------------------------------------------------
# HELPERS
# -------------------------------------------------
def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def response_points(value) -> Tuple[float, float]:
    """Return (points, max_points) for a single response value."""
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return (5.0 if value else 0.0), 5.0
    if isinstance(value, (int, float)):
        return min(5.0, max(0.0, float(value))), 5.0
    if isinstance(value, (list, tuple)):
        return 2.0 * len(value), 10.0
    return 3.0, 5.0


def _score(responses: Iterable[QuestionResponse]) -> int:
    total = 0.0
    maximum = 0.0
    for response in responses:
        points, max_points = response_points(response.value)
        total += points
        maximum += max_points
    if maximum == 0:
        return 0
    return round_half_up(total / maximum * 100)


def calculate_category_score(responses: Iterable[QuestionResponse]) -> int:
    """0-100 score for a set of responses; 0 when there are none."""
    return _score(responses)


def determine_position(score: float) -> ScorePosition:
    for position, threshold in SCORE_THRESHOLDS.items():
        if score >= threshold:
            return position
    return ScorePosition.CRITICAL


def parse_discipline(value) -> DisciplineType:
    """Soft parse: unknown disciplines fall back to the benchmark default."""
    try:
        return DisciplineType.parse(value)
    except (ValueError, TypeError):
        logger.debug("Unknown discipline %r, using %s", value, DEFAULT_DISCIPLINE.value)
        return DEFAULT_DISCIPLINE


def parse_size(value) -> PracticeSize:
    try:
        return PracticeSize.parse(value)
    except (ValueError, TypeError):
        logger.debug("Unknown practice size %r, using %s", value, DEFAULT_SIZE.value)
        return DEFAULT_SIZE


def parse_country(value) -> Country:
    try:
        return Country.parse(value)
    except (ValueError, TypeError):
        logger.debug("Unknown country %r, using %s", value, Country.OTHER.value)
        return Country.OTHER


def coerce_progress(progress: ProgressInput) -> AssessmentProgress:
    if isinstance(progress, AssessmentProgress):
        return progress
    return AssessmentProgress.from_responses(progress or {})


# -------------------------------------------------
# TOPIC BREAKDOWN
# -------------------------------------------------
def topic_scores(category: Category, responses: Sequence[QuestionResponse]) -> List[Tuple[str, int]]:
    """
    Score each topic of a category from the responses tagged to it.

    Topics with no matching responses are omitted. Order follows topic
    declaration order.
    """
    topics = CATEGORY_TOPICS.get(category, ())
    buckets: Dict[str, List[QuestionResponse]] = {name: [] for name, _ in topics}

    for response in responses:
        qid = str(response.question_id).lower()
        for name, tags in topics:
            if any(tag in qid for tag in tags):
                buckets[name].append(response)
                break

    return [(name, _score(buckets[name])) for name, _ in topics if buckets[name]]


def identify_strengths_and_weaknesses(
    category: Category,
    responses: Sequence[QuestionResponse],
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    scored = topic_scores(category, responses)
    indexed = [(idx, name, score) for idx, (name, score) in enumerate(scored)]

    strong = [t for t in indexed if t[2] >= TOPIC_STRENGTH_THRESHOLD]
    weak = [t for t in indexed if t[2] < TOPIC_STRENGTH_THRESHOLD]

    strong.sort(key=lambda t: (-t[2], t[0]))
    weak.sort(key=lambda t: (t[2], t[0]))

    strengths = tuple(name for _, name, _ in strong[:MAX_TOPICS_LISTED])
    weaknesses = tuple(name for _, name, _ in weak[:MAX_TOPICS_LISTED])
    return strengths, weaknesses


# -------------------------------------------------
# BENCHMARK LOOKUPS
# -------------------------------------------------
def get_benchmarks(discipline, size) -> Benchmarks:
    by_size = HEALTH_BENCHMARKS.get(parse_discipline(discipline), HEALTH_BENCHMARKS[DEFAULT_DISCIPLINE])
    row = by_size.get(parse_size(size), by_size[DEFAULT_SIZE])
    return Benchmarks(
        industry=row.industry,
        similar_size=row.industry,
        top_performers=row.top_performers,
    )


def get_geographic_adjustment(region: str) -> GeographicAdjustment:
    # Case-sensitive on purpose: callers normalise region strings.
    for token, factor in GEOGRAPHIC_ADJUSTMENTS:
        if token in region:
            return GeographicAdjustment(region=region, adjustment_factor=factor)
    return GeographicAdjustment(region=region, adjustment_factor=DEFAULT_GEOGRAPHIC_ADJUSTMENT)


def get_category_metrics(category, size=None) -> List[Dict[str, Any]]:
    """Benchmark metrics for a category; categories without metrics return []."""
    category = Category.parse(category)
    size = parse_size(size) if size is not None else DEFAULT_SIZE
    return [
        {"metric": m.metric, "benchmark": m.value_for(size), "unit": m.unit}
        for m in CATEGORY_METRICS.get(category, ())
    ]


def get_benchmark(category, metric: str, size=None) -> Dict[str, Any]:
    for row in get_category_metrics(category, size):
        if row["metric"].lower() == metric.lower():
            return row
    raise NotFoundError("Benchmark", f"{Category.parse(category).value}/{metric}")


# -------------------------------------------------
# CALCULATOR
# -------------------------------------------------
class BusinessHealthScoreCalculator:
    """Scores an assessment against the static weight and benchmark tables."""

    def calculate_score(
        self,
        progress: ProgressInput,
        discipline=DEFAULT_DISCIPLINE,
        size=DEFAULT_SIZE,
        region: Optional[str] = None,
    ) -> BusinessHealthScore:
        progress = coerce_progress(progress)
        categories = self.calculate_category_scores(progress)
        overall = self.calculate_overall_score(categories)

        geographic = get_geographic_adjustment(region) if region else None

        logger.debug(
            "Scored %d categories for %s: overall=%d",
            len(categories), progress.user_id, overall,
        )

        return BusinessHealthScore(
            overall=overall,
            position=determine_position(overall),
            categories=tuple(categories),
            benchmarks=get_benchmarks(discipline, size),
            geographic_adjustment=geographic,
        )

    def calculate_category_scores(self, progress: AssessmentProgress) -> List[CategoryScore]:
        # dicts keep first-appearance order
        grouped = progress.responses_by_category()

        scores = []
        for category, responses in grouped.items():
            score = calculate_category_score(responses)
            strengths, weaknesses = identify_strengths_and_weaknesses(category, responses)
            scores.append(
                CategoryScore(
                    category=category,
                    score=score,
                    position=determine_position(score),
                    strengths=strengths,
                    weaknesses=weaknesses,
                )
            )
        return scores

    @staticmethod
    def calculate_overall_score(categories: Sequence[CategoryScore]) -> int:
        weighted = 0.0
        total_weight = 0.0
        for entry in categories:
            weight = CATEGORY_WEIGHTS.get(entry.category, 0.0)
            weighted += entry.score * weight
            total_weight += weight

        if total_weight == 0:
            return 0
        return round_half_up(weighted / total_weight)
