from datetime import datetime

from dateutil.relativedelta import relativedelta

from practicehealth.core.enums import ReviewFrequency

REVIEW_INTERVALS = {
    ReviewFrequency.MONTHLY: relativedelta(months=1),
    ReviewFrequency.QUARTERLY: relativedelta(months=3),
    ReviewFrequency.BIANNUALLY: relativedelta(months=6),
    ReviewFrequency.ANNUALLY: relativedelta(years=1),
}


def next_review_date(frequency, start: datetime) -> datetime:
    """Calendar-aware: Jan 31 + 1 month is Feb 28/29, not Mar 3."""
    return start + REVIEW_INTERVALS[ReviewFrequency.parse(frequency)]
