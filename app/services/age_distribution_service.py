"""
app/services/age_distribution_service.py

Bucketed age distribution over the persisted user population.

Buckets (disjoint, gap-free):
    less_than_20     age < 20
    20_to_40         20 <= age < 40
    40_to_60         40 <= age <= 60
    greater_than_60  age > 60
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import NoDataError, StoreWriteError
from app.domain.user_record import AgeDistribution
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

LESS_THAN_20 = "less_than_20"
FROM_20_TO_40 = "20_to_40"
FROM_40_TO_60 = "40_to_60"
GREATER_THAN_60 = "greater_than_60"

BUCKET_KEYS: tuple[str, ...] = (LESS_THAN_20, FROM_20_TO_40, FROM_40_TO_60, GREATER_THAN_60)

BUCKET_LABELS: dict[str, str] = {
    LESS_THAN_20: "< 20",
    FROM_20_TO_40: "20 to 40",
    FROM_40_TO_60: "40 to 60",
    GREATER_THAN_60: "> 60",
}

_TWO_PLACES = Decimal("0.01")
_REPORT_WIDTH = 60
_COLUMN_WIDTH = 20


def bucket_for_age(age: int) -> str:
    if age < 20:
        return LESS_THAN_20
    if age < 40:
        return FROM_20_TO_40
    if age <= 60:
        return FROM_40_TO_60
    return GREATER_THAN_60


def compute_age_distribution(ages: Iterable[int]) -> AgeDistribution:
    """
    Count ages per bucket and derive half-up rounded percentages.

    Raises NoDataError when ``ages`` is empty.
    """

    counts = {key: 0 for key in BUCKET_KEYS}
    total = 0
    for age in ages:
        counts[bucket_for_age(age)] += 1
        total += 1

    if total == 0:
        raise NoDataError()

    percentages = {
        key: (Decimal(count) * 100 / Decimal(total)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
        for key, count in counts.items()
    }
    return AgeDistribution(total=total, counts=counts, percentages=percentages)


def format_distribution_report(distribution: AgeDistribution) -> str:
    """
    Render the fixed-width AGE DISTRIBUTION REPORT table.
    """

    lines = [
        "=" * _REPORT_WIDTH,
        "AGE DISTRIBUTION REPORT",
        "=" * _REPORT_WIDTH,
        f"Total Users: {distribution.total}",
        "",
        "Age-Group".ljust(_COLUMN_WIDTH) + "% Distribution".ljust(_COLUMN_WIDTH) + "Count",
        "-" * _REPORT_WIDTH,
    ]
    for key in BUCKET_KEYS:
        lines.append(
            BUCKET_LABELS[key].ljust(_COLUMN_WIDTH)
            + f"{distribution.percentages[key]}%".ljust(_COLUMN_WIDTH)
            + str(distribution.counts[key])
        )
    lines.append("=" * _REPORT_WIDTH)
    return "\n".join(lines)


class AgeDistributionService:
    """
    Reads every persisted age and reports the bucketed distribution.
    """

    def calculate(self, db: Session) -> AgeDistribution:
        try:
            ages = UserRepository(db).fetch_ages()
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"Error calculating age distribution: {exc}") from exc
        finally:
            # Release the implicit read transaction.
            db.rollback()

        try:
            distribution = compute_age_distribution(ages)
        except NoDataError:
            logger.info("No users found in database")
            raise

        logger.info("\n%s", format_distribution_report(distribution))
        return distribution
