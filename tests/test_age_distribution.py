"""
tests/test_age_distribution.py

Pytest unit tests for bucket placement, percentages and the report.
"""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from app.domain.errors import NoDataError
from app.domain.user_record import UserRow
from app.repositories.user_repository import UserRepository
from app.services.age_distribution_service import (
    BUCKET_KEYS,
    AgeDistributionService,
    bucket_for_age,
    compute_age_distribution,
    format_distribution_report,
)


class TestBucketPlacement:
    @pytest.mark.parametrize(
        ("age", "bucket"),
        [
            (0, "less_than_20"),
            (19, "less_than_20"),
            (20, "20_to_40"),
            (39, "20_to_40"),
            (40, "40_to_60"),
            (60, "40_to_60"),
            (61, "greater_than_60"),
            (120, "greater_than_60"),
        ],
    )
    def test_boundaries(self, age: int, bucket: str) -> None:
        assert bucket_for_age(age) == bucket

    def test_counts_sum_to_total(self) -> None:
        rng = random.Random(7)
        ages = [rng.randint(0, 100) for _ in range(500)]

        distribution = compute_age_distribution(ages)

        assert sum(distribution.counts.values()) == distribution.total == 500


class TestPercentages:
    def test_example_population(self) -> None:
        distribution = compute_age_distribution([15, 45, 70])

        assert distribution.counts == {
            "less_than_20": 1,
            "20_to_40": 0,
            "40_to_60": 1,
            "greater_than_60": 1,
        }
        assert distribution.percentages == {
            "less_than_20": Decimal("33.33"),
            "20_to_40": Decimal("0.00"),
            "40_to_60": Decimal("33.33"),
            "greater_than_60": Decimal("33.33"),
        }

    def test_half_up_rounding(self) -> None:
        # 1/32 = 3.125%
        ages = [10] + [30] * 31
        distribution = compute_age_distribution(ages)

        assert distribution.percentages["less_than_20"] == Decimal("3.13")

    def test_percentages_have_two_places(self) -> None:
        distribution = compute_age_distribution([25, 25])

        assert str(distribution.percentages["20_to_40"]) == "100.00"
        assert str(distribution.percentages["greater_than_60"]) == "0.00"

    def test_empty_population_signals_no_data(self) -> None:
        with pytest.raises(NoDataError) as exc_info:
            compute_age_distribution([])

        assert exc_info.value.message == "No users found"


class TestReport:
    def test_report_lists_every_bucket(self) -> None:
        report = format_distribution_report(compute_age_distribution([15, 45, 70]))
        lines = report.splitlines()

        assert "AGE DISTRIBUTION REPORT" in lines
        assert "Total Users: 3" in lines
        assert lines[-1] == "=" * 60
        assert any(line.startswith("< 20") and line.endswith("1") for line in lines)
        assert any(line.startswith("20 to 40") and "0.00%" in line for line in lines)
        assert len([line for line in lines if "%" in line and "Distribution" not in line]) == len(BUCKET_KEYS)


class TestAgeDistributionService:
    def test_reads_persisted_ages(self, db, session_factory, caplog) -> None:
        with db.begin():
            UserRepository(db).insert_batch(
                [UserRow(name="A B", age=age, address=None, additional_info=None) for age in (15, 45, 70)]
            )

        with session_factory() as session, caplog.at_level("INFO"):
            distribution = AgeDistributionService().calculate(session)

        assert distribution.total == 3
        assert "AGE DISTRIBUTION REPORT" in caplog.text

    def test_empty_table_signals_no_data(self, db) -> None:
        with pytest.raises(NoDataError):
            AgeDistributionService().calculate(db)
