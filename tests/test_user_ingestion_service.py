"""
tests/test_user_ingestion_service.py

End-to-end pipeline runs against SQLite.
"""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from app.domain.errors import EmptyInputError, MissingFieldError
from app.services.user_ingestion_service import UserIngestionService

HEADER = "name.firstName,name.lastName,age,address.line1,address.city,gender"


@pytest.fixture()
def service() -> UserIngestionService:
    return UserIngestionService(batch_size=2)


def test_ingest_content_persists_and_reports(service, make_csv, db, session_factory) -> None:
    content = make_csv(
        [
            'Rohit,Prasad,15,"A-563, Rakshak Society",Pune,male',
            "Priya,Sharma,45,B-101 Green Park,Mumbai,female",
            "Amit,Kumar,70,C-45 Sector 12,Delhi,male",
        ],
        header=HEADER,
    )

    summary = service.ingest_content(db=db, content=content)

    assert summary.records_processed == 3
    assert summary.rows_skipped == 0
    assert summary.age_distribution is not None
    assert summary.age_distribution.percentages["less_than_20"] == Decimal("33.33")

    with session_factory() as session:
        users = service.list_users(db=session)
    assert users[0].name == "Rohit Prasad"
    assert json.loads(users[0].address) == {"line1": "A-563, Rakshak Society", "city": "Pune"}
    assert json.loads(users[0].additional_info) == {"gender": "male"}


def test_short_row_is_dropped(service, make_csv, db, count_users) -> None:
    content = make_csv(["A,B,30", "C,D", "E,F,50"])

    summary = service.ingest_content(db=db, content=content)

    assert summary.records_processed == 2
    assert summary.rows_skipped == 1
    assert summary.skipped_rows[0].line_number == 3
    assert count_users() == 2


def test_age_with_trailing_text_keeps_leading_integer(service, make_csv, db, session_factory) -> None:
    service.ingest_content(db=db, content=make_csv(["A,B,34 years"]))

    with session_factory() as session:
        users = service.list_users(db=session)
    assert users[0].age == 34


def test_missing_age_after_valid_rows_commits_nothing(service, make_csv, db, count_users) -> None:
    rows = [f"First{i},Last{i},{20 + i}" for i in range(5)] + ["Late,Row,"]

    with pytest.raises(MissingFieldError):
        service.ingest_content(db=db, content=make_csv(rows))

    assert count_users() == 0


def test_empty_file_raises_before_persistence(service, db, tmp_path) -> None:
    path = tmp_path / "users.csv"
    path.write_text("\n\n", encoding="utf-8")

    with pytest.raises(EmptyInputError):
        service.ingest_file(db=db, path=path)


def test_header_only_file_has_no_distribution(service, make_csv, db) -> None:
    summary = service.ingest_content(db=db, content=make_csv([]))

    assert summary.records_processed == 0
    assert summary.age_distribution is None


def test_clear_users_is_idempotent(service, make_csv, session_factory, count_users) -> None:
    with session_factory() as session:
        service.ingest_content(db=session, content=make_csv(["A,B,30"]))

    for _ in range(2):
        with session_factory() as session:
            service.clear_users(db=session)

    assert count_users() == 0
