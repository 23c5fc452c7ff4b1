"""
app/services/user_ingestion_service.py

Service layer for the user CSV ingestion workflow.

Pipeline for one run:

    1. CSVParser         reads and tokenizes the file; mismatched rows are skipped
    2. RecordBuilder     rebuilds nested records from dot-notation headers
    3. BatchPersister    validates, maps and inserts in batches, one transaction
    4. AgeDistributionService  reports the distribution over all persisted users

Any failure in steps 1-3 aborts the run with nothing committed. An empty
population in step 4 is reported as a missing distribution, not an error.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_user_ingestion_settings
from app.domain.errors import NoDataError, StoreWriteError
from app.domain.user_record import IngestionSummary, ParsedCSV
from app.mappers.record_builder import RecordBuilder
from app.parsers.csv_parser import CSVParser
from app.repositories.user_repository import UserRepository
from app.services.age_distribution_service import AgeDistributionService
from app.services.batch_persister import BatchPersister, ProgressCallback
from db.models.user import User

logger = logging.getLogger(__name__)


class UserIngestionService:
    """
    Coordinates CSV parsing, record building, persistence and reporting.
    """

    def __init__(
        self,
        *,
        batch_size: int,
        log_skipped_rows: bool = True,
        parser: CSVParser | None = None,
        builder: RecordBuilder | None = None,
        persister: BatchPersister | None = None,
        distribution_service: AgeDistributionService | None = None,
    ) -> None:
        self._parser = parser or CSVParser(log_skipped_rows=log_skipped_rows)
        self._builder = builder or RecordBuilder()
        self._persister = persister or BatchPersister(batch_size=batch_size)
        self._distribution_service = distribution_service or AgeDistributionService()

    def ingest_file(
        self,
        *,
        db: Session,
        path: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> IngestionSummary:
        """
        Run the full pipeline against a CSV file on disk.
        """

        return self._run(db=db, parsed=self._parser.parse_file(path), on_progress=on_progress)

    def ingest_content(
        self,
        *,
        db: Session,
        content: str,
        on_progress: ProgressCallback | None = None,
    ) -> IngestionSummary:
        """
        Run the full pipeline against in-memory CSV text.
        """

        return self._run(db=db, parsed=self._parser.parse_content(content), on_progress=on_progress)

    def list_users(self, *, db: Session) -> list[User]:
        try:
            return UserRepository(db).list_users()
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"Error listing users: {exc}") from exc

    def clear_users(self, *, db: Session) -> None:
        """
        Truncate `users` and reset its id sequence. Safe on an empty table.
        """

        try:
            with db.begin():
                UserRepository(db).clear()
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"Error clearing users: {exc}") from exc
        logger.info("All users cleared from database")

    def _run(
        self,
        *,
        db: Session,
        parsed: ParsedCSV,
        on_progress: ProgressCallback | None,
    ) -> IngestionSummary:
        records = self._builder.build_all(parsed.headers, parsed.rows)

        logger.info("Inserting %d records into database", len(records))
        inserted = self._persister.persist(db=db, records=records, on_progress=on_progress)

        logger.info("Calculating age distribution")
        try:
            distribution = self._distribution_service.calculate(db)
        except NoDataError:
            distribution = None

        return IngestionSummary(
            records_processed=inserted,
            rows_skipped=len(parsed.skipped_rows),
            skipped_rows=list(parsed.skipped_rows),
            age_distribution=distribution,
        )


@lru_cache(maxsize=1)
def get_user_ingestion_service() -> UserIngestionService:
    """
    Build and cache the ingestion service with env-driven settings.
    """
    settings = get_user_ingestion_settings()
    return UserIngestionService(
        batch_size=settings.batch_size,
        log_skipped_rows=settings.log_skipped_rows,
    )
