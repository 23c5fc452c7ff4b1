"""
app/services/batch_persister.py

All-or-nothing batched persistence of user records.

One transaction spans the whole file. Records are mapped and inserted in
fixed-size batches inside it; any mapping or store failure rolls back every
batch of the run, including those already executed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import StoreWriteError
from app.domain.user_record import Record
from app.mappers.schema_mapper import SchemaMapper
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1000

ProgressCallback = Callable[[int, int], None]
RepositoryFactory = Callable[[Session], UserRepository]


class BatchPersister:
    """
    Maps and inserts records in batches within a single transaction.
    """

    def __init__(
        self,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        mapper: SchemaMapper | None = None,
        repository_factory: RepositoryFactory = UserRepository,
    ) -> None:
        self._batch_size = max(1, batch_size)
        self._mapper = mapper or SchemaMapper()
        self._repository_factory = repository_factory

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def persist(
        self,
        *,
        db: Session,
        records: Sequence[Record],
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """
        Persist every record or none of them.

        Returns the number of committed rows. ``on_progress`` receives
        (inserted_so_far, total) after each batch statement.
        """

        repository = self._repository_factory(db)
        total = len(records)
        inserted = 0

        try:
            with db.begin():
                for start in range(0, total, self._batch_size):
                    chunk = records[start : start + self._batch_size]
                    rows = [self._mapper.map_record(record) for record in chunk]
                    try:
                        inserted += repository.insert_batch(rows)
                    except SQLAlchemyError as exc:
                        raise StoreWriteError(
                            f"Database insertion error: {exc}",
                            batch_start=start,
                            batch_size=len(rows),
                        ) from exc

                    logger.info("Inserted %d / %d records", inserted, total)
                    if on_progress is not None:
                        on_progress(inserted, total)
        except SQLAlchemyError as exc:
            logger.error("User ingestion rolled back: commit failed: %s", exc)
            raise StoreWriteError(f"Database insertion error: {exc}") from exc
        except Exception as exc:
            logger.error("User ingestion rolled back after %d staged rows: %s", inserted, exc)
            raise

        logger.info("Successfully inserted %d records into database", inserted)
        return inserted
