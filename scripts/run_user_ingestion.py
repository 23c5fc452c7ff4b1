"""
Run the user CSV ingestion pipeline from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from app.config import get_user_ingestion_settings
from app.domain.errors import UserIngestionError
from app.services.user_ingestion_service import UserIngestionService
from db.session import SessionLocal


def main() -> int:
    parser = argparse.ArgumentParser(description="Ingest a users CSV file into the database.")
    parser.add_argument(
        "--file",
        dest="file",
        type=Path,
        default=None,
        help="CSV file to ingest. Defaults to CSV_FILE_PATH.",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Truncate the users table before ingesting.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    settings = get_user_ingestion_settings()
    service = UserIngestionService(
        batch_size=settings.batch_size,
        log_skipped_rows=settings.log_skipped_rows,
    )
    csv_path = args.file or settings.csv_file_path

    try:
        if args.clear:
            with SessionLocal() as db:
                service.clear_users(db=db)
        with SessionLocal() as db:
            summary = service.ingest_file(db=db, path=csv_path)
    except UserIngestionError as exc:
        print(json.dumps({"success": False, **exc.to_dict()}, indent=2))
        return 1

    distribution = summary.age_distribution
    payload = {
        "success": True,
        "file": str(csv_path),
        "records_processed": summary.records_processed,
        "rows_skipped": summary.rows_skipped,
        "age_distribution": (
            {key: str(value) for key, value in distribution.percentages.items()}
            if distribution is not None
            else None
        ),
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
