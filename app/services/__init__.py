"""
app/services package marker.
"""

from app.services.age_distribution_service import (
    AgeDistributionService,
    compute_age_distribution,
    format_distribution_report,
)
from app.services.batch_persister import BatchPersister
from app.services.user_ingestion_service import UserIngestionService, get_user_ingestion_service

__all__ = [
    "AgeDistributionService",
    "BatchPersister",
    "UserIngestionService",
    "compute_age_distribution",
    "format_distribution_report",
    "get_user_ingestion_service",
]
