"""Application use cases."""
from autocheckin.application.use_cases.ingest_reservation_use_case import (
    IngestionRequest,
    IngestionResult,
    IngestReservationUseCase,
)
from autocheckin.application.use_cases.delete_reservation_use_case import DeleteReservationUseCase
from autocheckin.application.use_cases.record_checkin_use_case import RecordCheckinUseCase

__all__ = [
    "IngestionRequest",
    "IngestionResult",
    "IngestReservationUseCase",
    "DeleteReservationUseCase",
    "RecordCheckinUseCase",
]
