"""Domain interfaces following Dependency Inversion Principle."""

from autocheckin.domain.interfaces.reservation_client import IReservationClient
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier
from autocheckin.domain.interfaces.message_provider import IMessageProvider

__all__ = [
    "IReservationClient",
    "IReservationRepository",
    "ICheckinJobScheduler",
    "IReservationNotifier",
    "IMessageProvider",
]
