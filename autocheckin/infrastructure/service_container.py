"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from autocheckin.application.services.checkin_scheduler import CheckinScheduler
from autocheckin.application.use_cases.delete_reservation_use_case import DeleteReservationUseCase
from autocheckin.application.use_cases.ingest_reservation_use_case import IngestReservationUseCase
from autocheckin.application.use_cases.record_checkin_use_case import RecordCheckinUseCase
from autocheckin.config.settings import Config
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler
from autocheckin.domain.interfaces.message_provider import IMessageProvider
from autocheckin.domain.interfaces.reservation_client import IReservationClient
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository
from autocheckin.infrastructure.factories.provider_factory import ProviderFactory
from autocheckin.infrastructure.notifiers.reservation_notifiers import MessageReservationNotifier
from autocheckin.infrastructure.schedulers.celery_checkin_scheduler import CeleryCheckinJobScheduler


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.
    
    Follows Singleton pattern; collaborators are created on first use
    from configuration.
    """
    
    _instance: Optional['ServiceContainer'] = None
    _config: type = Config
    _reservation_client: Optional[IReservationClient] = None
    _reservation_repository: Optional[IReservationRepository] = None
    _job_scheduler: Optional[ICheckinJobScheduler] = None
    _message_provider: Optional[IMessageProvider] = None
    _notifier: Optional[IReservationNotifier] = None
    
    def __new__(cls, config: Optional[type] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        if config is not None:
            cls._config = config
        return cls._instance
    
    def __init__(self, config: Optional[type] = None):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
    
    def get_reservation_client(self) -> IReservationClient:
        """Get or create reservation retrieval client."""
        if self._reservation_client is None:
            client_type = self._config.RESERVATION_CLIENT
            ServiceContainer._reservation_client = ProviderFactory.create_reservation_client(client_type)
            self._logger.info(f"ReservationClient created: {client_type}")
        return self._reservation_client
    
    def get_reservation_repository(self) -> IReservationRepository:
        """Get or create reservation repository."""
        if self._reservation_repository is None:
            storage_type = self._config.RESERVATION_STORAGE_TYPE
            ServiceContainer._reservation_repository = ProviderFactory.create_reservation_repository(storage_type)
            self._logger.info(f"ReservationRepository created with {storage_type}")
        return self._reservation_repository
    
    def get_job_scheduler(self) -> ICheckinJobScheduler:
        """Get or create check-in job scheduler."""
        if self._job_scheduler is None:
            ServiceContainer._job_scheduler = CeleryCheckinJobScheduler()
            self._logger.info("CheckinJobScheduler created")
        return self._job_scheduler
    
    def get_message_provider(self) -> IMessageProvider:
        """Get or create message provider."""
        if self._message_provider is None:
            ServiceContainer._message_provider = ProviderFactory.create_message_provider("whatsapp")
            self._logger.info("MessageProvider created: whatsapp")
        return self._message_provider
    
    def get_notifier(self) -> IReservationNotifier:
        """Get or create the notifier used right after ingestion."""
        if self._notifier is None:
            notifier_type = self._config.NOTIFIER_TYPE
            message_provider = self.get_message_provider() if notifier_type.lower() != "none" else None
            ServiceContainer._notifier = ProviderFactory.create_notifier(notifier_type, message_provider)
            self._logger.info(f"ReservationNotifier created: {notifier_type}")
        return self._notifier
    
    def get_message_notifier(self) -> IReservationNotifier:
        """Notifier that delivers inline; used by the notification task."""
        return MessageReservationNotifier(self.get_message_provider())
    
    def get_checkin_scheduler(self) -> CheckinScheduler:
        return CheckinScheduler(job_scheduler=self.get_job_scheduler())
    
    def get_ingest_reservation_use_case(self) -> IngestReservationUseCase:
        """Build the ingestion use case from shared collaborators."""
        return IngestReservationUseCase(
            reservation_client=self.get_reservation_client(),
            reservation_repository=self.get_reservation_repository(),
            checkin_scheduler=self.get_checkin_scheduler(),
            notifier=self.get_notifier()
        )
    
    def get_delete_reservation_use_case(self) -> DeleteReservationUseCase:
        return DeleteReservationUseCase(
            reservation_repository=self.get_reservation_repository(),
            job_scheduler=self.get_job_scheduler()
        )
    
    def get_record_checkin_use_case(self) -> RecordCheckinUseCase:
        return RecordCheckinUseCase(reservation_repository=self.get_reservation_repository())
    
    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._config = Config
        cls._reservation_client = None
        cls._reservation_repository = None
        cls._job_scheduler = None
        cls._message_provider = None
        cls._notifier = None
