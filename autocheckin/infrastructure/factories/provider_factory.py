"""Factory for creating collaborator instances (Factory Pattern)."""
import logging

from autocheckin.domain.interfaces.message_provider import IMessageProvider
from autocheckin.domain.interfaces.reservation_client import IReservationClient
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository
from autocheckin.infrastructure.clients.mock_reservation_client import MockReservationClient
from autocheckin.infrastructure.clients.southwest_reservation_client import SouthwestReservationClient
from autocheckin.infrastructure.notifiers.reservation_notifiers import (
    CeleryReservationNotifier,
    MessageReservationNotifier,
    NullReservationNotifier,
)
from autocheckin.infrastructure.providers.whatsapp_provider import WhatsAppProvider
from autocheckin.infrastructure.redis_client import RedisClientFactory
from autocheckin.infrastructure.repositories.reservation_repository import (
    InMemoryReservationRepository,
    RedisReservationRepository,
)


logger = logging.getLogger(__name__)


class ProviderFactory:
    """
    Factory for creating collaborators following Factory Pattern.
    
    Centralizes creation logic and allows switching implementations by configuration.
    """
    
    @staticmethod
    def create_reservation_client(client_type: str = "southwest") -> IReservationClient:
        """
        Create a reservation retrieval client.
        
        Args:
            client_type: "southwest" or "mock"
            
        Raises:
            ValueError: If client type is not supported
        """
        client_type = client_type.lower()
        if client_type == "southwest":
            return SouthwestReservationClient()
        if client_type == "mock":
            logger.warning("Using mock reservation client")
            return MockReservationClient()
        raise ValueError(f"Unsupported reservation client type: {client_type}")
    
    @staticmethod
    def create_reservation_repository(storage_type: str = "redis") -> IReservationRepository:
        """
        Create a reservation repository.
        
        Args:
            storage_type: "redis" or "memory"
            
        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()
        if storage_type == "redis":
            return RedisReservationRepository(redis_client=RedisClientFactory.get_client())
        if storage_type == "memory":
            logger.warning("Using in-memory reservation storage (reservations won't persist)")
            return InMemoryReservationRepository()
        raise ValueError(f"Unsupported reservation storage type: {storage_type}")
    
    @staticmethod
    def create_message_provider(provider_type: str = "whatsapp") -> IMessageProvider:
        provider_type = provider_type.lower()
        if provider_type == "whatsapp":
            return WhatsAppProvider()
        raise ValueError(f"Unsupported message provider type: {provider_type}")
    
    @staticmethod
    def create_notifier(notifier_type: str, message_provider: IMessageProvider) -> IReservationNotifier:
        """
        Create the new reservation notifier.
        
        Args:
            notifier_type: "celery" (queued, inline fallback), "sync" or "none"
            message_provider: Provider used for delivery
            
        Raises:
            ValueError: If notifier type is not supported
        """
        notifier_type = notifier_type.lower()
        if notifier_type == "celery":
            return CeleryReservationNotifier(fallback=MessageReservationNotifier(message_provider))
        if notifier_type == "sync":
            return MessageReservationNotifier(message_provider)
        if notifier_type == "none":
            return NullReservationNotifier()
        raise ValueError(f"Unsupported notifier type: {notifier_type}")
