"""Interface for airline reservation retrieval clients (Adapter Pattern).

This allows switching between the live airline API and an in-memory
client for development and tests.
"""
from abc import ABC, abstractmethod

from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation


class IReservationClient(ABC):
    """Interface for retrieving the authoritative reservation from the airline."""
    
    @abstractmethod
    def retrieve_reservation(
        self,
        last_name: str,
        first_name: str,
        confirmation_number: str
    ) -> RetrievedReservation:
        """
        Retrieve a reservation document.
        
        Business rejections (wrong name, cancelled, ...) are returned as
        error documents, not raised.
        
        Args:
            last_name: Traveler last name
            first_name: Traveler first name
            confirmation_number: Six character record locator
            
        Returns:
            Retrieved reservation document
            
        Raises:
            RetrievalUnavailableError: If the airline cannot be reached or times out
        """
        pass
