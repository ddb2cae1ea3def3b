"""Interface for reservation storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional

from autocheckin.domain.entities.reservation import Checkin, Reservation


class IReservationRepository(ABC):
    """
    Interface for reservation aggregate storage.
    
    The aggregate (reservation, passengers, flights) is written and removed
    as one unit; implementations must never expose a partial aggregate.
    """
    
    @abstractmethod
    def create(self, reservation: Reservation) -> Reservation:
        """
        Atomically store a new reservation aggregate.
        
        Args:
            reservation: Fully assembled aggregate
            
        Returns:
            The stored reservation with ``committed_at`` set
            
        Raises:
            DuplicateReservationError: If the confirmation number is already stored
            PersistenceFailureError: If the storage backend fails
        """
        pass
    
    @abstractmethod
    def get(self, reservation_id: str) -> Optional[Reservation]:
        """Return the reservation with the given id, or None."""
        pass
    
    @abstractmethod
    def find_by_confirmation_number(self, confirmation_number: str) -> Optional[Reservation]:
        """Return the reservation stored under an (uppercase) confirmation number, or None."""
        pass
    
    @abstractmethod
    def list_ordered_by_departure_time(self) -> List[Reservation]:
        """
        Return every stored reservation, earliest outbound departure first.
        
        Reservations without outbound flights come last.
        """
        pass
    
    @abstractmethod
    def delete(self, reservation_id: str) -> Optional[Reservation]:
        """
        Remove a reservation together with its passengers, flights and check-ins.
        
        Returns:
            The removed reservation, or None if it did not exist
        """
        pass
    
    @abstractmethod
    def add_checkin(self, reservation_id: str, checkin: Checkin) -> Optional[Reservation]:
        """
        Attach a check-in outcome to one of the reservation's flights.
        
        Returns:
            The updated reservation, or None if reservation or flight is unknown
        """
        pass
