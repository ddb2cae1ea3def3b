"""Interface for new reservation notifications."""
from abc import ABC, abstractmethod

from autocheckin.domain.entities.reservation import Reservation


class IReservationNotifier(ABC):
    """Notifies the traveler that a reservation was ingested. Best effort."""
    
    @abstractmethod
    def reservation_created(self, reservation: Reservation) -> None:
        """
        Announce a newly stored reservation.
        
        Implementations must not raise for delivery problems.
        """
        pass
