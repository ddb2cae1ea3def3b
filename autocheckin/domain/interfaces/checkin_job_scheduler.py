"""Interface for deferred check-in execution (job scheduling collaborator)."""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class ICheckinJobScheduler(ABC):
    """
    Interface for the collaborator that runs check-in at the right time.
    
    The implementation owns the airline timing rule; callers only say
    which flight and when it departs.
    """
    
    @abstractmethod
    def schedule_checkin(
        self,
        reservation_id: str,
        flight_id: str,
        departure_time: datetime
    ) -> Optional[str]:
        """
        Request check-in for a flight ahead of its departure.
        
        Returns:
            Job identifier, or None if the request could not be queued
        """
        pass
    
    @abstractmethod
    def cancel_checkin(self, flight_id: str) -> bool:
        """
        Cancel the pending check-in job for a flight.
        
        Returns:
            True if the cancellation was requested, False otherwise
        """
        pass
