"""Use case for recording check-in outcomes reported by the worker."""
import logging
from typing import Optional

from autocheckin.domain.entities.reservation import Checkin, Reservation
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository


logger = logging.getLogger(__name__)


class RecordCheckinUseCase:
    """Attach a check-in outcome to a flight of a stored reservation."""
    
    def __init__(self, reservation_repository: IReservationRepository):
        self.reservation_repository = reservation_repository
    
    def execute(self, confirmation_number: str, flight_id: str, status: str) -> Optional[Reservation]:
        """
        Record an outcome.
        
        Returns:
            The updated reservation, or None if reservation or flight is unknown
            
        Raises:
            ValueError: If the status is not a known check-in status
        """
        reservation = self.reservation_repository.find_by_confirmation_number(
            (confirmation_number or "").strip().upper()
        )
        if reservation is None or reservation.find_flight(flight_id) is None:
            return None
        
        checkin = Checkin(flight_id=flight_id, status=status)
        updated = self.reservation_repository.add_checkin(reservation.id, checkin)
        if updated is not None:
            logger.info(f"Check-in {status} recorded for {reservation.confirmation_number} flight {flight_id}")
        return updated
