"""Use case for deleting a reservation and its pending check-ins."""
import logging
from typing import Optional

from autocheckin.domain.entities.reservation import Reservation
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository


logger = logging.getLogger(__name__)


class DeleteReservationUseCase:
    """
    Remove a reservation aggregate, then cancel the check-in jobs of its flights.
    
    Cancellation runs after the delete so a failed delete leaves the jobs
    in place for a reservation that still exists.
    """
    
    def __init__(
        self,
        reservation_repository: IReservationRepository,
        job_scheduler: ICheckinJobScheduler
    ):
        self.reservation_repository = reservation_repository
        self.job_scheduler = job_scheduler
    
    def execute(self, confirmation_number: str) -> Optional[Reservation]:
        """
        Delete the reservation stored under a confirmation number.
        
        Returns:
            The deleted reservation, or None if none was stored
        """
        reservation = self.reservation_repository.find_by_confirmation_number(
            (confirmation_number or "").strip().upper()
        )
        if reservation is None:
            return None
        
        deleted = self.reservation_repository.delete(reservation.id)
        if deleted is None:
            return None
        
        for flight in deleted.flights:
            if not self.job_scheduler.cancel_checkin(flight.id):
                logger.warning(
                    f"Could not cancel check-in job for flight {flight.flight_number} "
                    f"of {deleted.confirmation_number}"
                )
        
        logger.info(f"Reservation {deleted.confirmation_number} deleted")
        return deleted
