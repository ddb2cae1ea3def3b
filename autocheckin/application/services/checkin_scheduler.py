"""Selection of flights that get an automatic check-in."""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from autocheckin.domain.entities.reservation import Flight, Reservation
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler
from autocheckin.middleware.monitoring import track_checkin_scheduled


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CheckinScheduler:
    """
    Queue check-in jobs for the first leg of each direction.
    
    Only legs at position 1 that have not departed yet are eligible;
    connecting legs are checked in together with their first leg by the
    worker. When the job fires is the job scheduler's business.
    """
    
    def __init__(
        self,
        job_scheduler: ICheckinJobScheduler,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.job_scheduler = job_scheduler
        self.clock = clock or utcnow
        self._logger = logging.getLogger(__name__)
    
    def eligible_flights(self, reservation: Reservation, now: Optional[datetime] = None) -> List[Flight]:
        now = now or self.clock()
        return [
            flight for flight in reservation.flights
            if flight.position == 1 and flight.departure_time > now
        ]
    
    def schedule(self, reservation: Reservation) -> List[Flight]:
        """
        Request check-in for every eligible flight of a committed reservation.
        
        Returns:
            Flights whose job was accepted by the job scheduler
        """
        scheduled = []
        for flight in self.eligible_flights(reservation):
            job_id = self.job_scheduler.schedule_checkin(
                reservation_id=reservation.id,
                flight_id=flight.id,
                departure_time=flight.departure_time
            )
            if job_id is None:
                self._logger.error(
                    f"Check-in for flight {flight.flight_number} of {reservation.confirmation_number} "
                    f"could not be scheduled"
                )
                continue
            track_checkin_scheduled(flight.direction)
            self._logger.info(
                f"Scheduled check-in for {reservation.confirmation_number} flight {flight.flight_number} "
                f"({flight.direction}) departing {flight.departure_time.isoformat()}: job {job_id}"
            )
            scheduled.append(flight)
        return scheduled
