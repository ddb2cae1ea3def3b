"""Check-in job scheduling on Celery."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from celery import Celery

from autocheckin.config.settings import Config
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler


@dataclass
class CheckinTimingPolicy:
    """
    When a check-in job fires relative to departure.
    
    The airline opens check-in ``open_before`` ahead of departure; ``offset``
    shifts the fire time from that moment (negative fires earlier).
    """
    open_before: timedelta = timedelta(hours=24)
    offset: timedelta = timedelta(0)
    
    @classmethod
    def from_config(cls) -> "CheckinTimingPolicy":
        return cls(
            open_before=timedelta(hours=Config.CHECKIN_OPEN_HOURS),
            offset=timedelta(seconds=Config.CHECKIN_OFFSET_SECONDS)
        )
    
    def fire_time(self, departure_time: datetime, now: datetime) -> datetime:
        """Fire time for a departure; a window that is already open fires now."""
        return max(departure_time - self.open_before + self.offset, now)


class CeleryCheckinJobScheduler(ICheckinJobScheduler):
    """
    Queue check-in jobs for the execution worker.
    
    Jobs are sent by task name, so the worker that executes check-ins can
    live in another code base. Each flight gets a deterministic task id so
    its job can be revoked knowing only the flight.
    """
    
    def __init__(
        self,
        celery: Optional[Celery] = None,
        policy: Optional[CheckinTimingPolicy] = None,
        task_name: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        if celery is None:
            from autocheckin.infrastructure.celery_app import celery_app
            celery = celery_app
        self.celery = celery
        self.policy = policy or CheckinTimingPolicy.from_config()
        self.task_name = task_name or Config.CHECKIN_TASK_NAME
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logging.getLogger(__name__)
    
    @staticmethod
    def task_id_for(flight_id: str) -> str:
        return f"checkin-{flight_id}"
    
    def schedule_checkin(
        self,
        reservation_id: str,
        flight_id: str,
        departure_time: datetime
    ) -> Optional[str]:
        fire_at = self.policy.fire_time(departure_time, self.clock())
        task_id = self.task_id_for(flight_id)
        try:
            self.celery.send_task(
                self.task_name,
                args=[reservation_id, flight_id],
                kwargs={"departure_time": departure_time.isoformat()},
                eta=fire_at,
                task_id=task_id
            )
        except Exception as e:
            self._logger.error(f"Failed to queue check-in job {task_id}: {e}", exc_info=True)
            return None
        
        self._logger.info(f"Check-in job {task_id} queued for {fire_at.isoformat()}")
        return task_id
    
    def cancel_checkin(self, flight_id: str) -> bool:
        task_id = self.task_id_for(flight_id)
        try:
            self.celery.control.revoke(task_id)
        except Exception as e:
            self._logger.error(f"Failed to revoke check-in job {task_id}: {e}")
            return False
        self._logger.info(f"Check-in job {task_id} revoked")
        return True
