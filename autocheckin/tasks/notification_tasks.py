"""Celery tasks for delivering reservation notifications asynchronously."""
import logging
from typing import Any, Dict
from celery import Task
from autocheckin.infrastructure.celery_app import celery_app
from autocheckin.infrastructure.service_container import ServiceContainer


logger = logging.getLogger(__name__)


class CallbackTask(Task):
    """Custom task class with failure logging."""
    
    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Handle task failure."""
        logger.error(f"Task {task_id} failed: {exc}", exc_info=einfo)


@celery_app.task(
    bind=True,
    base=CallbackTask,
    max_retries=3,
    default_retry_delay=60,
    name="autocheckin.send_reservation_created"
)
def send_reservation_created_task(self, reservation_id: str) -> Dict[str, Any]:
    """
    Send the new reservation notification.
    
    The reservation is reloaded so a reservation deleted in the meantime
    is not announced.
    
    Args:
        self: Task instance (bound task)
        reservation_id: Id of the stored reservation
        
    Returns:
        Processing result dictionary
    """
    container = ServiceContainer()
    try:
        reservation = container.get_reservation_repository().get(reservation_id)
    except Exception as exc:
        logger.error(f"Could not load reservation {reservation_id}: {exc}")
        raise self.retry(exc=exc, countdown=60 * (self.request.retries + 1))
    
    if reservation is None:
        logger.info(f"Reservation {reservation_id} no longer exists, skipping notification")
        return {"status": "skipped", "reservation_id": reservation_id}
    
    container.get_message_notifier().reservation_created(reservation)
    return {"status": "success", "reservation_id": reservation_id}
