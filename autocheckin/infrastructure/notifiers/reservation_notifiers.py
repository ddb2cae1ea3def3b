"""New reservation notifiers."""
import logging
from typing import Optional

from autocheckin.config.settings import Config
from autocheckin.domain.entities.reservation import Reservation
from autocheckin.domain.interfaces.message_provider import IMessageProvider
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier
from autocheckin.utils.reservation_formatter import format_reservation_created


logger = logging.getLogger(__name__)


class MessageReservationNotifier(IReservationNotifier):
    """Send the confirmation text right away through a message provider."""
    
    def __init__(self, message_provider: IMessageProvider, open_hours: Optional[int] = None):
        self.message_provider = message_provider
        self.open_hours = open_hours or Config.CHECKIN_OPEN_HOURS
        self._logger = logging.getLogger(__name__)
    
    def reservation_created(self, reservation: Reservation) -> None:
        if not reservation.phone_number:
            self._logger.info(f"No contact number for {reservation.confirmation_number}, skipping notification")
            return
        
        text = format_reservation_created(reservation, open_hours=self.open_hours)
        result = self.message_provider.send_text_message(recipient=reservation.phone_number, message=text)
        if not result or result.get("status") != "success":
            self._logger.error(f"Failed to notify {reservation.confirmation_number}: {result}")
        else:
            self._logger.info(f"Notified {reservation.confirmation_number}: message {result.get('message_id')}")


class CeleryReservationNotifier(IReservationNotifier):
    """
    Deliver the notification from a Celery worker.
    
    If the task cannot be queued the fallback notifier delivers inline.
    """
    
    def __init__(self, fallback: Optional[IReservationNotifier] = None):
        self.fallback = fallback
        self._logger = logging.getLogger(__name__)
    
    def reservation_created(self, reservation: Reservation) -> None:
        try:
            from autocheckin.tasks.notification_tasks import send_reservation_created_task
            task = send_reservation_created_task.delay(reservation.id)
            self._logger.info(f"Notification for {reservation.confirmation_number} queued: task_id={task.id}")
            return
        except Exception as e:
            self._logger.warning(f"Celery unavailable, notifying synchronously: {e}")
        
        if self.fallback is None:
            return
        try:
            self.fallback.reservation_created(reservation)
        except Exception as e:
            self._logger.error(f"Synchronous notification for {reservation.confirmation_number} failed: {e}")


class NullReservationNotifier(IReservationNotifier):
    """Notifier used when notifications are turned off."""
    
    def reservation_created(self, reservation: Reservation) -> None:
        logger.debug(f"Notifications disabled, not announcing {reservation.confirmation_number}")
