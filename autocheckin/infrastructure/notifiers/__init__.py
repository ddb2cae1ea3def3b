"""Reservation notifier implementations."""
from autocheckin.infrastructure.notifiers.reservation_notifiers import (
    CeleryReservationNotifier,
    MessageReservationNotifier,
    NullReservationNotifier,
)

__all__ = [
    "CeleryReservationNotifier",
    "MessageReservationNotifier",
    "NullReservationNotifier",
]
