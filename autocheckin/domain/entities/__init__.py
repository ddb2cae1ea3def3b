"""Domain entities - core business objects."""
from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation, payload_is_international
from autocheckin.domain.entities.reservation import (
    Checkin,
    Flight,
    Passenger,
    Reservation,
    DEPARTURE,
    RETURN,
)

__all__ = [
    "RetrievedReservation",
    "payload_is_international",
    "Checkin",
    "Flight",
    "Passenger",
    "Reservation",
    "DEPARTURE",
    "RETURN",
]
