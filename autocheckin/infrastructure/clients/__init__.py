"""External API clients module."""
from autocheckin.infrastructure.clients.mock_reservation_client import MockReservationClient
from autocheckin.infrastructure.clients.southwest_reservation_client import SouthwestReservationClient

__all__ = [
    "MockReservationClient",
    "SouthwestReservationClient",
]
