"""Mock implementation of the reservation client for development."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation
from autocheckin.domain.interfaces.reservation_client import IReservationClient


def _segment(flight_number: str, origin: str, destination: str, city: str, departure: datetime) -> Dict[str, Any]:
    return {
        "flightNumber": flight_number,
        "departureAirportCode": origin,
        "arrivalAirportCode": destination,
        "arrivalCityName": city,
        "departureDateTime": departure.isoformat(),
        "marketingCarrierCode": "WN",
    }


class MockReservationClient(IReservationClient):
    """
    In-memory reservation client.
    
    Known reservations are keyed by (confirmation number, first name, last
    name); any other combination answers like a mistyped lookup.
    """
    
    def __init__(self):
        """Initialize mock client with sample reservations."""
        self._documents: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)
        self._initialize_mock_data()
    
    def _initialize_mock_data(self) -> None:
        now = datetime.now(timezone.utc).replace(second=0, microsecond=0)
        outbound = now + timedelta(days=10)
        inbound = now + timedelta(days=14)
        
        self.register("AB12CD", "John", "Smith", {
            "body": {
                "recordLocator": "AB12CD",
                "isInternationalPNR": "false",
                "passengers": [
                    {"firstName": "John", "lastName": "Smith", "accountNumber": "601234567"},
                    {"firstName": "Jane", "lastName": "Smith"},
                ],
                "itinerary": {
                    "departure": {"segments": [
                        _segment("1234", "DAL", "HOU", "Houston, TX", outbound),
                        _segment("2345", "HOU", "DEN", "Denver, CO", outbound + timedelta(hours=3)),
                    ]},
                    "return": {"segments": [
                        _segment("3456", "DEN", "HOU", "Houston, TX", inbound),
                        _segment("4567", "HOU", "DAL", "Dallas, TX", inbound + timedelta(hours=3)),
                    ]},
                },
            }
        })
        self.register("CX9INT", "Maria", "Lopez", {
            "body": {
                "recordLocator": "CX9INT",
                "isInternationalPNR": "true",
                "passengers": [{"firstName": "Maria", "lastName": "Lopez"}],
                "itinerary": {
                    "departure": {"segments": [
                        _segment("1701", "HOU", "CUN", "Cancun, MX", outbound),
                    ]},
                },
            }
        })
        self.register("ZZ9CAN", "Alex", "Kim", {
            "errmsg": "This reservation has been cancelled.",
            "code": "SW107024",
        })
    
    def register(self, confirmation_number: str, first_name: str, last_name: str, document: Dict[str, Any]) -> None:
        self._documents[self._key(confirmation_number, first_name, last_name)] = document
    
    @staticmethod
    def _key(confirmation_number: str, first_name: str, last_name: str) -> Tuple[str, str, str]:
        return (confirmation_number.upper(), first_name.strip().lower(), last_name.strip().lower())
    
    def retrieve_reservation(
        self,
        last_name: str,
        first_name: str,
        confirmation_number: str
    ) -> RetrievedReservation:
        self._logger.info(f"Mock: Retrieving reservation {confirmation_number} for {first_name} {last_name}")
        document: Optional[Dict[str, Any]] = self._documents.get(
            self._key(confirmation_number, first_name, last_name)
        )
        if document is None:
            return RetrievedReservation(
                {
                    "errmsg": "We were unable to retrieve your reservation from our database.",
                    "code": "SW107023",
                },
                status_code=404
            )
        return RetrievedReservation(dict(document))
