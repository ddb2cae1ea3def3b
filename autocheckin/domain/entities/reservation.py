"""Reservation aggregate: reservation, passengers, flights and check-ins."""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from autocheckin.domain.entities.retrieved_reservation import payload_is_international


DEPARTURE = "departure"
RETURN = "return"
DIRECTIONS = (DEPARTURE, RETURN)

CONFIRMATION_NUMBER_LENGTH = 6

CHECKIN_PENDING = "pending"
CHECKIN_COMPLETED = "completed"
CHECKIN_FAILED = "failed"
CHECKIN_STATUSES = (CHECKIN_PENDING, CHECKIN_COMPLETED, CHECKIN_FAILED)


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Checkin:
    """One outcome reported by the check-in worker for a flight."""
    
    flight_id: str
    status: str = CHECKIN_PENDING
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utcnow)
    
    def __post_init__(self):
        """Validate checkin entity."""
        if not self.flight_id:
            raise ValueError("flight_id is required")
        if self.status not in CHECKIN_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
    
    @property
    def completed(self) -> bool:
        return self.status == CHECKIN_COMPLETED


@dataclass
class Passenger:
    """Domain entity representing a traveler on the reservation."""
    
    first_name: str
    last_name: str
    account_number: Optional[str] = None
    boarding_group: Optional[str] = None
    boarding_position: Optional[int] = None
    id: str = field(default_factory=_new_id)
    
    def __post_init__(self):
        """Validate passenger entity."""
        if not self.first_name:
            raise ValueError("first_name is required")
        if not self.last_name:
            raise ValueError("last_name is required")
    
    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"
    
    def validation_errors(self) -> List[str]:
        errors = []
        if not (self.first_name or "").strip():
            errors.append("first name can't be blank")
        if not (self.last_name or "").strip():
            errors.append("last name can't be blank")
        return errors


@dataclass
class Flight:
    """Domain entity representing one leg of the itinerary."""
    
    direction: str
    position: int
    departure_time: datetime
    arrival_city_name: str
    flight_number: str
    departure_airport_code: str
    arrival_airport_code: str
    carrier_code: str = "WN"
    id: str = field(default_factory=_new_id)
    checkins: List[Checkin] = field(default_factory=list)
    
    def __post_init__(self):
        """Validate flight entity."""
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {self.direction}")
        if self.position < 1:
            raise ValueError("position must be 1 or greater")
        if not isinstance(self.departure_time, datetime):
            raise ValueError("departure_time must be a datetime")
        if self.departure_time.tzinfo is None:
            raise ValueError("departure_time must be timezone aware")
        if not self.flight_number:
            raise ValueError("flight_number is required")
    
    @property
    def first_leg(self) -> bool:
        return self.position == 1


@dataclass
class Reservation:
    """
    Aggregate root for an airline reservation.
    
    Owns its passengers and flights; they are stored and deleted with it.
    Built by the ingestion use case from a retrieved document, never from
    arbitrary attributes.
    """
    
    confirmation_number: str
    first_name: str
    last_name: str
    payload: Dict[str, Any]
    arrival_city_name: Optional[str] = None
    phone_number: Optional[str] = None
    passengers: List[Passenger] = field(default_factory=list)
    flights: List[Flight] = field(default_factory=list)
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_utcnow)
    committed_at: Optional[datetime] = None
    
    def validation_errors(self) -> Dict[str, List[str]]:
        """Collect invariant violations, keyed by attribute."""
        errors: Dict[str, List[str]] = {}
        
        def add(attribute: str, message: str) -> None:
            errors.setdefault(attribute, []).append(message)
        
        if not self.confirmation_number:
            add("confirmation_number", "can't be blank")
        elif len(self.confirmation_number) != CONFIRMATION_NUMBER_LENGTH:
            add(
                "confirmation_number",
                f"is the wrong length (should be {CONFIRMATION_NUMBER_LENGTH} characters)"
            )
        if not (self.first_name or "").strip():
            add("first_name", "can't be blank")
        if not (self.last_name or "").strip():
            add("last_name", "can't be blank")
        if not self.payload:
            add("payload", "can't be blank")
        
        if any(passenger.validation_errors() for passenger in self.passengers):
            add("passengers", "is invalid")
        
        seen = set()
        for flight in self.flights:
            key = (flight.direction, flight.position)
            if key in seen:
                add("flights", f"has more than one {flight.direction} leg at position {flight.position}")
            seen.add(key)
        
        return errors
    
    def is_valid(self) -> bool:
        return not self.validation_errors()
    
    def departure_flights(self) -> List[Flight]:
        return sorted(
            (flight for flight in self.flights if flight.direction == DEPARTURE),
            key=lambda flight: flight.departure_time
        )
    
    def return_flights(self) -> List[Flight]:
        return sorted(
            (flight for flight in self.flights if flight.direction == RETURN),
            key=lambda flight: flight.departure_time
        )
    
    @property
    def time(self) -> Optional[datetime]:
        """Departure time of the earliest outbound leg, if any."""
        departures = self.departure_flights()
        return departures[0].departure_time if departures else None
    
    @property
    def international(self) -> bool:
        return payload_is_international(self.payload)
    
    @property
    def checkins(self) -> List[Checkin]:
        return [checkin for flight in self.flights for checkin in flight.checkins]
    
    @property
    def checkins_completed(self) -> bool:
        checkins = self.checkins
        return len(checkins) == len([checkin for checkin in checkins if checkin.completed])
    
    def find_flight(self, flight_id: str) -> Optional[Flight]:
        for flight in self.flights:
            if flight.id == flight_id:
                return flight
        return None
