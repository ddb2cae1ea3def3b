"""Parsers turning an accepted reservation body into entity attributes.

Both parsers are total over well-formed bodies and raise
``MalformedPayloadError`` for anything else; nothing is silently dropped.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from autocheckin.domain.entities.reservation import DEPARTURE, RETURN
from autocheckin.domain.errors import MalformedPayloadError


DEFAULT_CARRIER_CODE = "WN"


def parse_departure_time(value: Any) -> datetime:
    """
    Parse an ISO 8601 departure time.
    
    Values without an offset are taken as UTC.
    """
    if not isinstance(value, str) or not value:
        raise MalformedPayloadError(f"invalid departure time: {value!r}")
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        raise MalformedPayloadError(f"invalid departure time: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require(record: Dict[str, Any], key: str, kind: str) -> Any:
    value = record.get(key)
    if value is None or value == "":
        raise MalformedPayloadError(f"{kind} is missing '{key}'")
    return value


def _optional_int(value: Any, key: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(f"invalid {key}: {value!r}") from e


class PassengersParser:
    """Build passenger attribute records in payload order."""
    
    def __init__(self, body: Dict[str, Any]):
        self.body = body or {}
    
    def passengers(self) -> List[Dict[str, Any]]:
        records = self.body.get("passengers")
        if not isinstance(records, list) or not records:
            raise MalformedPayloadError("reservation has no passengers")
        
        passengers = []
        for record in records:
            if not isinstance(record, dict):
                raise MalformedPayloadError(f"passenger is not an object: {record!r}")
            boarding_position = _optional_int(record.get("boardingPosition"), "boardingPosition")
            passengers.append({
                "first_name": str(_require(record, "firstName", "passenger")).strip(),
                "last_name": str(_require(record, "lastName", "passenger")).strip(),
                "account_number": record.get("accountNumber") or None,
                "boarding_group": record.get("boardingGroup") or None,
                "boarding_position": boarding_position,
            })
        return passengers


class FlightsParser:
    """
    Build flight attribute records for both directions.
    
    Positions restart at 1 in each direction and follow departure order,
    whatever order the airline listed the segments in.
    """
    
    DIRECTION_KEYS = ((DEPARTURE, "departure"), (RETURN, "return"))
    
    def __init__(self, body: Dict[str, Any]):
        self.body = body or {}
    
    def flights(self) -> List[Dict[str, Any]]:
        itinerary = self.body.get("itinerary")
        if not isinstance(itinerary, dict):
            raise MalformedPayloadError("reservation has no itinerary")
        
        flights: List[Dict[str, Any]] = []
        for direction, key in self.DIRECTION_KEYS:
            bound = itinerary.get(key)
            if bound is None:
                continue
            flights.extend(self._parse_direction(direction, bound))
        
        if not any(flight["direction"] == DEPARTURE for flight in flights):
            raise MalformedPayloadError("itinerary has no departure flights")
        return flights
    
    def _parse_direction(self, direction: str, bound: Any) -> List[Dict[str, Any]]:
        if not isinstance(bound, dict) or not isinstance(bound.get("segments"), list):
            raise MalformedPayloadError(f"{direction} direction has no segments")
        
        legs = [self._parse_segment(segment) for segment in bound["segments"]]
        legs.sort(key=lambda leg: leg["departure_time"])
        for position, leg in enumerate(legs, start=1):
            leg["direction"] = direction
            leg["position"] = position
        return legs
    
    def _parse_segment(self, segment: Any) -> Dict[str, Any]:
        if not isinstance(segment, dict):
            raise MalformedPayloadError(f"segment is not an object: {segment!r}")
        return {
            "departure_time": parse_departure_time(segment.get("departureDateTime")),
            "arrival_city_name": str(_require(segment, "arrivalCityName", "segment")),
            "flight_number": str(_require(segment, "flightNumber", "segment")),
            "departure_airport_code": str(_require(segment, "departureAirportCode", "segment")),
            "arrival_airport_code": str(_require(segment, "arrivalAirportCode", "segment")),
            "carrier_code": str(segment.get("marketingCarrierCode") or DEFAULT_CARRIER_CODE),
        }
