"""JSON-ready (de)serialization of the reservation aggregate."""
from datetime import datetime
from typing import Any, Dict, Optional

from autocheckin.domain.entities.reservation import Checkin, Flight, Passenger, Reservation


def _dump_time(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _load_time(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def checkin_to_dict(checkin: Checkin) -> Dict[str, Any]:
    return {
        "id": checkin.id,
        "flight_id": checkin.flight_id,
        "status": checkin.status,
        "created_at": _dump_time(checkin.created_at),
    }


def flight_to_dict(flight: Flight) -> Dict[str, Any]:
    return {
        "id": flight.id,
        "direction": flight.direction,
        "position": flight.position,
        "departure_time": _dump_time(flight.departure_time),
        "arrival_city_name": flight.arrival_city_name,
        "flight_number": flight.flight_number,
        "departure_airport_code": flight.departure_airport_code,
        "arrival_airport_code": flight.arrival_airport_code,
        "carrier_code": flight.carrier_code,
        "checkins": [checkin_to_dict(checkin) for checkin in flight.checkins],
    }


def passenger_to_dict(passenger: Passenger) -> Dict[str, Any]:
    return {
        "id": passenger.id,
        "first_name": passenger.first_name,
        "last_name": passenger.last_name,
        "account_number": passenger.account_number,
        "boarding_group": passenger.boarding_group,
        "boarding_position": passenger.boarding_position,
    }


def reservation_to_dict(reservation: Reservation) -> Dict[str, Any]:
    return {
        "id": reservation.id,
        "confirmation_number": reservation.confirmation_number,
        "first_name": reservation.first_name,
        "last_name": reservation.last_name,
        "payload": reservation.payload,
        "arrival_city_name": reservation.arrival_city_name,
        "phone_number": reservation.phone_number,
        "created_at": _dump_time(reservation.created_at),
        "committed_at": _dump_time(reservation.committed_at),
        "passengers": [passenger_to_dict(passenger) for passenger in reservation.passengers],
        "flights": [flight_to_dict(flight) for flight in reservation.flights],
    }


def reservation_from_dict(data: Dict[str, Any]) -> Reservation:
    flights = []
    for flight_data in data.get("flights", []):
        flight_fields = dict(flight_data)
        flight_fields["departure_time"] = _load_time(flight_fields["departure_time"])
        flight_fields["checkins"] = [
            Checkin(**{**checkin, "created_at": _load_time(checkin["created_at"])})
            for checkin in flight_fields.get("checkins", [])
        ]
        flights.append(Flight(**flight_fields))
    
    return Reservation(
        id=data["id"],
        confirmation_number=data["confirmation_number"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        payload=data["payload"],
        arrival_city_name=data.get("arrival_city_name"),
        phone_number=data.get("phone_number"),
        created_at=_load_time(data.get("created_at")),
        committed_at=_load_time(data.get("committed_at")),
        passengers=[Passenger(**passenger) for passenger in data.get("passengers", [])],
        flights=flights,
    )
