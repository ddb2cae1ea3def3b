"""Reservation API endpoints."""
from typing import Any, Dict, Tuple

from flask import Blueprint, current_app, jsonify, request

from autocheckin.application.use_cases.ingest_reservation_use_case import IngestionRequest
from autocheckin.domain.entities.reservation import CHECKIN_STATUSES, Reservation
from autocheckin.infrastructure.repositories.reservation_serializer import (
    flight_to_dict,
    passenger_to_dict,
)
from autocheckin.middleware.monitoring import track_request


reservations_blueprint = Blueprint("reservations", __name__)

REQUIRED_FIELDS = ("confirmation_number", "first_name", "last_name")


def _get_container():
    container = current_app.config.get("service_container")
    if container is None:
        from autocheckin.infrastructure.service_container import ServiceContainer
        container = ServiceContainer()
        current_app.config["service_container"] = container
    return container


def present_reservation(reservation: Reservation) -> Dict[str, Any]:
    """Public representation of a reservation, including derived values."""
    return {
        "id": reservation.id,
        "confirmation_number": reservation.confirmation_number,
        "first_name": reservation.first_name,
        "last_name": reservation.last_name,
        "arrival_city_name": reservation.arrival_city_name,
        "time": reservation.time.isoformat() if reservation.time else None,
        "international": reservation.international,
        "checkins_completed": reservation.checkins_completed,
        "passengers": [passenger_to_dict(passenger) for passenger in reservation.passengers],
        "departure_flights": [flight_to_dict(flight) for flight in reservation.departure_flights()],
        "return_flights": [flight_to_dict(flight) for flight in reservation.return_flights()],
        "created_at": reservation.created_at.isoformat() if reservation.created_at else None,
    }


def _error(status_code: int, errors: Dict[str, Any], message: str) -> Tuple[Any, int]:
    return jsonify({"status": "error", "message": message, "errors": errors}), status_code


@reservations_blueprint.route("/reservations", methods=["POST"])
@track_request("create_reservation")
def create_reservation():
    """
    Ingest a reservation and schedule its check-ins.
    
    Expected payload:
    {
        "confirmation_number": "AB12CD",
        "first_name": "John",
        "last_name": "Smith",
        "phone_number": "+15555550123"   # optional
    }
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"status": "error", "message": "JSON request body required"}), 400
    
    blank = {
        field: ["can't be blank"]
        for field in REQUIRED_FIELDS
        if not str(body.get(field) or "").strip()
    }
    if blank:
        return _error(422, blank, "Reservation is invalid")
    
    result = _get_container().get_ingest_reservation_use_case().execute(IngestionRequest(
        last_name=str(body["last_name"]),
        first_name=str(body["first_name"]),
        confirmation_number=str(body["confirmation_number"]),
        phone_number=body.get("phone_number")
    ))
    
    if result.success:
        payload = present_reservation(result.reservation)
        payload["scheduled_flight_ids"] = [flight.id for flight in result.scheduled_flights]
        return jsonify({"status": "success", "reservation": payload}), 201
    
    if result.error.retryable:
        return _error(503, result.errors, result.error.message)
    return _error(422, result.errors, result.error.message)


@reservations_blueprint.route("/reservations", methods=["GET"])
@track_request("list_reservations")
def list_reservations():
    """List stored reservations, earliest outbound departure first."""
    reservations = _get_container().get_reservation_repository().list_ordered_by_departure_time()
    return jsonify({
        "status": "success",
        "reservations": [present_reservation(reservation) for reservation in reservations]
    }), 200


@reservations_blueprint.route("/reservations/<confirmation_number>", methods=["GET"])
@track_request("get_reservation")
def get_reservation(confirmation_number: str):
    """Return a stored reservation."""
    repository = _get_container().get_reservation_repository()
    reservation = repository.find_by_confirmation_number(confirmation_number.strip().upper())
    if reservation is None:
        return jsonify({"status": "error", "message": "Reservation not found"}), 404
    return jsonify({"status": "success", "reservation": present_reservation(reservation)}), 200


@reservations_blueprint.route("/reservations/<confirmation_number>", methods=["DELETE"])
@track_request("delete_reservation")
def delete_reservation(confirmation_number: str):
    """Delete a reservation and cancel its pending check-ins."""
    deleted = _get_container().get_delete_reservation_use_case().execute(confirmation_number)
    if deleted is None:
        return jsonify({"status": "error", "message": "Reservation not found"}), 404
    return jsonify({"status": "success", "confirmation_number": deleted.confirmation_number}), 200


@reservations_blueprint.route(
    "/reservations/<confirmation_number>/flights/<flight_id>/checkins",
    methods=["POST"]
)
@track_request("record_checkin")
def record_checkin(confirmation_number: str, flight_id: str):
    """
    Record a check-in outcome reported by the check-in worker.
    
    Expected payload: {"status": "completed"}
    """
    body = request.get_json(silent=True) or {}
    status = body.get("status") if isinstance(body, dict) else None
    if status not in CHECKIN_STATUSES:
        return _error(422, {"status": [f"must be one of {', '.join(CHECKIN_STATUSES)}"]}, "Check-in is invalid")
    
    updated = _get_container().get_record_checkin_use_case().execute(confirmation_number, flight_id, status)
    if updated is None:
        return jsonify({"status": "error", "message": "Reservation or flight not found"}), 404
    return jsonify({"status": "success", "reservation": present_reservation(updated)}), 201
