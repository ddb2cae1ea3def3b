"""
Shared fixtures and fakes for the test suite.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import redis

from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation
from autocheckin.domain.interfaces.checkin_job_scheduler import ICheckinJobScheduler
from autocheckin.domain.interfaces.message_provider import IMessageProvider
from autocheckin.domain.interfaces.reservation_client import IReservationClient
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier


NOW = datetime(2026, 11, 1, 12, 0, tzinfo=timezone.utc)


def frozen_clock() -> datetime:
    return NOW


def segment(flight_number: str, origin: str, destination: str, city: str, departure: datetime) -> Dict[str, Any]:
    return {
        "flightNumber": flight_number,
        "departureAirportCode": origin,
        "arrivalAirportCode": destination,
        "arrivalCityName": city,
        "departureDateTime": departure.isoformat(),
        "marketingCarrierCode": "WN",
    }


def reservation_document(
    departure_segments: List[Dict[str, Any]],
    return_segments: Optional[List[Dict[str, Any]]] = None,
    international: bool = False,
    passengers: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    itinerary = {"departure": {"segments": departure_segments}}
    if return_segments is not None:
        itinerary["return"] = {"segments": return_segments}
    return {
        "body": {
            "recordLocator": "AB12CD",
            "isInternationalPNR": "true" if international else "false",
            "passengers": passengers if passengers is not None else [
                {"firstName": "John", "lastName": "Smith", "accountNumber": "601234567"},
                {"firstName": "Jane", "lastName": "Smith", "boardingGroup": "A", "boardingPosition": "15"},
            ],
            "itinerary": itinerary,
        }
    }


def round_trip_document(start: datetime = NOW, international: bool = False) -> Dict[str, Any]:
    """Two legs out, two legs back; return legs listed latest first."""
    outbound = start + timedelta(days=5)
    inbound = start + timedelta(days=9)
    return reservation_document(
        departure_segments=[
            segment("1234", "DAL", "HOU", "Houston, TX", outbound),
            segment("2345", "HOU", "DEN", "Denver, CO", outbound + timedelta(hours=3)),
        ],
        return_segments=[
            segment("4567", "HOU", "DAL", "Dallas, TX", inbound + timedelta(hours=3)),
            segment("3456", "DEN", "HOU", "Houston, TX", inbound),
        ],
        international=international,
    )


class FakeReservationClient(IReservationClient):
    """Returns a canned document, or raises a canned exception."""
    
    def __init__(self, document: Optional[Dict[str, Any]] = None, status_code: int = 200, exception=None):
        self.document = document
        self.status_code = status_code
        self.exception = exception
        self.calls: List[Dict[str, str]] = []
    
    def retrieve_reservation(self, last_name, first_name, confirmation_number):
        self.calls.append({
            "last_name": last_name,
            "first_name": first_name,
            "confirmation_number": confirmation_number,
        })
        if self.exception is not None:
            raise self.exception
        return RetrievedReservation(self.document, status_code=self.status_code)


class FakeJobScheduler(ICheckinJobScheduler):
    """Records scheduling and cancellation requests."""
    
    def __init__(self, accept: bool = True):
        self.accept = accept
        self.scheduled: List[Dict[str, Any]] = []
        self.cancelled: List[str] = []
    
    def schedule_checkin(self, reservation_id, flight_id, departure_time):
        if not self.accept:
            return None
        self.scheduled.append({
            "reservation_id": reservation_id,
            "flight_id": flight_id,
            "departure_time": departure_time,
        })
        return f"job-{flight_id}"
    
    def cancel_checkin(self, flight_id):
        self.cancelled.append(flight_id)
        return True


class FakeNotifier(IReservationNotifier):
    """Records notified reservations; can be told to blow up."""
    
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.notified = []
    
    def reservation_created(self, reservation):
        if self.error is not None:
            raise self.error
        self.notified.append(reservation)


class FakeMessageProvider(IMessageProvider):
    """Records sent messages."""
    
    def __init__(self, status: str = "success"):
        self.status = status
        self.sent: List[Dict[str, str]] = []
    
    def send_text_message(self, recipient, message):
        self.sent.append({"recipient": recipient, "message": message})
        return {"status": self.status, "message_id": "wamid.test"}


class FakePipeline:
    """
    Minimal redis-py pipeline: commands run immediately until ``multi()``,
    then are buffered until ``execute()``.
    """
    
    def __init__(self, store: Dict[str, str], sorted_sets: Dict[str, Dict[str, float]]):
        self.store = store
        self.sorted_sets = sorted_sets
        self.buffer = None
    
    def multi(self):
        self.buffer = []
    
    def _run(self, command):
        if self.buffer is None:
            return command()
        self.buffer.append(command)
        return self
    
    def get(self, key):
        return self._run(lambda: self.store.get(key))
    
    def exists(self, *keys):
        return self._run(lambda: sum(1 for key in keys if key in self.store))
    
    def set(self, key, value):
        def command():
            self.store[key] = value
            return True
        return self._run(command)
    
    def delete(self, *keys):
        return self._run(lambda: sum(1 for key in keys if self.store.pop(key, None) is not None))
    
    def zadd(self, key, mapping):
        def command():
            self.sorted_sets.setdefault(key, {}).update(mapping)
            return len(mapping)
        return self._run(command)
    
    def zrem(self, key, *members):
        members_set = self.sorted_sets.setdefault(key, {})
        return self._run(lambda: sum(1 for member in members if members_set.pop(member, None) is not None))
    
    def execute(self):
        results = [command() for command in (self.buffer or [])]
        self.buffer = None
        return results


class FakeRedis:
    """Minimal Redis stub with ``transaction`` support."""
    
    def __init__(self):
        self.store: Dict[str, str] = {}
        self.sorted_sets: Dict[str, Dict[str, float]] = {}
        self.down = False
    
    def _check(self):
        if self.down:
            raise redis.ConnectionError("Connection refused")
    
    def get(self, key):
        self._check()
        return self.store.get(key)
    
    def set(self, key, value):
        self._check()
        self.store[key] = value
        return True
    
    def transaction(self, func, *watches, value_from_callable=False):
        self._check()
        pipe = FakePipeline(self.store, self.sorted_sets)
        result = func(pipe)
        exec_value = pipe.execute()
        return result if value_from_callable else exec_value
    
    def mget(self, keys):
        self._check()
        return [self.store.get(key) for key in keys]
    
    def zrange(self, key, start, end):
        self._check()
        members = sorted(self.sorted_sets.get(key, {}).items(), key=lambda item: (item[1], item[0]))
        names = [member for member, _ in members]
        return names[start:] if end == -1 else names[start:end + 1]
