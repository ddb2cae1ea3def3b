"""Reservation repositories (Repository Pattern)."""
import dataclasses
import json
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import redis

from autocheckin.domain.entities.reservation import Checkin, Reservation
from autocheckin.domain.errors import DuplicateReservationError, PersistenceFailureError
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository
from autocheckin.infrastructure.redis_client import RedisClientFactory
from autocheckin.infrastructure.repositories.reservation_serializer import (
    checkin_to_dict,
    reservation_from_dict,
    reservation_to_dict,
)


def _committed(reservation: Reservation) -> Reservation:
    return dataclasses.replace(reservation, committed_at=datetime.now(timezone.utc))


def _departure_order(reservation: Reservation):
    return (reservation.time is None, reservation.time or 0)


class RedisReservationRepository(IReservationRepository):
    """
    Redis-backed reservation storage.
    
    The whole aggregate lives in one JSON document under
    ``reservation:<id>``; ``reservation:code:<CODE>`` indexes it by
    confirmation number and ``reservations:by_departure`` (a sorted set
    scored by outbound departure) orders them. All keys change together
    inside one WATCH/MULTI/EXEC transaction.
    """
    
    def __init__(self, redis_client: Optional[redis.Redis] = None):
        """
        Initialize the repository.
        
        Args:
            redis_client: Redis client instance (Dependency Injection)
        """
        self.redis = redis_client if redis_client is not None else RedisClientFactory.get_client()
        self._logger = logging.getLogger(__name__)
        self._key_prefix = "reservation:"
        self._code_prefix = "reservation:code:"
        self._order_key = "reservations:by_departure"
    
    def _get_key(self, reservation_id: str) -> str:
        return f"{self._key_prefix}{reservation_id}"
    
    def _get_code_key(self, confirmation_number: str) -> str:
        return f"{self._code_prefix}{confirmation_number}"
    
    @staticmethod
    def _departure_score(reservation: Reservation) -> float:
        return reservation.time.timestamp() if reservation.time else float("inf")
    
    def _require_redis(self) -> redis.Redis:
        if not self.redis:
            self._logger.error("Redis client not initialized")
            raise PersistenceFailureError()
        return self.redis
    
    def create(self, reservation: Reservation) -> Reservation:
        client = self._require_redis()
        stored = _committed(reservation)
        code_key = self._get_code_key(stored.confirmation_number)
        data = json.dumps(reservation_to_dict(stored))
        
        def write(pipe) -> None:
            if pipe.exists(code_key):
                raise DuplicateReservationError(stored.confirmation_number)
            pipe.multi()
            pipe.set(self._get_key(stored.id), data)
            pipe.set(code_key, stored.id)
            pipe.zadd(self._order_key, {stored.id: self._departure_score(stored)})
        
        try:
            client.transaction(write, code_key)
        except redis.RedisError as e:
            self._logger.error(f"Error storing reservation {stored.confirmation_number}: {e}")
            raise PersistenceFailureError() from e
        
        self._logger.info(f"Stored reservation {stored.confirmation_number} ({stored.id})")
        return stored
    
    def get(self, reservation_id: str) -> Optional[Reservation]:
        client = self._require_redis()
        try:
            data = client.get(self._get_key(reservation_id))
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving reservation {reservation_id}: {e}")
            raise PersistenceFailureError() from e
        return reservation_from_dict(json.loads(data)) if data else None
    
    def find_by_confirmation_number(self, confirmation_number: str) -> Optional[Reservation]:
        client = self._require_redis()
        try:
            reservation_id = client.get(self._get_code_key(confirmation_number))
        except redis.RedisError as e:
            self._logger.error(f"Error looking up reservation {confirmation_number}: {e}")
            raise PersistenceFailureError() from e
        return self.get(reservation_id) if reservation_id else None
    
    def list_ordered_by_departure_time(self) -> List[Reservation]:
        client = self._require_redis()
        try:
            reservation_ids = client.zrange(self._order_key, 0, -1)
            if not reservation_ids:
                return []
            documents = client.mget([self._get_key(reservation_id) for reservation_id in reservation_ids])
        except redis.RedisError as e:
            self._logger.error(f"Error listing reservations: {e}")
            raise PersistenceFailureError() from e
        return [reservation_from_dict(json.loads(document)) for document in documents if document]
    
    def delete(self, reservation_id: str) -> Optional[Reservation]:
        client = self._require_redis()
        key = self._get_key(reservation_id)
        
        def remove(pipe) -> Optional[Reservation]:
            data = pipe.get(key)
            if not data:
                return None
            reservation = reservation_from_dict(json.loads(data))
            pipe.multi()
            pipe.delete(key, self._get_code_key(reservation.confirmation_number))
            pipe.zrem(self._order_key, reservation_id)
            return reservation
        
        try:
            return client.transaction(remove, key, value_from_callable=True)
        except redis.RedisError as e:
            self._logger.error(f"Error deleting reservation {reservation_id}: {e}")
            raise PersistenceFailureError() from e
    
    def add_checkin(self, reservation_id: str, checkin: Checkin) -> Optional[Reservation]:
        client = self._require_redis()
        key = self._get_key(reservation_id)
        
        def append(pipe) -> Optional[Reservation]:
            data = pipe.get(key)
            if not data:
                return None
            document = json.loads(data)
            flight = next((f for f in document["flights"] if f["id"] == checkin.flight_id), None)
            if flight is None:
                return None
            flight.setdefault("checkins", []).append(checkin_to_dict(checkin))
            pipe.multi()
            pipe.set(key, json.dumps(document))
            return reservation_from_dict(document)
        
        try:
            return client.transaction(append, key, value_from_callable=True)
        except redis.RedisError as e:
            self._logger.error(f"Error recording check-in for {reservation_id}: {e}")
            raise PersistenceFailureError() from e


class InMemoryReservationRepository(IReservationRepository):
    """
    Process-local reservation storage for development and tests.
    
    Aggregates are stored as serialized documents so callers never share
    mutable entities with the store.
    """
    
    def __init__(self):
        self._reservations: Dict[str, Dict[str, Any]] = {}
        self._codes: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)
    
    def create(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.confirmation_number in self._codes:
                raise DuplicateReservationError(reservation.confirmation_number)
            stored = _committed(reservation)
            self._reservations[stored.id] = reservation_to_dict(stored)
            self._codes[stored.confirmation_number] = stored.id
            created = reservation_from_dict(self._reservations[stored.id])
        self._logger.info(f"Stored reservation {stored.confirmation_number} ({stored.id}) in memory")
        return created
    
    def get(self, reservation_id: str) -> Optional[Reservation]:
        with self._lock:
            data = self._reservations.get(reservation_id)
            return reservation_from_dict(data) if data else None
    
    def find_by_confirmation_number(self, confirmation_number: str) -> Optional[Reservation]:
        with self._lock:
            reservation_id = self._codes.get(confirmation_number)
            data = self._reservations.get(reservation_id) if reservation_id else None
            return reservation_from_dict(data) if data else None
    
    def list_ordered_by_departure_time(self) -> List[Reservation]:
        with self._lock:
            reservations = [reservation_from_dict(data) for data in self._reservations.values()]
        return sorted(reservations, key=_departure_order)
    
    def delete(self, reservation_id: str) -> Optional[Reservation]:
        with self._lock:
            data = self._reservations.pop(reservation_id, None)
            if data is None:
                return None
            self._codes.pop(data["confirmation_number"], None)
            return reservation_from_dict(data)
    
    def add_checkin(self, reservation_id: str, checkin: Checkin) -> Optional[Reservation]:
        with self._lock:
            data = self._reservations.get(reservation_id)
            if data is None:
                return None
            flight = next((f for f in data["flights"] if f["id"] == checkin.flight_id), None)
            if flight is None:
                return None
            flight["checkins"].append(checkin_to_dict(checkin))
            return reservation_from_dict(data)
    
    def count(self) -> int:
        with self._lock:
            return len(self._reservations)
