"""Raw reservation document returned by the airline."""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse


# Southwest error codes for a name/confirmation mismatch
ENTERED_INCORRECTLY_CODES = frozenset({"SW107023", "SW107028", "SW107031"})
CANCELLED_CODES = frozenset({"SW107024", "SW107025"})


def _departure_key(segment: Dict[str, Any]) -> Optional[datetime]:
    try:
        parsed = isoparse(segment.get("departureDateTime"))
    except (TypeError, ValueError, OverflowError, AttributeError):
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def chronological_segments(segments: List[Any]) -> List[Dict[str, Any]]:
    """Segments ordered by departure time; listing order if any time is unreadable."""
    segments = [segment for segment in segments if isinstance(segment, dict)]
    keys = [_departure_key(segment) for segment in segments]
    if any(key is None for key in keys):
        return segments
    return [segment for _, segment in sorted(zip(keys, segments), key=lambda pair: pair[0])]


def payload_is_international(payload: Optional[Dict[str, Any]]) -> bool:
    """Read the international flag from a stored or retrieved document."""
    if not payload:
        return False
    body = payload.get("body")
    if not isinstance(body, dict):
        return False
    return str(body.get("isInternationalPNR", "false")).lower() == "true"


class RetrievedReservation:
    """
    Read-only view over a retrieval response document.
    
    Error documents carry ``errmsg`` (and usually ``code``); accepted
    documents carry the reservation under ``body``.
    """
    
    def __init__(self, document: Dict[str, Any], status_code: int = 200):
        self._document = document or {}
        self.status_code = status_code
    
    @property
    def body(self) -> Dict[str, Any]:
        body = self._document.get("body")
        return body if isinstance(body, dict) else {}
    
    @property
    def code(self) -> Optional[str]:
        code = self._document.get("code")
        return str(code) if code is not None else None
    
    def is_error(self) -> bool:
        return bool(self._document.get("errmsg")) or self.status_code >= 400 or "body" not in self._document
    
    def is_entered_incorrectly(self) -> bool:
        if self.code in ENTERED_INCORRECTLY_CODES:
            return True
        return "unable to retrieve your reservation" in self.error_message().lower()
    
    def is_cancelled(self) -> bool:
        if self.code in CANCELLED_CODES:
            return True
        return "cancelled" in self.error_message().lower()
    
    def error_message(self) -> str:
        message = self._document.get("errmsg")
        if message:
            return str(message)
        if self.is_error():
            return "The airline could not return your reservation"
        return ""
    
    def is_international(self) -> bool:
        return payload_is_international(self._document)
    
    def arrival_city_name(self) -> Optional[str]:
        """Destination of the outbound direction: the arrival city of its latest leg."""
        departure = (self.body.get("itinerary") or {}).get("departure") or {}
        if departure.get("arrivalCityName"):
            return departure["arrivalCityName"]
        segments = chronological_segments(departure.get("segments") or [])
        if segments:
            return segments[-1].get("arrivalCityName")
        return None
    
    def to_dict(self) -> Dict[str, Any]:
        return dict(self._document)
