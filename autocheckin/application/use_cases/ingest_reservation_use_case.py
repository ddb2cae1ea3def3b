"""Use case for ingesting an airline reservation (Use Case Pattern)."""
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from autocheckin.application.services.checkin_scheduler import CheckinScheduler
from autocheckin.application.services.reservation_parsers import FlightsParser, PassengersParser
from autocheckin.application.services.response_classifier import ResponseClassifier
from autocheckin.domain.entities.reservation import DEPARTURE, Flight, Passenger, Reservation
from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation
from autocheckin.domain.errors import (
    IngestionError,
    InvalidInputError,
    MalformedPayloadError,
    RetrievalUnavailableError,
    UnsupportedItineraryError,
    ValidationFailureError,
)
from autocheckin.domain.interfaces.reservation_client import IReservationClient
from autocheckin.domain.interfaces.reservation_notifier import IReservationNotifier
from autocheckin.domain.interfaces.reservation_repository import IReservationRepository
from autocheckin.middleware.monitoring import track_ingestion, track_retrieval_duration
from autocheckin.utils.phone_validator import PhoneNumberValidator


logger = logging.getLogger(__name__)


@dataclass
class IngestionRequest:
    """Traveler input identifying a reservation."""
    last_name: str
    first_name: str
    confirmation_number: str
    phone_number: Optional[Union[str, int]] = None


@dataclass
class IngestionResult:
    """Outcome of one ingestion attempt."""
    success: bool
    reservation: Optional[Reservation] = None
    error: Optional[IngestionError] = None
    scheduled_flights: List[Flight] = field(default_factory=list)
    
    @property
    def errors(self) -> Dict[str, List[str]]:
        return self.error.errors if self.error else {}


class IngestReservationUseCase:
    """
    Retrieve, classify, parse, persist and schedule one reservation.
    
    Steps run in order and stop at the first failure. The aggregate is
    handed to the repository in a single ``create`` call, and scheduling
    and notification only run once that call has returned.
    """
    
    def __init__(
        self,
        reservation_client: IReservationClient,
        reservation_repository: IReservationRepository,
        checkin_scheduler: CheckinScheduler,
        notifier: IReservationNotifier,
        classifier: Optional[ResponseClassifier] = None
    ):
        """
        Initialize use case with dependencies (Dependency Injection).
        
        Args:
            reservation_client: Airline retrieval client
            reservation_repository: Aggregate storage
            checkin_scheduler: Picks and queues check-in jobs after commit
            notifier: New reservation notification, best effort
            classifier: Response classifier (default instance if omitted)
        """
        self.reservation_client = reservation_client
        self.reservation_repository = reservation_repository
        self.checkin_scheduler = checkin_scheduler
        self.notifier = notifier
        self.classifier = classifier or ResponseClassifier()
    
    def execute(self, request: IngestionRequest) -> IngestionResult:
        """
        Ingest a reservation.
        
        Args:
            request: Names and confirmation number entered by the traveler
            
        Returns:
            Result holding the stored reservation, or the error explaining
            why nothing was stored
        """
        try:
            reservation = self._ingest(request)
        except MalformedPayloadError as e:
            logger.error(f"Unreadable reservation payload for {request.confirmation_number}: {e}", exc_info=True)
            return self._failure(e)
        except ValidationFailureError as e:
            logger.error(f"Assembled reservation {request.confirmation_number} is invalid: {e.errors}", exc_info=True)
            return self._failure(e)
        except RetrievalUnavailableError as e:
            logger.warning(f"Retrieval unavailable for {request.confirmation_number}: {e}")
            return self._failure(e)
        except IngestionError as e:
            logger.info(f"Reservation {request.confirmation_number} rejected: {e.errors}")
            return self._failure(e)
        
        scheduled_flights = self._after_commit(reservation)
        track_ingestion("created")
        logger.info(
            f"Reservation {reservation.confirmation_number} created with "
            f"{len(reservation.passengers)} passenger(s) and {len(reservation.flights)} flight(s)"
        )
        return IngestionResult(success=True, reservation=reservation, scheduled_flights=scheduled_flights)
    
    def _ingest(self, request: IngestionRequest) -> Reservation:
        confirmation_number = (request.confirmation_number or "").strip().upper()
        first_name = (request.first_name or "").strip()
        last_name = (request.last_name or "").strip()
        phone_number = self._normalize_phone_number(request.phone_number)
        
        response = self._retrieve(last_name, first_name, confirmation_number)
        
        classification = self.classifier.classify(response)
        error = classification.to_error()
        if error is not None:
            raise error
        if classification.international:
            raise UnsupportedItineraryError()
        
        reservation = self._build(
            confirmation_number=confirmation_number,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            response=response
        )
        self._validate(reservation)
        return self.reservation_repository.create(reservation)
    
    @staticmethod
    def _normalize_phone_number(phone_number: Optional[Union[str, int]]) -> Optional[str]:
        if phone_number is None or phone_number == "":
            return None
        try:
            _, normalized = PhoneNumberValidator.normalize(str(phone_number))
        except ValueError as e:
            raise InvalidInputError({"phone_number": ["is invalid"]}) from e
        return normalized
    
    def _retrieve(self, last_name: str, first_name: str, confirmation_number: str) -> RetrievedReservation:
        start_time = time.time()
        try:
            return self.reservation_client.retrieve_reservation(
                last_name=last_name,
                first_name=first_name,
                confirmation_number=confirmation_number
            )
        except RetrievalUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Retrieval client failed for {confirmation_number}: {e}", exc_info=True)
            raise RetrievalUnavailableError() from e
        finally:
            track_retrieval_duration(time.time() - start_time)
    
    def _build(
        self,
        confirmation_number: str,
        first_name: str,
        last_name: str,
        phone_number: Optional[str],
        response: RetrievedReservation
    ) -> Reservation:
        body = response.body
        try:
            passengers = [Passenger(**attributes) for attributes in PassengersParser(body).passengers()]
            flights = [Flight(**attributes) for attributes in FlightsParser(body).flights()]
        except ValueError as e:
            raise MalformedPayloadError(str(e)) from e
        
        departures = sorted(
            (flight for flight in flights if flight.direction == DEPARTURE),
            key=lambda flight: flight.departure_time
        )
        return Reservation(
            confirmation_number=confirmation_number,
            first_name=first_name,
            last_name=last_name,
            payload=response.to_dict(),
            arrival_city_name=departures[-1].arrival_city_name if departures else response.arrival_city_name(),
            phone_number=phone_number or None,
            passengers=passengers,
            flights=flights
        )
    
    def _validate(self, reservation: Reservation) -> None:
        errors = reservation.validation_errors()
        if errors:
            raise ValidationFailureError(errors)
    
    def _after_commit(self, reservation: Reservation) -> List[Flight]:
        scheduled_flights: List[Flight] = []
        try:
            scheduled_flights = self.checkin_scheduler.schedule(reservation)
        except Exception as e:
            # Already committed, nothing to roll back
            logger.error(
                f"Scheduling check-ins for {reservation.confirmation_number} failed: {e}",
                exc_info=True
            )
        
        try:
            self.notifier.reservation_created(reservation)
        except Exception as e:
            logger.warning(f"New reservation notification for {reservation.confirmation_number} failed: {e}")
        
        return scheduled_flights
    
    @staticmethod
    def _failure(error: IngestionError) -> IngestionResult:
        track_ingestion(type(error).__name__)
        return IngestionResult(success=False, error=error)
