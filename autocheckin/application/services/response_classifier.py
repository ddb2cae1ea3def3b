"""Classification of airline retrieval responses."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from autocheckin.domain.entities.retrieved_reservation import (
    RetrievedReservation,
    payload_is_international,
)
from autocheckin.domain.errors import (
    IngestionError,
    InvalidCredentialsError,
    ReservationCancelledError,
    RetrievalRejectedError,
)


logger = logging.getLogger(__name__)


class ClassificationOutcome(Enum):
    ACCEPTED = "ok"
    ENTERED_INCORRECTLY = "entered-incorrectly"
    CANCELLED = "cancelled"
    OTHER_ERROR = "other-error"


@dataclass
class Classification:
    """Outcome of classifying one retrieval response."""
    outcome: ClassificationOutcome
    payload: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    international: bool = False
    
    @property
    def accepted(self) -> bool:
        return self.outcome is ClassificationOutcome.ACCEPTED
    
    def to_error(self) -> Optional[IngestionError]:
        """Map a rejected outcome to the error shown to the traveler."""
        if self.outcome is ClassificationOutcome.ENTERED_INCORRECTLY:
            return InvalidCredentialsError()
        if self.outcome is ClassificationOutcome.CANCELLED:
            return ReservationCancelledError()
        if self.outcome is ClassificationOutcome.OTHER_ERROR:
            return RetrievalRejectedError(self.message or "The airline could not return your reservation")
        return None


class ResponseClassifier:
    """
    Sort retrieval responses into accepted and the three rejection kinds.
    
    Credential errors come first, then cancellation, so that a response
    matching both is reported as a credential problem.
    """
    
    def classify(self, response: RetrievedReservation) -> Classification:
        if response.is_error():
            if response.is_entered_incorrectly():
                outcome = ClassificationOutcome.ENTERED_INCORRECTLY
            elif response.is_cancelled():
                outcome = ClassificationOutcome.CANCELLED
            else:
                outcome = ClassificationOutcome.OTHER_ERROR
            logger.info(f"Retrieval rejected ({outcome.value}): {response.error_message()}")
            return Classification(outcome=outcome, message=response.error_message())
        
        payload = response.to_dict()
        return Classification(
            outcome=ClassificationOutcome.ACCEPTED,
            payload=payload,
            international=self.is_international(payload)
        )
    
    @staticmethod
    def is_international(payload: Optional[Dict[str, Any]]) -> bool:
        return payload_is_international(payload)
