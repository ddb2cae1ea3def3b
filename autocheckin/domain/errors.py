"""Ingestion failure taxonomy.

Every failure carries user-facing messages in two buckets:
- field errors, keyed by the attribute the user must correct
- base errors, which concern the reservation as a whole

Only failures flagged ``retryable`` are worth re-running ingestion for.
"""
from typing import Dict, List, Optional


BASE = "base"


class IngestionError(Exception):
    """Base class for every reason a reservation cannot be ingested."""
    
    retryable: bool = False
    
    def __init__(
        self,
        message: str,
        field_errors: Optional[Dict[str, List[str]]] = None,
        base_errors: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.field_errors: Dict[str, List[str]] = dict(field_errors or {})
        self.base_errors: List[str] = list(base_errors) if base_errors is not None else [message]
    
    @property
    def errors(self) -> Dict[str, List[str]]:
        """Errors in ``{attribute: [messages], "base": [messages]}`` form."""
        errors = {field: list(messages) for field, messages in self.field_errors.items()}
        if self.base_errors:
            errors[BASE] = list(self.base_errors)
        return errors


class RetrievalUnavailableError(IngestionError):
    """The airline could not be reached or did not answer in time."""
    
    retryable = True
    
    def __init__(self, message: str = "The airline reservation service is currently unavailable"):
        super().__init__(message)


class InvalidCredentialsError(IngestionError):
    """Name and confirmation number do not match a reservation."""
    
    def __init__(self):
        super().__init__(
            "Reservation credentials were entered incorrectly",
            field_errors={
                "confirmation_number": ["verify your confirmation number is entered correctly"],
                "first_name": ["verify your first name is entered correctly"],
                "last_name": ["verify your last name is entered correctly"],
            },
            base_errors=[]
        )


class ReservationCancelledError(IngestionError):
    """The reservation no longer exists at the airline."""
    
    def __init__(self):
        super().__init__("Your reservation has been cancelled")


class RetrievalRejectedError(IngestionError):
    """Any other business error reported by the airline, passed through verbatim."""


class UnsupportedItineraryError(IngestionError):
    """International itineraries cannot be checked in automatically."""
    
    def __init__(self):
        super().__init__(
            "Unfortunately, due to uncontrolled limitations of the checkin process, "
            "international flights are not yet supported."
        )


class MalformedPayloadError(IngestionError):
    """An accepted response could not be turned into passengers and flights."""
    
    def __init__(self, detail: str):
        super().__init__("We could not read the reservation returned by the airline")
        self.detail = detail
    
    def __str__(self) -> str:
        return f"{self.message}: {self.detail}"


class ValidationFailureError(IngestionError):
    """The assembled reservation breaks a local invariant."""
    
    def __init__(self, errors: Dict[str, List[str]]):
        base_errors = list(errors.get(BASE, []))
        field_errors = {field: messages for field, messages in errors.items() if field != BASE}
        super().__init__("Reservation is invalid", field_errors=field_errors, base_errors=base_errors)


class DuplicateReservationError(IngestionError):
    """The confirmation number is already stored."""
    
    def __init__(self, confirmation_number: str):
        super().__init__(
            f"Reservation {confirmation_number} already exists",
            field_errors={"confirmation_number": ["has already been taken"]},
            base_errors=[]
        )
        self.confirmation_number = confirmation_number


class PersistenceFailureError(IngestionError):
    """The storage collaborator could not commit the reservation."""
    
    retryable = True
    
    def __init__(self, message: str = "Your reservation could not be saved, please try again"):
        super().__init__(message)


class InvalidInputError(IngestionError):
    """A value entered by the traveler is unusable; nothing was looked up."""
    
    def __init__(self, field_errors: Dict[str, List[str]]):
        super().__init__("Reservation request is invalid", field_errors=field_errors, base_errors=[])
