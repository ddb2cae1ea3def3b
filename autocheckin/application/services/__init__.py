"""Application services."""
from autocheckin.application.services.checkin_scheduler import CheckinScheduler
from autocheckin.application.services.reservation_parsers import FlightsParser, PassengersParser
from autocheckin.application.services.response_classifier import (
    Classification,
    ClassificationOutcome,
    ResponseClassifier,
)

__all__ = [
    "CheckinScheduler",
    "FlightsParser",
    "PassengersParser",
    "Classification",
    "ClassificationOutcome",
    "ResponseClassifier",
]
