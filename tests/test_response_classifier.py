"""
Tests for sorting airline retrieval responses.
"""
import unittest

from autocheckin.application.services.response_classifier import ClassificationOutcome, ResponseClassifier
from autocheckin.domain.entities.retrieved_reservation import RetrievedReservation
from autocheckin.domain.errors import (
    InvalidCredentialsError,
    ReservationCancelledError,
    RetrievalRejectedError,
)
from tests.fixtures import round_trip_document


class ResponseClassifierTests(unittest.TestCase):
    """Validate classification outcomes and the errors they map to."""
    
    def setUp(self):
        self.classifier = ResponseClassifier()
    
    def test_accepted_domestic_response(self):
        classification = self.classifier.classify(RetrievedReservation(round_trip_document()))
        
        self.assertIs(classification.outcome, ClassificationOutcome.ACCEPTED)
        self.assertTrue(classification.accepted)
        self.assertFalse(classification.international)
        self.assertIn("body", classification.payload)
        self.assertIsNone(classification.to_error())
    
    def test_accepted_international_response_is_flagged(self):
        classification = self.classifier.classify(RetrievedReservation(round_trip_document(international=True)))
        
        self.assertTrue(classification.accepted)
        self.assertTrue(classification.international)
    
    def test_entered_incorrectly_by_code(self):
        response = RetrievedReservation({"errmsg": "Something went wrong", "code": "SW107023"}, status_code=404)
        
        classification = self.classifier.classify(response)
        
        self.assertIs(classification.outcome, ClassificationOutcome.ENTERED_INCORRECTLY)
        error = classification.to_error()
        self.assertIsInstance(error, InvalidCredentialsError)
        self.assertEqual(
            sorted(error.errors),
            ["confirmation_number", "first_name", "last_name"]
        )
    
    def test_cancelled_by_message(self):
        response = RetrievedReservation({"errmsg": "This reservation has been cancelled."}, status_code=400)
        
        classification = self.classifier.classify(response)
        
        self.assertIs(classification.outcome, ClassificationOutcome.CANCELLED)
        error = classification.to_error()
        self.assertIsInstance(error, ReservationCancelledError)
        self.assertEqual(error.errors, {"base": ["Your reservation has been cancelled"]})
    
    def test_other_error_passes_message_through(self):
        response = RetrievedReservation({"errmsg": "Service is down for maintenance", "code": "SW999999"})
        
        classification = self.classifier.classify(response)
        
        self.assertIs(classification.outcome, ClassificationOutcome.OTHER_ERROR)
        error = classification.to_error()
        self.assertIsInstance(error, RetrievalRejectedError)
        self.assertEqual(error.errors, {"base": ["Service is down for maintenance"]})
    
    def test_document_without_body_is_an_error(self):
        classification = self.classifier.classify(RetrievedReservation({}))
        
        self.assertIs(classification.outcome, ClassificationOutcome.OTHER_ERROR)
    
    def test_is_international_treats_missing_flag_as_false(self):
        self.assertFalse(ResponseClassifier.is_international({"body": {}}))
        self.assertFalse(ResponseClassifier.is_international({}))
        self.assertFalse(ResponseClassifier.is_international(None))
        self.assertTrue(ResponseClassifier.is_international({"body": {"isInternationalPNR": "true"}}))


if __name__ == "__main__":
    unittest.main()
