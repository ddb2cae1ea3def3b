"""
Tests for the Southwest reservation client.
"""
import unittest
from unittest import mock

import requests

from autocheckin.domain.errors import RetrievalUnavailableError
from autocheckin.infrastructure.clients.southwest_reservation_client import SouthwestReservationClient
from tests.fixtures import round_trip_document


def fake_response(status_code=200, json_data=None, text=None):
    response = mock.Mock()
    response.status_code = status_code
    if json_data is not None:
        response.json.return_value = json_data
        response.text = text if text is not None else "{...}"
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    return response


class SouthwestReservationClientTests(unittest.TestCase):
    
    def setUp(self):
        self.client = SouthwestReservationClient(
            base_url="https://api.example.test/",
            api_key="secret",
            timeout=5,
        )
        patcher = mock.patch.object(self.client.session, "get")
        self.get = patcher.start()
        self.addCleanup(patcher.stop)
    
    def retrieve(self):
        return self.client.retrieve_reservation(last_name="Smith", first_name="John", confirmation_number="AB12CD")
    
    def test_request(self):
        self.get.return_value = fake_response(json_data=round_trip_document())
        
        self.retrieve()
        
        self.get.assert_called_once_with(
            "https://api.example.test/v1/mobile-air-booking/page/view-reservation/AB12CD",
            headers={"Accept": "application/json", "X-API-Key": "secret"},
            params={"first-name": "John", "last-name": "Smith"},
            timeout=5,
        )
    
    def test_accepted_document(self):
        self.get.return_value = fake_response(json_data=round_trip_document())
        
        response = self.retrieve()
        
        self.assertFalse(response.is_error())
        self.assertEqual(response.body["recordLocator"], "AB12CD")
    
    def test_client_error_becomes_error_document(self):
        self.get.return_value = fake_response(
            status_code=404,
            json_data={"code": "SW107023", "message": "We were unable to retrieve your reservation."}
        )
        
        response = self.retrieve()
        
        self.assertTrue(response.is_error())
        self.assertTrue(response.is_entered_incorrectly())
        self.assertEqual(response.status_code, 404)
    
    def test_timeout(self):
        self.get.side_effect = requests.Timeout()
        
        with self.assertRaises(RetrievalUnavailableError):
            self.retrieve()
    
    def test_connection_error(self):
        self.get.side_effect = requests.ConnectionError("refused")
        
        with self.assertRaises(RetrievalUnavailableError):
            self.retrieve()
    
    def test_server_error(self):
        self.get.return_value = fake_response(status_code=503, text="Service Unavailable")
        
        with self.assertRaises(RetrievalUnavailableError):
            self.retrieve()
    
    def test_throttled(self):
        self.get.return_value = fake_response(status_code=429, json_data={"message": "Too Many Requests"})
        
        with self.assertRaises(RetrievalUnavailableError) as raised:
            self.retrieve()
        
        self.assertTrue(raised.exception.retryable)
    
    def test_lookup_is_attempted_once(self):
        adapter = self.client.session.get_adapter("https://api.example.test/")
        
        self.assertEqual(adapter.max_retries.total, 0)
    
    def test_empty_body(self):
        self.get.return_value = fake_response(status_code=200)
        
        with self.assertRaises(RetrievalUnavailableError):
            self.retrieve()
    
    def test_non_json_body(self):
        self.get.return_value = fake_response(status_code=200, text="<html>maintenance</html>")
        
        with self.assertRaises(RetrievalUnavailableError):
            self.retrieve()


if __name__ == "__main__":
    unittest.main()
