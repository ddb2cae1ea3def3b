"""
Tests for turning accepted payload bodies into entity attributes.
"""
import unittest
from datetime import timedelta, timezone

from autocheckin.application.services.reservation_parsers import (
    FlightsParser,
    PassengersParser,
    parse_departure_time,
)
from autocheckin.domain.errors import MalformedPayloadError
from tests.fixtures import NOW, reservation_document, round_trip_document, segment


class PassengersParserTests(unittest.TestCase):
    
    def test_parses_passengers_in_payload_order(self):
        passengers = PassengersParser(round_trip_document()["body"]).passengers()
        
        self.assertEqual([p["first_name"] for p in passengers], ["John", "Jane"])
        self.assertEqual(passengers[0]["account_number"], "601234567")
        self.assertIsNone(passengers[0]["boarding_position"])
        self.assertEqual(passengers[1]["boarding_group"], "A")
        self.assertEqual(passengers[1]["boarding_position"], 15)
    
    def test_missing_passengers_is_malformed(self):
        body = round_trip_document()["body"]
        body["passengers"] = []
        
        with self.assertRaises(MalformedPayloadError):
            PassengersParser(body).passengers()
    
    def test_passenger_without_last_name_is_malformed(self):
        body = reservation_document(
            departure_segments=[segment("1", "DAL", "HOU", "Houston, TX", NOW + timedelta(days=1))],
            passengers=[{"firstName": "John"}],
        )["body"]
        
        with self.assertRaises(MalformedPayloadError):
            PassengersParser(body).passengers()
    
    def test_non_numeric_boarding_position_is_malformed(self):
        body = reservation_document(
            departure_segments=[segment("1", "DAL", "HOU", "Houston, TX", NOW + timedelta(days=1))],
            passengers=[{"firstName": "John", "lastName": "Smith", "boardingPosition": "A1"}],
        )["body"]
        
        with self.assertRaises(MalformedPayloadError):
            PassengersParser(body).passengers()


class FlightsParserTests(unittest.TestCase):
    
    def test_positions_restart_per_direction(self):
        flights = FlightsParser(round_trip_document()["body"]).flights()
        
        self.assertEqual(
            [(f["direction"], f["position"], f["flight_number"]) for f in flights],
            [
                ("departure", 1, "1234"),
                ("departure", 2, "2345"),
                ("return", 1, "3456"),
                ("return", 2, "4567"),
            ]
        )
    
    def test_positions_follow_departure_time_not_listing_order(self):
        body = round_trip_document()["body"]
        
        returns = [f for f in FlightsParser(body).flights() if f["direction"] == "return"]
        
        self.assertEqual(returns[0]["flight_number"], "3456")
        self.assertLess(returns[0]["departure_time"], returns[1]["departure_time"])
    
    def test_one_way_itinerary(self):
        body = reservation_document(
            departure_segments=[segment("1", "DAL", "HOU", "Houston, TX", NOW + timedelta(days=1))]
        )["body"]
        
        flights = FlightsParser(body).flights()
        
        self.assertEqual(len(flights), 1)
        self.assertEqual(flights[0]["carrier_code"], "WN")
        self.assertEqual(flights[0]["arrival_city_name"], "Houston, TX")
    
    def test_missing_itinerary_is_malformed(self):
        with self.assertRaises(MalformedPayloadError):
            FlightsParser({"passengers": []}).flights()
    
    def test_itinerary_without_departure_is_malformed(self):
        with self.assertRaises(MalformedPayloadError):
            FlightsParser({"itinerary": {}}).flights()
    
    def test_segment_missing_flight_number_is_malformed(self):
        broken = segment("1", "DAL", "HOU", "Houston, TX", NOW + timedelta(days=1))
        del broken["flightNumber"]
        body = reservation_document(departure_segments=[broken])["body"]
        
        with self.assertRaises(MalformedPayloadError):
            FlightsParser(body).flights()
    
    def test_bad_departure_time_is_malformed(self):
        broken = segment("1", "DAL", "HOU", "Houston, TX", NOW)
        broken["departureDateTime"] = "next tuesday"
        body = reservation_document(departure_segments=[broken])["body"]
        
        with self.assertRaises(MalformedPayloadError):
            FlightsParser(body).flights()


class ParseDepartureTimeTests(unittest.TestCase):
    
    def test_keeps_offset(self):
        parsed = parse_departure_time("2026-11-20T07:05:00-06:00")
        
        self.assertEqual(parsed.utcoffset(), timedelta(hours=-6))
    
    def test_naive_time_is_utc(self):
        parsed = parse_departure_time("2026-11-20T07:05:00")
        
        self.assertEqual(parsed.tzinfo, timezone.utc)
    
    def test_empty_value_is_malformed(self):
        with self.assertRaises(MalformedPayloadError):
            parse_departure_time(None)


if __name__ == "__main__":
    unittest.main()
