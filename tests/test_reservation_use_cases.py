"""
Tests for deleting reservations and recording check-in outcomes.
"""
import unittest

from autocheckin.application.services.checkin_scheduler import CheckinScheduler
from autocheckin.application.use_cases.delete_reservation_use_case import DeleteReservationUseCase
from autocheckin.application.use_cases.ingest_reservation_use_case import (
    IngestionRequest,
    IngestReservationUseCase,
)
from autocheckin.application.use_cases.record_checkin_use_case import RecordCheckinUseCase
from autocheckin.infrastructure.repositories.reservation_repository import InMemoryReservationRepository
from tests.fixtures import (
    FakeJobScheduler,
    FakeNotifier,
    FakeReservationClient,
    frozen_clock,
    round_trip_document,
)


class StoredReservationTestCase(unittest.TestCase):
    """Ingests the round trip fixture before each test."""
    
    def setUp(self):
        self.repository = InMemoryReservationRepository()
        self.jobs = FakeJobScheduler()
        use_case = IngestReservationUseCase(
            reservation_client=FakeReservationClient(round_trip_document()),
            reservation_repository=self.repository,
            checkin_scheduler=CheckinScheduler(self.jobs, clock=frozen_clock),
            notifier=FakeNotifier(),
        )
        self.reservation = use_case.execute(
            IngestionRequest(last_name="Smith", first_name="John", confirmation_number="AB12CD")
        ).reservation


class DeleteReservationUseCaseTests(StoredReservationTestCase):
    
    def test_delete_removes_aggregate_and_cancels_jobs(self):
        deleted = DeleteReservationUseCase(self.repository, self.jobs).execute("ab12cd")
        
        self.assertEqual(deleted.id, self.reservation.id)
        self.assertIsNone(self.repository.find_by_confirmation_number("AB12CD"))
        self.assertIsNone(self.repository.get(self.reservation.id))
        self.assertEqual(
            sorted(self.jobs.cancelled),
            sorted(flight.id for flight in self.reservation.flights)
        )
    
    def test_delete_unknown_reservation(self):
        self.assertIsNone(DeleteReservationUseCase(self.repository, self.jobs).execute("QQ1234"))
        self.assertEqual(self.jobs.cancelled, [])
        self.assertEqual(self.repository.count(), 1)
    
    def test_confirmation_number_can_be_reused_after_delete(self):
        DeleteReservationUseCase(self.repository, self.jobs).execute("AB12CD")
        
        use_case = IngestReservationUseCase(
            reservation_client=FakeReservationClient(round_trip_document()),
            reservation_repository=self.repository,
            checkin_scheduler=CheckinScheduler(self.jobs, clock=frozen_clock),
            notifier=FakeNotifier(),
        )
        result = use_case.execute(
            IngestionRequest(last_name="Smith", first_name="John", confirmation_number="AB12CD")
        )
        
        self.assertTrue(result.success)


class RecordCheckinUseCaseTests(StoredReservationTestCase):
    
    def test_records_outcome_on_flight(self):
        flight = self.reservation.departure_flights()[0]
        
        updated = RecordCheckinUseCase(self.repository).execute("AB12CD", flight.id, "completed")
        
        self.assertEqual(len(updated.checkins), 1)
        self.assertTrue(updated.checkins_completed)
        stored = self.repository.get(self.reservation.id)
        self.assertEqual(stored.find_flight(flight.id).checkins[0].status, "completed")
    
    def test_failed_checkin_is_not_completed(self):
        flight = self.reservation.return_flights()[0]
        use_case = RecordCheckinUseCase(self.repository)
        
        use_case.execute("AB12CD", flight.id, "completed")
        updated = use_case.execute("AB12CD", flight.id, "failed")
        
        self.assertEqual(len(updated.checkins), 2)
        self.assertFalse(updated.checkins_completed)
    
    def test_unknown_flight(self):
        self.assertIsNone(RecordCheckinUseCase(self.repository).execute("AB12CD", "nope", "completed"))
    
    def test_unknown_reservation(self):
        flight = self.reservation.flights[0]
        self.assertIsNone(RecordCheckinUseCase(self.repository).execute("ZZ9ZZZ", flight.id, "completed"))
    
    def test_unknown_status(self):
        flight = self.reservation.flights[0]
        with self.assertRaises(ValueError):
            RecordCheckinUseCase(self.repository).execute("AB12CD", flight.id, "boarded")


if __name__ == "__main__":
    unittest.main()
