"""
Tests for choosing which flights get an automatic check-in.
"""
import unittest
from datetime import timedelta

from autocheckin.application.services.checkin_scheduler import CheckinScheduler
from tests.fixtures import NOW, FakeJobScheduler, frozen_clock
from tests.test_reservation import make_flight, make_reservation


class CheckinSchedulerTests(unittest.TestCase):
    
    def setUp(self):
        self.jobs = FakeJobScheduler()
        self.scheduler = CheckinScheduler(self.jobs, clock=frozen_clock)
    
    def test_schedules_first_leg_of_each_direction(self):
        reservation = make_reservation(flights=[
            make_flight("departure", 1, hours=24, flight_number="1"),
            make_flight("departure", 2, hours=27, flight_number="2"),
            make_flight("return", 1, hours=96, flight_number="3"),
            make_flight("return", 2, hours=99, flight_number="4"),
        ])
        
        scheduled = self.scheduler.schedule(reservation)
        
        self.assertEqual(sorted(f.flight_number for f in scheduled), ["1", "3"])
        self.assertEqual(len(self.jobs.scheduled), 2)
        self.assertTrue(all(job["reservation_id"] == reservation.id for job in self.jobs.scheduled))
    
    def test_never_schedules_departed_flights(self):
        reservation = make_reservation(flights=[
            make_flight("departure", 1, hours=-2, flight_number="1"),
            make_flight("return", 1, hours=48, flight_number="2"),
        ])
        
        scheduled = self.scheduler.schedule(reservation)
        
        self.assertEqual([f.flight_number for f in scheduled], ["2"])
    
    def test_departure_exactly_now_is_not_scheduled(self):
        reservation = make_reservation(flights=[make_flight("departure", 1, hours=0)])
        
        self.assertEqual(self.scheduler.schedule(reservation), [])
        self.assertEqual(self.jobs.scheduled, [])
    
    def test_never_schedules_later_legs(self):
        reservation = make_reservation(flights=[make_flight("departure", 2, hours=24)])
        
        self.assertEqual(self.scheduler.schedule(reservation), [])
    
    def test_passes_departure_time_to_job_scheduler(self):
        flight = make_flight("departure", 1, hours=24)
        
        self.scheduler.schedule(make_reservation(flights=[flight]))
        
        self.assertEqual(self.jobs.scheduled[0]["flight_id"], flight.id)
        self.assertEqual(self.jobs.scheduled[0]["departure_time"], NOW + timedelta(hours=24))
    
    def test_rejected_jobs_are_not_reported_as_scheduled(self):
        scheduler = CheckinScheduler(FakeJobScheduler(accept=False), clock=frozen_clock)
        
        self.assertEqual(scheduler.schedule(make_reservation()), [])


if __name__ == "__main__":
    unittest.main()
