"""
Tests for queueing check-in jobs on Celery.
"""
import unittest
from datetime import timedelta
from unittest import mock

from autocheckin.infrastructure.schedulers.celery_checkin_scheduler import (
    CeleryCheckinJobScheduler,
    CheckinTimingPolicy,
)
from tests.fixtures import NOW, frozen_clock


class CheckinTimingPolicyTests(unittest.TestCase):
    
    def test_fires_when_checkin_opens(self):
        policy = CheckinTimingPolicy(open_before=timedelta(hours=24))
        departure = NOW + timedelta(days=3)
        
        self.assertEqual(policy.fire_time(departure, NOW), departure - timedelta(hours=24))
    
    def test_offset_shifts_fire_time(self):
        policy = CheckinTimingPolicy(open_before=timedelta(hours=24), offset=timedelta(seconds=-30))
        departure = NOW + timedelta(days=3)
        
        self.assertEqual(policy.fire_time(departure, NOW), departure - timedelta(hours=24, seconds=30))
    
    def test_open_window_fires_now(self):
        policy = CheckinTimingPolicy(open_before=timedelta(hours=24))
        
        self.assertEqual(policy.fire_time(NOW + timedelta(hours=2), NOW), NOW)


class CeleryCheckinJobSchedulerTests(unittest.TestCase):
    
    def setUp(self):
        self.celery = mock.Mock()
        self.scheduler = CeleryCheckinJobScheduler(
            celery=self.celery,
            policy=CheckinTimingPolicy(open_before=timedelta(hours=24)),
            task_name="checkin.perform",
            clock=frozen_clock,
        )
    
    def test_schedule_sends_task_by_name(self):
        departure = NOW + timedelta(days=2)
        
        job_id = self.scheduler.schedule_checkin("res-1", "flight-1", departure)
        
        self.assertEqual(job_id, "checkin-flight-1")
        self.celery.send_task.assert_called_once_with(
            "checkin.perform",
            args=["res-1", "flight-1"],
            kwargs={"departure_time": departure.isoformat()},
            eta=departure - timedelta(hours=24),
            task_id="checkin-flight-1",
        )
    
    def test_broker_failure_returns_none(self):
        self.celery.send_task.side_effect = ConnectionError("broker down")
        
        self.assertIsNone(self.scheduler.schedule_checkin("res-1", "flight-1", NOW + timedelta(days=2)))
    
    def test_cancel_revokes_flight_job(self):
        self.assertTrue(self.scheduler.cancel_checkin("flight-1"))
        self.celery.control.revoke.assert_called_once_with("checkin-flight-1")
    
    def test_cancel_failure(self):
        self.celery.control.revoke.side_effect = ConnectionError("broker down")
        
        self.assertFalse(self.scheduler.cancel_checkin("flight-1"))


if __name__ == "__main__":
    unittest.main()
