"""Job scheduler implementations."""
from autocheckin.infrastructure.schedulers.celery_checkin_scheduler import (
    CeleryCheckinJobScheduler,
    CheckinTimingPolicy,
)

__all__ = [
    "CeleryCheckinJobScheduler",
    "CheckinTimingPolicy",
]
