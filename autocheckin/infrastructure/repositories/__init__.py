"""Repository implementations (Infrastructure Layer).

These implement domain interfaces defined in autocheckin.domain.interfaces.
"""
from autocheckin.infrastructure.repositories.reservation_repository import (
    InMemoryReservationRepository,
    RedisReservationRepository,
)

__all__ = [
    "InMemoryReservationRepository",
    "RedisReservationRepository",
]
