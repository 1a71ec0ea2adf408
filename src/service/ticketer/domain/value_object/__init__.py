"""Ticketer Domain Value Objects"""

from src.service.ticketer.domain.value_object.screening_time import DAYS_OF_WEEK, ScreeningTime
from src.service.ticketer.domain.value_object.seat_position import (
    SeatPosition,
    position_to_seat_label,
    seat_label_to_position,
)

__all__ = [
    'DAYS_OF_WEEK',
    'ScreeningTime',
    'SeatPosition',
    'position_to_seat_label',
    'seat_label_to_position',
]
