"""
Screening Entity

A movie's scheduled run at a venue over an active window [start, end],
recurring weekly per one or more ScreeningTime rules.
"""

from datetime import datetime
from typing import Tuple

import attrs

from src.platform.exception.exceptions import ValidationError
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.venue_entity import Venue
from src.service.ticketer.domain.value_object.screening_time import ScreeningTime


def _validate_times(instance: object, attribute: attrs.Attribute, value: tuple) -> None:
    if not value:
        raise ValidationError('Screening must have at least one screening time')


@attrs.define(frozen=True)
class Screening:
    id: int
    movie: Movie = attrs.field(eq=False)
    venue: Venue = attrs.field(eq=False)
    start: datetime = attrs.field(eq=False)
    end: datetime = attrs.field(eq=False)
    times: Tuple[ScreeningTime, ...] = attrs.field(
        eq=False, converter=tuple, validator=_validate_times
    )

    def __attrs_post_init__(self) -> None:
        if self.start >= self.end:
            raise ValidationError(f'Screening {self.id} must start before it ends')

    def contains(self, timestamp: datetime) -> bool:
        """Inclusive on both ends of the active window."""
        return self.start <= timestamp <= self.end

    def is_active(self, now: datetime) -> bool:
        return self.start < now < self.end

    def time_status(self, now: datetime) -> str:
        """Casual description of how long bookings stay open."""
        diff = self.end - now
        hours = diff.total_seconds() // 3600
        days = diff.days
        if hours <= 6:
            return 'less than six hours'
        elif days <= 1:
            return 'less than a day'
        elif days <= 7:
            return 'less than a week'
        elif days <= 14:
            return f'{days} days'
        elif days <= 21:
            return 'more than a couple of weeks'
        elif days <= 28:
            return 'about a month'
        return 'more than a month'
