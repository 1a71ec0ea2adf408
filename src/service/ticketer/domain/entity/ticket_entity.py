"""
Ticket Entity

One booked seat for one screening at one concrete slot.

[Identity]
- (screening, selected, seat); the username is not part of it

[Creation]
- Ticket.create validates window, venue bounds and username
- The plain constructor is used for rows coming from storage, so that
  out-of-range tickets can still be detected by the consistency validator
"""

from datetime import datetime
import re

import attrs

from src.platform.exception.exceptions import ValidationError
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.value_object.seat_position import seat_label_to_position


USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_]{3,16}$')


def validate_username(username: str) -> str:
    if not isinstance(username, str) or not USERNAME_PATTERN.match(username):
        raise ValidationError(
            'Username must be 3-16 characters of letters, digits or underscores'
        )
    return username


@attrs.define(frozen=True)
class Ticket:
    screening: Screening
    selected: datetime
    seat: str
    username: str = attrs.field(eq=False)

    @classmethod
    def create(
        cls, *, screening: Screening, selected: datetime, seat: str, username: str
    ) -> 'Ticket':
        validate_username(username)
        if not seat_label_to_position(seat).is_within(screening.venue):
            raise ValidationError(
                f'Seat {seat} is outside venue {screening.venue.venue_number}'
            )
        if not screening.contains(selected):
            raise ValidationError(
                f'Selected time {selected.isoformat()} is outside screening {screening.id}'
            )
        return cls(screening=screening, selected=selected, seat=seat, username=username)

    def matches(self, screening: Screening, selected: datetime) -> bool:
        return self.screening == screening and self.selected == selected
