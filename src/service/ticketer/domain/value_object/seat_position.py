"""
Seat Position Value Object

Maps a human seat label (row letter + column number, e.g. "B17") to a
zero-based (row, col) grid position and back.
"""

import re
from typing import TYPE_CHECKING

import attrs

from src.platform.exception.exceptions import FormatError


if TYPE_CHECKING:
    from src.service.ticketer.domain.entity.venue_entity import Venue


SEAT_LABEL_PATTERN = re.compile(r'^([A-Z])(\d+)$')


@attrs.define(frozen=True)
class SeatPosition:
    """Seat Position (Value Object)"""

    row: int
    col: int

    @property
    def label(self) -> str:
        return position_to_seat_label(self.row, self.col)

    def is_within(self, venue: 'Venue') -> bool:
        return 0 <= self.row < venue.rows and 0 <= self.col < venue.cols

    @classmethod
    def from_label(cls, label: str) -> 'SeatPosition':
        return seat_label_to_position(label)


def seat_label_to_position(label: str) -> SeatPosition:
    """
    Decode a seat label into its grid position.

    Raises:
        FormatError: When the label is not <letter><digits>
    """
    match = SEAT_LABEL_PATTERN.match(label) if isinstance(label, str) else None
    if not match:
        raise FormatError(f'Invalid seat label: {label!r}. Expected: <letter><digits> (e.g. B17)')
    row_letter, col_digits = match.groups()
    return SeatPosition(row=ord(row_letter) - ord('A'), col=int(col_digits) - 1)


def position_to_seat_label(row: int, col: int) -> str:
    # No bounds check here; callers validate against the venue
    return f'{chr(ord("A") + row)}{col + 1}'
