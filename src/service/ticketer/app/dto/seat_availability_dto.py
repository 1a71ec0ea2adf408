from datetime import datetime
from typing import List

import attrs


@attrs.define(frozen=True)
class SeatAvailabilityDto:
    screening_id: int
    selected: datetime
    total_seats: int
    remaining_seats: int
    taken_seats: List[str]
