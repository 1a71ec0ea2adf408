from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, StrictInt

from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)


class SelectScreeningRequest(BaseModel):
    screening_id: int


class ChooseTimeRequest(BaseModel):
    selected_time: datetime


class AttendeesRequest(BaseModel):
    attendees: StrictInt


class SeatRequest(BaseModel):
    seat: str

    class Config:
        json_schema_extra = {'examples': [{'seat': 'B7'}]}


class UsernameRequest(BaseModel):
    username: str


class ConfirmRequest(BaseModel):
    username: Optional[str] = None


class ArrangementResponse(BaseModel):
    state: str
    screening_id: Optional[int] = None
    available_slots: List[datetime] = []
    selected_time: Optional[datetime] = None
    attendees: Optional[int] = None
    seats: List[str] = []
    username: Optional[str] = None

    @classmethod
    def from_aggregate(cls, arrangement: BookingArrangementAggregate) -> 'ArrangementResponse':
        return cls(
            state=arrangement.state.value,
            screening_id=arrangement.screening.id if arrangement.screening else None,
            available_slots=list(arrangement.available_slots),
            selected_time=arrangement.selected_time,
            attendees=arrangement.attendees,
            seats=list(arrangement.seats),
            username=arrangement.username,
        )
