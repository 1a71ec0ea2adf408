from datetime import datetime
from typing import List

from pydantic import BaseModel

from src.service.ticketer.domain.entity.ticket_entity import Ticket


class TicketResponse(BaseModel):
    screening_id: int
    movie_title: str
    venue_number: int
    selected: datetime
    seat: str
    username: str

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketResponse':
        return cls(
            screening_id=ticket.screening.id,
            movie_title=ticket.screening.movie.title,
            venue_number=ticket.screening.venue.venue_number,
            selected=ticket.selected,
            seat=ticket.seat,
            username=ticket.username,
        )


class TicketKeyRequest(BaseModel):
    screening_id: int
    selected: datetime
    seat: str


class DeleteTicketsRequest(BaseModel):
    tickets: List[TicketKeyRequest]


class DeleteTicketsResponse(BaseModel):
    deleted: int
