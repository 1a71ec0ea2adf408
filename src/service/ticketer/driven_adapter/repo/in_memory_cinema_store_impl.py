from typing import Iterable, List, Mapping

from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.interface.i_cinema_store import ICinemaStore
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket
from src.service.ticketer.domain.entity.venue_entity import Venue


class InMemoryCinemaStoreImpl(ICinemaStore):
    """Keeps every row in process memory. Used by tests and CINEMA_STORE=memory."""

    def __init__(
        self,
        *,
        movies: Iterable[Movie] = (),
        venues: Iterable[Venue] = (),
        screenings: Iterable[Screening] = (),
        tickets: Iterable[Ticket] = (),
    ) -> None:
        self.movies: List[Movie] = list(movies)
        self.venues: List[Venue] = list(venues)
        self.screenings: List[Screening] = list(screenings)
        self.tickets: List[Ticket] = list(tickets)

    def load_movies(self) -> List[Movie]:
        return list(self.movies)

    def load_venues(self) -> List[Venue]:
        return list(self.venues)

    def load_screenings(
        self, *, movies: Mapping[str, Movie], venues: Mapping[int, Venue]
    ) -> List[Screening]:
        return [
            screening
            for screening in self.screenings
            if screening.movie.title in movies and screening.venue.venue_number in venues
        ]

    def load_tickets(self, *, screenings: Mapping[int, Screening]) -> List[Ticket]:
        return [ticket for ticket in self.tickets if ticket.screening.id in screenings]

    @Logger.io
    def save_ticket(self, *, ticket: Ticket) -> None:
        self.tickets.append(ticket)

    @Logger.io
    def delete_ticket(self, *, ticket: Ticket) -> None:
        self.tickets = [existing for existing in self.tickets if existing != ticket]

    @Logger.io
    def delete_screening_cascade(self, *, screening_id: int) -> None:
        self.screenings = [s for s in self.screenings if s.id != screening_id]
        self.tickets = [t for t in self.tickets if t.screening.id != screening_id]
