"""
Cinema Catalog Aggregate - the single owner of the in-memory booking data

[DDD Design Principles]
- CinemaCatalogAggregate is the Aggregate Root
- Movies, venues, screenings and tickets are only mutated through its methods
- Collections are handed out as read-only views or copies

[Business Invariants]
- Remaining seats are recomputed on every query, never cached
- A ticket never outlives its screening
"""

from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket, validate_username
from src.service.ticketer.domain.entity.venue_entity import Venue


@attrs.define
class CinemaCatalogAggregate:
    _movies: Dict[str, Movie] = attrs.field(factory=dict)
    _venues: Dict[int, Venue] = attrs.field(factory=dict)
    _screenings: Dict[int, Screening] = attrs.field(factory=dict)
    _tickets: List[Ticket] = attrs.field(factory=list)

    @classmethod
    def create(
        cls,
        *,
        movies: Iterable[Movie] = (),
        venues: Iterable[Venue] = (),
        screenings: Iterable[Screening] = (),
        tickets: Iterable[Ticket] = (),
    ) -> 'CinemaCatalogAggregate':
        catalog = cls()
        catalog.replace_contents(
            movies=movies, venues=venues, screenings=screenings, tickets=tickets
        )
        return catalog

    def replace_contents(
        self,
        *,
        movies: Iterable[Movie],
        venues: Iterable[Venue],
        screenings: Iterable[Screening],
        tickets: Iterable[Ticket],
    ) -> None:
        self._movies = {movie.title: movie for movie in movies}
        self._venues = {venue.venue_number: venue for venue in venues}
        self._screenings = {screening.id: screening for screening in screenings}
        self._tickets = list(tickets)

    # ============================== Read side ==============================

    @property
    def movies(self) -> Mapping[str, Movie]:
        return MappingProxyType(self._movies)

    @property
    def venues(self) -> Mapping[int, Venue]:
        return MappingProxyType(self._venues)

    @property
    def screenings(self) -> Mapping[int, Screening]:
        return MappingProxyType(self._screenings)

    @property
    def tickets(self) -> List[Ticket]:
        return list(self._tickets)

    def find_movie(self, title: str) -> Optional[Movie]:
        return self._movies.get(title)

    def find_venue(self, venue_number: int) -> Optional[Venue]:
        return self._venues.get(venue_number)

    def find_screening(self, screening_id: int) -> Optional[Screening]:
        return self._screenings.get(screening_id)

    def get_screening(self, screening_id: int) -> Screening:
        if (screening := self._screenings.get(screening_id)) is None:
            raise NotFoundError(f'Screening {screening_id} not found')
        return screening

    def sorted_screenings(self, *, genre: Optional[str] = None) -> List[Screening]:
        """Screenings in ascending id order, optionally of one genre."""
        return [
            self._screenings[screening_id]
            for screening_id in sorted(self._screenings)
            if genre is None or self._screenings[screening_id].movie.genre == genre
        ]

    def genres(self) -> List[str]:
        """Distinct genres of the screenings, in first-seen order."""
        return list(dict.fromkeys(screening.movie.genre for screening in self.sorted_screenings()))

    def tickets_by_screening(self, screening_id: int) -> List[Ticket]:
        return [ticket for ticket in self._tickets if ticket.screening.id == screening_id]

    def tickets_by_screening_and_time(
        self, screening: Screening, selected: datetime
    ) -> List[Ticket]:
        return [ticket for ticket in self._tickets if ticket.matches(screening, selected)]

    def tickets_by_username(self, username: str) -> List[Ticket]:
        validate_username(username)
        return [ticket for ticket in self._tickets if ticket.username == username]

    def remaining_seats(self, screening: Screening, selected: datetime) -> int:
        """Venue capacity minus the tickets booked for exactly this slot."""
        return screening.venue.total_seats - len(
            self.tickets_by_screening_and_time(screening, selected)
        )

    def taken_seats(self, screening: Screening, selected: datetime) -> Set[str]:
        return {ticket.seat for ticket in self.tickets_by_screening_and_time(screening, selected)}

    # ============================== Write side ==============================

    def add_tickets(self, tickets: Iterable[Ticket]) -> None:
        self._tickets.extend(tickets)

    def remove_ticket(self, ticket: Ticket) -> bool:
        try:
            self._tickets.remove(ticket)
        except ValueError:
            return False
        return True

    def remove_tickets(self, tickets: Iterable[Ticket]) -> List[Ticket]:
        """Remove every given ticket, returning the ones that were present."""
        doomed = set(tickets)
        removed = [ticket for ticket in self._tickets if ticket in doomed]
        self._tickets = [ticket for ticket in self._tickets if ticket not in doomed]
        return removed

    @Logger.io
    def remove_screening(self, screening_id: int) -> List[Ticket]:
        """Remove a screening together with every ticket that references it."""
        self._screenings.pop(screening_id, None)
        return self.remove_tickets(self.tickets_by_screening(screening_id))
