"""
Cinema Store Interface

Storage collaborator: bulk loads at startup, incremental writes on demand.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping

from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket
from src.service.ticketer.domain.entity.venue_entity import Venue


class ICinemaStore(ABC):
    @abstractmethod
    def load_movies(self) -> List[Movie]:
        pass

    @abstractmethod
    def load_venues(self) -> List[Venue]:
        pass

    @abstractmethod
    def load_screenings(
        self, *, movies: Mapping[str, Movie], venues: Mapping[int, Venue]
    ) -> List[Screening]:
        """Screenings whose movie and venue are both known."""
        pass

    @abstractmethod
    def load_tickets(self, *, screenings: Mapping[int, Screening]) -> List[Ticket]:
        """Tickets of the given screenings; tickets of any other screening are skipped."""
        pass

    @abstractmethod
    def save_ticket(self, *, ticket: Ticket) -> None:
        pass

    @abstractmethod
    def delete_ticket(self, *, ticket: Ticket) -> None:
        pass

    @abstractmethod
    def delete_screening_cascade(self, *, screening_id: int) -> None:
        """Delete a screening, its screening times and its tickets."""
        pass
