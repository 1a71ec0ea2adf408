"""Builders for catalog entities used across ticketer tests."""

from datetime import datetime, timedelta
from typing import Any, Iterable, Optional

from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket
from src.service.ticketer.domain.entity.venue_entity import Venue
from src.service.ticketer.domain.value_object.screening_time import DAYS_OF_WEEK, ScreeningTime


def make_movie(title: str = 'Arrival', genre: str = 'Sci-Fi') -> Movie:
    return Movie(title=title, genre=genre, running_time=116, release_year=2016)


def make_venue(venue_number: int = 1, rows: int = 2, cols: int = 3) -> Venue:
    return Venue(venue_number=venue_number, rows=rows, cols=cols)


def make_screening(
    screening_id: int = 1,
    *,
    start: datetime,
    end: datetime,
    movie: Optional[Movie] = None,
    venue: Optional[Venue] = None,
    times: Optional[Iterable[tuple[str, str]]] = None,
) -> Screening:
    rules = times if times is not None else [(day, '12:00') for day in DAYS_OF_WEEK]
    return Screening(
        id=screening_id,
        movie=movie or make_movie(),
        venue=venue or make_venue(),
        start=start,
        end=end,
        times=[ScreeningTime(day_of_week=day, time=time) for day, time in rules],
    )


def make_ticket(
    screening: Screening, selected: datetime, seat: str = 'A1', username: str = 'alice'
) -> Ticket:
    return Ticket(screening=screening, selected=selected, seat=seat, username=username)


def build_live_catalog_rows(now: datetime) -> dict[str, Any]:
    """
    Two active screenings around `now` plus one that has already ended.

    - 1: Arrival (Sci-Fi) in venue 1, 2x3 seats
    - 2: Paddington 2 (Family) in venue 2, 4x5 seats
    - 3: Arrival again, ended yesterday (never loaded)
    """
    arrival = make_movie('Arrival', 'Sci-Fi')
    paddington = make_movie('Paddington 2', 'Family')
    small = make_venue(1, rows=2, cols=3)
    medium = make_venue(2, rows=4, cols=5)
    return {
        'movies': [arrival, paddington],
        'venues': [small, medium],
        'screenings': [
            make_screening(
                1,
                movie=arrival,
                venue=small,
                start=now - timedelta(days=1),
                end=now + timedelta(days=30),
            ),
            make_screening(
                2,
                movie=paddington,
                venue=medium,
                start=now - timedelta(days=1),
                end=now + timedelta(days=30),
            ),
            make_screening(
                3,
                movie=arrival,
                venue=small,
                start=now - timedelta(days=20),
                end=now - timedelta(days=1),
            ),
        ],
        'tickets': [],
    }
