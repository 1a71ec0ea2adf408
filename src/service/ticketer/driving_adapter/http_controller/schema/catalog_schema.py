from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.venue_entity import Venue


class MovieResponse(BaseModel):
    title: str
    genre: str
    running_time: int
    release_year: int

    @classmethod
    def from_entity(cls, movie: Movie) -> 'MovieResponse':
        return cls(
            title=movie.title,
            genre=movie.genre,
            running_time=movie.running_time,
            release_year=movie.release_year,
        )


class VenueResponse(BaseModel):
    venue_number: int
    rows: int
    cols: int
    total_seats: int

    @classmethod
    def from_entity(cls, venue: Venue) -> 'VenueResponse':
        return cls(
            venue_number=venue.venue_number,
            rows=venue.rows,
            cols=venue.cols,
            total_seats=venue.total_seats,
        )


class ScreeningTimeResponse(BaseModel):
    day_of_week: str
    time: str


class ScreeningResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'movie': {
                    'title': 'Arrival',
                    'genre': 'Sci-Fi',
                    'running_time': 116,
                    'release_year': 2016,
                },
                'venue_number': 1,
                'start': '2026-01-01T00:00:00Z',
                'end': '2026-12-31T23:00:00Z',
                'times': [{'day_of_week': 'Tuesday', 'time': '12:30'}],
                'time_status': 'about a month',
            }
        },
    }

    id: int
    movie: MovieResponse
    venue_number: int
    start: datetime
    end: datetime
    times: List[ScreeningTimeResponse]
    time_status: Optional[str] = None

    @classmethod
    def from_entity(
        cls, screening: Screening, *, now: Optional[datetime] = None
    ) -> 'ScreeningResponse':
        return cls(
            id=screening.id,
            movie=MovieResponse.from_entity(screening.movie),
            venue_number=screening.venue.venue_number,
            start=screening.start,
            end=screening.end,
            times=[
                ScreeningTimeResponse(day_of_week=rule.day_of_week, time=rule.time)
                for rule in screening.times
            ],
            time_status=screening.time_status(now) if now else None,
        )


class ScreeningPageResponse(BaseModel):
    page: int
    max_page: int
    genre: Optional[str] = None
    screenings: List[ScreeningResponse]


class SlotResponse(BaseModel):
    time: datetime
    label: str


class SeatAvailabilityResponse(BaseModel):
    screening_id: int
    selected: datetime
    total_seats: int
    remaining_seats: int
    taken_seats: List[str]
