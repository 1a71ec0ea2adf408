from datetime import datetime, timedelta

import pytest

from src.platform.exception.exceptions import RecoverableParseWarning, ValidationError
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket, validate_username
from src.service.ticketer.domain.entity.venue_entity import Venue
from src.service.ticketer.domain.value_object.screening_time import ScreeningTime
from test.service.ticketer.catalog_factory import make_movie, make_screening, make_ticket


@pytest.mark.unit
class TestMovieAndVenue:
    def test_movie_equality_is_by_title(self):
        assert Movie('Arrival', 'Sci-Fi', 116, 2016) == Movie('Arrival', 'Drama', 90, 2001)
        assert Movie('Arrival', 'Sci-Fi', 116, 2016) != Movie('Heat', 'Sci-Fi', 116, 2016)

    @pytest.mark.parametrize('running_time,release_year', [(0, 2016), (116, 1900)])
    def test_movie_rejects_invalid_attributes(self, running_time: int, release_year: int):
        with pytest.raises(ValidationError):
            Movie('Arrival', 'Sci-Fi', running_time, release_year)

    def test_venue_total_seats_and_equality(self):
        venue = Venue(venue_number=3, rows=18, cols=30)

        assert venue.total_seats == 540
        assert venue == Venue(venue_number=3, rows=1, cols=1)

    @pytest.mark.parametrize('number,rows,cols', [(0, 1, 1), (1, 0, 1), (1, 1, -2)])
    def test_venue_rejects_non_positive_values(self, number: int, rows: int, cols: int):
        with pytest.raises(ValidationError):
            Venue(venue_number=number, rows=rows, cols=cols)


@pytest.mark.unit
class TestScreening:
    def test_start_must_precede_end(self, now: datetime):
        with pytest.raises(ValidationError):
            make_screening(start=now, end=now)

    def test_requires_at_least_one_screening_time(self, now: datetime):
        with pytest.raises(ValidationError):
            make_screening(start=now, end=now + timedelta(days=1), times=[])

    def test_equality_is_by_id(self, now: datetime):
        first = make_screening(7, start=now, end=now + timedelta(days=1))
        second = make_screening(
            7, movie=make_movie('Heat'), start=now, end=now + timedelta(days=9)
        )

        assert first == second
        assert hash(first) == hash(second)

    def test_window_is_inclusive(self, small_screening: Screening):
        assert small_screening.contains(small_screening.start)
        assert small_screening.contains(small_screening.end)
        assert not small_screening.contains(small_screening.end + timedelta(seconds=1))

    @pytest.mark.parametrize(
        'remaining,expected',
        [
            (timedelta(hours=5), 'less than six hours'),
            (timedelta(hours=20), 'less than a day'),
            (timedelta(days=5), 'less than a week'),
            (timedelta(days=10, hours=3), '10 days'),
            (timedelta(days=18), 'more than a couple of weeks'),
            (timedelta(days=25), 'about a month'),
            (timedelta(days=60), 'more than a month'),
        ],
    )
    def test_time_status(self, now: datetime, remaining: timedelta, expected: str):
        screening = make_screening(start=now - timedelta(days=1), end=now + remaining)

        assert screening.time_status(now) == expected


@pytest.mark.unit
class TestScreeningTime:
    def test_parses_hours_and_minutes(self):
        assert ScreeningTime('Monday', '09:05').parse_time() == (9, 5)

    @pytest.mark.parametrize('value', ['noon', '25:00', '12:75', '12', '12:3'])
    def test_malformed_time_raises_recoverable_warning(self, value: str):
        with pytest.raises(RecoverableParseWarning):
            ScreeningTime('Monday', value).parse_time()


@pytest.mark.unit
class TestTicket:
    def test_identity_ignores_username(self, small_screening: Screening, now: datetime):
        selected = now + timedelta(days=1)

        assert make_ticket(small_screening, selected, 'A1', 'alice') == make_ticket(
            small_screening, selected, 'A1', 'bob'
        )
        assert make_ticket(small_screening, selected, 'A1') != make_ticket(
            small_screening, selected, 'A2'
        )

    @pytest.mark.parametrize('username', ['ab', 'a' * 17, 'bad name', 'dash-ed', ''])
    def test_username_rules(self, username: str):
        with pytest.raises(ValidationError):
            validate_username(username)

    def test_create_accepts_valid_ticket(self, small_screening: Screening, now: datetime):
        ticket = Ticket.create(
            screening=small_screening,
            selected=now + timedelta(days=1),
            seat='B3',
            username='user_01',
        )

        assert ticket.seat == 'B3'

    def test_create_rejects_seat_outside_venue(self, small_screening: Screening, now: datetime):
        with pytest.raises(ValidationError):
            Ticket.create(
                screening=small_screening,
                selected=now + timedelta(days=1),
                seat='C1',
                username='user_01',
            )

    def test_create_rejects_time_outside_window(self, small_screening: Screening):
        with pytest.raises(ValidationError):
            Ticket.create(
                screening=small_screening,
                selected=small_screening.end + timedelta(days=1),
                seat='A1',
                username='user_01',
            )
