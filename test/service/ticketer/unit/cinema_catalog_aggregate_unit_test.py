from datetime import datetime, timedelta

import pytest

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.screening_entity import Screening
from test.service.ticketer.catalog_factory import make_movie, make_screening, make_ticket


@pytest.mark.unit
class TestRemainingSeats:
    def test_empty_slot_has_every_seat(
        self, catalog: CinemaCatalogAggregate, small_screening: Screening, now: datetime
    ):
        assert catalog.remaining_seats(small_screening, now + timedelta(days=1)) == 6

    def test_counts_only_tickets_of_the_exact_slot(
        self, catalog: CinemaCatalogAggregate, small_screening: Screening, now: datetime
    ):
        slot = now + timedelta(days=1)
        catalog.add_tickets(
            [
                make_ticket(small_screening, slot, 'A1'),
                make_ticket(small_screening, slot, 'A2'),
                make_ticket(small_screening, slot + timedelta(minutes=1), 'A3'),
                make_ticket(small_screening, slot + timedelta(days=1), 'A1'),
            ]
        )

        assert catalog.remaining_seats(small_screening, slot) == 4
        assert catalog.taken_seats(small_screening, slot) == {'A1', 'A2'}

    def test_recomputed_after_tickets_change(
        self, catalog: CinemaCatalogAggregate, small_screening: Screening, now: datetime
    ):
        slot = now + timedelta(days=1)
        ticket = make_ticket(small_screening, slot, 'B2')
        catalog.add_tickets([ticket])
        assert catalog.remaining_seats(small_screening, slot) == 5

        assert catalog.remove_ticket(ticket) is True
        assert catalog.remaining_seats(small_screening, slot) == 6
        assert catalog.remove_ticket(ticket) is False


@pytest.mark.unit
class TestCatalogQueries:
    def test_lookups_by_key(self, catalog: CinemaCatalogAggregate, small_screening: Screening):
        assert catalog.find_movie('Arrival') == small_screening.movie
        assert catalog.find_venue(1) == small_screening.venue
        assert catalog.find_screening(1) is small_screening
        assert catalog.find_screening(99) is None

        with pytest.raises(NotFoundError):
            catalog.get_screening(99)

    def test_collections_are_read_only_views(self, catalog: CinemaCatalogAggregate):
        with pytest.raises(TypeError):
            catalog.screenings[5] = catalog.screenings[1]  # type: ignore[index]

        catalog.tickets.append(None)  # type: ignore[arg-type]
        assert catalog.tickets == []

    def test_genres_in_first_seen_order(self, now: datetime):
        end = now + timedelta(days=3)
        catalog = CinemaCatalogAggregate.create(
            screenings=[
                make_screening(3, movie=make_movie('Heat', 'Crime'), start=now, end=end),
                make_screening(1, movie=make_movie('Arrival', 'Sci-Fi'), start=now, end=end),
                make_screening(2, movie=make_movie('Up', 'Family'), start=now, end=end),
                make_screening(4, movie=make_movie('Dune', 'Sci-Fi'), start=now, end=end),
            ]
        )

        assert catalog.genres() == ['Sci-Fi', 'Family', 'Crime']
        assert [s.id for s in catalog.sorted_screenings(genre='Sci-Fi')] == [1, 4]

    def test_tickets_by_username_validates_username(
        self, catalog: CinemaCatalogAggregate, small_screening: Screening, now: datetime
    ):
        catalog.add_tickets(
            [
                make_ticket(small_screening, now + timedelta(days=1), 'A1', 'alice'),
                make_ticket(small_screening, now + timedelta(days=1), 'A2', 'bob'),
            ]
        )

        assert [t.seat for t in catalog.tickets_by_username('alice')] == ['A1']
        with pytest.raises(ValidationError):
            catalog.tickets_by_username('no')

    def test_remove_screening_cascades_to_tickets(
        self, catalog: CinemaCatalogAggregate, small_screening: Screening, now: datetime
    ):
        ticket = make_ticket(small_screening, now + timedelta(days=1))
        catalog.add_tickets([ticket])

        removed = catalog.remove_screening(small_screening.id)

        assert removed == [ticket]
        assert catalog.find_screening(small_screening.id) is None
        assert catalog.tickets == []
