from datetime import datetime, timedelta, timezone

import pytest

from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.screening_entity import Screening
from test.service.ticketer.catalog_factory import make_movie, make_screening, make_venue


# Wednesday
FIXED_NOW = datetime(2026, 10, 21, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def live_now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def small_screening(now: datetime) -> Screening:
    """Arrival in a 2x3 venue, every day at 12:00, active for 30 days."""
    return make_screening(
        1,
        movie=make_movie(),
        venue=make_venue(1, rows=2, cols=3),
        start=now - timedelta(days=1),
        end=now + timedelta(days=30),
    )


@pytest.fixture
def catalog(small_screening: Screening) -> CinemaCatalogAggregate:
    return CinemaCatalogAggregate.create(
        movies=[small_screening.movie],
        venues=[small_screening.venue],
        screenings=[small_screening],
    )


@pytest.fixture
def arrangement() -> BookingArrangementAggregate:
    return BookingArrangementAggregate()
