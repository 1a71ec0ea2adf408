from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.venue_entity import Venue


class FindCatalogEntryUseCase:
    """Lookups by key: movie by title, venue by number, screening by id."""

    def __init__(self, *, cinema_catalog: CinemaCatalogAggregate) -> None:
        self.cinema_catalog = cinema_catalog

    @classmethod
    @inject
    def depends(
        cls,
        cinema_catalog: CinemaCatalogAggregate = Depends(Provide[Container.cinema_catalog]),
    ) -> Self:
        return cls(cinema_catalog=cinema_catalog)

    def find_movie(self, *, title: str) -> Movie:
        if (movie := self.cinema_catalog.find_movie(title)) is None:
            raise NotFoundError(f"Movie '{title}' not found")
        return movie

    def find_venue(self, *, venue_number: int) -> Venue:
        if (venue := self.cinema_catalog.find_venue(venue_number)) is None:
            raise NotFoundError(f'Venue {venue_number} not found')
        return venue

    def find_screening(self, *, screening_id: int) -> Screening:
        return self.cinema_catalog.get_screening(screening_id)
