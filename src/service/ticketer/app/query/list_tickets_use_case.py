from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.ticket_entity import Ticket


class ListTicketsUseCase:
    def __init__(self, *, cinema_catalog: CinemaCatalogAggregate) -> None:
        self.cinema_catalog = cinema_catalog

    @classmethod
    @inject
    def depends(
        cls,
        cinema_catalog: CinemaCatalogAggregate = Depends(Provide[Container.cinema_catalog]),
    ) -> Self:
        return cls(cinema_catalog=cinema_catalog)

    @Logger.io
    def by_screening(self, *, screening_id: int) -> List[Ticket]:
        self.cinema_catalog.get_screening(screening_id)
        return self.cinema_catalog.tickets_by_screening(screening_id)

    @Logger.io
    def by_screening_and_time(self, *, screening_id: int, selected: datetime) -> List[Ticket]:
        screening = self.cinema_catalog.get_screening(screening_id)
        return self.cinema_catalog.tickets_by_screening_and_time(screening, selected)

    @Logger.io
    def by_username(self, *, username: str) -> List[Ticket]:
        return self.cinema_catalog.tickets_by_username(username)
