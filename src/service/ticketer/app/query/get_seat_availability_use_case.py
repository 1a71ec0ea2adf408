from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.dto.seat_availability_dto import SeatAvailabilityDto
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate


class GetSeatAvailabilityUseCase:
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
    def execute(self, *, screening_id: int, selected: datetime) -> SeatAvailabilityDto:
        screening = self.cinema_catalog.get_screening(screening_id)
        return SeatAvailabilityDto(
            screening_id=screening_id,
            selected=selected,
            total_seats=screening.venue.total_seats,
            remaining_seats=self.cinema_catalog.remaining_seats(screening, selected),
            taken_seats=sorted(self.cinema_catalog.taken_seats(screening, selected)),
        )
