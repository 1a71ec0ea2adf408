from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate


class ToggleSeatUseCase:
    def __init__(
        self,
        *,
        cinema_catalog: CinemaCatalogAggregate,
        booking_arrangement: BookingArrangementAggregate,
    ) -> None:
        self.cinema_catalog = cinema_catalog
        self.booking_arrangement = booking_arrangement

    @classmethod
    @inject
    def depends(
        cls,
        cinema_catalog: CinemaCatalogAggregate = Depends(Provide[Container.cinema_catalog]),
        booking_arrangement: BookingArrangementAggregate = Depends(
            Provide[Container.booking_arrangement]
        ),
    ) -> Self:
        return cls(cinema_catalog=cinema_catalog, booking_arrangement=booking_arrangement)

    @Logger.io
    def execute(self, *, seat: str) -> BookingArrangementAggregate:
        arrangement = self.booking_arrangement
        taken: set[str] = set()
        if arrangement.screening is not None and arrangement.selected_time is not None:
            taken = self.cinema_catalog.taken_seats(
                arrangement.screening, arrangement.selected_time
            )
        arrangement.toggle_seat(seat=seat, taken_seats=taken)
        return arrangement
