from datetime import datetime, timezone
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate


class SelectScreeningUseCase:
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
    def execute(
        self, *, screening_id: int, now: Optional[datetime] = None
    ) -> BookingArrangementAggregate:
        """Start (or restart) an arrangement for a screening; slots are computed on entry."""
        screening = self.cinema_catalog.get_screening(screening_id)
        self.booking_arrangement.select_screening(
            screening=screening, now=now or datetime.now(timezone.utc)
        )
        Logger.base.info(
            f'🎬 [ARRANGE] Screening {screening_id} selected, '
            f'{len(self.booking_arrangement.available_slots)} slot(s) available'
        )
        return self.booking_arrangement
