from datetime import datetime, timezone
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.slot_expander import compute_available_slots


class ListAvailableSlotsUseCase:
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
    def execute(self, *, screening_id: int, now: Optional[datetime] = None) -> List[datetime]:
        screening = self.cinema_catalog.get_screening(screening_id)
        return compute_available_slots(screening, now or datetime.now(timezone.utc))
