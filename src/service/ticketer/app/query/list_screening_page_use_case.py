from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.screening_paginator import Page, ScreeningPaginator


class ListScreeningPageUseCase:
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
    def execute(self, *, page: int, genre: Optional[str] = None) -> Page[Screening]:
        """One page of the screenings (id order), optionally of a single genre."""
        paginator = ScreeningPaginator(
            items=self.cinema_catalog.sorted_screenings(genre=genre),
            page_size=settings.PAGE_SIZE,
        )
        return paginator.paginate(page)

    def genres(self) -> List[str]:
        return self.cinema_catalog.genres()
