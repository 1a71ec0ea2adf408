from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)


class GetArrangementUseCase:
    def __init__(self, *, booking_arrangement: BookingArrangementAggregate) -> None:
        self.booking_arrangement = booking_arrangement

    @classmethod
    @inject
    def depends(
        cls,
        booking_arrangement: BookingArrangementAggregate = Depends(
            Provide[Container.booking_arrangement]
        ),
    ) -> Self:
        return cls(booking_arrangement=booking_arrangement)

    def execute(self) -> BookingArrangementAggregate:
        return self.booking_arrangement
