from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)


class SetUsernameUseCase:
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

    @Logger.io
    def execute(self, *, username: str) -> BookingArrangementAggregate:
        self.booking_arrangement.set_username(username=username)
        return self.booking_arrangement
