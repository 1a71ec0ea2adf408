from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.interface.i_cinema_store import ICinemaStore
from src.service.ticketer.domain.aggregate.booking_arrangement_aggregate import (
    BookingArrangementAggregate,
)
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.ticket_entity import Ticket


class ConfirmBookingUseCase:
    """
    Confirm booking use case

    Flow:
    1. Re-check remaining seats and compile one ticket per selected seat
       (an optional username is validated here, not stored on the arrangement)
    2. Persist each ticket; on a failed save the tickets already saved are deleted
    3. Add the tickets to the catalog
    4. Commit the arrangement, which returns it to UNDECIDED

    A rejected or failed confirmation leaves the arrangement and the catalog untouched.
    """

    def __init__(
        self,
        *,
        cinema_store: ICinemaStore,
        cinema_catalog: CinemaCatalogAggregate,
        booking_arrangement: BookingArrangementAggregate,
    ) -> None:
        self.cinema_store = cinema_store
        self.cinema_catalog = cinema_catalog
        self.booking_arrangement = booking_arrangement

    @classmethod
    @inject
    def depends(
        cls,
        cinema_store: ICinemaStore = Depends(Provide[Container.cinema_store]),
        cinema_catalog: CinemaCatalogAggregate = Depends(Provide[Container.cinema_catalog]),
        booking_arrangement: BookingArrangementAggregate = Depends(
            Provide[Container.booking_arrangement]
        ),
    ) -> Self:
        return cls(
            cinema_store=cinema_store,
            cinema_catalog=cinema_catalog,
            booking_arrangement=booking_arrangement,
        )

    @Logger.io
    def execute(self, *, username: Optional[str] = None) -> List[Ticket]:
        arrangement = self.booking_arrangement
        remaining = 0
        taken: set[str] = set()
        if arrangement.screening is not None and arrangement.selected_time is not None:
            remaining = self.cinema_catalog.remaining_seats(
                arrangement.screening, arrangement.selected_time
            )
            taken = self.cinema_catalog.taken_seats(
                arrangement.screening, arrangement.selected_time
            )
        tickets = arrangement.compile_tickets(
            remaining_seats=remaining, taken_seats=taken, username=username
        )

        self._persist(tickets)
        self.cinema_catalog.add_tickets(tickets)
        arrangement.commit()

        Logger.base.info(
            f'🎟️ [CONFIRM] {len(tickets)} ticket(s) booked for {tickets[0].username} '
            f'on screening {tickets[0].screening.id}'
        )
        return tickets

    def _persist(self, tickets: List[Ticket]) -> None:
        saved: List[Ticket] = []
        try:
            for ticket in tickets:
                self.cinema_store.save_ticket(ticket=ticket)
                saved.append(ticket)
        except Exception:
            Logger.base.error(
                f'❌ [CONFIRM] Save failed after {len(saved)}/{len(tickets)} ticket(s), rolling back'
            )
            for ticket in saved:
                self.cinema_store.delete_ticket(ticket=ticket)
            raise
