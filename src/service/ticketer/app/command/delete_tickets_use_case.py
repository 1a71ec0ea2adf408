from datetime import datetime
from typing import Iterable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.interface.i_cinema_store import ICinemaStore
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.ticket_entity import Ticket


class DeleteTicketsUseCase:
    def __init__(
        self, *, cinema_store: ICinemaStore, cinema_catalog: CinemaCatalogAggregate
    ) -> None:
        self.cinema_store = cinema_store
        self.cinema_catalog = cinema_catalog

    @classmethod
    @inject
    def depends(
        cls,
        cinema_store: ICinemaStore = Depends(Provide[Container.cinema_store]),
        cinema_catalog: CinemaCatalogAggregate = Depends(Provide[Container.cinema_catalog]),
    ) -> Self:
        return cls(cinema_store=cinema_store, cinema_catalog=cinema_catalog)

    def find_ticket(self, *, screening_id: int, selected: datetime, seat: str) -> Ticket:
        screening = self.cinema_catalog.get_screening(screening_id)
        for ticket in self.cinema_catalog.tickets_by_screening_and_time(screening, selected):
            if ticket.seat == seat:
                return ticket
        raise NotFoundError(
            f'No ticket for seat {seat} of screening {screening_id} at {selected.isoformat()}'
        )

    @Logger.io
    def delete_ticket(self, *, screening_id: int, selected: datetime, seat: str) -> Ticket:
        ticket = self.find_ticket(screening_id=screening_id, selected=selected, seat=seat)
        self.cinema_catalog.remove_ticket(ticket)
        self.cinema_store.delete_ticket(ticket=ticket)
        return ticket

    @Logger.io
    def delete_tickets(self, *, tickets: Iterable[Ticket]) -> List[Ticket]:
        removed = self.cinema_catalog.remove_tickets(tickets)
        for ticket in removed:
            self.cinema_store.delete_ticket(ticket=ticket)
        Logger.base.info(f'🗑️ [TICKET] {len(removed)} ticket(s) deleted')
        return removed
