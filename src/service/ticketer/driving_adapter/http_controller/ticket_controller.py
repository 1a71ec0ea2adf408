from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.command.delete_tickets_use_case import DeleteTicketsUseCase
from src.service.ticketer.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.ticketer.driving_adapter.http_controller.schema.ticket_schema import (
    DeleteTicketsRequest,
    DeleteTicketsResponse,
    TicketKeyRequest,
    TicketResponse,
)


router = APIRouter()


@router.get('/user/{username}')
@Logger.io
async def list_user_tickets(
    username: str, use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends)
) -> List[TicketResponse]:
    return [TicketResponse.from_entity(t) for t in use_case.by_username(username=username)]


@router.get('/screening/{screening_id}')
@Logger.io
async def list_screening_tickets(
    screening_id: int,
    selected: datetime | None = None,
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    if selected is None:
        tickets = use_case.by_screening(screening_id=screening_id)
    else:
        tickets = use_case.by_screening_and_time(screening_id=screening_id, selected=selected)
    return [TicketResponse.from_entity(t) for t in tickets]


@router.post('/delete', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_ticket(
    request: TicketKeyRequest,
    use_case: DeleteTicketsUseCase = Depends(DeleteTicketsUseCase.depends),
) -> TicketResponse:
    ticket = use_case.delete_ticket(
        screening_id=request.screening_id, selected=request.selected, seat=request.seat
    )
    return TicketResponse.from_entity(ticket)


@router.post('/delete_batch')
@Logger.io
async def delete_tickets(
    request: DeleteTicketsRequest,
    use_case: DeleteTicketsUseCase = Depends(DeleteTicketsUseCase.depends),
) -> DeleteTicketsResponse:
    tickets = [
        use_case.find_ticket(screening_id=key.screening_id, selected=key.selected, seat=key.seat)
        for key in request.tickets
    ]
    return DeleteTicketsResponse(deleted=len(use_case.delete_tickets(tickets=tickets)))
