from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.command.cancel_arrangement_use_case import CancelArrangementUseCase
from src.service.ticketer.app.command.choose_time_use_case import ChooseTimeUseCase
from src.service.ticketer.app.command.confirm_booking_use_case import ConfirmBookingUseCase
from src.service.ticketer.app.command.select_screening_use_case import SelectScreeningUseCase
from src.service.ticketer.app.command.set_username_use_case import SetUsernameUseCase
from src.service.ticketer.app.command.submit_attendees_use_case import SubmitAttendeesUseCase
from src.service.ticketer.app.command.toggle_seat_use_case import ToggleSeatUseCase
from src.service.ticketer.app.query.get_arrangement_use_case import GetArrangementUseCase
from src.service.ticketer.driving_adapter.http_controller.schema.arrangement_schema import (
    ArrangementResponse,
    AttendeesRequest,
    ChooseTimeRequest,
    ConfirmRequest,
    SeatRequest,
    SelectScreeningRequest,
    UsernameRequest,
)
from src.service.ticketer.driving_adapter.http_controller.schema.ticket_schema import (
    TicketResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def get_arrangement(
    use_case: GetArrangementUseCase = Depends(GetArrangementUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.execute())


@router.post('/screening')
@Logger.io
async def select_screening(
    request: SelectScreeningRequest,
    use_case: SelectScreeningUseCase = Depends(SelectScreeningUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.execute(screening_id=request.screening_id))


@router.post('/time')
@Logger.io
async def choose_time(
    request: ChooseTimeRequest,
    use_case: ChooseTimeUseCase = Depends(ChooseTimeUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(
        use_case.execute(selected_time=request.selected_time)
    )


@router.post('/attendees')
@Logger.io
async def submit_attendees(
    request: AttendeesRequest,
    use_case: SubmitAttendeesUseCase = Depends(SubmitAttendeesUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.execute(attendees=request.attendees))


@router.post('/seat')
@Logger.io
async def toggle_seat(
    request: SeatRequest,
    use_case: ToggleSeatUseCase = Depends(ToggleSeatUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.execute(seat=request.seat))


@router.post('/username')
@Logger.io
async def set_username(
    request: UsernameRequest,
    use_case: SetUsernameUseCase = Depends(SetUsernameUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.execute(username=request.username))


@router.post('/confirm', status_code=status.HTTP_201_CREATED)
@Logger.io
async def confirm_booking(
    request: ConfirmRequest,
    use_case: ConfirmBookingUseCase = Depends(ConfirmBookingUseCase.depends),
) -> List[TicketResponse]:
    return [TicketResponse.from_entity(t) for t in use_case.execute(username=request.username)]


@router.post('/cancel')
@Logger.io
async def cancel_arrangement(
    use_case: CancelArrangementUseCase = Depends(CancelArrangementUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.cancel())


@router.post('/reset')
@Logger.io
async def reset_arrangement(
    use_case: CancelArrangementUseCase = Depends(CancelArrangementUseCase.depends),
) -> ArrangementResponse:
    return ArrangementResponse.from_aggregate(use_case.reset())
