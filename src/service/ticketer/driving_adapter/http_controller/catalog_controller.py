from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.query.find_catalog_entry_use_case import FindCatalogEntryUseCase
from src.service.ticketer.app.query.get_seat_availability_use_case import (
    GetSeatAvailabilityUseCase,
)
from src.service.ticketer.app.query.list_available_slots_use_case import (
    ListAvailableSlotsUseCase,
)
from src.service.ticketer.app.query.list_screening_page_use_case import ListScreeningPageUseCase
from src.service.ticketer.domain.slot_expander import friendly_date
from src.service.ticketer.driving_adapter.http_controller.schema.catalog_schema import (
    MovieResponse,
    ScreeningPageResponse,
    ScreeningResponse,
    SeatAvailabilityResponse,
    SlotResponse,
    VenueResponse,
)


router = APIRouter()


@router.get('/movies/{title}')
@Logger.io
async def get_movie(
    title: str, use_case: FindCatalogEntryUseCase = Depends(FindCatalogEntryUseCase.depends)
) -> MovieResponse:
    return MovieResponse.from_entity(use_case.find_movie(title=title))


@router.get('/venues/{venue_number}')
@Logger.io
async def get_venue(
    venue_number: int,
    use_case: FindCatalogEntryUseCase = Depends(FindCatalogEntryUseCase.depends),
) -> VenueResponse:
    return VenueResponse.from_entity(use_case.find_venue(venue_number=venue_number))


@router.get('/genres')
@Logger.io
async def list_genres(
    use_case: ListScreeningPageUseCase = Depends(ListScreeningPageUseCase.depends),
) -> List[str]:
    return use_case.genres()


@router.get('/screenings')
@Logger.io
async def list_screenings(
    page: int = Query(1),
    genre: Optional[str] = None,
    use_case: ListScreeningPageUseCase = Depends(ListScreeningPageUseCase.depends),
) -> ScreeningPageResponse:
    result = use_case.execute(page=page, genre=genre)
    now = datetime.now(timezone.utc)
    return ScreeningPageResponse(
        page=result.number,
        max_page=result.max_page,
        genre=genre,
        screenings=[ScreeningResponse.from_entity(s, now=now) for s in result.items],
    )


@router.get('/screenings/{screening_id}')
@Logger.io
async def get_screening(
    screening_id: int,
    use_case: FindCatalogEntryUseCase = Depends(FindCatalogEntryUseCase.depends),
) -> ScreeningResponse:
    return ScreeningResponse.from_entity(
        use_case.find_screening(screening_id=screening_id), now=datetime.now(timezone.utc)
    )


@router.get('/screenings/{screening_id}/slots')
@Logger.io
async def list_slots(
    screening_id: int,
    use_case: ListAvailableSlotsUseCase = Depends(ListAvailableSlotsUseCase.depends),
) -> List[SlotResponse]:
    return [
        SlotResponse(time=slot, label=friendly_date(slot))
        for slot in use_case.execute(screening_id=screening_id)
    ]


@router.get('/screenings/{screening_id}/availability')
@Logger.io
async def get_availability(
    screening_id: int,
    selected: datetime,
    use_case: GetSeatAvailabilityUseCase = Depends(GetSeatAvailabilityUseCase.depends),
) -> SeatAvailabilityResponse:
    availability = use_case.execute(screening_id=screening_id, selected=selected)
    return SeatAvailabilityResponse(
        screening_id=availability.screening_id,
        selected=availability.selected,
        total_seats=availability.total_seats,
        remaining_seats=availability.remaining_seats,
        taken_seats=availability.taken_seats,
    )
