from datetime import datetime, timezone
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.interface.i_cinema_store import ICinemaStore
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.consistency_validator import ConsistencyReport, validate_catalog


class LoadCatalogUseCase:
    """
    Load the catalog from storage and validate it once.

    Flow:
    1. Load movies and venues, then screenings active right now (start < now < end)
    2. Load the future tickets of those screenings; tickets of other screenings are dropped
    3. Run the consistency validator over the loaded catalog
    4. Push removals back to storage when DELETE_CORRUPTED_ROWS is enabled
    """

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

    @Logger.io
    def execute(
        self, *, now: Optional[datetime] = None, delete_corrupted_rows: Optional[bool] = None
    ) -> ConsistencyReport:
        now = now or datetime.now(timezone.utc)
        Logger.base.info('📥 [LOAD] Loading catalog')

        movies = {movie.title: movie for movie in self.cinema_store.load_movies()}
        venues = {venue.venue_number: venue for venue in self.cinema_store.load_venues()}
        screenings = {
            screening.id: screening
            for screening in self.cinema_store.load_screenings(movies=movies, venues=venues)
            if screening.is_active(now)
        }
        tickets = [
            ticket
            for ticket in self.cinema_store.load_tickets(screenings=screenings)
            if ticket.selected > now
        ]
        self.cinema_catalog.replace_contents(
            movies=movies.values(),
            venues=venues.values(),
            screenings=screenings.values(),
            tickets=tickets,
        )
        Logger.base.info(
            f'✅ [LOAD] {len(movies)} movie(s), {len(venues)} venue(s), '
            f'{len(screenings)} active screening(s), {len(tickets)} upcoming ticket(s)'
        )

        report = validate_catalog(self.cinema_catalog)

        if delete_corrupted_rows is None:
            delete_corrupted_rows = settings.DELETE_CORRUPTED_ROWS
        if delete_corrupted_rows:
            for screening_id in report.removed_screening_ids:
                self.cinema_store.delete_screening_cascade(screening_id=screening_id)
            for ticket in report.removed_tickets:
                if ticket.screening.id not in report.removed_screening_ids:
                    self.cinema_store.delete_ticket(ticket=ticket)
            Logger.base.warning(f'🗑️ [LOAD] Corrupted rows deleted from storage: {report.summary()}')

        return report
