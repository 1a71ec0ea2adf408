"""
JSON Cinema Store

Single orjson document on disk:

    {"movies": [...], "venues": [...], "screenings": [...], "tickets": [...]}

Screenings reference movies by title and venues by number; tickets reference
screenings by id. When the data file does not exist it is seeded from the
prefill document.
"""

from datetime import datetime
from pathlib import Path
import shutil
from typing import Any, Dict, List, Mapping, Optional
from zoneinfo import ZoneInfo

import orjson

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.app.interface.i_cinema_store import ICinemaStore
from src.service.ticketer.domain.entity.movie_entity import Movie
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket
from src.service.ticketer.domain.entity.venue_entity import Venue
from src.service.ticketer.domain.value_object.screening_time import ScreeningTime


def parse_timestamp(value: str) -> datetime:
    """ISO-8601; naive values are read in the configured zone."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(settings.TIMEZONE))
    return parsed


def ticket_to_row(ticket: Ticket) -> Dict[str, Any]:
    return {
        'screening_id': ticket.screening.id,
        'selected': ticket.selected.isoformat(),
        'seat': ticket.seat,
        'username': ticket.username,
    }


class JsonCinemaStoreImpl(ICinemaStore):
    def __init__(self, *, data_file: Path, prefill_file: Optional[Path] = None) -> None:
        self.data_file = Path(data_file)
        self.prefill_file = Path(prefill_file) if prefill_file else None
        self._document: Optional[Dict[str, List[Dict[str, Any]]]] = None

    # ============================== File I/O ==============================

    def _ensure_data_file(self) -> None:
        if self.data_file.exists():
            return
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        if self.prefill_file and self.prefill_file.exists():
            Logger.base.info(f'🌱 [STORE] Seeding {self.data_file} from {self.prefill_file}')
            shutil.copyfile(self.prefill_file, self.data_file)
        else:
            Logger.base.warning(f'⚠️ [STORE] No prefill document, starting {self.data_file} empty')
            self.data_file.write_bytes(orjson.dumps({}))

    @property
    def document(self) -> Dict[str, List[Dict[str, Any]]]:
        if self._document is None:
            self._ensure_data_file()
            try:
                raw = orjson.loads(self.data_file.read_bytes())
            except orjson.JSONDecodeError as e:
                raise DomainError(f'Data file {self.data_file} is not valid JSON: {e}', 500)
            self._document = {
                key: list(raw.get(key, [])) for key in ('movies', 'venues', 'screenings', 'tickets')
            }
        return self._document

    def _write(self, **changes: List[Dict[str, Any]]) -> None:
        """Write the document with `changes` applied, then update the cache."""
        document = {**self.document, **changes}
        self.data_file.write_bytes(orjson.dumps(document, option=orjson.OPT_INDENT_2))
        self._document = document

    # ============================== Loads ==============================

    @Logger.io(truncate_content=True)
    def load_movies(self) -> List[Movie]:
        return [
            Movie(
                title=row['title'],
                genre=row['genre'],
                running_time=int(row['running_time']),
                release_year=int(row['release_year']),
            )
            for row in self.document['movies']
        ]

    @Logger.io(truncate_content=True)
    def load_venues(self) -> List[Venue]:
        return [
            Venue(
                venue_number=int(row['venue_number']),
                rows=int(row['rows']),
                cols=int(row['cols']),
            )
            for row in self.document['venues']
        ]

    @Logger.io(truncate_content=True)
    def load_screenings(
        self, *, movies: Mapping[str, Movie], venues: Mapping[int, Venue]
    ) -> List[Screening]:
        screenings = []
        for row in self.document['screenings']:
            movie = movies.get(row['movie'])
            venue = venues.get(int(row['venue']))
            if movie is None or venue is None:
                Logger.base.warning(
                    f'⚠️ [STORE] Screening {row["id"]} references an unknown movie or venue, skipped'
                )
                continue
            screenings.append(
                Screening(
                    id=int(row['id']),
                    movie=movie,
                    venue=venue,
                    start=parse_timestamp(row['start']),
                    end=parse_timestamp(row['end']),
                    times=[
                        ScreeningTime(day_of_week=time['day_of_week'], time=time['time'])
                        for time in row['times']
                    ],
                )
            )
        return screenings

    @Logger.io(truncate_content=True)
    def load_tickets(self, *, screenings: Mapping[int, Screening]) -> List[Ticket]:
        return [
            Ticket(
                screening=screenings[int(row['screening_id'])],
                selected=parse_timestamp(row['selected']),
                seat=row['seat'],
                username=row['username'],
            )
            for row in self.document['tickets']
            if int(row['screening_id']) in screenings
        ]

    # ============================== Writes ==============================

    @Logger.io
    def save_ticket(self, *, ticket: Ticket) -> None:
        self._write(tickets=[*self.document['tickets'], ticket_to_row(ticket)])

    @Logger.io
    def delete_ticket(self, *, ticket: Ticket) -> None:
        def is_target(row: Dict[str, Any]) -> bool:
            return (
                int(row['screening_id']) == ticket.screening.id
                and row['seat'] == ticket.seat
                and parse_timestamp(row['selected']) == ticket.selected
            )

        self._write(tickets=[row for row in self.document['tickets'] if not is_target(row)])

    @Logger.io
    def delete_screening_cascade(self, *, screening_id: int) -> None:
        self._write(
            screenings=[
                row for row in self.document['screenings'] if int(row['id']) != screening_id
            ],
            tickets=[
                row for row in self.document['tickets'] if int(row['screening_id']) != screening_id
            ],
        )
