"""
Recurring Slot Expander

Expands a screening's weekly ScreeningTime rules into the concrete,
not-yet-passed booking slots inside a bounded look-ahead horizon.

[Ordering]
- Day by day from now, then rule declaration order within a day
- Recomputed on every call; "now" keeps moving
"""

from datetime import datetime, timedelta, tzinfo
from typing import Iterator, List, Optional
from zoneinfo import ZoneInfo

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import RecoverableParseWarning
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.value_object.screening_time import DAYS_OF_WEEK


_ORDINAL_SUFFIXES = ('th', 'st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'th', 'th')


def _zone(tz: Optional[tzinfo]) -> tzinfo:
    return tz if tz is not None else ZoneInfo(settings.TIMEZONE)


@Logger.io
def iter_available_slots(
    screening: Screening,
    now: datetime,
    *,
    horizon_days: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> Iterator[datetime]:
    days = settings.BOOKING_HORIZON_DAYS if horizon_days is None else horizon_days
    cursor = now.astimezone(_zone(tz))
    horizon = min(cursor + timedelta(days=days), screening.end)
    if horizon <= cursor:
        return

    while cursor < horizon:
        day_name = DAYS_OF_WEEK[cursor.weekday()]
        for rule in screening.times:
            if rule.day_of_week != day_name:
                continue
            try:
                hour, minute = rule.parse_time()
            except RecoverableParseWarning as e:
                Logger.base.warning(f'⚠️ [SLOTS] Screening {screening.id}: {e.message}, rule skipped')
                continue
            slot = cursor.replace(hour=hour, minute=minute, second=0, microsecond=0)
            if now < slot <= horizon:
                yield slot
        cursor += timedelta(days=1)


def compute_available_slots(
    screening: Screening,
    now: datetime,
    *,
    horizon_days: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> List[datetime]:
    """Materialise the slots of a screening as a list."""
    return list(iter_available_slots(screening, now, horizon_days=horizon_days, tz=tz))


def ordinal(number: int) -> str:
    if number % 100 in (11, 12, 13):
        return f'{number}th'
    return f'{number}{_ORDINAL_SUFFIXES[number % 10]}'


def friendly_date(timestamp: datetime, *, tz: Optional[tzinfo] = None) -> str:
    """e.g. "Wednesday, 30th of October, 01:00PM" """
    local = timestamp.astimezone(_zone(tz))
    return (
        f'{DAYS_OF_WEEK[local.weekday()]}, {ordinal(local.day)} of '
        f'{local.strftime("%B")}, {local.strftime("%I:%M")}{"AM" if local.hour < 12 else "PM"}'
    )
