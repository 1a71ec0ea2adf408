import re

import attrs

from src.platform.exception.exceptions import RecoverableParseWarning


DAYS_OF_WEEK = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')

_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')


@attrs.define(frozen=True)
class ScreeningTime:
    """Weekly recurrence rule, e.g. every Tuesday at 12:30."""

    day_of_week: str
    time: str

    def parse_time(self) -> tuple[int, int]:
        """
        Parse the "HH:MM" (24-hour) time of day.

        Raises:
            RecoverableParseWarning: When the time string is malformed
        """
        match = _TIME_PATTERN.match(self.time.strip()) if isinstance(self.time, str) else None
        if not match:
            raise RecoverableParseWarning(f'Unable to process time value {self.time!r}')
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour > 23 or minute > 59:
            raise RecoverableParseWarning(f'Time value {self.time!r} is out of range')
        return hour, minute
