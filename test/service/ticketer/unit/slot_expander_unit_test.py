from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.slot_expander import (
    compute_available_slots,
    friendly_date,
    iter_available_slots,
    ordinal,
)
from test.service.ticketer.catalog_factory import make_screening


UTC = timezone.utc


@pytest.mark.unit
class TestComputeAvailableSlots:
    def test_daily_rule_yields_one_slot_per_day_within_horizon(
        self, small_screening: Screening, now: datetime
    ):
        # now is Wednesday 10:00, every rule is at 12:00
        slots = compute_available_slots(small_screening, now, tz=UTC)

        assert len(slots) == 14
        assert slots[0] == datetime(2026, 10, 21, 12, 0, tzinfo=UTC)
        assert slots[-1] == datetime(2026, 11, 3, 12, 0, tzinfo=UTC)

    def test_never_returns_passed_or_out_of_horizon_slots(self, now: datetime):
        screening = make_screening(
            start=now - timedelta(days=3),
            end=now + timedelta(days=5, hours=2),
            times=[('Wednesday', '09:00'), ('Wednesday', '10:00'), ('Monday', '11:30')],
        )

        slots = compute_available_slots(screening, now, tz=UTC)

        assert slots == [datetime(2026, 10, 26, 11, 30, tzinfo=UTC)]
        assert all(now < slot <= screening.end for slot in slots)

    def test_same_day_rules_keep_declaration_order(self, now: datetime):
        screening = make_screening(
            start=now - timedelta(days=1),
            end=now + timedelta(days=3),
            times=[('Thursday', '20:00'), ('Thursday', '14:00')],
        )

        assert compute_available_slots(screening, now, tz=UTC) == [
            datetime(2026, 10, 22, 20, 0, tzinfo=UTC),
            datetime(2026, 10, 22, 14, 0, tzinfo=UTC),
        ]

    def test_screening_that_already_ended_is_empty(self, now: datetime):
        screening = make_screening(start=now - timedelta(days=9), end=now - timedelta(days=1))

        assert compute_available_slots(screening, now, tz=UTC) == []

    def test_malformed_rule_is_skipped(self, now: datetime):
        screening = make_screening(
            start=now - timedelta(days=1),
            end=now + timedelta(days=2),
            times=[('Thursday', 'noon'), ('Thursday', '18:45')],
        )

        assert compute_available_slots(screening, now, tz=UTC) == [
            datetime(2026, 10, 22, 18, 45, tzinfo=UTC)
        ]

    def test_seconds_are_truncated(self, small_screening: Screening, now: datetime):
        slots = compute_available_slots(
            small_screening, now + timedelta(seconds=42, microseconds=7), tz=UTC
        )

        assert all(slot.second == 0 and slot.microsecond == 0 for slot in slots)

    def test_custom_horizon(self, small_screening: Screening, now: datetime):
        assert len(compute_available_slots(small_screening, now, horizon_days=3, tz=UTC)) == 3

    def test_day_names_follow_the_configured_zone(self, now: datetime):
        # 2026-10-21 23:30 in Taipei is still Wednesday 15:30 UTC
        screening = make_screening(
            start=now - timedelta(days=1),
            end=now + timedelta(days=1),
            times=[('Wednesday', '23:30')],
        )
        taipei = ZoneInfo('Asia/Taipei')

        slots = compute_available_slots(screening, now, tz=taipei)

        assert slots == [datetime(2026, 10, 21, 23, 30, tzinfo=taipei)]

    def test_iterator_form_yields_the_same_slots(self, small_screening: Screening, now: datetime):
        assert list(iter_available_slots(small_screening, now, tz=UTC)) == (
            compute_available_slots(small_screening, now, tz=UTC)
        )


@pytest.mark.unit
class TestFriendlyDate:
    def test_formats_day_ordinal_month_and_time(self):
        timestamp = datetime(2024, 10, 30, 13, 0, tzinfo=UTC)

        assert friendly_date(timestamp, tz=UTC) == 'Wednesday, 30th of October, 01:00PM'

    def test_morning_time(self):
        timestamp = datetime(2026, 10, 22, 9, 5, tzinfo=UTC)

        assert friendly_date(timestamp, tz=UTC) == 'Thursday, 22nd of October, 09:05AM'

    @pytest.mark.parametrize(
        'number,expected',
        [(1, '1st'), (2, '2nd'), (3, '3rd'), (4, '4th'), (11, '11th'), (12, '12th'),
         (13, '13th'), (21, '21st'), (22, '22nd'), (23, '23rd'), (31, '31st')],
    )
    def test_ordinal(self, number: int, expected: str):
        assert ordinal(number) == expected
