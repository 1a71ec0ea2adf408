"""
Booking Arrangement Aggregate - the in-progress booking of one user session

[Flow]
- select_screening -> choose_time -> submit_attendees -> toggle_seat / set_username
  -> compile_tickets + commit
- cancel / reset from any state

[Business Invariants]
- A rejected command never changes state: guards run before the transition is applied
- Entering UNDECIDED or DECIDE_WHEN clears every downstream field
- The seat selection never holds more than the attendee count
"""

from datetime import datetime
from typing import Collection, List, Optional

import attrs

from src.platform.exception.exceptions import CapacityError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.arrangement_state_machine import (
    ArrangementTransition,
    transition,
)
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket, validate_username
from src.service.ticketer.domain.enum.arrangement_state import (
    ArrangementField,
    ArrangementState,
    ArrangementTrigger,
)
from src.service.ticketer.domain.slot_expander import compute_available_slots
from src.service.ticketer.domain.value_object.seat_position import seat_label_to_position


_LIST_FIELDS = frozenset({ArrangementField.AVAILABLE_SLOTS, ArrangementField.SEATS})


@attrs.define
class BookingArrangementAggregate:
    state: ArrangementState = ArrangementState.UNDECIDED
    screening: Optional[Screening] = None
    available_slots: List[datetime] = attrs.field(factory=list)
    selected_time: Optional[datetime] = None
    attendees: Optional[int] = None
    seats: List[str] = attrs.field(factory=list)
    username: Optional[str] = None

    def _apply(self, result: ArrangementTransition) -> None:
        for field in result.cleared_fields:
            self._clear(field)
        self.state = result.next_state

    def _clear(self, field: ArrangementField) -> None:
        # Field values double as attribute names
        setattr(self, field.value, [] if field in _LIST_FIELDS else None)

    @property
    def seats_remaining_to_pick(self) -> int:
        return (self.attendees or 0) - len(self.seats)

    # ============================== Commands ==============================

    @Logger.io
    def select_screening(self, *, screening: Screening, now: datetime) -> None:
        result = transition(self.state, ArrangementTrigger.SELECT_SCREENING)
        slots = compute_available_slots(screening, now)
        self._apply(result)
        self.screening = screening
        self.available_slots = slots

    @Logger.io
    def choose_time(self, *, selected_time: datetime, now: Optional[datetime] = None) -> None:
        result = transition(self.state, ArrangementTrigger.CHOOSE_TIME)
        if selected_time not in self.available_slots:
            raise ValidationError(f'{selected_time.isoformat()} is not an available time')
        # Slots are computed on selection and may have passed since
        if now is not None and selected_time <= now:
            raise ValidationError(f'{selected_time.isoformat()} has already passed')
        self._apply(result)
        self.selected_time = selected_time

    @Logger.io
    def submit_attendees(self, *, attendees: int, remaining_seats: int) -> None:
        result = transition(self.state, ArrangementTrigger.SUBMIT_ATTENDEES)
        if isinstance(attendees, bool) or not isinstance(attendees, int) or attendees < 1:
            raise ValidationError('Number of attendees must be a whole number of at least 1')
        assert self.screening is not None
        if attendees > self.screening.venue.total_seats:
            raise CapacityError(
                f'{attendees} attendees exceed the {self.screening.venue.total_seats} seats '
                f'of venue {self.screening.venue.venue_number}'
            )
        if attendees > remaining_seats:
            raise CapacityError(f'Only {remaining_seats} seat(s) remaining for this time')
        self._apply(result)
        self.attendees = attendees

    @Logger.io
    def toggle_seat(self, *, seat: str, taken_seats: Collection[str]) -> bool:
        """
        Select the seat, or deselect it when already selected.

        Returns:
            True when the seat is selected afterwards
        """
        result = transition(self.state, ArrangementTrigger.TOGGLE_SEAT)
        assert self.screening is not None
        if seat in self.seats:
            self._apply(result)
            self.seats.remove(seat)
            return False

        if not seat_label_to_position(seat).is_within(self.screening.venue):
            raise ValidationError(
                f'Seat {seat} is outside venue {self.screening.venue.venue_number}'
            )
        if seat in taken_seats:
            raise CapacityError(f'Seat {seat} is already booked for this time')
        if len(self.seats) >= (self.attendees or 0):
            raise CapacityError(f'Only {self.attendees} seat(s) can be selected')
        self._apply(result)
        self.seats.append(seat)
        return True

    @Logger.io
    def set_username(self, *, username: str) -> None:
        result = transition(self.state, ArrangementTrigger.SET_USERNAME)
        validate_username(username)
        self._apply(result)
        self.username = username

    @Logger.io
    def compile_tickets(
        self,
        *,
        remaining_seats: int,
        taken_seats: Collection[str] = (),
        username: Optional[str] = None,
    ) -> List[Ticket]:
        """
        Build one ticket per selected seat without changing state.

        A username given here overrides the stored one for these tickets only.
        Call commit() once the tickets are stored.
        """
        transition(self.state, ArrangementTrigger.COMMIT)
        username = self.username if username is None else validate_username(username)
        assert self.screening is not None and self.selected_time is not None
        if len(self.seats) != self.attendees:
            raise ValidationError(
                f'Select {self.attendees} seat(s) before confirming, {len(self.seats)} selected'
            )
        if username is None:
            raise ValidationError('A username is required to confirm the booking')
        if remaining_seats < len(self.seats):
            raise CapacityError(f'Only {remaining_seats} seat(s) remaining for this time')
        if already_taken := sorted(set(self.seats) & set(taken_seats)):
            raise CapacityError(f"Seat(s) {', '.join(already_taken)} already booked for this time")
        return [
            Ticket.create(
                screening=self.screening,
                selected=self.selected_time,
                seat=seat,
                username=username,
            )
            for seat in self.seats
        ]

    def commit(self) -> None:
        self._apply(transition(self.state, ArrangementTrigger.COMMIT))

    def cancel(self) -> None:
        self._apply(transition(self.state, ArrangementTrigger.CANCEL))

    def reset(self) -> None:
        self._apply(transition(self.state, ArrangementTrigger.RESET))
