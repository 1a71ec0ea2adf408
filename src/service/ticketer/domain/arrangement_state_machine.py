"""
Booking Arrangement State Machine

UNDECIDED -> DECIDE_WHEN -> DECIDE_ATTENDEES -> CONFIRM, and COMMIT back to UNDECIDED.

[Cascading Reset]
- Entering UNDECIDED or DECIDE_WHEN always clears every downstream field
- Picking a time clears the attendee count (and the seats that depend on it)
- A transition is a pure lookup; guards (capacity, username, slot membership)
  are enforced by the aggregate before the transition is applied
"""

from typing import Dict, FrozenSet, Tuple

import attrs

from src.platform.exception.exceptions import InvalidTransitionError
from src.service.ticketer.domain.enum.arrangement_state import (
    ArrangementField,
    ArrangementState,
    ArrangementTrigger,
)


State = ArrangementState
Trigger = ArrangementTrigger
Field = ArrangementField

ALL_FIELDS: FrozenSet[ArrangementField] = frozenset(ArrangementField)

# Everything that depends on the chosen screening
DOWNSTREAM_OF_SCREENING: FrozenSet[ArrangementField] = ALL_FIELDS - {Field.SCREENING}


@attrs.define(frozen=True)
class ArrangementTransition:
    next_state: ArrangementState
    cleared_fields: FrozenSet[ArrangementField] = attrs.field(factory=frozenset)


_TRANSITIONS: Dict[Tuple[ArrangementState, ArrangementTrigger], ArrangementTransition] = {
    (State.UNDECIDED, Trigger.SELECT_SCREENING): ArrangementTransition(
        State.DECIDE_WHEN, DOWNSTREAM_OF_SCREENING
    ),
    # Re-selecting a screening restarts the flow from the time choice
    (State.DECIDE_WHEN, Trigger.SELECT_SCREENING): ArrangementTransition(
        State.DECIDE_WHEN, DOWNSTREAM_OF_SCREENING
    ),
    (State.DECIDE_ATTENDEES, Trigger.SELECT_SCREENING): ArrangementTransition(
        State.DECIDE_WHEN, DOWNSTREAM_OF_SCREENING
    ),
    (State.CONFIRM, Trigger.SELECT_SCREENING): ArrangementTransition(
        State.DECIDE_WHEN, DOWNSTREAM_OF_SCREENING
    ),
    (State.DECIDE_WHEN, Trigger.CHOOSE_TIME): ArrangementTransition(
        State.DECIDE_ATTENDEES, frozenset({Field.ATTENDEES, Field.SEATS, Field.USERNAME})
    ),
    (State.DECIDE_ATTENDEES, Trigger.SUBMIT_ATTENDEES): ArrangementTransition(State.CONFIRM),
    (State.CONFIRM, Trigger.TOGGLE_SEAT): ArrangementTransition(State.CONFIRM),
    (State.CONFIRM, Trigger.SET_USERNAME): ArrangementTransition(State.CONFIRM),
    (State.CONFIRM, Trigger.COMMIT): ArrangementTransition(State.UNDECIDED, ALL_FIELDS),
}


def transition(state: ArrangementState, trigger: ArrangementTrigger) -> ArrangementTransition:
    """
    Resolve the next state and the fields to clear for a trigger.

    Raises:
        InvalidTransitionError: When the trigger is not allowed in the current state
    """
    if trigger in (Trigger.CANCEL, Trigger.RESET):
        return ArrangementTransition(State.UNDECIDED, ALL_FIELDS)

    if (result := _TRANSITIONS.get((state, trigger))) is None:
        raise InvalidTransitionError(f'Cannot {trigger.value} while in state {state.value}')
    return result


def allowed_triggers(state: ArrangementState) -> list[ArrangementTrigger]:
    triggers = [trigger for (from_state, trigger) in _TRANSITIONS if from_state == state]
    return triggers + [Trigger.CANCEL, Trigger.RESET]
