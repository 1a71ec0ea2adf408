from enum import StrEnum


class ArrangementState(StrEnum):
    """Steps of an in-progress booking, in order."""

    UNDECIDED = 'undecided'
    DECIDE_WHEN = 'decide_when'
    DECIDE_ATTENDEES = 'decide_attendees'
    CONFIRM = 'confirm'


class ArrangementTrigger(StrEnum):
    SELECT_SCREENING = 'select_screening'
    CHOOSE_TIME = 'choose_time'
    SUBMIT_ATTENDEES = 'submit_attendees'
    TOGGLE_SEAT = 'toggle_seat'
    SET_USERNAME = 'set_username'
    COMMIT = 'commit'
    CANCEL = 'cancel'
    RESET = 'reset'


class ArrangementField(StrEnum):
    """Fields of the arrangement that a transition may clear."""

    SCREENING = 'screening'
    AVAILABLE_SLOTS = 'available_slots'
    SELECTED_TIME = 'selected_time'
    ATTENDEES = 'attendees'
    SEATS = 'seats'
    USERNAME = 'username'
