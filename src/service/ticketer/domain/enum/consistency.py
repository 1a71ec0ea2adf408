from enum import StrEnum


class OverlapMode(StrEnum):
    # first.end > second.start or first.start < second.end
    LITERAL = 'literal'
    # first.start < second.end and second.start < first.end
    INTERVAL = 'interval'


class ViolationKind(StrEnum):
    OVERLAPPING_SCREENING = 'overlapping_screening'
    TICKET_OUT_OF_RANGE = 'ticket_out_of_range'
