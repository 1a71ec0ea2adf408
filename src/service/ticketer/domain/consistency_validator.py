"""
Consistency Validator

Runs once after the catalog is loaded and purges rows that storage
constraints alone cannot rule out.

[Overlap pass]
- Screenings are compared pairwise in ascending id order, same movie only
- The later screening of a flagged pair is removed with its tickets
- Screenings already removed take no part in further comparisons

[Range pass]
- Tickets whose selected time falls outside [start, end] of their screening are removed
"""

from itertools import combinations
from typing import Callable, Dict, List, Optional

import attrs

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketer.domain.aggregate.cinema_catalog_aggregate import CinemaCatalogAggregate
from src.service.ticketer.domain.entity.screening_entity import Screening
from src.service.ticketer.domain.entity.ticket_entity import Ticket
from src.service.ticketer.domain.enum.consistency import OverlapMode, ViolationKind


def literal_overlap(first: Screening, second: Screening) -> bool:
    return first.end > second.start or first.start < second.end


def interval_overlap(first: Screening, second: Screening) -> bool:
    return first.start < second.end and second.start < first.end


OVERLAP_PREDICATES: Dict[OverlapMode, Callable[[Screening, Screening], bool]] = {
    OverlapMode.LITERAL: literal_overlap,
    OverlapMode.INTERVAL: interval_overlap,
}


@attrs.define(frozen=True)
class ConsistencyViolation:
    kind: ViolationKind
    screening_id: int
    detail: str
    ticket: Optional[Ticket] = None


@attrs.define
class ConsistencyReport:
    removed_screening_ids: List[int] = attrs.field(factory=list)
    removed_tickets: List[Ticket] = attrs.field(factory=list)
    violations: List[ConsistencyViolation] = attrs.field(factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.violations

    def summary(self) -> str:
        return (
            f'{len(self.removed_screening_ids)} screening(s) and '
            f'{len(self.removed_tickets)} ticket(s) removed'
        )


def find_overlapping_screenings(
    screenings: List[Screening], *, mode: OverlapMode = OverlapMode.LITERAL
) -> List[ConsistencyViolation]:
    overlaps = OVERLAP_PREDICATES[mode]
    marked: set[int] = set()
    violations: List[ConsistencyViolation] = []

    for first, second in combinations(sorted(screenings, key=lambda s: s.id), 2):
        if first.id in marked or second.id in marked:
            continue
        if first.movie != second.movie:
            continue
        if overlaps(first, second):
            marked.add(second.id)
            violations.append(
                ConsistencyViolation(
                    kind=ViolationKind.OVERLAPPING_SCREENING,
                    screening_id=second.id,
                    detail=(
                        f'Screening {second.id} overlaps screening {first.id} '
                        f"of '{first.movie.title}'"
                    ),
                )
            )
    return violations


def find_out_of_range_tickets(tickets: List[Ticket]) -> List[ConsistencyViolation]:
    return [
        ConsistencyViolation(
            kind=ViolationKind.TICKET_OUT_OF_RANGE,
            screening_id=ticket.screening.id,
            detail=(
                f'Ticket {ticket.seat} at {ticket.selected.isoformat()} is outside '
                f'the active window of screening {ticket.screening.id}'
            ),
            ticket=ticket,
        )
        for ticket in tickets
        if not ticket.screening.contains(ticket.selected)
    ]


@Logger.io
def validate_catalog(
    catalog: CinemaCatalogAggregate, *, mode: Optional[OverlapMode] = None
) -> ConsistencyReport:
    """Purge overlapping screenings and out-of-range tickets from the catalog."""
    mode = OverlapMode(settings.OVERLAP_CHECK_MODE) if mode is None else mode
    report = ConsistencyReport()

    for violation in find_overlapping_screenings(catalog.sorted_screenings(), mode=mode):
        Logger.base.warning(f'⚠️ [VALIDATE] {violation.detail}, removed')
        report.violations.append(violation)
        report.removed_screening_ids.append(violation.screening_id)
        report.removed_tickets.extend(catalog.remove_screening(violation.screening_id))

    out_of_range = find_out_of_range_tickets(catalog.tickets)
    for violation in out_of_range:
        Logger.base.warning(f'⚠️ [VALIDATE] {violation.detail}, removed')
        report.violations.append(violation)
    report.removed_tickets.extend(
        catalog.remove_tickets(violation.ticket for violation in out_of_range if violation.ticket)
    )

    if report.is_clean:
        Logger.base.info('✅ [VALIDATE] Catalog is consistent')
    else:
        Logger.base.warning(f'🧹 [VALIDATE] {report.summary()} ({mode.value} overlap check)')
    return report
