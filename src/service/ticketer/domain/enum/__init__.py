"""Ticketer Domain Enums"""

from src.service.ticketer.domain.enum.arrangement_state import (
    ArrangementField,
    ArrangementState,
    ArrangementTrigger,
)
from src.service.ticketer.domain.enum.consistency import OverlapMode, ViolationKind

__all__ = [
    'ArrangementField',
    'ArrangementState',
    'ArrangementTrigger',
    'OverlapMode',
    'ViolationKind',
]
