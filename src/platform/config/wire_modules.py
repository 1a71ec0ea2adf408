"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketer.app.command import (
    cancel_arrangement_use_case,
    choose_time_use_case,
    confirm_booking_use_case,
    delete_tickets_use_case,
    load_catalog_use_case,
    select_screening_use_case,
    set_username_use_case,
    submit_attendees_use_case,
    toggle_seat_use_case,
)
from src.service.ticketer.app.query import (
    find_catalog_entry_use_case,
    get_arrangement_use_case,
    get_seat_availability_use_case,
    list_available_slots_use_case,
    list_screening_page_use_case,
    list_tickets_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    load_catalog_use_case,
    select_screening_use_case,
    choose_time_use_case,
    submit_attendees_use_case,
    toggle_seat_use_case,
    set_username_use_case,
    confirm_booking_use_case,
    cancel_arrangement_use_case,
    delete_tickets_use_case,
    find_catalog_entry_use_case,
    get_arrangement_use_case,
    get_seat_availability_use_case,
    list_available_slots_use_case,
    list_screening_page_use_case,
    list_tickets_use_case,
]
