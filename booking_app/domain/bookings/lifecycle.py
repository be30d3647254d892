"""
Booking status lifecycle.

Statuses: PENDING → CONFIRMED → COMPLETED, with CANCELLED reachable from
PENDING and CONFIRMED. CANCELLED and COMPLETED are terminal.

Nothing here touches the database. Callers persist the returned status
themselves, and only when ``transition`` did not raise.
"""

import enum

from ...exceptions import InvalidTransition


class BookingStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


VALID_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),  # Terminal state
    BookingStatus.COMPLETED: frozenset(),  # Terminal state
}


def allowed_transitions(current: BookingStatus) -> frozenset[BookingStatus]:
    return VALID_TRANSITIONS[current]


def is_terminal(status: BookingStatus) -> bool:
    return not VALID_TRANSITIONS[status]


def transition(current: BookingStatus, requested: BookingStatus) -> BookingStatus:
    """
    Validate a status change and return the new status.

    Same-status requests are rejected like any other pair missing from the
    table.

    Raises:
        InvalidTransition: if ``requested`` is not reachable from ``current``
    """
    current = BookingStatus(current)
    requested = BookingStatus(requested)
    if requested not in VALID_TRANSITIONS[current]:
        raise InvalidTransition(current, requested)
    return requested
