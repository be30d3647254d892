"""
Unit Tests for the booking status lifecycle
"""

import itertools

import pytest

from booking_app.domain.bookings.lifecycle import (
    BookingStatus,
    allowed_transitions,
    is_terminal,
    transition,
)
from booking_app.exceptions import Conflict, InvalidTransition

ALLOWED = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED),
    (BookingStatus.PENDING, BookingStatus.CANCELLED),
    (BookingStatus.CONFIRMED, BookingStatus.COMPLETED),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
}


@pytest.mark.parametrize("current,requested", sorted(ALLOWED))
def test_allowed_transitions_return_requested_status(current, requested):
    assert transition(current, requested) == requested


@pytest.mark.parametrize(
    "current,requested",
    [pair for pair in itertools.product(BookingStatus, repeat=2) if pair not in ALLOWED],
)
def test_every_other_pair_is_rejected(current, requested):
    with pytest.raises(InvalidTransition) as exc_info:
        transition(current, requested)

    assert exc_info.value.current == current
    assert exc_info.value.requested == requested
    assert exc_info.value.status_code == 409


def test_pending_cannot_jump_to_completed():
    with pytest.raises(InvalidTransition):
        transition(BookingStatus.PENDING, BookingStatus.COMPLETED)


def test_same_status_is_not_a_noop():
    with pytest.raises(InvalidTransition):
        transition(BookingStatus.CONFIRMED, BookingStatus.CONFIRMED)


def test_invalid_transition_is_a_conflict():
    assert issubclass(InvalidTransition, Conflict)


def test_accepts_raw_status_strings():
    assert transition("PENDING", "CONFIRMED") == BookingStatus.CONFIRMED


def test_terminal_states():
    assert is_terminal(BookingStatus.CANCELLED)
    assert is_terminal(BookingStatus.COMPLETED)
    assert not is_terminal(BookingStatus.PENDING)
    assert not is_terminal(BookingStatus.CONFIRMED)
    assert allowed_transitions(BookingStatus.COMPLETED) == frozenset()


def test_completed_only_reachable_through_confirmed():
    reachable_from = [s for s in BookingStatus if BookingStatus.COMPLETED in allowed_transitions(s)]
    assert reachable_from == [BookingStatus.CONFIRMED]
