"""Review eligibility - may this client review this booking?"""

from ...exceptions import Conflict, Forbidden, InvalidState, NotFound
from ..bookings.lifecycle import BookingStatus


def check_eligible(requester_id: str, booking, existing_review=None) -> None:
    """
    Raise unless ``requester_id`` may attach a review to ``booking``.

    Checks run in a fixed order so the caller always sees the most basic
    failure first: missing booking, then ownership, then status, then the
    one-review-per-booking rule.
    """
    if booking is None:
        raise NotFound("Booking not found")

    if requester_id != booking.client_id:
        raise Forbidden("Unauthorized to review this booking")

    if booking.status != BookingStatus.COMPLETED:
        raise InvalidState(
            f"Only completed bookings can be reviewed (booking is {booking.status.value})"
        )

    if existing_review is not None:
        raise Conflict("Booking already reviewed")