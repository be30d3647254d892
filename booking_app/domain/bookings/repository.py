"""Booking repository - Database operations for bookings"""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from ...models import Booking
from .lifecycle import BookingStatus


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: str) -> Optional[Booking]:
        return db.get(Booking, booking_id)

    @staticmethod
    def get_bookings_for_user(db: Session, user_id: str) -> list[Booking]:
        """Bookings where the user is either the client or the provider"""
        return (
            db.query(Booking)
            .filter(or_(Booking.client_id == user_id, Booking.provider_id == user_id))
            .options(
                joinedload(Booking.client),
                joinedload(Booking.provider),
                joinedload(Booking.service),
            )
            .order_by(Booking.scheduled_at.desc())
            .all()
        )

    @staticmethod
    def create_booking(db: Session, booking: Booking) -> Booking:
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_status(
        db: Session, booking_id: str, expected: BookingStatus, new_status: BookingStatus
    ) -> bool:
        """
        Compare-and-set the booking status.

        The UPDATE only matches while the row still holds ``expected``, so a
        concurrent transition makes this return False instead of overwriting.
        """
        updated = (
            db.query(Booking)
            .filter(Booking.id == booking_id, Booking.status == expected)
            .update({Booking.status: new_status}, synchronize_session=False)
        )
        if updated != 1:
            db.rollback()
            return False
        db.commit()
        return True
