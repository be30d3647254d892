"""Review service - Business logic for reviews"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...authorization import Operation, enforce
from ...exceptions import AppError, Conflict, ValidationError
from ...models import Review, User
from ..bookings.repository import BookingRepository
from .eligibility import check_eligible
from .repository import ReviewRepository
from .schemas import ReviewCreate

logger = logging.getLogger(__name__)


class ReviewService:
    """Service layer for review business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepository()
        self.bookings = BookingRepository()

    def get_reviews(self, booking_id: Optional[str], user: User) -> list[Review]:
        enforce(user, Operation.LIST_REVIEWS)
        if not booking_id:
            raise ValidationError("Booking ID is required")
        return self.repo.get_reviews_by_booking_id(self.db, booking_id)

    def create_review(self, data: ReviewCreate, user: User) -> Review:
        """Review a completed booking; one review per booking, by its client"""
        enforce(user, Operation.CREATE_REVIEW)

        booking_id = str(data.bookingId)
        booking = self.bookings.get_booking_by_id(self.db, booking_id)
        existing = self.repo.get_review_for_booking(self.db, booking_id) if booking else None

        try:
            check_eligible(user.id, booking, existing)
        except AppError as e:
            logger.warning(f"⚠️ User {user.id} may not review booking {booking_id}: {e.detail}")
            raise

        try:
            review = self.repo.create_review(
                self.db,
                booking_id=booking.id,
                client_id=user.id,
                rating=data.rating,
                comment=data.comment,
            )
        except IntegrityError as e:
            # Another review landed between the eligibility check and the insert
            self.db.rollback()
            raise Conflict("Booking already reviewed") from e

        logger.info(f"⭐ Review {review.id} ({review.rating}/5) created for booking {booking.id}")
        return review
