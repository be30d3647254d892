"""Review repository - Database operations for reviews"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Review


class ReviewRepository:
    """Repository for review database operations"""

    @staticmethod
    def get_reviews_by_booking_id(db: Session, booking_id: str) -> list[Review]:
        return (
            db.query(Review)
            .filter(Review.booking_id == booking_id)
            .order_by(Review.created_at.desc())
            .all()
        )

    @staticmethod
    def get_review_for_booking(db: Session, booking_id: str) -> Optional[Review]:
        return db.query(Review).filter(Review.booking_id == booking_id).first()

    @staticmethod
    def create_review(db: Session, **review_data) -> Review:
        """Create a review. Raises IntegrityError if the booking already has one."""
        review = Review(**review_data)
        db.add(review)
        db.commit()
        db.refresh(review)
        return review
