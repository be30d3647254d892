"""Review router - FastAPI endpoints for reviews"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import Review, User
from .schemas import ReviewCreate, ReviewEnvelope, ReviewListResponse, ReviewResponse
from .service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    """Dependency injection for ReviewService"""
    return ReviewService(db)


def review_response(r: Review) -> ReviewResponse:
    return ReviewResponse(
        id=r.id,
        bookingId=r.booking_id,
        clientId=r.client_id,
        rating=r.rating,
        comment=r.comment,
        createdAt=r.created_at,
    )


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    booking_id: Optional[str] = Query(None, alias="bookingId"),
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    """Get reviews for a booking"""
    reviews = service.get_reviews(booking_id, current_user)
    return ReviewListResponse(reviews=[review_response(r) for r in reviews])


@router.post("", response_model=ReviewEnvelope, status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    """Review a completed booking (the booking's client only, once)"""
    review = service.create_review(data, current_user)
    return ReviewEnvelope(review=review_response(review))
