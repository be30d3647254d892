"""Review domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Schema for reviewing a completed booking; the author is the caller"""

    bookingId: UUID
    # Strict: 4.5 or "5" are rejected rather than coerced
    rating: int = Field(..., ge=1, le=5, strict=True)
    comment: Optional[str] = Field(None, max_length=2000)


class ReviewResponse(BaseModel):
    id: str
    bookingId: str
    clientId: str
    rating: int
    comment: Optional[str]
    createdAt: Optional[datetime] = None


class ReviewEnvelope(BaseModel):
    review: ReviewResponse


class ReviewListResponse(BaseModel):
    reviews: list[ReviewResponse]
