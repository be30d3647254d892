"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from .lifecycle import BookingStatus


class BookingCreate(BaseModel):
    """Schema for booking a service"""

    serviceId: UUID
    providerId: UUID
    bookingDate: datetime

    @field_validator("bookingDate")
    @classmethod
    def normalize_to_utc(cls, v):
        # Naive values are taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class BookingStatusUpdate(BaseModel):
    """Schema for moving a booking along its lifecycle"""

    status: BookingStatus


class PartySummary(BaseModel):
    id: str
    name: str
    email: str


class ServiceSummary(BaseModel):
    id: str
    name: str
    description: Optional[str]
    price: float
    ownerId: str


class BookingResponse(BaseModel):
    id: str
    clientId: str
    providerId: str
    serviceId: str
    bookingDate: datetime
    status: BookingStatus
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    client: Optional[PartySummary] = None
    provider: Optional[PartySummary] = None
    service: Optional[ServiceSummary] = None


class BookingEnvelope(BaseModel):
    booking: BookingResponse


class BookingListResponse(BaseModel):
    bookings: list[BookingResponse]
