"""Booking router - FastAPI endpoints for booking operations"""

from datetime import timezone

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from ...models import Booking, User
from .schemas import (
    BookingCreate,
    BookingEnvelope,
    BookingListResponse,
    BookingResponse,
    BookingStatusUpdate,
    PartySummary,
    ServiceSummary,
)
from .service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


def booking_response(b: Booking, include_related: bool = False) -> BookingResponse:
    response = BookingResponse(
        id=b.id,
        clientId=b.client_id,
        providerId=b.provider_id,
        serviceId=b.service_id,
        bookingDate=b.scheduled_at.replace(tzinfo=timezone.utc),
        status=b.status,
        createdAt=b.created_at,
        updatedAt=b.updated_at,
    )
    if include_related:
        response.client = PartySummary(id=b.client.id, name=b.client.name, email=b.client.email)
        response.provider = PartySummary(
            id=b.provider.id, name=b.provider.name, email=b.provider.email
        )
        response.service = ServiceSummary(
            id=b.service.id,
            name=b.service.name,
            description=b.service.description,
            price=b.service.price,
            ownerId=b.service.owner_id,
        )
    return response


@router.post("", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Book a service (CLIENT only)"""
    booking = service.create_booking(data, current_user)
    return BookingEnvelope(booking=booking_response(booking))


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """List bookings where the caller is the client or the provider"""
    bookings = service.get_bookings(current_user)
    return BookingListResponse(
        bookings=[booking_response(b, include_related=True) for b in bookings]
    )


@router.patch("/{booking_id}", response_model=BookingEnvelope)
async def update_booking_status(
    booking_id: str,
    data: BookingStatusUpdate,
    current_user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Update booking status (the booking's provider only)"""
    booking = service.update_status(booking_id, data.status, current_user)
    return BookingEnvelope(booking=booking_response(booking))
