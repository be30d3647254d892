"""Booking service - Business logic for booking operations"""

import logging

from sqlalchemy.orm import Session

from ...authorization import Operation, enforce
from ...exceptions import Conflict, InvalidTransition, NotFound, ValidationError
from ...models import Booking, Role, User
from ..auth.repository import UserRepository
from ..catalog.repository import ServiceRepository
from . import lifecycle
from .lifecycle import BookingStatus
from .repository import BookingRepository
from .schemas import BookingCreate

logger = logging.getLogger(__name__)

PROVIDER_ROLES = (Role.PROVIDER, Role.ADMIN)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()
        self.users = UserRepository()
        self.services = ServiceRepository()

    def get_bookings(self, user: User) -> list[Booking]:
        """Bookings the user takes part in, as client or provider"""
        enforce(user, Operation.LIST_BOOKINGS)
        return self.repo.get_bookings_for_user(self.db, user.id)

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise NotFound("Booking not found")
        return booking

    def create_booking(self, data: BookingCreate, user: User) -> Booking:
        """Book a service for the calling client; new bookings start PENDING"""
        enforce(user, Operation.CREATE_BOOKING)

        service = self.services.get_service_by_id(self.db, str(data.serviceId))
        if not service:
            raise NotFound("Service not found")

        provider = self.users.get_user_by_id(self.db, str(data.providerId))
        if not provider:
            raise NotFound("Provider not found")
        if provider.role not in PROVIDER_ROLES:
            raise ValidationError("providerId must reference a PROVIDER account")

        booking = Booking(
            client_id=user.id,
            provider_id=provider.id,
            service_id=service.id,
            # Stored as naive UTC
            scheduled_at=data.bookingDate.replace(tzinfo=None),
            status=BookingStatus.PENDING,
        )
        enforce(user, Operation.CREATE_BOOKING, booking)

        booking = self.repo.create_booking(self.db, booking)
        logger.info(
            f"📅 Booking {booking.id} created: client={user.id} provider={provider.id} "
            f"service={service.id}"
        )
        return booking

    def update_status(self, booking_id: str, requested: BookingStatus, user: User) -> Booking:
        """Move a booking along its lifecycle (its provider only)"""
        enforce(user, Operation.UPDATE_BOOKING_STATUS)

        booking = self.get_booking(booking_id)
        enforce(user, Operation.UPDATE_BOOKING_STATUS, booking)

        current = booking.status
        try:
            new_status = lifecycle.transition(current, requested)
        except InvalidTransition:
            logger.warning(
                f"⚠️ Rejected transition for booking {booking.id}: "
                f"{current.value} -> {requested.value}"
            )
            raise

        if not self.repo.update_status(self.db, booking.id, current, new_status):
            raise Conflict("Booking was modified by another request, please retry")

        self.db.refresh(booking)
        logger.info(f"✅ Booking {booking.id} transitioned: {current.value} → {new_status.value}")
        return booking
