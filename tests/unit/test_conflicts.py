"""
Unit Tests for lost races and uniqueness violations

The read-side checks are bypassed so the write itself has to detect the
conflict.
"""

from datetime import datetime

import pytest

from booking_app.credentials import CredentialService
from booking_app.domain.auth.repository import UserRepository
from booking_app.domain.auth.schemas import SignupRequest
from booking_app.domain.auth.service import AuthService
from booking_app.domain.bookings.lifecycle import BookingStatus
from booking_app.domain.bookings.repository import BookingRepository
from booking_app.domain.bookings.service import BookingService
from booking_app.domain.reviews.repository import ReviewRepository
from booking_app.domain.reviews.schemas import ReviewCreate
from booking_app.domain.reviews.service import ReviewService
from booking_app.exceptions import Conflict
from booking_app.models import Booking, Review, Role, Service, User


def add_user(db, email, role):
    user = User(email=email, password_hash="x", name=email.split("@")[0], role=role)
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def parties(db):
    client = add_user(db, "alice@example.com", Role.CLIENT)
    provider = add_user(db, "bob@example.com", Role.PROVIDER)
    admin = add_user(db, "admin@example.com", Role.ADMIN)
    service = Service(name="Deep clean", price=120.0, owner_id=admin.id)
    db.add(service)
    db.commit()
    return client, provider, service


def add_booking(db, parties, status):
    client, provider, service = parties
    booking = Booking(
        client_id=client.id,
        provider_id=provider.id,
        service_id=service.id,
        scheduled_at=datetime(2030, 5, 1, 10, 0),
        status=status,
    )
    db.add(booking)
    db.commit()
    return booking


class TestStatusCompareAndSet:
    def test_stale_expected_status_writes_nothing(self, db, parties):
        booking = add_booking(db, parties, BookingStatus.PENDING)

        updated = BookingRepository.update_status(
            db, booking.id, BookingStatus.CONFIRMED, BookingStatus.COMPLETED
        )

        assert updated is False
        assert db.get(Booking, booking.id).status == BookingStatus.PENDING

    def test_matching_expected_status_writes(self, db, parties):
        booking = add_booking(db, parties, BookingStatus.PENDING)

        updated = BookingRepository.update_status(
            db, booking.id, BookingStatus.PENDING, BookingStatus.CONFIRMED
        )

        assert updated is True
        assert db.get(Booking, booking.id).status == BookingStatus.CONFIRMED

    def test_lost_race_surfaces_as_conflict(self, db, parties, monkeypatch):
        booking = add_booking(db, parties, BookingStatus.PENDING)
        provider = parties[1]
        monkeypatch.setattr(
            BookingRepository, "update_status", staticmethod(lambda *args: False)
        )

        with pytest.raises(Conflict):
            BookingService(db).update_status(booking.id, BookingStatus.CONFIRMED, provider)

        assert db.get(Booking, booking.id).status == BookingStatus.PENDING


class TestUniqueReview:
    def test_duplicate_insert_is_conflict(self, db, parties, monkeypatch):
        client = parties[0]
        booking = add_booking(db, parties, BookingStatus.COMPLETED)
        db.add(Review(booking_id=booking.id, client_id=client.id, rating=5))
        db.commit()
        monkeypatch.setattr(
            ReviewRepository, "get_review_for_booking", staticmethod(lambda db, booking_id: None)
        )

        with pytest.raises(Conflict):
            ReviewService(db).create_review(ReviewCreate(bookingId=booking.id, rating=4), client)

        assert db.query(Review).count() == 1


class TestUniqueEmail:
    def test_duplicate_insert_is_conflict(self, db, monkeypatch):
        add_user(db, "alice@example.com", Role.CLIENT)
        monkeypatch.setattr(
            UserRepository, "get_user_by_email", staticmethod(lambda db, email: None)
        )
        service = AuthService(db, CredentialService("unit-test-secret"))
        data = SignupRequest(
            email="alice@example.com", password="password123", name="Alice", role="PROVIDER"
        )

        with pytest.raises(Conflict):
            service.signup(data)

        assert db.query(User).count() == 1
