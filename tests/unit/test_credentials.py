"""
Unit Tests for the Credential Service
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from booking_app.credentials import CredentialService
from booking_app.exceptions import CredentialExpired, InvalidCredential, Unauthenticated

SECRET = "unit-test-secret"


class TestCredentialService:
    def setup_method(self):
        self.service = CredentialService(SECRET)

    def test_issue_then_resolve_returns_identity(self):
        token = self.service.issue("user-123")

        assert self.service.resolve(token) == "user-123"

    def test_credential_expires_after_one_hour(self):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
        token = self.service.issue("user-123", issued_at=issued_at)

        with pytest.raises(CredentialExpired) as exc_info:
            self.service.resolve(token)
        assert exc_info.value.headers == {"X-Token-Expired": "true"}

    def test_credential_valid_just_before_expiry(self):
        issued_at = datetime.now(timezone.utc) - timedelta(minutes=59)
        token = self.service.issue("user-123", issued_at=issued_at)

        assert self.service.resolve(token) == "user-123"

    def test_expiry_claim_is_one_hour_after_issue(self):
        issued_at = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = self.service.issue("user-123", issued_at=issued_at)

        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == 3600
        assert claims["sub"] == "user-123"

    def test_many_credentials_per_identity_stay_valid(self):
        first = self.service.issue("user-123")
        second = self.service.issue(
            "user-123", issued_at=datetime.now(timezone.utc) - timedelta(minutes=10)
        )

        assert self.service.resolve(first) == "user-123"
        assert self.service.resolve(second) == "user-123"

    def test_wrong_secret_is_invalid(self):
        token = CredentialService("another-secret").issue("user-123")

        with pytest.raises(InvalidCredential):
            self.service.resolve(token)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c", "x" * 200])
    def test_malformed_token_is_invalid(self, token):
        with pytest.raises(InvalidCredential):
            self.service.resolve(token)

    def test_token_without_subject_is_invalid(self):
        exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
        token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidCredential):
            self.service.resolve(token)

    def test_token_without_expiry_is_invalid(self):
        token = jwt.encode({"sub": "user-123"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidCredential):
            self.service.resolve(token)

    def test_errors_are_unauthenticated_kinds(self):
        assert issubclass(InvalidCredential, Unauthenticated)
        assert issubclass(CredentialExpired, Unauthenticated)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            CredentialService("")

    def test_repr_hides_secret(self):
        assert SECRET not in repr(self.service)
