"""
Error kinds raised by the domain layer.

Each error carries the HTTP status it maps to; the handlers registered in
``main.py`` turn them into ``{"detail": ..., "error": ...}`` responses.
"""

from typing import Optional


class AppError(Exception):
    status_code = 500
    default_detail = "Something went wrong"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        headers: Optional[dict] = None,
    ):
        self.detail = detail or self.default_detail
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.detail)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    status_code = 400
    default_detail = "Invalid request"


class InvalidCredentials(AppError):
    """Bad email/password pair on login"""

    status_code = 401
    default_detail = "Invalid credentials"


class Unauthenticated(AppError):
    status_code = 401
    default_detail = "Not authenticated"


class InvalidCredential(Unauthenticated):
    default_detail = "Invalid token"


class CredentialExpired(Unauthenticated):
    default_detail = "Token has expired. Please log in again."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"X-Token-Expired": "true"})


class Forbidden(AppError):
    status_code = 403
    default_detail = "Forbidden"


class NotFound(AppError):
    status_code = 404
    default_detail = "Not found"


class Conflict(AppError):
    status_code = 409
    default_detail = "Conflict"


class InvalidTransition(Conflict):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(f"Invalid booking status transition: {current.value} -> {requested.value}")


class InvalidState(Conflict):
    default_detail = "Resource is not in a valid state for this operation"


class InternalError(AppError):
    status_code = 500
    default_detail = "Something went wrong"
