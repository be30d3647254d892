"""
Authorization gate.

One fixed policy table decides who may perform each operation. ``authorize``
is a pure decision over an identity, an operation and (optionally) the
resource being acted on; ``enforce`` turns a deny into the matching error.

When no resource is passed only the role requirement is checked. Routes use
that to reject the wrong role before loading anything, then call again with
the loaded resource for the ownership part.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import Forbidden, Unauthenticated
from .models import Role, User

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    CREATE_SERVICE = "create_service"
    CREATE_BOOKING = "create_booking"
    UPDATE_BOOKING_STATUS = "update_booking_status"
    LIST_BOOKINGS = "list_bookings"
    LIST_REVIEWS = "list_reviews"
    CREATE_REVIEW = "create_review"
    READ_PROFILE = "read_profile"
    ADMIN_SIGNUP = "admin_signup"


class DenyReason(str, enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[DenyReason] = None
    message: str = ""
    forbidden_status: int = 403

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(allowed=True)

ALL_ROLES = frozenset(Role)


@dataclass(frozen=True)
class Policy:
    roles: frozenset
    # Returns True when the identity owns the resource
    owner_check: Optional[Callable[[User, Any], bool]] = None
    # Role/ownership failures surface as 401 on some routes, 403 on others
    forbidden_status: int = 403


def _is_booking_client(identity: User, booking) -> bool:
    return booking.client_id == identity.id


def _is_booking_provider(identity: User, booking) -> bool:
    return booking.provider_id == identity.id


POLICIES: dict[Operation, Policy] = {
    Operation.CREATE_SERVICE: Policy(frozenset({Role.ADMIN}), forbidden_status=401),
    Operation.CREATE_BOOKING: Policy(
        frozenset({Role.CLIENT}), _is_booking_client, forbidden_status=401
    ),
    Operation.UPDATE_BOOKING_STATUS: Policy(
        frozenset({Role.PROVIDER, Role.ADMIN}), _is_booking_provider, forbidden_status=401
    ),
    # Filtering to the caller's own bookings happens in the query
    Operation.LIST_BOOKINGS: Policy(ALL_ROLES),
    Operation.LIST_REVIEWS: Policy(ALL_ROLES),
    Operation.CREATE_REVIEW: Policy(frozenset({Role.CLIENT}), _is_booking_client),
    Operation.READ_PROFILE: Policy(ALL_ROLES),
    Operation.ADMIN_SIGNUP: Policy(frozenset({Role.ADMIN})),
}


def authorize(identity: Optional[User], operation: Operation, resource: Any = None) -> Decision:
    """Decide whether ``identity`` may perform ``operation`` on ``resource``"""
    policy = POLICIES[operation]

    if identity is None:
        return Decision(False, DenyReason.UNAUTHENTICATED, "Not authenticated")

    if identity.role not in policy.roles:
        return Decision(
            False,
            DenyReason.FORBIDDEN,
            f"Role {identity.role.value} may not perform {operation.value}",
            policy.forbidden_status,
        )

    if resource is not None and policy.owner_check and not policy.owner_check(identity, resource):
        return Decision(
            False,
            DenyReason.FORBIDDEN,
            f"Not authorized to {operation.value.replace('_', ' ')} on this resource",
            policy.forbidden_status,
        )

    return ALLOW


def enforce(identity: Optional[User], operation: Operation, resource: Any = None) -> User:
    """Like ``authorize`` but raises on deny; returns the identity for chaining"""
    decision = authorize(identity, operation, resource)
    if decision:
        return identity

    if decision.reason is DenyReason.UNAUTHENTICATED:
        raise Unauthenticated(decision.message)

    logger.warning(f"⚠️ Denied {operation.value} for user {identity.id}: {decision.message}")
    if decision.forbidden_status == 401:
        raise Forbidden("Unauthorized", status_code=401)
    raise Forbidden(decision.message)
