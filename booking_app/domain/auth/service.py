"""Auth service - registration, login and credential issuance"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...authorization import Operation, enforce
from ...credentials import CredentialService
from ...exceptions import Conflict, InvalidCredentials
from ...models import Role, User
from ...security_utils import hash_password, verify_password
from .repository import UserRepository
from .schemas import AdminSignupRequest, LoginRequest, SignupRequest

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for account registration and login"""

    def __init__(self, db: Session, credentials: CredentialService):
        self.db = db
        self.credentials = credentials
        self.repo = UserRepository()

    def signup(self, data: SignupRequest) -> tuple[User, str]:
        """Register a CLIENT or PROVIDER and issue their first credential"""
        user = self._create_user(data, data.role)
        return user, self.credentials.issue(user.id)

    def admin_signup(self, data: AdminSignupRequest, caller: Optional[User]) -> tuple[User, str]:
        """
        Register an ADMIN.

        Only an existing ADMIN may do this, except while no ADMIN exists yet:
        the very first admin account bootstraps itself.
        """
        if self.repo.has_role(self.db, Role.ADMIN):
            enforce(caller, Operation.ADMIN_SIGNUP)
        else:
            logger.info("🆕 No admin account exists yet - allowing bootstrap admin signup")

        user = self._create_user(data, Role.ADMIN)
        return user, self.credentials.issue(user.id)

    def login(self, data: LoginRequest, admin_only: bool = False) -> tuple[User, str]:
        """Check email/password and issue a credential"""
        user = self.repo.get_user_by_email(self.db, data.email)

        # Same error for unknown email and wrong password
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning("⚠️ Failed login attempt")
            raise InvalidCredentials()

        if admin_only and user.role != Role.ADMIN:
            logger.warning(f"⚠️ Non-admin user {user.id} attempted admin login")
            raise InvalidCredentials("Unauthorized: Not an ADMIN user")

        logger.info(f"✅ User {user.id} logged in")
        return user, self.credentials.issue(user.id)

    def _create_user(self, data: AdminSignupRequest, role: Role) -> User:
        if self.repo.get_user_by_email(self.db, data.email):
            raise Conflict("User with this email already exists")

        try:
            user = self.repo.create_user(
                self.db,
                email=data.email,
                password_hash=hash_password(data.password),
                name=data.name,
                role=role,
            )
        except IntegrityError as e:
            # Email taken between the check and the insert
            self.db.rollback()
            raise Conflict("User with this email already exists") from e

        logger.info(f"🆕 Created {role.value} account {user.id}")
        return user
