import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .credentials import CredentialService, get_credential_service
from .database import get_db
from .exceptions import Unauthenticated
from .models import User

logger = logging.getLogger(__name__)

# Missing headers are reported by get_current_user, not by HTTPBearer itself
security = HTTPBearer(auto_error=False)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    credential_service: CredentialService = Depends(get_credential_service),
) -> Optional[User]:
    """Resolve the bearer credential to a user, or None when no header was sent"""
    if not credentials:
        return None

    identity_id = credential_service.resolve(credentials.credentials)

    # A valid signature is not enough: the account must still exist
    user = db.get(User, identity_id)
    if user is None:
        logger.warning(f"⚠️ Credential for unknown user {identity_id}")
        raise Unauthenticated("Account no longer exists")

    logger.debug(f"✅ User authenticated: {user.id}")
    return user


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Get current user from the bearer credential"""
    if user is None:
        raise Unauthenticated(
            "Not authenticated. Please provide a valid Bearer token in the Authorization header."
        )
    return user
