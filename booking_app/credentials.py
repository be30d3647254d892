"""
Credential service - signed, time-limited bearer tokens.

Tokens are HS256 JWTs carrying the identity id as ``sub``. Resolving a token
is a pure function of the token and the signing secret; confirming that the
identity still exists is the caller's job (see ``auth.get_current_user``).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from .config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, SECRET_KEY
from .exceptions import CredentialExpired, InvalidCredential

logger = logging.getLogger(__name__)


class CredentialService:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = JWT_ALGORITHM,
        ttl: timedelta = timedelta(hours=1),
    ):
        if not secret_key:
            raise ValueError("CredentialService requires a non-empty secret key")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        return f"CredentialService(algorithm={self.algorithm!r}, ttl={self.ttl!r})"

    def issue(self, identity_id: str, issued_at: Optional[datetime] = None) -> str:
        """Sign a credential for ``identity_id`` that expires ``ttl`` after ``issued_at``"""
        issued_at = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": str(identity_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def resolve(self, credential: str) -> str:
        """
        Verify a credential and return the identity id it was issued for.

        Raises:
            CredentialExpired: the signature is valid but ``exp`` has passed
            InvalidCredential: bad signature, malformed token or missing subject
        """
        try:
            payload = jwt.decode(credential, self._secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.info("ℹ️ Rejected expired credential")
            raise CredentialExpired() from e
        except JWTError as e:
            logger.warning(f"⚠️ Rejected invalid credential: {type(e).__name__}")
            raise InvalidCredential() from e

        identity_id = payload.get("sub")
        if not identity_id or "exp" not in payload:
            logger.warning("⚠️ Credential is missing required claims")
            raise InvalidCredential("Invalid token claims")
        return identity_id


_credential_service: Optional[CredentialService] = None


def get_credential_service() -> CredentialService:
    """Process-wide credential service built from configuration"""
    global _credential_service
    if _credential_service is None:
        _credential_service = CredentialService(
            SECRET_KEY, ttl=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        )
    return _credential_service
