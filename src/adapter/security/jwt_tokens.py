"""JWT implementation of TokenService using python-jose."""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_MINUTES = 60


class JoseTokenService:
    """Signs and verifies HS256 bearer tokens with a fixed lifetime."""

    def __init__(
        self,
        secret_key: str,
        expiration: timedelta = timedelta(minutes=JWT_EXPIRATION_MINUTES),
        algorithm: str = JWT_ALGORITHM,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self.secret_key = secret_key
        self.expiration = expiration
        self.algorithm = algorithm

    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        """Create a signed token; ``exp`` is ``now`` plus the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": issued_at,
            "exp": issued_at + self.expiration,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any] | None:
        """Verify signature and expiry. Return the claims, or None if invalid."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            return None
