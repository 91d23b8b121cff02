"""
JWT session tokens (HS256, PyJWT).

Claims: ``id`` (user id), ``iat``, ``exp``. Any decoding problem, including
an ``id`` that is not a valid user id, surfaces as AuthenticationError.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from chat_backend.domain.exceptions import AuthenticationError, DomainValidationError
from chat_backend.domain.ports.session_tokens import SessionTokenService
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

INVALID_TOKEN = "Unauthorized - Invalid Token"


class JwtSessionTokenService(SessionTokenService):
    def __init__(self, secret: str, expires_days: int = 30, algorithm: str = "HS256"):
        if not secret:
            raise RuntimeError(
                "JWT_SECRET is not set. Define it in your .env or export it "
                "before starting the server."
            )
        self._secret = secret
        self._expires = timedelta(days=expires_days)
        self._algorithm = algorithm

    @property
    def max_age_seconds(self) -> int:
        return int(self._expires.total_seconds())

    def issue(self, user_id: UserId) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user_id.value,
            "iat": now,
            "exp": now + self._expires,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> UserId:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "id"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired session token")
            raise AuthenticationError(INVALID_TOKEN)
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected session token: {e}")
            raise AuthenticationError(INVALID_TOKEN)

        try:
            return UserId(str(claims["id"]))
        except DomainValidationError:
            raise AuthenticationError(INVALID_TOKEN)
