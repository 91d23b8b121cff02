"""Security adapters: password hashing and session tokens."""

from chat_backend.infrastructure.security.pbkdf2_password_hasher import (
    Pbkdf2PasswordHasher,
)
from chat_backend.infrastructure.security.jwt_session_tokens import (
    JwtSessionTokenService,
)

__all__ = [
    "Pbkdf2PasswordHasher",
    "JwtSessionTokenService",
]
