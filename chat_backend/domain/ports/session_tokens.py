"""
Session Token Port - issues and verifies signed session credentials.
Implementation: chat_backend/infrastructure/security/jwt_session_tokens.py
"""

from abc import ABC, abstractmethod

from chat_backend.domain.value_objects.user_id import UserId


class SessionTokenService(ABC):
    @abstractmethod
    def issue(self, user_id: UserId) -> str: ...

    @abstractmethod
    def verify(self, token: str) -> UserId:
        """Return the identity the token was issued for.

        Raises:
            AuthenticationError: signature invalid, token expired or claims missing
        """
        ...

    @property
    @abstractmethod
    def max_age_seconds(self) -> int: ...
