"""
Password Hasher Port.
Implementation: chat_backend/infrastructure/security/pbkdf2_password_hasher.py
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, stored_hash: str) -> bool: ...

    @abstractmethod
    def dummy_hash(self) -> str:
        """
        A well-formed hash of no real password, at the configured cost.

        Verifying against it takes as long as checking a real account, so a
        login for an unknown username is not answered faster.
        """
        ...
