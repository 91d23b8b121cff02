"""
PBKDF2-SHA256 password hasher.

Stored format: ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``. The
iteration count is read back from the stored value, so raising
PASSWORD_HASH_ITERATIONS does not invalidate existing hashes.
"""

import hashlib
import hmac
import secrets
from typing import Optional

from chat_backend.domain.ports.password_hasher import PasswordHasher

ALGORITHM = "pbkdf2_sha256"


class Pbkdf2PasswordHasher(PasswordHasher):
    def __init__(self, iterations: int = 200_000):
        self._iterations = iterations
        self._dummy: Optional[str] = None

    def _derive(self, password: str, salt: str, iterations: int) -> str:
        dk = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
        )
        return f"{ALGORITHM}${iterations}${salt}${dk.hex()}"

    def hash(self, password: str) -> str:
        return self._derive(password, secrets.token_hex(16), self._iterations)

    def dummy_hash(self) -> str:
        if self._dummy is None:
            self._dummy = self.hash(secrets.token_hex(16))
        return self._dummy

    def verify(self, password: str, stored_hash: str) -> bool:
        try:
            algorithm, iterations, salt, _ = stored_hash.split("$", 3)
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        return hmac.compare_digest(self._derive(password, salt, rounds), stored_hash)
