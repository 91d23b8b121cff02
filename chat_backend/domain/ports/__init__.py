"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/        → Data persistence interfaces
- (root files)         → Other external service interfaces
  - password_hasher.py → one-way password hashing
  - session_tokens.py  → signed session credentials
"""

from chat_backend.domain.ports.password_hasher import PasswordHasher
from chat_backend.domain.ports.session_tokens import SessionTokenService

__all__ = [
    "PasswordHasher",
    "SessionTokenService",
]
