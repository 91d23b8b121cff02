"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from chat_backend.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from chat_backend.domain.ports.repositories.message_repository import MessageRepository
from chat_backend.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "UserRepository",
]
