"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message
from chat_backend.domain.entities.user import User

__all__ = [
    "Conversation",
    "Message",
    "User",
]
