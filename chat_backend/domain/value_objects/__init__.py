"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.domain.value_objects.username import Username
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.pair_key import PairKey

__all__ = [
    "UserId",
    "Username",
    "ConversationId",
    "MessageId",
    "PairKey",
]
