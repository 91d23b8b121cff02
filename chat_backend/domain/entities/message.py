"""
Message Entity - A single message appended to a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone

from chat_backend.domain.exceptions.validation_error import DomainValidationError
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    sender_id: UserId
    conversation_id: ConversationId
    content: str
    created_at: datetime
    updated_at: datetime
    read_by: list[UserId] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        sender_id: UserId,
        conversation_id: ConversationId,
        content: str | None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        text = (content or "").strip()
        if not text:
            raise DomainValidationError("Message content is required")

        now = datetime.now(timezone.utc)
        return cls(
            id=MessageId.generate(),
            sender_id=sender_id,
            conversation_id=conversation_id,
            content=text,
            created_at=now,
            updated_at=now,
        )
