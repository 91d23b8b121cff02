"""
Message Repository Port - Interface for message persistence.
Implementation: chat_backend/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def get_many(self, message_ids: list[MessageId]) -> list[Message]: ...

    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages of a conversation, oldest first."""
        ...

    @abstractmethod
    async def append(self, message: Message, conversation: Conversation) -> None:
        """
        Persist message and the conversation's updated latest-message pointer
        as one unit: either both writes land or neither does.
        """
        ...
