"""
Prisma Message Repository Implementation.

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id              String   @id @default(uuid())
        sender_id       String
        content         String
        conversation_id String
        read_by         String[]
        created_at      DateTime @default(now())
        updated_at      DateTime @updatedAt
        conversation    Conversation @relation(...)
    }

append() writes the message and the conversation's latest-message pointer
inside one interactive transaction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message
from chat_backend.domain.ports.repositories.message_repository import MessageRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: Any) -> Message:
        """
        Map Prisma record to domain entity.

        Args:
            record: Prisma Message model instance

        Returns:
            Domain Message entity with value objects
        """
        return Message(
            id=MessageId(record.id),
            sender_id=UserId(record.sender_id),
            conversation_id=ConversationId(record.conversation_id),
            content=record.content,
            created_at=record.created_at,
            updated_at=record.updated_at,
            read_by=[UserId(user_id) for user_id in record.read_by],
        )

    async def get_many(self, message_ids: list[MessageId]) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={"id": {"in": [message_id.value for message_id in message_ids]}}
        )
        return [self._to_entity(record) for record in records]

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """
        Get every message of a conversation, oldest first.

        Args:
            conversation_id: ConversationId value object

        Returns:
            List of Message entities in chronological order
        """
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def append(self, message: Message, conversation: Conversation) -> None:
        """
        Insert message and move the conversation's latest-message pointer.

        Args:
            message: New Message entity
            conversation: Its conversation, with latest_message_id already
                pointing at message

        Note:
            Both writes share one transaction. If either fails, neither is kept
            and the error propagates to the caller.
        """
        async with self._prisma.tx() as transaction:
            await transaction.message.create(
                data={
                    "id": message.id.value,
                    "sender_id": message.sender_id.value,
                    "conversation_id": message.conversation_id.value,
                    "content": message.content,
                    "read_by": [user_id.value for user_id in message.read_by],
                    "created_at": message.created_at,
                    "updated_at": message.updated_at,
                }
            )
            await transaction.conversation.update(
                where={"id": conversation.id.value},
                data={
                    "latest_message_id": message.id.value,
                    "updated_at": conversation.updated_at,
                },
            )
        logger.debug(
            f"Appended message {message.id} to conversation {conversation.id}"
        )
