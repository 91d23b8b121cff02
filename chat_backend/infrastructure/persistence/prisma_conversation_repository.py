"""
Prisma Conversation Repository Implementation.

Guidelines:
- Implements ConversationRepository port from domain layer
- Participants are a scalar list of user ids (users String[])
- Direct conversations carry a unique pair_key; find-or-create is a single
  upsert on it, so two concurrent first messages resolve to one row
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.pair_key import PairKey
from chat_backend.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: Any) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            is_group_chat=record.is_group_chat,
            users=[UserId(user_id) for user_id in record.users],
            created_at=record.created_at,
            updated_at=record.updated_at,
            chat_name=record.chat_name,
            group_admin_id=UserId(record.group_admin_id) if record.group_admin_id else None,
            latest_message_id=(
                MessageId(record.latest_message_id) if record.latest_message_id else None
            ),
            pair_key=PairKey(record.pair_key) if record.pair_key else None,
        )

    def _create_data(self, conversation: Conversation) -> dict:
        return {
            "id": conversation.id.value,
            "is_group_chat": conversation.is_group_chat,
            "users": [user_id.value for user_id in conversation.users],
            "chat_name": conversation.chat_name,
            "group_admin_id": (
                conversation.group_admin_id.value if conversation.group_admin_id else None
            ),
            "latest_message_id": (
                conversation.latest_message_id.value
                if conversation.latest_message_id
                else None
            ),
            "pair_key": conversation.pair_key.value if conversation.pair_key else None,
            "created_at": conversation.created_at,
            "updated_at": conversation.updated_at,
        }

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def find_direct(self, pair_key: PairKey) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"pair_key": pair_key.value}
        )
        return self._to_entity(record) if record else None

    async def get_or_create_direct(self, candidate: Conversation) -> Conversation:
        record = await self._prisma.conversation.upsert(
            where={"pair_key": candidate.pair_key.value},
            data={
                "create": self._create_data(candidate),
                "update": {},
            },
        )
        return self._to_entity(record)

    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        records = await self._prisma.conversation.find_many(
            where={"users": {"has": user_id.value}},
            order={"updated_at": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def save(self, conversation: Conversation) -> None:
        """Save (create or update) conversation."""
        data = self._create_data(conversation)
        await self._prisma.conversation.upsert(
            where={"id": conversation.id.value},
            data={
                "create": data,
                "update": {
                    "users": {"set": data["users"]},
                    "chat_name": data["chat_name"],
                    "group_admin_id": data["group_admin_id"],
                    "latest_message_id": data["latest_message_id"],
                    "updated_at": data["updated_at"],
                },
            },
        )
