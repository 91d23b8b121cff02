"""
ChatViewAssembler - resolves referenced users and messages into response DTOs.

Conversations and messages only store ids. Every read endpoint returns them
with participants, admin, sender and latest message resolved inline, so the
lookups are batched here: one user query and one message query per call
regardless of how many conversations are assembled.
"""

import logging
from typing import Iterable, Optional

from chat_backend.application.dto import (
    ConversationDTO,
    MessageDTO,
    UserDTO,
    UserSummaryDTO,
)
from chat_backend.domain.entities import Conversation, Message, User
from chat_backend.domain.ports.repositories import MessageRepository, UserRepository
from chat_backend.domain.value_objects import MessageId, UserId

logger = logging.getLogger(__name__)


class ChatViewAssembler:
    def __init__(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ):
        self._user_repository = user_repository
        self._message_repository = message_repository

    async def _load_users(self, user_ids: Iterable[UserId]) -> dict[str, User]:
        unique: list[UserId] = []
        for user_id in user_ids:
            if user_id not in unique:
                unique.append(user_id)
        if not unique:
            return {}
        users = await self._user_repository.get_many(unique)
        return {user.id.value: user for user in users}

    def _message_dto(self, message: Message, users: dict[str, User]) -> MessageDTO:
        sender = users.get(message.sender_id.value)
        return MessageDTO(
            id=message.id.value,
            sender=UserSummaryDTO.from_entity(sender) if sender else message.sender_id.value,
            content=message.content,
            group=message.conversation_id.value,
            read_by=[user_id.value for user_id in message.read_by],
            created_at=message.created_at,
            updated_at=message.updated_at,
        )

    def _user_dto(self, user_id: UserId, users: dict[str, User]) -> UserDTO | str:
        user = users.get(user_id.value)
        return UserDTO.from_entity(user) if user else user_id.value

    async def messages(self, messages: list[Message]) -> list[MessageDTO]:
        users = await self._load_users(m.sender_id for m in messages)
        return [self._message_dto(message, users) for message in messages]

    async def message(self, message: Message) -> MessageDTO:
        return (await self.messages([message]))[0]

    async def conversations(
        self, conversations: list[Conversation]
    ) -> list[ConversationDTO]:
        latest_ids: list[MessageId] = [
            c.latest_message_id for c in conversations if c.latest_message_id
        ]
        latest_messages: dict[str, Message] = {}
        if latest_ids:
            for message in await self._message_repository.get_many(latest_ids):
                latest_messages[message.id.value] = message

        referenced: list[UserId] = []
        for conversation in conversations:
            referenced.extend(conversation.users)
            if conversation.group_admin_id:
                referenced.append(conversation.group_admin_id)
        referenced.extend(m.sender_id for m in latest_messages.values())
        users = await self._load_users(referenced)

        result = []
        for conversation in conversations:
            latest: Optional[Message] = None
            if conversation.latest_message_id:
                latest = latest_messages.get(conversation.latest_message_id.value)
                if latest is None:
                    logger.warning(
                        "Conversation %s points at missing message %s",
                        conversation.id.value,
                        conversation.latest_message_id.value,
                    )
            result.append(
                ConversationDTO(
                    id=conversation.id.value,
                    chat_name=conversation.chat_name,
                    is_group_chat=conversation.is_group_chat,
                    users=[self._user_dto(u, users) for u in conversation.users],
                    group_admin=(
                        self._user_dto(conversation.group_admin_id, users)
                        if conversation.group_admin_id
                        else None
                    ),
                    latest_message=self._message_dto(latest, users) if latest else None,
                    created_at=conversation.created_at,
                    updated_at=conversation.updated_at,
                )
            )
        return result

    async def conversation(self, conversation: Conversation) -> ConversationDTO:
        return (await self.conversations([conversation]))[0]
