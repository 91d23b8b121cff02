"""GetGroupMessages Query - full history of a group, for its members only."""

from dataclasses import dataclass

from chat_backend.application.common.interfaces import Query, QueryHandler
from chat_backend.application.dto import MessageDTO
from chat_backend.application.services import ChatViewAssembler, load_group
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetGroupMessagesQuery(Query[list[MessageDTO]]):
    group_id: ConversationId
    user_id: UserId


class GetGroupMessagesHandler(QueryHandler[list[MessageDTO]]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        assembler: ChatViewAssembler,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo
        self._assembler = assembler

    async def execute(self, query: GetGroupMessagesQuery) -> list[MessageDTO]:
        """
        Raises:
            EntityNotFoundError: If the group doesn't exist
            AccessDeniedError: If the caller is not a member
        """
        group = await load_group(self._conv_repo, query.group_id)
        group.ensure_participant(query.user_id)

        messages = await self._msg_repo.get_by_conversation(group.id)
        return await self._assembler.messages(messages)
