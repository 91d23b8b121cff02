"""List Conversations Query."""

from dataclasses import dataclass

from chat_backend.application.common.interfaces import Query, QueryHandler
from chat_backend.application.dto import ConversationDTO
from chat_backend.application.services import ChatViewAssembler
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationDTO]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[ConversationDTO]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._assembler = assembler

    async def execute(self, query: ListConversationsQuery) -> list[ConversationDTO]:
        conversations = await self._conversation_repository.get_by_participant(
            query.user_id
        )
        return await self._assembler.conversations(conversations)
