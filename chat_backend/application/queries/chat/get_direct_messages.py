"""
GetDirectMessages Query - history between the caller and one other user.

No conversation yet between the two is not an error: the result is empty.
"""

from dataclasses import dataclass

from chat_backend.application.common.interfaces import Query, QueryHandler
from chat_backend.application.dto import MessageDTO
from chat_backend.application.services import ChatViewAssembler
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.domain.value_objects.pair_key import PairKey
from chat_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetDirectMessagesQuery(Query[list[MessageDTO]]):
    user_id: UserId
    counterpart_id: UserId


class GetDirectMessagesHandler(QueryHandler[list[MessageDTO]]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        assembler: ChatViewAssembler,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo
        self._assembler = assembler

    async def execute(self, query: GetDirectMessagesQuery) -> list[MessageDTO]:
        try:
            pair_key = PairKey.of(query.user_id, query.counterpart_id)
        except DomainValidationError:
            # Nobody can hold a direct conversation with themselves.
            return []

        conversation = await self._conv_repo.find_direct(pair_key)
        if conversation is None:
            return []

        messages = await self._msg_repo.get_by_conversation(conversation.id)
        return await self._assembler.messages(messages)
