"""Send Group Message Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.application.dto import MessageDTO
from chat_backend.application.services import ChatViewAssembler, load_group
from chat_backend.domain.entities.message import Message
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendGroupMessageCommand(Command[MessageDTO]):
    group_id: ConversationId
    sender_id: UserId
    content: Optional[str]


class SendGroupMessageHandler(CommandHandler[MessageDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._assembler = assembler

    async def execute(self, command: SendGroupMessageCommand) -> MessageDTO:
        group = await load_group(self._conversation_repository, command.group_id)
        group.ensure_participant(command.sender_id)

        message = Message.create(
            sender_id=command.sender_id,
            conversation_id=group.id,
            content=command.content,
        )
        group.record_message(message)
        await self._message_repository.append(message, group)

        logger.info("Message %s appended to group %s", message.id, group.id)
        return await self._assembler.message(message)
