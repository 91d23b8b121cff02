"""
Send Direct Message Command.

Flow:
  1. Validate text and recipient
  2. Find-or-create the direct conversation for the (sender, recipient) pair
  3. Build the message and move the conversation's latest-message pointer
  4. Persist both in one unit via MessageRepository.append()
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.application.dto import MessageDTO
from chat_backend.application.services import ChatViewAssembler
from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message
from chat_backend.domain.exceptions import DomainValidationError, EntityNotFoundError
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendDirectMessageCommand(Command[MessageDTO]):
    sender_id: UserId
    recipient_id: UserId
    content: Optional[str]


class SendDirectMessageHandler(CommandHandler[MessageDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._assembler = assembler

    async def execute(self, command: SendDirectMessageCommand) -> MessageDTO:
        if not (command.content or "").strip():
            raise DomainValidationError("Message content is required")

        candidate = Conversation.start_direct(command.sender_id, command.recipient_id)

        if await self._user_repository.get_by_id(command.recipient_id) is None:
            raise EntityNotFoundError("User not found")

        conversation = await self._conversation_repository.get_or_create_direct(
            candidate
        )
        if conversation.id == candidate.id:
            logger.info(
                "Started direct conversation %s for pair %s",
                conversation.id,
                conversation.pair_key,
            )

        message = Message.create(
            sender_id=command.sender_id,
            conversation_id=conversation.id,
            content=command.content,
        )
        conversation.record_message(message)
        await self._message_repository.append(message, conversation)

        logger.info(
            "Message %s appended to direct conversation %s", message.id, conversation.id
        )
        return await self._assembler.message(message)
