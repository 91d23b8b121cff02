"""
Create Group Command.

The requester is appended to the member list and becomes the admin. The
group needs at least three distinct participants including the requester.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.application.dto import ConversationDTO
from chat_backend.application.services import ChatViewAssembler
from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateGroupCommand(Command[ConversationDTO]):
    chat_name: Optional[str]
    members: Optional[list[UserId]]
    requested_by: UserId


class CreateGroupHandler(CommandHandler[ConversationDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._assembler = assembler

    async def execute(self, command: CreateGroupCommand) -> ConversationDTO:
        if not command.chat_name or command.members is None:
            raise DomainValidationError("Please provide group name and users")

        group = Conversation.create_group(
            chat_name=command.chat_name,
            members=list(command.members),
            admin_id=command.requested_by,
        )
        await self._conversation_repository.save(group)

        logger.info(
            "Group %s (%r) created by %s with %d members",
            group.id,
            group.chat_name,
            command.requested_by,
            len(group.users),
        )
        return await self._assembler.conversation(group)
