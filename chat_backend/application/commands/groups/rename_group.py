"""Rename Group Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.application.dto import ConversationDTO
from chat_backend.application.services import ChatViewAssembler, load_group
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameGroupCommand(Command[ConversationDTO]):
    group_id: Optional[ConversationId]
    chat_name: Optional[str]
    requested_by: UserId


class RenameGroupHandler(CommandHandler[ConversationDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._assembler = assembler

    async def execute(self, command: RenameGroupCommand) -> ConversationDTO:
        if not command.group_id or not command.chat_name:
            raise DomainValidationError("Please provide group ID and new name")

        group = await load_group(self._conversation_repository, command.group_id)
        group.rename(command.chat_name)
        await self._conversation_repository.save(group)

        logger.info(
            "Group %s renamed to %r by %s", group.id, group.chat_name, command.requested_by
        )
        return await self._assembler.conversation(group)
