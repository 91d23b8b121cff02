"""
Add / Remove Member Commands.

Both are restricted to the group admin. Adding does not de-duplicate;
removing drops every occurrence of the user id.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.application.dto import ConversationDTO
from chat_backend.application.services import ChatViewAssembler, load_group
from chat_backend.domain.exceptions import DomainValidationError, EntityNotFoundError
from chat_backend.domain.ports.repositories import ConversationRepository, UserRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

MISSING_IDS = "Please provide group ID and user ID"


@dataclass(frozen=True)
class AddMemberCommand(Command[ConversationDTO]):
    group_id: Optional[ConversationId]
    user_id: Optional[UserId]
    requested_by: UserId


@dataclass(frozen=True)
class RemoveMemberCommand(Command[ConversationDTO]):
    group_id: Optional[ConversationId]
    user_id: Optional[UserId]
    requested_by: UserId


class AddMemberHandler(CommandHandler[ConversationDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository
        self._assembler = assembler

    async def execute(self, command: AddMemberCommand) -> ConversationDTO:
        if not command.group_id or not command.user_id:
            raise DomainValidationError(MISSING_IDS)

        group = await load_group(self._conversation_repository, command.group_id)
        group.ensure_admin(command.requested_by, "add")

        if await self._user_repository.get_by_id(command.user_id) is None:
            raise EntityNotFoundError("User not found")

        group.add_member(command.user_id, requested_by=command.requested_by)
        await self._conversation_repository.save(group)

        logger.info("User %s added to group %s", command.user_id, group.id)
        return await self._assembler.conversation(group)


class RemoveMemberHandler(CommandHandler[ConversationDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._assembler = assembler

    async def execute(self, command: RemoveMemberCommand) -> ConversationDTO:
        if not command.group_id or not command.user_id:
            raise DomainValidationError(MISSING_IDS)

        group = await load_group(self._conversation_repository, command.group_id)
        group.remove_member(command.user_id, requested_by=command.requested_by)
        await self._conversation_repository.save(group)

        logger.info("User %s removed from group %s", command.user_id, group.id)
        return await self._assembler.conversation(group)
