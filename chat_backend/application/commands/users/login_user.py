"""
Login User Command.

Unknown usernames and wrong passwords fail with the same message so a caller
cannot tell which accounts exist.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.commands.users.register_user import AuthResult
from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.domain.ports import PasswordHasher, SessionTokenService
from chat_backend.domain.ports.repositories import UserRepository
from chat_backend.domain.value_objects.username import Username

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class LoginUserCommand(Command[AuthResult]):
    username: Optional[str]
    password: Optional[str]


class LoginUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        session_tokens: SessionTokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._session_tokens = session_tokens

    async def execute(self, command: LoginUserCommand) -> AuthResult:
        if not command.username or not command.password:
            raise DomainValidationError("Please fill in all fields")

        try:
            username = Username(command.username)
        except DomainValidationError:
            raise DomainValidationError(INVALID_CREDENTIALS)

        user = await self._user_repository.get_by_username(username)
        # Unknown usernames still pay for one full hash check
        stored_hash = user.password_hash if user else self._password_hasher.dummy_hash()
        password_ok = self._password_hasher.verify(command.password, stored_hash)
        if user is None or not password_ok:
            logger.info("Failed login for username %r", command.username)
            raise DomainValidationError(INVALID_CREDENTIALS)

        logger.info("User %s logged in", user.id)
        return AuthResult(user=user, token=self._session_tokens.issue(user.id))
