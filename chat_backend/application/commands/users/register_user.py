"""
Register User Command.

Creates the identity with a hashed password and a gender-derived avatar,
then issues a session token for it. The router turns the token into the
session cookie.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Command, CommandHandler
from chat_backend.domain.entities.user import User
from chat_backend.domain.exceptions import DomainValidationError, UsernameTakenError
from chat_backend.domain.ports import PasswordHasher, SessionTokenService
from chat_backend.domain.ports.repositories import UserRepository
from chat_backend.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    token: str


@dataclass(frozen=True)
class RegisterUserCommand(Command[AuthResult]):
    full_name: Optional[str]
    username: Optional[str]
    password: Optional[str]
    confirm_password: Optional[str]
    gender: Optional[str]


class RegisterUserHandler(CommandHandler[AuthResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        session_tokens: SessionTokenService,
        avatar_base_url: str,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._session_tokens = session_tokens
        self._avatar_base_url = avatar_base_url

    async def execute(self, command: RegisterUserCommand) -> AuthResult:
        if not all(
            [
                command.full_name,
                command.username,
                command.password,
                command.confirm_password,
                command.gender,
            ]
        ):
            raise DomainValidationError("Please fill in all fields")

        if command.password != command.confirm_password:
            raise DomainValidationError("Passwords do not match")

        username = Username(command.username)
        if await self._user_repository.get_by_username(username):
            raise UsernameTakenError()

        user = User.register(
            username=username,
            full_name=command.full_name,
            password_hash=self._password_hasher.hash(command.password),
            gender=command.gender,
            avatar_base_url=self._avatar_base_url,
        )
        await self._user_repository.create(user)
        logger.info("Registered user %s (%s)", user.username, user.id)

        return AuthResult(user=user, token=self._session_tokens.issue(user.id))
