"""
User Repository Port - Interface for user persistence.
Implementation: chat_backend/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_backend.domain.entities.user import User
from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.domain.value_objects.username import Username


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: Username) -> Optional[User]: ...

    @abstractmethod
    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        """Return the users that exist among user_ids, in no particular order."""
        ...

    @abstractmethod
    async def list_except(self, user_id: UserId) -> list[User]: ...

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persist a new user.

        Raises:
            UsernameTakenError: if the username is already registered
        """
        ...
