"""
Prisma User Repository Implementation.

Mapping:
- Prisma model fields: id, username, full_name, password_hash, gender,
  profile_pic, created_at, updated_at
- Domain entity: User with value objects (UserId, Username)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from prisma.errors import UniqueViolationError

from chat_backend.domain.entities.user import User
from chat_backend.domain.exceptions import UsernameTakenError
from chat_backend.domain.ports.repositories import UserRepository
from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.domain.value_objects.username import Username

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: Any) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            username=Username(record.username),
            full_name=record.full_name,
            password_hash=record.password_hash,
            gender=record.gender,
            profile_pic=record.profile_pic,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_username(self, username: Username) -> Optional[User]:
        record = await self._prisma.user.find_unique(
            where={"username": username.value}
        )
        return self._to_entity(record) if record else None

    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        records = await self._prisma.user.find_many(
            where={"id": {"in": [user_id.value for user_id in user_ids]}}
        )
        return [self._to_entity(record) for record in records]

    async def list_except(self, user_id: UserId) -> list[User]:
        records = await self._prisma.user.find_many(
            where={"NOT": [{"id": user_id.value}]},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def create(self, user: User) -> None:
        try:
            await self._prisma.user.create(
                data={
                    "id": user.id.value,
                    "username": user.username.value,
                    "full_name": user.full_name,
                    "password_hash": user.password_hash,
                    "gender": user.gender,
                    "profile_pic": user.profile_pic,
                    "created_at": user.created_at,
                    "updated_at": user.updated_at,
                }
            )
        except UniqueViolationError as e:
            # Lost a registration race on the unique username index
            logger.info(f"Duplicate username on insert: {user.username}")
            raise UsernameTakenError() from e
