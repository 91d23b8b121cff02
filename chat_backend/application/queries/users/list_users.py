"""List Users Query - every identity except the caller."""

from dataclasses import dataclass

from chat_backend.application.common.interfaces import Query, QueryHandler
from chat_backend.application.dto import UserDTO
from chat_backend.domain.ports.repositories import UserRepository
from chat_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListUsersQuery(Query[list[UserDTO]]):
    requested_by: UserId


class ListUsersHandler(QueryHandler[list[UserDTO]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[UserDTO]:
        users = await self._user_repository.list_except(query.requested_by)
        return [UserDTO.from_entity(user) for user in users]
