"""
ResolveSession Query - turns a session token into the identity it names.

Used by the authentication dependency before every protected endpoint.
"""

from dataclasses import dataclass
from typing import Optional

from chat_backend.application.common.interfaces import Query, QueryHandler
from chat_backend.domain.entities.user import User
from chat_backend.domain.exceptions import AuthenticationError, EntityNotFoundError
from chat_backend.domain.ports import SessionTokenService
from chat_backend.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ResolveSessionQuery(Query[User]):
    token: Optional[str]


class ResolveSessionHandler(QueryHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        session_tokens: SessionTokenService,
    ):
        self._user_repository = user_repository
        self._session_tokens = session_tokens

    async def execute(self, query: ResolveSessionQuery) -> User:
        """
        Raises:
            AuthenticationError: no token, or the token does not verify
            EntityNotFoundError: the token names a user that no longer exists
        """
        if not query.token:
            raise AuthenticationError("Unauthorized - No Token Provided")

        user_id = self._session_tokens.verify(query.token)

        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user
