"""User queries."""

from chat_backend.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)
from chat_backend.application.queries.users.resolve_session import (
    ResolveSessionQuery,
    ResolveSessionHandler,
)

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
    "ResolveSessionQuery",
    "ResolveSessionHandler",
]
