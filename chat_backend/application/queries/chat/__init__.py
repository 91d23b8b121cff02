"""Chat-related queries."""

from chat_backend.application.queries.chat.get_direct_messages import (
    GetDirectMessagesQuery,
    GetDirectMessagesHandler,
)
from chat_backend.application.queries.chat.get_group_messages import (
    GetGroupMessagesQuery,
    GetGroupMessagesHandler,
)
from chat_backend.application.queries.chat.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "GetDirectMessagesQuery",
    "GetDirectMessagesHandler",
    "GetGroupMessagesQuery",
    "GetGroupMessagesHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
