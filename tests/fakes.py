"""In-memory implementations of the repository ports used by the test app."""

import copy
from typing import Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.entities.message import Message
from chat_backend.domain.entities.user import User
from chat_backend.domain.exceptions import UsernameTakenError
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.pair_key import PairKey
from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.domain.value_objects.username import Username


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[str, User] = {}

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        user = self.users.get(user_id.value)
        return copy.deepcopy(user) if user else None

    async def get_by_username(self, username: Username) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return copy.deepcopy(user)
        return None

    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        wanted = {user_id.value for user_id in user_ids}
        return [copy.deepcopy(u) for key, u in self.users.items() if key in wanted]

    async def list_except(self, user_id: UserId) -> list[User]:
        return [copy.deepcopy(u) for u in self.users.values() if u.id != user_id]

    async def create(self, user: User) -> None:
        if any(u.username == user.username for u in self.users.values()):
            raise UsernameTakenError()
        self.users[user.id.value] = copy.deepcopy(user)


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self):
        self.conversations: dict[str, Conversation] = {}

    async def get_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        conversation = self.conversations.get(conversation_id.value)
        return copy.deepcopy(conversation) if conversation else None

    async def find_direct(self, pair_key: PairKey) -> Optional[Conversation]:
        for conversation in self.conversations.values():
            if conversation.pair_key == pair_key:
                return copy.deepcopy(conversation)
        return None

    async def get_or_create_direct(self, candidate: Conversation) -> Conversation:
        existing = await self.find_direct(candidate.pair_key)
        if existing:
            return existing
        self.conversations[candidate.id.value] = copy.deepcopy(candidate)
        return copy.deepcopy(candidate)

    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        found = [c for c in self.conversations.values() if user_id in c.users]
        found.sort(key=lambda c: c.updated_at, reverse=True)
        return copy.deepcopy(found)

    async def save(self, conversation: Conversation) -> None:
        self.conversations[conversation.id.value] = copy.deepcopy(conversation)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, conversations: InMemoryConversationRepository):
        self.messages: dict[str, Message] = {}
        self._conversations = conversations

    async def get_many(self, message_ids: list[MessageId]) -> list[Message]:
        wanted = {message_id.value for message_id in message_ids}
        return [copy.deepcopy(m) for key, m in self.messages.items() if key in wanted]

    async def get_by_conversation(self, conversation_id: ConversationId) -> list[Message]:
        found = [m for m in self.messages.values() if m.conversation_id == conversation_id]
        found.sort(key=lambda m: m.created_at)
        return copy.deepcopy(found)

    async def append(self, message: Message, conversation: Conversation) -> None:
        stored = self._conversations.conversations[conversation.id.value]
        self.messages[message.id.value] = copy.deepcopy(message)
        stored.latest_message_id = message.id
        stored.updated_at = conversation.updated_at
