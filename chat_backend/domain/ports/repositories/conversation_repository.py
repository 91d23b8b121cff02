"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: chat_backend/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.pair_key import PairKey
from chat_backend.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def find_direct(self, pair_key: PairKey) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_or_create_direct(self, candidate: Conversation) -> Conversation:
        """
        Return the direct conversation for candidate.pair_key, creating it from
        candidate when none exists. Must be atomic per pair key.
        """
        ...

    @abstractmethod
    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        """Conversations the user takes part in, most recently updated first."""
        ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> None: ...
