"""
Dishka DI Container Setup.

Guidelines:
- PersistenceProvider maps repository ports to Prisma implementations
- ApplicationProvider (providers.py) supplies security services and handlers
- create_container() combines them for the running application

Flow:
  Container → provides → PrismaConversationRepository → to → CreateGroupHandler
                                    ↓
                            uses ConversationRepository interface
"""

import logging
from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma

from chat_backend.config.settings import Config
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chat_backend.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaMessageRepository,
    PrismaUserRepository,
)
from chat_backend.setup.ioc.providers import ApplicationProvider

logger = logging.getLogger(__name__)


class PersistenceProvider(Provider):
    """Prisma client and the repositories built on it."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = connected ONCE, shared across all requests
        - Disconnected when the container is closed on shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (PrismaConversationRepository)
        """
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)


def create_container(settings: type[Config] = Config) -> AsyncContainer:
    return make_async_container(PersistenceProvider(), ApplicationProvider(settings))
