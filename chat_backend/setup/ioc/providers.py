"""
Application dependency provider (everything except persistence).

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Repositories are NOT registered here. They come from PersistenceProvider
(setup/ioc/container.py) in production and from an in-memory provider in
tests, so this module never imports the Prisma client.
"""

from dishka import Provider, Scope, provide

from chat_backend.application.commands.chat import (
    SendDirectMessageHandler,
    SendGroupMessageHandler,
)
from chat_backend.application.commands.groups import (
    AddMemberHandler,
    CreateGroupHandler,
    RemoveMemberHandler,
    RenameGroupHandler,
)
from chat_backend.application.commands.users import (
    LoginUserHandler,
    RegisterUserHandler,
)
from chat_backend.application.queries.chat import (
    GetDirectMessagesHandler,
    GetGroupMessagesHandler,
    ListConversationsHandler,
)
from chat_backend.application.queries.users import (
    ListUsersHandler,
    ResolveSessionHandler,
)
from chat_backend.application.services import ChatViewAssembler
from chat_backend.config.settings import Config
from chat_backend.domain.ports import PasswordHasher, SessionTokenService
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chat_backend.infrastructure.security import (
    JwtSessionTokenService,
    Pbkdf2PasswordHasher,
)


class ApplicationProvider(Provider):
    """
    Registers security services, the view assembler and all handlers.

    Args:
        settings: Config class to read secrets and tunables from
    """

    def __init__(self, settings: type[Config] = Config):
        super().__init__()
        self._settings = settings

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return Pbkdf2PasswordHasher(iterations=self._settings.PASSWORD_HASH_ITERATIONS)

    @provide(scope=Scope.APP)
    def get_session_tokens(self) -> SessionTokenService:
        """
        Provide the JWT session token service (app-scoped).

        Fails on first use when JWT_SECRET is unset.
        """
        return JwtSessionTokenService(
            secret=self._settings.JWT_SECRET,
            expires_days=self._settings.JWT_EXPIRES_DAYS,
            algorithm=self._settings.JWT_ALGORITHM,
        )

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_view_assembler(
        self,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ) -> ChatViewAssembler:
        return ChatViewAssembler(user_repository, message_repository)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        session_tokens: SessionTokenService,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(
            user_repository=user_repository,
            password_hasher=password_hasher,
            session_tokens=session_tokens,
            avatar_base_url=self._settings.AVATAR_BASE_URL,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        session_tokens: SessionTokenService,
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository, password_hasher, session_tokens)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(self, user_repository: UserRepository) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_resolve_session_handler(
        self,
        user_repository: UserRepository,
        session_tokens: SessionTokenService,
    ) -> ResolveSessionHandler:
        return ResolveSessionHandler(user_repository, session_tokens)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_direct_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        assembler: ChatViewAssembler,
    ) -> SendDirectMessageHandler:
        return SendDirectMessageHandler(
            conversation_repository=conversation_repository,
            message_repository=message_repository,
            user_repository=user_repository,
            assembler=assembler,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_group_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        assembler: ChatViewAssembler,
    ) -> SendGroupMessageHandler:
        return SendGroupMessageHandler(
            conversation_repository=conversation_repository,
            message_repository=message_repository,
            assembler=assembler,
        )

    @provide(scope=Scope.REQUEST)
    def get_direct_messages_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        assembler: ChatViewAssembler,
    ) -> GetDirectMessagesHandler:
        return GetDirectMessagesHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            assembler=assembler,
        )

    @provide(scope=Scope.REQUEST)
    def get_group_messages_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        assembler: ChatViewAssembler,
    ) -> GetGroupMessagesHandler:
        return GetGroupMessagesHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            assembler=assembler,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository, assembler)

    # ==================== GROUP HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_group_handler(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ) -> CreateGroupHandler:
        return CreateGroupHandler(conversation_repository, assembler)

    @provide(scope=Scope.REQUEST)
    def get_rename_group_handler(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ) -> RenameGroupHandler:
        return RenameGroupHandler(conversation_repository, assembler)

    @provide(scope=Scope.REQUEST)
    def get_add_member_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        assembler: ChatViewAssembler,
    ) -> AddMemberHandler:
        return AddMemberHandler(conversation_repository, user_repository, assembler)

    @provide(scope=Scope.REQUEST)
    def get_remove_member_handler(
        self,
        conversation_repository: ConversationRepository,
        assembler: ChatViewAssembler,
    ) -> RemoveMemberHandler:
        return RemoveMemberHandler(conversation_repository, assembler)
