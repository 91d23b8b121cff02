import os
import time
import uuid

# Session cookies are only sent over https outside development, and the
# settings are read at import time
os.environ["APP_ENV"] = "development"
os.environ["JWT_SECRET"] = "test-secret-for-the-chat-backend-suite-0123456789"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import jwt
import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from chat_backend.config.settings import TestingConfig
from chat_backend.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chat_backend.fastapi_app import create_fastapi_app
from chat_backend.setup.ioc.providers import ApplicationProvider
from tests.fakes import (
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryUserRepository,
)

JWT_SECRET = os.environ["JWT_SECRET"]


class InMemoryPersistenceProvider(Provider):
    """Serves the same in-memory repositories to every request of one app."""

    def __init__(self, store: "Store"):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._store.users

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return self._store.conversations

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return self._store.messages


class Store:
    def __init__(self):
        self.users = InMemoryUserRepository()
        self.conversations = InMemoryConversationRepository()
        self.messages = InMemoryMessageRepository(self.conversations)


def session_token(user_id: str, expires_in: int = 300, secret: str = JWT_SECRET) -> str:
    now = int(time.time())
    return jwt.encode(
        {"id": user_id, "iat": now, "exp": now + expires_in},
        secret,
        algorithm="HS256",
    )


@pytest.fixture()
def store():
    return Store()


@pytest.fixture()
def app(store):
    """Create a new FastAPI app backed by in-memory repositories for each test."""
    container = make_async_container(
        InMemoryPersistenceProvider(store), ApplicationProvider(TestingConfig)
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (no session)."""
    return TestClient(app)


@pytest.fixture()
def register(app):
    """
    Register a user and return (client, body).

    Each user gets its own TestClient so the session cookies stay apart.
    """

    def _register(username: str, gender: str = "male", password: str = "secret123"):
        user_client = TestClient(app)
        res = user_client.post(
            "/user/register",
            json={
                "fullName": username.title(),
                "username": username,
                "password": password,
                "confirmPassword": password,
                "gender": gender,
            },
        )
        assert res.status_code == 201, res.text
        return user_client, res.json()

    return _register


@pytest.fixture()
def alice(register):
    return register("alice", gender="female")


@pytest.fixture()
def bob(register):
    return register("bob")


@pytest.fixture()
def carol(register):
    return register("carol", gender="female")


@pytest.fixture()
def unknown_id():
    return str(uuid.uuid4())
