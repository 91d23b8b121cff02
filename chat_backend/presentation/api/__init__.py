"""
API Routers - FastAPI endpoint definitions.
"""

from chat_backend.presentation.api.users import router as users_router
from chat_backend.presentation.api.chat import router as chat_router
from chat_backend.presentation.api.groups import router as groups_router

__all__ = [
    "users_router",
    "chat_router",
    "groups_router",
]
