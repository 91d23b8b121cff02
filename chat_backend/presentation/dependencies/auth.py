"""
Authentication Dependency for FastAPI.

Guidelines:
- Reads the session token from the session cookie (Config.SESSION_COOKIE_NAME)
- Resolves it to the full User entity through ResolveSessionHandler
- Declared per route with Depends(get_current_user); public routes omit it

Failures:
- no cookie                          → 401 Unauthorized - No Token Provided
- bad signature, expired, bad claims → 401 Unauthorized - Invalid Token
- token names a deleted user         → 404 User not found
"""

import logging

from fastapi import HTTPException, Request, status

from chat_backend.application.queries.users import (
    ResolveSessionHandler,
    ResolveSessionQuery,
)
from chat_backend.config.settings import Config
from chat_backend.domain.entities.user import User
from chat_backend.domain.exceptions import AuthenticationError, EntityNotFoundError

logger = logging.getLogger(__name__)


async def get_current_user(request: Request) -> User:
    """
    Resolve the caller from the session cookie.

    The handler comes from the request-scoped Dishka container that
    setup_dishka attaches to request.state.
    """
    token = request.cookies.get(Config.SESSION_COOKIE_NAME)
    handler = await request.state.dishka_container.get(ResolveSessionHandler)

    try:
        return await handler.execute(ResolveSessionQuery(token=token))
    except AuthenticationError as e:
        logger.debug(f"Rejected session on {request.url.path}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)
        ) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
