"""
Users API Router - registration, login, logout and the user directory.

Register and login answer with the public projection of the user and set
the session cookie; logout always succeeds and clears it.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from chat_backend.application.commands.users import (
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from chat_backend.application.dto import UserDTO
from chat_backend.application.queries.users import ListUsersHandler, ListUsersQuery
from chat_backend.domain.entities.user import User
from chat_backend.domain.ports import SessionTokenService
from chat_backend.presentation.cookies import clear_session_cookie, set_session_cookie
from chat_backend.presentation.dependencies.auth import get_current_user
from chat_backend.presentation.errors import DOMAIN_ERRORS, to_http_exception

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class RegisterRequest(BaseModel):
    """
    Request body for registration.

    Every field is optional at the schema level so that a missing field is
    reported as "Please fill in all fields" rather than a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    gender: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LogoutResponse(BaseModel):
    message: str


# Public projection: {_id, fullName, username, profilePic, gender}
SESSION_USER_EXCLUDE = {"created_at", "updated_at"}


# ==================== ROUTER ====================

router = APIRouter(prefix="/user", tags=["users"])


# ==================== ENDPOINTS ====================


@router.post(
    "/register",
    response_model=UserDTO,
    response_model_exclude=SESSION_USER_EXCLUDE,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: RegisterRequest,
    response: Response,
    handler: FromDishka[RegisterUserHandler],
    session_tokens: FromDishka[SessionTokenService],
):
    """Create an identity and start a session for it."""
    try:
        result = await handler.execute(
            RegisterUserCommand(
                full_name=request.full_name,
                username=request.username,
                password=request.password,
                confirm_password=request.confirm_password,
                gender=request.gender,
            )
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e

    set_session_cookie(response, result.token, session_tokens.max_age_seconds)
    return UserDTO.from_entity(result.user)


@router.post(
    "/login",
    response_model=UserDTO,
    response_model_exclude=SESSION_USER_EXCLUDE,
    status_code=status.HTTP_200_OK,
)
@inject
async def login(
    request: LoginRequest,
    response: Response,
    handler: FromDishka[LoginUserHandler],
    session_tokens: FromDishka[SessionTokenService],
):
    try:
        result = await handler.execute(
            LoginUserCommand(username=request.username, password=request.password)
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e

    set_session_cookie(response, result.token, session_tokens.max_age_seconds)
    return UserDTO.from_entity(result.user)


@router.post("/logout", response_model=LogoutResponse, status_code=status.HTTP_200_OK)
async def logout(response: Response):
    clear_session_cookie(response)
    return LogoutResponse(message="Logged out successfully")


@router.get("/all", response_model=list[UserDTO], status_code=status.HTTP_200_OK)
@inject
async def list_users(
    handler: FromDishka[ListUsersHandler],
    current_user: User = Depends(get_current_user),
):
    """Every registered user except the caller."""
    return await handler.execute(ListUsersQuery(requested_by=current_user.id))
