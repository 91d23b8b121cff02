"""
Groups API Router - group lifecycle and group messaging.

Guidelines:
- Thin layer: builds Commands/Queries from the request, maps domain errors
- Membership and admin rules live in the Conversation entity
- Request fields are optional at schema level; missing values are reported
  by the handlers with their own messages
"""

import json
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from chat_backend.application.commands.chat import (
    SendGroupMessageCommand,
    SendGroupMessageHandler,
)
from chat_backend.application.commands.groups import (
    AddMemberCommand,
    AddMemberHandler,
    CreateGroupCommand,
    CreateGroupHandler,
    RemoveMemberCommand,
    RemoveMemberHandler,
    RenameGroupCommand,
    RenameGroupHandler,
)
from chat_backend.application.dto import ConversationDTO, MessageDTO
from chat_backend.application.queries.chat import (
    GetGroupMessagesHandler,
    GetGroupMessagesQuery,
)
from chat_backend.domain.entities.user import User
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.presentation.api.chat import SendMessageRequest
from chat_backend.presentation.dependencies.auth import get_current_user
from chat_backend.presentation.errors import DOMAIN_ERRORS, to_http_exception

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateGroupRequest(_CamelModel):
    """
    Request body for creating a group.

    `users` may be a list of ids or a JSON-encoded string of that list.
    """

    chat_name: Optional[str] = None
    users: Optional[list[str]] = None

    @field_validator("users", mode="before")
    @classmethod
    def parse_encoded_users(cls, value):
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError("users must be a list of user ids") from e
        return value


class RenameGroupRequest(_CamelModel):
    group_id: Optional[str] = None
    chat_name: Optional[str] = None


class MembershipRequest(_CamelModel):
    group_id: Optional[str] = None
    user_id: Optional[str] = None


def _optional_group_id(value: Optional[str]) -> Optional[ConversationId]:
    return ConversationId(value) if value else None


def _optional_user_id(value: Optional[str]) -> Optional[UserId]:
    return UserId(value) if value else None


# ==================== ROUTER ====================

router = APIRouter(prefix="/group", tags=["groups"])


# ==================== ENDPOINTS ====================


@router.post(
    "/create",
    response_model=ConversationDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_group(
    request: CreateGroupRequest,
    handler: FromDishka[CreateGroupHandler],
    current_user: User = Depends(get_current_user),
):
    """Create a group; the caller joins it and becomes its admin."""
    try:
        members = (
            [UserId(user_id) for user_id in request.users]
            if request.users is not None
            else None
        )
        command = CreateGroupCommand(
            chat_name=request.chat_name,
            members=members,
            requested_by=current_user.id,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/rename", response_model=ConversationDTO, status_code=status.HTTP_200_OK)
@inject
async def rename_group(
    request: RenameGroupRequest,
    handler: FromDishka[RenameGroupHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        command = RenameGroupCommand(
            group_id=_optional_group_id(request.group_id),
            chat_name=request.chat_name,
            requested_by=current_user.id,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/add", response_model=ConversationDTO, status_code=status.HTTP_200_OK)
@inject
async def add_member(
    request: MembershipRequest,
    handler: FromDishka[AddMemberHandler],
    current_user: User = Depends(get_current_user),
):
    """Admin only."""
    try:
        command = AddMemberCommand(
            group_id=_optional_group_id(request.group_id),
            user_id=_optional_user_id(request.user_id),
            requested_by=current_user.id,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.put("/remove", response_model=ConversationDTO, status_code=status.HTTP_200_OK)
@inject
async def remove_member(
    request: MembershipRequest,
    handler: FromDishka[RemoveMemberHandler],
    current_user: User = Depends(get_current_user),
):
    """Admin only."""
    try:
        command = RemoveMemberCommand(
            group_id=_optional_group_id(request.group_id),
            user_id=_optional_user_id(request.user_id),
            requested_by=current_user.id,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.post(
    "/message/{group_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_group_message(
    group_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendGroupMessageHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        command = SendGroupMessageCommand(
            group_id=ConversationId(group_id),
            sender_id=current_user.id,
            content=request.message,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.get(
    "/messages/{group_id}",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_group_messages(
    group_id: str,
    handler: FromDishka[GetGroupMessagesHandler],
    current_user: User = Depends(get_current_user),
):
    """Members only; oldest first."""
    try:
        query = GetGroupMessagesQuery(
            group_id=ConversationId(group_id), user_id=current_user.id
        )
        return await handler.execute(query)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
