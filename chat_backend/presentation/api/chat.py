"""
Chat API Router - direct (one-to-one) messaging and the conversation list.

Flow:
  POST /chat/send/{id}  → SendDirectMessageCommand → conversation upsert + append
  GET  /chat/{id}       → GetDirectMessagesQuery   → messages, oldest first
  GET  /chat/conversations → ListConversationsQuery → most recently updated first

/conversations is declared before /{id} so it is not captured as an id.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from chat_backend.application.commands.chat import (
    SendDirectMessageCommand,
    SendDirectMessageHandler,
)
from chat_backend.application.dto import ConversationDTO, MessageDTO
from chat_backend.application.queries.chat import (
    GetDirectMessagesHandler,
    GetDirectMessagesQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from chat_backend.domain.entities.user import User
from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.presentation.dependencies.auth import get_current_user
from chat_backend.presentation.errors import DOMAIN_ERRORS, to_http_exception

logger = getLogger(__name__)


class SendMessageRequest(BaseModel):
    """Request body for sending a message (direct or group)."""

    message: Optional[str] = None


router = APIRouter(prefix="/chat", tags=["chat"])


@router.get(
    "/conversations",
    response_model=list[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: User = Depends(get_current_user),
):
    return await handler.execute(ListConversationsQuery(user_id=current_user.id))


@router.get("/{user_id}", response_model=list[MessageDTO], status_code=status.HTTP_200_OK)
@inject
async def get_direct_messages(
    user_id: str,
    handler: FromDishka[GetDirectMessagesHandler],
    current_user: User = Depends(get_current_user),
):
    """Messages exchanged with the user in the path; [] when none yet."""
    try:
        query = GetDirectMessagesQuery(
            user_id=current_user.id, counterpart_id=UserId(user_id)
        )
        return await handler.execute(query)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e


@router.post(
    "/send/{user_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_direct_message(
    user_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendDirectMessageHandler],
    current_user: User = Depends(get_current_user),
):
    try:
        command = SendDirectMessageCommand(
            sender_id=current_user.id,
            recipient_id=UserId(user_id),
            content=request.message,
        )
        return await handler.execute(command)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
