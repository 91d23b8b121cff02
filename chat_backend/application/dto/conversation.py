"""Conversation DTO for API responses."""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chat_backend.application.dto.message import MessageDTO
from chat_backend.application.dto.user import UserDTO


class ConversationDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    chat_name: Optional[str] = None
    is_group_chat: bool
    users: list[Union[UserDTO, str]]
    group_admin: Optional[Union[UserDTO, str]] = None
    latest_message: Optional[MessageDTO] = None
    created_at: datetime
    updated_at: datetime
