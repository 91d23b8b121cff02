"""Message DTO for API responses."""

from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chat_backend.application.dto.user import UserSummaryDTO


class MessageDTO(BaseModel):
    """
    A message with its sender resolved inline.

    `sender` falls back to the bare sender id when the account no longer exists.
    `group` is the id of the owning conversation, direct or group.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    sender: Union[UserSummaryDTO, str]
    content: str
    group: str
    read_by: list[str] = []
    created_at: datetime
    updated_at: datetime
