"""User DTOs for API responses. Neither carries the password hash."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chat_backend.domain.entities.user import User


class UserSummaryDTO(BaseModel):
    """Profile fields shown next to a message or in a participant list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    full_name: str
    username: str
    profile_pic: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummaryDTO":
        return cls(
            id=user.id.value,
            full_name=user.full_name,
            username=user.username.value,
            profile_pic=user.profile_pic,
        )


class UserDTO(UserSummaryDTO):
    """Public projection of a user."""

    gender: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            full_name=user.full_name,
            username=user.username.value,
            profile_pic=user.profile_pic,
            gender=user.gender,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
