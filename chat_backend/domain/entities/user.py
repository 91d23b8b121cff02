"""
User Entity - A registered chat identity.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import quote

from chat_backend.domain.value_objects.user_id import UserId
from chat_backend.domain.value_objects.username import Username


@dataclass
class User:
    id: UserId
    username: Username
    full_name: str
    password_hash: str
    gender: str
    profile_pic: str
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def avatar_url(avatar_base_url: str, gender: str, username: str) -> str:
        """Deterministic avatar: the "boy" set for male, "girl" otherwise."""
        kind = "boy" if gender == "male" else "girl"
        return f"{avatar_base_url.rstrip('/')}/{kind}?username={quote(username)}"

    @classmethod
    def register(
        cls,
        username: Username,
        full_name: str,
        password_hash: str,
        gender: str,
        avatar_base_url: str,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId.generate(),
            username=username,
            full_name=full_name,
            password_hash=password_hash,
            gender=gender,
            profile_pic=cls.avatar_url(avatar_base_url, gender, username.value),
            created_at=now,
            updated_at=now,
        )
