"""
Conversation Entity - either a direct chat between two users or a named group.

Direct conversations carry a pair key and no admin. Groups carry a name and
an admin who was a participant when the group was created.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chat_backend.domain.entities.message import Message
from chat_backend.domain.exceptions import AccessDeniedError, DomainValidationError
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.domain.value_objects.message_id import MessageId
from chat_backend.domain.value_objects.pair_key import PairKey
from chat_backend.domain.value_objects.user_id import UserId

MIN_GROUP_MEMBERS = 3


@dataclass
class Conversation:
    id: ConversationId
    is_group_chat: bool
    users: list[UserId]
    created_at: datetime
    updated_at: datetime
    chat_name: Optional[str] = None
    group_admin_id: Optional[UserId] = None
    latest_message_id: Optional[MessageId] = None
    pair_key: Optional[PairKey] = None

    @classmethod
    def start_direct(cls, first: UserId, second: UserId) -> Conversation:
        pair_key = PairKey.of(first, second)
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            is_group_chat=False,
            users=[first, second],
            created_at=now,
            updated_at=now,
            pair_key=pair_key,
        )

    @classmethod
    def create_group(
        cls, chat_name: str, members: list[UserId], admin_id: UserId
    ) -> Conversation:
        """
        Create a group whose admin is appended to the member list.

        Duplicate ids are collapsed before the size check, so the group must
        have at least three distinct participants including the admin.
        """
        users: list[UserId] = []
        for user_id in [*members, admin_id]:
            if user_id not in users:
                users.append(user_id)

        if len(users) < MIN_GROUP_MEMBERS:
            raise DomainValidationError("A group chat must have at least 3 members")

        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            is_group_chat=True,
            users=users,
            created_at=now,
            updated_at=now,
            chat_name=chat_name,
            group_admin_id=admin_id,
        )

    def is_participant(self, user_id: UserId) -> bool:
        return user_id in self.users

    def ensure_participant(self, user_id: UserId) -> None:
        if not self.is_participant(user_id):
            raise AccessDeniedError("You are not a member of this group")

    def ensure_admin(self, user_id: UserId, action: str) -> None:
        if self.group_admin_id != user_id:
            raise AccessDeniedError(f"Only the group admin can {action} members")

    def rename(self, new_name: str) -> None:
        # No admin check here; only membership changes are admin-gated.
        self.chat_name = new_name
        self._touch()

    def add_member(self, user_id: UserId, requested_by: UserId) -> None:
        self.ensure_admin(requested_by, "add")
        # Appended as-is; an existing member can end up listed twice.
        self.users.append(user_id)
        self._touch()

    def remove_member(self, user_id: UserId, requested_by: UserId) -> None:
        self.ensure_admin(requested_by, "remove")
        if user_id == self.group_admin_id:
            raise DomainValidationError("The group admin cannot be removed")
        self.users = [u for u in self.users if u != user_id]
        self._touch()

    def record_message(self, message: Message) -> None:
        """Point the latest-message pointer at a message of this conversation."""
        if message.conversation_id != self.id:
            raise ValueError("Message belongs to another conversation")
        self.latest_message_id = message.id
        self.updated_at = message.created_at

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
