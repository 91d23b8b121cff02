"""
ConversationId Value Object - UUID wrapper for conversation identity.
Direct conversations and groups share the same id space.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chat_backend.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class ConversationId:
    value: str

    def __post_init__(self):
        if not self._is_valid_uuid(self.value):
            raise DomainValidationError("Invalid id")

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except (ValueError, TypeError, AttributeError):
            return False

    @classmethod
    def generate(cls) -> "ConversationId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
