"""
MessageId Value Object
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chat_backend.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class MessageId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (ValueError, TypeError, AttributeError):
            raise DomainValidationError("Invalid id")

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
