"""
UserId Value Object
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from chat_backend.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("Invalid id")
        try:
            UUID(self.value)
        except (ValueError, TypeError, AttributeError):
            raise DomainValidationError("Invalid id")

    @classmethod
    def generate(cls) -> "UserId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
