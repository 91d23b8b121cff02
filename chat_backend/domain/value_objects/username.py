"""
Username Value Object - the globally unique login handle.
"""

from dataclasses import dataclass

from chat_backend.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise DomainValidationError("Username cannot be empty")

    def __str__(self) -> str:
        return self.value
