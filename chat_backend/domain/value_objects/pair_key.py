"""
PairKey Value Object - canonical key of an unordered pair of users.

The two ids are sorted and joined with ":", so (a, b) and (b, a) produce the
same key. Storage keeps a unique index on it to allow at most one direct
conversation per pair.
"""

from dataclasses import dataclass

from chat_backend.domain.exceptions.validation_error import DomainValidationError
from chat_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class PairKey:
    value: str

    @classmethod
    def of(cls, first: UserId, second: UserId) -> "PairKey":
        if first == second:
            raise DomainValidationError("Cannot start a conversation with yourself")
        low, high = sorted([first.value, second.value])
        return cls(f"{low}:{high}")

    def __str__(self) -> str:
        return self.value
