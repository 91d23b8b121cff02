"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chat_backend.domain.exceptions.entity_not_found import EntityNotFoundError
from chat_backend.domain.exceptions.access_denied import AccessDeniedError
from chat_backend.domain.exceptions.authentication_error import AuthenticationError
from chat_backend.domain.exceptions.validation_error import (
    DomainValidationError,
    UsernameTakenError,
)

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationError",
    "DomainValidationError",
    "UsernameTakenError",
]
