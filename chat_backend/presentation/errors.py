"""
Domain exception → HTTPException mapping shared by the routers.

Routers catch DOMAIN_ERRORS around handler calls and re-raise the result of
to_http_exception(); the app-level handler renders it as {"message": ...}.
"""

from fastapi import HTTPException, status

from chat_backend.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (DomainValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
)

DOMAIN_ERRORS = tuple(error for error, _ in _STATUS_BY_ERROR)


def to_http_exception(exc: Exception) -> HTTPException:
    for error, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error):
            return HTTPException(status_code=status_code, detail=str(exc))
    raise TypeError(f"Not a domain error: {type(exc).__name__}")
