"""User commands."""

from .register_user import AuthResult, RegisterUserCommand, RegisterUserHandler
from .login_user import LoginUserCommand, LoginUserHandler

__all__ = [
    "AuthResult",
    "RegisterUserCommand",
    "RegisterUserHandler",
    "LoginUserCommand",
    "LoginUserHandler",
]
