"""
DomainValidationError - Raised when input breaks a business rule.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsernameTakenError(DomainValidationError):
    """Registration attempted with a username that already exists."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)
