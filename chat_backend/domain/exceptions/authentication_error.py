"""
AuthenticationError - Raised when a session credential is missing, malformed
or expired.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
