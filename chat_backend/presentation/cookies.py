"""Session cookie helpers."""

from fastapi import Response

from chat_backend.config.settings import Config


def _cookie_options() -> dict:
    return {
        "httponly": True,
        "samesite": "strict",
        "secure": not Config.is_development(),
    }


def set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        key=Config.SESSION_COOKIE_NAME,
        value=token,
        max_age=max_age,
        **_cookie_options(),
    )


def clear_session_cookie(response: Response) -> None:
    # delete_cookie emits the same cookie with max-age 0
    response.delete_cookie(key=Config.SESSION_COOKIE_NAME, **_cookie_options())
