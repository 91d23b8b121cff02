"""Chat (message) commands."""

from .send_direct_message import SendDirectMessageCommand, SendDirectMessageHandler
from .send_group_message import SendGroupMessageCommand, SendGroupMessageHandler

__all__ = [
    "SendDirectMessageCommand",
    "SendDirectMessageHandler",
    "SendGroupMessageCommand",
    "SendGroupMessageHandler",
]
